"""
설정 로더

secrets.yaml 로드 및 Independent Reserve 인증 정보, Spread bot 설정 생성
"""

from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Any

import yaml

from core.constants import Defaults, Paths
from core.types import Credential


@dataclass(frozen=True)
class SpreadBotConfig:
    """Spread bot 설정

    Attributes:
        volume: 스프레드 계산 기준 수량 (base 통화)
        sample_period_secs: 호가창 조회 주기 (초)
        report_period_secs: 리포트 파일 기록 주기 (초)
        report_file: 리포트 파일 경로
        primary_currency: base 통화 코드
        secondary_currency: quote 통화 코드
    """

    volume: Decimal = Decimal(Defaults.SPREAD_VOLUME)
    sample_period_secs: int = Defaults.SAMPLE_PERIOD_SEC
    report_period_secs: int = Defaults.REPORT_PERIOD_SEC
    report_file: Path = Path(Defaults.REPORT_FILE)
    primary_currency: str = Defaults.PRIMARY_CURRENCY
    secondary_currency: str = Defaults.SECONDARY_CURRENCY


@dataclass(frozen=True)
class Secrets:
    """보안 설정 (secrets.yaml에서 로드)

    불변 데이터 구조로 설정 변경 방지
    """

    read_only: Credential
    spread_bot: SpreadBotConfig = field(default_factory=SpreadBotConfig)


class SecretsLoadError(Exception):
    """Secrets 로드 실패 예외"""

    pass


def _parse_spread_bot(data: dict[str, Any] | None) -> SpreadBotConfig:
    """spread_bot 섹션 파싱 (모든 키 선택)

    Raises:
        ValueError: 매핑이 아니거나 숫자 설정이 잘못된 경우
    """
    if data is None:
        return SpreadBotConfig()
    if not isinstance(data, dict):
        raise ValueError(f"spread_bot 섹션은 매핑이어야 합니다: {type(data).__name__}")

    defaults = SpreadBotConfig()

    try:
        volume = Decimal(str(data.get("volume", defaults.volume)))
    except InvalidOperation as e:
        raise ValueError(f"유효하지 않은 volume입니다: {data.get('volume')!r}") from e
    if not volume.is_finite() or volume <= 0:
        raise ValueError(f"volume은 0보다 커야 합니다: {volume}")

    try:
        sample_period = int(data.get("sample_period_secs", defaults.sample_period_secs))
        report_period = int(data.get("report_period_secs", defaults.report_period_secs))
    except (TypeError, ValueError) as e:
        raise ValueError(f"유효하지 않은 주기 설정입니다: {e}") from e
    if sample_period <= 0 or report_period <= 0:
        raise ValueError("sample_period_secs, report_period_secs는 0보다 커야 합니다")

    return SpreadBotConfig(
        volume=volume,
        sample_period_secs=sample_period,
        report_period_secs=report_period,
        report_file=Path(data.get("report_file", defaults.report_file)),
        primary_currency=str(data.get("primary_currency", defaults.primary_currency)),
        secondary_currency=str(data.get("secondary_currency", defaults.secondary_currency)),
    )


def load_secrets(path: Path | None = None) -> Secrets:
    """secrets.yaml 파일 로드

    Args:
        path: secrets.yaml 경로 (None이면 기본 경로 사용)

    Returns:
        Secrets 인스턴스

    Raises:
        SecretsLoadError: 파일이 없거나 형식이 잘못된 경우
        ValueError: spread_bot 설정값이 잘못된 경우
    """
    if path is None:
        path = Paths.SECRETS_FILE

    if not path.exists():
        raise SecretsLoadError(f"secrets.yaml 파일을 찾을 수 없습니다: {path}")

    try:
        content = path.read_text(encoding="utf-8")
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise SecretsLoadError(f"secrets.yaml 파싱 실패: {e}") from e

    if data is None:
        raise SecretsLoadError("secrets.yaml이 비어 있습니다")
    if not isinstance(data, dict):
        raise SecretsLoadError("secrets.yaml 최상위는 매핑이어야 합니다")

    exchange_config = data.get("independent_reserve")
    if not exchange_config:
        raise SecretsLoadError("secrets.yaml에 'independent_reserve' 설정이 없습니다")
    if not isinstance(exchange_config, dict):
        raise SecretsLoadError("independent_reserve 섹션은 매핑이어야 합니다")

    read_only = exchange_config.get("read_only")
    if not read_only:
        raise SecretsLoadError(
            "secrets.yaml의 independent_reserve 섹션에 'read_only'가 없습니다"
        )
    if not isinstance(read_only, dict):
        raise SecretsLoadError("read_only 섹션은 매핑이어야 합니다")

    api_key = read_only.get("api_key")
    api_secret = read_only.get("api_secret")

    if not api_key:
        raise SecretsLoadError("secrets.yaml의 read_only 섹션에 'api_key'가 없습니다")
    if not api_secret:
        raise SecretsLoadError("secrets.yaml의 read_only 섹션에 'api_secret'가 없습니다")

    return Secrets(
        read_only=Credential.from_strings(str(api_key), str(api_secret)),
        spread_bot=_parse_spread_bot(data.get("spread_bot")),
    )


def dump_config(secrets: Secrets) -> str:
    """설정을 YAML 문자열로 변환 (시크릿 마스킹)"""
    bot = secrets.spread_bot
    data = {
        "independent_reserve": {
            "read_only": {
                "api_key": secrets.read_only.key,
                "api_secret": "***",
            },
        },
        "spread_bot": {
            "volume": str(bot.volume),
            "sample_period_secs": bot.sample_period_secs,
            "report_period_secs": bot.report_period_secs,
            "report_file": str(bot.report_file),
            "primary_currency": bot.primary_currency,
            "secondary_currency": bot.secondary_currency,
        },
    }
    return yaml.safe_dump(data, sort_keys=False, allow_unicode=True)


class Settings:
    """애플리케이션 설정 (싱글턴 패턴)

    secrets.yaml을 로드하고 관련 설정을 제공
    """

    _instance: "Settings | None" = None
    _secrets: Secrets | None = None

    def __new__(cls, secrets_path: Path | None = None) -> "Settings":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self, secrets_path: Path | None = None) -> None:
        if self._secrets is None:
            type(self)._secrets = load_secrets(secrets_path)

    @property
    def secrets(self) -> Secrets:
        assert self._secrets is not None
        return self._secrets

    @property
    def read_only(self) -> Credential:
        """읽기 전용 API 인증 정보"""
        return self.secrets.read_only

    @property
    def spread_bot(self) -> SpreadBotConfig:
        """Spread bot 설정"""
        return self.secrets.spread_bot

    @classmethod
    def reset(cls) -> None:
        """싱글턴 인스턴스 초기화 (테스트용)"""
        cls._instance = None
        cls._secrets = None


def get_settings(secrets_path: Path | None = None) -> Settings:
    """Settings 인스턴스 반환

    Args:
        secrets_path: secrets.yaml 경로 (None이면 기본 경로 사용)

    Returns:
        Settings 싱글턴 인스턴스
    """
    return Settings(secrets_path)
