"""
하드코딩 상수 - 변경될 일이 거의 없는 고정값

중요: 경로는 반드시 pathlib.Path 사용 (Windows/Linux 크로스 플랫폼)
"""

from pathlib import Path


# 프로젝트 루트 (이 파일 기준 2단계 상위: core/constants.py → 프로젝트 루트)
PROJECT_ROOT: Path = Path(__file__).resolve().parent.parent


class IndependentReserveEndpoints:
    """Independent Reserve API 엔드포인트 (고정값)

    공식 문서: https://www.independentreserve.com/features/api
    """

    PUBLIC_URL: str = "https://api.independentreserve.com/Public"
    PRIVATE_URL: str = "https://api.independentreserve.com/Private"


class Defaults:
    """기본값 상수"""

    PRIMARY_CURRENCY: str = "Xbt"
    SECONDARY_CURRENCY: str = "Aud"

    # Private API 페이지 조회 크기 (서명 메시지에 포함됨)
    PAGE_SIZE: int = 25

    HTTP_TIMEOUT_SEC: float = 30.0
    HTTP_MAX_RETRIES: int = 3

    # Spread bot
    SPREAD_VOLUME: str = "1"
    SAMPLE_PERIOD_SEC: int = 5
    REPORT_PERIOD_SEC: int = 3600
    REPORT_FILE: str = "spread-bot.log"


class DecimalPlaces:
    """표시용 소수점 자리수 (계산에는 사용하지 않음)"""

    FIAT: int = 2
    CRYPTO: int = 8
    PERCENT: int = 4


class Paths:
    """프로젝트 경로 상수 (pathlib 사용 - OS 독립적)"""

    # 디렉토리
    CONFIG_DIR: Path = PROJECT_ROOT / "config"
    LOGS_DIR: Path = PROJECT_ROOT / "logs"
    BOT_LOGS_DIR: Path = LOGS_DIR / "bot"

    # 설정 파일
    SECRETS_FILE: Path = CONFIG_DIR / "secrets.yaml"
