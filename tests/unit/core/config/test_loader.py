"""
core/config/loader.py 테스트

secrets.yaml 로드, 검증, spread_bot 설정, 마스킹 출력 테스트
"""

from decimal import Decimal
from pathlib import Path

import pytest
import yaml

from core.config.loader import (
    Secrets,
    SecretsLoadError,
    Settings,
    SpreadBotConfig,
    dump_config,
    get_settings,
    load_secrets,
)
from core.constants import Defaults
from core.types import Credential


class TestSpreadBotConfig:
    """SpreadBotConfig 기본값 테스트"""

    def test_defaults(self) -> None:
        """기본값 확인"""
        config = SpreadBotConfig()

        assert config.volume == Decimal("1")
        assert config.sample_period_secs == 5
        assert config.report_period_secs == 3600
        assert config.report_file == Path("spread-bot.log")
        assert config.primary_currency == Defaults.PRIMARY_CURRENCY
        assert config.secondary_currency == Defaults.SECONDARY_CURRENCY

    def test_frozen(self) -> None:
        """불변성 확인"""
        config = SpreadBotConfig()

        with pytest.raises(AttributeError):
            config.volume = Decimal("2")  # type: ignore


class TestLoadSecrets:
    """load_secrets 함수 테스트"""

    def test_load_minimal(self, temp_secrets_file: Path) -> None:
        """필수 항목만 있는 파일"""
        secrets = load_secrets(temp_secrets_file)

        assert secrets.read_only.key == "test_api_key_abcde"
        assert secrets.read_only.secret == b"test_api_secret_fghij"
        assert secrets.spread_bot == SpreadBotConfig()

    def test_load_with_spread_bot(self, temp_secrets_file_with_bot: Path) -> None:
        """spread_bot 섹션 반영"""
        secrets = load_secrets(temp_secrets_file_with_bot)

        bot = secrets.spread_bot
        assert bot.volume == Decimal("0.5")
        assert bot.sample_period_secs == 10
        assert bot.report_period_secs == 600
        assert bot.report_file == Path("reports/spread.log")
        assert bot.primary_currency == "Eth"
        assert bot.secondary_currency == "Usd"

    def test_file_not_found(self, temp_dir: Path) -> None:
        """파일 없음"""
        with pytest.raises(SecretsLoadError, match="찾을 수 없습니다"):
            load_secrets(temp_dir / "nonexistent.yaml")

    def test_invalid_yaml(self, temp_dir: Path) -> None:
        """YAML 파싱 실패"""
        path = temp_dir / "invalid.yaml"
        path.write_text("independent_reserve: [unclosed", encoding="utf-8")

        with pytest.raises(SecretsLoadError, match="파싱 실패"):
            load_secrets(path)

    def test_empty_file(self, temp_dir: Path) -> None:
        """빈 파일"""
        path = temp_dir / "empty.yaml"
        path.write_text("", encoding="utf-8")

        with pytest.raises(SecretsLoadError, match="비어 있습니다"):
            load_secrets(path)

    def test_top_level_not_mapping(self, temp_dir: Path) -> None:
        """최상위가 리스트"""
        path = temp_dir / "list.yaml"
        path.write_text("- a\n- b\n", encoding="utf-8")

        with pytest.raises(SecretsLoadError, match="매핑"):
            load_secrets(path)

    def test_missing_exchange_section(self, temp_dir: Path) -> None:
        """independent_reserve 섹션 없음"""
        path = temp_dir / "no_exchange.yaml"
        path.write_text("spread_bot:\n  volume: 1\n", encoding="utf-8")

        with pytest.raises(SecretsLoadError, match="independent_reserve"):
            load_secrets(path)

    def test_missing_read_only(self, temp_dir: Path) -> None:
        """read_only 섹션 없음"""
        path = temp_dir / "no_read_only.yaml"
        path.write_text("independent_reserve:\n  other: 1\n", encoding="utf-8")

        with pytest.raises(SecretsLoadError, match="read_only"):
            load_secrets(path)

    def test_missing_api_key(self, temp_dir: Path) -> None:
        """api_key 누락"""
        path = temp_dir / "no_key.yaml"
        path.write_text(
            "independent_reserve:\n  read_only:\n    api_secret: s\n",
            encoding="utf-8",
        )

        with pytest.raises(SecretsLoadError, match="api_key"):
            load_secrets(path)

    def test_missing_api_secret(self, temp_dir: Path) -> None:
        """api_secret 누락"""
        path = temp_dir / "no_secret.yaml"
        path.write_text(
            "independent_reserve:\n  read_only:\n    api_key: k\n",
            encoding="utf-8",
        )

        with pytest.raises(SecretsLoadError, match="api_secret"):
            load_secrets(path)

    @pytest.mark.parametrize(
        "bot_section",
        [
            "  volume: 0\n",
            "  volume: -1\n",
            "  volume: abc\n",
            "  sample_period_secs: 0\n",
            "  report_period_secs: -10\n",
        ],
    )
    def test_invalid_spread_bot_values(self, temp_dir: Path, bot_section: str) -> None:
        """spread_bot 숫자 설정 검증"""
        path = temp_dir / "bad_bot.yaml"
        path.write_text(
            "independent_reserve:\n  read_only:\n    api_key: k\n    api_secret: s\n"
            "spread_bot:\n" + bot_section,
            encoding="utf-8",
        )

        with pytest.raises(ValueError):
            load_secrets(path)

    @pytest.mark.parametrize(
        "content",
        [
            "independent_reserve: x\n",
            "independent_reserve:\n  - 1\n",
            "independent_reserve:\n  read_only: x\n",
            "independent_reserve:\n  read_only:\n    - 1\n",
        ],
    )
    def test_section_not_mapping(self, temp_dir: Path, content: str) -> None:
        """independent_reserve/read_only가 매핑이 아니면 SecretsLoadError"""
        path = temp_dir / "bad_section.yaml"
        path.write_text(content, encoding="utf-8")

        with pytest.raises(SecretsLoadError, match="매핑"):
            load_secrets(path)

    @pytest.mark.parametrize(
        "bot_section",
        [" x\n", "\n  - 1\n", "\n  sample_period_secs: [1]\n", "\n  report_period_secs: abc\n"],
    )
    def test_spread_bot_wrong_type(self, temp_dir: Path, bot_section: str) -> None:
        """spread_bot 타입 오류는 ValueError"""
        path = temp_dir / "bad_bot_type.yaml"
        path.write_text(
            "independent_reserve:\n  read_only:\n    api_key: k\n    api_secret: s\n"
            "spread_bot:" + bot_section,
            encoding="utf-8",
        )

        with pytest.raises(ValueError):
            load_secrets(path)

    def test_empty_spread_bot_uses_defaults(self, temp_dir: Path) -> None:
        """빈 spread_bot 섹션은 기본값"""
        path = temp_dir / "empty_bot.yaml"
        path.write_text(
            "independent_reserve:\n  read_only:\n    api_key: k\n    api_secret: s\n"
            "spread_bot:\n",
            encoding="utf-8",
        )

        assert load_secrets(path).spread_bot == SpreadBotConfig()


class TestDumpConfig:
    """dump_config 테스트"""

    def test_secret_masked(self, temp_secrets_file_with_bot: Path) -> None:
        """시크릿은 출력하지 않음"""
        secrets = load_secrets(temp_secrets_file_with_bot)

        dumped = dump_config(secrets)

        assert "test_api_secret_fghij" not in dumped
        data = yaml.safe_load(dumped)
        assert data["independent_reserve"]["read_only"]["api_key"] == "test_api_key_abcde"
        assert data["independent_reserve"]["read_only"]["api_secret"] == "***"
        assert data["spread_bot"]["volume"] == "0.5"
        assert data["spread_bot"]["primary_currency"] == "Eth"

    def test_secrets_repr_hides_secret(self) -> None:
        """Secrets repr에도 시크릿 미포함"""
        secrets = Secrets(read_only=Credential.from_strings("key", "hidden_value"))

        assert "hidden_value" not in repr(secrets)


class TestSettings:
    """Settings 싱글턴 테스트"""

    def test_singleton(self, temp_secrets_file: Path) -> None:
        """싱글턴 패턴 확인"""
        settings1 = Settings(temp_secrets_file)
        settings2 = Settings(temp_secrets_file)

        assert settings1 is settings2

    def test_properties(self, temp_secrets_file_with_bot: Path) -> None:
        """속성 접근"""
        settings = get_settings(temp_secrets_file_with_bot)

        assert settings.read_only.key == "test_api_key_abcde"
        assert settings.spread_bot.volume == Decimal("0.5")

    def test_reset(self, temp_secrets_file: Path) -> None:
        """리셋 후 새 인스턴스"""
        settings1 = Settings(temp_secrets_file)
        Settings.reset()
        settings2 = Settings(temp_secrets_file)

        assert settings1 is not settings2
