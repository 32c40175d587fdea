"""
core/constants.py 테스트

모든 경로가 pathlib.Path 타입이고, 상수가 정상적으로 접근 가능한지 확인
"""

from pathlib import Path

from core.constants import (
    PROJECT_ROOT,
    DecimalPlaces,
    Defaults,
    IndependentReserveEndpoints,
    Paths,
)


class TestProjectRoot:
    """PROJECT_ROOT 테스트"""

    def test_project_root_is_path(self) -> None:
        """PROJECT_ROOT가 Path 타입인지 확인"""
        assert isinstance(PROJECT_ROOT, Path)

    def test_project_root_is_absolute(self) -> None:
        """PROJECT_ROOT가 절대 경로인지 확인"""
        assert PROJECT_ROOT.is_absolute()

    def test_project_root_contains_core_directory(self) -> None:
        """PROJECT_ROOT에 core 디렉토리가 있는지 확인"""
        assert (PROJECT_ROOT / "core").exists()


class TestIndependentReserveEndpoints:
    """IndependentReserveEndpoints 테스트"""

    def test_public_url(self) -> None:
        assert IndependentReserveEndpoints.PUBLIC_URL == "https://api.independentreserve.com/Public"

    def test_private_url(self) -> None:
        assert IndependentReserveEndpoints.PRIVATE_URL == "https://api.independentreserve.com/Private"


class TestDefaults:
    """Defaults 테스트"""

    def test_currency_pair(self) -> None:
        """기본 통화쌍 Xbt/Aud"""
        assert Defaults.PRIMARY_CURRENCY == "Xbt"
        assert Defaults.SECONDARY_CURRENCY == "Aud"

    def test_page_size(self) -> None:
        assert Defaults.PAGE_SIZE == 25

    def test_decimal_places(self) -> None:
        assert DecimalPlaces.FIAT == 2
        assert DecimalPlaces.CRYPTO == 8
        assert DecimalPlaces.PERCENT == 4


class TestPaths:
    """Paths 테스트"""

    def test_all_paths_are_path_type(self) -> None:
        """모든 경로가 Path 타입인지 확인"""
        for path in (Paths.CONFIG_DIR, Paths.LOGS_DIR, Paths.BOT_LOGS_DIR, Paths.SECRETS_FILE):
            assert isinstance(path, Path)

    def test_secrets_file_location(self) -> None:
        """secrets.yaml은 config 디렉토리 아래"""
        assert Paths.SECRETS_FILE == PROJECT_ROOT / "config" / "secrets.yaml"
