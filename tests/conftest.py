"""
pytest 공통 fixture 정의

설정 파일, 호가창, 인증 정보 fixture
"""

import tempfile
from decimal import Decimal
from pathlib import Path

import pytest

from core.config.loader import Settings
from core.domain.orderbook import OrderBook
from core.types import Credential


@pytest.fixture
def temp_dir() -> Path:
    """OS 독립적인 임시 디렉토리 생성"""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture(autouse=True)
def reset_settings():
    """테스트 간 Settings 싱글턴 격리"""
    Settings.reset()
    yield
    Settings.reset()


@pytest.fixture
def temp_secrets_file(temp_dir: Path) -> Path:
    """테스트용 secrets.yaml 파일 생성 (필수 항목만)"""
    secrets_content = """# 테스트용 secrets.yaml
independent_reserve:
  read_only:
    api_key: "test_api_key_abcde"
    api_secret: "test_api_secret_fghij"
"""
    secrets_path = temp_dir / "secrets.yaml"
    secrets_path.write_text(secrets_content, encoding="utf-8")
    return secrets_path


@pytest.fixture
def temp_secrets_file_with_bot(temp_dir: Path) -> Path:
    """테스트용 secrets.yaml 파일 생성 (spread_bot 섹션 포함)"""
    secrets_content = """independent_reserve:
  read_only:
    api_key: "test_api_key_abcde"
    api_secret: "test_api_secret_fghij"

spread_bot:
  volume: "0.5"
  sample_period_secs: 10
  report_period_secs: 600
  report_file: "reports/spread.log"
  primary_currency: "Eth"
  secondary_currency: "Usd"
"""
    secrets_path = temp_dir / "secrets_bot.yaml"
    secrets_path.write_text(secrets_content, encoding="utf-8")
    return secrets_path


@pytest.fixture
def credential() -> Credential:
    """테스트용 읽기 전용 인증 정보"""
    return Credential.from_strings("test_api_key_abcde", "test_api_secret_fghij")


@pytest.fixture
def sample_order_book() -> OrderBook:
    """매수 99 / 매도 101, 각 10개 호가창"""
    return OrderBook.from_raw(
        levels_buy=[(Decimal("99"), Decimal("10"))],
        levels_sell=[(Decimal("101"), Decimal("10"))],
    )
