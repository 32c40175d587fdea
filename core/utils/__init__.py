"""
유틸리티 패키지

nonce 발급, Decimal 표시, 타임존 처리 등 공통 유틸리티
"""

from core.utils.nonce import NonceSource
from core.utils.numeric import (
    round_fiat,
    round_crypto,
    round_percent,
    to_fiat_string,
    to_crypto_string,
    to_percent_string,
    mid_price,
    spread_percent,
)
from core.utils.timezone import now_local, format_local

__all__ = [
    "NonceSource",
    "round_fiat",
    "round_crypto",
    "round_percent",
    "to_fiat_string",
    "to_crypto_string",
    "to_percent_string",
    "mid_price",
    "spread_percent",
    "now_local",
    "format_local",
]
