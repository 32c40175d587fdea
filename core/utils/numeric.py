"""
Decimal 표시 유틸리티

계산은 항상 반올림하지 않은 Decimal로 수행하고,
사람에게 보여주는 마지막 단계에서만 자리수를 맞춘다.
- 법정화폐(AUD): 2자리
- 암호화폐(XBT): 8자리
- 퍼센트: 4자리
반올림 규칙: ROUND_HALF_EVEN (banker's rounding)
"""

from decimal import ROUND_HALF_EVEN, Decimal

from core.constants import DecimalPlaces

_HUNDRED = Decimal("100")
_TWO = Decimal("2")


def round_dp(value: Decimal, places: int) -> Decimal:
    """소수점 places 자리로 반올림"""
    return value.quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_EVEN)


def round_fiat(value: Decimal) -> Decimal:
    return round_dp(value, DecimalPlaces.FIAT)


def round_crypto(value: Decimal) -> Decimal:
    return round_dp(value, DecimalPlaces.CRYPTO)


def round_percent(value: Decimal) -> Decimal:
    return round_dp(value, DecimalPlaces.PERCENT)


def to_fiat_string(value: Decimal) -> str:
    """법정화폐 금액 문자열 (예: '1234.57')"""
    return str(round_fiat(value))


def to_crypto_string(value: Decimal) -> str:
    """암호화폐 수량 문자열 (예: '0.12345678')"""
    return str(round_crypto(value))


def to_percent_string(ratio: Decimal) -> str:
    """비율을 퍼센트 문자열로 변환

    Args:
        ratio: 비율 (0.02 = 2%)

    Returns:
        퍼센트 문자열 (예: '2.0000')
    """
    return str(round_percent(ratio * _HUNDRED))


def mid_price(buy_price: Decimal, sell_price: Decimal) -> Decimal:
    """두 가격의 중간값"""
    return (buy_price + sell_price) / _TWO


def spread_percent(buy_price: Decimal, sell_price: Decimal) -> tuple[Decimal, Decimal]:
    """스프레드와 중간가 대비 비율 계산

    Args:
        buy_price: 매수 체결가 (ask 쪽)
        sell_price: 매도 체결가 (bid 쪽)

    Returns:
        (spread, ratio) - spread = buy - sell, ratio = spread / mid
        mid가 0이면 ratio는 0
    """
    spread = buy_price - sell_price
    mid = mid_price(buy_price, sell_price)
    if mid == 0:
        return spread, Decimal("0")
    return spread, spread / mid
