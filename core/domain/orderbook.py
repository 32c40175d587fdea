"""
호가창(OrderBook) 도메인 모델

단일 스냅샷에서 생성되는 불변 호가창과 체결가 계산.

정렬 규칙:
- buys: 가격 내림차순 (최고 매수호가 먼저)
- sells: 가격 오름차순 (최저 매도호가 먼저)
- 같은 가격은 원래 순서 유지 (stable sort)

모든 가격/수량 계산은 Decimal로 수행하며 반올림하지 않는다.
"""

import logging
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any, Iterable

from core.types import OrderSide
from core.utils.numeric import mid_price

logger = logging.getLogger(__name__)

_ZERO = Decimal("0")


class InsufficientLiquidityError(Exception):
    """호가창 깊이 부족

    요청 수량을 채우기 전에 호가가 소진된 경우 발생.
    체결가를 추정하지 않는다.
    """

    def __init__(self, side: OrderSide, volume: Decimal, unfilled: Decimal):
        self.side = side
        self.volume = volume
        self.unfilled = unfilled
        super().__init__(
            f"failed to fill {side.value} order of {volume}: {unfilled} unfilled"
        )


class InvalidVolumeError(ValueError):
    """잘못된 요청 수량 (0 이하)"""

    def __init__(self, volume: Any):
        self.volume = volume
        super().__init__(f"volume must be positive, got {volume}")


@dataclass(frozen=True)
class PriceLevel:
    """호가 한 단계

    Attributes:
        price: 가격 (quote 통화)
        volume: 수량 (base 통화)
    """

    price: Decimal
    volume: Decimal


@dataclass(frozen=True)
class FillSpread:
    """동일 수량의 매수/매도 체결가 스프레드

    Attributes:
        volume: 체결 수량
        buy_price: 시장가 매수 평균 체결가 (sells 소진)
        sell_price: 시장가 매도 평균 체결가 (buys 소진)
    """

    volume: Decimal
    buy_price: Decimal
    sell_price: Decimal

    @property
    def spread(self) -> Decimal:
        return self.buy_price - self.sell_price

    @property
    def mid_price(self) -> Decimal:
        return mid_price(self.buy_price, self.sell_price)

    @property
    def spread_ratio(self) -> Decimal:
        """중간가 대비 스프레드 비율 (0.02 = 2%)"""
        mid = self.mid_price
        if mid == 0:
            return _ZERO
        return self.spread / mid


@dataclass(frozen=True)
class BidAskSpread:
    """최우선 호가 스프레드

    Attributes:
        best_bid: 최고 매수호가
        best_ask: 최저 매도호가
    """

    best_bid: Decimal
    best_ask: Decimal

    @property
    def spread(self) -> Decimal:
        return self.best_ask - self.best_bid

    @property
    def mid_price(self) -> Decimal:
        return mid_price(self.best_ask, self.best_bid)


def _to_decimal(value: Any) -> Decimal | None:
    """호가 숫자 필드 변환 (변환 불가면 None)"""
    if value is None or isinstance(value, bool):
        return None
    try:
        if isinstance(value, float):
            number = Decimal(str(value))
        else:
            number = Decimal(value)
    except (InvalidOperation, TypeError, ValueError):
        return None
    if not number.is_finite() or number < 0:
        return None
    return number


def _parse_levels(raw_levels: Iterable[Any], side_name: str) -> list[PriceLevel]:
    """(price, volume) 쌍 목록을 PriceLevel 목록으로 변환

    가격이나 수량이 없거나 잘못된 호가는 0으로 채우지 않고 버린다.
    """
    levels: list[PriceLevel] = []
    for index, raw in enumerate(raw_levels):
        try:
            raw_price, raw_volume = raw
        except (TypeError, ValueError):
            raw_price, raw_volume = None, None

        price = _to_decimal(raw_price)
        volume = _to_decimal(raw_volume)
        if price is None or volume is None:
            logger.warning(
                f"잘못된 {side_name} 호가 제외",
                extra={"index": index, "raw": repr(raw)},
            )
            continue
        levels.append(PriceLevel(price=price, volume=volume))
    return levels


@dataclass(frozen=True)
class OrderBook:
    """불변 호가창

    from_raw()로 생성하며, 새 스냅샷은 항상 새 OrderBook을 만든다.

    Attributes:
        buys: 매수 호가 (가격 내림차순)
        sells: 매도 호가 (가격 오름차순)

    사용 예시:
    ```python
    book = OrderBook.from_raw(
        levels_buy=[(Decimal("99"), Decimal("10"))],
        levels_sell=[(Decimal("101"), Decimal("10"))],
    )
    fill = book.spread_to_fill(Decimal("1"))
    fill.spread  # Decimal("2")
    ```
    """

    buys: tuple[PriceLevel, ...]
    sells: tuple[PriceLevel, ...]

    @classmethod
    def from_raw(
        cls,
        levels_buy: Iterable[Any],
        levels_sell: Iterable[Any],
    ) -> "OrderBook":
        """원시 (price, volume) 쌍에서 호가창 생성

        실패하지 않는다. 빈/잘못된 스냅샷은 한쪽 또는 양쪽이 빈 호가창이 된다.

        Args:
            levels_buy: 매수 호가 (price, volume) 쌍
            levels_sell: 매도 호가 (price, volume) 쌍
        """
        buys = _parse_levels(levels_buy, "buy")
        sells = _parse_levels(levels_sell, "sell")

        # sorted()는 stable, reverse=True도 동일 가격의 원래 순서를 유지
        buys = sorted(buys, key=lambda level: level.price, reverse=True)
        sells = sorted(sells, key=lambda level: level.price)

        return cls(buys=tuple(buys), sells=tuple(sells))

    @property
    def is_empty(self) -> bool:
        return not self.buys and not self.sells

    def best_bid_ask_spread(self) -> BidAskSpread | None:
        """최우선 호가 스프레드

        Returns:
            BidAskSpread, 한쪽이라도 비어 있으면 None
        """
        if not self.buys or not self.sells:
            return None
        return BidAskSpread(best_bid=self.buys[0].price, best_ask=self.sells[0].price)

    def price_to_fill(self, side: OrderSide, volume: Decimal) -> Decimal:
        """시장가 주문의 평균 체결가

        시장가 매수는 매도 호가(sells)를, 시장가 매도는 매수 호가(buys)를
        최우선 호가부터 소진한다.

        Args:
            side: 주문 방향
            volume: 체결 수량 (0보다 커야 함)

        Returns:
            수량 가중 평균 체결가 (반올림하지 않음)

        Raises:
            InvalidVolumeError: volume <= 0 또는 숫자가 아님
            InsufficientLiquidityError: 호가 깊이 부족
        """
        if isinstance(volume, bool):
            raise InvalidVolumeError(volume)
        if isinstance(volume, int):
            volume = Decimal(volume)
        elif isinstance(volume, float):
            volume = Decimal(str(volume))
        elif not isinstance(volume, Decimal):
            raise InvalidVolumeError(volume)
        if not volume.is_finite() or volume <= 0:
            raise InvalidVolumeError(volume)

        levels = self.sells if side == OrderSide.BUY else self.buys

        remaining = volume
        total_cost = _ZERO

        for level in levels:
            if remaining > level.volume:
                remaining -= level.volume
                total_cost += level.volume * level.price
            else:
                total_cost += remaining * level.price
                remaining = _ZERO
                break

        if remaining > 0:
            raise InsufficientLiquidityError(side, volume, remaining)

        return total_cost / volume

    def price_to_fill_buy_order(self, volume: Decimal) -> Decimal:
        """시장가 매수 평균 체결가"""
        return self.price_to_fill(OrderSide.BUY, volume)

    def price_to_fill_sell_order(self, volume: Decimal) -> Decimal:
        """시장가 매도 평균 체결가"""
        return self.price_to_fill(OrderSide.SELL, volume)

    def spread_to_fill(self, volume: Decimal) -> FillSpread:
        """같은 수량을 매수/매도할 때의 스프레드

        Raises:
            InvalidVolumeError: volume <= 0
            InsufficientLiquidityError: 어느 한쪽이라도 깊이 부족
        """
        buy_price = self.price_to_fill(OrderSide.BUY, volume)
        sell_price = self.price_to_fill(OrderSide.SELL, volume)
        return FillSpread(volume=volume, buy_price=buy_price, sell_price=sell_price)
