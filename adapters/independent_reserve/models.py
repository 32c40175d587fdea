"""
Independent Reserve API 응답 모델

REST API 응답(PascalCase JSON)을 파싱하여 데이터클래스로 변환.
모든 금액/수량은 Decimal 사용 (응답은 parse_float=Decimal로 디코딩).
"""

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any

from core.domain.orderbook import OrderBook


def _dec(value: Any) -> Decimal:
    """필수 숫자 필드 변환"""
    return Decimal(str(value))


def _opt_dec(value: Any) -> Decimal | None:
    """선택 숫자 필드 변환 (None 허용)"""
    if value is None:
        return None
    return Decimal(str(value))


@dataclass(frozen=True)
class RawPriceLevel:
    """GetOrderBook 응답의 호가 한 건

    price/volume이 없거나 숫자가 아니면 None으로 남겨
    OrderBook 생성 시 제외되도록 한다 (0으로 채우지 않음).
    """

    order_type: str | None
    price: Decimal | None
    volume: Decimal | None

    @classmethod
    def from_api(cls, data: Any) -> "RawPriceLevel":
        """API 응답에서 생성 (실패하지 않음)"""
        if not isinstance(data, dict):
            return cls(order_type=None, price=None, volume=None)
        return cls(
            order_type=data.get("OrderType"),
            price=cls._lenient(data.get("Price")),
            volume=cls._lenient(data.get("Volume")),
        )

    @staticmethod
    def _lenient(value: Any) -> Decimal | None:
        if value is None or isinstance(value, bool):
            return None
        try:
            return Decimal(str(value))
        except InvalidOperation:
            return None

    def as_pair(self) -> tuple[Decimal | None, Decimal | None]:
        return self.price, self.volume


@dataclass(frozen=True)
class RawOrderBook:
    """GetOrderBook 응답

    응답 예시:
    {
        "BuyOrders": [{"OrderType": "LimitBid", "Price": 497.02, "Volume": 0.01}],
        "SellOrders": [{"OrderType": "LimitOffer", "Price": 500.0, "Volume": 1.0}],
        "CreatedTimestampUtc": "2014-08-05T06:42:11.3032208Z",
        "PrimaryCurrencyCode": "Xbt",
        "SecondaryCurrencyCode": "Usd"
    }
    """

    buy_orders: tuple[RawPriceLevel, ...]
    sell_orders: tuple[RawPriceLevel, ...]
    created_timestamp_utc: str | None
    primary_currency_code: str | None
    secondary_currency_code: str | None

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "RawOrderBook":
        """API 응답에서 생성"""
        if not isinstance(data, dict):
            raise TypeError(f"order book must be an object, got {type(data).__name__}")
        return cls(
            buy_orders=tuple(RawPriceLevel.from_api(o) for o in data.get("BuyOrders") or []),
            sell_orders=tuple(RawPriceLevel.from_api(o) for o in data.get("SellOrders") or []),
            created_timestamp_utc=data.get("CreatedTimestampUtc"),
            primary_currency_code=data.get("PrimaryCurrencyCode"),
            secondary_currency_code=data.get("SecondaryCurrencyCode"),
        )

    def to_order_book(self) -> OrderBook:
        """도메인 OrderBook으로 변환"""
        return OrderBook.from_raw(
            levels_buy=[level.as_pair() for level in self.buy_orders],
            levels_sell=[level.as_pair() for level in self.sell_orders],
        )


@dataclass(frozen=True)
class MarketSummary:
    """GetMarketSummary 응답"""

    created_timestamp_utc: str
    current_highest_bid_price: Decimal
    current_lowest_offer_price: Decimal
    day_avg_price: Decimal
    day_highest_price: Decimal
    day_lowest_price: Decimal
    day_volume_xbt: Decimal
    last_price: Decimal
    primary_currency_code: str
    secondary_currency_code: str

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "MarketSummary":
        """API 응답에서 생성"""
        return cls(
            created_timestamp_utc=data["CreatedTimestampUtc"],
            current_highest_bid_price=_dec(data["CurrentHighestBidPrice"]),
            current_lowest_offer_price=_dec(data["CurrentLowestOfferPrice"]),
            day_avg_price=_dec(data["DayAvgPrice"]),
            day_highest_price=_dec(data["DayHighestPrice"]),
            day_lowest_price=_dec(data["DayLowestPrice"]),
            day_volume_xbt=_dec(data["DayVolumeXbt"]),
            last_price=_dec(data["LastPrice"]),
            primary_currency_code=data["PrimaryCurrencyCode"],
            secondary_currency_code=data["SecondaryCurrencyCode"],
        )


@dataclass(frozen=True)
class Order:
    """GetOpenOrders / GetClosedOrders / GetClosedFilledOrders 항목

    Attributes:
        order_guid: 주문 ID
        order_type: 주문 유형 (LimitBid, MarketOffer 등)
        status: 주문 상태
        price: 지정가 (시장가 주문은 None)
        avg_price: 평균 체결가
        volume: 주문 수량
        outstanding: 미체결 수량
        value: 체결 금액
        fee_percent: 수수료율
    """

    order_guid: str
    created_timestamp_utc: str
    order_type: str
    status: str
    price: Decimal | None
    avg_price: Decimal | None
    volume: Decimal
    outstanding: Decimal
    value: Decimal | None
    fee_percent: Decimal | None
    primary_currency_code: str
    secondary_currency_code: str

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "Order":
        """API 응답에서 생성"""
        return cls(
            order_guid=data["OrderGuid"],
            created_timestamp_utc=data["CreatedTimestampUtc"],
            order_type=data["OrderType"],
            status=data["Status"],
            price=_opt_dec(data.get("Price")),
            avg_price=_opt_dec(data.get("AvgPrice")),
            volume=_dec(data["Volume"]),
            outstanding=_dec(data.get("Outstanding", "0")),
            value=_opt_dec(data.get("Value")),
            fee_percent=_opt_dec(data.get("FeePercent")),
            primary_currency_code=data["PrimaryCurrencyCode"],
            secondary_currency_code=data["SecondaryCurrencyCode"],
        )


@dataclass(frozen=True)
class OrderPage:
    """주문 목록 페이지"""

    total_items: int
    page_size: int
    total_pages: int
    data: tuple[Order, ...]

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "OrderPage":
        """API 응답에서 생성"""
        return cls(
            total_items=int(data["TotalItems"]),
            page_size=int(data["PageSize"]),
            total_pages=int(data["TotalPages"]),
            data=tuple(Order.from_api(item) for item in data.get("Data") or []),
        )


@dataclass(frozen=True)
class OrderDetails:
    """GetOrderDetails 응답"""

    order_guid: str
    created_timestamp_utc: str
    order_type: str
    status: str
    volume_ordered: Decimal
    volume_filled: Decimal
    price: Decimal | None
    avg_price: Decimal | None
    reserved_amount: Decimal
    primary_currency_code: str
    secondary_currency_code: str

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "OrderDetails":
        """API 응답에서 생성"""
        return cls(
            order_guid=data["OrderGuid"],
            created_timestamp_utc=data["CreatedTimestampUtc"],
            order_type=data["Type"],
            status=data["Status"],
            volume_ordered=_dec(data["VolumeOrdered"]),
            volume_filled=_dec(data["VolumeFilled"]),
            price=_opt_dec(data.get("Price")),
            avg_price=_opt_dec(data.get("AvgPrice")),
            reserved_amount=_dec(data.get("ReservedAmount", "0")),
            primary_currency_code=data["PrimaryCurrencyCode"],
            secondary_currency_code=data["SecondaryCurrencyCode"],
        )


@dataclass(frozen=True)
class Account:
    """GetAccounts 항목"""

    account_guid: str
    account_status: str
    currency_code: str
    available_balance: Decimal
    total_balance: Decimal

    @property
    def reserved(self) -> Decimal:
        """주문 등으로 묶인 잔고"""
        return self.total_balance - self.available_balance

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "Account":
        """API 응답에서 생성"""
        return cls(
            account_guid=data["AccountGuid"],
            account_status=data["AccountStatus"],
            currency_code=data["CurrencyCode"],
            available_balance=_dec(data["AvailableBalance"]),
            total_balance=_dec(data["TotalBalance"]),
        )


@dataclass(frozen=True)
class Trade:
    """GetTrades 항목"""

    trade_guid: str
    trade_timestamp_utc: str
    order_guid: str
    order_type: str
    volume_traded: Decimal
    price: Decimal
    primary_currency_code: str
    secondary_currency_code: str

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "Trade":
        """API 응답에서 생성"""
        return cls(
            trade_guid=data["TradeGuid"],
            trade_timestamp_utc=data["TradeTimestampUtc"],
            order_guid=data["OrderGuid"],
            order_type=data["OrderType"],
            volume_traded=_dec(data["VolumeTraded"]),
            price=_dec(data["Price"]),
            primary_currency_code=data["PrimaryCurrencyCode"],
            secondary_currency_code=data["SecondaryCurrencyCode"],
        )


@dataclass(frozen=True)
class TradePage:
    """체결 내역 페이지"""

    total_items: int
    page_size: int
    total_pages: int
    data: tuple[Trade, ...]

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "TradePage":
        """API 응답에서 생성"""
        return cls(
            total_items=int(data["TotalItems"]),
            page_size=int(data["PageSize"]),
            total_pages=int(data["TotalPages"]),
            data=tuple(Trade.from_api(item) for item in data.get("Data") or []),
        )


@dataclass(frozen=True)
class BrokerageFee:
    """GetBrokerageFees 항목"""

    currency_code: str
    fee: Decimal

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "BrokerageFee":
        """API 응답에서 생성"""
        return cls(currency_code=data["CurrencyCode"], fee=_dec(data["Fee"]))


@dataclass(frozen=True)
class DepositAddress:
    """GetDigitalCurrencyDepositAddress 응답 / 주소 목록 항목"""

    deposit_address: str
    last_checked_timestamp_utc: str | None
    next_update_timestamp_utc: str | None

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "DepositAddress":
        """API 응답에서 생성"""
        return cls(
            deposit_address=data["DepositAddress"],
            last_checked_timestamp_utc=data.get("LastCheckedTimestampUtc"),
            next_update_timestamp_utc=data.get("NextUpdateTimestampUtc"),
        )


@dataclass(frozen=True)
class DepositAddressPage:
    """입금 주소 목록 페이지"""

    total_items: int
    page_size: int
    total_pages: int
    data: tuple[DepositAddress, ...]

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "DepositAddressPage":
        """API 응답에서 생성"""
        return cls(
            total_items=int(data["TotalItems"]),
            page_size=int(data["PageSize"]),
            total_pages=int(data["TotalPages"]),
            data=tuple(DepositAddress.from_api(item) for item in data.get("Data") or []),
        )


@dataclass(frozen=True)
class DigitalCurrencyWithdrawal:
    """GetDigitalCurrencyWithdrawal 응답"""

    transaction_guid: str
    primary_currency_code: str
    created_timestamp_utc: str
    total: Decimal
    fee: Decimal
    destination_address: str
    destination_tag: str | None
    status: str
    transaction: str | None

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "DigitalCurrencyWithdrawal":
        """API 응답에서 생성"""
        amount = data.get("Amount") or {}
        destination = data.get("Destination") or {}
        return cls(
            transaction_guid=data["TransactionGuid"],
            primary_currency_code=data["PrimaryCurrencyCode"],
            created_timestamp_utc=data["CreatedTimestampUtc"],
            total=_dec(amount["Total"]),
            fee=_dec(amount.get("Fee", "0")),
            destination_address=destination["Address"],
            destination_tag=destination.get("Tag"),
            status=data["Status"],
            transaction=data.get("Transaction"),
        )


@dataclass(frozen=True)
class FxRate:
    """GetFxRates 항목"""

    currency_code_a: str
    currency_code_b: str
    rate: Decimal

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "FxRate":
        """API 응답에서 생성"""
        return cls(
            currency_code_a=data["CurrencyCodeA"],
            currency_code_b=data["CurrencyCodeB"],
            rate=_dec(data["Rate"]),
        )
