"""
Independent Reserve 응답 모델 테스트

API 응답 JSON을 데이터클래스로 파싱하는 테스트.
"""

from decimal import Decimal

import pytest

from adapters.independent_reserve.models import (
    BrokerageFee,
    DepositAddressPage,
    DigitalCurrencyWithdrawal,
    FxRate,
    OrderPage,
    RawOrderBook,
    RawPriceLevel,
    TradePage,
)


class TestRawPriceLevel:
    """RawPriceLevel 파싱 테스트"""

    def test_from_api(self) -> None:
        """정상 호가"""
        level = RawPriceLevel.from_api(
            {"OrderType": "LimitBid", "Price": Decimal("497.02"), "Volume": Decimal("0.01")}
        )

        assert level.order_type == "LimitBid"
        assert level.as_pair() == (Decimal("497.02"), Decimal("0.01"))

    @pytest.mark.parametrize(
        "data",
        [
            {"OrderType": "LimitBid", "Volume": Decimal("1")},
            {"OrderType": "LimitBid", "Price": "abc", "Volume": Decimal("1")},
            {"OrderType": "LimitBid", "Price": True, "Volume": Decimal("1")},
            "not a dict",
        ],
    )
    def test_missing_or_invalid_price(self, data) -> None:
        """가격이 없거나 잘못되면 None (0으로 채우지 않음)"""
        level = RawPriceLevel.from_api(data)

        assert level.price is None


class TestRawOrderBook:
    """RawOrderBook 파싱 테스트"""

    def test_to_order_book_drops_invalid(self) -> None:
        """잘못된 호가는 도메인 변환 시 제외"""
        raw = RawOrderBook.from_api(
            {
                "BuyOrders": [
                    {"OrderType": "LimitBid", "Price": Decimal("100"), "Volume": Decimal("1")},
                    {"OrderType": "LimitBid", "Price": Decimal("101")},
                ],
                "SellOrders": [],
                "CreatedTimestampUtc": "2014-08-05T06:42:11.3032208Z",
                "PrimaryCurrencyCode": "Xbt",
                "SecondaryCurrencyCode": "Aud",
            }
        )

        book = raw.to_order_book()

        assert len(book.buys) == 1
        assert book.buys[0].price == Decimal("100")
        assert book.sells == ()

    def test_missing_sides(self) -> None:
        """BuyOrders/SellOrders 누락 또는 null"""
        raw = RawOrderBook.from_api({"BuyOrders": None})

        assert raw.buy_orders == ()
        assert raw.sell_orders == ()
        assert raw.to_order_book().is_empty


class TestPages:
    """페이지 응답 테스트"""

    def test_order_page(self) -> None:
        """GetOpenOrders 응답"""
        page = OrderPage.from_api(
            {
                "PageSize": 25,
                "TotalItems": 1,
                "TotalPages": 1,
                "Data": [
                    {
                        "AvgPrice": Decimal("466.36"),
                        "CreatedTimestampUtc": "2014-05-05T09:35:22.4032405Z",
                        "FeePercent": Decimal("0.005"),
                        "OrderGuid": "dd015a29-8f73-4469-a5fa-ea91544dfcda",
                        "OrderType": "LimitOffer",
                        "Outstanding": Decimal("21.45621"),
                        "Price": None,
                        "PrimaryCurrencyCode": "Xbt",
                        "SecondaryCurrencyCode": "Usd",
                        "Status": "Open",
                        "Value": Decimal("19.2"),
                        "Volume": Decimal("25"),
                    }
                ],
            }
        )

        assert page.total_items == 1
        order = page.data[0]
        assert order.order_type == "LimitOffer"
        assert order.price is None
        assert order.outstanding == Decimal("21.45621")
        assert order.fee_percent == Decimal("0.005")

    def test_trade_page(self) -> None:
        """GetTrades 응답"""
        page = TradePage.from_api(
            {
                "Data": [
                    {
                        "TradeGuid": "593e609d-041a-4f46-a41d-2cb8e908973f",
                        "TradeTimestampUtc": "2014-12-16T03:44:19.2187707Z",
                        "OrderGuid": "8bf851a3-76d2-439c-945a-93367541d467",
                        "OrderType": "LimitBid",
                        "OrderTimestampUtc": "2014-12-16T03:43:36.7423769Z",
                        "VolumeTraded": Decimal("0.5"),
                        "Price": Decimal("410.0"),
                        "PrimaryCurrencyCode": "Xbt",
                        "SecondaryCurrencyCode": "Aud",
                    }
                ],
                "PageSize": 25,
                "TotalItems": 1,
                "TotalPages": 1,
            }
        )

        assert page.data[0].volume_traded == Decimal("0.5")
        assert page.data[0].price == Decimal("410.0")

    def test_deposit_address_page(self) -> None:
        """GetDigitalCurrencyDepositAddresses 응답"""
        page = DepositAddressPage.from_api(
            {
                "PageSize": 25,
                "TotalItems": 1,
                "TotalPages": 1,
                "Data": [
                    {
                        "DepositAddress": "12a7FbBzSGvJd36wNesAxAksLXMWm4oLUJ",
                        "LastCheckedTimestampUtc": "2014-05-05T09:35:22.4032405Z",
                        "NextUpdateTimestampUtc": "2014-05-05T09:45:22.4032405Z",
                    }
                ],
            }
        )

        assert page.data[0].deposit_address == "12a7FbBzSGvJd36wNesAxAksLXMWm4oLUJ"

    def test_missing_required_field(self) -> None:
        """필수 필드 누락은 KeyError"""
        with pytest.raises(KeyError):
            OrderPage.from_api({"PageSize": 25})


class TestOtherModels:
    """기타 응답 모델 테스트"""

    def test_brokerage_fee(self) -> None:
        fee = BrokerageFee.from_api({"CurrencyCode": "Xbt", "Fee": Decimal("0.005")})

        assert fee.fee == Decimal("0.005")

    def test_fx_rate(self) -> None:
        rate = FxRate.from_api(
            {"CurrencyCodeA": "Aud", "CurrencyCodeB": "Usd", "Rate": Decimal("0.8")}
        )

        assert rate.rate == Decimal("0.8")

    def test_withdrawal(self) -> None:
        """중첩된 Amount/Destination 필드"""
        withdrawal = DigitalCurrencyWithdrawal.from_api(
            {
                "TransactionGuid": "2a93732f-3f40-4685-b3bc-ff3ec326090d",
                "PrimaryCurrencyCode": "Xbt",
                "CreatedTimestampUtc": "2020-04-01T05:26:30.5093622+00:00",
                "Amount": {"Total": Decimal("0.1231"), "Fee": Decimal("0.0001")},
                "Destination": {"Address": "bc1qhpqxkjpvgkckw530yfmxyr53c94q8f4273a7ez", "Tag": None},
                "Status": "Pending",
                "Transaction": None,
            }
        )

        assert withdrawal.total == Decimal("0.1231")
        assert withdrawal.fee == Decimal("0.0001")
        assert withdrawal.destination_tag is None
        assert withdrawal.status == "Pending"
