"""
Independent Reserve Public API 클라이언트

인증 없는 GET 요청으로 시장 데이터 조회.
"""

import logging
from typing import Any

from adapters.independent_reserve.base_client import BaseRestClient, map_response
from adapters.independent_reserve.models import FxRate, MarketSummary, RawOrderBook
from core.constants import Defaults, IndependentReserveEndpoints

logger = logging.getLogger(__name__)


class PublicRestClient(BaseRestClient):
    """Independent Reserve Public API 클라이언트

    Args:
        base_url: Public API URL
        timeout: HTTP 요청 타임아웃 (초)
        max_retries: 최대 시도 횟수

    사용 예시:
    ```python
    client = PublicRestClient()
    book = await client.get_order_book("Xbt", "Aud")
    ```
    """

    def __init__(
        self,
        base_url: str = IndependentReserveEndpoints.PUBLIC_URL,
        timeout: float = Defaults.HTTP_TIMEOUT_SEC,
        max_retries: int = Defaults.HTTP_MAX_RETRIES,
    ):
        super().__init__(base_url, timeout=timeout, max_retries=max_retries)

    async def _get(self, method_name: str, params: dict[str, Any] | None = None) -> Any:
        return await self._send("GET", method_name, lambda: {"params": params})

    async def _get_string_list(self, method_name: str) -> list[str]:
        data = await self._get(method_name)
        return map_response(method_name, lambda d: [str(item) for item in d], data)

    @staticmethod
    def _pair_params(primary: str, secondary: str) -> dict[str, Any]:
        return {
            "primaryCurrencyCode": primary,
            "secondaryCurrencyCode": secondary,
        }

    # -------------------------------------------------------------------------
    # 코드 목록
    # -------------------------------------------------------------------------

    async def get_valid_primary_currency_codes(self) -> list[str]:
        """API call: GetValidPrimaryCurrencyCodes"""
        return await self._get_string_list("GetValidPrimaryCurrencyCodes")

    async def get_valid_secondary_currency_codes(self) -> list[str]:
        """API call: GetValidSecondaryCurrencyCodes"""
        return await self._get_string_list("GetValidSecondaryCurrencyCodes")

    async def get_valid_limit_order_types(self) -> list[str]:
        """API call: GetValidLimitOrderTypes"""
        return await self._get_string_list("GetValidLimitOrderTypes")

    async def get_valid_market_order_types(self) -> list[str]:
        """API call: GetValidMarketOrderTypes"""
        return await self._get_string_list("GetValidMarketOrderTypes")

    async def get_valid_order_types(self) -> list[str]:
        """API call: GetValidOrderTypes"""
        return await self._get_string_list("GetValidOrderTypes")

    async def get_valid_transaction_types(self) -> list[str]:
        """API call: GetValidTransactionTypes"""
        return await self._get_string_list("GetValidTransactionTypes")

    # -------------------------------------------------------------------------
    # 시세
    # -------------------------------------------------------------------------

    async def get_market_summary(self, primary: str, secondary: str) -> MarketSummary:
        """API call: GetMarketSummary"""
        data = await self._get("GetMarketSummary", self._pair_params(primary, secondary))
        return map_response("GetMarketSummary", MarketSummary.from_api, data)

    async def get_order_book(self, primary: str, secondary: str) -> RawOrderBook:
        """API call: GetOrderBook

        Returns:
            원시 호가창 (잘못된 호가는 OrderBook 변환 시 제외됨)
        """
        data = await self._get("GetOrderBook", self._pair_params(primary, secondary))
        book = map_response("GetOrderBook", RawOrderBook.from_api, data)
        logger.debug(
            "호가창 조회",
            extra={"buys": len(book.buy_orders), "sells": len(book.sell_orders)},
        )
        return book

    async def get_all_orders(self, primary: str, secondary: str) -> dict[str, Any]:
        """API call: GetAllOrders (주문 ID 포함 호가창, 원시 응답)"""
        return await self._get("GetAllOrders", self._pair_params(primary, secondary))

    async def get_trade_history_summary(
        self,
        primary: str,
        secondary: str,
        hours_past: int,
    ) -> dict[str, Any]:
        """API call: GetTradeHistorySummary (원시 응답)"""
        params = self._pair_params(primary, secondary)
        params["numberOfHoursInThePastToRetrieve"] = hours_past
        return await self._get("GetTradeHistorySummary", params)

    async def get_recent_trades(
        self,
        primary: str,
        secondary: str,
        num_trades: int,
    ) -> dict[str, Any]:
        """API call: GetRecentTrades (원시 응답)"""
        params = self._pair_params(primary, secondary)
        params["numberOfRecentTradesToRetrieve"] = num_trades
        return await self._get("GetRecentTrades", params)

    async def get_fx_rates(self) -> list[FxRate]:
        """API call: GetFxRates"""
        data = await self._get("GetFxRates")
        return map_response("GetFxRates", lambda d: [FxRate.from_api(item) for item in d], data)
