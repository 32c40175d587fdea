"""
Independent Reserve Private API 클라이언트

읽기 전용 키로 호출 가능한 Private 메서드만 지원 (주문/출금 등 상태 변경 없음).

인증:
- 모든 요청은 POST JSON 본문에 apiKey, nonce, signature 포함
- nonce는 API 키별로 매 요청 증가해야 하므로 클라이언트가 NonceSource를 단독 소유
- signature는 request_builder의 canonical message에 대한 HMAC-SHA256
"""

import logging
from typing import Any, Callable

from adapters.independent_reserve import request_builder
from adapters.independent_reserve.base_client import BaseRestClient, map_response
from adapters.independent_reserve.models import (
    Account,
    BrokerageFee,
    DepositAddress,
    DepositAddressPage,
    DigitalCurrencyWithdrawal,
    OrderDetails,
    OrderPage,
    TradePage,
)
from adapters.independent_reserve.request_builder import SignedRequestPayload
from core.constants import Defaults, IndependentReserveEndpoints
from core.types import Credential
from core.utils.nonce import NonceSource

logger = logging.getLogger(__name__)

# (url, nonce) -> 서명된 본문
PayloadFactory = Callable[[str, int], SignedRequestPayload]


class PrivateRestClient(BaseRestClient):
    """Independent Reserve Private API 클라이언트 (읽기 전용)

    Args:
        credential: 읽기 전용 API 인증 정보
        nonce_source: 이 인증 정보 전용 nonce 발급기 (None이면 새로 생성)
        base_url: Private API URL
        timeout: HTTP 요청 타임아웃 (초)
        max_retries: 최대 시도 횟수 (재시도마다 새 nonce 사용)

    사용 예시:
    ```python
    client = PrivateRestClient(Credential.from_strings("key", "secret"))
    accounts = await client.get_accounts()
    ```
    """

    def __init__(
        self,
        credential: Credential,
        nonce_source: NonceSource | None = None,
        base_url: str = IndependentReserveEndpoints.PRIVATE_URL,
        timeout: float = Defaults.HTTP_TIMEOUT_SEC,
        max_retries: int = Defaults.HTTP_MAX_RETRIES,
    ):
        super().__init__(base_url, timeout=timeout, max_retries=max_retries)
        self._credential = credential
        self._nonces = nonce_source if nonce_source is not None else NonceSource()

    def __repr__(self) -> str:
        return f"PrivateRestClient(base_url={self.base_url!r}, api_key={self._credential.masked_key!r})"

    @property
    def api_key(self) -> str:
        return self._credential.key

    async def _post(self, method_name: str, factory: PayloadFactory) -> Any:
        """서명된 POST 요청

        재시도를 포함해 시도마다 nonce를 하나씩 소비하고 서명을 새로 만든다.
        """
        url = self.build_url(method_name)

        def build_kwargs() -> dict[str, Any]:
            payload = factory(url, self._nonces.next())
            logger.debug(
                "Private 요청",
                extra={"method_name": method_name, "nonce": payload.nonce},
            )
            return {"json": payload.to_dict()}

        return await self._send("POST", method_name, build_kwargs)

    # -------------------------------------------------------------------------
    # 주문 조회
    # -------------------------------------------------------------------------

    async def _get_orders(
        self,
        method_name: str,
        primary: str,
        secondary: str,
        page_index: int,
    ) -> OrderPage:
        data = await self._post(
            method_name,
            lambda url, nonce: request_builder.build_orders_payload(
                url, self._credential, nonce, primary, secondary, page_index
            ),
        )
        return map_response(method_name, OrderPage.from_api, data)

    async def get_open_orders(self, primary: str, secondary: str, page_index: int = 1) -> OrderPage:
        """API call: GetOpenOrders"""
        return await self._get_orders("GetOpenOrders", primary, secondary, page_index)

    async def get_closed_orders(self, primary: str, secondary: str, page_index: int = 1) -> OrderPage:
        """API call: GetClosedOrders"""
        return await self._get_orders("GetClosedOrders", primary, secondary, page_index)

    async def get_closed_filled_orders(
        self,
        primary: str,
        secondary: str,
        page_index: int = 1,
    ) -> OrderPage:
        """API call: GetClosedFilledOrders"""
        return await self._get_orders("GetClosedFilledOrders", primary, secondary, page_index)

    async def get_order_details(self, order_guid: str) -> OrderDetails:
        """API call: GetOrderDetails

        Args:
            order_guid: 주문 ID (예: "c7347e4c-b865-4c94-8f74-d934d4b0b177")
        """
        data = await self._post(
            "GetOrderDetails",
            lambda url, nonce: request_builder.build_order_guid_payload(
                url, self._credential, nonce, order_guid
            ),
        )
        return map_response("GetOrderDetails", OrderDetails.from_api, data)

    # -------------------------------------------------------------------------
    # 계좌 조회
    # -------------------------------------------------------------------------

    async def get_accounts(self) -> list[Account]:
        """API call: GetAccounts"""
        data = await self._post(
            "GetAccounts",
            lambda url, nonce: request_builder.build_no_param_payload(url, self._credential, nonce),
        )
        return map_response("GetAccounts", lambda d: [Account.from_api(item) for item in d], data)

    async def get_brokerage_fees(self) -> list[BrokerageFee]:
        """API call: GetBrokerageFees"""
        data = await self._post(
            "GetBrokerageFees",
            lambda url, nonce: request_builder.build_no_param_payload(url, self._credential, nonce),
        )
        return map_response(
            "GetBrokerageFees",
            lambda d: [BrokerageFee.from_api(item) for item in d],
            data,
        )

    async def get_trades(self, page_index: int = 1) -> TradePage:
        """API call: GetTrades"""
        data = await self._post(
            "GetTrades",
            lambda url, nonce: request_builder.build_paged_payload(
                url, self._credential, nonce, page_index
            ),
        )
        return map_response("GetTrades", TradePage.from_api, data)

    # -------------------------------------------------------------------------
    # 입출금 조회
    # -------------------------------------------------------------------------

    async def get_digital_currency_deposit_address(self, primary: str) -> DepositAddress:
        """API call: GetDigitalCurrencyDepositAddress"""
        data = await self._post(
            "GetDigitalCurrencyDepositAddress",
            lambda url, nonce: request_builder.build_currency_payload(
                url, self._credential, nonce, primary
            ),
        )
        return map_response("GetDigitalCurrencyDepositAddress", DepositAddress.from_api, data)

    async def get_digital_currency_deposit_addresses(
        self,
        primary: str,
        page_index: int = 1,
    ) -> DepositAddressPage:
        """API call: GetDigitalCurrencyDepositAddresses"""
        data = await self._post(
            "GetDigitalCurrencyDepositAddresses",
            lambda url, nonce: request_builder.build_currency_paged_payload(
                url, self._credential, nonce, primary, page_index
            ),
        )
        return map_response("GetDigitalCurrencyDepositAddresses", DepositAddressPage.from_api, data)

    async def get_digital_currency_withdrawal(self, transaction_guid: str) -> DigitalCurrencyWithdrawal:
        """API call: GetDigitalCurrencyWithdrawal"""
        data = await self._post(
            "GetDigitalCurrencyWithdrawal",
            lambda url, nonce: request_builder.build_transaction_guid_payload(
                url, self._credential, nonce, transaction_guid
            ),
        )
        return map_response("GetDigitalCurrencyWithdrawal", DigitalCurrencyWithdrawal.from_api, data)
