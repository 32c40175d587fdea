"""
Private API 요청 본문 생성

서명 메시지 형식 (쉼표 구분):
    <요청 URL>,apiKey=<키>,nonce=<nonce>,<파라미터1>=<값1>,...

파라미터 순서는 엔드포인트 유형별로 고정된 프로토콜 계약이다.
순서가 바뀌면 거래소는 파싱 오류가 아닌 인증 실패로 거부하므로,
유형마다 별도 함수가 순서를 하드코딩한다.

엔드포인트 유형:
- no-parameter: GetAccounts, GetBrokerageFees
- single-currency: GetDigitalCurrencyDepositAddress
- paged: GetTrades
- currency+paged: GetDigitalCurrencyDepositAddresses
- orders: GetOpenOrders, GetClosedOrders, GetClosedFilledOrders
- order-guid: GetOrderDetails
- transaction-guid: GetDigitalCurrencyWithdrawal
"""

from dataclasses import dataclass
from typing import Any

from adapters.independent_reserve.signer import sign
from core.constants import Defaults
from core.types import Credential

PAGE_SIZE = Defaults.PAGE_SIZE

# (필드명, 값) 목록. 필드명은 거래소의 camelCase 그대로 사용
Params = tuple[tuple[str, Any], ...]


@dataclass(frozen=True)
class SignedRequestPayload:
    """서명된 Private API 요청 본문

    매 호출마다 새로 생성하며 캐시하지 않는다.

    Attributes:
        url: 요청 URL
        api_key: API 키
        nonce: 이번 요청의 nonce
        signature: canonical message의 HMAC-SHA256 (hex)
        params: 엔드포인트별 파라미터 (선언 순서 유지)
    """

    url: str
    api_key: str
    nonce: int
    signature: str
    params: Params = ()

    def to_dict(self) -> dict[str, Any]:
        """JSON 요청 본문으로 변환 (apiKey, nonce, signature, 파라미터 순)"""
        body: dict[str, Any] = {
            "apiKey": self.api_key,
            "nonce": self.nonce,
            "signature": self.signature,
        }
        for name, value in self.params:
            body[name] = value
        return body


def canonical_message(url: str, api_key: str, nonce: int, params: Params = ()) -> str:
    """서명 대상 메시지 생성

    Args:
        url: 요청 URL (예: https://api.independentreserve.com/Private/GetTrades)
        api_key: API 키
        nonce: nonce
        params: 파라미터 (순서 그대로 사용, 정렬하지 않음)

    Returns:
        쉼표로 연결된 메시지
    """
    parts = [url, f"apiKey={api_key}", f"nonce={nonce}"]
    parts.extend(f"{name}={value}" for name, value in params)
    return ",".join(parts)


def _build(url: str, credential: Credential, nonce: int, params: Params) -> SignedRequestPayload:
    message = canonical_message(url, credential.key, nonce, params)
    return SignedRequestPayload(
        url=url,
        api_key=credential.key,
        nonce=nonce,
        signature=sign(message, credential.secret),
        params=params,
    )


def build_no_param_payload(url: str, credential: Credential, nonce: int) -> SignedRequestPayload:
    """파라미터 없는 요청 (GetAccounts, GetBrokerageFees)"""
    return _build(url, credential, nonce, ())


def build_currency_payload(
    url: str,
    credential: Credential,
    nonce: int,
    primary_currency_code: str,
) -> SignedRequestPayload:
    """단일 통화 요청: primaryCurrencyCode"""
    params: Params = (("primaryCurrencyCode", primary_currency_code),)
    return _build(url, credential, nonce, params)


def build_paged_payload(
    url: str,
    credential: Credential,
    nonce: int,
    page_index: int,
) -> SignedRequestPayload:
    """페이지 요청: pageIndex, pageSize"""
    params: Params = (
        ("pageIndex", page_index),
        ("pageSize", PAGE_SIZE),
    )
    return _build(url, credential, nonce, params)


def build_currency_paged_payload(
    url: str,
    credential: Credential,
    nonce: int,
    primary_currency_code: str,
    page_index: int,
) -> SignedRequestPayload:
    """통화 + 페이지 요청: primaryCurrencyCode, pageIndex, pageSize"""
    params: Params = (
        ("primaryCurrencyCode", primary_currency_code),
        ("pageIndex", page_index),
        ("pageSize", PAGE_SIZE),
    )
    return _build(url, credential, nonce, params)


def build_orders_payload(
    url: str,
    credential: Credential,
    nonce: int,
    primary_currency_code: str,
    secondary_currency_code: str,
    page_index: int,
) -> SignedRequestPayload:
    """주문 목록 요청

    primaryCurrencyCode, secondaryCurrencyCode, pageIndex, pageSize
    """
    params: Params = (
        ("primaryCurrencyCode", primary_currency_code),
        ("secondaryCurrencyCode", secondary_currency_code),
        ("pageIndex", page_index),
        ("pageSize", PAGE_SIZE),
    )
    return _build(url, credential, nonce, params)


def build_order_guid_payload(
    url: str,
    credential: Credential,
    nonce: int,
    order_guid: str,
) -> SignedRequestPayload:
    """주문 상세 요청: orderGuid"""
    params: Params = (("orderGuid", order_guid),)
    return _build(url, credential, nonce, params)


def build_transaction_guid_payload(
    url: str,
    credential: Credential,
    nonce: int,
    transaction_guid: str,
) -> SignedRequestPayload:
    """출금 상세 요청: transactionGuid"""
    params: Params = (("transactionGuid", transaction_guid),)
    return _build(url, credential, nonce, params)
