"""
Independent Reserve 어댑터

Public API(시장 데이터)와 읽기 전용 Private API(계좌/주문 조회) 연동.
Private 요청은 HMAC-SHA256 서명과 단조 증가 nonce를 사용.
"""

from adapters.independent_reserve.base_client import IndependentReserveApiError
from adapters.independent_reserve.market import Market
from adapters.independent_reserve.private_client import PrivateRestClient
from adapters.independent_reserve.public_client import PublicRestClient
from adapters.independent_reserve.request_builder import SignedRequestPayload, canonical_message
from adapters.independent_reserve.signer import sign

__all__ = [
    "IndependentReserveApiError",
    "Market",
    "PrivateRestClient",
    "PublicRestClient",
    "SignedRequestPayload",
    "canonical_message",
    "sign",
]
