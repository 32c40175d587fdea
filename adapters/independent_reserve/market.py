"""
Independent Reserve 마켓 파사드

하나의 통화쌍(기본 Xbt/Aud)에 대한 Public/Private 클라이언트 묶음.
호가창 원시 응답을 도메인 OrderBook으로 변환해 제공.
"""

import logging

from adapters.independent_reserve.private_client import PrivateRestClient
from adapters.independent_reserve.public_client import PublicRestClient
from core.constants import Defaults
from core.domain.orderbook import OrderBook
from core.types import Credential

logger = logging.getLogger(__name__)


class Market:
    """통화쌍 단위 마켓 접근

    Args:
        public: Public 클라이언트 (None이면 기본 생성)
        primary: base 통화 코드
        secondary: quote 통화 코드

    사용 예시:
    ```python
    market = Market().with_read_only(credential)
    book = await market.order_book()
    await market.close()
    ```
    """

    def __init__(
        self,
        public: PublicRestClient | None = None,
        primary: str = Defaults.PRIMARY_CURRENCY,
        secondary: str = Defaults.SECONDARY_CURRENCY,
    ):
        self.public = public if public is not None else PublicRestClient()
        self.private: PrivateRestClient | None = None
        self.primary = primary
        self.secondary = secondary

    def with_read_only(self, credential: Credential) -> "Market":
        """읽기 전용 Private 클라이언트 연결

        nonce 발급기는 여기서 한 번 생성되어 이 클라이언트가 단독 소유한다.
        같은 키를 다시 연결하면 기존 클라이언트(와 nonce 발급기)를 그대로 쓴다.

        Raises:
            RuntimeError: 다른 키가 이미 연결된 경우
        """
        if self.private is not None:
            if self.private.api_key == credential.key:
                logger.debug(
                    "이미 연결된 읽기 전용 키, 기존 클라이언트 유지",
                    extra={"api_key": credential.masked_key},
                )
                return self
            raise RuntimeError("다른 읽기 전용 키가 이미 연결되어 있습니다")

        self.private = PrivateRestClient(credential)
        logger.info(
            "읽기 전용 키 연결",
            extra={"api_key": credential.masked_key},
        )
        return self

    @property
    def pair(self) -> str:
        return f"{self.primary}/{self.secondary}"

    async def order_book(self) -> OrderBook:
        """현재 호가창 조회"""
        raw = await self.public.get_order_book(self.primary, self.secondary)
        return raw.to_order_book()

    async def close(self) -> None:
        """HTTP 클라이언트 종료"""
        await self.public.close()
        if self.private is not None:
            await self.private.close()
