"""
Independent Reserve HTTP 공통 로직

Public/Private 클라이언트가 공유하는 httpx 클라이언트 관리, 재시도, 에러 변환.
응답 JSON의 실수는 Decimal로 디코딩한다 (float 정밀도 손실 방지).
"""

import asyncio
import logging
from decimal import Decimal
from typing import Any, Callable

import httpx

from core.constants import Defaults

logger = logging.getLogger(__name__)


class IndependentReserveApiError(Exception):
    """Independent Reserve API 에러

    HTTP 에러 응답 또는 응답 매핑 실패 시 발생.
    """

    def __init__(self, status_code: int, message: str):
        self.status_code = status_code
        self.message = message
        super().__init__(f"Independent Reserve API Error [{status_code}]: {message}")


class BaseRestClient:
    """httpx 기반 REST 클라이언트 베이스

    Args:
        base_url: API 베이스 URL
        timeout: 요청 타임아웃 (초)
        max_retries: 최대 시도 횟수 (타임아웃/전송 오류 시)
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = Defaults.HTTP_TIMEOUT_SEC,
        max_retries: int = Defaults.HTTP_MAX_RETRIES,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.max_retries = max(1, max_retries)
        self._client: httpx.AsyncClient | None = None

    def build_url(self, method_name: str) -> str:
        """API 메서드 이름으로 전체 URL 생성 (예: .../Private/GetTrades)"""
        return f"{self.base_url}/{method_name}"

    async def _get_client(self) -> httpx.AsyncClient:
        """HTTP 클라이언트 가져오기 (lazy initialization)"""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(timeout=self.timeout)
        return self._client

    async def close(self) -> None:
        """HTTP 클라이언트 종료"""
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def _send(
        self,
        method: str,
        method_name: str,
        build_kwargs: Callable[[], dict[str, Any]],
    ) -> Any:
        """API 요청 실행

        Args:
            method: HTTP 메서드 (GET, POST)
            method_name: API 메서드 이름 (예: GetOrderBook)
            build_kwargs: 매 시도마다 호출되는 요청 인자 생성 함수
                (서명 요청은 재시도마다 새 nonce/서명이 필요)

        Returns:
            JSON 응답

        Raises:
            IndependentReserveApiError: HTTP 에러 응답 시
            httpx.TimeoutException, httpx.RequestError: 재시도 모두 실패 시
        """
        url = self.build_url(method_name)
        client = await self._get_client()

        for attempt in range(self.max_retries):
            kwargs = build_kwargs()
            try:
                response = await client.request(method, url, **kwargs)
            except httpx.TimeoutException:
                logger.warning(
                    "Request timeout",
                    extra={"method_name": method_name, "attempt": attempt + 1},
                )
                if attempt < self.max_retries - 1:
                    await asyncio.sleep(1 * (attempt + 1))
                    continue
                raise
            except httpx.RequestError as e:
                logger.error(
                    "Request error",
                    extra={"method_name": method_name, "error": str(e), "attempt": attempt + 1},
                )
                if attempt < self.max_retries - 1:
                    await asyncio.sleep(1 * (attempt + 1))
                    continue
                raise

            if response.status_code >= 400:
                message = self._error_message(response)
                logger.error(
                    f"Independent Reserve API error: {response.status_code} - {message}",
                    extra={"method_name": method_name},
                )
                raise IndependentReserveApiError(response.status_code, message)

            try:
                return response.json(parse_float=Decimal)
            except ValueError as e:
                logger.error(
                    "응답 JSON 디코딩 실패",
                    extra={"method_name": method_name, "error": str(e)},
                )
                raise IndependentReserveApiError(
                    response.status_code, f"invalid JSON in {method_name} response"
                ) from e

        # max_retries >= 1 이므로 도달하지 않음
        raise IndependentReserveApiError(-1, "All retries failed")

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        try:
            error_data = response.json()
        except ValueError:
            return response.text
        if isinstance(error_data, dict) and error_data.get("Message"):
            return str(error_data["Message"])
        return response.text


def map_response(method_name: str, parser: Callable[[Any], Any], data: Any) -> Any:
    """응답 매핑 (실패 시 IndependentReserveApiError로 변환)"""
    try:
        return parser(data)
    except (KeyError, TypeError, AttributeError, ArithmeticError, ValueError) as e:
        logger.error(
            "응답 매핑 실패",
            extra={"method_name": method_name, "error": repr(e)},
        )
        raise IndependentReserveApiError(-1, f"unexpected {method_name} response: {e!r}") from e
