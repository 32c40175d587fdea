"""
Spread Bot

주기적으로 호가창을 조회해 고정 수량의 매수/매도 체결 스프레드를 기록.
주문은 내지 않는 관찰용 봇.

정책:
- 호가 깊이 부족: INFO 로그 후 이번 주기 건너뜀
- API/네트워크 오류: ERROR 로그 후 이번 주기 건너뜀
- report_period_secs마다 리포트 파일에 한 줄 기록 후 통계 초기화
"""

import asyncio
import logging
from datetime import datetime
from typing import Awaitable, Callable, Protocol

import httpx

from adapters.independent_reserve.base_client import IndependentReserveApiError
from bot.spread.report import ReportWriter
from bot.spread.stats import SpreadStats
from core.config.loader import SpreadBotConfig
from core.domain.orderbook import FillSpread, InsufficientLiquidityError, OrderBook
from core.utils.numeric import to_fiat_string, to_percent_string
from core.utils.timezone import now_local

logger = logging.getLogger(__name__)


class IOrderBookSource(Protocol):
    """호가창 제공자 Protocol (SpreadBot 의존성)"""

    async def order_book(self) -> OrderBook:
        ...


class SpreadBot:
    """스프레드 관찰 봇

    Args:
        market: 호가창 제공자 (adapters.independent_reserve.Market)
        config: Spread bot 설정
        writer: 리포트 기록기 (None이면 config.report_file 사용)
        clock: 리포트 타임스탬프용 시계
        sleep: 대기 함수 (테스트에서 주입)

    사용 예시:
    ```python
    bot = SpreadBot(market, settings.spread_bot)
    await bot.run()
    ```
    """

    def __init__(
        self,
        market: IOrderBookSource,
        config: SpreadBotConfig,
        writer: ReportWriter | None = None,
        clock: Callable[[], datetime] = now_local,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        self.market = market
        self.config = config
        self.writer = writer if writer is not None else ReportWriter(config.report_file)
        self.clock = clock
        self.sleep = sleep

        self.stats = SpreadStats()
        self._cycles_since_report = 0
        self._is_running = False

    @property
    def is_running(self) -> bool:
        return self._is_running

    async def sample(self) -> FillSpread | None:
        """호가창 1회 조회 및 통계 반영

        Returns:
            이번 주기 스프레드, 건너뛴 경우 None
        """
        try:
            book = await self.market.order_book()
        except (IndependentReserveApiError, httpx.HTTPError) as e:
            logger.error(
                "호가창 조회 실패, 이번 주기 건너뜀",
                extra={"error": str(e)},
            )
            return None

        try:
            fill = book.spread_to_fill(self.config.volume)
        except InsufficientLiquidityError as e:
            logger.info(f"failed to get spread: {e}")
            return None

        self.stats.record(fill)
        logger.debug(
            f"\t ${to_fiat_string(fill.spread)} \t %{to_percent_string(fill.spread_ratio)}"
            f" \t {self.stats.counts_line()}"
        )
        return fill

    def write_report(self) -> None:
        """현재 통계를 리포트 파일에 기록"""
        line = self.stats.report_line(self.clock())
        if self.writer.append(line):
            logger.info(f"리포트 기록: {line}")

    async def tick(self) -> FillSpread | None:
        """한 주기: 샘플링 후 리포트 주기가 지났으면 기록/초기화"""
        fill = await self.sample()

        self._cycles_since_report += 1
        elapsed = self._cycles_since_report * self.config.sample_period_secs
        if elapsed >= self.config.report_period_secs:
            self.write_report()
            self.stats.reset()
            self._cycles_since_report = 0

        return fill

    async def run(self, max_cycles: int | None = None) -> None:
        """메인 루프

        Args:
            max_cycles: 최대 주기 수 (None이면 stop() 또는 취소까지)
        """
        self._is_running = True
        logger.info(
            "Spread bot 시작",
            extra={
                "volume": str(self.config.volume),
                "sample_period_secs": self.config.sample_period_secs,
                "report_file": str(self.writer.path),
            },
        )
        logger.info(f"writing min/max values to {self.writer.path}")
        self.write_report()

        cycles = 0
        try:
            while self._is_running:
                await self.tick()
                cycles += 1
                if max_cycles is not None and cycles >= max_cycles:
                    break
                await self.sleep(self.config.sample_period_secs)
        finally:
            self._is_running = False
            logger.info("Spread bot 정지", extra={"cycles": cycles})

    def stop(self) -> None:
        """루프 종료 요청 (현재 주기 이후 종료)"""
        self._is_running = False
