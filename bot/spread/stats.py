"""
스프레드 통계

리포트 주기 동안의 스프레드 최소/최대값과 비율 구간별 횟수를 누적.
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from core.domain.orderbook import FillSpread
from core.utils.numeric import to_fiat_string, to_percent_string
from core.utils.timezone import format_local

# 비율 구간 경계 (0.002 = 0.2%)
BUCKET_LOW = Decimal("0.002")
BUCKET_MID = Decimal("0.003")
BUCKET_HIGH = Decimal("0.004")


@dataclass
class SpreadStats:
    """스프레드 누적 통계

    샘플이 없으면 min/max는 None ("no data")으로 남는다.

    Attributes:
        min_spread / max_spread: 스프레드 최소/최대 (quote 통화)
        min_ratio / max_ratio: 중간가 대비 비율 최소/최대
        less_than_two: 비율 < 0.2%
        two_to_three: 0.2% <= 비율 < 0.3%
        three_to_four: 0.3% <= 비율 < 0.4%
        four_or_more: 비율 >= 0.4%
    """

    min_spread: Decimal | None = None
    max_spread: Decimal | None = None
    min_ratio: Decimal | None = None
    max_ratio: Decimal | None = None

    less_than_two: int = 0
    two_to_three: int = 0
    three_to_four: int = 0
    four_or_more: int = 0

    @property
    def samples(self) -> int:
        return self.less_than_two + self.two_to_three + self.three_to_four + self.four_or_more

    def record(self, fill: FillSpread) -> None:
        """샘플 하나 반영"""
        spread = fill.spread
        ratio = fill.spread_ratio

        if self.min_spread is None or spread < self.min_spread:
            self.min_spread = spread
        if self.max_spread is None or spread > self.max_spread:
            self.max_spread = spread
        if self.min_ratio is None or ratio < self.min_ratio:
            self.min_ratio = ratio
        if self.max_ratio is None or ratio > self.max_ratio:
            self.max_ratio = ratio

        if ratio < BUCKET_LOW:
            self.less_than_two += 1
        elif ratio < BUCKET_MID:
            self.two_to_three += 1
        elif ratio < BUCKET_HIGH:
            self.three_to_four += 1
        else:
            self.four_or_more += 1

    def reset(self) -> None:
        self.min_spread = None
        self.max_spread = None
        self.min_ratio = None
        self.max_ratio = None
        self.less_than_two = 0
        self.two_to_three = 0
        self.three_to_four = 0
        self.four_or_more = 0

    def counts_line(self) -> str:
        return (
            "spread counts % <0.2  0.2-0.3  0.3-0.4  >0.4 :"
            f"\t{self.less_than_two}\t{self.two_to_three}"
            f"\t{self.three_to_four}\t{self.four_or_more}"
        )

    def summary(self) -> str:
        """min/max 요약 (샘플 없으면 'no data')"""
        if (
            self.min_spread is None
            or self.max_spread is None
            or self.min_ratio is None
            or self.max_ratio is None
        ):
            return "spread no data"
        return (
            f"spread min: {to_fiat_string(self.min_spread)} max: {to_fiat_string(self.max_spread)}"
            f" \t percent min: {to_percent_string(self.min_ratio)}"
            f" max: {to_percent_string(self.max_ratio)}"
        )

    def report_line(self, now: datetime) -> str:
        """리포트 파일 한 줄"""
        return f"{format_local(now)} {self.counts_line()} \t {self.summary()}"
