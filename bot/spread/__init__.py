"""
Spread bot 모듈

호가창 체결 스프레드를 주기적으로 관찰하고 리포트 파일에 기록.
"""

from bot.spread.report import ReportWriter
from bot.spread.runner import SpreadBot
from bot.spread.stats import SpreadStats

__all__ = [
    "ReportWriter",
    "SpreadBot",
    "SpreadStats",
]
