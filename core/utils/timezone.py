"""
타임존 유틸리티

리포트 파일은 로컬 시간으로 기록한다.
"""

from datetime import datetime, timezone

REPORT_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"


def now_local() -> datetime:
    """현재 로컬 시간 반환 (타임존 명시)"""
    return datetime.now().astimezone()


def format_local(dt: datetime, fmt: str = REPORT_TIME_FORMAT) -> str:
    """datetime을 로컬 시간 문자열로 포맷

    Args:
        dt: datetime 객체 (naive면 UTC로 간주)
        fmt: strftime 포맷 문자열

    Example:
        >>> format_local(datetime(2026, 2, 20, 16, 0, tzinfo=timezone.utc))
        '2026-02-21 01:00:00'
    """
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone().strftime(fmt)
