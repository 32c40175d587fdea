"""
스프레드 리포트 파일 기록
"""

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class ReportWriter:
    """리포트 파일에 한 줄씩 추가 기록

    Args:
        path: 리포트 파일 경로 (없으면 생성)
    """

    def __init__(self, path: Path):
        self.path = path

    def append(self, line: str) -> bool:
        """한 줄 추가

        Returns:
            기록 성공 여부 (실패는 로그만 남기고 봇은 계속 동작)
        """
        try:
            if self.path.parent != Path("."):
                self.path.parent.mkdir(parents=True, exist_ok=True)
            with self.path.open("a", encoding="utf-8") as f:
                f.write(line + "\n")
        except OSError as e:
            logger.error(
                "리포트 파일 기록 실패",
                extra={"path": str(self.path), "error": str(e)},
            )
            return False
        return True
