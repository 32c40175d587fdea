"""
로깅 설정

모든 명령(check, spread-bot)이 root 로거 하나를 공유한다.
- 콘솔(stdout): 기본 INFO, --verbose면 DEBUG
- 파일: logs/bot/<process>.log, 자정마다 교체

호가창 샘플 로그는 DEBUG라 기본 콘솔에는 나오지 않는다.
"""

import logging
import sys
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path

from core.constants import Paths

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
LOG_FILE_BACKUP_COUNT = 7

# httpx는 INFO에서 요청 URL을 남긴다
NOISY_LOGGERS = ("httpcore", "httpx", "asyncio", "urllib3")


def get_log_dir(process_name: str) -> Path:
    """프로세스별 로그 디렉토리 (bot 계열은 logs/bot)"""
    if process_name == "bot":
        return Paths.BOT_LOGS_DIR
    return Paths.LOGS_DIR


def get_log_file_path(process_name: str) -> Path:
    return get_log_dir(process_name) / f"{process_name}.log"


def _console_handler(level: int, formatter: logging.Formatter) -> logging.Handler:
    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(formatter)
    return handler


def _daily_file_handler(path: Path, level: int, formatter: logging.Formatter) -> logging.Handler:
    handler = TimedRotatingFileHandler(
        filename=path,
        when="midnight",
        backupCount=LOG_FILE_BACKUP_COUNT,
        encoding="utf-8",
    )
    # 교체된 파일: bot.log.2026-10-19
    handler.suffix = "%Y-%m-%d"
    handler.setLevel(level)
    handler.setFormatter(formatter)
    return handler


def setup_logging(
    process_name: str,
    console_level: int = logging.INFO,
    file_level: int = logging.INFO,
    log_dir: Path | None = None,
) -> logging.Logger:
    """root 로거 초기화

    이전 핸들러는 제거하므로 여러 번 호출해도 로그가 중복되지 않는다.

    Args:
        process_name: 로그 파일 이름 (예: "bot" -> bot.log)
        console_level: 콘솔 레벨
        file_level: 파일 레벨
        log_dir: 로그 디렉토리 (None이면 get_log_dir 결과)

    Returns:
        root Logger
    """
    directory = log_dir if log_dir is not None else get_log_dir(process_name)
    directory.mkdir(parents=True, exist_ok=True)
    log_file = directory / f"{process_name}.log"

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(min(console_level, file_level))
    root.addHandler(_console_handler(console_level, formatter))
    root.addHandler(_daily_file_handler(log_file, file_level, formatter))

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    root.info(
        f"로깅 초기화: {process_name} "
        f"(console={logging.getLevelName(console_level)}, "
        f"file={log_file} {logging.getLevelName(file_level)})"
    )
    return root
