"""
Bot Bootstrap

명령행 인자 파싱, 설정 로드, 로깅 초기화, 명령 실행.

명령:
- check: Public/읽기 전용 Private API 점검
- spread-bot: 스프레드 관찰 봇 실행
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from adapters.independent_reserve.market import Market
from bot.api_check import CheckResult, check_private_api, check_public_api
from bot.spread.runner import SpreadBot
from core.config.loader import SecretsLoadError, Settings, dump_config, get_settings
from core.logging import setup_logging

logger = logging.getLogger("bot")


def build_parser() -> argparse.ArgumentParser:
    """CLI 파서 생성"""
    parser = argparse.ArgumentParser(
        prog="ir-bot",
        description="Independent Reserve 읽기 전용 클라이언트 및 Spread bot",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        default=None,
        help="설정 파일 경로 (기본: config/secrets.yaml)",
    )
    parser.add_argument(
        "--dump-config",
        action="store_true",
        help="현재 설정을 출력하고 종료 (시크릿 마스킹)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="콘솔에 DEBUG 로그 출력 (매 샘플 스프레드 포함)",
    )
    subparsers = parser.add_subparsers(dest="command")
    subparsers.add_parser("check", help="Public/Private API 점검")
    subparsers.add_parser("spread-bot", help="스프레드 관찰 봇 실행")
    return parser


def _log_results(title: str, results: list[CheckResult]) -> int:
    failed = [r for r in results if not r.ok]
    logger.info(f"{title}: {len(results) - len(failed)}/{len(results)} 성공")
    for result in failed:
        logger.error(f"  - {result.name}: {result.error}")
    return len(failed)


async def run_check(settings: Settings) -> int:
    """API 점검 실행

    Returns:
        실패한 메서드 수
    """
    bot_config = settings.spread_bot
    market = Market(
        primary=bot_config.primary_currency,
        secondary=bot_config.secondary_currency,
    ).with_read_only(settings.read_only)
    assert market.private is not None

    try:
        public_results = await check_public_api(market.public, market.primary, market.secondary)
        private_results = await check_private_api(market.private, market.primary, market.secondary)
    finally:
        await market.close()

    failures = _log_results("Public API", public_results)
    failures += _log_results("Private API (read-only)", private_results)
    return failures


async def run_spread_bot(settings: Settings) -> None:
    """Spread bot 실행 (Ctrl+C로 종료)"""
    bot_config = settings.spread_bot
    market = Market(
        primary=bot_config.primary_currency,
        secondary=bot_config.secondary_currency,
    ).with_read_only(settings.read_only)
    bot = SpreadBot(market, bot_config)

    logger.info(f"Spread bot 루프 시작: {market.pair} (종료: Ctrl+C)")
    try:
        await bot.run()
    except asyncio.CancelledError:
        logger.info("메인 루프 취소됨")
    finally:
        bot.stop()
        await market.close()


async def main(argv: list[str] | None = None) -> int:
    """Bot 메인 함수

    Returns:
        프로세스 종료 코드
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = get_settings(args.config)
    except (SecretsLoadError, ValueError) as e:
        print(f"설정 로드 실패: {e}", file=sys.stderr)
        return 1

    if args.dump_config:
        print(dump_config(settings.secrets), end="")
        return 0

    if args.command is None:
        parser.print_help()
        return 0

    setup_logging("bot", console_level=logging.DEBUG if args.verbose else logging.INFO)
    logger.info("=" * 60)
    logger.info(f"ir-bot 시작: {args.command}")
    logger.info("=" * 60)

    if args.command == "check":
        failures = await run_check(settings)
        return 1 if failures else 0

    await run_spread_bot(settings)
    return 0


def cli() -> None:
    """콘솔 스크립트 진입점"""
    try:
        sys.exit(asyncio.run(main()))
    except KeyboardInterrupt:
        logger.info("Ctrl+C 감지")
