"""
Bot 진입점

실행 방법:
    python -m bot check
    python -m bot spread-bot
    python -m bot --dump-config
"""

from bot.bootstrap import cli

if __name__ == "__main__":
    cli()
