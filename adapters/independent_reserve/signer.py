"""
Independent Reserve 요청 서명

HMAC-SHA256 서명 생성. 상태 없는 순수 함수.
"""

import hashlib
import hmac


def sign(message: str, secret: bytes) -> str:
    """HMAC-SHA256 서명 생성

    키 길이 제한 없음 (블록 크기보다 긴 키는 HMAC 규칙대로 먼저 해시됨).

    Args:
        message: 서명할 canonical message
        secret: API 시크릿 (raw bytes)

    Returns:
        소문자 16진수 서명 문자열 (64자)
    """
    return hmac.new(
        secret,
        message.encode("utf-8"),
        hashlib.sha256,
    ).hexdigest()
