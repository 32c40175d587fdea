"""
타입 정의 모듈

Enum, Dataclass 등 핵심 타입 정의
모든 Enum은 str을 상속하여 문자열 직렬화 가능
"""

from dataclasses import dataclass, field
from enum import Enum


class OrderSide(str, Enum):
    """시장가 주문 방향

    BUY는 매도 호가(sells)를, SELL은 매수 호가(buys)를 소진한다.
    """

    BUY = "buy"
    SELL = "sell"


@dataclass(frozen=True)
class Credential:
    """API 인증 정보

    secret은 로그, repr, 직렬화 어디에도 노출되지 않는다.

    Attributes:
        key: API 키
        secret: API 시크릿 (raw bytes)
    """

    key: str
    secret: bytes = field(repr=False)

    @classmethod
    def from_strings(cls, key: str, secret: str) -> "Credential":
        """설정 파일의 문자열 키/시크릿으로 생성"""
        return cls(key=key, secret=secret.encode("utf-8"))

    @property
    def masked_key(self) -> str:
        """로깅용 마스킹된 API 키"""
        if len(self.key) <= 8:
            return "***"
        return f"{self.key[:4]}...{self.key[-4:]}"
