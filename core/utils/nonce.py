"""
Nonce 발급기

Private API 요청마다 사용할 nonce 값을 발급.
거래소는 동일 API 키에 대해 nonce가 매 요청 증가하지 않으면 요청을 거부한다.

규칙:
- 생성 시점에 벽시계 시간(Unix 초)을 한 번 읽어 seed로 사용
- 첫 호출은 seed, 이후 호출은 직전 값 + 1
- 하나의 API 키는 하나의 NonceSource만 사용해야 함
"""

import logging
import threading
import time
from typing import Callable

logger = logging.getLogger(__name__)

# u64 상한
MAX_NONCE = 2**64 - 1


def _wall_clock_seconds() -> int:
    return int(time.time())


class NonceSource:
    """API 키 단위 단조 증가 nonce 카운터

    증가와 읽기를 하나의 Lock 안에서 수행하므로
    여러 호출자가 동시에 next()를 호출해도 같은 값이 두 번 나오지 않는다.

    Args:
        clock: seed용 시계 함수 (Unix 초 반환, 테스트에서 주입)

    사용 예시:
    ```python
    nonces = NonceSource()
    first = nonces.next()
    second = nonces.next()  # first + 1
    ```
    """

    def __init__(self, clock: Callable[[], int] = _wall_clock_seconds):
        self._lock = threading.Lock()
        self._seed = self._read_seed(clock)
        self._next = self._seed

    @staticmethod
    def _read_seed(clock: Callable[[], int]) -> int:
        """seed 읽기 (시계를 사용할 수 없으면 0, 재시도 없음)"""
        try:
            seed = int(clock())
        except (OSError, OverflowError, ValueError) as e:
            logger.warning(
                "시계를 읽을 수 없어 nonce seed를 0으로 설정",
                extra={"error": str(e)},
            )
            return 0

        if seed < 0 or seed > MAX_NONCE:
            logger.warning(
                "nonce seed가 범위를 벗어나 0으로 설정",
                extra={"seed": seed},
            )
            return 0
        return seed

    @property
    def seed(self) -> int:
        """생성 시점에 읽은 seed"""
        return self._seed

    def next(self) -> int:
        """다음 nonce 발급

        Returns:
            직전 발급값보다 정확히 1 큰 값 (첫 호출은 seed)
        """
        with self._lock:
            nonce = self._next
            self._next += 1
        return nonce

    def peek(self) -> int:
        """다음에 발급될 값 (소비하지 않음)"""
        with self._lock:
            return self._next
