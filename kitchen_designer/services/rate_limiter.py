"""클라이언트별 슬라이딩 윈도우 요청 제한"""
import time
from collections import deque
from typing import Callable, Deque, Dict

from .ports import RateLimitDecision


class SlidingWindowRateLimiter:
    """window_seconds 동안 key 당 max_requests 까지 허용

    key 는 클라이언트가 보낸 헤더에서 오므로, 윈도우가 지난 key 는
    check 할 때와 주기적인 sweep 에서 모두 제거한다.
    """

    def __init__(
        self,
        max_requests: int,
        window_seconds: float,
        clock: Callable[[], float] = time.monotonic,
    ):
        if max_requests < 1:
            raise ValueError("max_requests must be at least 1")
        self.max_requests = max_requests
        self.window_seconds = window_seconds
        self._clock = clock
        self._hits: Dict[str, Deque[float]] = {}
        self._last_sweep = clock()

    def check(self, key: str) -> RateLimitDecision:
        now = self._clock()
        self._sweep(now)

        hits = self._hits.get(key)
        if hits is not None:
            self._evict(hits, now)
            if not hits:
                del self._hits[key]
                hits = None

        if hits is not None and len(hits) >= self.max_requests:
            retry_after = self.window_seconds - (now - hits[0])
            return RateLimitDecision(allowed=False, remaining=0, retry_after=retry_after)

        if hits is None:
            hits = self._hits[key] = deque()
        hits.append(now)
        return RateLimitDecision(allowed=True, remaining=self.max_requests - len(hits))

    def reset(self) -> None:
        self._hits.clear()
        self._last_sweep = self._clock()

    def __len__(self) -> int:
        return len(self._hits)

    def _evict(self, hits: Deque[float], now: float) -> None:
        # 윈도우 밖의 기록 제거
        while hits and now - hits[0] >= self.window_seconds:
            hits.popleft()

    def _sweep(self, now: float) -> None:
        # 윈도우 한 번 지날 때마다 전체 key 정리
        if now - self._last_sweep < self.window_seconds:
            return
        self._last_sweep = now
        stale = [key for key, hits in self._hits.items() if now - hits[-1] >= self.window_seconds]
        for key in stale:
            del self._hits[key]
