"""In-memory sliding-window rate limiter, keyed by client IP."""
import time
from collections import deque
from typing import Callable


class SlidingWindowLimiter:
    """Allow at most `max_attempts` hits per `window_seconds` for each key.

    Rejected hits are not recorded, so the window always slides off the oldest
    allowed hit. State lives in the process; one instance per app. Keys whose
    hits have all left the window are dropped, at most once per window.
    """

    def __init__(
        self,
        max_attempts: int,
        window_seconds: float,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.max_attempts = max_attempts
        self.window_seconds = window_seconds
        self._clock = clock
        self._hits: dict[str, deque[float]] = {}
        self._last_sweep = clock()

    def __len__(self) -> int:
        return len(self._hits)

    def hit(self, key: str) -> bool:
        """Record an attempt for key; return False if the key is over the limit."""
        now = self._clock()
        if now - self._last_sweep >= self.window_seconds:
            self._sweep(now)

        hits = self._hits.setdefault(key, deque())
        self._prune(hits, now)
        if len(hits) >= self.max_attempts:
            return False
        hits.append(now)
        return True

    def _prune(self, hits: deque[float], now: float) -> None:
        while hits and now - hits[0] >= self.window_seconds:
            hits.popleft()

    def _sweep(self, now: float) -> None:
        for key in list(self._hits):
            hits = self._hits[key]
            self._prune(hits, now)
            if not hits:
                del self._hits[key]
        self._last_sweep = now
