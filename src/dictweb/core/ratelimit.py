# src/dictweb/core/ratelimit.py
"""
Token bucket shared by every route.

Tokens come back one per `interval` seconds, up to `capacity`. A request
that finds the bucket empty is turned away at once; nothing queues.
This is one global budget for the whole server, not per client.
"""

import threading
import time
from typing import Callable


class TokenBucket:
    def __init__(
        self,
        capacity: int = 1,
        interval: float = 1.0,
        clock: Callable[[], float] = time.monotonic,
    ):
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self.interval = interval
        self._clock = clock
        self._lock = threading.Lock()
        self._tokens = float(capacity)
        self._updated = clock()

    @property
    def enabled(self) -> bool:
        return self.interval > 0

    def _refill(self, now: float):
        elapsed = now - self._updated
        if elapsed <= 0:
            return
        self._tokens = min(self.capacity, self._tokens + elapsed / self.interval)
        self._updated = now

    def try_acquire(self) -> bool:
        """Take a token if one is there. Never blocks."""
        if not self.enabled:
            return True
        with self._lock:
            self._refill(self._clock())
            if self._tokens >= 1:
                self._tokens -= 1
                return True
            return False

    def retry_after(self) -> float:
        """Seconds until the next token."""
        if not self.enabled:
            return 0.0
        with self._lock:
            self._refill(self._clock())
            missing = 1 - self._tokens
            return max(0.0, missing * self.interval)
