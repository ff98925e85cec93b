"""Token bucket throttle shared by all outbound requests."""

import logging
import threading
import time
from typing import Callable

from ..config import RATE_LIMIT_BURST, REQUESTS_PER_SECOND

logger = logging.getLogger(__name__)

# Float refill drift must not leave the bucket a hair short of a token
TOKEN_EPSILON = 1e-9
MIN_WAIT_SECONDS = 1e-6


class TokenBucket:
    """
    Token bucket rate limiter.

    Tokens refill continuously at ``rate`` per second up to ``capacity``.
    The bucket starts full, so the first ``capacity`` requests go out
    immediately and the rest are spaced ``1 / rate`` seconds apart.
    """

    def __init__(
        self,
        rate: float = REQUESTS_PER_SECOND,
        capacity: float = RATE_LIMIT_BURST,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ):
        if rate <= 0:
            raise ValueError("rate must be positive")
        if capacity < 1:
            raise ValueError("capacity must be at least one token")
        self.rate = float(rate)
        self.capacity = float(capacity)
        self._clock = clock
        self._sleep = sleep
        self._tokens = self.capacity
        self._last_refill = clock()
        self._lock = threading.Lock()

    @property
    def available(self) -> float:
        """Tokens currently in the bucket."""
        with self._lock:
            self._refill()
            return self._tokens

    def _refill(self):
        now = self._clock()
        elapsed = max(0.0, now - self._last_refill)
        self._tokens = min(self.capacity, self._tokens + elapsed * self.rate)
        self._last_refill = now

    def acquire(self, tokens: int = 1):
        """Block until ``tokens`` are available, then consume them."""
        if tokens > self.capacity:
            raise ValueError(
                f"Cannot acquire {tokens} tokens from a bucket of {self.capacity:g}"
            )
        with self._lock:
            while True:
                self._refill()
                if self._tokens + TOKEN_EPSILON >= tokens:
                    self._tokens = max(0.0, self._tokens - tokens)
                    return
                wait = max((tokens - self._tokens) / self.rate, MIN_WAIT_SECONDS)
                logger.debug(f"Rate limit reached, waiting {wait:.3f}s")
                self._sleep(wait)
