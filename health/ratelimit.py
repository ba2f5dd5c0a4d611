# ============================================================================
# HEALTH ROUTE RATE LIMITER
# ============================================================================
# EPOCH: 1 - UDP MONITOR
# STATUS: Infrastructure - Request admission for health routes
# PURPOSE: Keep a flood of health requests from turning into a UDP flood
# CREATED: 17 OCT 2026
# ============================================================================
"""
Rate limiter for health routes.

Every admitted health request sends a datagram to the monitored service,
so requests are admitted through a sliding window before probing.
"""

import asyncio
import time
from collections import deque
from typing import Deque

from core.config import RateLimitConfig


class RequestRateLimiter:
    """
    Sliding-window rate limiter.

    Admits at most limit_for_period requests in any period_seconds window.
    Rejected requests are not queued.
    """

    def __init__(self, limit_for_period: int = 50, period_seconds: float = 1.0):
        """Initialize rate limiter."""
        self._limit = limit_for_period
        self._period = period_seconds
        self._window: Deque[float] = deque()
        self._lock = asyncio.Lock()

    @classmethod
    def from_config(cls, config: RateLimitConfig) -> "RequestRateLimiter":
        return cls(config.limit_for_period, config.period_seconds)

    def _evict(self, now: float) -> None:
        cutoff = now - self._period
        while self._window and self._window[0] <= cutoff:
            self._window.popleft()

    async def acquire(self) -> bool:
        """Try to take a permit; False if the window is full."""
        async with self._lock:
            now = time.monotonic()
            self._evict(now)

            if len(self._window) >= self._limit:
                return False

            self._window.append(now)
            return True

    @property
    def remaining(self) -> int:
        """Permits left in the current window."""
        self._evict(time.monotonic())
        return max(0, self._limit - len(self._window))


__all__ = [
    "RequestRateLimiter",
]
