"""Fixed-window request throttling per caller."""

import logging
import time
from typing import Callable, Optional

from ..errors import RateLimitExceeded
from ..models.rate_limit import RateLimitDecision, RateLimitState
from ..ports.rate_limit_store import RateLimitStore

logger = logging.getLogger(__name__)

DEFAULT_MAX_REQUESTS = 10
DEFAULT_WINDOW_SECONDS = 60.0
DEFAULT_MAX_REQUESTS_PER_DAY = 100
DAY_SECONDS = 24 * 60 * 60.0


class RateLimiter:
    """Fixed-window limiter with a secondary daily ceiling.

    Each key may make ``max_requests`` requests per ``window_seconds`` and
    ``max_requests_per_day`` requests per day. Windows start at the first
    request after the previous window expired. Denied requests do not count.
    """

    def __init__(
        self,
        store: RateLimitStore,
        max_requests: int = DEFAULT_MAX_REQUESTS,
        window_seconds: float = DEFAULT_WINDOW_SECONDS,
        max_requests_per_day: Optional[int] = DEFAULT_MAX_REQUESTS_PER_DAY,
        clock: Callable[[], float] = time.time,
    ):
        self._store = store
        self.max_requests = max_requests
        self.window_seconds = window_seconds
        self.max_requests_per_day = max_requests_per_day
        self._clock = clock

    def check(self, key: str) -> RateLimitDecision:
        """Record a request for ``key`` and report whether it is allowed."""
        now = self._clock()
        decision: Optional[RateLimitDecision] = None

        def mutate(state: Optional[RateLimitState]) -> RateLimitState:
            nonlocal decision
            if state is None:
                state = RateLimitState(
                    count=0,
                    window_reset_at=now + self.window_seconds,
                    daily_count=0,
                    day_reset_at=now + DAY_SECONDS,
                )
            if now >= state.day_reset_at:
                state.daily_count = 0
                state.day_reset_at = now + DAY_SECONDS
            if now >= state.window_reset_at:
                state.count = 0
                state.window_reset_at = now + self.window_seconds

            if self.max_requests_per_day is not None and state.daily_count >= self.max_requests_per_day:
                decision = RateLimitDecision(False, 0, state.day_reset_at, now)
            elif state.count >= self.max_requests:
                decision = RateLimitDecision(False, 0, state.window_reset_at, now)
            else:
                state.count += 1
                state.daily_count += 1
                decision = RateLimitDecision(
                    True, self.max_requests - state.count, state.window_reset_at, now
                )
            return state

        self._store.update(key, mutate)
        return decision

    def enforce(self, key: str) -> RateLimitDecision:
        """Like ``check`` but raise when the request is denied.

        Raises:
            RateLimitExceeded: With the number of seconds until the blocking
                window resets
        """
        decision = self.check(key)
        if not decision.allowed:
            logger.warning(f"🚦 Rate limit exceeded for {key}, retry in {decision.retry_after}s")
            raise RateLimitExceeded(decision.retry_after)
        return decision
