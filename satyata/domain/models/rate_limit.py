"""Domain models for per-caller request throttling."""

import math
from dataclasses import dataclass


@dataclass
class RateLimitState:
    """Counters tracked for one caller key."""

    count: int
    window_reset_at: float  # epoch seconds
    daily_count: int
    day_reset_at: float  # epoch seconds


@dataclass(frozen=True)
class RateLimitDecision:
    """Outcome of checking a request against the limiter."""

    allowed: bool
    remaining: int
    reset_at: float
    now: float

    @property
    def retry_after(self) -> int:
        """Whole seconds until the blocking window resets."""
        return max(0, math.ceil(self.reset_at - self.now))

    def to_headers(self) -> dict:
        """Headers advertising the remaining allowance."""
        return {
            "X-RateLimit-Remaining": str(self.remaining),
            "X-RateLimit-Reset": str(int(self.reset_at)),
        }
