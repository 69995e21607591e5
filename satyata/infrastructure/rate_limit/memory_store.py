"""In-process rate-limit store with TTL eviction."""

import threading
from typing import Callable, Optional

from cachetools import TTLCache

from ...domain.models.rate_limit import RateLimitState
from ...domain.ports.rate_limit_store import RateLimitStore

DEFAULT_TTL_SECONDS = 24 * 60 * 60
DEFAULT_MAX_KEYS = 100_000


class InMemoryRateLimitStore(RateLimitStore):
    """Rate-limit counters held in a bounded TTLCache.

    Entries expire ``ttl`` seconds after their last write, so callers that
    stop sending requests are evicted. The TTL must cover the longest window
    the limiter tracks. Counters are lost on restart.
    """

    def __init__(self, ttl: float = DEFAULT_TTL_SECONDS, maxsize: int = DEFAULT_MAX_KEYS):
        self._cache: TTLCache = TTLCache(maxsize=maxsize, ttl=ttl)
        self._lock = threading.Lock()

    def get(self, key: str) -> Optional[RateLimitState]:
        with self._lock:
            return self._cache.get(key)

    def update(
        self,
        key: str,
        mutate: Callable[[Optional[RateLimitState]], RateLimitState],
    ) -> RateLimitState:
        with self._lock:
            state = mutate(self._cache.get(key))
            self._cache[key] = state
            return state

    def clear(self) -> None:
        with self._lock:
            self._cache.clear()

    def __len__(self) -> int:
        with self._lock:
            self._cache.expire()
            return len(self._cache)
