"""Port interface for rate-limit state storage."""

from typing import Callable, Optional, Protocol

from ..models.rate_limit import RateLimitState


class RateLimitStore(Protocol):
    """Keyed storage for rate-limit counters.

    ``update`` runs a read-modify-write for one key atomically with respect
    to other callers of the same store.
    """

    def get(self, key: str) -> Optional[RateLimitState]:
        """Return the current state for a key, if any."""
        ...

    def update(
        self,
        key: str,
        mutate: Callable[[Optional[RateLimitState]], RateLimitState],
    ) -> RateLimitState:
        """Replace the state for a key with ``mutate(current)`` and return it."""
        ...

    def clear(self) -> None:
        """Drop all stored state."""
        ...
