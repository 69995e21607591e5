"""Search provider interface for gathering fact-checking context."""

from typing import Protocol

from ..models.search import SearchContext


class SearchProvider(Protocol):
    """Protocol for web search backends."""

    async def initialize(self) -> None:
        """Initialize the provider and verify its configuration."""
        ...

    async def search(self, query: str, num_results: int = 5) -> SearchContext:
        """Run one search query.

        Args:
            query: Query string, sent as given
            num_results: Maximum number of organic results

        Returns:
            Results for the query

        Raises:
            SearchProviderError: If the provider answers unsuccessfully
            ConfigurationError: If the provider has no usable API key
        """
        ...

    async def shutdown(self) -> None:
        """Shutdown the provider and clean up resources."""
        ...

    @property
    def provider_name(self) -> str:
        """Get the provider name."""
        ...

    @property
    def is_available(self) -> bool:
        """Check if the provider is available and ready."""
        ...
