"""Protocol for AI providers."""

from typing import Dict, Protocol


class AIProvider(Protocol):
    """Protocol defining the interface for LLM providers."""

    async def initialize(self) -> None:
        """Initialize the AI provider."""
        ...

    async def shutdown(self) -> None:
        """Clean up resources."""
        ...

    async def complete_json(self, system_prompt: str, user_prompt: str) -> str:
        """Run a chat completion constrained to a JSON object.

        Returns the raw text of the first choice. Network, auth and provider
        failures raise ProviderUnavailableError; the content itself is not
        validated here.
        """
        ...

    @property
    def provider_name(self) -> str:
        """Get the name of the AI provider."""
        ...

    @property
    def is_available(self) -> bool:
        """Check if the provider is available and ready."""
        ...

    @property
    def capabilities(self) -> Dict[str, bool]:
        """Get the provider's capabilities."""
        ...
