"""Registry of LLM backends used to produce verdicts."""

import logging
import os
from typing import Callable, Dict, Optional

from ...domain.ports.ai_provider import AIProvider
from .chatgpt_adapter import ChatGPTAdapter, ChatGPTConfig

logger = logging.getLogger(__name__)

ProviderBuilder = Callable[..., AIProvider]


def build_chatgpt(**overrides) -> ChatGPTAdapter:
    """ChatGPT adapter configured from OPENAI_API_KEY and OPENAI_MODEL."""
    overrides.setdefault("api_key", os.getenv("OPENAI_API_KEY", ""))
    overrides.setdefault("model", os.getenv("OPENAI_MODEL", "gpt-4o"))
    return ChatGPTAdapter(config=ChatGPTConfig(**overrides))


class AIProviderFactory:
    """Builds each named provider once and keeps it for reuse.

    A provider is only cached after ``initialize`` succeeds, so a missing
    key is reported again on the next attempt instead of leaving a broken
    client behind.
    """

    def __init__(self):
        self._builders: Dict[str, ProviderBuilder] = {"chatgpt": build_chatgpt}
        self._instances: Dict[str, AIProvider] = {}

    def register_provider(self, name: str, builder: ProviderBuilder) -> None:
        """Make another backend available under ``name``."""
        self._builders[name] = builder

    async def create_provider(self, name: str, **overrides) -> AIProvider:
        """Return the initialized provider for ``name``, building it on first use.

        Raises:
            ValueError: If no provider is registered under ``name``
            ConfigurationError: If the provider is missing its credentials
        """
        if name in self._instances:
            return self._instances[name]
        if name not in self._builders:
            raise ValueError(f"Provider '{name}' not found")

        provider = self._builders[name](**overrides)
        await provider.initialize()
        logger.info(f"🤖 AI provider ready: {provider.provider_name}")
        self._instances[name] = provider
        return provider

    def get_provider(self, name: str) -> Optional[AIProvider]:
        return self._instances.get(name)

    @property
    def available_providers(self) -> Dict[str, bool]:
        """Registered names mapped to whether a ready instance exists."""
        return {
            name: name in self._instances and self._instances[name].is_available
            for name in self._builders
        }

    async def shutdown(self) -> None:
        """Close every built provider."""
        for provider in self._instances.values():
            await provider.shutdown()
        self._instances.clear()
