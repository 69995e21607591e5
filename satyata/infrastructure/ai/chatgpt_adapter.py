"""ChatGPT implementation of the AI provider interface."""

import logging
from typing import Dict, Optional

import openai
from openai import AsyncOpenAI
from pydantic import BaseModel, Field

from ...domain.errors import ProviderUnavailableError
from ...domain.ports.ai_provider import AIProvider
from ..config import require_api_key

logger = logging.getLogger(__name__)


class ChatGPTConfig(BaseModel):
    """Configuration for ChatGPT adapter."""

    api_key: str = Field(..., description="OpenAI API key")
    model: str = Field(default="gpt-4o", description="Vision-capable chat model")
    temperature: float = Field(default=0.3, description="Temperature for responses")
    max_tokens: int = Field(default=1000, description="Maximum tokens per response")
    timeout: float = Field(default=60.0, description="API timeout in seconds")


class ChatGPTAdapter(AIProvider):
    """ChatGPT implementation of the AI provider interface."""

    def __init__(self, config: Optional[ChatGPTConfig] = None):
        """Initialize the adapter."""
        self._config = config or ChatGPTConfig(api_key="")
        self._client: Optional[AsyncOpenAI] = None
        self._initialized = False

    async def initialize(self) -> None:
        """Create the OpenAI client.

        Raises:
            ConfigurationError: If no usable API key is configured
        """
        api_key = require_api_key(self._config.api_key, "OPENAI_API_KEY")
        if self._client is None:
            self._client = AsyncOpenAI(api_key=api_key, timeout=self._config.timeout)
        self._initialized = True

    async def complete_json(self, system_prompt: str, user_prompt: str) -> str:
        """Ask the model for a JSON object and return its raw text."""
        if not self._client:
            await self.initialize()

        try:
            completion = await self._client.chat.completions.create(
                model=self._config.model,
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": user_prompt},
                ],
                temperature=self._config.temperature,
                max_tokens=self._config.max_tokens,
                response_format={"type": "json_object"},
            )
        except openai.APIError as e:
            logger.error(f"❌ OpenAI request failed: {type(e).__name__}: {e}")
            raise ProviderUnavailableError(self.provider_name, "chat completion failed") from e

        if not completion.choices:
            return ""
        return completion.choices[0].message.content or ""

    async def shutdown(self) -> None:
        """Clean up resources and shut down the provider."""
        if self._client:
            await self._client.close()
            self._client = None
        self._initialized = False

    @property
    def provider_name(self) -> str:
        """Get the name of the AI provider."""
        return "ChatGPT"

    @property
    def is_available(self) -> bool:
        """Check if the provider is available and ready."""
        return self._initialized and self._client is not None

    @property
    def capabilities(self) -> Dict[str, bool]:
        """Get the provider's capabilities."""
        return {
            "json_mode": True,
            "vision": True,
            "multilingual": True,
        }
