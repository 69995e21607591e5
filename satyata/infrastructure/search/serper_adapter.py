"""Serper implementation of the search provider interface."""

import logging
from typing import Optional

import httpx
from pydantic import BaseModel, Field, ValidationError

from ...domain.errors import SearchProviderError
from ...domain.models.search import AnswerBox, SearchContext, SearchResult
from ...domain.ports.search_provider import SearchProvider
from ..config import is_configured, require_api_key

logger = logging.getLogger(__name__)


class SerperConfig(BaseModel):
    """Configuration for Serper adapter."""

    api_key: str = Field(..., description="Serper API key")
    base_url: str = Field(default="https://google.serper.dev", description="API base URL")
    timeout: float = Field(default=10.0, description="Request timeout in seconds")
    country: str = Field(default="bd", description="Search region (gl)")
    language: str = Field(default="bn", description="Interface language (hl)")
    safe: str = Field(default="active", description="Safe search mode")
    default_num_results: int = Field(default=5, description="Results per query")


class SerperSearchAdapter(SearchProvider):
    """Google search through the Serper API, scoped to Bangladesh and Bengali."""

    def __init__(
        self,
        config: Optional[SerperConfig] = None,
        provider_name: str = "Serper",
    ):
        """Initialize the adapter."""
        self._config = config or SerperConfig(api_key="")
        self._name = provider_name
        self._client: Optional[httpx.AsyncClient] = None

    async def initialize(self) -> None:
        """Create the HTTP client.

        Raises:
            ConfigurationError: If no usable API key is configured
        """
        api_key = require_api_key(self._config.api_key, "SERPER_API_KEY")
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self._config.base_url,
                timeout=self._config.timeout,
                headers={
                    "X-API-KEY": api_key,
                    "Content-Type": "application/json",
                },
            )

    async def search(self, query: str, num_results: Optional[int] = None) -> SearchContext:
        """Run one search query.

        Args:
            query: Query string, sent as given
            num_results: Maximum number of organic results

        Returns:
            Organic results, answer box and search statistics

        Raises:
            SearchProviderError: If the request fails or returns a non-2xx status
            ConfigurationError: If no usable API key is configured
        """
        if not self._client:
            await self.initialize()

        payload = {
            "q": query,
            "num": num_results or self._config.default_num_results,
            "gl": self._config.country,
            "hl": self._config.language,
            "safe": self._config.safe,
            "type": "search",
        }
        logger.debug(f"Serper query: {query}")

        try:
            response = await self._client.post("/search", json=payload)
        except httpx.HTTPError as e:
            raise SearchProviderError(f"Failed to search: {type(e).__name__}: {e}") from e

        if not response.is_success:
            logger.error(f"❌ Serper API error response: {response.status_code} {response.text[:200]}")
            raise SearchProviderError(
                f"Serper API error: {response.status_code} {response.reason_phrase}",
                status_code=response.status_code,
                reason=response.reason_phrase,
            )

        try:
            return self._parse_response(response.json())
        except (ValueError, ValidationError) as e:
            raise SearchProviderError(f"Unexpected Serper response: {e}") from e

    @staticmethod
    def _parse_response(data: dict) -> SearchContext:
        if not isinstance(data, dict):
            raise ValueError("response body is not a JSON object")
        info = data.get("searchInformation") or {}
        answer_box = data.get("answerBox")
        return SearchContext(
            results=[SearchResult.model_validate(item) for item in data.get("organic") or []],
            answer_box=AnswerBox.model_validate(answer_box) if answer_box else None,
            search_time=str(info.get("time") or "0"),
            total_results=str(info.get("totalResults") or "0"),
        )

    async def shutdown(self) -> None:
        """Close the HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None

    @property
    def provider_name(self) -> str:
        """Get the provider name."""
        return self._name

    @property
    def is_available(self) -> bool:
        """Check if the provider is configured."""
        return is_configured(self._config.api_key)
