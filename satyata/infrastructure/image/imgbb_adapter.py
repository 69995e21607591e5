"""ImgBB implementation of the image host interface."""

import logging
from typing import Optional

import httpx
from pydantic import BaseModel, Field

from ...domain.errors import ImageHostError
from ...domain.ports.image_host import ImageHost
from ..config import is_configured, require_api_key

logger = logging.getLogger(__name__)


class ImgBBConfig(BaseModel):
    """Configuration for ImgBB adapter."""

    api_key: str = Field(..., description="ImgBB API key")
    base_url: str = Field(default="https://api.imgbb.com/1", description="API base URL")
    timeout: float = Field(default=30.0, description="Upload timeout in seconds")


class ImgBBAdapter(ImageHost):
    """Uploads images to ImgBB and returns their public URL."""

    def __init__(self, config: Optional[ImgBBConfig] = None):
        """Initialize the adapter."""
        self._config = config or ImgBBConfig(api_key="")
        self._client: Optional[httpx.AsyncClient] = None

    def _ensure_client(self) -> httpx.AsyncClient:
        require_api_key(self._config.api_key, "IMAGEBB_API_KEY")
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self._config.base_url,
                timeout=self._config.timeout,
            )
        return self._client

    async def upload(self, filename: str, content: bytes, content_type: str) -> str:
        """Upload an image as multipart form data.

        Raises:
            ImageHostError: If the upload fails or ImgBB reports no success
            ConfigurationError: If no usable API key is configured
        """
        client = self._ensure_client()
        try:
            response = await client.post(
                "/upload",
                params={"key": self._config.api_key.strip()},
                files={"image": (filename, content, content_type)},
            )
        except httpx.HTTPError as e:
            raise ImageHostError(f"Failed to upload image: {type(e).__name__}") from e

        if not response.is_success:
            logger.error(f"❌ ImgBB upload failed with status {response.status_code}")
            raise ImageHostError("Failed to upload image to ImageBB")

        try:
            result = response.json()
        except ValueError as e:
            raise ImageHostError("ImageBB returned an invalid response") from e

        if not isinstance(result, dict) or not result.get("success"):
            raise ImageHostError("ImageBB upload failed")
        url = (result.get("data") or {}).get("url")
        if not url:
            raise ImageHostError("ImageBB upload failed")
        return url

    async def shutdown(self) -> None:
        """Close the HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None

    @property
    def is_available(self) -> bool:
        """Check if the host is configured."""
        return is_configured(self._config.api_key)
