"""Port interface for image hosting services."""

from typing import Protocol


class ImageHost(Protocol):
    """Protocol for services that store an image and return a public URL."""

    async def upload(self, filename: str, content: bytes, content_type: str) -> str:
        """Upload an image and return its public URL."""
        ...

    async def shutdown(self) -> None:
        """Release network resources."""
        ...

    @property
    def is_available(self) -> bool:
        """Check if the host is configured."""
        ...
