"""Service validating user images before handing them to an image host."""

import logging
from typing import Optional

from ..errors import InputValidationError
from ..ports.image_host import ImageHost

logger = logging.getLogger(__name__)

MAX_IMAGE_BYTES = 5 * 1024 * 1024


class ImageUploadService:
    """Validate and upload images attached to a claim."""

    def __init__(self, image_host: ImageHost, max_bytes: int = MAX_IMAGE_BYTES):
        self.host = image_host
        self.max_bytes = max_bytes

    def validate(self, content: Optional[bytes], content_type: Optional[str]) -> None:
        """Reject missing files, non-images and oversized images.

        Raises:
            InputValidationError: With a message suitable for the user
        """
        if not content:
            raise InputValidationError("No image file provided")
        if not content_type or not content_type.startswith("image/"):
            raise InputValidationError("File must be an image")
        if len(content) > self.max_bytes:
            raise InputValidationError(
                f"File size must be less than {self.max_bytes // (1024 * 1024)}MB"
            )

    async def upload(
        self,
        filename: Optional[str],
        content: Optional[bytes],
        content_type: Optional[str],
    ) -> str:
        """Validate an image and return the hosted URL."""
        self.validate(content, content_type)
        logger.info(f"🖼️ Uploading image {filename!r} ({len(content)} bytes)")
        url = await self.host.upload(filename or "image", content, content_type)
        logger.info(f"✅ Image uploaded: {url}")
        return url
