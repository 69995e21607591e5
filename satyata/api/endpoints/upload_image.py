"""Image upload endpoint."""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, File, UploadFile

from ...infrastructure.dependencies import ServiceContainer, get_service_container

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["images"])


@router.post("/upload-image")
async def upload_image(
    image: Optional[UploadFile] = File(None),
    container: ServiceContainer = Depends(get_service_container),
) -> dict:
    """Upload an image to attach to a fact-check request.

    Returns:
        ``{"imageUrl": ...}`` pointing at the hosted image
    """
    service = container.get_image_upload_service()
    content = None
    if image is not None:
        # One byte past the limit is enough to reject an oversized file.
        content = await image.read(service.max_bytes + 1)
    image_url = await service.upload(
        filename=image.filename if image is not None else None,
        content=content,
        content_type=image.content_type if image is not None else None,
    )
    return {"imageUrl": image_url}
