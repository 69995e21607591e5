"""Tests for image upload validation."""

from unittest.mock import AsyncMock

import pytest

from satyata.domain.errors import ImageHostError, InputValidationError
from satyata.domain.services.image_upload_service import MAX_IMAGE_BYTES, ImageUploadService


@pytest.fixture
def image_host():
    host = AsyncMock()
    host.upload.return_value = "https://i.ibb.co/abc/photo.jpg"
    return host


@pytest.fixture
def service(image_host):
    return ImageUploadService(image_host)


@pytest.mark.asyncio
async def test_upload_returns_hosted_url(service, image_host):
    url = await service.upload("photo.jpg", b"\xff\xd8\xff" * 10, "image/jpeg")

    assert url == "https://i.ibb.co/abc/photo.jpg"
    image_host.upload.assert_awaited_once_with("photo.jpg", b"\xff\xd8\xff" * 10, "image/jpeg")


@pytest.mark.asyncio
async def test_upload_without_filename(service, image_host):
    await service.upload(None, b"png", "image/png")

    assert image_host.upload.await_args.args[0] == "image"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "content, content_type, message",
    [
        (None, "image/png", "No image file provided"),
        (b"", "image/png", "No image file provided"),
        (b"%PDF-1.4", "application/pdf", "File must be an image"),
        (b"data", None, "File must be an image"),
        (b"x" * (MAX_IMAGE_BYTES + 1), "image/png", "File size must be less than 5MB"),
    ],
)
async def test_invalid_images_are_rejected_before_upload(service, image_host, content, content_type, message):
    with pytest.raises(InputValidationError, match=message):
        await service.upload("file", content, content_type)

    image_host.upload.assert_not_awaited()


@pytest.mark.asyncio
async def test_image_at_size_limit_is_accepted(service):
    url = await service.upload("big.png", b"x" * MAX_IMAGE_BYTES, "image/png")

    assert url.startswith("https://")


@pytest.mark.asyncio
async def test_host_errors_propagate(service, image_host):
    image_host.upload.side_effect = ImageHostError("ImageBB upload failed")

    with pytest.raises(ImageHostError):
        await service.upload("photo.jpg", b"jpg", "image/jpeg")
