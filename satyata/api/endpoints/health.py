"""Health check endpoints."""

from typing import Dict

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from ... import __version__
from ...infrastructure.dependencies import ServiceContainer, get_service_container

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    version: str
    providers: Dict[str, bool]


@router.get("/health", response_model=HealthResponse)
async def health_check(
    container: ServiceContainer = Depends(get_service_container),
) -> HealthResponse:
    """Report service status and whether each provider is configured."""
    return HealthResponse(
        status="healthy",
        version=__version__,
        providers=container.provider_status(),
    )
