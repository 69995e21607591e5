"""Fact-checking API endpoints."""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Request, Response
from pydantic import BaseModel, ConfigDict, Field

from ...domain.models.claim import Claim
from ...infrastructure.config import env_flag
from ...infrastructure.dependencies import ServiceContainer, get_service_container

# Configure logging
logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["fact-check"])


class FactCheckRequest(BaseModel):
    """Request model for fact-checking a news snippet."""

    model_config = ConfigDict(populate_by_name=True)

    text: str = Field(..., description="News text to fact-check")
    image_url: Optional[str] = Field(None, alias="imageUrl", description="URL from /api/upload-image")


class FactCheckResponse(BaseModel):
    """Response model for a completed fact-check."""

    decision: str
    confidence: int
    summary: str
    investigationSuggestions: List[str]
    sources: List[str]


def get_client_ip(request: Request, trust_proxy_headers: Optional[bool] = None) -> str:
    """Identify the caller for rate limiting.

    Uses the socket peer unless TRUST_PROXY_HEADERS is enabled, in which case
    the first X-Forwarded-For hop, then X-Real-IP, take precedence. Only enable
    it behind a proxy that overwrites these headers; otherwise clients can pick
    a new key on every request.
    """
    if trust_proxy_headers is None:
        trust_proxy_headers = env_flag("TRUST_PROXY_HEADERS")
    if trust_proxy_headers:
        forwarded = request.headers.get("x-forwarded-for")
        if forwarded and forwarded.split(",")[0].strip():
            return forwarded.split(",")[0].strip()
        real_ip = request.headers.get("x-real-ip")
        if real_ip and real_ip.strip():
            return real_ip.strip()
    if request.client and request.client.host:
        return request.client.host
    return "unknown"


@router.post("/fact-check", response_model=FactCheckResponse)
async def fact_check(
    body: FactCheckRequest,
    request: Request,
    response: Response,
    container: ServiceContainer = Depends(get_service_container),
) -> dict:
    """Fact-check a claim against web search results.

    Args:
        body: Claim text and optional image URL

    Returns:
        Decision, confidence, summary, investigation suggestions and sources
    """
    client_ip = get_client_ip(request)
    rate_limit = container.get_rate_limiter().enforce(client_ip)

    claim = Claim.create(body.text, body.image_url)
    logger.info(f"Text: {claim.text[:100]}")
    logger.info(f"Image URL: {claim.image_url or 'No image provided'}")

    service = await container.get_fact_checking_service()
    result = await service.fact_check(claim)

    response.headers.update(rate_limit.to_headers())
    return result.to_dict()
