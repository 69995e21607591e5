"""FastAPI application for the Satyata fact-checking service."""

import contextlib
import logging
import os

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

# Load environment variables from .env file
load_dotenv()

from .. import __version__
from ..domain.errors import (
    ConfigurationError,
    FactCheckError,
    InputValidationError,
    ProviderUnavailableError,
    RateLimitExceeded,
)
from ..infrastructure.config import env_list
from ..infrastructure.dependencies import get_service_container
from .endpoints import fact_check, health, upload_image

# Configure logging
logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@contextlib.asynccontextmanager
async def lifespan(app: FastAPI):
    """Build the service container on startup and close providers on shutdown."""
    container = get_service_container()
    yield  # Application runs here
    await container.shutdown()


# Create FastAPI application
app = FastAPI(
    title="Satyata API",
    description="Search-augmented fact-checking for Bengali news",
    version=__version__,
    lifespan=lifespan,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=env_list("CORS_ORIGINS", "*"),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(health.router)
app.include_router(fact_check.router)
app.include_router(upload_image.router)


def _error(status_code: int, message: str, **kwargs) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message}, **kwargs)


@app.exception_handler(InputValidationError)
async def input_validation_handler(request: Request, exc: InputValidationError) -> JSONResponse:
    """Reject invalid claims and images with the validation message."""
    return _error(400, str(exc))


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report malformed request bodies the same way as invalid input."""
    fields = ", ".join(
        f"{'.'.join(str(part) for part in err['loc'][1:]) or 'body'}: {err['msg']}"
        for err in exc.errors()
    )
    return _error(400, f"Validation failed: {fields}")


@app.exception_handler(RateLimitExceeded)
async def rate_limit_handler(request: Request, exc: RateLimitExceeded) -> JSONResponse:
    """Tell the caller when to retry."""
    return _error(429, str(exc), headers={"Retry-After": str(exc.retry_after)})


@app.exception_handler(ConfigurationError)
async def configuration_error_handler(request: Request, exc: ConfigurationError) -> JSONResponse:
    """Fail fast when a provider key is missing, without naming the key."""
    logger.error(f"❌ Configuration error: {exc}")
    return _error(500, "Service is not configured")


@app.exception_handler(ProviderUnavailableError)
async def provider_error_handler(request: Request, exc: ProviderUnavailableError) -> JSONResponse:
    """Hide provider details behind a generic message."""
    logger.error(f"❌ Provider unavailable: {exc}", exc_info=exc)
    return _error(502, "An external service is unavailable. Please try again later.")


@app.exception_handler(FactCheckError)
async def fact_check_error_handler(request: Request, exc: FactCheckError) -> JSONResponse:
    """Catch-all for remaining domain errors."""
    logger.error(f"❌ Fact check error: {type(exc).__name__}: {exc}", exc_info=exc)
    return _error(500, "Failed to process request")


def run() -> None:
    """Run the API with uvicorn."""
    import uvicorn

    uvicorn.run(
        "satyata.api.app:app",
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "8000")),
    )
