"""Dependency injection configuration for hexagonal architecture."""

import logging
import os
from functools import lru_cache
from typing import Any, Dict

from dotenv import load_dotenv

from ..domain.services.fact_checking_service import FactCheckingService
from ..domain.services.image_upload_service import ImageUploadService
from ..domain.services.rate_limiter import RateLimiter
from .ai.factory import AIProviderFactory
from .config import is_configured
from .image.imgbb_adapter import ImgBBAdapter, ImgBBConfig
from .rate_limit.memory_store import InMemoryRateLimitStore
from .search.serper_adapter import SerperConfig, SerperSearchAdapter

load_dotenv()

logger = logging.getLogger(__name__)


class ServiceContainer:
    """Service container for dependency injection."""

    def __init__(self):
        """Initialize service container."""
        self._services: Dict[str, Any] = {}
        self.ai_factory = AIProviderFactory()
        self._setup_services()

    def _setup_services(self):
        """Setup all services and their dependencies."""
        logger.info("🔧 Setting up service container...")

        serper_api_key = os.getenv("SERPER_API_KEY", "")
        if not is_configured(serper_api_key):
            logger.warning("⚠️ SERPER_API_KEY not found in environment variables")
        imagebb_api_key = os.getenv("IMAGEBB_API_KEY", "")
        if not is_configured(imagebb_api_key):
            logger.warning("⚠️ IMAGEBB_API_KEY not found in environment variables")
        if not is_configured(os.getenv("OPENAI_API_KEY", "")):
            logger.warning("⚠️ OPENAI_API_KEY not found in environment variables")

        # Infrastructure adapters
        search_provider = SerperSearchAdapter(config=SerperConfig(api_key=serper_api_key))
        image_host = ImgBBAdapter(config=ImgBBConfig(api_key=imagebb_api_key))
        rate_limit_store = InMemoryRateLimitStore()

        # Register services
        self._services = {
            "search_provider": search_provider,
            "image_host": image_host,
            "rate_limit_store": rate_limit_store,
            "rate_limiter": RateLimiter(rate_limit_store),
            "image_upload_service": ImageUploadService(image_host),
            "fact_checking_service": None,  # Created on first use, needs the AI provider
        }

        logger.info("✅ Service container setup completed")

    async def _ensure_fact_checking_service(self) -> FactCheckingService:
        """Ensure fact checking service is created with providers."""
        if self._services["fact_checking_service"] is None:
            logger.info("🔧 Creating FactCheckingService with providers...")
            ai_provider = self.ai_factory.get_provider("chatgpt")
            if ai_provider is None:
                ai_provider = await self.ai_factory.create_provider("chatgpt")
            search_provider = self.get("search_provider")
            await search_provider.initialize()
            self._services["fact_checking_service"] = FactCheckingService(ai_provider, search_provider)
            logger.info("✅ FactCheckingService created with providers")

        return self._services["fact_checking_service"]

    def get(self, service_name: str) -> Any:
        """Get a service by name.

        Args:
            service_name: Name of the service

        Returns:
            Service instance

        Raises:
            KeyError: If service not found
        """
        if service_name not in self._services:
            raise KeyError(f"Service '{service_name}' not found")
        return self._services[service_name]

    def get_rate_limiter(self) -> RateLimiter:
        """Get the request rate limiter."""
        return self.get("rate_limiter")

    def get_image_upload_service(self) -> ImageUploadService:
        """Get the image upload service."""
        return self.get("image_upload_service")

    async def get_fact_checking_service(self) -> FactCheckingService:
        """Get fact checking service with providers."""
        return await self._ensure_fact_checking_service()

    def provider_status(self) -> Dict[str, bool]:
        """Report which providers are configured or running."""
        status = {name.title(): ready for name, ready in self.ai_factory.available_providers.items()}
        status[self.get("search_provider").provider_name] = self.get("search_provider").is_available
        status["ImgBB"] = self.get("image_host").is_available
        return status

    async def shutdown(self) -> None:
        """Close every provider that holds network resources."""
        await self.ai_factory.shutdown()
        await self.get("search_provider").shutdown()
        await self.get("image_host").shutdown()
        self._services["fact_checking_service"] = None


# Global service container instance
@lru_cache()
def get_service_container() -> ServiceContainer:
    """Get global service container instance.

    Returns:
        Service container instance
    """
    return ServiceContainer()
