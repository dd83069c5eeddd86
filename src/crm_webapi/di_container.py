"""
Dependency Injection Container

Centralized dependency resolution for clean separation of concerns.
"""

from typing import Dict, Any, Optional
import structlog

from .config import Settings, get_settings
from .factories import EndpointFactory, ResolverFactory, ClientFactory
from .endpoint import IEndpointProvider
from .metadata import IEntitySetResolver, MetadataEntitySetResolver
from .client import IWebApiClient

logger = structlog.get_logger(__name__)


class DIContainer:
    """
    Dependency Injection Container for managing service dependencies.

    Provides lazy initialization and caching of the endpoint provider,
    entity set resolver and Web API client.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()
        self._services: Dict[str, Any] = {}
        self._initialized = False

        logger.info("DI Container initialized",
                    entity_set_resolver=self.settings.entity_set_resolver,
                    webapi_client=self.settings.webapi_client)

    async def initialize(self) -> None:
        """Initialize all async dependencies"""
        if self._initialized:
            return

        await self.get_entity_set_resolver()

        self._initialized = True
        logger.info("DI Container fully initialized")

    def get_endpoint_provider(self) -> IEndpointProvider:
        """Get endpoint provider instance (lazy initialization)"""
        if 'endpoint_provider' not in self._services:
            self._services['endpoint_provider'] = EndpointFactory.create(self.settings)
            logger.debug("Endpoint provider created")
        return self._services['endpoint_provider']

    async def get_entity_set_resolver(self) -> IEntitySetResolver:
        """Get entity set resolver instance, loading metadata when needed"""
        if 'entity_set_resolver' not in self._services:
            resolver = ResolverFactory.create(self.settings, self.get_endpoint_provider())
            if isinstance(resolver, MetadataEntitySetResolver):
                await resolver.load()
            self._services['entity_set_resolver'] = resolver
            logger.debug("Entity set resolver created", type=self.settings.entity_set_resolver)
        return self._services['entity_set_resolver']

    async def get_webapi_client(self) -> IWebApiClient:
        """Get Web API client instance (lazy initialization)"""
        if 'webapi_client' not in self._services:
            resolver = await self.get_entity_set_resolver()
            self._services['webapi_client'] = ClientFactory.create(
                self.settings, self.get_endpoint_provider(), resolver
            )
            logger.debug("Web API client created", type=self.settings.webapi_client)
        return self._services['webapi_client']

    def get_container_info(self) -> Dict[str, Any]:
        """Get container status and dependency information"""
        return {
            "initialized": self._initialized,
            "cached_services": list(self._services.keys()),
            "settings": {
                "api_url": self.settings.api_url,
                "entity_set_resolver": self.settings.entity_set_resolver,
                "webapi_client": self.settings.webapi_client,
            }
        }
