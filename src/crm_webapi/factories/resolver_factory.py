"""
Entity Set Resolver Factory

Creates entity set resolvers based on configuration.
"""

import structlog

from ..config import Settings
from ..endpoint import IEndpointProvider
from ..metadata import IEntitySetResolver, PluralizingEntitySetResolver, MetadataEntitySetResolver

logger = structlog.get_logger(__name__)


class ResolverFactory:
    """Factory for creating entity set resolvers"""

    @staticmethod
    def create(settings: Settings, endpoint_provider: IEndpointProvider) -> IEntitySetResolver:
        """
        Create entity set resolver based on configuration.

        The metadata resolver falls back to the pluralizing resolver for
        entities missing from the loaded definitions. It must be loaded
        before use.

        Args:
            settings: Application settings
            endpoint_provider: Configured endpoint provider

        Returns:
            Entity set resolver

        Raises:
            ValueError: If resolver type is not supported
        """
        resolver_type = settings.entity_set_resolver.lower()

        logger.info("Creating entity set resolver", resolver_type=resolver_type)

        pluralizer = PluralizingEntitySetResolver(settings.entity_set_overrides)
        if resolver_type == "pluralize":
            return pluralizer
        elif resolver_type == "metadata":
            return MetadataEntitySetResolver(
                endpoint_provider,
                token=settings.access_token,
                fallback=pluralizer,
                timeout=settings.request_timeout,
            )
        else:
            raise ValueError(f"Unsupported entity set resolver: {resolver_type}")

    @staticmethod
    def get_available_resolvers() -> list[str]:
        """Get list of available resolver types"""
        return ["pluralize", "metadata"]
