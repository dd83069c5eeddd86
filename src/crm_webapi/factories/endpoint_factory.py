"""
Endpoint Provider Factory

Creates endpoint providers based on configuration.
"""

import structlog

from ..config import Settings
from ..endpoint import IEndpointProvider, StaticEndpointProvider

logger = structlog.get_logger(__name__)


class EndpointFactory:
    """Factory for creating endpoint providers"""

    @staticmethod
    def create(settings: Settings) -> IEndpointProvider:
        """
        Create endpoint provider from configured organization URL.

        Args:
            settings: Application settings

        Returns:
            Configured endpoint provider
        """
        logger.info("Creating endpoint provider", crm_url=settings.crm_url,
                    api_version=settings.api_version)
        return StaticEndpointProvider(settings.crm_url, settings.api_version)
