"""
Endpoint Provider Interface

Defines contract for sources of the Web API base URL
"""

from abc import ABC, abstractmethod
from typing import Dict, Any


class IEndpointProvider(ABC):
    """Interface for endpoint providers"""

    @abstractmethod
    def get_api_url(self) -> str:
        """
        Get the current Web API base URL.

        Returns:
            Base URL ending with "/", e.g.
            https://contoso.crm.dynamics.com/api/data/v9.2/

        Raises:
            EndpointError: If no base URL can be produced
        """
        pass

    @abstractmethod
    def get_provider_info(self) -> Dict[str, Any]:
        """
        Get information about the endpoint provider.

        Returns:
            Provider metadata (type, settings, etc.)
        """
        pass


class EndpointError(Exception):
    """Endpoint resolution errors"""
    pass
