"""
Static Endpoint Provider

Builds the Web API base URL from a configured organization URL.
"""

from typing import Dict, Any

from .interface import IEndpointProvider, EndpointError


class StaticEndpointProvider(IEndpointProvider):
    """Endpoint provider for a fixed organization URL and API version"""

    def __init__(self, crm_url: str, api_version: str = "9.2"):
        self.crm_url = crm_url
        self.api_version = api_version

    def get_api_url(self) -> str:
        if not self.crm_url:
            raise EndpointError("Organization URL is not configured")
        return f"{self.crm_url.rstrip('/')}/api/data/v{self.api_version}/"

    def get_provider_info(self) -> Dict[str, Any]:
        return {
            "type": "static",
            "crm_url": self.crm_url,
            "api_version": self.api_version,
        }
