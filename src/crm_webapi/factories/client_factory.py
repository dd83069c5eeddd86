"""
Web API Client Factory

Creates client instances based on configuration.
"""

from collections import deque
from typing import Deque, Dict, Any
import structlog

from ..config import Settings
from ..endpoint import IEndpointProvider
from ..metadata import IEntitySetResolver
from ..client import IWebApiClient, PreparedRequest, WebApiClient
from ..requests import Request

logger = structlog.get_logger(__name__)


class MockWebApiClient(IWebApiClient):
    """Mock client that echoes prepared requests instead of sending them"""

    def __init__(
        self,
        endpoint_provider: IEndpointProvider,
        entity_set_resolver: IEntitySetResolver,
        max_sent: int = 50,
    ):
        self.endpoint_provider = endpoint_provider
        self.entity_set_resolver = entity_set_resolver
        # Most recent requests only
        self.sent: Deque[PreparedRequest] = deque(maxlen=max_sent)

    def prepare(self, request: Request) -> PreparedRequest:
        """Builds the request without authorization headers"""
        return PreparedRequest(
            method=request.method,
            url=request.build_url(self.endpoint_provider, self.entity_set_resolver),
            headers={key: str(value) for key, value in request.headers or ()},
            payload=request.payload,
            is_async=request.is_async,
        )

    async def execute(self, request: Request) -> Dict[str, Any]:
        """Returns the prepared request as response body"""
        return self.execute_sync(request)

    def execute_sync(self, request: Request) -> Dict[str, Any]:
        prepared = self.prepare(request)
        self.sent.append(prepared)
        return {"@mock.request": prepared.to_dict()}

    def get_client_info(self) -> Dict[str, Any]:
        return {
            "type": "mock_client",
            "version": "1.0.0",
            "endpoint": self.endpoint_provider.get_provider_info(),
            "entity_set_resolver": self.entity_set_resolver.get_resolver_info(),
            "capabilities": ["prepare", "execute", "execute_sync"],
        }


class ClientFactory:
    """Factory for creating Web API clients"""

    @staticmethod
    def create(
        settings: Settings,
        endpoint_provider: IEndpointProvider,
        entity_set_resolver: IEntitySetResolver,
    ) -> IWebApiClient:
        """
        Create Web API client based on configuration.

        Args:
            settings: Application settings
            endpoint_provider: Configured endpoint provider
            entity_set_resolver: Configured entity set resolver

        Returns:
            Configured Web API client instance

        Raises:
            ValueError: If client type is not supported
        """
        client_type = settings.webapi_client.lower()

        logger.info("Creating Web API client", client_type=client_type)

        if client_type == "httpx":
            return WebApiClient(
                endpoint_provider,
                entity_set_resolver,
                token=settings.access_token,
                timeout=settings.request_timeout,
            )
        elif client_type == "mock":
            return MockWebApiClient(endpoint_provider, entity_set_resolver)
        else:
            raise ValueError(f"Unsupported Web API client: {client_type}")

    @staticmethod
    def get_available_clients() -> list[str]:
        """Get list of available client types"""
        return ["httpx", "mock"]
