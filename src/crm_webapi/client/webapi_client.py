"""
CRM Web API Client

Sends requests built from request descriptors over httpx.
"""

from typing import Any, Dict, Optional
import httpx
import structlog

from ..endpoint import IEndpointProvider
from ..metadata import IEntitySetResolver
from ..requests import Request
from .interface import IWebApiClient, PreparedRequest

logger = structlog.get_logger(__name__)


class WebApiClient(IWebApiClient):
    """HTTP client for CRM Web API actions and functions"""

    def __init__(
        self,
        endpoint_provider: IEndpointProvider,
        entity_set_resolver: IEntitySetResolver,
        token: Optional[str] = None,
        timeout: float = 30.0,
        transport: Optional[httpx.BaseTransport] = None,
        async_transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.endpoint_provider = endpoint_provider
        self.entity_set_resolver = entity_set_resolver
        self.token = token
        self.timeout = timeout
        self.transport = transport
        self.async_transport = async_transport

    def get_headers(self) -> Dict[str, str]:
        """Get standard HTTP headers for Web API requests"""
        headers = {
            "Accept": "application/json",
            "Content-Type": "application/json; charset=utf-8",
            "OData-MaxVersion": "4.0",
            "OData-Version": "4.0",
        }
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    def prepare(self, request: Request) -> PreparedRequest:
        url = request.build_url(self.endpoint_provider, self.entity_set_resolver)

        # Case-insensitive merge: request headers replace defaults whatever their casing
        headers = httpx.Headers(self.get_headers())
        for key, value in request.headers or ():
            headers[key] = str(value)

        return PreparedRequest(
            method=request.method,
            url=url,
            headers={key.decode(): value.decode() for key, value in headers.raw},
            payload=request.payload,
            is_async=request.is_async,
        )

    def _request_kwargs(self, prepared: PreparedRequest) -> Dict[str, Any]:
        kwargs: Dict[str, Any] = {"headers": prepared.headers}
        if prepared.payload is not None:
            kwargs["json"] = prepared.payload
        return kwargs

    def _decode(self, prepared: PreparedRequest, response: httpx.Response) -> Any:
        logger.info("Web API request successful",
                    method=prepared.method, url=prepared.url,
                    status_code=response.status_code)
        if not response.content:
            return None
        return response.json()

    async def execute(self, request: Request) -> Any:
        prepared = self.prepare(request)

        logger.info("Sending Web API request", method=prepared.method, url=prepared.url)

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.async_transport) as client:
                response = await client.request(
                    prepared.method, prepared.url, **self._request_kwargs(prepared)
                )
                response.raise_for_status()
                return self._decode(prepared, response)

        except httpx.HTTPStatusError as e:
            logger.error("Web API request failed",
                         method=prepared.method, url=prepared.url,
                         status_code=e.response.status_code,
                         response_text=e.response.text)
            raise
        except httpx.HTTPError as e:
            logger.error("Request error", method=prepared.method, url=prepared.url, error=str(e))
            raise

    def execute_sync(self, request: Request) -> Any:
        prepared = self.prepare(request)

        logger.info("Sending Web API request", method=prepared.method, url=prepared.url, blocking=True)

        try:
            with httpx.Client(timeout=self.timeout, transport=self.transport) as client:
                response = client.request(
                    prepared.method, prepared.url, **self._request_kwargs(prepared)
                )
                response.raise_for_status()
                return self._decode(prepared, response)

        except httpx.HTTPStatusError as e:
            logger.error("Web API request failed",
                         method=prepared.method, url=prepared.url,
                         status_code=e.response.status_code,
                         response_text=e.response.text)
            raise
        except httpx.HTTPError as e:
            logger.error("Request error", method=prepared.method, url=prepared.url, error=str(e))
            raise

    def get_client_info(self) -> Dict[str, Any]:
        return {
            "type": "httpx",
            "version": "1.0.0",
            "endpoint": self.endpoint_provider.get_provider_info(),
            "entity_set_resolver": self.entity_set_resolver.get_resolver_info(),
            "authenticated": bool(self.token),
            "capabilities": ["prepare", "execute", "execute_sync"],
        }
