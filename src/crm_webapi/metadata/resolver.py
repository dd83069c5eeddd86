"""
Entity Set Resolvers

Pluralizing resolver following the platform's default naming, and a
metadata-backed resolver that loads EntitySetName from EntityDefinitions.
"""

from typing import Any, Dict, Optional
import httpx
import structlog

from ..endpoint import IEndpointProvider
from .interface import IEntitySetResolver, EntitySetResolutionError

logger = structlog.get_logger(__name__)


class PluralizingEntitySetResolver(IEntitySetResolver):
    """
    Derives entity set names from logical names.

    Explicit overrides win. Otherwise names ending in "s" get "es",
    names ending in "y" end in "ies", and everything else gets "s".
    """

    def __init__(self, overrides: Optional[Dict[str, str]] = None):
        self.overrides: Dict[str, str] = dict(overrides or {})

    def get_set_name(self, logical_name: str) -> str:
        if logical_name in self.overrides:
            return self.overrides[logical_name]

        if logical_name.endswith("s"):
            return logical_name + "es"
        if logical_name.endswith("y"):
            return logical_name[:-1] + "ies"
        return logical_name + "s"

    def get_resolver_info(self) -> Dict[str, Any]:
        return {
            "type": "pluralize",
            "overrides": len(self.overrides),
        }


class MetadataEntitySetResolver(IEntitySetResolver):
    """Resolves entity set names from the organization's entity definitions"""

    def __init__(
        self,
        endpoint_provider: IEndpointProvider,
        token: Optional[str] = None,
        fallback: Optional[IEntitySetResolver] = None,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.endpoint_provider = endpoint_provider
        self.token = token
        self.fallback = fallback
        self.timeout = timeout
        self.transport = transport
        self._set_names: Dict[str, str] = {}
        self._loaded = False

    async def load(self) -> int:
        """
        Fetch logical name to entity set name mappings.

        Returns:
            Number of entity definitions loaded

        Raises:
            httpx.HTTPError: If the metadata request fails
        """
        url = f"{self.endpoint_provider.get_api_url()}EntityDefinitions?$select=LogicalName,EntitySetName"
        headers = {
            "Accept": "application/json",
            "OData-MaxVersion": "4.0",
            "OData-Version": "4.0",
        }
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"

        logger.info("Loading entity set names", url=url)

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.get(url, headers=headers)
                response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error("Entity definitions fetch failed",
                         status_code=e.response.status_code,
                         response_text=e.response.text)
            raise
        except httpx.HTTPError as e:
            logger.error("Entity definitions fetch error", error=str(e))
            raise

        set_names = {}
        for definition in response.json().get("value", []):
            logical_name = definition.get("LogicalName")
            set_name = definition.get("EntitySetName")
            if logical_name and set_name:
                set_names[logical_name] = set_name

        self._set_names = set_names
        self._loaded = True

        logger.info("Entity set names loaded", count=len(set_names))
        return len(set_names)

    def get_set_name(self, logical_name: str) -> str:
        set_name = self._set_names.get(logical_name)
        if set_name is not None:
            return set_name

        if self.fallback is not None:
            logger.debug("Entity set name not in metadata, using fallback", logical_name=logical_name)
            return self.fallback.get_set_name(logical_name)

        raise EntitySetResolutionError(f"No entity set known for '{logical_name}'")

    def get_resolver_info(self) -> Dict[str, Any]:
        return {
            "type": "metadata",
            "loaded": self._loaded,
            "entity_sets": len(self._set_names),
            "fallback": self.fallback.get_resolver_info() if self.fallback else None,
        }
