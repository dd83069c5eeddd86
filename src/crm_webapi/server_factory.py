"""
Server Factory for the CRM Web API MCP Server

Creates fully configured server instances using dependency injection.
"""

import structlog
from fastmcp import FastMCP

from .config import get_settings
from .di_container import DIContainer
from .requests import REQUESTS, get_request
from .tools.registry import ToolRegistry

logger = structlog.get_logger(__name__)


class ServerFactory:
    """
    Factory for creating fully configured MCP server instances.
    """

    @staticmethod
    async def create_configured_server() -> FastMCP:
        """
        Create a ready-to-run MCP server.

        Returns:
            FastMCP server with the Web API client wired and tools registered
        """
        logger.info("Creating CRM Web API MCP Server with dependency injection")

        try:
            mcp = FastMCP(name="CRM-WebAPI-Server", version="0.1.0")

            container = DIContainer(get_settings())
            await container.initialize()
            webapi_client = await container.get_webapi_client()

            ToolRegistry.register_all_tools(mcp, webapi_client)

            logger.info("CRM Web API MCP Server created successfully",
                        catalog_size=len(REQUESTS),
                        container=container.get_container_info())
            return mcp

        except Exception as e:
            logger.error("Failed to create MCP server", error=str(e))
            raise


class ServerValidator:
    """
    Utility class for configuration checks from the command line.
    """

    @staticmethod
    async def validate_configuration() -> bool:
        """Validate configuration and build a sample request URL"""
        print("🔧 Validating CRM Web API Configuration...")

        try:
            settings = get_settings()
            print("✅ Configuration loaded")
            print(f"   - API URL: {settings.api_url}")
            print(f"   - Entity Set Resolver: {settings.entity_set_resolver}")
            print(f"   - Web API Client: {settings.webapi_client}")
            print(f"   - Access Token: {'set' if settings.access_token else 'not set'}")

            container = DIContainer(settings)
            try:
                client = await container.get_webapi_client()
            except Exception as e:
                print(f"❌ Client setup failed: {e}")
                return False

            prepared = client.prepare(get_request("WhoAmI"))
            print(f"✅ Sample request: {prepared.method} {prepared.url}")

            client_info = client.get_client_info()
            print(f"   - Client Type: {client_info.get('type')}")
            print(f"   - Catalog Size: {len(REQUESTS)} requests")
            return True

        except Exception as e:
            print(f"❌ Configuration validation failed: {e}")
            return False
