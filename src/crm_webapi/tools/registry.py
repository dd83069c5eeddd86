"""
Tool Registry for the CRM Web API MCP Server

Exposes the request catalog, URL building and request execution as MCP tools.
"""

import json
from typing import Dict, Any, Optional
from fastmcp import FastMCP
from fastmcp.exceptions import FastMCPError
import structlog

from ..client import IWebApiClient
from ..requests import Request, get_request, search_requests

logger = structlog.get_logger(__name__)


def derive_request(request_name: str, overrides: Optional[Dict[str, Any]] = None) -> Request:
    """Look up a catalog request and apply caller overrides"""
    return get_request(request_name).with_(overrides or {})


def describe_catalog_request(request_name: str) -> Dict[str, Any]:
    """Catalog entry fields plus what a caller still has to supply"""
    request = get_request(request_name)
    description = request.to_dict()
    description["request_name"] = f"{request.name}Request"

    required = []
    if request.bound:
        required.append("entityId")
        if not request.entity_name:
            required.append("entityName")
    description["required_overrides"] = required
    return description


class ToolRegistry:
    """
    Centralized tool registration for catalog and execution tools.
    """

    @staticmethod
    def register_all_tools(mcp: FastMCP, webapi_client: IWebApiClient) -> None:
        """Register all MCP tools"""
        logger.info("Registering MCP tools")

        ToolRegistry._register_catalog_tools(mcp)
        ToolRegistry._register_request_tools(mcp, webapi_client)

        logger.info("All MCP tools registered successfully")

    @staticmethod
    def _register_catalog_tools(mcp: FastMCP) -> None:
        """Register catalog discovery tools"""

        @mcp.tool
        async def list_requests(
            pattern: str = "", method: Optional[str] = None, bound: Optional[bool] = None
        ) -> str:
            """
            List predefined Web API actions and functions.

            Functions use GET, actions use POST. Bound requests run against
            one record and need an entityId (and an entityName when the
            catalog entry has none).

            Args:
                pattern: Case-insensitive name filter (e.g., "Team", "Opportunity")
                method: "GET" for functions, "POST" for actions
                bound: Only bound (true) or unbound (false) requests

            Next steps:
                1. describe_request(request_name) - see fields and required overrides
                2. build_request(request_name, overrides) - preview the URL
            """
            names = search_requests(pattern, method, bound)
            return json.dumps({"requests": names, "pattern": pattern, "total": len(names)}, indent=2)

        @mcp.tool
        async def describe_request(request_name: str) -> str:
            """
            Describe a predefined request.

            Args:
                request_name: Catalog name, e.g. "WhoAmIRequest" or "WhoAmI"
            """
            try:
                return json.dumps(describe_catalog_request(request_name), indent=2, default=str)
            except KeyError as e:
                logger.error("Describe request failed", request_name=request_name, error=str(e))
                raise FastMCPError(f"Unknown request '{request_name}'. Use list_requests to find requests.")

    @staticmethod
    def _register_request_tools(mcp: FastMCP, webapi_client: IWebApiClient) -> None:
        """Register URL building and execution tools"""

        @mcp.tool
        async def build_request(request_name: str, overrides: Optional[Dict[str, Any]] = None) -> str:
            """
            Build method, URL, headers and body for a request without sending it.

            Args:
                request_name: Catalog name, e.g. "RetrieveTeamPrivilegesRequest"
                overrides: Fields to set, e.g.
                    {"entityId": "{3f955cb8-c36c-e511-80d2-00155d2a68d2}"}
                    {"urlParams": {"EntityMoniker": "...", "RollupType": "..."}}
                    {"payload": {...}}
            """
            try:
                prepared = webapi_client.prepare(derive_request(request_name, overrides))
                return json.dumps(prepared.to_dict(), indent=2, default=str)
            except Exception as e:
                logger.error("Build request failed", request_name=request_name, error=str(e))
                raise FastMCPError(f"Failed to build {request_name}: {e}")

        @mcp.tool
        async def execute_request(request_name: str, overrides: Optional[Dict[str, Any]] = None) -> str:
            """
            Execute a predefined action or function.

            MANDATORY PRECONDITIONS:
            1. Check required overrides with describe_request first
            2. Preview with build_request when unsure about the URL

            Args:
                request_name: Catalog name, e.g. "WhoAmIRequest"
                overrides: Fields to set (entityId, entityName, urlParams, payload, headers)
            """
            try:
                result = await webapi_client.execute(derive_request(request_name, overrides))
                return json.dumps({"request_name": request_name, "result": result}, indent=2, default=str)
            except Exception as e:
                logger.error("Execute request failed", request_name=request_name, error=str(e))
                raise FastMCPError(f"Failed to execute {request_name}: {e}")
