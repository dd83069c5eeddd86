"""
CRM Web API Request Builder

Main entry point: MCP server, configuration check and URL preview.
"""

import argparse
import asyncio
import logging
from typing import List, Optional, Tuple
import structlog

from .config import load_dotenv_if_exists, get_settings
from .endpoint import StaticEndpointProvider
from .metadata import PluralizingEntitySetResolver
from .requests import get_request, search_requests


def configure_logging(log_level: str = "info") -> None:
    """Configure structured logging"""
    logging.basicConfig(level=getattr(logging, log_level.upper()), format="%(message)s")
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


logger = structlog.get_logger(__name__)


def parse_param(raw: str) -> Tuple[str, str]:
    """Split a NAME=VALUE command line parameter"""
    name, separator, value = raw.partition("=")
    if not separator or not name:
        raise argparse.ArgumentTypeError(f"Expected NAME=VALUE, got '{raw}'")
    return name, value


def preview_url(
    request_name: str,
    entity_id: Optional[str] = None,
    entity_name: Optional[str] = None,
    params: Optional[List[Tuple[str, str]]] = None,
) -> str:
    """Build the URL for a catalog request from command line overrides"""
    settings = get_settings()
    endpoint_provider = StaticEndpointProvider(settings.crm_url, settings.api_version)
    # Previews stay offline: no metadata lookup
    resolver = PluralizingEntitySetResolver(settings.entity_set_overrides)

    overrides = {}
    if entity_id:
        overrides["entity_id"] = entity_id
    if entity_name:
        overrides["entity_name"] = entity_name
    if params:
        overrides["url_params"] = params

    request = get_request(request_name).with_(overrides)
    return request.build_url(endpoint_provider, resolver)


def main() -> Optional[int]:
    """Main entry point with command line argument parsing"""
    load_dotenv_if_exists()

    parser = argparse.ArgumentParser(description="CRM Web API Request Builder")
    parser.add_argument(
        "--transport",
        choices=["stdio"],
        default="stdio",
        help="Transport mode (currently only stdio supported)",
    )
    parser.add_argument(
        "--log-level",
        default="info",
        choices=["debug", "info", "warning", "error"],
        help="Log level (default: info)",
    )
    parser.add_argument(
        "--validate-config", action="store_true", help="Validate configuration and exit"
    )
    parser.add_argument(
        "--list-requests", nargs="?", const="", metavar="PATTERN",
        help="List catalog requests matching PATTERN and exit",
    )
    parser.add_argument("--build-url", metavar="REQUEST", help="Print the URL for a catalog request and exit")
    parser.add_argument("--entity-id", help="Record id for bound requests")
    parser.add_argument("--entity-name", help="Entity logical name for bound requests")
    parser.add_argument(
        "--param", action="append", type=parse_param, default=[], metavar="NAME=VALUE",
        help="Function parameter, repeatable; order is kept",
    )

    args = parser.parse_args()

    configure_logging(args.log_level)

    if args.list_requests is not None:
        for name in search_requests(args.list_requests):
            print(name)
        return 0

    if args.build_url:
        try:
            print(preview_url(args.build_url, args.entity_id, args.entity_name, args.param))
        except Exception as e:
            logger.error("Failed to build URL", request_name=args.build_url, error=str(e))
            return 1
        return 0

    if args.validate_config:
        from .server_factory import ServerValidator

        return 0 if asyncio.run(ServerValidator.validate_configuration()) else 1

    from .server_factory import ServerFactory

    try:
        mcp = asyncio.run(ServerFactory.create_configured_server())
    except Exception as e:
        logger.error("Failed to initialize server", error=str(e))
        return 1

    if args.transport == "stdio":
        # Disable all logging to prevent stdout/stderr contamination in STDIO mode
        logging.disable(logging.CRITICAL)

        mcp.run(transport="stdio")
        return 0
    else:
        logger.error("Only STDIO transport is supported in version 0.1.0")
        return 1


if __name__ == "__main__":
    exit_code = main()
    exit(exit_code or 0)
