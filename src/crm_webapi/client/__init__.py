"""
Web API Client module

HTTP transport that sends requests built from request descriptors.
"""

from .interface import IWebApiClient, PreparedRequest
from .webapi_client import WebApiClient

__all__ = [
    "IWebApiClient",
    "PreparedRequest",
    "WebApiClient"
]
