"""
Endpoint module

Supplies the Web API base URL that request URLs are built on.
"""

from .interface import IEndpointProvider, EndpointError
from .provider import StaticEndpointProvider

__all__ = [
    "IEndpointProvider",
    "EndpointError",
    "StaticEndpointProvider"
]
