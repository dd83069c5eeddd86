"""
Factory classes for Dependency Injection

Provides factory methods to create implementations based on configuration.
"""

from .endpoint_factory import EndpointFactory
from .resolver_factory import ResolverFactory
from .client_factory import ClientFactory, MockWebApiClient

__all__ = [
    "EndpointFactory",
    "ResolverFactory",
    "ClientFactory",
    "MockWebApiClient",
]
