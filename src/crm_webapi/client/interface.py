"""
Web API Client Interface

Defines contract for clients that send built requests
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Dict, Any

from ..requests import Request


@dataclass
class PreparedRequest:
    """Everything the transport needs to send one request"""

    method: str
    url: str
    headers: Dict[str, str] = field(default_factory=dict)
    payload: Any = None
    is_async: bool = True

    def to_dict(self) -> Dict[str, Any]:
        return {
            "method": self.method,
            "url": self.url,
            "headers": dict(self.headers),
            "payload": self.payload,
            "async": self.is_async,
        }


class IWebApiClient(ABC):
    """Interface for Web API clients"""

    @abstractmethod
    def prepare(self, request: Request) -> PreparedRequest:
        """
        Build method, URL, headers and body for a request.

        Args:
            request: Request to prepare

        Returns:
            Prepared request, ready to send
        """
        pass

    @abstractmethod
    async def execute(self, request: Request) -> Any:
        """
        Send a request and return the decoded response body.

        Args:
            request: Request to send

        Returns:
            JSON response body, or None for empty responses
        """
        pass

    @abstractmethod
    def execute_sync(self, request: Request) -> Any:
        """Blocking variant of execute()"""
        pass

    @abstractmethod
    def get_client_info(self) -> Dict[str, Any]:
        """
        Get client implementation information.

        Returns:
            Client metadata (type, base URL, capabilities, etc.)
        """
        pass
