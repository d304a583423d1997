"""
Transport interface.

Abstracts the HTTP client so endpoints stay independent of httpx/requests.
"""
from abc import ABC, abstractmethod

from ..request import HttpRequest, HttpResponse


class ITransport(ABC):
    """Interface for HTTP transports."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Short transport name used in logs."""
        pass

    @abstractmethod
    async def execute(self, request: HttpRequest) -> HttpResponse:
        """Send a request and return its parsed response.

        Args:
            request: Request to send

        Returns:
            Response of a 2xx status with the body parsed

        Raises:
            JiraError: If the server answers with a non-2xx status
            JiraConnectionError: If no response was received
        """
        pass

    @abstractmethod
    async def aclose(self) -> None:
        """Release network resources held by the transport."""
        pass
