"""
Abstract transport interface.
"""
from abc import ABC, abstractmethod

from ..types import TransportRequest, TransportResponse


class BaseTransport(ABC):
    """Executes a finalized request and reports the result."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Name of the transport (e.g., 'httpx')."""
        pass

    @abstractmethod
    async def execute(self, request: TransportRequest) -> TransportResponse:
        """
        Send the request once. Network failures are reported through
        ``TransportResponse.error``, never raised.
        """
        pass

    async def close(self) -> None:
        """Release any resources held by the transport."""
        return None

    async def __aenter__(self) -> "BaseTransport":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
