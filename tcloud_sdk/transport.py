"""
Transport abstraction.

Protocol for sending a signed request to Tencent Cloud.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Dict, Optional, Protocol


@dataclass(frozen=True)
class TransportRequest:
    """Fully-formed outbound request."""

    method: str
    url: str
    headers: Dict[str, str]
    body: bytes


@dataclass(frozen=True)
class TransportResponse:
    """Status, headers and the complete (size-checked) body."""

    status_code: int
    body: bytes
    headers: Dict[str, str] = field(default_factory=dict)


class Transport(Protocol):
    """
    Protocol for the network layer.

    Implementations own connections, TLS and pooling; the client only hands
    over a signed request and reads back the response.
    """

    async def send(
        self, request: TransportRequest, *, size_limit: Optional[int] = None
    ) -> TransportResponse:
        """
        Send a request and read the response body.

        Args:
            request: Signed request
            size_limit: Maximum body size in bytes (None: unlimited)

        Returns:
            TransportResponse with status, headers and body

        Raises:
            TransportError: Connection/TLS/timeout issues
            ResponseTooLargeError: Body exceeded ``size_limit``
        """
        ...

    async def close(self) -> None:
        ...


class BaseTransport(ABC):
    """
    Abstract base class for transport implementations.
    """

    @abstractmethod
    async def send(
        self, request: TransportRequest, *, size_limit: Optional[int] = None
    ) -> TransportResponse:
        """Send request, return response."""
        pass

    async def close(self) -> None:
        """
        Close any resources (HTTP connections, etc.).

        Optional - override if needed.
        """
        pass

    async def __aenter__(self) -> "BaseTransport":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:  # type: ignore
        """Async context manager exit."""
        await self.close()
