"""
HTTP transport implementation.

Uses httpx for async HTTPS communication with Tencent Cloud.
"""

import logging
from typing import Optional

import httpx

from .errors import ResponseTooLargeError, TransportError
from .transport import BaseTransport, TransportRequest, TransportResponse

logger = logging.getLogger(__name__)


class HttpxTransport(BaseTransport):
    """
    httpx implementation of Transport.

    Features:
    - Connection pooling via httpx
    - Streaming body read that stops as soon as the size limit is crossed
    - httpx failures mapped to TransportError
    """

    def __init__(
        self,
        timeout: float = 30.0,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        """
        Initialize HTTP transport.

        Args:
            timeout: Request timeout in seconds (default: 30.0)
            http_client: Optional custom httpx.AsyncClient
        """
        self.timeout = timeout

        if http_client:
            self._http_client = http_client
            self._own_client = False
        else:
            self._http_client = httpx.AsyncClient(timeout=timeout)
            self._own_client = True

    async def send(
        self, request: TransportRequest, *, size_limit: Optional[int] = None
    ) -> TransportResponse:
        """Send request and read the body within ``size_limit``."""
        try:
            async with self._http_client.stream(
                request.method,
                request.url,
                headers=request.headers,
                content=request.body,
            ) as response:
                body = await self._read_body(response, size_limit)
                return TransportResponse(
                    status_code=response.status_code,
                    body=body,
                    headers=dict(response.headers),
                )

        except httpx.TimeoutException as e:
            logger.warning(f"Request timeout: {e}")
            raise TransportError(f"Request timeout: {e}", details={"url": request.url}) from e

        except httpx.ConnectError as e:
            logger.warning(f"Connection error: {e}")
            raise TransportError(f"Connection error: {e}", details={"url": request.url}) from e

        except httpx.HTTPError as e:
            logger.error(f"HTTP error: {e}")
            raise TransportError(f"HTTP error: {e}", details={"url": request.url}) from e

    async def _read_body(
        self, response: httpx.Response, size_limit: Optional[int]
    ) -> bytes:
        """
        Read the response body, failing once it grows past ``size_limit``.

        The partial buffer is dropped on failure, never returned.
        """
        if size_limit is None:
            return await response.aread()

        # Content-Length counts encoded bytes, only usable without compression
        content_length = response.headers.get("Content-Length")
        if (
            content_length
            and content_length.isdigit()
            and "Content-Encoding" not in response.headers
            and int(content_length) > size_limit
        ):
            raise ResponseTooLargeError(
                size_limit, details={"contentLength": int(content_length)}
            )

        buffer = bytearray()
        async for chunk in response.aiter_bytes():
            buffer.extend(chunk)
            if len(buffer) > size_limit:
                raise ResponseTooLargeError(size_limit)

        return bytes(buffer)

    async def close(self) -> None:
        """Close HTTP client if we own it."""
        if self._own_client:
            await self._http_client.aclose()
