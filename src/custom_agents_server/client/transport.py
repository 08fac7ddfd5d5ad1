"""Async HTTP transport for the custom agents service.

This module defines the HttpTransport protocol consumed by the service and
HttpxTransport, the default implementation built on httpx.AsyncClient. The
client is designed to be created once at startup and reused.
"""

import asyncio
import logging
from typing import Protocol

import httpx

from custom_agents_server.cancellation import (
    CancellationToken,
    OperationCancelledError,
)
from custom_agents_server.client.types import AuthorizedRequest, TransportResponse

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 30.0


class HttpTransport(Protocol):
    """Sends an authorized request and returns the raw response."""

    async def request(
        self,
        request: AuthorizedRequest,
        token: CancellationToken | None = None,
    ) -> TransportResponse: ...


class HttpxTransport:
    """HttpTransport backed by a single reusable httpx.AsyncClient.

    Transport errors (connection failures, timeouts, broken streams) are
    raised as httpx exceptions. Cancellation through the token raises
    OperationCancelledError.

    Attributes:
        timeout: Request timeout in seconds
        _client: The underlying httpx.AsyncClient instance
    """

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the transport.

        Args:
            timeout: Request timeout in seconds
            client: Optional preconfigured httpx.AsyncClient (e.g. for tests)
        """
        self.timeout = timeout
        self._client = client or httpx.AsyncClient(timeout=timeout)
        logger.debug(f"HttpxTransport initialized with timeout: {timeout}s")

    async def request(
        self,
        request: AuthorizedRequest,
        token: CancellationToken | None = None,
    ) -> TransportResponse:
        """Send the request, racing it against the cancellation token.

        Args:
            request: The request to send
            token: Optional cancellation token

        Returns:
            TransportResponse: Status code and raw body

        Raises:
            OperationCancelledError: If the token fires before the response arrives
            httpx.HTTPError: If the request fails at the transport level
        """
        if token is None:
            return await self._send(request)

        token.raise_if_cancellation_requested()

        send_task = asyncio.ensure_future(self._send(request))
        cancel_task = asyncio.ensure_future(token.wait())
        try:
            done, _ = await asyncio.wait(
                {send_task, cancel_task}, return_when=asyncio.FIRST_COMPLETED
            )
        finally:
            cancel_task.cancel()
            if not send_task.done():
                send_task.cancel()

        if send_task in done:
            return send_task.result()

        logger.debug(f"Request cancelled: {request.method} {request.url}")
        raise OperationCancelledError("Request was cancelled")

    async def _send(self, request: AuthorizedRequest) -> TransportResponse:
        response = await self._client.request(
            request.method,
            request.url,
            headers=request.headers,
        )
        return TransportResponse(
            status_code=response.status_code, body=response.content
        )

    async def close(self) -> None:
        """Close the underlying httpx client."""
        await self._client.aclose()
        logger.debug("HttpxTransport closed")
