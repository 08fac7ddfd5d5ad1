"""Cooperative cancellation for custom agent fetches.

A CancellationToken is passed alongside a fetch and forwarded to the HTTP
transport. When it fires before the request settles, the transport abandons
the request and raises OperationCancelledError.
"""

import asyncio


class OperationCancelledError(asyncio.CancelledError):
    """Raised when a request is abandoned because its token was cancelled."""


class CancellationToken:
    """A one-shot cancellation signal backed by an asyncio.Event.

    Example:
        >>> token = CancellationToken()
        >>> task = asyncio.create_task(service.fetch_custom_agents(token=token))
        >>> token.cancel()
    """

    def __init__(self) -> None:
        self._event = asyncio.Event()

    @classmethod
    def none(cls) -> "CancellationToken":
        """Create a token that is never cancelled."""
        return cls()

    @property
    def is_cancellation_requested(self) -> bool:
        return self._event.is_set()

    def cancel(self) -> None:
        """Request cancellation. Calling it more than once has no effect."""
        self._event.set()

    async def wait(self) -> None:
        """Wait until cancellation is requested."""
        await self._event.wait()

    def raise_if_cancellation_requested(self) -> None:
        """Raise OperationCancelledError if cancellation was requested."""
        if self.is_cancellation_requested:
            raise OperationCancelledError("Operation was cancelled")
