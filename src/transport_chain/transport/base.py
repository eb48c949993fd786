"""Base class shared by every transport decorator."""

import httpx


class WrappingTransport(httpx.BaseTransport, httpx.AsyncBaseTransport):
    """Transport that delegates to another transport of the same kind.

    Subclasses implement ``handle_request`` and ``handle_async_request``.
    Context management and closing are forwarded to the wrapped transport so a
    stack of decorators can be handed to ``httpx.Client`` or
    ``httpx.AsyncClient`` like a single transport.

    Args:
        wrapped_transport: The next transport in the chain.
    """

    def __init__(self, *, wrapped_transport: httpx.BaseTransport | httpx.AsyncBaseTransport) -> None:
        self._wrapped_transport = wrapped_transport

    @property
    def wrapped_transport(self) -> httpx.BaseTransport | httpx.AsyncBaseTransport:
        return self._wrapped_transport

    def __enter__(self):
        """Enter context, delegating to wrapped transport."""
        self._wrapped_transport.__enter__()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Exit context, delegating to wrapped transport."""
        self._wrapped_transport.__exit__(exc_type, exc_val, exc_tb)

    async def __aenter__(self):
        """Enter async context, delegating to wrapped transport."""
        await self._wrapped_transport.__aenter__()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Exit async context, delegating to wrapped transport."""
        await self._wrapped_transport.__aexit__(exc_type, exc_val, exc_tb)

    def close(self) -> None:
        self._wrapped_transport.close()

    async def aclose(self) -> None:
        await self._wrapped_transport.aclose()
