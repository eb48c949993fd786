"""Transport that adds an API key to the query string of every request."""

from urllib.parse import quote

import httpx

from transport_chain.transport.base import WrappingTransport

# RFC 3986 query characters, minus the "&" and "=" that delimit parameters
QUERY_SAFE = "!$'()*+,;:@/?"


class KeyInjectingTransport(WrappingTransport):
    """Append ``key=<key>`` to the query string before delegating.

    The existing query bytes are kept as they are; ``&`` is added only when the
    query is non-empty. The request URL is replaced on the request object that
    was passed in, so callers see the key on their own request afterwards.

    Args:
        wrapped_transport: The underlying transport to wrap
        key: The API key to inject
        param_name: Query parameter name (default: ``key``)

    Example:
        ```python
        transport = KeyInjectingTransport(
            wrapped_transport=httpx.HTTPTransport(),
            key="my-api-key",
        )
        ```
    """

    def __init__(
        self,
        *,
        wrapped_transport: httpx.BaseTransport | httpx.AsyncBaseTransport,
        key: str,
        param_name: str = "key",
    ) -> None:
        if not key:
            raise ValueError("key must be a non-empty string")
        super().__init__(wrapped_transport=wrapped_transport)
        self._param = f"{quote(param_name, safe=QUERY_SAFE)}={quote(key, safe=QUERY_SAFE)}".encode("ascii")

    def handle_request(self, request: httpx.Request) -> httpx.Response:
        self._inject_key(request)
        return self._wrapped_transport.handle_request(request)

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        self._inject_key(request)
        return await self._wrapped_transport.handle_async_request(request)

    def _inject_key(self, request: httpx.Request) -> None:
        query = request.url.query
        if query:
            query += b"&"
        request.url = request.url.copy_with(query=query + self._param)
