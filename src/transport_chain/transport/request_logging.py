"""Transport that logs every request/response exchange.

Each exchange produces one INFO record holding a dump of the outgoing request,
the response metadata, the response body (when body capture is on) and the
error raised by the wrapped transport, if any. All of it is passed through a
sanitizer first so credentials never reach the logs.

Body capture is on for every request except those declaring exactly one
``Content-Type: application/octet-stream`` header. Binary payloads are never
dumped.

Example:
    ```python
    import httpx
    from transport_chain.transport.request_logging import LoggingTransport

    transport = LoggingTransport(wrapped_transport=httpx.HTTPTransport())

    with httpx.Client(transport=transport) as client:
        client.get("https://api.example.com/items")
    ```
"""

import logging
from collections.abc import Callable

import httpx

from transport_chain.sanitize import mask_header, sanitize
from transport_chain.transport.base import WrappingTransport

logger = logging.getLogger(__name__)

BINARY_CONTENT_TYPE = "application/octet-stream"


class LoggingTransport(WrappingTransport):
    """Log request/response pairs with sanitized bodies.

    The outcome of the wrapped transport is never changed: its response is
    returned with identical status and headers (the body stream is swapped for
    an in-memory copy of the same bytes when captured), and its exceptions are
    re-raised as they are.

    Args:
        wrapped_transport: The underlying transport to wrap
        logger: Logger for exchange lines (INFO) and diagnostics (DEBUG).
            Defaults to this module's logger.
        sanitizer: Function masking secrets in logged text
    """

    default_logger = logger

    def __init__(
        self,
        *,
        wrapped_transport: httpx.BaseTransport | httpx.AsyncBaseTransport,
        logger: logging.Logger | None = None,
        sanitizer: Callable[[str], str] = sanitize,
    ) -> None:
        super().__init__(wrapped_transport=wrapped_transport)
        self._logger = logger or self.default_logger
        self._sanitize = sanitizer

    def handle_request(self, request: httpx.Request) -> httpx.Response:
        capture_body = should_capture_body(request)

        dump = ""
        try:
            if capture_body:
                request.read()
            dump = dump_request(request, include_body=capture_body)
        except Exception as e:
            # The request still goes out; only the log line loses its dump.
            self._logger.debug(f"error dumping http request: {e}")

        try:
            response = self._wrapped_transport.handle_request(request)
        except Exception as e:
            self._log_exchange(dump, None, None, e)
            raise

        body = None
        if capture_body:
            try:
                body = b"".join(response.stream)
            except Exception as e:
                self._log_exchange(dump, response, None, e)
                raise
            finally:
                response.stream.close()
            response.stream = httpx.ByteStream(body)

        self._log_exchange(dump, response, body, None)
        return response

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        capture_body = should_capture_body(request)

        dump = ""
        try:
            if capture_body:
                await request.aread()
            dump = dump_request(request, include_body=capture_body)
        except Exception as e:
            self._logger.debug(f"error dumping http request: {e}")

        try:
            response = await self._wrapped_transport.handle_async_request(request)
        except Exception as e:
            self._log_exchange(dump, None, None, e)
            raise

        body = None
        if capture_body:
            try:
                body = b"".join([chunk async for chunk in response.stream])
            except Exception as e:
                self._log_exchange(dump, response, None, e)
                raise
            finally:
                await response.stream.aclose()
            response.stream = httpx.ByteStream(body)

        self._log_exchange(dump, response, body, None)
        return response

    def _log_exchange(
        self,
        dump: str,
        response: httpx.Response | None,
        body: bytes | None,
        error: Exception | None,
    ) -> None:
        if response is not None and body is not None:
            text = _decode_body(body, response.charset_encoding)
            line = (
                f"http request: {dump}--->response: {describe_response(response)}\n"
                f"response body: {text}\n--->err: {error}"
            )
        else:
            line = f"http request: {dump}--->response: {describe_response(response)}\n--->err: {error}"
        self._logger.info(self._sanitize(line))


def should_capture_body(request: httpx.Request) -> bool:
    """Return False only for a single ``application/octet-stream`` Content-Type."""
    content_types = request.headers.get_list("Content-Type")
    return not (len(content_types) == 1 and content_types[0] == BINARY_CONTENT_TYPE)


def dump_request(request: httpx.Request, *, include_body: bool) -> str:
    """Render a request the way it goes out on the wire.

    Args:
        request: The request to render. When ``include_body`` is set its
            content must already have been read.
        include_body: Whether to append the request body.

    Returns:
        Request line, header lines and, optionally, the body.

    Raises:
        httpx.RequestNotRead: If the body is requested but was never read.
    """
    lines = [f"{request.method} {request.url.raw_path.decode('ascii')} HTTP/1.1"]
    lines.extend(_header_lines(request.headers))
    dump = "\r\n".join(lines) + "\r\n\r\n"
    if include_body:
        dump += request.content.decode("utf-8", errors="replace")
    return dump


def describe_response(response: httpx.Response | None) -> str:
    if response is None:
        return "None"
    headers = ", ".join(_header_lines(response.headers))
    return f"{response.http_version} {response.status_code} {response.reason_phrase} [{headers}]"


def _decode_body(body: bytes, encoding: str | None) -> str:
    try:
        return body.decode(encoding or "utf-8", errors="replace")
    except LookupError:
        return body.decode("utf-8", errors="replace")


def _header_lines(headers: httpx.Headers) -> list[str]:
    lines = []
    for raw_name, raw_value in headers.raw:
        name = raw_name.decode("latin-1")
        lines.append(f"{name}: {mask_header(name, raw_value.decode('latin-1'))}")
    return lines
