"""Transport decorators for composable HTTP middleware.

Each decorator wraps another httpx transport and works with both
``httpx.Client`` and ``httpx.AsyncClient``:

Modules:
    base: Base class forwarding lifecycle calls to the wrapped transport
    key: Adds an API key to the query string
    request_logging: Logs sanitized request/response pairs
    flaky: Injects bursts of failures for resilience testing
    factory: Builds the standard stack

Example:
    ```python
    from transport_chain.transport import create_transport_stack

    transport = create_transport_stack(api_key="my-api-key", enable_flaky=True)
    ```
"""

from transport_chain.transport.base import WrappingTransport
from transport_chain.transport.factory import create_transport_stack
from transport_chain.transport.flaky import FlakyTransport
from transport_chain.transport.key import KeyInjectingTransport
from transport_chain.transport.request_logging import LoggingTransport

__all__ = [
    "FlakyTransport",
    "KeyInjectingTransport",
    "LoggingTransport",
    "WrappingTransport",
    "create_transport_stack",
]
