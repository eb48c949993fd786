"""Transport Chain - composable httpx transport decorators.

- Key injection into the query string of every request
- Request/response logging with sanitized dumps
- Bursty failure injection for resilience testing

Example:
    ```python
    import httpx
    from transport_chain import create_transport_stack

    transport = create_transport_stack(api_key="my-api-key")

    with httpx.Client(transport=transport) as client:
        response = client.get("https://api.example.com/items")
    ```
"""

from transport_chain.sanitize import sanitize
from transport_chain.transport import (
    FlakyTransport,
    KeyInjectingTransport,
    LoggingTransport,
    create_transport_stack,
)

__version__ = "0.1.0"

__all__ = [
    "FlakyTransport",
    "KeyInjectingTransport",
    "LoggingTransport",
    "__version__",
    "create_transport_stack",
    "sanitize",
]
