"""Factory for the standard transport stack.

Layers, outermost first:

1. ``FlakyTransport`` (optional) fails calls before any real work is done
2. ``KeyInjectingTransport`` (when a key resolves) adds the API key
3. ``LoggingTransport`` (optional) logs what actually goes on the wire
4. The real transport (default: ``httpx.HTTPTransport()``)
"""

import logging
from collections.abc import Callable

import httpx

from transport_chain.auth.keys import KeyResolver
from transport_chain.sanitize import sanitize
from transport_chain.transport.flaky import FlakyTransport
from transport_chain.transport.key import KeyInjectingTransport
from transport_chain.transport.request_logging import LoggingTransport

logger = logging.getLogger(__name__)

DEFAULT_API_KEY_ENV_VAR = "TRANSPORT_CHAIN_API_KEY"
DEFAULT_FLAKY_ENV_VAR = "TRANSPORT_CHAIN_FLAKY"


def create_transport_stack(
    *,
    wrapped_transport: httpx.BaseTransport | httpx.AsyncBaseTransport | None = None,
    api_key: str | None = None,
    api_key_env_var: str | None = DEFAULT_API_KEY_ENV_VAR,
    key_param: str = "key",
    enable_logging: bool = True,
    enable_flaky: bool | None = None,
    flaky_env_var: str = DEFAULT_FLAKY_ENV_VAR,
    flaky_seed: int | None = None,
    transport_logger: logging.Logger | None = None,
    sanitizer: Callable[[str], str] = sanitize,
    resolver: KeyResolver | None = None,
) -> httpx.BaseTransport | httpx.AsyncBaseTransport:
    """Build the decorator chain around a real transport.

    Args:
        wrapped_transport: Terminal transport. Pass ``httpx.AsyncHTTPTransport()``
            for use with ``httpx.AsyncClient``.
        api_key: Explicit API key; falls back to ``api_key_env_var``.
        api_key_env_var: Environment variable holding the API key.
        key_param: Query parameter name for the key.
        enable_logging: Add the request logging layer.
        enable_flaky: Add the flaky layer. None reads ``flaky_env_var``.
        flaky_env_var: Environment switch consulted when ``enable_flaky`` is None.
        flaky_seed: Seed for replaying a previous flaky run.
        transport_logger: Logger handed to the logging and flaky layers.
        sanitizer: Function masking secrets in logged text.
        resolver: Key resolver (default: a new ``KeyResolver``).

    Returns:
        The outermost transport of the stack.

    Example:
        ```python
        transport = create_transport_stack(api_key="my-api-key", enable_flaky=True)

        with httpx.Client(transport=transport) as client:
            client.get("https://api.example.com/items")
        ```
    """
    resolver = resolver or KeyResolver()
    transport = wrapped_transport if wrapped_transport is not None else httpx.HTTPTransport()

    if enable_logging:
        transport = LoggingTransport(wrapped_transport=transport, logger=transport_logger, sanitizer=sanitizer)

    key = resolver.resolve(value=api_key, env_var_name=api_key_env_var)
    if key:
        transport = KeyInjectingTransport(wrapped_transport=transport, key=key, param_name=key_param)
    else:
        logger.debug("No API key configured, requests are sent without one")

    if enable_flaky is None:
        enable_flaky = resolver.resolve_flag(flaky_env_var)
    if enable_flaky:
        logger.warning("Flaky transport enabled, requests will fail intermittently")
        transport = FlakyTransport(
            wrapped_transport=transport, seed=flaky_seed, logger=transport_logger, sanitizer=sanitizer
        )

    return transport
