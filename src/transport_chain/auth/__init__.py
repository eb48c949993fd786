"""API key configuration for the key injecting transport.

Example:
    ```python
    from transport_chain.auth import KeyResolver

    resolver = KeyResolver()
    api_key = resolver.resolve(env_var_name="TRANSPORT_CHAIN_API_KEY", required=True)
    ```
"""

from transport_chain.auth.exceptions import KeyConfigError, KeyFileError, KeyNotFoundError
from transport_chain.auth.keys import KeyResolver

__all__ = [
    "KeyConfigError",
    "KeyFileError",
    "KeyNotFoundError",
    "KeyResolver",
]
