"""Exceptions raised while resolving transport configuration.

Example:
    ```python
    from transport_chain.auth.exceptions import KeyNotFoundError

    if not api_key:
        raise KeyNotFoundError("API key not found", env_var_name="TRANSPORT_CHAIN_API_KEY")
    ```
"""


class KeyConfigError(Exception):
    """Base exception for API key configuration errors."""

    pass


class KeyNotFoundError(KeyConfigError):
    """Raised when a required API key cannot be resolved from any source.

    Attributes:
        env_var_name: The environment variable name that was checked (if any).
    """

    def __init__(self, message: str, env_var_name: str | None = None):
        super().__init__(message)
        self.env_var_name = env_var_name


class KeyFileError(KeyConfigError):
    """Raised when a required API key file is missing or unreadable."""

    pass
