"""Resolution of API keys and switches from the environment.

Resolution order (highest to lowest priority):
1. Explicitly provided value
2. Environment variable (the process environment, then the .env file)
3. Default value

Key values are never logged, only where they came from.
"""

import logging
import os
from pathlib import Path
from threading import Lock

from dotenv import load_dotenv

from transport_chain.auth.exceptions import KeyFileError, KeyNotFoundError

logger = logging.getLogger(__name__)

_TRUE_VALUES = frozenset(["1", "true", "yes", "on"])
_FALSE_VALUES = frozenset(["0", "false", "no", "off"])


class KeyResolver:
    """Resolve API keys and boolean switches.

    Args:
        dotenv_path: Path to .env file. If None, python-dotenv searches
            parent directories for one.
        load_dotenv: Whether to load the .env file at all (default: True).
            Variables already set in the environment are never overridden.
    """

    def __init__(self, dotenv_path: str | None = None, load_dotenv: bool = True):
        self._dotenv_loaded = False
        self._dotenv_lock = Lock()
        self._dotenv_path = dotenv_path

        if load_dotenv:
            self._ensure_dotenv_loaded()

    def _ensure_dotenv_loaded(self) -> None:
        if self._dotenv_loaded:
            return

        with self._dotenv_lock:
            if self._dotenv_loaded:
                return
            try:
                load_dotenv(dotenv_path=self._dotenv_path)
                logger.debug("Loaded .env file for key resolution")
            except OSError as e:
                logger.warning(f"Failed to load .env file: {e}")
            self._dotenv_loaded = True

    def resolve(
        self,
        *,
        value: str | None = None,
        env_var_name: str | None = None,
        default: str | None = None,
        required: bool = False,
    ) -> str | None:
        """Resolve a key from an explicit value, the environment or a default.

        Args:
            value: Explicit value; wins over every other source.
            env_var_name: Environment variable to check.
            default: Value used when nothing else is set.
            required: Raise instead of returning None.

        Returns:
            The resolved key, or None if not found and not required.

        Raises:
            KeyNotFoundError: If ``required`` and no source has a value.
        """
        if value is not None:
            logger.debug("Resolved key from explicit parameter")
            return value

        if env_var_name and os.environ.get(env_var_name):
            logger.debug(f"Resolved key from environment variable '{env_var_name}'")
            return os.environ[env_var_name]

        if default is not None:
            logger.debug("Resolved key from default value")
            return default

        if required:
            message = "Required API key not found"
            if env_var_name:
                message += f" (checked env var: {env_var_name})"
            raise KeyNotFoundError(message, env_var_name=env_var_name)
        return None

    def resolve_from_file(
        self,
        *,
        file_path: str | Path | None = None,
        env_var_name: str | None = None,
        required: bool = False,
    ) -> str | None:
        """Read a key from a file.

        The path may come from ``file_path`` or from the environment variable
        ``env_var_name``; ``~`` and ``$VAR`` are expanded. Surrounding
        whitespace is stripped from the file contents.

        Raises:
            KeyFileError: If ``required`` and no path is known or the file
                cannot be read.
        """
        path = str(file_path) if file_path is not None else self.resolve(env_var_name=env_var_name)
        if path is None:
            if required:
                raise KeyFileError("No file path provided for key resolution")
            return None

        path_obj = Path(os.path.expanduser(os.path.expandvars(path)))
        try:
            content = path_obj.read_text().strip()
        except OSError as e:
            message = f"Cannot read key file {path_obj}: {e}"
            if required:
                raise KeyFileError(message) from e
            logger.warning(message)
            return None

        logger.debug(f"Resolved key from file: {path_obj}")
        return content

    def resolve_flag(self, env_var_name: str, default: bool = False) -> bool:
        """Read a boolean switch such as ``TRANSPORT_CHAIN_FLAKY=1``.

        Raises:
            ValueError: If the variable holds something other than a
                recognised true/false spelling.
        """
        raw = os.environ.get(env_var_name)
        if raw is None or not raw.strip():
            return default

        normalized = raw.strip().lower()
        if normalized in _TRUE_VALUES:
            return True
        if normalized in _FALSE_VALUES:
            return False
        raise ValueError(f"{env_var_name} must be a boolean switch, got {raw!r}")
