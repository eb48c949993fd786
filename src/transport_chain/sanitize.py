"""Masking of credentials in text that is about to be logged.

`sanitize` is applied to request dumps, response descriptions and bodies before
they reach a log record. It only masks values, so running it on text that was
already sanitized is a no-op.
"""

import re

MASK = "***"

_SECRET_NAMES = (
    r"key|api[_-]?key|access_token|refresh_token|token|client_secret|password|secret|signature|sig"
)

# name=value pairs in query strings and form bodies
_PARAM_RE = re.compile(rf"(?i)(?<![\w-])({_SECRET_NAMES})=([^&\s\"'#]+)")

SENSITIVE_HEADERS = frozenset(
    ["authorization", "proxy-authorization", "cookie", "set-cookie", "x-api-key", "x-auth-token"]
)

# "Header: value" lines in request dumps
_HEADER_RE = re.compile(
    r"(?im)^((?:proxy-)?authorization|cookie|set-cookie|x-api-key|x-auth-token)(:[ \t]*)[^\r\n]*"
)

# "name": "value" members in JSON bodies
_JSON_RE = re.compile(rf'(?i)("(?:{_SECRET_NAMES})"\s*:\s*)"[^"]*"')


def sanitize(text: str) -> str:
    """Mask credentials in query parameters, auth headers and JSON members.

    Args:
        text: Arbitrary text, typically an HTTP request dump.

    Returns:
        The text with every secret value replaced by ``***``.
    """
    text = _HEADER_RE.sub(rf"\1\2{MASK}", text)
    text = _PARAM_RE.sub(rf"\1={MASK}", text)
    return _JSON_RE.sub(rf'\1"{MASK}"', text)


def mask_header(name: str, value: str) -> str:
    """Return ``***`` for credential-bearing headers, the value otherwise."""
    if name.lower() in SENSITIVE_HEADERS:
        return MASK
    return value
