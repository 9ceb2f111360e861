"""URL validation and normalisation helpers"""

from typing import Optional
from urllib.parse import urlsplit, urlunsplit

ALLOWED_SCHEMES = ("http", "https")
ALLOWED_PREFIXES = ("http://", "https://")


def is_valid_http_url(value: Optional[str]) -> bool:
    """
    Check that ``value`` is an absolute HTTP/HTTPS URL.

    The string must parse, carry a scheme that is exactly ``http`` or
    ``https`` and name a host. Empty strings and anything with
    whitespace around it are rejected.
    """
    if not value or not isinstance(value, str):
        return False
    if value != value.strip() or any(ch.isspace() for ch in value):
        return False
    # urlsplit lower-cases the scheme, so check the raw prefix
    if not value.startswith(ALLOWED_PREFIXES):
        return False
    try:
        parts = urlsplit(value)
        # Accessing .port raises ValueError for out of range / garbage ports
        parts.port
    except ValueError:
        return False
    if parts.scheme not in ALLOWED_SCHEMES:
        return False
    return bool(parts.hostname)


def normalize_url(value: str) -> str:
    """Canonical form used for cache keys: lower-case scheme/host, no fragment."""
    parts = urlsplit(value.strip())
    path = parts.path or "/"
    return urlunsplit((parts.scheme.lower(), parts.netloc.lower(), path, parts.query, ""))
