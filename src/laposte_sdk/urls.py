"""Base URL validation and request URL construction."""

from __future__ import annotations

from urllib.parse import urljoin, urlsplit

from .exceptions import InvalidURLError
from .paths import normalize_path

_ALLOWED_SCHEMES = frozenset({"http", "https"})


def build_base_url(base_url: str) -> str:
    """Validate ``base_url`` and return it with a trailing slash."""

    _validate_absolute(base_url, kind="base URL")
    parsed = urlsplit(base_url)
    # urljoin discards the base query and fragment, so they cannot be part of a prefix.
    if parsed.query or parsed.fragment or base_url.endswith(("?", "#")):
        raise InvalidURLError(
            f"Invalid base URL {base_url!r}: query and fragment are not allowed", details=base_url
        )
    return base_url if base_url.endswith("/") else f"{base_url}/"


def build_api_url(base_url: str, path: str) -> str:
    """Resolve ``path`` against ``base_url`` after normalizing it.

    The normalized path is always resolved relative to the base, so leading
    slashes in ``path`` never reset the URL to the host root.
    """

    relative = "./" + normalize_path(path).lstrip("/")
    joined = urljoin(base_url, relative).replace("./", "")
    _validate_absolute(joined, kind="request URL")
    return joined


def _validate_absolute(url: str, *, kind: str) -> None:
    if not isinstance(url, str) or not url.strip():
        raise InvalidURLError(f"Invalid {kind}: empty value")
    try:
        parsed = urlsplit(url)
        # Accessing the port validates it.
        parsed.port
    except ValueError as exc:
        raise InvalidURLError(f"Invalid {kind} {url!r}: {exc}", details=url) from exc
    if parsed.scheme.lower() not in _ALLOWED_SCHEMES:
        raise InvalidURLError(f"Invalid {kind} {url!r}: expected an http(s) URL", details=url)
    if not parsed.hostname:
        raise InvalidURLError(f"Invalid {kind} {url!r}: missing host", details=url)


__all__ = ["build_base_url", "build_api_url"]
