"""Custom exception hierarchy for the La Poste SDK."""
from __future__ import annotations

from typing import Any


class ApiError(RuntimeError):
    """Base error for request construction and API failures."""

    def __init__(
        self,
        message: str = "",
        *,
        status_code: int | None = None,
        details: Any | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.details = details

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(status_code={self.status_code}, message={str(self)!r})"


class InvalidURLError(ApiError):
    """Raised when a base URL or a computed request URL is malformed."""


class RequestError(ApiError):
    """Raised when an HTTP request cannot be fulfilled."""


class AuthenticationError(RequestError):
    """Raised when the API rejects the supplied credentials."""
