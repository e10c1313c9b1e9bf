"""Error hierarchy for mdstyle."""
from __future__ import annotations

from typing import Any


class MdStyleError(Exception):
    """Base error for all mdstyle errors."""

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class InvalidThemeError(MdStyleError):
    """An uploaded theme could not be accepted (wrong type, no CSS rules)."""


class InvalidSelectorError(MdStyleError):
    """A stylesheet selector could not be compiled."""


class ConfigurationError(MdStyleError):
    """Invalid mdstyle configuration."""


# ---------------------------------------------------------------------------
# API client errors
# ---------------------------------------------------------------------------


class ApiError(MdStyleError):
    """Error response returned by a remote mdstyle server."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        raw: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message, cause=cause)
        self.status_code = status_code
        self.raw = raw


class AuthenticationError(ApiError):
    """Missing or invalid API key."""


class NotFoundError(ApiError):
    """Requested resource (usually a theme) does not exist."""


class InvalidRequestError(ApiError):
    """The request was malformed or rejected by validation."""


class ServerError(ApiError):
    """Server-side failure while handling the request."""


class RequestTimeoutError(MdStyleError):
    """A request to the server timed out."""


class NetworkError(MdStyleError):
    """A network-level error occurred."""


# ---------------------------------------------------------------------------
# Helper
# ---------------------------------------------------------------------------


def error_from_status_code(
    status_code: int,
    message: str,
    *,
    raw: dict[str, Any] | None = None,
) -> ApiError:
    """Map HTTP status code to the appropriate error type."""
    if status_code in (400, 413, 422):
        return InvalidRequestError(message, status_code=status_code, raw=raw)
    if status_code in (401, 403):
        return AuthenticationError(message, status_code=status_code, raw=raw)
    if status_code == 404:
        return NotFoundError(message, status_code=status_code, raw=raw)
    if 500 <= status_code <= 599:
        return ServerError(message, status_code=status_code, raw=raw)
    return ApiError(message, status_code=status_code, raw=raw)
