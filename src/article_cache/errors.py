"""Error taxonomy for the article cache service.

A cache miss is not an error and has no exception type: the accessor returns
the ``ABSENT`` sentinel instead.
"""

from typing import Any

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Standard error response body."""

    code: str
    message: str
    details: dict[str, Any] = {}


class ArticleCacheError(Exception):
    """Base exception for the article cache service."""

    def __init__(self, code: str, message: str, details: dict[str, Any] | None = None) -> None:
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def to_response(self) -> ErrorResponse:
        """Convert to an error response body."""
        return ErrorResponse(code=self.code, message=self.message, details=self.details)


class DecodeError(ArticleCacheError):
    """A cached payload is not well-formed JSON."""

    def __init__(self, message: str = "Cached payload could not be decoded", details: dict[str, Any] | None = None):
        super().__init__("DECODE_ERROR", message, details)


class OriginError(ArticleCacheError):
    """A query or insert against the origin store failed.

    ``details`` carries the origin's own error payload when it sent one
    (PostgREST uses ``message``, ``code``, ``details`` and ``hint``).
    """

    def __init__(
        self,
        message: str = "Origin request failed",
        details: dict[str, Any] | None = None,
        status_code: int | None = None,
    ):
        super().__init__("ORIGIN_ERROR", message, details)
        self.status_code = status_code


class NotFoundError(ArticleCacheError):
    """The origin has no record matching the requested id."""

    def __init__(self, message: str = "not found", details: dict[str, Any] | None = None):
        super().__init__("NOT_FOUND", message, details)
