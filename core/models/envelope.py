# =============================================================================
# core/models/envelope.py - Response Envelope
# =============================================================================
# Every response body has the same shape:
#
#   {"success": true,  "data": <user | list of users | message>}
#   {"success": false, "data": "<human readable message>"}
#
# The HTTP status is chosen by the caller (see app/responses.py).
# =============================================================================

from typing import Generic, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class Envelope(BaseModel, Generic[T]):
    """Uniform success/failure wrapper for API responses."""

    success: bool
    data: T

    @classmethod
    def ok(cls, data: T) -> "Envelope[T]":
        """Wrap a successful result."""
        return cls(success=True, data=data)

    @classmethod
    def fail(cls, message: str) -> "Envelope[str]":
        """Wrap a failure message."""
        return cls(success=False, data=message)
