"""
Exception hierarchy for the operator console.

Three kinds of failure exist on the client side:

- AuthenticationRequired: the admin API answered 401/403. The gateway has
  already sent the operator to the SSO login page; nothing in the current
  console can recover from it.
- RequestFailed: any other non-2xx answer, a transport failure, or a payload
  that cannot be understood (MalformedResponse). Carries a display string.
- ValidationError: a client-side guard (empty message, empty agent id, empty
  approval principal) that blocks a call before it is made.

All exceptions inherit from AppError which provides:
- error_code: Machine-readable error code (from ErrorCode enum)
- message: Human-readable error message, safe to show to the operator
- details: Optional dictionary with additional context

Usage:
    from jclaw_console.domain.exceptions import RequestFailed

    raise RequestFailed("HTTP 500", status_code=500)
"""

from enum import Enum
from typing import Any, Optional


class ErrorCode(str, Enum):
    """Machine-readable error codes for console failures."""

    UNAUTHORIZED = "UNAUTHORIZED"
    """The admin API rejected the session (401/403)"""

    REQUEST_FAILED = "REQUEST_FAILED"
    """Non-2xx answer or transport failure"""

    MALFORMED_RESPONSE = "MALFORMED_RESPONSE"
    """A 2xx payload that does not match the expected shape"""

    VALIDATION_ERROR = "VALIDATION_ERROR"
    """Client-side input guard"""


class AppError(Exception):
    """
    Base exception for all console errors.

    Attributes:
        error_code: Machine-readable error code (from ErrorCode enum)
        message: Human-readable error message
        details: Optional dictionary with additional error context
    """

    error_code: ErrorCode = ErrorCode.REQUEST_FAILED
    default_message: str = "An unexpected error occurred"

    def __init__(
        self,
        message: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        self.message = message or self.default_message
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"error_code={self.error_code.value}, "
            f"message={self.message!r}, "
            f"details={self.details!r})"
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for structured logging."""
        result = {
            "error_code": self.error_code.value,
            "message": self.message,
        }

        if self.details:
            result["details"] = self.details

        return result


class AuthenticationRequired(AppError):
    """The session is missing or expired; the operator was sent to SSO."""

    error_code = ErrorCode.UNAUTHORIZED
    default_message = "Authentication required"

    def __init__(
        self,
        message: Optional[str] = None,
        status_code: Optional[int] = None,
        redirect_to: Optional[str] = None,
    ):
        super().__init__(message, details={"status_code": status_code, "redirect_to": redirect_to})
        self.status_code = status_code
        self.redirect_to = redirect_to


class RequestFailed(AppError):
    """A request to the admin API did not succeed."""

    error_code = ErrorCode.REQUEST_FAILED
    default_message = "Request failed"

    def __init__(
        self,
        message: Optional[str] = None,
        status_code: Optional[int] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, details)
        self.status_code = status_code


class MalformedResponse(RequestFailed):
    """The admin API answered 2xx with a payload the console cannot use."""

    error_code = ErrorCode.MALFORMED_RESPONSE
    default_message = "Unexpected response from server"


class ValidationError(AppError):
    """Operator input failed a client-side guard; no request was made."""

    error_code = ErrorCode.VALIDATION_ERROR
    default_message = "Invalid input"
