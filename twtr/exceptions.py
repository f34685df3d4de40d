"""
Exception hierarchy for twtr.

Every error raised by the client derives from TwitterError so callers can
catch the whole family with a single except clause.
"""

from typing import Optional, Dict, Any, List, TYPE_CHECKING

if TYPE_CHECKING:
    from .models import APIResponse, APIResponseError


class TwitterError(Exception):
    """Base exception for all twtr errors."""

    def __init__(self, message: str, details: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} ({self.details})"
        return self.message


class ConfigurationError(TwitterError):
    """A credential or setting required by the operation is missing."""


class InvalidArgumentError(TwitterError, ValueError):
    """A required identifier argument is missing or empty."""


class TransportError(TwitterError):
    """The request could not be sent or the connection failed or timed out."""


class DecodeError(TwitterError):
    """The response body was not valid JSON or did not match the expected shape."""

    def __init__(
        self,
        message: str,
        details: Optional[str] = None,
        status_code: Optional[int] = None,
    ):
        super().__init__(message, details)
        self.status_code = status_code


class APIError(TwitterError):
    """
    The API reported a failure.

    Raised when the response carries a non-empty ``errors`` array or a
    non-2xx status. ``response`` holds the partially decoded typed result
    so callers can inspect the structured errors.
    """

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        response_data: Optional[Dict[str, Any]] = None,
        response: Optional["APIResponse"] = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.response_data = response_data or {}
        self.response = response

    @property
    def errors(self) -> List["APIResponseError"]:
        """Structured errors from the decoded response, if any."""
        if self.response is None or not self.response.errors:
            return []
        return list(self.response.errors)


class InvalidRequestError(APIError):
    """HTTP 400: one or more request parameters were invalid."""


class AuthenticationError(APIError):
    """HTTP 401: the credentials were rejected."""


class PermissionDeniedError(APIError):
    """HTTP 403: the credentials lack access to the resource."""


class NotFoundError(APIError):
    """HTTP 404: the requested resource does not exist."""
