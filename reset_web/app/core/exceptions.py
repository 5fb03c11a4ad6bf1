"""
Exception hierarchy for the site.

``ApiError`` and its subclasses are raised by the gateway client and
describe how a call to the REST backend failed.  The stores translate
them into inline error strings; the web front maps them to HTTP
responses.
"""

from typing import Optional


class ResetWebError(Exception):
    """Base class for all errors raised by this package."""


class ApiError(ResetWebError):
    """A call to the REST backend failed.

    Attributes:
        message: Human readable description, suitable for inline display.
        status_code: HTTP status of the response, ``None`` when no
            response was received.
        detail: The ``detail`` field of the server's error body, if any.
    """

    def __init__(self, message: str, status_code: Optional[int] = None, detail: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.detail = detail


class NetworkError(ApiError):
    """The backend could not be reached (connection error, timeout)."""


class UnauthorizedError(ApiError):
    """The backend answered 401; the stored session is no longer valid."""


class ClientError(ApiError):
    """The backend rejected the request (4xx other than 401)."""


class ServerError(ApiError):
    """The backend failed (5xx) or answered with something unexpected."""


class FormValidationError(ResetWebError):
    """A form was submitted with missing or invalid fields.

    ``errors`` maps field names to messages.
    """

    def __init__(self, errors: dict) -> None:
        super().__init__("; ".join(f"{k}: {v}" for k, v in errors.items()))
        self.errors = errors


class UploadValidationError(ResetWebError):
    """A file was rejected before being uploaded."""


class NavigationRequired(ResetWebError):
    """The visitor has to be sent to another view (``location``)."""

    def __init__(self, location: str) -> None:
        super().__init__(f"Navigation to {location} required")
        self.location = location
