"""
Exception types raised by the Patreon API client.
"""

from typing import List, Optional

from .schemas.document import ErrorObject


class PatreonError(Exception):
    """Base class for every error raised by this library."""


class TransportError(PatreonError):
    """Network failure reported by the HTTP session."""


class APIError(PatreonError):
    """
    Non-success response from the Patreon API.

    Args:
        status_code: HTTP status of the response
        errors: Structured error objects decoded from the response body
    """

    def __init__(self, status_code: int, errors: Optional[List[ErrorObject]] = None):
        self.status_code = status_code
        self.errors = list(errors or [])
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if not self.errors:
            return f"API request failed: {self.status_code}"
        first = self.errors[0]
        summary = first.title or first.code_name or first.detail or first.code
        more = f" (+{len(self.errors) - 1} more)" if len(self.errors) > 1 else ""
        return f"API request failed: {self.status_code} - {summary}{more}"


class DecodeError(PatreonError):
    """Response body or resource attributes do not match the expected schema."""

    def __init__(
        self,
        message: str,
        resource_type: Optional[str] = None,
        resource_id: Optional[str] = None
    ):
        self.resource_type = resource_type
        self.resource_id = resource_id
        if resource_type is not None:
            message = f"{message} ({resource_type} {resource_id})"
        super().__init__(message)


class DanglingReferenceWarning(UserWarning):
    """A relationship pointed at a resource missing from ``included``. Logged, never raised."""
