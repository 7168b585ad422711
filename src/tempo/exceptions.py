"""Custom exceptions for the tempo weather client."""

from __future__ import annotations


class TempoError(Exception):
    """Base exception for all tempo errors."""


class TempoConfigError(TempoError):
    """Raised when the client is not configured to make requests (e.g. no API key)."""


class TempoConnectionError(TempoError):
    """Raised when the client cannot connect to the API."""


class TempoTimeoutError(TempoError):
    """Raised when a request to the API times out."""


class TempoAPIError(TempoError):
    """Raised when the API returns an error response (4xx/5xx)."""

    def __init__(self, status_code: int, message: str) -> None:
        self.status_code = status_code
        self.message = message
        super().__init__(f"HTTP {status_code}: {message}")


class TempoValidationError(TempoError):
    """Raised when API response data fails model validation.

    ``payload`` keeps the raw body so callers can log what was received.
    """

    def __init__(self, message: str, payload: str | None = None) -> None:
        self.payload = payload
        super().__init__(message)


class TempoStoreError(TempoError):
    """Raised when the shared app-group store cannot be read or written."""


class StoreUnavailableError(TempoStoreError):
    """Raised when the app-group container has not been provisioned."""
