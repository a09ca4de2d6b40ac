"""Custom exceptions for the container registry API client."""

from typing import Any


class RegistryError(Exception):
    """Base exception for all registry-related errors."""

    pass


class ValidationError(RegistryError):
    """Raised when client configuration is invalid."""

    pass


class RequestConstructionError(RegistryError):
    """Raised when a request cannot be built from the given arguments."""

    pass


class TransportError(RegistryError):
    """Raised when the API cannot be reached or the request times out."""

    pass


class DecodeError(RegistryError):
    """Raised when a response body does not match the expected shape."""

    pass


class APIError(RegistryError):
    """Raised when the API answers with a non-2xx status.

    Attributes:
        status: HTTP status code returned by the API
        message: Error message from the response body, or the HTTP reason
        body: Decoded response body when it was JSON, otherwise None
    """

    def __init__(self, status: int, message: str, body: Any = None) -> None:
        super().__init__(f"{status}: {message}")
        self.status = status
        self.message = message
        self.body = body


class NotFoundError(APIError):
    """Raised when the requested resource does not exist (HTTP 404)."""

    pass
