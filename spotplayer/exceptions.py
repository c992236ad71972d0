"""
Client exceptions.

Every failure surfaced by the client is one of these. They carry a
human-readable message plus a machine-readable code.
"""
from typing import Optional


class SpotPlayerError(Exception):
    """Base exception for all client errors."""

    def __init__(self, message: str, code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__


class ConfigurationError(SpotPlayerError):
    """Raised when no API key can be resolved for a call."""

    def __init__(self, message: str = "API key is required"):
        super().__init__(message, code="CONFIGURATION_ERROR")


class ValidationError(SpotPlayerError, ValueError):
    """Raised when a payload or license id fails validation."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message, code="VALIDATION_ERROR")
        self.field = field


class ApiRequestError(SpotPlayerError):
    """
    Raised when the panel answers with an error status or the request
    never completes.

    status_code is None for transport failures (connection, timeout, TLS).
    """

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        response_body: Optional[str] = None,
    ):
        super().__init__(message, code="API_REQUEST_FAILED")
        self.status_code = status_code
        self.response_body = response_body


class ResponseFormatError(SpotPlayerError):
    """Raised when the response body is not valid JSON."""

    def __init__(self, message: str):
        super().__init__(message, code="INVALID_RESPONSE")
