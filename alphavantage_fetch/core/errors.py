"""Custom exception hierarchy for Alpha Vantage fetching."""

from __future__ import annotations

from typing import Any


class AlphaVantageError(RuntimeError):
    """Base class for all domain-specific exceptions."""


class ConfigurationError(AlphaVantageError):
    """Raised synchronously when the client is missing its API key."""


class RequestValidationError(AlphaVantageError, ValueError):
    """Raised when a request descriptor lacks a required field."""


class TransportError(AlphaVantageError):
    """Represents network failures and non-2xx HTTP responses."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class RemoteApiError(AlphaVantageError):
    """The API answered with its own error payload."""

    def __init__(self, message: str, *, response: Any = None) -> None:
        super().__init__(message)
        self.response = response


class ThrottleError(RemoteApiError):
    """Rate-limit or informational payloads (``Note`` / ``Information``)."""


class ResponseDecodeError(AlphaVantageError):
    """Payload does not match the expected shape or holds unparseable numbers."""
