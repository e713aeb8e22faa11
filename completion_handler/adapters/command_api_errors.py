"""Project-native typed exceptions for host Command API callback failures."""

from __future__ import annotations


class CommandApiError(Exception):
    """Base exception for adapter-level Command API failures.

    Attributes:
        status_code: Optional HTTP status code returned by the host API.
    """

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class CommandApiConnectionError(CommandApiError, ConnectionError):
    """Transport-level connectivity failure while calling the host API."""


class CommandApiTimeoutError(CommandApiError, TimeoutError):
    """Request to the host API exceeded the configured timeout."""


class CommandApiStatusError(CommandApiError):
    """Host API answered with a non-success HTTP status."""
