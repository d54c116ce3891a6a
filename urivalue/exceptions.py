"""Exceptions for urivalue library."""

from __future__ import annotations


class UriError(Exception):
    """Base exception for all urivalue errors."""


class UriParseError(UriError, ValueError):
    """Exception raised when parsing a uri string.

    The 'message' attribute contains a human-readable message about the
    error that occurred and the 'uri' attribute holds the original input
    that could not be parsed. The 'detailed_error' attribute can provide
    additional information about the error, such as the location in the
    input where the grammar stopped matching, useful for debugging purposes.

    This is also a ValueError so that pydantic reports it as a validation
    error when a uri string is parsed as part of a model.
    """

    def __init__(
        self, message: str, *, uri: str, detailed_error: str | None = None
    ) -> None:
        """Initialize the UriParseError with a message."""
        super().__init__(message)
        self.message = message
        self.uri = uri
        self.detailed_error = detailed_error


class InvalidPortError(UriError, ValueError):
    """Exception raised when a port is not an integer in the range 0-65535."""

    def __init__(self, port: object) -> None:
        """Initialize the InvalidPortError with the rejected port."""
        super().__init__(f"Invalid value for port: {port!r}")
        self.port = port
