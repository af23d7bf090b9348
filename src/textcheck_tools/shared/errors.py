"""Exception types raised by textcheck_tools.

All errors share the ``TextToolsError`` base and also derive from the closest
builtin exception, so callers can catch either form.
"""

from typing import Optional


class TextToolsError(Exception):
    """Base exception for all textcheck_tools errors."""


class InvalidArgumentError(TextToolsError, ValueError):
    """Raised when a required string argument is missing or blank."""

    def __init__(self, message: str, field_name: Optional[str] = None) -> None:
        super().__init__(message)
        self.field_name = field_name


class UnsupportedEncodingError(TextToolsError, LookupError):
    """Raised when a character encoding name is not known to the codec registry."""

    def __init__(self, encoding: str) -> None:
        super().__init__(f"Unsupported encoding: {encoding}")
        self.encoding = encoding


class IOFailureError(TextToolsError, OSError):
    """Raised when the underlying stream fails while being read."""

    def __init__(self, message: str, cause: Optional[OSError] = None) -> None:
        super().__init__(message)
        self.cause = cause
