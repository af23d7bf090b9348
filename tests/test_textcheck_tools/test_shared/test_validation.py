"""Tests for argument validation and the error hierarchy."""

import pytest

from textcheck_tools.shared.errors import (
    InvalidArgumentError,
    IOFailureError,
    TextToolsError,
    UnsupportedEncodingError,
)
from textcheck_tools.shared.validation import assure_set


class TestAssureSet:
    """Test required string validation."""

    @pytest.mark.parametrize("value", ["x", " x ", "text\n", "\u00a0", "\u2003", "\u3000"])
    def test_accepts_non_blank_values(self, value):
        """Test that values holding more than control characters and spaces pass."""
        assure_set(value, "language")

    @pytest.mark.parametrize("value", [None, "", " ", "\t\n", "\x00\x1f "])
    def test_rejects_missing_or_blank_values(self, value):
        """Test that missing, empty and whitespace-only values fail."""
        # Act & Assert
        with pytest.raises(InvalidArgumentError, match="language cannot be empty") as exc_info:
            assure_set(value, "language")

        assert exc_info.value.field_name == "language"

    def test_error_is_value_error(self):
        """Test that callers can catch a plain ValueError."""
        with pytest.raises(ValueError):
            assure_set("", "text")

    def test_name_is_required(self):
        """Test that a missing argument name is a programming error."""
        with pytest.raises(TypeError):
            assure_set("value", None)


class TestErrorHierarchy:
    """Test the library exception types."""

    def test_all_errors_share_base(self):
        """Test that every error derives from TextToolsError."""
        assert issubclass(InvalidArgumentError, TextToolsError)
        assert issubclass(UnsupportedEncodingError, TextToolsError)
        assert issubclass(IOFailureError, TextToolsError)

    def test_builtin_bases(self):
        """Test the builtin exception each error also derives from."""
        assert issubclass(InvalidArgumentError, ValueError)
        assert issubclass(UnsupportedEncodingError, LookupError)
        assert issubclass(IOFailureError, OSError)

    def test_unsupported_encoding_message(self):
        """Test that the encoding name is kept and reported."""
        # Act
        error = UnsupportedEncodingError("x-unknown")

        # Assert
        assert error.encoding == "x-unknown"
        assert str(error) == "Unsupported encoding: x-unknown"

    def test_io_failure_keeps_cause(self):
        """Test that the wrapped OSError is available."""
        # Arrange
        cause = OSError("disk gone")

        # Act
        error = IOFailureError("Failed to read stream: disk gone", cause=cause)

        # Assert
        assert error.cause is cause
        assert str(error) == "Failed to read stream: disk gone"
