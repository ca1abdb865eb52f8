"""Tests for the conversion exception hierarchy."""

import pytest

from switchconvert import ConversionError as TopLevelConversionError
from switchconvert import FormatError as TopLevelFormatError
from switchconvert.ubnt_ruckus.exceptions import ConversionError, FormatError


class TestExceptionHierarchy:
    """Test exception inheritance and structure."""

    def test_conversion_error_inherits_from_exception(self):
        """ConversionError should inherit from Exception."""
        assert issubclass(ConversionError, Exception)
        exc = ConversionError("test")
        assert str(exc) == "test"

    def test_format_error_inherits_from_conversion_error(self):
        """FormatError should inherit from ConversionError."""
        assert issubclass(FormatError, ConversionError)
        exc = FormatError("Invalid JSON format: boom")
        assert isinstance(exc, ConversionError)
        assert str(exc) == "Invalid JSON format: boom"

    def test_catch_format_error_as_base(self):
        """FormatError can be caught as ConversionError."""
        with pytest.raises(ConversionError):
            raise FormatError("bad")

    def test_reexported_from_package(self):
        """Top-level package re-exports the same classes."""
        assert TopLevelConversionError is ConversionError
        assert TopLevelFormatError is FormatError
