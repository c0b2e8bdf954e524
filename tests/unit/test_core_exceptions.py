"""Tests for the obfuscation exception hierarchy."""

import pytest

from obfuscation.core.exceptions import (
    DuplicateKeyError,
    InvalidArgumentError,
    InvalidConfigError,
    ObfuscationError,
    require_non_negative,
)


class TestObfuscationError:
    """Test base ObfuscationError functionality."""

    def test_basic_error_creation(self):
        """Test basic error creation with message only."""
        error = ObfuscationError("Test error message")

        assert str(error) == "Test error message"
        assert error.message == "Test error message"
        assert error.error_code == "OBFUSCATION_ERROR"
        assert error.context == {}

    def test_error_with_custom_code_and_context(self):
        context = {"prefix_length": 4}
        error = ObfuscationError("Test", error_code="CUSTOM", context=context)

        assert error.error_code == "CUSTOM"
        assert error.context == context

    def test_add_context(self):
        error = ObfuscationError("Test")
        error.add_context("key", "value")

        assert error.context == {"key": "value"}

    def test_to_dict(self):
        error = ObfuscationError("Test message", context={"key": "value"})

        assert error.to_dict() == {
            "error_type": "ObfuscationError",
            "message": "Test message",
            "error_code": "OBFUSCATION_ERROR",
            "context": {"key": "value"},
        }


class TestSpecificErrors:
    """Test the concrete error types."""

    def test_invalid_argument_error(self):
        error = InvalidArgumentError("-1 < 0", argument="length", value=-1)

        assert isinstance(error, InvalidConfigError)
        assert isinstance(error, ObfuscationError)
        assert isinstance(error, ValueError)
        assert error.context == {"argument": "length", "value": -1}
        assert error.error_code == "INVALIDARGUMENT_ERROR"

    def test_invalid_argument_error_without_context(self):
        assert InvalidArgumentError("bad").context == {}

    def test_invalid_config_error(self):
        error = InvalidConfigError("inconsistent", context={"keep_at_start": 2})

        assert isinstance(error, ObfuscationError)
        assert not isinstance(error, ValueError)
        assert error.to_dict()["error_type"] == "InvalidConfigError"

    def test_duplicate_key_error(self):
        error = DuplicateKeyError("Duplicate header name: a", key="a", case_sensitive=False)

        assert isinstance(error, ValueError)
        assert error.context == {"key": "a", "case_sensitive": False}

    def test_catch_as_base(self):
        with pytest.raises(ObfuscationError):
            raise DuplicateKeyError("duplicate")


class TestRequireNonNegative:
    """Test the non-negative argument check."""

    @pytest.mark.parametrize("value", [0, 1, 100])
    def test_valid(self, value):
        assert require_non_negative("count", value) == value

    def test_negative(self):
        with pytest.raises(InvalidArgumentError) as exc_info:
            require_non_negative("count", -3)

        assert exc_info.value.message == "-3 < 0"
        assert exc_info.value.context == {"argument": "count", "value": -3}
