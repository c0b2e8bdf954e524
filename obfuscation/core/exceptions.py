"""Obfuscation exception hierarchy.

All errors are raised while configuring obfuscators: by factory functions,
builder methods and ``build()`` calls. Obfuscating text never raises for
well-formed input.
"""

from typing import Any, Dict, Optional


class ObfuscationError(Exception):
    """Base exception for all obfuscation-related errors.

    Attributes:
        message: Human-readable error description
        error_code: Machine-readable error identifier
        context: Additional error context and metadata
    """

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self._default_error_code()
        self.context = context or {}

    def _default_error_code(self) -> str:
        """Generate default error code based on exception class name."""
        return self.__class__.__name__.upper().replace("ERROR", "_ERROR")

    def add_context(self, key: str, value: Any) -> None:
        """Add additional context to the error."""
        self.context[key] = value

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to structured dictionary for logging/reporting."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "error_code": self.error_code,
            "context": self.context,
        }


class InvalidConfigError(ObfuscationError):
    """Raised when an obfuscator is configured with invalid settings.

    Detected at the call that introduces the problem, for instance
    ``build()`` of a portion obfuscator or ``until_length()`` on a chain.
    """


class InvalidArgumentError(InvalidConfigError, ValueError):
    """Raised when a single argument is out of range.

    Used for negative counts, masks that are not exactly one character,
    empty split substrings and similar.
    """

    def __init__(
        self,
        message: str,
        argument: Optional[str] = None,
        value: Optional[Any] = None,
        **kwargs,
    ):
        super().__init__(message, **kwargs)
        if argument:
            self.add_context("argument", argument)
        if value is not None:
            self.add_context("value", value)


class DuplicateKeyError(ObfuscationError, ValueError):
    """Raised when a property or header name is registered twice."""

    def __init__(
        self,
        message: str,
        key: Optional[str] = None,
        case_sensitive: Optional[bool] = None,
        **kwargs,
    ):
        super().__init__(message, **kwargs)
        if key is not None:
            self.add_context("key", key)
        if case_sensitive is not None:
            self.add_context("case_sensitive", case_sensitive)


def require_non_negative(argument: str, value: int) -> int:
    """Return ``value`` if it is not negative, raise otherwise."""
    if value < 0:
        raise InvalidArgumentError(f"{value} < 0", argument=argument, value=value)
    return value
