"""Obfuscation of a computed portion of text."""

from dataclasses import dataclass

from ..observability.logging import get_logger
from .exceptions import InvalidArgumentError, InvalidConfigError, require_non_negative
from .obfuscator import Obfuscator

logger = get_logger(__name__)

DEFAULT_MASK = "*"


def _require_mask(mask: str) -> str:
    if len(mask) != 1:
        raise InvalidArgumentError(
            f"'{mask}' is not exactly 1 character long", argument="mask", value=mask
        )
    return mask


@dataclass(frozen=True)
class PortionObfuscator(Obfuscator):
    """
    Masks all text except a number of characters at the start and end.

    Attributes:
        keep_at_start: Number of leading characters to leave as-is
        keep_at_end: Number of trailing characters to leave as-is
        at_least_from_start: Minimum number of leading characters to mask;
            when positive, ``keep_at_start`` is ignored
        at_least_from_end: Minimum number of trailing characters to mask;
            when positive, ``keep_at_end`` is ignored
        fixed_total_length: Length of the result, or -1 for the input length.
            When set, the kept characters are taken from the input regardless
            of the output length, so short inputs can repeat characters
        mask: The single mask character

    Examples:
        >>> PortionObfuscator(keep_at_start=4, keep_at_end=4).obfuscate_text("hello world")
        'hell***orld'
        >>> PortionObfuscator(keep_at_start=2, keep_at_end=2, fixed_total_length=6).obfuscate_text("foo")
        'fo**oo'
    """

    keep_at_start: int = 0
    keep_at_end: int = 0
    at_least_from_start: int = 0
    at_least_from_end: int = 0
    fixed_total_length: int = -1
    mask: str = DEFAULT_MASK

    def __post_init__(self) -> None:
        require_non_negative("keep_at_start", self.keep_at_start)
        require_non_negative("keep_at_end", self.keep_at_end)
        require_non_negative("at_least_from_start", self.at_least_from_start)
        require_non_negative("at_least_from_end", self.at_least_from_end)
        _require_mask(self.mask)
        if self.fixed_total_length < -1:
            raise InvalidArgumentError(
                f"{self.fixed_total_length} < -1",
                argument="fixed_total_length",
                value=self.fixed_total_length,
            )
        if 0 <= self.fixed_total_length < self.keep_at_start + self.keep_at_end:
            raise InvalidConfigError(
                f"fixed_total_length ({self.fixed_total_length}) is smaller than "
                f"keep_at_start ({self.keep_at_start}) + keep_at_end ({self.keep_at_end})",
                context={
                    "fixed_total_length": self.fixed_total_length,
                    "keep_at_start": self.keep_at_start,
                    "keep_at_end": self.keep_at_end,
                },
            )

    def _from_start(self, length: int) -> int:
        if self.at_least_from_start > 0:
            # the first characters need to be obfuscated so ignore keep_at_start
            return 0
        keep_at_most = max(0, length - self.at_least_from_end)
        return min(self.keep_at_start, keep_at_most)

    def _from_end(self, length: int, from_start: int, allow_duplicates: bool) -> int:
        if self.at_least_from_end > 0:
            # the last characters need to be obfuscated so ignore keep_at_end
            return 0
        # without duplicates, characters already kept at the start are not available
        available = length if allow_duplicates else length - from_start
        keep_at_most = max(0, length - self.at_least_from_start)
        return min(self.keep_at_end, available, keep_at_most)

    def obfuscate_text(self, text: str) -> str:
        allow_duplicates = self.fixed_total_length >= 0

        length = len(text)
        from_start = self._from_start(length)
        from_end = self._from_end(length, from_start, allow_duplicates)

        output_length = self.fixed_total_length if allow_duplicates else length
        mask_count = max(0, output_length - from_start - from_end)

        return text[:from_start] + self.mask * mask_count + text[length - from_end:]


class PortionObfuscatorBuilder:
    """Fluent builder for PortionObfuscator.

    Examples:
        obfuscator = (
            PortionObfuscatorBuilder()
            .keep_at_start(4)
            .keep_at_end(4)
            .build()
        )
    """

    def __init__(self) -> None:
        """Initialize builder with default values."""
        self.with_defaults()

    def keep_at_start(self, count: int) -> "PortionObfuscatorBuilder":
        """Set the number of leading characters to leave as-is.

        Raises:
            InvalidArgumentError: If count is negative
        """
        self._keep_at_start = require_non_negative("keep_at_start", count)
        return self

    def keep_at_end(self, count: int) -> "PortionObfuscatorBuilder":
        """Set the number of trailing characters to leave as-is.

        Raises:
            InvalidArgumentError: If count is negative
        """
        self._keep_at_end = require_non_negative("keep_at_end", count)
        return self

    def at_least_from_start(self, count: int) -> "PortionObfuscatorBuilder":
        """Set the minimum number of leading characters to mask.

        Raises:
            InvalidArgumentError: If count is negative
        """
        self._at_least_from_start = require_non_negative("at_least_from_start", count)
        return self

    def at_least_from_end(self, count: int) -> "PortionObfuscatorBuilder":
        """Set the minimum number of trailing characters to mask.

        Raises:
            InvalidArgumentError: If count is negative
        """
        self._at_least_from_end = require_non_negative("at_least_from_end", count)
        return self

    def with_fixed_total_length(self, fixed_total_length: int) -> "PortionObfuscatorBuilder":
        """Set a fixed length for the result; any negative value means the input length."""
        self._fixed_total_length = max(-1, fixed_total_length)
        return self

    def with_mask(self, mask: str) -> "PortionObfuscatorBuilder":
        """Set the mask character.

        Raises:
            InvalidArgumentError: If mask is not exactly one character
        """
        self._mask = _require_mask(mask)
        return self

    def with_defaults(self) -> "PortionObfuscatorBuilder":
        """Reset all settings to their defaults."""
        self._keep_at_start = 0
        self._keep_at_end = 0
        self._at_least_from_start = 0
        self._at_least_from_end = 0
        self._fixed_total_length = -1
        self._mask = DEFAULT_MASK
        return self

    def build(self) -> PortionObfuscator:
        """Build the configured PortionObfuscator.

        Raises:
            InvalidConfigError: If a fixed total length is smaller than
                keep_at_start + keep_at_end
        """
        obfuscator = PortionObfuscator(
            keep_at_start=self._keep_at_start,
            keep_at_end=self._keep_at_end,
            at_least_from_start=self._at_least_from_start,
            at_least_from_end=self._at_least_from_end,
            fixed_total_length=self._fixed_total_length,
            mask=self._mask,
        )
        logger.debug("Portion obfuscator built", obfuscator=repr(obfuscator))
        return obfuscator
