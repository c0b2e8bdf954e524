"""Split points for obfuscating text before and after a located substring."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, Optional

from .exceptions import InvalidArgumentError, require_non_negative
from .obfuscator import Obfuscator


class SplitPoint(ABC):
    """
    A point in text where obfuscation switches from one obfuscator to another.

    Subclasses locate the split point with ``split_start`` and tell how many
    characters at that point are left as-is with ``split_length``.

    Examples:
        >>> from obfuscation import obfuscate
        >>> local_part = (
        ...     obfuscate.portion().keep_at_start(1).keep_at_end(1).with_fixed_total_length(8).build()
        ... )
        >>> email = SplitPoint.at_first("@").split_to(local_part, obfuscate.none())
        >>> email.obfuscate_text("test@example.org")
        't******t@example.org'
    """

    @abstractmethod
    def split_start(self, text: str) -> Optional[int]:
        """Return the index where the split point starts, or ``None`` if the text has none."""

    @property
    @abstractmethod
    def split_length(self) -> int:
        """The number of characters at the split point that are not obfuscated."""

    def split_to(self, before: Obfuscator, after: Obfuscator) -> "SplitObfuscator":
        """Create an obfuscator that uses ``before`` and ``after`` on either side of this split point.

        Text without a split point is obfuscated entirely by ``before``.
        """
        return SplitObfuscator(self, before, after)

    @staticmethod
    def at_first(s: str) -> "FirstOccurrence":
        """Split at the first occurrence of ``s``, leaving ``s`` itself as-is."""
        return FirstOccurrence(s)

    @staticmethod
    def at_last(s: str) -> "LastOccurrence":
        """Split at the last occurrence of ``s``, leaving ``s`` itself as-is."""
        return LastOccurrence(s)

    @staticmethod
    def at_nth(s: str, occurrence: int) -> "NthOccurrence":
        """Split at a specific occurrence of ``s``, leaving ``s`` itself as-is.

        Args:
            s: The text to split on
            occurrence: The zero-based occurrence; 0 is the same as ``at_first``

        Raises:
            InvalidArgumentError: If ``s`` is empty or ``occurrence`` is negative
        """
        return NthOccurrence(s, occurrence)

    @staticmethod
    def custom(
        locate: Callable[[str], Optional[int]], split_length: int
    ) -> "CustomSplitPoint":
        """Split where ``locate`` says, leaving ``split_length`` characters as-is."""
        return CustomSplitPoint(locate, split_length)


def _require_split_text(split_at: str) -> None:
    if not split_at:
        raise InvalidArgumentError(
            "cannot split on empty strings", argument="split_at", value=split_at
        )


@dataclass(frozen=True)
class FirstOccurrence(SplitPoint):
    """Split point at the first occurrence of a substring."""

    split_at: str

    def __post_init__(self) -> None:
        _require_split_text(self.split_at)

    @property
    def split_length(self) -> int:
        return len(self.split_at)

    def split_start(self, text: str) -> Optional[int]:
        index = text.find(self.split_at)
        return None if index == -1 else index


@dataclass(frozen=True)
class LastOccurrence(SplitPoint):
    """Split point at the last occurrence of a substring."""

    split_at: str

    def __post_init__(self) -> None:
        _require_split_text(self.split_at)

    @property
    def split_length(self) -> int:
        return len(self.split_at)

    def split_start(self, text: str) -> Optional[int]:
        index = text.rfind(self.split_at)
        return None if index == -1 else index


@dataclass(frozen=True)
class NthOccurrence(SplitPoint):
    """Split point at a zero-based occurrence of a substring.

    Each search resumes one character after the previous match, so
    overlapping occurrences are counted.
    """

    split_at: str
    occurrence: int

    def __post_init__(self) -> None:
        _require_split_text(self.split_at)
        require_non_negative("occurrence", self.occurrence)

    @property
    def split_length(self) -> int:
        return len(self.split_at)

    def split_start(self, text: str) -> Optional[int]:
        index = text.find(self.split_at)
        for _ in range(self.occurrence):
            if index == -1:
                break
            index = text.find(self.split_at, index + 1)
        return None if index == -1 else index


@dataclass(frozen=True)
class CustomSplitPoint(SplitPoint):
    """Split point backed by a locating function."""

    locate: Callable[[str], Optional[int]]
    length: int

    def __post_init__(self) -> None:
        require_non_negative("split_length", self.length)

    @property
    def split_length(self) -> int:
        return self.length

    def split_start(self, text: str) -> Optional[int]:
        return self.locate(text)


@dataclass(frozen=True)
class SplitObfuscator(Obfuscator):
    """Obfuscates text before and after a split point with different obfuscators."""

    split_point: SplitPoint
    before: Obfuscator
    after: Obfuscator

    def obfuscate_text(self, text: str) -> str:
        split_start = self.split_point.split_start(text)
        if split_start is None:
            return self.before.obfuscate_text(text)

        before = self.before.obfuscate_text(text[:split_start])

        split_length = self.split_point.split_length
        if split_length > 0:
            split_end = split_start + split_length
            return before + text[split_start:split_end] + self.after.obfuscate_text(text[split_end:])

        return before + self.after.obfuscate_text(text[split_start:])
