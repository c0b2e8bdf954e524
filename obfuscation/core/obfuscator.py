"""Obfuscator base class and the primitive obfuscator types."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from .exceptions import InvalidArgumentError, InvalidConfigError


class Obfuscator(ABC):
    """
    A pure, deterministic transformation from text to obfuscated text.

    Obfuscators are immutable and safe to share between threads. Subclasses
    only need to implement ``obfuscate_text``.

    Examples:
        >>> class UpperCase(Obfuscator):
        ...     def obfuscate_text(self, text: str) -> str:
        ...         return text.upper()
        >>> UpperCase().obfuscate_text("Hello World")
        'HELLO WORLD'
    """

    @abstractmethod
    def obfuscate_text(self, text: str) -> str:
        """Obfuscate the given text."""

    @property
    def last_prefix_length(self) -> int:
        """The largest prefix length registered on this obfuscator's chain.

        Zero for obfuscators that are not the result of ``until_length(...).then(...)``.
        """
        return 0

    def until_length(self, prefix_length: int) -> "ObfuscatorPrefix":
        """Use this obfuscator for the first ``prefix_length`` characters only.

        Args:
            prefix_length: Number of characters handled by this obfuscator;
                must be larger than any prefix length already used in the chain

        Returns:
            A prefix on which ``then`` provides the obfuscator for the rest

        Raises:
            InvalidConfigError: If ``prefix_length`` does not exceed ``last_prefix_length``
        """
        return ObfuscatorPrefix(self, prefix_length)


def _require_longer_prefix(prefix_length: int, last_prefix_length: int) -> None:
    if prefix_length <= last_prefix_length:
        raise InvalidConfigError(
            f"prefix length {prefix_length} must be larger than {last_prefix_length}",
            context={"prefix_length": prefix_length, "last_prefix_length": last_prefix_length},
        )


@dataclass(frozen=True)
class ObfuscatorPrefix:
    """An obfuscator bound to a prefix length, waiting for the rest."""

    obfuscator: Obfuscator
    prefix_length: int

    def __post_init__(self) -> None:
        _require_longer_prefix(self.prefix_length, self.obfuscator.last_prefix_length)

    def then(self, other: Obfuscator) -> "PrefixChainObfuscator":
        """Obfuscate everything after the prefix with ``other``."""
        return PrefixChainObfuscator(self.obfuscator, self.prefix_length, other)


@dataclass(frozen=True)
class PrefixChainObfuscator(Obfuscator):
    """Applies ``first`` to the first ``length_for_first`` characters and ``second`` to the rest."""

    first: Obfuscator
    length_for_first: int
    second: Obfuscator

    def __post_init__(self) -> None:
        _require_longer_prefix(self.length_for_first, self.first.last_prefix_length)

    @property
    def last_prefix_length(self) -> int:
        return self.length_for_first

    def obfuscate_text(self, text: str) -> str:
        end = len(text)
        split_at = min(self.length_for_first, end)
        if split_at == end:
            return self.first.obfuscate_text(text)
        return self.first.obfuscate_text(text[:split_at]) + self.second.obfuscate_text(
            text[split_at:]
        )


@dataclass(frozen=True)
class AllObfuscator(Obfuscator):
    """Replaces every character with the mask."""

    mask: str = "*"

    def obfuscate_text(self, text: str) -> str:
        return self.mask * len(text)


@dataclass(frozen=True)
class NoneObfuscator(Obfuscator):
    """Returns text as-is."""

    def obfuscate_text(self, text: str) -> str:
        return text


@dataclass(frozen=True)
class FixedValueObfuscator(Obfuscator):
    """Replaces any text with a fixed value."""

    value: str

    def obfuscate_text(self, text: str) -> str:
        return self.value


@dataclass(frozen=True)
class ExplodedObfuscator(Obfuscator):
    """Splits text on a separator and obfuscates each part separately.

    Attributes:
        separator: Non-empty separator; kept as-is in the output
        obfuscator: Obfuscator applied to each part
        limit: Maximum number of parts, the last one containing the remainder;
            ``None`` for no limit
    """

    separator: str
    obfuscator: Obfuscator
    limit: Optional[int] = None

    def __post_init__(self) -> None:
        if not self.separator:
            raise InvalidArgumentError(
                "separator must not be empty", argument="separator", value=self.separator
            )
        if self.limit is not None and self.limit < 1:
            raise InvalidArgumentError(f"{self.limit} < 1", argument="limit", value=self.limit)

    def obfuscate_text(self, text: str) -> str:
        max_split = -1 if self.limit is None else self.limit - 1
        parts = text.split(self.separator, max_split)
        return self.separator.join(self.obfuscator.obfuscate_text(part) for part in parts)
