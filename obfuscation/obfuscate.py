"""Factory functions for the built-in obfuscators.

Meant to be used as a namespace::

    from obfuscation import obfuscate

    obfuscator = obfuscate.none().until_length(4).then(obfuscate.all())
"""

from typing import Optional

from .core.exceptions import require_non_negative
from .core.obfuscator import (
    AllObfuscator,
    ExplodedObfuscator,
    FixedValueObfuscator,
    NoneObfuscator,
    Obfuscator,
)
from .core.portion import DEFAULT_MASK, PortionObfuscatorBuilder

_NONE = NoneObfuscator()


def all(mask: str = DEFAULT_MASK) -> Obfuscator:  # noqa: A001
    """Replace each character with ``mask``.

    Examples:
        >>> all().obfuscate_text("Hello World")
        '***********'
    """
    return AllObfuscator(mask)


def none() -> Obfuscator:
    """Leave text as-is."""
    return _NONE


def fixed_length(length: int, mask: str = DEFAULT_MASK) -> Obfuscator:
    """Replace any text with ``mask`` repeated ``length`` times.

    Raises:
        InvalidArgumentError: If length is negative
    """
    require_non_negative("length", length)
    return FixedValueObfuscator(mask * length)


def fixed_value(value: str) -> Obfuscator:
    """Replace any text with ``value``."""
    return FixedValueObfuscator(value)


def portion() -> PortionObfuscatorBuilder:
    """Start building an obfuscator that masks a portion of text."""
    return PortionObfuscatorBuilder()


def exploded(separator: str, obfuscator: Obfuscator, limit: Optional[int] = None) -> Obfuscator:
    """Split text on ``separator`` and obfuscate each part with ``obfuscator``.

    Args:
        separator: The separator; kept as-is in the output
        obfuscator: Obfuscator for each part
        limit: Maximum number of parts, the last one containing the rest of
            the text; ``None`` for no limit

    Raises:
        InvalidArgumentError: If separator is empty or limit is smaller than 1

    Examples:
        >>> exploded(", ", fixed_length(3)).obfuscate_text("a, b, c")
        '***, ***, ***'
    """
    return ExplodedObfuscator(separator, obfuscator, limit)


__all__ = ["all", "none", "fixed_length", "fixed_value", "portion", "exploded"]
