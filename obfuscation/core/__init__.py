"""Core obfuscator types, builders and errors."""

from .exceptions import (
    DuplicateKeyError,
    InvalidArgumentError,
    InvalidConfigError,
    ObfuscationError,
)
from .header_obfuscator import HeaderObfuscator, HeaderObfuscatorBuilder
from .obfuscator import (
    AllObfuscator,
    ExplodedObfuscator,
    FixedValueObfuscator,
    NoneObfuscator,
    Obfuscator,
    ObfuscatorPrefix,
    PrefixChainObfuscator,
)
from .portion import PortionObfuscator, PortionObfuscatorBuilder
from .property_obfuscator import (
    PropertyConfigurer,
    PropertyObfuscator,
    PropertyObfuscatorBuilder,
    PropertyRule,
)
from .split_point import (
    CustomSplitPoint,
    FirstOccurrence,
    LastOccurrence,
    NthOccurrence,
    SplitObfuscator,
    SplitPoint,
)
from .types import PropertyObfuscationMode

__all__ = [
    # Obfuscators
    "Obfuscator",
    "ObfuscatorPrefix",
    "AllObfuscator",
    "NoneObfuscator",
    "FixedValueObfuscator",
    "ExplodedObfuscator",
    "PrefixChainObfuscator",
    "PortionObfuscator",
    "PortionObfuscatorBuilder",
    # Split points
    "SplitPoint",
    "FirstOccurrence",
    "LastOccurrence",
    "NthOccurrence",
    "CustomSplitPoint",
    "SplitObfuscator",
    # Properties
    "PropertyObfuscationMode",
    "PropertyRule",
    "PropertyObfuscator",
    "PropertyObfuscatorBuilder",
    "PropertyConfigurer",
    # Headers
    "HeaderObfuscator",
    "HeaderObfuscatorBuilder",
    # Errors
    "ObfuscationError",
    "InvalidArgumentError",
    "InvalidConfigError",
    "DuplicateKeyError",
]
