"""Obfuscation: mask sensitive text before logging or displaying it.

Obfuscators are pure text-to-text transformations that can be combined:
chained by prefix length, split around a substring, or applied to named
properties of nested objects and arrays.
"""

__version__ = "0.1.0"

from . import obfuscate
from .core import (
    DuplicateKeyError,
    HeaderObfuscator,
    HeaderObfuscatorBuilder,
    InvalidArgumentError,
    InvalidConfigError,
    ObfuscationError,
    Obfuscator,
    ObfuscatorPrefix,
    PortionObfuscatorBuilder,
    PropertyConfigurer,
    PropertyObfuscationMode,
    PropertyObfuscator,
    PropertyObfuscatorBuilder,
    SplitPoint,
)
from .observability import (
    ObfuscationConfig,
    configure_logging,
    get_config,
    get_logger,
    load_config,
    set_config,
)

__all__ = [
    "__version__",
    "obfuscate",
    "Obfuscator",
    "ObfuscatorPrefix",
    "PortionObfuscatorBuilder",
    "SplitPoint",
    "PropertyObfuscator",
    "PropertyObfuscatorBuilder",
    "PropertyConfigurer",
    "PropertyObfuscationMode",
    "HeaderObfuscator",
    "HeaderObfuscatorBuilder",
    "ObfuscationError",
    "InvalidArgumentError",
    "InvalidConfigError",
    "DuplicateKeyError",
    "ObfuscationConfig",
    "configure_logging",
    "get_config",
    "get_logger",
    "load_config",
    "set_config",
]
