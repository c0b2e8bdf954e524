"""Shared type definitions."""

from enum import Enum


class PropertyObfuscationMode(Enum):
    """How a property whose value is an object or array gets obfuscated."""

    SKIP = "skip"
    """Leave the object or array as-is."""

    EXCLUDE = "exclude"
    """Don't obfuscate the object or array itself, but do apply the rules of
    nested properties as if the value were a top-level value."""

    INHERIT = "inherit"
    """Obfuscate every nested scalar with the property's obfuscator, ignoring
    any rules defined for nested properties."""

    INHERIT_OVERRIDABLE = "inherit_overridable"
    """Obfuscate nested scalars with the property's obfuscator unless a nested
    property has a rule of its own."""


__all__ = ["PropertyObfuscationMode"]
