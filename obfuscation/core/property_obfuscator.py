"""Rule-driven obfuscation of properties in nested objects and arrays."""

from collections.abc import Mapping
from dataclasses import dataclass, replace
from types import MappingProxyType
from typing import Any, Dict, Optional

from ..observability.config import get_config
from ..observability.logging import get_logger
from .exceptions import DuplicateKeyError, InvalidArgumentError
from .obfuscator import Obfuscator
from .types import PropertyObfuscationMode

logger = get_logger(__name__)


@dataclass(frozen=True)
class PropertyRule:
    """
    How a single property gets obfuscated.

    Attributes:
        obfuscator: Obfuscator for scalar values, and the inherited
            obfuscator for nested values depending on the modes
        for_objects: Mode used when the property value is an object (mapping)
        for_arrays: Mode used when the property value is an array (list or tuple)
    """

    obfuscator: Obfuscator
    for_objects: PropertyObfuscationMode = PropertyObfuscationMode.INHERIT
    for_arrays: PropertyObfuscationMode = PropertyObfuscationMode.INHERIT


def _is_array(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def _rebuild_array(value: Any, items: Any) -> Any:
    return tuple(items) if isinstance(value, tuple) else list(items)


def _text_of(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    return str(value)


class PropertyObfuscator:
    """
    Obfuscates the values of named properties in nested objects and arrays.

    Objects are mappings, arrays are lists or tuples, and anything else is a
    scalar. Scalars are converted to text before being obfuscated, so
    obfuscated numbers, booleans and ``None`` come back as strings. Booleans
    and ``None`` become ``"true"``, ``"false"`` and ``"null"`` as in JSON, so
    ``all()`` turns ``False`` into ``"*****"``. Numbers use ``str()``, so
    ``1.0`` becomes ``"1.0"``.

    Instances are created by ``PropertyObfuscator.builder()`` and are
    immutable.

    Examples:
        >>> from obfuscation import obfuscate
        >>> property_obfuscator = (
        ...     PropertyObfuscator.builder()
        ...     .with_property("password", obfuscate.fixed_value("***"))
        ...     .build()
        ... )
        >>> property_obfuscator.obfuscate_properties({"username": "admin", "password": "admin1234"})
        {'username': 'admin', 'password': '***'}
    """

    def __init__(
        self,
        case_sensitive_rules: Mapping[str, PropertyRule],
        case_insensitive_rules: Mapping[str, PropertyRule],
    ) -> None:
        """Initialize from rule tables; the tables are copied.

        Args:
            case_sensitive_rules: Rules by exact property name
            case_insensitive_rules: Rules by property name, matched case insensitively
        """
        self._case_sensitive_rules = MappingProxyType(dict(case_sensitive_rules))
        self._case_insensitive_rules = MappingProxyType(
            {name.casefold(): rule for name, rule in case_insensitive_rules.items()}
        )

    @staticmethod
    def builder() -> "PropertyObfuscatorBuilder":
        """Create a new builder, seeded with the configured property defaults."""
        return PropertyObfuscatorBuilder()

    def obfuscate_property(self, property_name: str, value: Any) -> Any:
        """Obfuscate a single scalar property value.

        Returns:
            The obfuscated text, or ``value`` unchanged if no rule matches
        """
        rule = self._get_rule(property_name)
        if rule is None:
            return value
        return rule.obfuscator.obfuscate_text(_text_of(value))

    def obfuscate_properties(self, value: Any) -> Any:
        """Obfuscate all matching properties of an object or array.

        Returns:
            A new object or array; scalars are returned unchanged
        """
        if isinstance(value, Mapping):
            return self._obfuscate_object(value, None, ())
        if _is_array(value):
            return self._obfuscate_array(value, None, ())
        return value

    def _get_rule(self, property_name: Any) -> Optional[PropertyRule]:
        if not isinstance(property_name, str):
            return None
        rule = self._case_sensitive_rules.get(property_name)
        if rule is not None:
            return rule
        return self._case_insensitive_rules.get(property_name.casefold())

    def _obfuscate_value(
        self,
        value: Any,
        rule: Optional[PropertyRule],
        default: Optional[Obfuscator],
        path: tuple,
    ) -> Any:
        if rule is None:
            return self._obfuscate_with_default(value, default, path)

        if isinstance(value, Mapping):
            mode = rule.for_objects
        elif _is_array(value):
            mode = rule.for_arrays
        else:
            return rule.obfuscator.obfuscate_text(_text_of(value))

        if mode is PropertyObfuscationMode.SKIP:
            return value
        if mode is PropertyObfuscationMode.EXCLUDE:
            return self._obfuscate_with_default(value, default, path)
        if mode is PropertyObfuscationMode.INHERIT:
            return self._obfuscate_scalars(value, rule.obfuscator, path)
        return self._obfuscate_with_default(value, rule.obfuscator, path)

    def _obfuscate_with_default(
        self, value: Any, default: Optional[Obfuscator], path: tuple
    ) -> Any:
        if isinstance(value, Mapping):
            return self._obfuscate_object(value, default, path)
        if _is_array(value):
            return self._obfuscate_array(value, default, path)
        if default is None:
            return value
        return default.obfuscate_text(_text_of(value))

    def _obfuscate_object(
        self, value: Mapping, default: Optional[Obfuscator], path: tuple
    ) -> Dict[Any, Any]:
        path = _enter(value, path)
        return {
            key: self._obfuscate_value(child, self._get_rule(key), default, path)
            for key, child in value.items()
        }

    def _obfuscate_array(
        self, value: Any, default: Optional[Obfuscator], path: tuple
    ) -> Any:
        path = _enter(value, path)
        # array elements are keyed by position, which never matches a rule
        return _rebuild_array(
            value, (self._obfuscate_with_default(child, default, path) for child in value)
        )

    def _obfuscate_scalars(self, value: Any, obfuscator: Obfuscator, path: tuple) -> Any:
        if isinstance(value, Mapping):
            path = _enter(value, path)
            return {
                key: self._obfuscate_scalars(child, obfuscator, path)
                for key, child in value.items()
            }
        if _is_array(value):
            path = _enter(value, path)
            return _rebuild_array(
                value, (self._obfuscate_scalars(child, obfuscator, path) for child in value)
            )
        return obfuscator.obfuscate_text(_text_of(value))


def _enter(container: Any, path: tuple) -> tuple:
    """Add a container to the path of containers being traversed."""
    if any(entered is container for entered in path):
        raise InvalidArgumentError("Circular reference detected", argument="value")
    return path + (container,)


class PropertyObfuscatorBuilder:
    """Fluent builder for PropertyObfuscator.

    Examples:
        property_obfuscator = (
            PropertyObfuscator.builder()
            .case_insensitive_by_default()
            .with_property("password", obfuscate.fixed_length(3))
                .for_objects(PropertyObfuscationMode.EXCLUDE)
            .with_property("token", obfuscate.all())
            .build()
        )
    """

    def __init__(self) -> None:
        """Initialize builder with the configured property defaults."""
        defaults = get_config().property_defaults
        self._case_sensitive_rules: Dict[str, PropertyRule] = {}
        self._case_insensitive_rules: Dict[str, PropertyRule] = {}

        self._case_sensitive_by_default = defaults.case_sensitive
        self._for_objects_by_default = defaults.for_objects
        self._for_arrays_by_default = defaults.for_arrays

    def with_property(
        self,
        property_name: str,
        obfuscator: Obfuscator,
        case_sensitive: Optional[bool] = None,
    ) -> "PropertyConfigurer":
        """Add a property to obfuscate.

        Args:
            property_name: Name of the property
            obfuscator: Obfuscator for the property's values
            case_sensitive: Whether the name is matched case sensitively;
                ``None`` to use the builder default

        Returns:
            A configurer for the modes of this property

        Raises:
            DuplicateKeyError: If the property was already added with the same case sensitivity
        """
        if case_sensitive is None:
            case_sensitive = self._case_sensitive_by_default

        rules, key = self._rule_table(property_name, case_sensitive)
        if key in rules:
            sensitivity = "case sensitive" if case_sensitive else "case insensitive"
            raise DuplicateKeyError(
                f"Duplicate property name: {property_name} ({sensitivity})",
                key=property_name,
                case_sensitive=case_sensitive,
            )

        rules[key] = PropertyRule(
            obfuscator, self._for_objects_by_default, self._for_arrays_by_default
        )
        return PropertyConfigurer(self, property_name, case_sensitive)

    def case_sensitive_by_default(self) -> "PropertyObfuscatorBuilder":
        """Match properties added from now on case sensitively, unless specified otherwise."""
        self._case_sensitive_by_default = True
        return self

    def case_insensitive_by_default(self) -> "PropertyObfuscatorBuilder":
        """Match properties added from now on case insensitively, unless specified otherwise."""
        self._case_sensitive_by_default = False
        return self

    def for_objects_by_default(self, mode: PropertyObfuscationMode) -> "PropertyObfuscatorBuilder":
        """Set the object mode for properties added from now on."""
        self._for_objects_by_default = mode
        return self

    def for_arrays_by_default(self, mode: PropertyObfuscationMode) -> "PropertyObfuscatorBuilder":
        """Set the array mode for properties added from now on."""
        self._for_arrays_by_default = mode
        return self

    def build(self) -> PropertyObfuscator:
        """Build a PropertyObfuscator from the properties added so far.

        The builder can still be used afterwards; later changes do not affect
        the returned obfuscator.
        """
        property_obfuscator = PropertyObfuscator(
            self._case_sensitive_rules, self._case_insensitive_rules
        )
        logger.debug(
            "Property obfuscator built",
            case_sensitive_properties=len(self._case_sensitive_rules),
            case_insensitive_properties=len(self._case_insensitive_rules),
        )
        return property_obfuscator

    def _rule_table(self, property_name: str, case_sensitive: bool) -> tuple:
        if case_sensitive:
            return self._case_sensitive_rules, property_name
        return self._case_insensitive_rules, property_name.casefold()

    def _update_rule(self, property_name: str, case_sensitive: bool, **changes: Any) -> None:
        rules, key = self._rule_table(property_name, case_sensitive)
        rules[key] = replace(rules[key], **changes)


class PropertyConfigurer:
    """Configures the property that was just added to a PropertyObfuscatorBuilder.

    All builder methods are available as well, so configuration can continue
    with the next property or end with ``build()``.
    """

    def __init__(
        self, builder: PropertyObfuscatorBuilder, property_name: str, case_sensitive: bool
    ) -> None:
        self._builder = builder
        self._property_name = property_name
        self._case_sensitive = case_sensitive

    def for_objects(self, mode: PropertyObfuscationMode) -> "PropertyConfigurer":
        """Set how the property is obfuscated when its value is an object."""
        self._builder._update_rule(self._property_name, self._case_sensitive, for_objects=mode)
        return self

    def for_arrays(self, mode: PropertyObfuscationMode) -> "PropertyConfigurer":
        """Set how the property is obfuscated when its value is an array."""
        self._builder._update_rule(self._property_name, self._case_sensitive, for_arrays=mode)
        return self

    def with_property(
        self,
        property_name: str,
        obfuscator: Obfuscator,
        case_sensitive: Optional[bool] = None,
    ) -> "PropertyConfigurer":
        return self._builder.with_property(property_name, obfuscator, case_sensitive)

    def case_sensitive_by_default(self) -> PropertyObfuscatorBuilder:
        return self._builder.case_sensitive_by_default()

    def case_insensitive_by_default(self) -> PropertyObfuscatorBuilder:
        return self._builder.case_insensitive_by_default()

    def for_objects_by_default(self, mode: PropertyObfuscationMode) -> PropertyObfuscatorBuilder:
        return self._builder.for_objects_by_default(mode)

    def for_arrays_by_default(self, mode: PropertyObfuscationMode) -> PropertyObfuscatorBuilder:
        return self._builder.for_arrays_by_default(mode)

    def build(self) -> PropertyObfuscator:
        return self._builder.build()
