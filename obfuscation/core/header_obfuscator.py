"""Obfuscation of header values by case-insensitive header name."""

from types import MappingProxyType
from typing import Dict, List, Mapping, Sequence, Union

from ..observability.logging import get_logger
from .exceptions import DuplicateKeyError
from .obfuscator import Obfuscator

logger = get_logger(__name__)

HeaderValues = Union[str, Sequence[str]]


class HeaderObfuscator:
    """Obfuscates header values with an obfuscator per header name.

    Header names are matched case insensitively. Values of headers without
    an obfuscator are returned as-is.
    """

    def __init__(self, obfuscators: Mapping[str, Obfuscator]) -> None:
        self._obfuscators = MappingProxyType(
            {name.casefold(): obfuscator for name, obfuscator in obfuscators.items()}
        )

    @staticmethod
    def builder() -> "HeaderObfuscatorBuilder":
        return HeaderObfuscatorBuilder()

    def obfuscate_value(self, name: str, value: str) -> str:
        """Obfuscate a single header value."""
        obfuscator = self._obfuscators.get(name.casefold())
        return value if obfuscator is None else obfuscator.obfuscate_text(value)

    def obfuscate_values(self, name: str, values: Sequence[str]) -> List[str]:
        """Obfuscate all values of a header."""
        obfuscator = self._obfuscators.get(name.casefold())
        if obfuscator is None:
            return list(values)
        return [obfuscator.obfuscate_text(value) for value in values]

    def obfuscate_all(self, headers: Mapping[str, HeaderValues]) -> Dict[str, HeaderValues]:
        """Obfuscate a mapping of header names to a value or a list of values."""
        result: Dict[str, HeaderValues] = {}
        for name, value in headers.items():
            if isinstance(value, str):
                result[name] = self.obfuscate_value(name, value)
            else:
                result[name] = self.obfuscate_values(name, value)
        return result


class HeaderObfuscatorBuilder:
    """Fluent builder for HeaderObfuscator."""

    def __init__(self) -> None:
        self._obfuscators: Dict[str, Obfuscator] = {}

    def with_header(self, name: str, obfuscator: Obfuscator) -> "HeaderObfuscatorBuilder":
        """Add a header to obfuscate.

        Raises:
            DuplicateKeyError: If a header with the same case-insensitive name was already added
        """
        key = name.casefold()
        if key in self._obfuscators:
            raise DuplicateKeyError(
                f"Duplicate header name: {name}", key=name, case_sensitive=False
            )
        self._obfuscators[key] = obfuscator
        return self

    def build(self) -> HeaderObfuscator:
        """Build a HeaderObfuscator from the headers added so far."""
        header_obfuscator = HeaderObfuscator(self._obfuscators)
        logger.debug("Header obfuscator built", headers=len(self._obfuscators))
        return header_obfuscator
