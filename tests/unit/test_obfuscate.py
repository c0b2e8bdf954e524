"""Unit tests for the built-in obfuscators in obfuscation.obfuscate."""

import pytest

from obfuscation import obfuscate
from obfuscation.core import (
    AllObfuscator,
    ExplodedObfuscator,
    FixedValueObfuscator,
    InvalidArgumentError,
    Obfuscator,
)


class TestAll:
    """Test obfuscate.all."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("foo", "***"),
            ("hello", "*****"),
            ("", ""),
        ],
    )
    def test_obfuscate_text(self, text, expected):
        """Every character is replaced by the mask."""
        assert obfuscate.all().obfuscate_text(text) == expected

    def test_custom_mask(self):
        """The mask is repeated once per character."""
        assert obfuscate.all("x").obfuscate_text("foo") == "xxx"

    def test_counts_characters_not_bytes(self):
        """Multi-byte characters count as one."""
        assert obfuscate.all().obfuscate_text("héé") == "***"

    def test_returns_all_obfuscator(self):
        assert obfuscate.all("#") == AllObfuscator("#")


class TestNone:
    """Test obfuscate.none."""

    @pytest.mark.parametrize("text", ["foo", "hello", ""])
    def test_obfuscate_text(self, text):
        assert obfuscate.none().obfuscate_text(text) == text


class TestFixedLength:
    """Test obfuscate.fixed_length."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("foo", "********"),
            ("hello", "********"),
            ("", "********"),
        ],
    )
    def test_obfuscate_text(self, text, expected):
        assert obfuscate.fixed_length(8).obfuscate_text(text) == expected

    def test_custom_mask(self):
        assert obfuscate.fixed_length(3, "x").obfuscate_text("foo bar") == "xxx"

    def test_zero_length(self):
        assert obfuscate.fixed_length(0).obfuscate_text("foo") == ""

    def test_negative_length(self):
        """A negative length is rejected immediately."""
        with pytest.raises(InvalidArgumentError) as exc_info:
            obfuscate.fixed_length(-1)

        assert str(exc_info.value) == "-1 < 0"
        assert exc_info.value.context == {"argument": "length", "value": -1}


class TestFixedValue:
    """Test obfuscate.fixed_value."""

    @pytest.mark.parametrize("text", ["foo", "hello", ""])
    def test_obfuscate_text(self, text):
        assert obfuscate.fixed_value("obfuscated").obfuscate_text(text) == "obfuscated"

    def test_returns_fixed_value_obfuscator(self):
        assert obfuscate.fixed_value("x") == FixedValueObfuscator("x")


class TestExploded:
    """Test obfuscate.exploded."""

    def test_obfuscate_each_part(self):
        obfuscator = obfuscate.exploded(", ", obfuscate.fixed_length(3))
        assert obfuscator.obfuscate_text("a, b, c") == "***, ***, ***"

    def test_without_separator(self):
        obfuscator = obfuscate.exploded(", ", obfuscate.all())
        assert obfuscator.obfuscate_text("abc") == "***"

    def test_empty_parts(self):
        """Empty parts are obfuscated as well."""
        obfuscator = obfuscate.exploded(",", obfuscate.fixed_value("x"))
        assert obfuscator.obfuscate_text(",a,") == "x,x,x"

    def test_limit(self):
        """The last part contains the rest of the text."""
        obfuscator = obfuscate.exploded(",", obfuscate.all(), limit=2)
        assert obfuscator.obfuscate_text("a,b,c") == "*,***"

    def test_limit_one(self):
        obfuscator = obfuscate.exploded(",", obfuscate.all(), limit=1)
        assert obfuscator.obfuscate_text("a,b,c") == "*****"

    def test_empty_separator(self):
        with pytest.raises(InvalidArgumentError):
            obfuscate.exploded("", obfuscate.all())

    def test_invalid_limit(self):
        with pytest.raises(InvalidArgumentError, match="0 < 1"):
            obfuscate.exploded(",", obfuscate.all(), limit=0)

    @pytest.mark.parametrize(
        "kwargs,message",
        [
            ({"separator": ""}, "separator must not be empty"),
            ({"separator": ",", "limit": 0}, "0 < 1"),
            ({"separator": ",", "limit": -2}, "-2 < 1"),
        ],
    )
    def test_direct_construction_is_validated(self, kwargs, message):
        """Invalid settings are rejected when the obfuscator is created, not when it is used."""
        with pytest.raises(InvalidArgumentError, match=message):
            ExplodedObfuscator(obfuscator=obfuscate.none(), **kwargs)

    def test_returns_exploded_obfuscator(self):
        inner = obfuscate.all()
        assert obfuscate.exploded(",", inner) == ExplodedObfuscator(",", inner)


class TestCustomObfuscator:
    """Test implementing Obfuscator directly."""

    def test_subclass(self):
        class UpperCase(Obfuscator):
            def obfuscate_text(self, text: str) -> str:
                return text.upper()

        assert UpperCase().obfuscate_text("Hello World") == "HELLO WORLD"

    def test_abstract(self):
        with pytest.raises(TypeError):
            Obfuscator()

    def test_immutable(self):
        """Built-in obfuscators are frozen."""
        obfuscator = obfuscate.all()
        with pytest.raises(AttributeError):
            obfuscator.mask = "x"
