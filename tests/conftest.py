"""Shared fixtures for obfuscation tests."""

import json
from pathlib import Path
from typing import Any

import pytest

from obfuscation.observability.config import set_config


@pytest.fixture(autouse=True)
def reset_config():
    """Make every test start from the configuration in the environment."""
    set_config(None)
    yield
    set_config(None)


@pytest.fixture
def test_data_dir() -> Path:
    """Path to test data directory."""
    return Path(__file__).parent / "data"


@pytest.fixture
def property_data_dir(test_data_dir: Path) -> Path:
    """Path to property obfuscator test files."""
    return test_data_dir / "property_obfuscator"


@pytest.fixture
def load_json(property_data_dir: Path):
    """Load a JSON file from the property obfuscator test files."""

    def _load(name: str) -> Any:
        with (property_data_dir / name).open() as f:
            return json.load(f)

    return _load


@pytest.fixture
def input_tree(load_json) -> dict:
    """Nested object with matched, unmatched and skipped properties."""
    return load_json("input.json")
