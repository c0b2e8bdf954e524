"""Configuration for logging and obfuscation defaults."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field

from ..core.types import PropertyObfuscationMode


class LoggingConfig(BaseModel):
    """Configuration for structured logging."""

    level: str = Field(default="WARNING", description="Log level")
    format: str = Field(default="json", description="Log format (json or text)")
    output: str = Field(default="stdout", description="Log output (stdout or file)")
    file_path: str | None = Field(default=None, description="Log file path")


class PropertyDefaultsConfig(BaseModel):
    """Defaults applied by new property obfuscator builders."""

    case_sensitive: bool = Field(
        default=True, description="Match property names case sensitively"
    )
    for_objects: PropertyObfuscationMode = Field(
        default=PropertyObfuscationMode.INHERIT,
        description="Obfuscation mode for properties with object values",
    )
    for_arrays: PropertyObfuscationMode = Field(
        default=PropertyObfuscationMode.INHERIT,
        description="Obfuscation mode for properties with array values",
    )


class ObfuscationConfig(BaseModel):
    """Main configuration."""

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    property_defaults: PropertyDefaultsConfig = Field(
        default_factory=PropertyDefaultsConfig
    )

    @classmethod
    def from_file(cls, config_path: Path | str) -> ObfuscationConfig:
        """Load configuration from a YAML file."""
        config_path = Path(config_path)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path) as f:
            config_data = yaml.safe_load(f) or {}

        obfuscation_data = config_data.get("obfuscation", {})
        return cls(**obfuscation_data)

    @classmethod
    def from_env(cls) -> ObfuscationConfig:
        """Load configuration from environment variables."""
        config = cls()

        # Logging configuration
        config.logging.level = os.getenv("OBFUSCATION_LOG_LEVEL", config.logging.level)
        config.logging.format = os.getenv(
            "OBFUSCATION_LOG_FORMAT", config.logging.format
        )

        # Property defaults
        if case_sensitive := os.getenv("OBFUSCATION_CASE_SENSITIVE"):
            config.property_defaults.case_sensitive = case_sensitive.lower() == "true"
        if mode := os.getenv("OBFUSCATION_FOR_OBJECTS"):
            config.property_defaults.for_objects = _parse_mode(
                mode, config.property_defaults.for_objects
            )
        if mode := os.getenv("OBFUSCATION_FOR_ARRAYS"):
            config.property_defaults.for_arrays = _parse_mode(
                mode, config.property_defaults.for_arrays
            )

        return config

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary."""
        return self.model_dump(mode="json")


def _parse_mode(
    value: str, fallback: PropertyObfuscationMode
) -> PropertyObfuscationMode:
    try:
        return PropertyObfuscationMode(value.lower())
    except ValueError:
        # deferred, observability.logging imports this module
        from .logging import get_logger

        get_logger(__name__).warning(
            "Invalid obfuscation mode, using fallback",
            mode=value,
            fallback=fallback.value,
            valid=[mode.value for mode in PropertyObfuscationMode],
        )
        return fallback


# Global configuration instance
_config: ObfuscationConfig | None = None


def get_config() -> ObfuscationConfig:
    """Get the global configuration."""
    global _config
    if _config is None:
        _config = ObfuscationConfig.from_env()
    return _config


def set_config(config: ObfuscationConfig | None) -> None:
    """Set the global configuration; ``None`` reloads it from the environment on next use."""
    global _config
    _config = config


def load_config(config_path: Path | str | None = None) -> ObfuscationConfig:
    """Load and set the global configuration."""
    if config_path:
        config = ObfuscationConfig.from_file(config_path)
    else:
        config = ObfuscationConfig.from_env()
    set_config(config)
    return config
