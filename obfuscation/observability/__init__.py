"""Logging and configuration."""

from .config import (
    LoggingConfig,
    ObfuscationConfig,
    PropertyDefaultsConfig,
    get_config,
    load_config,
    set_config,
)
from .logging import configure_logging, get_logger

__all__ = [
    "LoggingConfig",
    "ObfuscationConfig",
    "PropertyDefaultsConfig",
    "configure_logging",
    "get_config",
    "get_logger",
    "load_config",
    "set_config",
]
