"""Structured logging setup."""

from __future__ import annotations

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Optional

import structlog

from .config import LoggingConfig, get_config


def add_timestamp(
    logger: Any, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Add timestamp to log events."""
    event_dict["timestamp"] = datetime.now(timezone.utc).isoformat()
    return event_dict


def add_level(
    logger: Any, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Add log level to event dict."""
    event_dict["level"] = method_name.upper()
    return event_dict


def configure_logging(config: Optional[LoggingConfig] = None) -> None:
    """Configure structured logging."""
    if config is None:
        config = get_config().logging

    processors_list: list[Any] = [
        structlog.stdlib.filter_by_level,
        add_timestamp,
        add_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if config.format == "json":
        processors_list.append(structlog.processors.JSONRenderer())
    else:
        processors_list.extend(
            [
                structlog.processors.CallsiteParameterAdder(
                    parameters={structlog.processors.CallsiteParameter.FUNC_NAME}
                ),
                structlog.dev.ConsoleRenderer(colors=False),
            ]
        )

    structlog.configure(
        processors=processors_list,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # basicConfig rejects stream and filename together
    if config.output == "file" and config.file_path:
        target: dict[str, Any] = {"filename": config.file_path}
    else:
        target = {"stream": sys.stdout}

    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, config.level.upper(), logging.WARNING),
        force=True,
        **target,
    )


def get_logger(name: str) -> Any:
    """Get a logger instance.

    Events always go through the standard library logger of the same name,
    so an application that never calls ``configure_logging`` only sees them
    once it enables that logger.
    """
    return structlog.wrap_logger(
        logging.getLogger(name), wrapper_class=structlog.stdlib.BoundLogger
    )
