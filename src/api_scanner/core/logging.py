"""Structured logging configuration for the API Security Scanner.

Uses structlog on top of the standard logging module. Diagnostic events go
to stderr so they never interleave with the findings printed to stdout.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

SERVICE_NAME = "api-scanner"


def add_service(
    logger: Any,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """Tag every event with the service name."""
    event_dict.setdefault("service", SERVICE_NAME)
    return event_dict


def configure_logging(level: str = "WARNING", json_format: bool = False) -> Any:
    """Route structlog events through a single stderr handler.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR); unknown names
            fall back to WARNING
        json_format: Render one JSON object per line instead of console text

    Returns:
        The package logger
    """
    log_level = getattr(logging, level.upper(), logging.WARNING)

    renderer = (
        structlog.processors.JSONRenderer()
        if json_format
        else structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            add_service,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Reconfiguring (repeated CLI invocations in one process) replaces our handler
    for handler in list(root_logger.handlers):
        if getattr(handler, "_api_scanner", False):
            root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(log_level)
    handler._api_scanner = True
    root_logger.addHandler(handler)

    return structlog.get_logger("api_scanner")


def get_logger(name: str = "api_scanner") -> Any:
    """Get a structlog logger bound to ``name``."""
    return structlog.get_logger(name)


def log_scan_event(event: str, scan_id: str, target: str | None = None, **kwargs: Any) -> None:
    """Emit a scan lifecycle event (``scan_started``, ``scan_completed``)."""
    if target:
        kwargs["target"] = target
    get_logger("api_scanner.scan").info(event, scan_id=scan_id, **kwargs)
