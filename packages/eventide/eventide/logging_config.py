"""Centralized structlog configuration for eventide entry points.

Library modules only call ``structlog.get_logger``; the CLI (or an embedding
application) calls ``configure_logging`` once at startup.
"""
from __future__ import annotations

import logging

import structlog

from eventide.settings import load_settings


def _normalize_log_level(level: str | None) -> int:
    normalized = (level or "INFO").strip().upper()
    return logging._nameToLevel.get(normalized, logging.INFO)


def configure_logging(level: str | None = None, json: bool = False) -> None:
    """Configure structlog with console (or JSON) output.

    ``level`` falls back to ``EVENTIDE_LOG_LEVEL``, then INFO.
    """
    resolved_level = _normalize_log_level(level or load_settings().log_level)
    logging.basicConfig(level=resolved_level)
    processors: list[structlog.typing.Processor] = [
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
    ]
    if json:
        processors += [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))
    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(resolved_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=False,
    )
