"""structlog wiring for the mulaw-codec command line tools."""
from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

import structlog

DEFAULT_TOOL = "mulaw-breakpoints"


def _renderer(numeric_level: int) -> structlog.types.Processor:
    if numeric_level == logging.DEBUG:
        return structlog.dev.ConsoleRenderer()
    return structlog.processors.JSONRenderer(sort_keys=True)


def configure_logging(level: str = "INFO", log_file: Optional[str] = None, tool: str = DEFAULT_TOOL) -> None:
    """Route structlog events through stdlib handlers, tagging each with ``tool``.

    Events go to stderr and, when ``log_file`` is set, to a small rotating file.
    DEBUG renders human-readable console lines; other levels emit one JSON object per event.
    """

    numeric_level = getattr(logging, level, logging.INFO)
    handlers: list[logging.Handler] = [logging.StreamHandler()]

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(RotatingFileHandler(log_path, maxBytes=1024 * 1024, backupCount=2, encoding="utf-8"))

    root_logger = logging.getLogger()
    root_logger.handlers = handlers
    root_logger.setLevel(numeric_level)

    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(tool=tool)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(utc=True, fmt="iso"),
            structlog.processors.format_exc_info,
            _renderer(numeric_level),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
