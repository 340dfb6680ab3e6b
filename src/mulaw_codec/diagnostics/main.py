"""Report the μ-law round-trip breakpoint table as structured log events."""
from __future__ import annotations

import sys

import structlog
from structlog.stdlib import BoundLogger

from mulaw_codec.codec.breakpoints import roundtrip_breakpoints
from mulaw_codec.codec.mulaw import encode
from mulaw_codec.config.settings import Settings, load_settings
from mulaw_codec.logging.setup import configure_logging


def report(settings: Settings, logger: BoundLogger) -> int:
    """Emit one event per breakpoint and a summary; return a process exit status."""

    start = settings.breakpoints.start
    stop = settings.breakpoints.stop
    try:
        pairs = roundtrip_breakpoints(start, stop)
    except ValueError as exc:
        logger.error("breakpoints.invalid_range", start=start, stop=stop, error=str(exc))
        return 2

    for sample, decoded in pairs:
        logger.info("breakpoint", sample=sample, decoded=decoded, code=encode(sample))
    logger.info("breakpoints.summary", count=len(pairs), start=start, stop=stop)
    return 0


def run() -> None:
    """Module entry point used by `python -m` and console script."""

    settings = load_settings()
    configure_logging(settings.logging.level, settings.logging.log_file)
    sys.exit(report(settings, structlog.get_logger(__name__)))


if __name__ == "__main__":
    run()
