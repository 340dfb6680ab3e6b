import logging
from logging.handlers import RotatingFileHandler

import pytest
import structlog
from structlog.testing import capture_logs

from mulaw_codec.config.settings import BreakpointSettings, Settings, load_settings
from mulaw_codec.diagnostics import main
from mulaw_codec.logging.setup import configure_logging


def _settings(start, stop):
    return Settings(breakpoints=BreakpointSettings(MULAW_RANGE_START=start, MULAW_RANGE_STOP=stop))


def test_report_logs_each_breakpoint_and_summary():
    with capture_logs() as logs:
        status = main.report(_settings(-8, 13), structlog.get_logger())

    assert status == 0
    events = [entry for entry in logs if entry["event"] == "breakpoint"]
    assert [(e["sample"], e["decoded"]) for e in events] == [(-8, -8), (0, 0), (4, 8), (12, 16)]
    assert events[2]["code"] == 0xFE
    assert logs[-1]["event"] == "breakpoints.summary"
    assert logs[-1]["count"] == 4


def test_report_rejects_inverted_range():
    with capture_logs() as logs:
        status = main.report(_settings(10, 0), structlog.get_logger())

    assert status == 2
    assert logs[0]["event"] == "breakpoints.invalid_range"
    assert logs[0]["log_level"] == "error"


def test_run_exits_with_report_status(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    load_settings.cache_clear()
    monkeypatch.setenv("MULAW_RANGE_START", "0")
    monkeypatch.setenv("MULAW_RANGE_STOP", "5")
    monkeypatch.setattr(main, "configure_logging", lambda *args: None)

    with capture_logs() as logs, pytest.raises(SystemExit) as excinfo:
        main.run()

    assert excinfo.value.code == 0
    assert logs[-1]["count"] == 2
    load_settings.cache_clear()


def test_configure_logging_installs_file_handler(tmp_path):
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    log_file = tmp_path / "logs" / "mulaw.log"
    try:
        configure_logging("WARNING", str(log_file))
        assert root.level == logging.WARNING
        assert any(isinstance(h, RotatingFileHandler) for h in root.handlers)
        assert log_file.parent.is_dir()
        assert structlog.contextvars.get_contextvars() == {"tool": "mulaw-breakpoints"}

        configure_logging("INFO", tool="custom")
        assert structlog.contextvars.get_contextvars() == {"tool": "custom"}
    finally:
        for handler in root.handlers:
            handler.close()
        root.handlers = saved_handlers
        root.setLevel(saved_level)
        structlog.contextvars.clear_contextvars()
        structlog.reset_defaults()
