"""
Tests for pareto_logging: import without cycles, .env-driven config, reconfiguration of module loggers.
"""

from __future__ import annotations

import io
import json

import pytest

import survey_pareto.config.env as env_module
from survey_pareto.pareto_logging.logger import configure_structlog, read_log_env


@pytest.fixture
def restore_logging():
    yield
    configure_structlog(*read_log_env())


def _events(stream: io.StringIO) -> list[dict]:
    return [json.loads(line) for line in stream.getvalue().splitlines() if line.strip()]


def test_logging_import():
    """Import get_logger from pareto_logging and use the logger."""
    from survey_pareto.pareto_logging import bind_run, get_logger

    logger = get_logger("test")
    assert logger is not None
    assert hasattr(logger, "info")
    assert hasattr(logger, "debug")
    assert hasattr(logger, "warning")
    assert hasattr(logger, "error")
    logger.info("test_message", key="value")
    bind_run("payload").info("test_run_message", rows=0)


def test_log_config_read_from_dotenv(tmp_path, monkeypatch):
    """LOG_LEVEL / LOG_FORMAT set only in .env reach the logging config."""
    dotenv = tmp_path / ".env"
    dotenv.write_text("LOG_LEVEL=debug\nLOG_FORMAT=Console\n", encoding="utf-8")
    monkeypatch.setattr(env_module, "_ENV_PATH", dotenv)
    for name in ("LOG_LEVEL", "LOG_FORMAT"):
        # setenv first so monkeypatch also removes what load_dotenv writes
        monkeypatch.setenv(name, "unset")
        monkeypatch.delenv(name)

    assert read_log_env() == ("DEBUG", "console")


def test_reconfigure_reaches_module_loggers(restore_logging):
    """Loggers bound at import time follow a later configure_structlog() call."""
    from survey_pareto.analytics import analyze

    stream = io.StringIO()
    configure_structlog("DEBUG", "json", stream)
    analyze([{"Impact": "high"}])

    events = _events(stream)
    row_events = [e for e in events if e["event_type"] == "row_analyzed"]
    assert len(row_events) == 1
    assert row_events[0]["level"] == "debug"
    assert row_events[0]["logger"] == "survey_pareto.analytics.row_analyzer"
    assert row_events[0]["row_index"] == 0
    assert "timestamp" in row_events[0]


def test_info_level_filters_debug(restore_logging):
    from survey_pareto.analytics import analyze

    stream = io.StringIO()
    configure_structlog("INFO", "json", stream)
    analyze([{"Impact": "high"}])

    event_types = [e["event_type"] for e in _events(stream)]
    assert "row_analyzed" not in event_types
    assert "pareto_analysis_done" in event_types
