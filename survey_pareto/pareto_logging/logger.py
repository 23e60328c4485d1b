"""
structlog setup for Survey Pareto.

Level and renderer come from LOG_LEVEL / LOG_FORMAT, read after the project
.env is loaded so the API, the CSV tool and uvicorn agree on one config.
main() re-applies them from Settings via configure_structlog(). Loggers are
not cached on first use, so a later configure_structlog() call reaches
module-level loggers created at import time.

Event names are snake_case verbs of the pipeline ("pareto_analysis_done",
"sheets_fetch_failed"); structlog's "event" key is emitted as event_type.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Any, TextIO

import structlog

from survey_pareto.config.env import load_pareto_env

DEFAULT_LEVEL = "INFO"
DEFAULT_FORMAT = "json"
CONSOLE_FORMAT = "console"


def read_log_env() -> tuple[str, str]:
    """Return (level, format) from the environment, .env included."""
    load_pareto_env()
    level = (os.getenv("LOG_LEVEL") or DEFAULT_LEVEL).strip().upper() or DEFAULT_LEVEL
    fmt = (os.getenv("LOG_FORMAT") or DEFAULT_FORMAT).strip().lower() or DEFAULT_FORMAT
    return level, fmt


def _event_type(
    logger: Any,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    if "logger_name" in event_dict:
        event_dict["logger"] = event_dict.pop("logger_name")
    if "event" in event_dict and "event_type" not in event_dict:
        event_dict["event_type"] = event_dict.pop("event")
    return event_dict


def configure_structlog(
    level: str = DEFAULT_LEVEL,
    fmt: str = DEFAULT_FORMAT,
    stream: TextIO | None = None,
) -> None:
    """
    (Re)configure structlog.

    level: stdlib level name; unknown names fall back to INFO.
    fmt: "json" for one JSON object per line, "console" for the dev renderer.
    stream: defaults to stderr so CLI output on stdout stays parseable.
    """
    stream = stream or sys.stderr
    renderer: Any
    if fmt == CONSOLE_FORMAT:
        renderer = structlog.dev.ConsoleRenderer(colors=stream.isatty())
    else:
        renderer = structlog.processors.JSONRenderer()
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True, key="timestamp"),
            structlog.processors.format_exc_info,
            _event_type,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, level.upper(), logging.INFO)
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=stream),
        cache_logger_on_first_use=False,
    )


configure_structlog(*read_log_env())


def get_logger(name: str) -> structlog.BoundLogger:
    """Module logger with its name bound as `logger`."""
    return structlog.get_logger(name, logger_name=name)


def bind_run(source: str) -> structlog.BoundLogger:
    """Logger for one analysis request; `source` is sheet, payload or csv."""
    return get_logger("survey_pareto.run").bind(source=source)
