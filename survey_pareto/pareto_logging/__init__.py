"""
Structured logging for Survey Pareto.

JSON logs with timestamp, event_type and run context (source, row_index).
Use get_logger() in all modules for aggregation-friendly output.
"""

from survey_pareto.pareto_logging.logger import bind_run, configure_structlog, get_logger

__all__ = ["get_logger", "bind_run", "configure_structlog"]
