"""
Main entrypoint: run the Survey Pareto API under uvicorn.

Env: GOOGLE_SHEET_ID, GOOGLE_SHEET_RANGE, GOOGLE_SERVICE_ACCOUNT_EMAIL,
GOOGLE_PRIVATE_KEY, API_HOST, API_PORT, LOG_LEVEL, LOG_FORMAT
(see survey_pareto.config).

Equivalent: uvicorn survey_pareto.api_server.app:app --host 0.0.0.0 --port 8000
"""

from survey_pareto.pareto_logging import configure_structlog, get_logger

logger = get_logger("main")


def main() -> None:
    """Apply settings to logging, then start the FastAPI server in the main thread."""
    from survey_pareto.config import get_settings

    settings = get_settings()
    configure_structlog(settings.log_level, settings.log_format)
    if not settings.google_sheet_id:
        logger.warning(
            "main_config_warning",
            message="GOOGLE_SHEET_ID not set: GET /api/analyze will fail; POST endpoints still work",
        )

    from survey_pareto.api_server.app import app
    import uvicorn

    logger.info("main_server_starting", host=settings.api_host, port=settings.api_port)
    uvicorn.run(app, host=settings.api_host, port=settings.api_port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
