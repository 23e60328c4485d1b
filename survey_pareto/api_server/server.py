"""
FastAPI server — Pareto analysis API.

Mounts the analyze router under /api and a liveness probe. Errors from
configuration and record retrieval become HTTP 500 with {"error", "code"}.
"""

from __future__ import annotations

from typing import Any

from fastapi import FastAPI
from fastapi.responses import JSONResponse

from survey_pareto import __version__
from survey_pareto.api_server.analyze import router as analyze_router
from survey_pareto.core.exceptions import ParetoError
from survey_pareto.pareto_logging import get_logger

logger = get_logger(__name__)


app = FastAPI(
    title="Survey Pareto API",
    description="Weighted 80/20 analysis of survey responses.",
    version=__version__,
)

app.include_router(analyze_router, prefix="/api", tags=["Analyze"])


@app.get("/health")
def health() -> dict[str, str]:
    """Liveness probe: API is up."""
    return {"status": "ok"}


@app.exception_handler(ParetoError)
def pareto_error_handler(request: Any, exc: ParetoError) -> JSONResponse:
    """Configuration and record-source failures: one descriptive error, no partial result."""
    logger.error("api_analyze_failed", code=exc.code, error=exc.message)
    return JSONResponse(status_code=500, content=exc.to_dict())

