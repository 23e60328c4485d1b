"""
FastAPI router: GET /analyze, POST /analyze, POST /analyze/csv.

Every route materializes all records first, then runs the engine once.
Record-source failures are raised as ParetoError and rendered by the
server's exception handler; no partial analysis is returned.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Sequence

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile
from pydantic import BaseModel, Field

from survey_pareto.analytics import analyze
from survey_pareto.analytics.models import Record
from survey_pareto.config import Settings, get_settings
from survey_pareto.ingestion import fetch_sheet_records, read_csv_records
from survey_pareto.pareto_logging import bind_run

router = APIRouter(prefix="/analyze", tags=["analyze"])

SOURCE_SHEET = "sheet"
SOURCE_PAYLOAD = "payload"
SOURCE_CSV = "csv"


class AnalyzeRequest(BaseModel):
    """POST /analyze body: records as header -> answer mappings, in row order."""

    records: list[dict[str, str]] = Field(default_factory=list, description="Survey rows (header row excluded)")


def _envelope(records: Sequence[Record], source: str, **metadata: Any) -> dict[str, Any]:
    log = bind_run(source)
    result = analyze(records)
    body = result.to_dict()
    log.info("analyze_request_done", rows=len(result.rows))
    return {
        "metadata": {
            "totalRows": len(result.rows),
            "generatedAt": datetime.now(timezone.utc).isoformat(),
            "source": source,
            **metadata,
        },
        **body,
    }


@router.get("")
def analyze_sheet(settings: Settings = Depends(get_settings)) -> dict[str, Any]:
    """Fetch the configured sheet range and return its Pareto analysis."""
    records = fetch_sheet_records(
        settings.google_sheet_id,
        settings.google_sheet_range,
        settings=settings,
    )
    return _envelope(records, SOURCE_SHEET, range=settings.google_sheet_range)


@router.post("")
def analyze_payload(body: AnalyzeRequest) -> dict[str, Any]:
    """Analyze records posted as JSON."""
    return _envelope(body.records, SOURCE_PAYLOAD)


@router.post("/csv")
async def analyze_csv(file: UploadFile = File(..., description="CSV export with a header row")) -> dict[str, Any]:
    """Analyze an uploaded CSV export."""
    content = await file.read()
    text = content.decode("utf-8", errors="replace")
    if not text.strip():
        raise HTTPException(status_code=400, detail="CSV upload is empty; expected a header row")
    records = read_csv_records(text)
    return _envelope(records, SOURCE_CSV, filename=file.filename or "")
