"""
CSV record source: survey exports saved as CSV.

Header keys are trimmed, missing cells become "" and overflow cells (more
values than headers) are dropped.
"""

from __future__ import annotations

import csv
import io
from pathlib import Path

from survey_pareto.core.exceptions import RecordSourceError
from survey_pareto.pareto_logging import get_logger

logger = get_logger(__name__)


def read_csv_records(text: str) -> list[dict[str, str]]:
    """Parse CSV text (header row first) into records."""
    text = text.lstrip("\ufeff")
    reader = csv.DictReader(io.StringIO(text))
    records: list[dict[str, str]] = []
    try:
        for row in reader:
            record: dict[str, str] = {}
            for key, value in row.items():
                if key is None:
                    continue
                record[key.strip()] = value if value is not None else ""
            records.append(record)
    except csv.Error as e:
        raise RecordSourceError(f"Malformed CSV at line {reader.line_num}: {e}") from e
    return records


def load_csv_records(path: Path) -> list[dict[str, str]]:
    """Read a CSV file (UTF-8) and return its records."""
    try:
        text = path.read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        raise RecordSourceError(f"Cannot read CSV file {path}: {e}") from e
    records = read_csv_records(text)
    logger.info("csv_records_loaded", path=str(path), records=len(records))
    return records
