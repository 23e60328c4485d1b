"""
Google Sheets record source.

Authenticates as a service account (read-only scope) and reads one A1 range
through the Sheets v4 values endpoint. The first row of the range is the
header; header cells are trimmed and missing cells become "".
"""

from __future__ import annotations

from typing import Any, Sequence
from urllib.parse import quote

import requests
from google.auth.exceptions import GoogleAuthError
from google.auth.transport.requests import AuthorizedSession
from google.oauth2 import service_account

from survey_pareto.config import Settings, get_settings
from survey_pareto.core.exceptions import ConfigurationError, RecordSourceError
from survey_pareto.pareto_logging import get_logger

logger = get_logger(__name__)

SHEETS_SCOPES = ["https://www.googleapis.com/auth/spreadsheets.readonly"]
SHEETS_VALUES_URL = "https://sheets.googleapis.com/v4/spreadsheets/{sheet_id}/values/{range}"
TOKEN_URI = "https://oauth2.googleapis.com/token"


def rows_to_records(values: Sequence[Sequence[Any]]) -> list[dict[str, str]]:
    """Turn a header row plus data rows into records. Cells past the header width are dropped."""
    if not values:
        return []
    header_row, *data_rows = values
    headers = [str(cell).strip() for cell in header_row]
    records: list[dict[str, str]] = []
    for row in data_rows:
        record: dict[str, str] = {}
        for index, header in enumerate(headers):
            cell = row[index] if index < len(row) else ""
            record[header] = "" if cell is None else str(cell)
        records.append(record)
    return records


def build_session(settings: Settings) -> AuthorizedSession:
    """Return a requests session authorized with the service account credentials."""
    if not settings.has_credentials:
        raise ConfigurationError(
            "Missing Google credentials. Set GOOGLE_SERVICE_ACCOUNT_EMAIL and GOOGLE_PRIVATE_KEY."
        )
    try:
        credentials = service_account.Credentials.from_service_account_info(
            {
                "client_email": settings.service_account_email,
                "private_key": settings.private_key,
                "token_uri": TOKEN_URI,
            },
            scopes=SHEETS_SCOPES,
        )
    except (ValueError, GoogleAuthError) as e:
        raise ConfigurationError(f"Invalid Google service account credentials: {e}") from e
    return AuthorizedSession(credentials)


def fetch_sheet_records(
    spreadsheet_id: str,
    sheet_range: str,
    settings: Settings | None = None,
    session: requests.Session | None = None,
) -> list[dict[str, str]]:
    """
    Fetch one range from a spreadsheet and return it as records.

    Raises ConfigurationError when the sheet id or credentials are missing and
    RecordSourceError on any auth, transport or response failure.
    """
    settings = settings or get_settings()
    spreadsheet_id = (spreadsheet_id or "").strip()
    if not spreadsheet_id:
        raise ConfigurationError("Missing GOOGLE_SHEET_ID in environment variables.")

    if session is None:
        session = build_session(settings)

    url = SHEETS_VALUES_URL.format(sheet_id=quote(spreadsheet_id, safe=""), range=quote(sheet_range, safe=""))
    logger.info("sheets_fetch_start", sheet_id=spreadsheet_id[:8] + "...", range=sheet_range)
    try:
        resp = session.get(url, timeout=settings.sheets_timeout_sec)
        resp.raise_for_status()
        payload = resp.json()
    except (requests.RequestException, GoogleAuthError, ValueError) as e:
        logger.warning("sheets_fetch_failed", range=sheet_range, error=str(e))
        raise RecordSourceError(f"Failed to read range {sheet_range!r} from Google Sheets: {e}") from e

    values = payload.get("values") if isinstance(payload, dict) else None
    records = rows_to_records(values or [])
    logger.info("sheets_fetch_done", range=sheet_range, records=len(records))
    return records
