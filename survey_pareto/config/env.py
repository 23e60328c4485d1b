"""
Environment variable loading for Survey Pareto.

- GOOGLE_SHEET_ID: spreadsheet to analyze (GET /api/analyze)
- GOOGLE_SHEET_RANGE: A1 range including the header row (default: Responses!A:Z)
- GOOGLE_SERVICE_ACCOUNT_EMAIL / GOOGLE_PRIVATE_KEY: service account credentials
- Loads .env from project root when available.
"""

from __future__ import annotations

import os
from pathlib import Path

# Project root: config is survey_pareto/config/, root is 2 levels up
_CONFIG_DIR = Path(__file__).resolve().parent
_PACKAGE_DIR = _CONFIG_DIR.parent
_ROOT = _PACKAGE_DIR.parent
_ENV_PATH = _ROOT / ".env"

DEFAULT_SHEET_RANGE = "Responses!A:Z"
DEFAULT_SHEETS_TIMEOUT_SEC = 20.0
DEFAULT_API_HOST = "0.0.0.0"
DEFAULT_API_PORT = 8000


def load_pareto_env() -> None:
    """Load .env from project root. Safe to call multiple times; existing env wins."""
    from dotenv import load_dotenv

    load_dotenv(_ENV_PATH, override=False)


def env_str(name: str, default: str = "") -> str:
    """Return a stripped env value, or default when unset or blank."""
    return (os.getenv(name) or "").strip() or default


def env_float(name: str, default: float) -> float:
    raw = env_str(name)
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def env_int(name: str, default: int) -> int:
    raw = env_str(name)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def get_private_key() -> str:
    """
    Return GOOGLE_PRIVATE_KEY with literal "\\n" sequences turned into newlines.

    Keys pasted into .env files or CI secrets usually arrive on one line.
    """
    return (os.getenv("GOOGLE_PRIVATE_KEY") or "").replace("\\n", "\n").strip()
