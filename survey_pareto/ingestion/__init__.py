"""
Ingestion package — record sources for the Pareto engine.

Each source hands the engine a fully materialized, ordered list of records
(header -> cell text, "" for missing cells). Retrieval failures surface as a
single RecordSourceError; no partial list is ever returned.
"""

from survey_pareto.ingestion.csv_source import load_csv_records, read_csv_records
from survey_pareto.ingestion.sheets import fetch_sheet_records, rows_to_records

__all__ = [
    "fetch_sheet_records",
    "load_csv_records",
    "read_csv_records",
    "rows_to_records",
]
