"""
Risk engine: derive a row's risk level, recommendation and identifier.

Risk is read from the top driver's dominance: share >= 0.6 or impact >= 0.9
-> HIGH, share >= 0.35 -> MEDIUM, otherwise LOW. No drivers -> LOW.
"""

from __future__ import annotations

from typing import Sequence

from survey_pareto.analytics.models import Driver, DriverClass, Record, RiskLevel

HIGH_RISK_SHARE = 0.6
HIGH_RISK_IMPACT = 0.9
MEDIUM_RISK_SHARE = 0.35

MAX_RECOMMENDED_DRIVERS = 3
NO_FINDINGS_MESSAGE = "No significant findings; continue routine monitoring."
PRIORITY_PREFIX = "Prioritize interventions on:"
MISSING_ANSWER = "n/a"

# Priority order; first non-empty wins
IDENTIFIER_COLUMNS = ("ID", "Email", "Correo", "Name", "Nombre")
# Spreadsheet rows are 1-based and row 1 is the header
HEADER_ROW_OFFSET = 2


def determine_risk(drivers: Sequence[Driver]) -> RiskLevel:
    if not drivers:
        return RiskLevel.LOW
    top = drivers[0]
    if top.share >= HIGH_RISK_SHARE or top.impact >= HIGH_RISK_IMPACT:
        return RiskLevel.HIGH
    if top.share >= MEDIUM_RISK_SHARE:
        return RiskLevel.MEDIUM
    return RiskLevel.LOW


def build_recommendation(drivers: Sequence[Driver]) -> str:
    """
    Render the first vital drivers as an inline bulleted list.

    "Prioritize interventions on: • Cost (answer: high) • Delay (answer: n/a)"
    """
    vitals = [d for d in drivers if d.classification is DriverClass.VITAL]
    if not vitals:
        return NO_FINDINGS_MESSAGE
    targets = [
        f"• {d.label} (answer: {d.answer or MISSING_ANSWER})"
        for d in vitals[:MAX_RECOMMENDED_DRIVERS]
    ]
    return f"{PRIORITY_PREFIX} {' '.join(targets)}"


def resolve_identifier(record: Record, row_index: int) -> str:
    for column in IDENTIFIER_COLUMNS:
        value = record.get(column)
        if value:
            return value
    return f"Row {row_index + HEADER_ROW_OFFSET}"
