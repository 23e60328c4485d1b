"""
Row analyzer: one record in, one RowReport out.

Runs driver computation, then risk and recommendation, and derives the
row totals. normalized_impact divides by max(driver_count, 1).
"""

from __future__ import annotations

from survey_pareto.analytics.drivers import compute_drivers
from survey_pareto.analytics.models import Record, RowReport
from survey_pareto.analytics.risk_engine import (
    build_recommendation,
    determine_risk,
    resolve_identifier,
)
from survey_pareto.pareto_logging import get_logger

logger = get_logger(__name__)


def analyze_row(record: Record, row_index: int) -> RowReport:
    drivers = compute_drivers(record)
    total_impact = sum(d.impact for d in drivers)
    risk_level = determine_risk(drivers)

    report = RowReport(
        row_index=row_index,
        identifier=resolve_identifier(record, row_index),
        total_impact=total_impact,
        normalized_impact=total_impact / max(len(drivers), 1),
        drivers=tuple(drivers),
        recommendation=build_recommendation(drivers),
        risk_level=risk_level,
        raw=record,
    )
    logger.debug(
        "row_analyzed",
        row_index=row_index,
        drivers=len(drivers),
        total_impact=round(total_impact, 4),
        risk_level=risk_level.value,
    )
    return report
