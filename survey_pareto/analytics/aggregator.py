"""
Aggregator: cross-row insights for one analysis run.

Python's sort is stable, so ties in total impact keep original row order and
ties in vital counts keep first-seen label order.
"""

from __future__ import annotations

from collections import Counter
from typing import Sequence

from survey_pareto.analytics.models import (
    AggregateInsights,
    RecurrentDriver,
    RowReport,
)

TOP_ROWS = 5
TOP_DRIVERS = 5


def highest_risk_rows(reports: Sequence[RowReport], limit: int = TOP_ROWS) -> list[RowReport]:
    return sorted(reports, key=lambda r: r.total_impact, reverse=True)[:limit]


def recurrent_drivers(reports: Sequence[RowReport], limit: int = TOP_DRIVERS) -> list[RecurrentDriver]:
    """Count, per label, the rows that classified it vital. Top `limit` by count."""
    occurrences: Counter[str] = Counter()
    for report in reports:
        for driver in report.vital_drivers:
            occurrences[driver.label] += 1
    ranked = sorted(occurrences.items(), key=lambda item: item[1], reverse=True)
    return [RecurrentDriver(label=label, count=count) for label, count in ranked[:limit]]


def aggregate_reports(reports: Sequence[RowReport]) -> AggregateInsights:
    average_impact = sum(r.total_impact for r in reports) / max(len(reports), 1)
    return AggregateInsights(
        average_impact=average_impact,
        highest_risk_rows=tuple(highest_risk_rows(reports)),
        recurrent_drivers=tuple(recurrent_drivers(reports)),
    )
