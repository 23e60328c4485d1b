"""
Analytics pipeline: the single entrypoint of the Pareto engine.

analyze(records) -> AnalysisResult(rows, aggregate). Pure function of its
input: records are fully materialized before the call, never mutated, and two
calls on the same records produce equal results.
"""

from __future__ import annotations

from typing import Sequence

from survey_pareto.analytics.aggregator import aggregate_reports
from survey_pareto.analytics.models import AnalysisResult, Record
from survey_pareto.analytics.row_analyzer import analyze_row
from survey_pareto.pareto_logging import get_logger

logger = get_logger(__name__)


def analyze(records: Sequence[Record]) -> AnalysisResult:
    """
    Run the Pareto analysis over an ordered sequence of records.

    Rows are analyzed independently; row_index is the position in `records`,
    which aggregation tie-breaks rely on.
    """
    logger.info("pareto_analysis_start", rows=len(records))

    reports = tuple(analyze_row(record, index) for index, record in enumerate(records))
    aggregate = aggregate_reports(reports)

    logger.info(
        "pareto_analysis_done",
        rows=len(reports),
        rows_with_drivers=sum(1 for r in reports if r.drivers),
        average_impact=round(aggregate.average_impact, 4),
        recurrent_drivers=[d.label for d in aggregate.recurrent_drivers],
    )
    return AnalysisResult(rows=reports, aggregate=aggregate)
