"""
Pareto analytics engine.

Scores survey answers per row, classifies the drivers with an 80/20 rule,
and aggregates insights across rows.
Modules: normalizer, weights, drivers, risk_engine, row_analyzer, aggregator,
analytics_pipeline.
"""

from survey_pareto.analytics.analytics_pipeline import analyze
from survey_pareto.analytics.drivers import compute_drivers
from survey_pareto.analytics.models import (
    AggregateInsights,
    AnalysisResult,
    Driver,
    DriverClass,
    RecurrentDriver,
    RiskLevel,
    RowReport,
)
from survey_pareto.analytics.normalizer import normalize_value
from survey_pareto.analytics.row_analyzer import analyze_row
from survey_pareto.analytics.weights import resolve_weight, should_skip_header

__all__ = [
    "analyze",
    "analyze_row",
    "compute_drivers",
    "normalize_value",
    "resolve_weight",
    "should_skip_header",
    "AggregateInsights",
    "AnalysisResult",
    "Driver",
    "DriverClass",
    "RecurrentDriver",
    "RiskLevel",
    "RowReport",
]
