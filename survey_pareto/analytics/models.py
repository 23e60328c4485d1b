"""
Data models for the Pareto engine output.

Immutable once built: one Driver per scored (label, answer) pair, one
RowReport per input record, one AggregateInsights and one AnalysisResult per
run. to_dict() produces the wire form consumed by the dashboard.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping

Record = Mapping[str, str]


class DriverClass(str, Enum):
    VITAL = "vital"
    REVIEW = "review"
    MAINTAIN = "maintain"


class RiskLevel(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


@dataclass(frozen=True)
class Driver:
    """One question/answer pair's contribution to a row's impact."""

    label: str
    answer: str
    impact: float
    share: float
    cumulative_share: float
    classification: DriverClass

    def to_dict(self) -> dict[str, Any]:
        return {
            "label": self.label,
            "answer": self.answer,
            "impact": self.impact,
            "share": self.share,
            "cumulativeShare": self.cumulative_share,
            "classification": self.classification.value,
        }


@dataclass(frozen=True)
class RowReport:
    """
    Pareto report for a single record.

    raw is the caller's record itself, not a copy; the engine never writes to it.
    """

    row_index: int
    identifier: str
    total_impact: float
    normalized_impact: float
    drivers: tuple[Driver, ...]
    recommendation: str
    risk_level: RiskLevel
    raw: Record

    @property
    def vital_drivers(self) -> list[Driver]:
        return [d for d in self.drivers if d.classification is DriverClass.VITAL]

    def to_dict(self) -> dict[str, Any]:
        return {
            "rowIndex": self.row_index,
            "identifier": self.identifier,
            "totalImpact": self.total_impact,
            "normalizedImpact": self.normalized_impact,
            "drivers": [d.to_dict() for d in self.drivers],
            "recommendation": self.recommendation,
            "riskLevel": self.risk_level.value,
            "raw": dict(self.raw),
        }


@dataclass(frozen=True)
class RecurrentDriver:
    label: str
    count: int

    def to_dict(self) -> dict[str, Any]:
        return {"label": self.label, "count": self.count}


@dataclass(frozen=True)
class AggregateInsights:
    """Cross-row summary for one run."""

    average_impact: float
    highest_risk_rows: tuple[RowReport, ...]
    recurrent_drivers: tuple[RecurrentDriver, ...]

    def to_dict(self) -> dict[str, Any]:
        return {
            "averageImpact": self.average_impact,
            "highestRiskRows": [r.to_dict() for r in self.highest_risk_rows],
            "recurrentDrivers": [d.to_dict() for d in self.recurrent_drivers],
        }


@dataclass(frozen=True)
class AnalysisResult:
    rows: tuple[RowReport, ...]
    aggregate: AggregateInsights

    def to_dict(self) -> dict[str, Any]:
        return {
            "rows": [r.to_dict() for r in self.rows],
            "aggregate": self.aggregate.to_dict(),
        }
