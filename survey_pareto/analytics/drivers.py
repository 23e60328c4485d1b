"""
Driver computation: rank and Pareto-classify the answers of one record.

impact = severity * weight, severity = normalized (or 1 - normalized when the
question is inverted). Entries below IMPACT_FLOOR are noise. Survivors are
sorted by impact (stable) and walked with a running total: cumulative share
<= 0.8 is vital, otherwise share >= 0.1 is review, otherwise maintain.
"""

from __future__ import annotations

from dataclasses import dataclass

from survey_pareto.analytics.models import Driver, DriverClass, Record
from survey_pareto.analytics.normalizer import normalize_value
from survey_pareto.analytics.weights import resolve_weight, should_skip_header

IMPACT_FLOOR = 0.05
VITAL_CUMULATIVE_SHARE = 0.8
REVIEW_MIN_SHARE = 0.1


@dataclass(frozen=True)
class ScoredAnswer:
    label: str
    answer: str
    impact: float


def score_answer(label: str, answer: str) -> ScoredAnswer:
    meta = resolve_weight(label)
    normalized = normalize_value(answer)
    severity = 1.0 - normalized if meta.invert else normalized
    return ScoredAnswer(label=label, answer=answer, impact=severity * meta.weight)


def score_record(record: Record) -> list[ScoredAnswer]:
    """Score every scorable column of a record, in column order, dropping noise."""
    scored: list[ScoredAnswer] = []
    for label, answer in record.items():
        if not label or not label.strip() or should_skip_header(label):
            continue
        item = score_answer(label, answer or "")
        if item.impact >= IMPACT_FLOOR:
            scored.append(item)
    return scored


def classify(share: float, cumulative_share: float) -> DriverClass:
    # Boundary is inclusive: the driver that lands exactly on 0.8 is vital
    if cumulative_share <= VITAL_CUMULATIVE_SHARE:
        return DriverClass.VITAL
    if share >= REVIEW_MIN_SHARE:
        return DriverClass.REVIEW
    return DriverClass.MAINTAIN


def compute_drivers(record: Record) -> list[Driver]:
    """Return the record's drivers in descending impact order; [] if nothing scores."""
    scored = score_record(record)
    total_impact = sum(item.impact for item in scored)
    if total_impact == 0:
        return []

    ranked = sorted(scored, key=lambda item: item.impact, reverse=True)
    drivers: list[Driver] = []
    cumulative = 0.0
    for item in ranked:
        cumulative += item.impact
        share = item.impact / total_impact
        cumulative_share = cumulative / total_impact
        drivers.append(
            Driver(
                label=item.label,
                answer=item.answer,
                impact=item.impact,
                share=share,
                cumulative_share=cumulative_share,
                classification=classify(share, cumulative_share),
            )
        )
    return drivers
