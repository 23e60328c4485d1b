"""
Question weight resolver and header filter.

Both are ordered rule tables evaluated first-match-wins against the
accent-folded, lower-cased label. Rule order is part of the scoring contract:
reordering changes results.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from survey_pareto.utils.text_utils import fold_text

BASE_WEIGHT = 1.0


@dataclass(frozen=True)
class QuestionWeight:
    weight: float
    invert: bool = False
    category: str = "default"


DEFAULT_WEIGHT = QuestionWeight(weight=BASE_WEIGHT)

# invert=True: a higher answer means lower severity (cost, satisfaction)
QUESTION_WEIGHTS: list[tuple[re.Pattern[str], QuestionWeight]] = [
    (
        re.compile(r"impact|affect|loss|impacto|afecta|perdida"),
        QuestionWeight(weight=1.4, category="impact"),
    ),
    (
        re.compile(r"effort|cost|esfuerzo|coste|costo"),
        QuestionWeight(weight=0.8, invert=True, category="effort"),
    ),
    (
        re.compile(r"frequen|repetit|recurren|frecuencia|repeticion"),
        QuestionWeight(weight=1.2, category="frequency"),
    ),
    (
        re.compile(r"satisf|experience|satisfaccion|experiencia"),
        QuestionWeight(weight=1.1, invert=True, category="satisfaction"),
    ),
]

# Identifiers, timestamps and free text are never scored
SKIP_HEADER_PATTERNS: list[re.Pattern[str]] = [
    re.compile(r"timestamp"),
    re.compile(r"marca temporal"),
    re.compile(r"e-?mail"),
    re.compile(r"correo"),
    re.compile(r"name"),
    re.compile(r"nombre"),
    re.compile(r"^id$"),
    re.compile(r"comment"),
    re.compile(r"comentario"),
    re.compile(r"observation"),
    re.compile(r"observacion"),
]


def resolve_weight(label: str) -> QuestionWeight:
    """Return the weight/invert pair for a question label; BASE_WEIGHT if no rule matches."""
    folded = fold_text(label)
    for pattern, weight in QUESTION_WEIGHTS:
        if pattern.search(folded):
            return weight
    return DEFAULT_WEIGHT


def should_skip_header(label: str) -> bool:
    """True if the column must be excluded from scoring."""
    folded = fold_text(label)
    return any(pattern.search(folded) for pattern in SKIP_HEADER_PATTERNS)
