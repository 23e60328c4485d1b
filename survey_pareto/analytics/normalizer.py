"""
Value normalizer: map one raw survey answer to a severity score in [0, 1].

Best-effort free-text scoring, not NLP. Tried in order, first match wins:
empty -> 0, qualitative lexicon, numeric scale, substring families,
fallback 0.4. Never raises.
"""

from __future__ import annotations

import re

from survey_pareto.utils.text_utils import fold_text

FALLBACK_SCORE = 0.4
EMPTY_SCORE = 0.0

# Keys are accent-folded and lower-cased (see fold_text)
QUALITATIVE_MAP: dict[str, float] = {
    "very high": 1.0,
    "high": 0.85,
    "medium": 0.6,
    "low": 0.25,
    "very low": 0.1,
    "yes": 0.8,
    "no": 0.2,
    "critical": 1.0,
    "relevant": 0.7,
    "neutral": 0.5,
    "irrelevant": 0.2,
    "muy alto": 1.0,
    "alto": 0.85,
    "medio": 0.6,
    "bajo": 0.25,
    "muy bajo": 0.1,
    "si": 0.8,
    "critico": 1.0,
    "relevante": 0.7,
    "irrelevante": 0.2,
}

# Substring families, checked in order
SUBSTRING_FAMILIES: list[tuple[tuple[str, ...], float]] = [
    (("high", "alto", "alta"), 0.85),
    (("medium", "medio"), 0.6),
    (("low", "bajo", "baja", "poco"), 0.25),
]

_NUMBER_RE = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:e[+-]?\d+)?")


def _clamp(value: float) -> float:
    return min(max(value, 0.0), 1.0)


def parse_number(clean: str) -> float | None:
    """Parse a decimal number, comma as decimal separator. None if not numeric."""
    candidate = clean.replace(",", ".")
    if not _NUMBER_RE.fullmatch(candidate):
        return None
    return float(candidate)


def scale_number(value: float) -> float:
    """
    Rescale a numeric answer to [0, 1].

    >10 is read as a percentage, (5, 10] as a 10-point scale, otherwise a
    5-point scale.
    """
    if value > 10:
        return _clamp(value / 100)
    if value > 5:
        return _clamp(value / 10)
    return _clamp(value / 5)


def normalize_value(answer: str) -> float:
    """Return the severity score of a raw answer string."""
    clean = fold_text(answer)
    if not clean:
        return EMPTY_SCORE

    direct = QUALITATIVE_MAP.get(clean)
    if direct is not None:
        return direct

    number = parse_number(clean)
    if number is not None:
        return scale_number(number)

    for tokens, score in SUBSTRING_FAMILIES:
        if any(token in clean for token in tokens):
            return score

    return FALLBACK_SCORE
