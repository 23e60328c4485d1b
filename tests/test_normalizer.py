"""
Pytest tests for the value normalizer: lexicon, numeric scales, substring families, fallback.
"""

from __future__ import annotations

import pytest

from survey_pareto.analytics.normalizer import (
    FALLBACK_SCORE,
    normalize_value,
    parse_number,
    scale_number,
)


def test_empty_answer_scores_zero():
    assert normalize_value("") == 0.0
    assert normalize_value("   ") == 0.0


@pytest.mark.parametrize(
    "answer,expected",
    [
        ("very high", 1.0),
        ("High", 0.85),
        ("  MEDIUM ", 0.6),
        ("low", 0.25),
        ("very   low", 0.1),
        ("yes", 0.8),
        ("No", 0.2),
        ("critical", 1.0),
        ("relevant", 0.7),
        ("neutral", 0.5),
        ("irrelevant", 0.2),
    ],
)
def test_qualitative_lexicon_english(answer, expected):
    assert normalize_value(answer) == expected


def test_qualitative_lexicon_is_accent_insensitive():
    """Spanish answers with and without accents map to the same score."""
    assert normalize_value("Sí") == 0.8
    assert normalize_value("si") == 0.8
    assert normalize_value("Crítico") == 1.0
    assert normalize_value("critico") == 1.0
    assert normalize_value("Muy alto") == 1.0
    assert normalize_value("bajo") == 0.25


@pytest.mark.parametrize(
    "answer,expected",
    [
        ("0", 0.0),
        ("4", 0.8),
        ("5", 1.0),
        ("3,5", 0.7),
        ("8", 0.8),
        ("10", 1.0),
        ("75", 0.75),
        ("250", 1.0),
        ("-3", 0.0),
    ],
)
def test_numeric_answers_are_rescaled(answer, expected):
    """>10 is a percentage, (5, 10] a 10-point scale, otherwise a 5-point scale; clamped to [0, 1]."""
    assert normalize_value(answer) == pytest.approx(expected)


def test_parse_number_comma_decimal():
    assert parse_number("2,5") == 2.5
    assert parse_number("1e1") == 10.0
    assert parse_number("1,2,3") is None
    assert parse_number("nan") is None
    assert parse_number("inf") is None


def test_scale_number_boundaries():
    assert scale_number(5) == 1.0
    assert scale_number(5.5) == pytest.approx(0.55)
    assert scale_number(10.5) == pytest.approx(0.105)


def test_substring_families_in_order():
    """High family is checked before medium and low."""
    assert normalize_value("quite high") == 0.85
    assert normalize_value("medio-alto") == 0.85
    assert normalize_value("a medium amount") == 0.6
    assert normalize_value("somewhat low") == 0.25
    assert normalize_value("poco frecuente") == 0.25


def test_unrecognized_answer_falls_back():
    assert normalize_value("maybe") == FALLBACK_SCORE
    assert normalize_value("nan") == FALLBACK_SCORE
    assert normalize_value("2024-01-01") == FALLBACK_SCORE
