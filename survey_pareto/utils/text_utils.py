"""Text folding utilities shared by the rule tables."""

import unicodedata


def fold_text(value: str) -> str:
    """Lower-case, strip accents, trim and collapse internal whitespace."""
    decomposed = unicodedata.normalize("NFKD", value or "")
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return " ".join(stripped.lower().split())
