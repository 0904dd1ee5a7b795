"""
Diagnostic Error Classifier
===========================

Maps a raw validator message onto one of three broad categories so the
front end can tell the user what *kind* of mistake they made.

Rules
-----
Case-insensitive substring match, checked in order, first match wins:

| Order | Message contains          | Category  |
|-------|---------------------------|-----------|
| 1     | "invalid character"       | LEXICAL   |
| 2     | "type" or "assignable"    | SEMANTIC  |
| -     | (anything else)           | SYNTACTIC |

This is a best-effort heuristic over human-readable text, not an
authoritative classification. It never raises: unmatched, empty or
non-string input always falls through to SYNTACTIC.

Example
-------
>>> classify("Type 'string' is not assignable to type 'number'")
<ErrorCategory.SEMANTIC: 'SEMANTIC'>
"""

from enum import Enum


class ErrorCategory(str, Enum):
    """Broad category of a validation failure."""

    LEXICAL = "LEXICAL"        # Illegal characters, tokenizer-level failures
    SYNTACTIC = "SYNTACTIC"    # Grammar / parse errors (default bucket)
    SEMANTIC = "SEMANTIC"      # Type-system flavoured diagnostics


# Ordered (needles, category) rules; first rule with any matching needle wins.
CLASSIFICATION_RULES: tuple[tuple[tuple[str, ...], ErrorCategory], ...] = (
    (("invalid character",), ErrorCategory.LEXICAL),
    (("type", "assignable"), ErrorCategory.SEMANTIC),
)

DEFAULT_CATEGORY = ErrorCategory.SYNTACTIC


def classify(message: str) -> ErrorCategory:
    """
    Classify a diagnostic message.

    Args:
        message: Human-readable message from the validator

    Returns:
        The matching ErrorCategory, SYNTACTIC when no rule matches
    """
    if not isinstance(message, str) or not message:
        return DEFAULT_CATEGORY

    lowered = message.lower()
    for needles, category in CLASSIFICATION_RULES:
        if any(needle in lowered for needle in needles):
            return category
    return DEFAULT_CATEGORY
