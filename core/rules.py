"""Tolerant parsing of user input and keyword rule tables.

User-entered values are unreliable: numbers arrive as strings with comma
decimals, and descriptive fields are free text in Russian or English.
Free-text heuristics are expressed as ordered rule tables so every rule set
can be inspected and tested on its own.
"""

import math
import re
from collections.abc import Iterable
from dataclasses import dataclass

_NUMBER_PREFIX = re.compile(r"^[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?")


def parse_number(raw: object, default: float) -> float:
    """Parse a user-entered number, returning ``default`` when it is unusable.

    Accepts ints/floats and strings such as ``"2,7"`` or ``"0.5 ACH"``
    (the leading numeric prefix is used). Booleans, NaN and infinities are
    treated as missing.
    """
    if raw is None or isinstance(raw, bool):
        return default
    if isinstance(raw, (int, float)):
        value = float(raw)
        return value if math.isfinite(value) else default
    if not isinstance(raw, str):
        return default

    match = _NUMBER_PREFIX.match(raw.strip().replace(",", ".", 1))
    if match is None:
        return default
    value = float(match.group(0))
    return value if math.isfinite(value) else default


def normalize_text(raw: object) -> str:
    """Lowercase, stripped text; ``None`` becomes an empty string."""
    if raw is None:
        return ""
    return str(raw).strip().lower()


@dataclass(frozen=True)
class KeywordRule[T]:
    """Rule that fires when any of its keywords occurs in the text."""

    keywords: tuple[str, ...]
    value: T

    def matches(self, text: str) -> bool:
        return any(kw in text for kw in self.keywords)


def first_match[T](rules: Iterable[KeywordRule[T]], raw: object, default: T) -> T:
    """Value of the first rule matching ``raw``; ``default`` if none does."""
    text = normalize_text(raw)
    if not text:
        return default
    for rule in rules:
        if rule.matches(text):
            return rule.value
    return default


def sum_matches(rules: Iterable[KeywordRule[float]], raw: object) -> float:
    """Sum of the values of every rule matching ``raw`` (additive rule sets)."""
    text = normalize_text(raw)
    if not text:
        return 0.0
    return sum(rule.value for rule in rules if rule.matches(text))
