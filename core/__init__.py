"""Core input model and free-text parsing rules."""

from core.models import BuildingRecord, HeatingSystem, RawNumber, RiskLevel, parse_heating_system
from core.rules import KeywordRule, first_match, normalize_text, parse_number, sum_matches

__all__ = [
    "BuildingRecord",
    "HeatingSystem",
    "KeywordRule",
    "RawNumber",
    "RiskLevel",
    "first_match",
    "normalize_text",
    "parse_heating_system",
    "parse_number",
    "sum_matches",
]
