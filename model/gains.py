"""Free heat gains: solar through glazing and internal (people, appliances)."""

from core.rules import KeywordRule, first_match, parse_number, sum_matches
from model.config import DEFAULT, ModelConfig

# Diagonal orientations come first: "south-east" also contains "south"
ORIENTATION_RULES: tuple[KeywordRule[float], ...] = (
    KeywordRule(("юго-вост", "юго вост", "south-east", "southeast", "south east"), 0.9),
    KeywordRule(("юго-зап", "юго зап", "south-west", "southwest", "south west"), 0.9),
    KeywordRule(("юг", "south"), 1.0),
    KeywordRule(("вост", "запад", "east", "west"), 0.7),
    KeywordRule(("север", "north"), 0.3),
)
UNSPECIFIED_ORIENTATION_FACTOR = 0.7

OCCUPANCY_GAIN_RULES: tuple[KeywordRule[float], ...] = (
    KeywordRule(("выход", "всегда", "always", "weekend", "home all day"), 2.0),
    KeywordRule(("вечер", "evening"), 1.0),
)

APPLIANCE_GAIN_RULES: tuple[KeywordRule[float], ...] = (
    KeywordRule(("выс", "high"), 4.0),
    KeywordRule(("низ", "low"), -1.0),
)


def orientation_factor(orientation: str | None) -> float:
    return first_match(ORIENTATION_RULES, orientation, UNSPECIFIED_ORIENTATION_FACTOR)


def solar_gains(
    window_area_m2: float,
    g_value: float,
    orientation: str | None = None,
    shading: object = None,
    config: ModelConfig = DEFAULT,
) -> float:
    """Design-point solar gain through glazing (W).

    Qsolar = Aw · g · I_design · f_orientation · f_shading
    """
    shading_factor = min(max(parse_number(shading, config.default_shading), 0.0), 1.0)
    irradiance = config.design_irradiance_w_m2 * orientation_factor(orientation) * shading_factor
    return max(window_area_m2, 0.0) * g_value * irradiance


def internal_gain_specific(occupancy: str | None, appliances: str | None, config: ModelConfig = DEFAULT) -> float:
    """Internal gains per m² of floor area (W/m²), never negative."""
    q = config.base_internal_gain_w_m2
    q += sum_matches(OCCUPANCY_GAIN_RULES, occupancy)
    q += sum_matches(APPLIANCE_GAIN_RULES, appliances)
    return max(q, 0.0)
