"""Infiltration and ventilation air-change rates and their heat losses."""

from core.rules import KeywordRule, first_match, parse_number
from model.config import DEFAULT, ModelConfig

# Envelope tightness descriptors -> base infiltration ACH
TIGHTNESS_RULES: tuple[KeywordRule[float], ...] = (
    KeywordRule(("низ", "low", "poor", "leaky"), 0.8),
    KeywordRule(("выс", "high", "good"), 0.3),
    KeywordRule(("гермет", "airtight", "sealed", "passive"), 0.25),
    KeywordRule(("стар", "old"), 1.0),
)

# Occupancy descriptors that call for doubled ventilation
_HIGH_OCCUPANCY = KeywordRule(("офис", "много людей", "office", "crowded", "many people"), True)


def base_infiltration_ach(user_ach: object, tightness: str | None, config: ModelConfig = DEFAULT) -> float:
    """ACH before wind and stack corrections.

    A positive user value wins; otherwise the tightness text is matched
    against ``TIGHTNESS_RULES``.
    """
    value = parse_number(user_ach, 0.0)
    if value > 0:
        return value
    return first_match(TIGHTNESS_RULES, tightness, config.default_infiltration_ach)


def infiltration_ach(
    user_ach: object,
    tightness: str | None,
    wind_speed: float,
    floors: float,
    config: ModelConfig = DEFAULT,
) -> float:
    """Infiltration ACH corrected for wind and stack effect, clamped.

    Wind above the reference speed and each storey above the first raise
    the rate proportionally.
    """
    ach = base_infiltration_ach(user_ach, tightness, config)

    wind_factor = config.wind_sensitivity * (wind_speed - config.reference_wind_m_s)
    stack_factor = config.stack_sensitivity * (floors - 1) if floors > 1 else 0.0
    ach *= 1 + wind_factor + stack_factor

    return min(max(ach, config.min_infiltration_ach), config.max_infiltration_ach)


def ventilation_ach(occupancy: str | None, config: ModelConfig = DEFAULT) -> float:
    if first_match((_HIGH_OCCUPANCY,), occupancy, False):
        return config.high_occupancy_ventilation_ach
    return config.ventilation_ach


def clamp_heat_recovery(raw: object, config: ModelConfig = DEFAULT) -> float:
    """Heat-recovery efficiency as a fraction in [0, max_heat_recovery].

    Values above 1 are read as percentages.
    """
    value = parse_number(raw, 0.0)
    if value > 1:
        value /= 100
    return min(max(value, 0.0), config.max_heat_recovery)


def mass_flow(volume_m3: float, ach: float, config: ModelConfig = DEFAULT) -> float:
    """Air mass flow (kg/s) for ``ach`` air changes per hour."""
    return config.air_density * volume_m3 * ach / 3600


def air_heat_loss(volume_m3: float, ach: float, delta_t: float, config: ModelConfig = DEFAULT) -> float:
    """Sensible heat carried away by the air flow (W)."""
    return mass_flow(volume_m3, ach, config) * config.air_cp * delta_t
