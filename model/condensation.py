"""Surface condensation and mould risk on the interior face of the wall."""

import math

from core.models import RiskLevel
from model.config import DEFAULT, ModelConfig
from model.types import CondensationRisk

# Magnus coefficients over water, valid for -45..60 °C
_SVP_A_HPA = 6.112
_SVP_B = 17.62
_SVP_C = 243.12
_DEW_A = 17.27
_DEW_B = 237.7
_MAGNUS_MIN_C = -45.0
_MAGNUS_MAX_C = 60.0

# (upper bound of surface-minus-dew-point margin in K, risk index)
_RISK_TIERS: tuple[tuple[float, float], ...] = (
    (3.0, 0.7),
    (5.0, 0.4),
)
_SATURATED_RISK = 1.0
_SAFE_RISK = 0.1


def saturation_vapour_pressure(temp_c: float) -> float:
    """Saturation vapour pressure over water (Pa)."""
    return _SVP_A_HPA * math.exp(_SVP_B * temp_c / (temp_c + _SVP_C)) * 100


def dew_point(temp_c: float, rh_pct: float) -> float:
    """Dew point (°C) of air at ``temp_c`` and relative humidity ``rh_pct``."""
    temp_c = max(_MAGNUS_MIN_C, min(temp_c, _MAGNUS_MAX_C))
    rh = max(1.0, min(rh_pct, 100.0)) / 100
    alpha = _DEW_A * temp_c / (_DEW_B + temp_c) + math.log(rh)
    return _DEW_B * alpha / (_DEW_A - alpha)


def inner_surface_temperature(
    indoor_c: float,
    outdoor_c: float,
    u_value: float,
    config: ModelConfig = DEFAULT,
) -> float:
    """Interior surface temperature from the 1D steady-state drop over the film.

    Tsi = Ti - U · (Ti - To) · Rsi
    """
    return indoor_c - u_value * (indoor_c - outdoor_c) * config.r_si


def risk_level(risk_index: float) -> RiskLevel:
    if risk_index >= 0.7:
        return RiskLevel.HIGH
    if risk_index >= 0.4:
        return RiskLevel.MEDIUM
    return RiskLevel.LOW


def condensation_risk(
    indoor_c: float,
    outdoor_c: float,
    rh_pct: float,
    u_value: float,
    config: ModelConfig = DEFAULT,
) -> CondensationRisk:
    """Risk that the inner wall surface reaches the dew point of room air."""
    td = dew_point(indoor_c, rh_pct)
    tsi = inner_surface_temperature(indoor_c, outdoor_c, u_value, config)
    margin = tsi - td

    if margin <= 0:
        risk = _SATURATED_RISK
    else:
        risk = next((value for bound, value in _RISK_TIERS if margin < bound), _SAFE_RISK)

    return CondensationRisk(
        dew_point_c=td,
        surface_temp_c=tsi,
        risk_index=risk,
        level=risk_level(risk),
    )
