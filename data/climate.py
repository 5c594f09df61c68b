"""Climate catalog for design-point and degree-day calculations.

Values are rounded reference figures for Russian cities, not measured data.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ClimateRecord:
    key: str
    names: tuple[str, ...]  # lowercase variants matched against user input
    design_temp_c: float  # coldest design outdoor temperature
    hdd: float  # heating degree-days, K·day
    mean_annual_temp_c: float
    seasonal_amplitude_c: float


CLIMATES: tuple[ClimateRecord, ...] = (
    ClimateRecord("moscow", ("москва", "moscow", "moskva"), -26.0, 5400.0, 5.0, 18.0),
    ClimateRecord("spb", ("санкт-петербург", "питер", "spb", "saint petersburg"), -24.0, 5000.0, 4.0, 17.0),
    ClimateRecord("kazan", ("казань", "kazan"), -29.0, 5600.0, 3.0, 19.0),
    ClimateRecord("ekb", ("екатеринбург", "екб", "yekaterinburg"), -31.0, 5800.0, 2.0, 20.0),
    ClimateRecord("novosibirsk", ("новосибирск", "novosibirsk"), -32.0, 6200.0, 1.0, 21.0),
)

DEFAULT_CLIMATE_KEY = "moscow"
