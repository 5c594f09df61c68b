"""Running cost of heating by system type and tariff."""

from dataclasses import dataclass

from core.models import HeatingSystem, parse_heating_system
from model.config import DEFAULT
from model.types import EconomyResult, TariffComparison


@dataclass(frozen=True)
class Tariffs:
    """Energy prices in currency per kWh of delivered energy."""

    electric_single: float = DEFAULT.tariff_per_kwh
    electric_day: float = 6.5
    electric_night: float = 3.0
    gas: float = 1.8  # per kWh of heat in the gas
    district: float = 2.5

    # Share of electric consumption on the day rate under a day/night tariff
    day_share: float = 0.7


DEFAULT_TARIFFS = Tariffs()

# Seasonal efficiency, or COP for the heat pump
HEATING_EFFICIENCY: dict[HeatingSystem, float] = {
    HeatingSystem.ELECTRIC: 1.0,
    HeatingSystem.GAS: 0.9,
    HeatingSystem.DISTRICT: 0.95,
    HeatingSystem.HEAT_PUMP: 3.0,
}

GAS_HEAT_VALUE_KWH_M3 = 9.0
BOILER_EFFICIENCY = 0.9


def carrier_tariff(system: HeatingSystem, tariffs: Tariffs = DEFAULT_TARIFFS) -> float:
    match system:
        case HeatingSystem.GAS:
            return tariffs.gas
        case HeatingSystem.DISTRICT:
            return tariffs.district
        case HeatingSystem.ELECTRIC | HeatingSystem.HEAT_PUMP:
            return tariffs.electric_single


def compute_economy(
    annual_energy_kwh: float,
    heating_system: HeatingSystem | str | None = HeatingSystem.ELECTRIC,
    tariffs: Tariffs = DEFAULT_TARIFFS,
) -> EconomyResult:
    """Annual and monthly cost of supplying ``annual_energy_kwh`` of heat.

    Delivered energy is the heat demand divided by the system efficiency
    (COP for heat pumps). The per-tariff comparison prices the heat demand
    itself so systems can be compared on equal terms.
    """
    system = parse_heating_system(heating_system)
    efficiency = HEATING_EFFICIENCY[system]
    delivered = annual_energy_kwh / efficiency
    tariff = carrier_tariff(system, tariffs)
    annual_cost = delivered * tariff

    gas_m3 = delivered / (GAS_HEAT_VALUE_KWH_M3 * BOILER_EFFICIENCY) if system is HeatingSystem.GAS else 0.0

    return EconomyResult(
        heating_system=system,
        efficiency=efficiency,
        tariff=tariff,
        delivered_kwh=delivered,
        annual_cost=annual_cost,
        monthly_cost=annual_cost / 12,
        by_tariff=TariffComparison(
            electric_single=annual_energy_kwh * tariffs.electric_single,
            electric_day=annual_energy_kwh * tariffs.day_share * tariffs.electric_day,
            electric_night=annual_energy_kwh * (1 - tariffs.day_share) * tariffs.electric_night,
            gas=annual_energy_kwh * tariffs.gas,
            district=annual_energy_kwh * tariffs.district,
        ),
        gas_m3=gas_m3,
        assumptions={
            "efficiency": efficiency,
            "gas_heat_value_kwh_m3": GAS_HEAT_VALUE_KWH_M3,
            "boiler_efficiency": BOILER_EFFICIENCY,
        },
    )
