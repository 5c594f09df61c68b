"""Result types produced by the heat-load model.

All results are plain dataclasses without behaviour beyond derived
properties, so they serialise to JSON as-is.
"""

from dataclasses import dataclass, field

from core.models import HeatingSystem, RiskLevel
from data.climate import ClimateRecord
from data.windows import WindowType

# -----------------------------------------------------------------------------
# Envelope
# -----------------------------------------------------------------------------


@dataclass(frozen=True)
class WallLayer:
    """One layer of a wall; thickness always in meters."""

    material_key: str
    thickness_m: float
    raw: str = ""


@dataclass(frozen=True)
class ResolvedEnvelope:
    """Wall build-up resolved from a catalog key or free text.

    Attributes:
        layers: Layers in the order given by the user or catalog
        r_total: Thermal resistance including surface films (m²·K/W)
        u_value: 1 / r_total (W/(m²·K))
        label: Catalog name, or a generic label for user constructions
        description: Human-readable build-up
        source: "construction" | "text" | "default"
    """

    layers: tuple[WallLayer, ...]
    r_total: float
    u_value: float
    label: str
    description: str
    source: str


# -----------------------------------------------------------------------------
# Climate
# -----------------------------------------------------------------------------


@dataclass(frozen=True)
class ClimateDesignData:
    """Climate record with the design temperature adjusted for user input."""

    record: ClimateRecord
    design_temp_c: float
    heating_hours: int

    @property
    def hdd(self) -> float:
        return self.record.hdd


@dataclass(frozen=True)
class HourlyClimatePoint:
    index: int
    day: int  # 1-based day of year
    hour: int
    temperature_c: float


# -----------------------------------------------------------------------------
# Condensation
# -----------------------------------------------------------------------------


@dataclass(frozen=True)
class CondensationRisk:
    dew_point_c: float
    surface_temp_c: float
    risk_index: float  # 0..1
    level: RiskLevel


# -----------------------------------------------------------------------------
# Heat balance
# -----------------------------------------------------------------------------


@dataclass(frozen=True)
class LoadBreakdown:
    """Design-point loss and gain components (W, all positive as reported)."""

    walls: float
    windows: float
    infiltration: float
    ventilation: float
    solar: float
    internal: float

    @property
    def losses(self) -> float:
        return self.walls + self.windows + self.infiltration + self.ventilation

    @property
    def gains(self) -> float:
        return self.solar + self.internal


@dataclass(frozen=True)
class Geometry:
    volume_m3: float
    wall_area_m2: float
    window_area_m2: float
    floor_area_m2: float  # area × floors


@dataclass(frozen=True)
class Airflow:
    infiltration_ach: float
    ventilation_ach: float
    heat_recovery: float


@dataclass(frozen=True)
class CurvePoint:
    """Load at one outdoor temperature, with its uncertainty band."""

    outdoor_temp_c: float
    load_w: float
    load_min_w: float
    load_max_w: float


@dataclass(frozen=True)
class ProfilePoint:
    hour: int
    multiplier: float
    load_w: float  # clamped at 0 for display


@dataclass(frozen=True)
class LoadResult:
    """Output of the heat-balance engine for one building record."""

    design_load_w: float
    load_min_w: float
    load_max_w: float
    annual_energy_kwh: float
    loss_coefficient_w_k: float  # design load per kelvin of indoor-outdoor difference
    indoor_temp_c: float
    uncertainty_c: float
    breakdown: LoadBreakdown
    geometry: Geometry
    airflow: Airflow
    envelope: ResolvedEnvelope
    window: WindowType
    climate: ClimateDesignData
    condensation: CondensationRisk
    curve: tuple[CurvePoint, ...] = ()
    daily_profile: tuple[ProfilePoint, ...] = ()

    @property
    def design_temp_c(self) -> float:
        return self.climate.design_temp_c


@dataclass(frozen=True)
class HourlyLoadResult:
    loads_w: tuple[float, ...]
    monthly_kwh: tuple[float, ...]
    total_kwh: float


# -----------------------------------------------------------------------------
# Economy
# -----------------------------------------------------------------------------


@dataclass(frozen=True)
class TariffComparison:
    """Annual cost of the same heat demand under each tariff."""

    electric_single: float
    electric_day: float
    electric_night: float
    gas: float
    district: float

    @property
    def day_night(self) -> float:
        return self.electric_day + self.electric_night


@dataclass(frozen=True)
class EconomyResult:
    heating_system: HeatingSystem
    efficiency: float
    tariff: float
    delivered_kwh: float
    annual_cost: float
    monthly_cost: float
    by_tariff: TariffComparison
    gas_m3: float = 0.0
    assumptions: dict[str, float] = field(default_factory=dict)
