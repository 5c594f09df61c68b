"""FastAPI entry point - thin layer over the heat-load model."""

import dataclasses
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from analysis import ImprovementCandidate, MonteCarloSummary, evaluate_improvements, run_monte_carlo
from core.models import BuildingRecord
from data import CATALOG, SAMPLE_RECORD
from data.climate import ClimateRecord
from data.materials import Material, WallConstruction
from data.windows import WindowType
from model import (
    ClimateDesignData,
    CondensationRisk,
    EconomyResult,
    HourlyLoadResult,
    LoadResult,
    compute_economy,
    compute_hourly_load,
    compute_load,
    design_climate,
)

logging.basicConfig(level=logging.WARNING, format="%(name)s | %(message)s")
logging.getLogger("model.heat_balance").setLevel(logging.DEBUG)

app = FastAPI(title="Heat Load API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

Raw = float | str | None


class BuildingRecordIn(BaseModel):
    """Building record as sent by the UI; every field optional and lenient."""

    floors: Raw = None
    area: Raw = None
    height: Raw = None
    wall_description: str | None = None
    construction_key: str | None = None
    additional_insulation: Raw = None
    window_area: Raw = None
    window_type: str | None = None
    infiltration: Raw = None
    tightness: str | None = None
    wind_speed: Raw = None
    heat_recovery: Raw = None
    city: str | None = None
    winter_severity: str | None = None
    uncertainty: Raw = None
    indoor_temp: Raw = None
    occupancy: str | None = None
    appliances: str | None = None
    orientation: str | None = None
    shading: Raw = None
    heating_system: str | None = None
    humidity: Raw = None
    night_setback: bool = False
    trv: bool = False

    def to_record(self) -> BuildingRecord:
        return BuildingRecord.from_mapping(self.model_dump())


@app.post("/load")
def post_load(body: BuildingRecordIn) -> LoadResult:
    return compute_load(body.to_record())


@app.post("/load/hourly")
def post_hourly_load(body: BuildingRecordIn) -> HourlyLoadResult:
    return compute_hourly_load(body.to_record())


@app.post("/condensation")
def post_condensation(body: BuildingRecordIn) -> CondensationRisk:
    return compute_load(body.to_record()).condensation


@app.post("/monte-carlo")
def post_monte_carlo(body: BuildingRecordIn, samples: int = 500, seed: int | None = None) -> MonteCarloSummary:
    """Design-load distribution under input uncertainty."""
    return run_monte_carlo(body.to_record(), sample_count=min(max(samples, 1), 5000), seed=seed)


@app.post("/improvements")
def post_improvements(body: BuildingRecordIn, top: int = 5) -> list[ImprovementCandidate]:
    return evaluate_improvements(body.to_record(), top_n=top)


@app.post("/economy")
def post_economy(body: BuildingRecordIn) -> EconomyResult:
    record = body.to_record()
    return compute_economy(compute_load(record).annual_energy_kwh, record.heating_system)


@app.get("/climate/{city}")
def get_climate(city: str, severity: str | None = None, uncertainty: float = 0.0) -> ClimateDesignData:
    return design_climate(city, severity, uncertainty)


@app.get("/catalog/materials")
def get_materials() -> list[Material]:
    return list(CATALOG.materials)


@app.get("/catalog/constructions")
def get_constructions() -> list[WallConstruction]:
    return list(CATALOG.constructions)


@app.get("/catalog/windows")
def get_windows() -> list[WindowType]:
    return list(CATALOG.windows)


@app.get("/catalog/cities")
def get_cities() -> list[ClimateRecord]:
    return list(CATALOG.climates)


@app.get("/sample")
def get_sample() -> BuildingRecordIn:
    """Sample record the UI can start from."""
    return BuildingRecordIn(**dataclasses.asdict(SAMPLE_RECORD))
