"""Immutable bundle of the static catalogs used by the model."""

from dataclasses import dataclass

from data.climate import CLIMATES, DEFAULT_CLIMATE_KEY, ClimateRecord
from data.materials import MATERIALS, WALL_CONSTRUCTIONS, Material, WallConstruction
from data.windows import DEFAULT_WINDOW_KEY, WINDOW_TYPES, WindowType


@dataclass(frozen=True)
class Catalog:
    """Static reference data, built once and passed to the engine.

    Lookups by key return ``None`` when the key is unknown; callers decide
    on the fallback.
    """

    materials: tuple[Material, ...] = MATERIALS
    constructions: tuple[WallConstruction, ...] = WALL_CONSTRUCTIONS
    windows: tuple[WindowType, ...] = WINDOW_TYPES
    climates: tuple[ClimateRecord, ...] = CLIMATES
    default_window_key: str = DEFAULT_WINDOW_KEY
    default_climate_key: str = DEFAULT_CLIMATE_KEY

    def material(self, key: str) -> Material | None:
        return next((m for m in self.materials if m.key == key), None)

    def construction(self, key: str | None) -> WallConstruction | None:
        if not key:
            return None
        return next((c for c in self.constructions if c.key == key), None)

    def window(self, key: object) -> WindowType | None:
        if not key:
            return None
        wanted = str(key).strip().lower()
        for window in self.windows:
            if window.key == wanted or wanted in window.aliases:
                return window
        return None

    def climate(self, key: str) -> ClimateRecord | None:
        return next((c for c in self.climates if c.key == key), None)

    @property
    def default_window(self) -> WindowType:
        window = self.window(self.default_window_key)
        assert window is not None, f"default window {self.default_window_key!r} missing from catalog"
        return window

    @property
    def default_climate(self) -> ClimateRecord:
        climate = self.climate(self.default_climate_key)
        assert climate is not None, f"default climate {self.default_climate_key!r} missing from catalog"
        return climate


CATALOG = Catalog()
