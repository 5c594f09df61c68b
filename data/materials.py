"""Material and wall-construction catalogs."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Material:
    """Homogeneous building material.

    ``names`` are lowercase variants searched for in free-text wall
    descriptions; catalog order decides which material wins when several
    variants occur in the same text.
    """

    key: str
    names: tuple[str, ...]
    group: str
    conductivity: float  # λ, W/(m·K)


@dataclass(frozen=True)
class LayerSpec:
    material: str
    thickness_m: float


@dataclass(frozen=True)
class WallConstruction:
    key: str
    name: str
    layers: tuple[LayerSpec, ...]


MATERIALS: tuple[Material, ...] = (
    Material("brick_solid", ("кирпич", "кирпич полнотелый", "brick solid"), "masonry", 0.81),
    Material("brick_hollow", ("кирпич пустотелый", "hollow brick", "щелевой кирпич"), "masonry", 0.45),
    Material("aerated_D300", ("газобетон", "газобетон d300", "aerated 300", "aerated concrete"), "aerated", 0.09),
    Material("aerated_D400", ("газобетон d400", "aerated 400"), "aerated", 0.11),
    Material("aerated_D500", ("газобетон d500", "aerated 500"), "aerated", 0.13),
    Material("concrete_heavy", ("бетон", "жб", "жби", "панель", "concrete"), "concrete", 1.75),
    Material("mineral_wool", ("вата", "минвата", "rockwool", "mineral wool"), "insulation", 0.04),
    Material("eps", ("ппс", "пенопласт", "eps"), "insulation", 0.035),
    Material("xps", ("xps", "экструдированный", "пенополистирол"), "insulation", 0.032),
    Material("gypsum", ("гкл", "гипс", "гипсокартон", "gypsum"), "gypsum", 0.21),
    Material("plaster", ("штукатурка", "plaster"), "plaster", 0.7),
    Material("wood", ("дерево", "брус", "osb", "wood"), "wood", 0.15),
)

DEFAULT_MATERIAL_KEY = "brick_solid"
INSULATION_MATERIAL_KEY = "mineral_wool"

# Conductivity assumed for a layer whose material key is not in the catalog
UNKNOWN_MATERIAL_CONDUCTIVITY = 0.8


WALL_CONSTRUCTIONS: tuple[WallConstruction, ...] = (
    WallConstruction(
        "panel_300",
        "Three-layer concrete panel (300 mm)",
        (
            LayerSpec("plaster", 0.02),
            LayerSpec("concrete_heavy", 0.22),
            LayerSpec("mineral_wool", 0.06),
        ),
    ),
    WallConstruction(
        "aerated_300",
        "Aerated concrete 300 mm + plaster",
        (
            LayerSpec("aerated_D400", 0.30),
            LayerSpec("plaster", 0.02),
        ),
    ),
    WallConstruction(
        "brick_380_mw100",
        "Brick 380 mm + mineral wool 100 mm + plaster",
        (
            LayerSpec("brick_solid", 0.38),
            LayerSpec("mineral_wool", 0.1),
            LayerSpec("plaster", 0.02),
        ),
    ),
    WallConstruction(
        "frame_insulated",
        "Timber frame (OSB + mineral wool + gypsum board)",
        (
            LayerSpec("wood", 0.015),
            LayerSpec("mineral_wool", 0.15),
            LayerSpec("gypsum", 0.012),
        ),
    ),
)
