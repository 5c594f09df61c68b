"""Envelope resolution: wall layers and window types from user input.

Walls come either from a catalog construction or from a free-text
description such as ``"кирпич 380мм + минвата 100мм"``. Each resolution
path degrades gracefully; a usable wall is always returned.
"""

import logging
import re

from core.rules import KeywordRule, first_match, normalize_text, parse_number
from data.catalog import CATALOG, Catalog
from data.materials import DEFAULT_MATERIAL_KEY, INSULATION_MATERIAL_KEY, UNKNOWN_MATERIAL_CONDUCTIVITY
from data.windows import WindowType
from model.config import DEFAULT, ModelConfig
from model.types import ResolvedEnvelope, WallLayer

logger = logging.getLogger(__name__)

_LAYER_SEPARATORS = re.compile(r"[+;,]")

# Number followed by an optional unit; the unit must end the word so that
# "100 минвата" is not read as 100 m.
_THICKNESS = re.compile(r"(\d[\d.,]*|[.,]\d+)\s*(мм|mm|см|cm|м|m)?\b", re.IGNORECASE)

_UNIT_SCALE: dict[str, float] = {"мм": 1e-3, "mm": 1e-3, "см": 1e-2, "cm": 1e-2, "м": 1.0, "m": 1.0}

# Substring heuristics for material roots, tried after catalog name variants
_MATERIAL_ROOT_RULES: tuple[KeywordRule[str], ...] = (
    KeywordRule(("газобет", "aerated"), "aerated_D300"),
    KeywordRule(("пенопласт", "пенополист", "polystyrene"), "eps"),
    KeywordRule(("минват", "mineral", "wool"), "mineral_wool"),
    KeywordRule(("бетон",), "concrete_heavy"),
    KeywordRule(("дерев", "брус", "timber"), "wood"),
    KeywordRule(("гкл", "гипс"), "gypsum"),
    KeywordRule(("штукат",), "plaster"),
    KeywordRule(("brick",), "brick_solid"),
)

_CUSTOM_LABEL = "Custom construction"


# -----------------------------------------------------------------------------
# Layer parsing
# -----------------------------------------------------------------------------


def normalize_thickness(raw: object, config: ModelConfig = DEFAULT) -> float:
    """Thickness in meters; values >= 10 are taken as millimeters."""
    value = parse_number(raw, float("nan"))
    if not value > 0:
        return config.default_layer_m
    return value / 1000 if value >= config.mm_threshold else value


def insulation_thickness(raw: object, config: ModelConfig = DEFAULT) -> float:
    """Added insulation in meters, 0 when absent; same unit rule as layers."""
    value = parse_number(raw, 0.0)
    return normalize_thickness(value, config) if value > 0 else 0.0


def guess_material_key(text: str, catalog: Catalog = CATALOG) -> str:
    """Best material match for a fragment of wall description.

    The longest catalog name variant found in the text wins, so
    "кирпич пустотелый" beats "кирпич"; ties keep catalog order.
    """
    t = normalize_text(text)
    if not t:
        return DEFAULT_MATERIAL_KEY

    best_key, best_len = None, 0
    for material in catalog.materials:
        for name in material.names:
            if len(name) > best_len and name in t:
                best_key, best_len = material.key, len(name)
    if best_key is not None:
        return best_key

    return first_match(_MATERIAL_ROOT_RULES, t, DEFAULT_MATERIAL_KEY)


def _find_thickness(text: str) -> re.Match[str] | None:
    """Number giving the layer thickness; grade codes such as "d500" are skipped.

    A number with a unit always counts. A bare number glued to a letter is
    taken as a grade code.
    """
    bare = None
    for match in _THICKNESS.finditer(text):
        if match.group(2):
            return match
        start = match.start()
        if bare is None and not (start > 0 and text[start - 1].isalpha()):
            bare = match
    return bare


def parse_layer_token(token: str, config: ModelConfig = DEFAULT, catalog: Catalog = CATALOG) -> WallLayer | None:
    """Parse one layer like ``"газобетон 300"`` or ``"mineral wool 10 cm"``."""
    raw = token.strip()
    if not raw:
        return None
    lowered = raw.lower()

    thickness = config.default_layer_m
    material_text = lowered
    match = _find_thickness(lowered)
    if match is not None:
        value = parse_number(match.group(1), float("nan"))
        unit = (match.group(2) or "").lower()
        if unit and value > 0:
            thickness = value * _UNIT_SCALE[unit]
        else:
            thickness = normalize_thickness(value, config)
        material_text = lowered[: match.start()] + lowered[match.end() :]

    return WallLayer(
        material_key=guess_material_key(material_text, catalog),
        thickness_m=thickness,
        raw=raw,
    )


def parse_wall_description(
    description: str | None,
    config: ModelConfig = DEFAULT,
    catalog: Catalog = CATALOG,
) -> list[WallLayer]:
    """Split a description on ``+ , ;`` and parse each part into a layer."""
    if not description:
        return []
    layers: list[WallLayer] = []
    for part in _LAYER_SEPARATORS.split(str(description)):
        layer = parse_layer_token(part, config, catalog)
        if layer is not None:
            layers.append(layer)
    return layers


def layers_from_construction(key: str | None, catalog: Catalog = CATALOG) -> list[WallLayer]:
    construction = catalog.construction(key)
    if construction is None:
        return []
    return [
        WallLayer(
            material_key=spec.material,
            thickness_m=spec.thickness_m,
            raw=f"{spec.material} {spec.thickness_m * 1000:g} mm",
        )
        for spec in construction.layers
    ]


# -----------------------------------------------------------------------------
# Thermal resistance
# -----------------------------------------------------------------------------


def layer_resistance(layer: WallLayer, catalog: Catalog = CATALOG) -> float:
    """R = d / λ for one layer (m²·K/W)."""
    material = catalog.material(layer.material_key)
    conductivity = material.conductivity if material is not None else UNKNOWN_MATERIAL_CONDUCTIVITY
    return layer.thickness_m / conductivity


def total_resistance(
    layers: list[WallLayer] | tuple[WallLayer, ...],
    with_surface: bool = True,
    config: ModelConfig = DEFAULT,
    catalog: Catalog = CATALOG,
) -> float:
    """Series resistance of all layers, plus surface films when requested."""
    if not layers:
        return 0.0
    r_sum = sum(layer_resistance(layer, catalog) for layer in layers)
    if with_surface:
        r_sum += config.r_si + config.r_se
    return r_sum


def u_value_from_resistance(r_total: float, config: ModelConfig = DEFAULT) -> float:
    if r_total <= 0:
        return config.penalty_u_value
    return 1.0 / r_total


# -----------------------------------------------------------------------------
# Public API
# -----------------------------------------------------------------------------


def resolve_wall(
    construction_key: str | None = None,
    wall_description: str | None = None,
    additional_insulation: object = None,
    config: ModelConfig = DEFAULT,
    catalog: Catalog = CATALOG,
) -> ResolvedEnvelope:
    """Resolve the exterior wall from a catalog key or free text.

    Args:
        construction_key: Wall construction catalog key (takes precedence)
        wall_description: Free-text build-up, layers separated by ``+ , ;``
        additional_insulation: Extra mineral wool appended to the wall (m, or mm when >= 10)
        config: Model tunables
        catalog: Static catalogs

    Returns:
        ResolvedEnvelope; never raises.
    """
    if wall_description is not None:
        wall_description = str(wall_description)

    layers = layers_from_construction(construction_key, catalog)
    source = "construction"

    if not layers:
        if construction_key:
            logger.debug("Unknown construction %r, parsing wall description instead", construction_key)
        layers = parse_wall_description(wall_description, config, catalog)
        source = "text"

    if not layers:
        layers = [
            WallLayer(
                material_key=DEFAULT_MATERIAL_KEY,
                thickness_m=config.default_wall_layer_m,
                raw="solid brick 380 mm (default)",
            )
        ]
        source = "default"

    extra = insulation_thickness(additional_insulation, config)
    if extra > 0:
        layers.append(WallLayer(INSULATION_MATERIAL_KEY, extra, f"mineral wool {extra * 1000:g} mm (added)"))

    r_total = total_resistance(layers, config=config, catalog=catalog)
    construction = catalog.construction(construction_key) if source == "construction" else None
    label = construction.name if construction is not None else _CUSTOM_LABEL
    if construction is not None:
        description = construction.name
    elif source == "text" and wall_description:
        description = wall_description.strip()
    else:
        description = " + ".join(layer.raw or layer.material_key for layer in layers)

    return ResolvedEnvelope(
        layers=tuple(layers),
        r_total=r_total,
        u_value=u_value_from_resistance(r_total, config),
        label=label,
        description=description,
        source=source,
    )


def resolve_window(key: str | None, catalog: Catalog = CATALOG) -> WindowType:
    """Window type by catalog key or alias; the default type when unknown."""
    window = catalog.window(key)
    if window is None:
        if key:
            logger.debug("Unknown window type %r, using %s", key, catalog.default_window_key)
        return catalog.default_window
    return window
