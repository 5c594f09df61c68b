"""Tests for wall and window resolution."""

import math

import pytest

from model.envelope import (
    guess_material_key,
    normalize_thickness,
    parse_layer_token,
    parse_wall_description,
    resolve_wall,
    resolve_window,
    total_resistance,
    u_value_from_resistance,
)
from model.types import WallLayer

_FILMS = 0.13 + 0.04

# -----------------------------------------------------------------------------
# Layer parsing
# -----------------------------------------------------------------------------


@pytest.mark.parametrize(
    ("token", "material", "thickness"),
    [
        ("кирпич 380мм", "brick_solid", 0.38),
        ("минвата 100 мм", "mineral_wool", 0.1),
        ("газобетон 300", "aerated_D300", 0.3),
        ("штукатурка 2см", "plaster", 0.02),
        ("mineral wool 10 cm", "mineral_wool", 0.1),
        ("concrete 0.2m", "concrete_heavy", 0.2),
        ("aerated concrete 400", "aerated_D300", 0.4),
        ("пенопласт 0,1", "eps", 0.1),
        ("пенополистирол 50", "xps", 0.05),
        ("osb 15mm", "wood", 0.015),
        ("100 минвата", "mineral_wool", 0.1),
        ("гипсокартон", "gypsum", 0.1),
        ("что-то 250", "brick_solid", 0.25),
        ("кирпич пустотелый 380мм", "brick_hollow", 0.38),
        ("газобетон d400", "aerated_D400", 0.1),
        ("газобетон D500 300мм", "aerated_D500", 0.3),
        ("газобетон d400 300", "aerated_D400", 0.3),
        ("кирпич380мм", "brick_solid", 0.38),
    ],
)
def test_parse_layer_token(token: str, material: str, thickness: float) -> None:
    layer = parse_layer_token(token)
    assert layer is not None
    assert layer.material_key == material
    assert layer.thickness_m == pytest.approx(thickness)
    assert layer.raw == token


def test_parse_layer_token_blank_is_none() -> None:
    assert parse_layer_token("   ") is None


def test_parse_wall_description_splits_on_separators() -> None:
    layers = parse_wall_description("кирпич 380мм + минвата 100мм; штукатурка 20мм, гкл 12")
    assert [layer.material_key for layer in layers] == ["brick_solid", "mineral_wool", "plaster", "gypsum"]
    assert [layer.thickness_m for layer in layers] == pytest.approx([0.38, 0.1, 0.02, 0.012])


def test_normalize_thickness() -> None:
    assert normalize_thickness(380) == pytest.approx(0.38)
    assert normalize_thickness("0,38") == pytest.approx(0.38)
    assert normalize_thickness(None) == pytest.approx(0.1)
    assert normalize_thickness(-5) == pytest.approx(0.1)


def test_guess_material_key_defaults_to_brick() -> None:
    assert guess_material_key("") == "brick_solid"
    assert guess_material_key("unobtainium") == "brick_solid"


# -----------------------------------------------------------------------------
# Wall resolution
# -----------------------------------------------------------------------------


def test_resolve_wall_from_text() -> None:
    wall = resolve_wall(wall_description="кирпич 380мм + минвата 100мм")

    expected_r = 0.38 / 0.81 + 0.1 / 0.04 + _FILMS
    assert wall.source == "text"
    assert wall.r_total == pytest.approx(expected_r)
    assert wall.u_value == pytest.approx(1 / expected_r)
    assert wall.description == "кирпич 380мм + минвата 100мм"


def test_resolve_wall_construction_takes_precedence() -> None:
    wall = resolve_wall("brick_380_mw100", "газобетон 300")

    assert wall.source == "construction"
    assert [layer.material_key for layer in wall.layers] == ["brick_solid", "mineral_wool", "plaster"]
    assert wall.r_total == pytest.approx(0.38 / 0.81 + 0.1 / 0.04 + 0.02 / 0.7 + _FILMS)
    assert wall.label == wall.description


def test_resolve_wall_unknown_construction_falls_back_to_text() -> None:
    wall = resolve_wall("no_such_key", "газобетон 300")
    assert wall.source == "text"
    assert wall.layers[0].material_key == "aerated_D300"


def test_resolve_wall_default_when_nothing_given() -> None:
    wall = resolve_wall(None, None)

    assert wall.source == "default"
    assert len(wall.layers) == 1
    assert wall.layers[0].material_key == "brick_solid"
    assert wall.layers[0].thickness_m == pytest.approx(0.38)
    assert wall.u_value == pytest.approx(1 / (0.38 / 0.81 + _FILMS))


def test_additional_insulation_appends_mineral_wool() -> None:
    base = resolve_wall(wall_description="кирпич 380мм")
    insulated = resolve_wall(wall_description="кирпич 380мм", additional_insulation=0.1)

    assert insulated.layers[-1].material_key == "mineral_wool"
    assert insulated.r_total == pytest.approx(base.r_total + 0.1 / 0.04)
    assert insulated.source == "text"


def test_added_insulation_in_millimeters() -> None:
    in_mm = resolve_wall(wall_description="кирпич 380мм", additional_insulation=100)
    in_m = resolve_wall(wall_description="кирпич 380мм", additional_insulation=0.1)

    assert in_mm.layers[-1].thickness_m == pytest.approx(0.1)
    assert in_mm.u_value == pytest.approx(in_m.u_value)
    assert resolve_wall(additional_insulation="50").layers[-1].thickness_m == pytest.approx(0.05)


def test_thicker_existing_layer_lowers_u_value() -> None:
    u_values = [resolve_wall(wall_description=f"кирпич 380мм + минвата {mm}мм").u_value for mm in (50, 100, 150, 200)]
    assert all(b < a for a, b in zip(u_values, u_values[1:]))


@pytest.mark.parametrize("description", ["кирпич 380мм + минвата 50мм", "газобетон 300 + пенопласт 30"])
def test_added_insulation_lowers_u_value(description: str) -> None:
    previous = resolve_wall(wall_description=description).u_value
    for extra in (0.02, 0.05, 0.1, 0.2):
        u = resolve_wall(wall_description=description, additional_insulation=extra).u_value
        assert u < previous
        previous = u


def test_u_value_is_positive_and_finite() -> None:
    for description in ["", "кирпич", "минвата 1000", "штукатурка 1мм", "жб 0.16"]:
        wall = resolve_wall(wall_description=description)
        assert wall.r_total > 0
        assert 0 < wall.u_value < math.inf
        assert wall.u_value == pytest.approx(1 / wall.r_total)


def test_zero_resistance_gets_penalty_u_value() -> None:
    assert total_resistance([]) == 0.0
    assert u_value_from_resistance(0.0) == 5.0


def test_unknown_material_uses_fallback_conductivity() -> None:
    r = total_resistance([WallLayer("adobe", 0.4)], with_surface=False)
    assert r == pytest.approx(0.4 / 0.8)


# -----------------------------------------------------------------------------
# Windows
# -----------------------------------------------------------------------------


@pytest.mark.parametrize(
    ("key", "expected"),
    [
        ("double_glazed", "double_glazed"),
        ("Triple_Glazed", "triple_glazed"),
        ("std_3ch", "triple_glazed"),
        ("double-glazed", "double_glazed"),
        ("old_wood", "old_wood"),
        ("stained glass", "double_glazed"),
        (None, "double_glazed"),
        ("", "double_glazed"),
    ],
)
def test_resolve_window(key: str | None, expected: str) -> None:
    assert resolve_window(key).key == expected
