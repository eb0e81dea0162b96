"""
Structural panel calculator tests.

Tests:
1-2. Reference wall (3m x 10m) and the single-panel wall
3-4. Density clamp, thickness and invalid input defaults
5-7. Registry dispatch and calculation type labels
"""

import pytest

from estructura.calculators.panels import WallPanelCalculator, calculate_panels, clamp_density
from estructura.calculators.registry import (
    get_calculation_type,
    get_calculator,
    has_calculator,
    list_calculators,
)
from estructura.calculators.layout_planner import SlabLayoutCalculator


def test_panels_reference_wall():
    """3m x 10m: 30 m² / 2.9768 m² per panel → 11 panels, 12 with waste, 24 meshes."""
    result = calculate_panels(3, 10, 4, 30)
    assert result.wall_area == 30
    assert result.panels_required == 11
    assert result.panels_with_waste == 12
    assert result.meshes_required == 24
    assert result.density == 16
    assert result.thickness == 4
    assert result.dimensions.width == 1.22
    assert result.dimensions.length == 2.44


def test_panels_single_panel_wall():
    """A wall exactly one panel in size still buys a spare."""
    result = calculate_panels(2.44, 1.22)
    assert result.panels_required == 1
    assert result.panels_with_waste == 2
    assert result.meshes_required == 4
    assert result.thickness == 4
    assert result.density == 15


def test_density_is_clamped_not_rejected():
    assert clamp_density(30) == 16
    assert clamp_density(10) == 14
    assert clamp_density(15) == 15
    assert calculate_panels(3, 3, density=8).density == 14
    assert calculate_panels(3, 3, density="abc").density == 15


def test_panels_invalid_dimensions_default():
    """Bad height/length fall back to 1.0 instead of raising."""
    result = calculate_panels("x", None, thickness=None)
    assert result.wall_area == 1.0
    assert result.panels_required == 1
    assert result.panels_with_waste == 2
    assert result.thickness == 4
    assert calculate_panels(0, -2).wall_area == 1.0


def test_registry_types():
    assert list_calculators() == ["slab", "wall"]
    assert has_calculator("slab")
    assert has_calculator("wall")
    assert not has_calculator("roof")
    assert isinstance(get_calculator("slab"), SlabLayoutCalculator)
    assert isinstance(get_calculator("wall"), WallPanelCalculator)
    with pytest.raises(ValueError):
        get_calculator("roof")


def test_calculation_types_carry_budget_labels():
    slab = get_calculation_type("slab")
    assert slab.description == "Losa Vigueta y Bovedilla"
    assert slab.dimension_fields == ("length", "width")
    wall = get_calculation_type("wall")
    assert wall.description == "Muro Panel Estructural"
    assert wall.dimension_fields == ("height", "length")
    with pytest.raises(ValueError, match="Available"):
        get_calculation_type("roof")


def test_wall_calculator_returns_dict(wall_fields):
    data = get_calculator("wall").calculate(wall_fields)
    assert data["panels_with_waste"] == 12
    assert data["meshes_required"] == 24
    assert data["density"] == 16
    assert data["dimensions"] == {"width": 1.22, "length": 2.44}
