"""
Budget engine tests.

Tests:
1-3. Slab pricing (vigueta + bovedilla, per-m² fallback)
4-6. Wall pricing (lineal + altura, total cost, fallback)
7-8. Totals: labor on total area, margin on subtotal
"""

import pytest

from estructura.budget_engine import BudgetEngine
from estructura.calculators.layout_planner import calculate_layout


def _slab_item(prices=None):
    return {"type": "slab", "fields": {"length": 6, "width": 4}, "prices": prices or {}}


def _wall_item(prices=None):
    return {"type": "wall", "fields": {"height": 3, "length": 10}, "prices": prices or {}}


# ============================================================
# Slab lines
# ============================================================

def test_slab_line_prices_viguetas_and_bovedilla():
    """Viguetas with waste × unit price + bovedilla m³ × price per m³."""
    engine = BudgetEngine()
    line = engine.price_item(_slab_item({"vigueta": 500, "bovedilla": 1200}), profit_margin=0)
    layout = calculate_layout(6, 4)

    expected = layout.joist_count_with_waste * 500 + layout.bovedilla_volume * 1200
    assert line["description"] == "Losa Vigueta y Bovedilla"
    assert line["area"] == 24
    assert line["base_cost"] == pytest.approx(expected, abs=0.01)
    assert line["details"][0]["description"] == "Viguetas"
    assert line["details"][0]["quantity"] == 10
    assert line["details"][0]["cost"] == 5000
    assert line["details"][1]["unit"] == "m³"
    assert line["results"]["joist_count"] == 9


def test_slab_line_without_prices_uses_rate():
    engine = BudgetEngine(slab_rate=450)
    line = engine.price_item(_slab_item(), profit_margin=0)
    assert line["base_cost"] == 24 * 450
    assert line["unit_price"] == 450
    assert line["details"][-1]["unit"] == "m²"


def test_line_profit_uses_margin():
    engine = BudgetEngine(slab_rate=100)
    line = engine.price_item(_slab_item(), profit_margin=20)
    assert line["base_cost"] == 2400
    assert line["profit"] == 480
    assert line["total"] == 2880


# ============================================================
# Wall lines
# ============================================================

def test_wall_line_linear_and_height():
    engine = BudgetEngine()
    line = engine.price_item(
        _wall_item({"price_per_linear_meter": 100, "price_per_height": 50}), profit_margin=0)
    assert line["description"] == "Muro Panel Estructural"
    assert line["area"] == 30
    assert line["base_cost"] == 10 * 100 + 3 * 50
    assert [d["description"] for d in line["details"]] == ["Lineal", "Altura"]


def test_wall_line_total_cost_wins():
    engine = BudgetEngine()
    line = engine.price_item(
        _wall_item({"price_per_linear_meter": 100, "total_cost": 5000}), profit_margin=0)
    assert line["base_cost"] == 5000
    assert line["details"] == []


def test_wall_line_without_prices_uses_rate():
    engine = BudgetEngine(wall_rate=320)
    line = engine.price_item(_wall_item(), profit_margin=0)
    assert line["base_cost"] == 30 * 320


# ============================================================
# Totals
# ============================================================

def test_budget_totals_with_labor_and_margin():
    engine = BudgetEngine(slab_rate=450, wall_rate=320)
    budget = engine.build_budget(
        [_slab_item(), _wall_item()], profit_margin=20, labor_cost_per_m2=50,
        client_name="Familia Pérez")

    assert budget["client_name"] == "Familia Pérez"
    assert len(budget["lines"]) == 2
    assert budget["total_area"] == 54
    assert budget["material_subtotal"] == 24 * 450 + 30 * 320
    assert budget["labor_subtotal"] == 54 * 50
    assert budget["labor"]["description"] == "Mano de Obra"
    subtotal = 24 * 450 + 30 * 320 + 54 * 50
    assert budget["subtotal"] == subtotal
    assert budget["profit"] == pytest.approx(subtotal * 0.20)
    assert budget["total"] == pytest.approx(subtotal * 1.20)


def test_budget_defaults_from_settings():
    """No margin or labor given: settings defaults (20%, no labor line)."""
    budget = BudgetEngine(slab_rate=100).build_budget([_slab_item()])
    assert budget["profit_margin"] == 20.0
    assert budget["labor"] is None
    assert budget["subtotal"] == 2400
    assert budget["total"] == 2880


def test_empty_budget():
    budget = BudgetEngine().build_budget([])
    assert budget["lines"] == []
    assert budget["total"] == 0
