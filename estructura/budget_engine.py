"""
Budget engine.

Turns slab and wall calculations into priced budget lines.
Pure math: quantity × price, area × labor rate, subtotal × margin.

Input: list of {"type", "fields", "prices"} items
Output: Budget dict (lines, labor, subtotal, profit, total)
"""

import logging
from datetime import datetime

from .calculators.base import parse_dimension, parse_number
from .calculators.registry import get_calculation_type
from .config import settings

logger = logging.getLogger(__name__)

LABOR_DESCRIPTION = "Mano de Obra"


class BudgetEngine:
    """
    Assembles a project budget from the slab/wall calculators.
    Items without material prices fall back to a flat rate per m².
    """

    def __init__(self, slab_rate: float = None, wall_rate: float = None):
        self.slab_rate = settings.SLAB_RATE_PER_M2 if slab_rate is None else slab_rate
        self.wall_rate = settings.WALL_RATE_PER_M2 if wall_rate is None else wall_rate

    def build_budget(self, items: list, profit_margin: float = None,
                     labor_cost_per_m2: float = None, client_name: str = None) -> dict:
        """
        Args:
            items: [{
                "type": "slab" | "wall",
                "fields": dict,     # calculator fields
                "prices": dict,     # vigueta, bovedilla (slab) or
                                    # price_per_linear_meter, price_per_height, total_cost (wall)
            }, ...]
            profit_margin: percent applied on top of the subtotal
            labor_cost_per_m2: labor rate applied to the total area

        Returns:
            Budget dict with priced lines and totals
        """
        if profit_margin is None:
            profit_margin = settings.PROFIT_MARGIN_DEFAULT
        if labor_cost_per_m2 is None:
            labor_cost_per_m2 = settings.LABOR_COST_PER_M2_DEFAULT

        lines = [self.price_item(item, profit_margin) for item in items]

        total_area = sum(line["area"] for line in lines)
        material_subtotal = round(sum(line["base_cost"] for line in lines), 2)
        labor_subtotal = round(labor_cost_per_m2 * total_area, 2)
        subtotal = round(material_subtotal + labor_subtotal, 2)
        profit = round(subtotal * (profit_margin / 100), 2)

        labor_line = None
        if labor_subtotal > 0:
            labor_line = {
                "description": LABOR_DESCRIPTION,
                "area": round(total_area, 2),
                "unit_price": round(labor_cost_per_m2, 2),
                "total": labor_subtotal,
            }

        logger.info("Budget for %s: %d lines, total area %.2f m²",
                    client_name or "unnamed project", len(lines), total_area)

        return {
            "client_name": client_name,
            "lines": lines,
            "labor": labor_line,
            "total_area": round(total_area, 2),
            "material_subtotal": material_subtotal,
            "labor_subtotal": labor_subtotal,
            "subtotal": subtotal,
            "profit_margin": profit_margin,
            "profit": profit,
            "total": round(subtotal + profit, 2),
            "created_at": datetime.utcnow().isoformat(),
        }

    def price_item(self, item: dict, profit_margin: float) -> dict:
        """Run the item's calculator and price its materials."""
        item_type = item.get("type")
        fields = item.get("fields") or {}
        prices = item.get("prices") or {}
        calculation = get_calculation_type(item_type)
        results = calculation.calculator().calculate(fields)

        if item_type == "slab":
            area, material_cost, details = self._price_slab(results, prices)
            fallback_rate = self.slab_rate
        else:
            area, material_cost, details = self._price_wall(results, fields, prices)
            fallback_rate = self.wall_rate

        if material_cost > 0:
            base_cost = material_cost
        else:
            base_cost = area * fallback_rate
            details.append({
                "description": "Precio por m² (sin precios de material)",
                "quantity": round(area, 2),
                "unit": "m²",
                "unit_price": round(fallback_rate, 2),
                "cost": round(base_cost, 2),
            })

        profit = base_cost * (profit_margin / 100)
        return {
            "type": item_type,
            "description": calculation.description,
            "area": area,
            "unit_price": round(base_cost / area, 2) if area > 0 else 0.0,
            "base_cost": round(base_cost, 2),
            "profit": round(profit, 2),
            "total": round(base_cost + profit, 2),
            "details": details,
            "results": results,
        }

    def _price_slab(self, results: dict, prices: dict):
        area = results["malla"]["area_total"]
        vigueta_price = parse_number(prices.get("vigueta"))
        bovedilla_price = parse_number(prices.get("bovedilla"))

        vigueta_count = results["joist_count_with_waste"]
        bovedilla_volume = results["bovedilla_volume"]
        vigueta_cost = vigueta_count * vigueta_price
        bovedilla_cost = bovedilla_volume * bovedilla_price

        details = []
        if vigueta_cost > 0:
            details.append({
                "description": "Viguetas",
                "quantity": vigueta_count,
                "unit": "pzas",
                "unit_price": round(vigueta_price, 2),
                "cost": round(vigueta_cost, 2),
            })
        if bovedilla_cost > 0:
            details.append({
                "description": "Bovedillas EPS",
                "quantity": round(bovedilla_volume, 2),
                "unit": "m³",
                "unit_price": round(bovedilla_price, 2),
                "cost": round(bovedilla_cost, 2),
            })
        return area, vigueta_cost + bovedilla_cost, details

    def _price_wall(self, results: dict, fields: dict, prices: dict):
        area = results["wall_area"]
        total_cost = parse_number(prices.get("total_cost"))
        if total_cost > 0:
            return area, total_cost, []

        length = parse_dimension(fields.get("length"))
        height = parse_dimension(fields.get("height"))
        linear_price = parse_number(prices.get("price_per_linear_meter"))
        height_price = parse_number(prices.get("price_per_height"))
        linear_cost = length * linear_price
        height_cost = height * height_price

        details = []
        if linear_cost > 0:
            details.append({
                "description": "Lineal",
                "quantity": length,
                "unit": "m",
                "unit_price": round(linear_price, 2),
                "cost": round(linear_cost, 2),
            })
        if height_cost > 0:
            details.append({
                "description": "Altura",
                "quantity": height,
                "unit": "m",
                "unit_price": round(height_price, 2),
                "cost": round(height_cost, 2),
            })
        return area, linear_cost + height_cost, details
