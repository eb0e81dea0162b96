"""
Calculation types offered by the planner.

Each type pairs a calculator with the budget line label it is sold under and
the form fields that carry plan dimensions in meters. Types match the
calculation records a budget stores: "slab" and "wall".
"""

from dataclasses import dataclass
from typing import Dict, List, Tuple

from .base import BaseCalculator
from .layout_planner import SlabLayoutCalculator
from .panels import WallPanelCalculator


@dataclass(frozen=True)
class CalculationType:
    name: str
    calculator: type
    description: str                    # budget line label
    dimension_fields: Tuple[str, ...]   # fields measured in meters


CALCULATION_TYPES: Dict[str, CalculationType] = {
    "slab": CalculationType(
        name="slab",
        calculator=SlabLayoutCalculator,
        description="Losa Vigueta y Bovedilla",
        dimension_fields=("length", "width"),
    ),
    "wall": CalculationType(
        name="wall",
        calculator=WallPanelCalculator,
        description="Muro Panel Estructural",
        dimension_fields=("height", "length"),
    ),
}


def get_calculation_type(name: str) -> CalculationType:
    """Look up a calculation type, or raise ValueError listing the known ones."""
    if name not in CALCULATION_TYPES:
        raise ValueError(
            f"Unknown calculation type: {name}. "
            f"Available: {list_calculators()}"
        )
    return CALCULATION_TYPES[name]


def get_calculator(name: str) -> BaseCalculator:
    return get_calculation_type(name).calculator()


def has_calculator(name: str) -> bool:
    return name in CALCULATION_TYPES


def list_calculators() -> List[str]:
    return sorted(CALCULATION_TYPES)
