"""
Technical catalog: joist classes, EPS densities, malla and panel specs.

GET /api/catalog
"""

from dataclasses import asdict

from fastapi import APIRouter

from ..calculators.constants import (
    BEAM_CATALOG, BOVEDILLA_DENSITIES, EPS_DENSITY, MALLA, PANEL, PERALTE_HEIGHTS, SLAB,
)

router = APIRouter(prefix="/catalog", tags=["catalog"])


@router.get("")
def get_catalog():
    return {
        "beams": list(BEAM_CATALOG),
        "bovedilla_densities": list(BOVEDILLA_DENSITIES),
        "eps_density": EPS_DENSITY,
        "peralte_heights": {str(k): v for k, v in PERALTE_HEIGHTS.items()},
        "standard_lengths": list(SLAB.standard_lengths),
        "bovedilla": {
            "length": SLAB.bovedilla_length,
            "width": SLAB.bovedilla_width,
            "axis_distance": SLAB.axis_distance,
        },
        "malla": {**asdict(MALLA), "roll_area": MALLA.roll_area},
        "panel": {**asdict(PANEL), "area": PANEL.area},
    }
