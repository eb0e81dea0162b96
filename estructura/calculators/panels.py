"""
Structural wall panel calculator.

Panels are 1.22 x 2.44m with two welded meshes each. Density is clamped to
the 14-16 kg/m³ range the supplier makes, never rejected.
"""

import logging
import math

from ..schemas import PanelDimensions, PanelResult
from .base import BaseCalculator, apply_waste, parse_dimension, parse_number
from .constants import PANEL, PanelSpec

logger = logging.getLogger(__name__)

DEFAULT_THICKNESS = 4
DEFAULT_DENSITY = 15


def clamp_density(density: float, spec: PanelSpec = PANEL) -> float:
    return min(max(density, spec.density_min), spec.density_max)


def calculate_panels(height, length, thickness=DEFAULT_THICKNESS, density=DEFAULT_DENSITY,
                     spec: PanelSpec = PANEL) -> PanelResult:
    height = parse_dimension(height)
    length = parse_dimension(length)
    thickness = parse_number(thickness, default=DEFAULT_THICKNESS)
    requested_density = parse_number(density, default=DEFAULT_DENSITY)

    wall_area = height * length
    panels_required = math.ceil(wall_area / spec.area)
    panels_with_waste = apply_waste(panels_required, spec.waste_factor)
    meshes_required = panels_with_waste * spec.meshes

    density = clamp_density(requested_density, spec)
    if density != requested_density:
        logger.debug("Panel density %s clamped to %s", requested_density, density)

    return PanelResult(
        wall_area=wall_area,
        panels_required=panels_required,
        panels_with_waste=panels_with_waste,
        thickness=thickness,
        density=density,
        meshes_required=meshes_required,
        dimensions=PanelDimensions(width=spec.width, length=spec.length),
    )


class WallPanelCalculator(BaseCalculator):
    """Muro panel estructural. Fields: height, length, thickness, density."""

    job_type = "wall"

    def calculate(self, fields: dict) -> dict:
        result = calculate_panels(
            fields.get("height"),
            fields.get("length"),
            fields.get("thickness", DEFAULT_THICKNESS),
            fields.get("density", DEFAULT_DENSITY),
        )
        return result.model_dump(mode="json")
