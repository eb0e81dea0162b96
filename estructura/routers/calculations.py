"""
Calculation endpoints.

POST /api/calculations/slab        vigueta y bovedilla layout for a slab
POST /api/calculations/wall        structural panel counts for a wall
POST /api/calculations             registry dispatch: {"type", "fields"}

Dimensions are coerced by the calculators, never rejected, except for plans
larger than MAX_DIMENSION_M, which get a 422 before anything is laid out.
"""

import logging

from fastapi import APIRouter, HTTPException

from .. import schemas
from ..calculators.base import parse_dimension
from ..calculators.layout_planner import calculate_layout
from ..calculators.panels import calculate_panels
from ..calculators.registry import get_calculation_type, get_calculator, has_calculator
from ..config import settings

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/calculations", tags=["calculations"])


def check_dimensions(calculation_type: str, fields: dict):
    """Raise a 422 when a dimension field exceeds the configured maximum."""
    limit = settings.MAX_DIMENSION_M
    for name in get_calculation_type(calculation_type).dimension_fields:
        value = parse_dimension(fields.get(name))
        if value > limit:
            logger.warning("Rejected %s %s=%s (max %s m)", calculation_type, name, value, limit)
            raise HTTPException(
                status_code=422,
                detail=f"{name} must be at most {limit:g} m for a {calculation_type} (got {value:g})",
            )


@router.post("/slab", response_model=schemas.LayoutResult)
def calculate_slab(request: schemas.SlabRequest):
    check_dimensions("slab", request.model_dump())
    result = calculate_layout(request.length, request.width)
    logger.info("Slab %sx%s -> %d viguetas, peralte %d",
                request.length, request.width, result.joist_count, result.peralte)
    return result


@router.post("/wall", response_model=schemas.PanelResult)
def calculate_wall(request: schemas.WallRequest):
    check_dimensions("wall", request.model_dump())
    result = calculate_panels(request.height, request.length, request.thickness, request.density)
    logger.info("Wall %sx%s -> %d panels", request.height, request.length, result.panels_with_waste)
    return result


@router.post("")
def calculate_fields(request: schemas.CalculationRequest):
    """Run any registered calculator on raw form fields."""
    if not has_calculator(request.type):
        raise HTTPException(status_code=404, detail=f"Unknown calculation type: {request.type}")
    check_dimensions(request.type, request.fields)
    return get_calculator(request.type).calculate(request.fields)
