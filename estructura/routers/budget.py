"""
Budget endpoint.

POST /api/budget  price a list of slab/wall items with margin and labor.
"""

from fastapi import APIRouter

from .. import schemas
from ..budget_engine import BudgetEngine
from .calculations import check_dimensions

router = APIRouter(prefix="/budget", tags=["budget"])

engine = BudgetEngine()


@router.post("")
def build_budget(request: schemas.BudgetRequest):
    items = [item.model_dump() for item in request.items]
    for item in items:
        check_dimensions(item["type"], item["fields"] or {})
    return engine.build_budget(
        items,
        profit_margin=request.profit_margin,
        labor_cost_per_m2=request.labor_cost_per_m2,
        client_name=request.client_name,
    )
