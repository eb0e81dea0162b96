from pydantic import BaseModel, ConfigDict
from typing import Any, Dict, List, Literal, Optional, Tuple


# --- Calculation results (immutable snapshots) ---

class ResultModel(BaseModel):
    model_config = ConfigDict(frozen=True)


class JoistInfo(ResultModel):
    x: float
    y: float
    length: float
    cut_length: float
    is_edge: bool


class BovedillaPiece(ResultModel):
    x: float
    width: float
    is_adjustment: bool


class BovedillaRow(ResultModel):
    y: float
    pieces: Tuple[BovedillaPiece, ...] = ()


class MallaResult(ResultModel):
    area_total: float
    area_with_waste: float
    sheets: int
    type: str


class LayoutResult(ResultModel):
    orientation: Literal["horizontal", "vertical"]
    joist_count: int
    joist_count_with_waste: int
    joist_length: float
    selected_beam_length: float
    pieces_per_joist: int
    joists: Tuple[JoistInfo, ...]
    joist_positions: Tuple[float, ...]
    bovedilla_rows: Tuple[BovedillaRow, ...]
    bovedillas_per_row: int
    total_vaults: int
    total_vaults_with_waste: int
    adjustment_pieces: int
    waste: float
    waste_percentage: float
    recommendations: Tuple[str, ...]
    longest_side: float
    shortest_side: float
    peralte: int
    peralte_height: float
    bovedilla_volume: float
    malla: MallaResult


class PanelDimensions(ResultModel):
    width: float
    length: float


class PanelResult(ResultModel):
    wall_area: float
    panels_required: int
    panels_with_waste: int
    thickness: float
    density: float
    meshes_required: int
    dimensions: PanelDimensions


# --- Request bodies ---
# Dimensions stay loose (Any) on purpose: the calculators coerce bad input
# to their defaults and the form UI relies on that instead of a 422.

class SlabRequest(BaseModel):
    length: Any = None
    width: Any = None


class WallRequest(BaseModel):
    height: Any = None
    length: Any = None
    thickness: Any = 4
    density: Any = 15


class CalculationRequest(BaseModel):
    type: str
    fields: Dict[str, Any] = {}


class ItemPrices(BaseModel):
    # Slab prices
    vigueta: float = 0.0                  # per piece
    bovedilla: float = 0.0                # per m³
    # Wall prices
    price_per_linear_meter: float = 0.0
    price_per_height: float = 0.0
    total_cost: Optional[float] = None


class BudgetItemRequest(BaseModel):
    type: Literal["slab", "wall"]
    fields: Dict[str, Any] = {}
    prices: ItemPrices = ItemPrices()


class BudgetRequest(BaseModel):
    client_name: Optional[str] = None
    profit_margin: Optional[float] = None
    labor_cost_per_m2: Optional[float] = None
    items: List[BudgetItemRequest] = []
