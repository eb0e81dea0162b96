"""
Layout planner for vigueta y bovedilla slabs.

Viguetas span the claro (shortest side) at 0.70m axes and are counted along
the longest side. Bovedillas (1.22 x 0.63m EPS blocks) fill each gap between
viguetas, with one adjustment piece per row when the span is not a whole
number of blocks. Malla electrosoldada covers the slab area plus waste.

Pure math: no I/O, no shared state, never raises on bad dimensions.
"""

import logging
import math

from ..schemas import BovedillaPiece, BovedillaRow, JoistInfo, LayoutResult, MallaResult
from .base import BaseCalculator, apply_waste, parse_dimension, round_half_up
from .constants import MALLA, SLAB, MallaSpec, SlabConstants

logger = logging.getLogger(__name__)


def get_peralte_from_claro(claro: float, constants: SlabConstants = SLAB) -> int:
    """
    P-15: claro <= 4.00m
    P-20: claro <= 5.00m
    P-25: anything longer
    """
    for max_claro, peralte in constants.peralte_thresholds:
        if claro <= max_claro:
            return peralte
    return constants.peralte_fallback


def select_beam_length(joist_length: float, constants: SlabConstants = SLAB):
    """
    Pick the stock vigueta length for a span.

    Returns (stock_length, pieces_per_joist). Spans over the longest stock
    length are spliced, losing lap_splice at each joint.
    """
    max_length = constants.max_standard_length
    if joist_length <= max_length:
        stock = next((length for length in constants.standard_lengths if length >= joist_length),
                     max_length)
        return stock, 1
    pieces = math.ceil(joist_length / (max_length - constants.lap_splice))
    return max_length, pieces


def _build_bovedilla_rows(joist_positions, longest_side, shortest_side, constants):
    """Returns (rows, adjustment_pieces)."""
    chain = constants.chain_width
    block = constants.bovedilla_length
    num_joists = len(joist_positions)

    # Every row spans the same claro, so the piece breakdown is shared
    available = shortest_side - chain * 2
    full_pieces = math.floor(available / block) if available > 0 else 0
    remainder = available - full_pieces * block
    has_adjustment = remainder > constants.adjustment_tolerance

    pieces = [
        BovedillaPiece(x=chain + p * block, width=block, is_adjustment=False)
        for p in range(full_pieces)
    ]
    if has_adjustment:
        pieces.append(BovedillaPiece(x=chain + full_pieces * block, width=remainder,
                                     is_adjustment=True))
    pieces = tuple(pieces)

    rows = []
    adjustment_pieces = 0
    for i in range(num_joists + 1):
        row_start = chain if i == 0 else joist_positions[i - 1]
        row_end = longest_side - chain if i == num_joists else joist_positions[i]
        if row_end - row_start <= 0:
            continue
        if has_adjustment:
            adjustment_pieces += 1
        rows.append(BovedillaRow(y=row_start, pieces=pieces))

    return tuple(rows), adjustment_pieces


def _recommendations(shortest_side, joist_length, waste_percentage, adjustment_pieces):
    notes = []

    if shortest_side > 10:
        segments = math.ceil(shortest_side / 10)
        notes.append("Claro > 10m. Se divide en %d tramos con apoyos intermedios." % segments)

    if waste_percentage > 15:
        notes.append("Considere ajustar dimensiones para reducir desperdicio (%.1f%%)" % waste_percentage)

    if 6 < joist_length <= 10:
        notes.append("Claro de %.2fm requiere vigueta de peralte 25." % joist_length)

    if joist_length < 3:
        notes.append("Claro muy corto. Verifique si conviene usar panel estructural.")

    if adjustment_pieces > 0:
        notes.append("Se requieren %d piezas de ajuste de bovedilla." % adjustment_pieces)

    return tuple(notes)


def calculate_malla(longest_side: float, shortest_side: float,
                    waste_factor: float = SLAB.waste_factor,
                    spec: MallaSpec = MALLA) -> MallaResult:
    """Rolls of malla electrosoldada for the slab area plus waste."""
    slab_area = longest_side * shortest_side
    area_with_waste = slab_area * (1 + waste_factor)
    return MallaResult(
        area_total=slab_area,
        area_with_waste=area_with_waste,
        sheets=math.ceil(area_with_waste / spec.roll_area),
        type=spec.type,
    )


def calculate_layout(length, width, constants: SlabConstants = SLAB,
                     malla_spec: MallaSpec = MALLA) -> LayoutResult:
    """
    Full slab layout and takeoff for a length x width rectangle (meters).

    Invalid dimensions (missing, non-numeric, zero, negative) become 1.0.
    """
    length = parse_dimension(length)
    width = parse_dimension(width)

    longest_side = max(length, width)
    shortest_side = min(length, width)  # claro
    orientation = "horizontal" if length >= width else "vertical"

    peralte = get_peralte_from_claro(shortest_side, constants)
    peralte_height = constants.peralte_heights[peralte]

    # --- Viguetas: longest side / axis distance, nearest whole joist ---
    num_joists = round_half_up(longest_side / constants.axis_distance)
    num_joists_with_waste = apply_waste(num_joists, constants.waste_factor)

    joist_length = shortest_side
    selected_beam_length, pieces_per_joist = select_beam_length(joist_length, constants)

    # Evenly spaced; neither end joist sits on the edge
    joist_spacing = longest_side / (num_joists + 1)
    joist_positions = tuple(joist_spacing * i for i in range(1, num_joists + 1))

    horizontal = orientation == "horizontal"
    joists = tuple(
        JoistInfo(
            x=0 if horizontal else pos,
            y=pos if horizontal else 0,
            length=joist_length,
            cut_length=selected_beam_length - joist_length,
            is_edge=i == 0 or i == num_joists - 1,
        )
        for i, pos in enumerate(joist_positions)
    )

    # --- Bovedillas: blocks per row rounded UP, one row per vigueta ---
    bovedillas_per_row = math.ceil(joist_length / constants.bovedilla_length)
    total_bovedillas = bovedillas_per_row * num_joists
    total_bovedillas_with_waste = apply_waste(total_bovedillas, constants.waste_factor)

    single_volume = constants.bovedilla_length * constants.bovedilla_width * peralte_height
    bovedilla_volume = single_volume * total_bovedillas_with_waste

    bovedilla_rows, adjustment_pieces = _build_bovedilla_rows(
        joist_positions, longest_side, shortest_side, constants)

    # --- Stock usage waste (not the 2% purchase waste) ---
    total_material = selected_beam_length * pieces_per_joist * num_joists
    effective_coverage = joist_length * num_joists
    waste = total_material - effective_coverage
    waste_percentage = (waste / total_material) * 100 if total_material > 0 else 0.0

    recommendations = _recommendations(shortest_side, joist_length, waste_percentage,
                                       adjustment_pieces)

    malla = calculate_malla(longest_side, shortest_side, constants.waste_factor, malla_spec)

    logger.debug(
        "Layout %.2fx%.2f: %d viguetas P-%d, %d bovedillas, %d rolls of malla",
        longest_side, shortest_side, num_joists, peralte, total_bovedillas, malla.sheets,
    )

    return LayoutResult(
        orientation=orientation,
        joist_count=num_joists,
        joist_count_with_waste=num_joists_with_waste,
        joist_length=joist_length,
        selected_beam_length=selected_beam_length,
        pieces_per_joist=pieces_per_joist,
        joists=joists,
        joist_positions=joist_positions,
        bovedilla_rows=bovedilla_rows,
        bovedillas_per_row=bovedillas_per_row,
        total_vaults=total_bovedillas,
        total_vaults_with_waste=total_bovedillas_with_waste,
        adjustment_pieces=adjustment_pieces,
        waste=waste,
        waste_percentage=waste_percentage,
        recommendations=recommendations,
        longest_side=longest_side,
        shortest_side=shortest_side,
        peralte=peralte,
        peralte_height=peralte_height,
        bovedilla_volume=bovedilla_volume,
        malla=malla,
    )


class SlabLayoutCalculator(BaseCalculator):
    """Losa vigueta y bovedilla. Fields: length, width (meters)."""

    job_type = "slab"

    def calculate(self, fields: dict) -> dict:
        result = calculate_layout(fields.get("length"), fields.get("width"))
        return result.model_dump(mode="json")
