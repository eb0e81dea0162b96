"""
Material constants for the vigueta y bovedilla slab system and structural panels.

These are fixed commercial dimensions, not user settings. Each group is a
frozen record so the planner can take an alternate instance without any
chance of a caller mutating the shared defaults.

All lengths in meters unless noted.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Tuple


# Peralte (joist depth class) -> bovedilla height in meters
PERALTE_HEIGHTS: Mapping[int, float] = MappingProxyType({
    15: 0.15,
    20: 0.20,
    25: 0.25,
})

# EPS density is fixed for the bovedilla supplier (kg/m³)
EPS_DENSITY = 8


@dataclass(frozen=True)
class SlabConstants:
    axis_distance: float = 0.70         # 70cm between vigueta axes
    bovedilla_length: float = 1.22      # along the vigueta
    bovedilla_width: float = 0.63       # between viguetas
    standard_lengths: Tuple[float, ...] = (3, 4, 5, 6, 10)
    chain_width: float = 0.15           # cadena perimetral
    waste_factor: float = 0.02
    lap_splice: float = 0.30            # traslape at each intermediate support
    adjustment_tolerance: float = 0.01  # remainders below this are float noise
    # (max claro, peralte) pairs, checked in order; inclusive upper bound
    peralte_thresholds: Tuple[Tuple[float, int], ...] = ((4.00, 15), (5.00, 20))
    peralte_fallback: int = 25
    peralte_heights: Mapping[int, float] = field(default_factory=lambda: PERALTE_HEIGHTS, hash=False)

    @property
    def max_standard_length(self) -> float:
        return self.standard_lengths[-1]


@dataclass(frozen=True)
class MallaSpec:
    """Malla electrosoldada sold in 100 m² rolls."""
    type: str = "6x6 10-10"
    caliber: int = 10
    aperture: float = 0.10
    roll_width: float = 2.50
    roll_length: float = 40.00
    overlap: float = 0.15

    @property
    def roll_area(self) -> float:
        return self.roll_width * self.roll_length


@dataclass(frozen=True)
class PanelSpec:
    width: float = 1.22
    length: float = 2.44
    max_length: float = 5.00
    thicknesses: Tuple[int, ...] = (2, 3, 4, 5)   # inches
    meshes: int = 2                               # welded meshes per panel
    mesh_caliber: int = 14
    density_min: float = 14
    density_max: float = 16
    waste_factor: float = 0.02

    @property
    def area(self) -> float:
        return self.width * self.length


SLAB = SlabConstants()
MALLA = MallaSpec()
PANEL = PanelSpec()


# --- Technical catalog (reference data shown next to the calculators) ---

BEAM_CATALOG = (
    {"name": "P-15", "peralte": 15, "max_span": 3.50, "use": "Residencial ligero", "load_kg_m2": 250},
    {"name": "P-20", "peralte": 20, "max_span": 5.50, "use": "Residencial medio / Oficinas", "load_kg_m2": 350},
    {"name": "P-25", "peralte": 25, "max_span": 7.00, "use": "Comercial / Claros largos", "load_kg_m2": 500},
)

BOVEDILLA_DENSITIES = (
    {"range": "10-12 kg/m³", "min": 10, "max": 12, "grade": "Económico",
     "notes": "Uso estándar en vivienda económica."},
    {"range": "14-16 kg/m³", "min": 14, "max": 16, "grade": "Recomendado",
     "notes": "Mejor aislamiento térmico y acústico."},
    {"range": "20-25 kg/m³", "min": 20, "max": 25, "grade": "Premium",
     "notes": "Alto desempeño estructural y térmico."},
)
