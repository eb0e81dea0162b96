"""
Deterministic calculation engine.

Pure Python math. Given a slab's plan dimensions or a wall's height and
length, produce the joist/bovedilla layout, panel counts, malla rolls,
volumes and waste.
"""

from .layout_planner import calculate_layout, get_peralte_from_claro, select_beam_length
from .panels import calculate_panels

__all__ = ["calculate_layout", "calculate_panels", "get_peralte_from_claro", "select_beam_length"]
