"""Estructura 360: vigueta y bovedilla slab and structural panel estimator."""
