"""
Cloture - Fence Perimeter Analysis

Analyzes binary occupancy grids: labels empty zones, traces the outer
boundary of the occupied shape, fills interior lakes and counts the
fence segments needed to enclose it.
"""

from .core import EdgeMap, Grid, InvalidGridError, StructuralValidityError

__all__ = [
    "EdgeMap",
    "Grid",
    "InvalidGridError",
    "StructuralValidityError",
]
