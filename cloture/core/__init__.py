"""
Core grid analysis.

This package contains the grid model, the flood engine and the pipeline
stages (zones, outer edges, interior fill, fence perimeter) that the
EdgeMap runs on construction.
"""

from .edge_map import EdgeMap
from .flood import FloodTracker, StructuralValidityError, flood
from .grid import Grid, GridProblem, InvalidGridError

__all__ = [
    "EdgeMap",
    "FloodTracker",
    "Grid",
    "GridProblem",
    "InvalidGridError",
    "StructuralValidityError",
    "flood",
]
