"""
Cloture - Outer Edge Detection

Traces the occupied cells that face the outside of the shape: cells next
to an outer zone, plus every occupied cell on the grid border.
"""

import logging
from typing import Collection

from .constants import EDGE
from .grid import Grid
from .layers import Layer, neighbors, new_layer

logger = logging.getLogger(__name__)


def _mark(grid: Grid, edges: Layer, x: int, y: int) -> bool:
    """Mark an occupied, not yet marked cell as an edge."""
    if grid.is_occupied(x, y) and edges[y][x] != EDGE:
        edges[y][x] = EDGE
        return True
    return False


def mark_outer_edges(
    grid: Grid,
    zones: Layer,
    outer_zones: Collection[int],
    edges: Layer,
) -> int:
    """
    Mark outer edges into an existing layer.

    Cells already marked are left alone, so running this again over a
    complete layer marks nothing.

    Args:
        grid: The analyzed grid
        zones: Zones layer from detect_zones
        outer_zones: Ids of the zones touching the grid border
        edges: Layer to mark, modified in place

    Returns:
        Number of newly marked cells.
    """
    width, height = grid.width, grid.height
    outer = set(outer_zones)
    marked = 0

    for y in range(height):
        for x in range(width):
            if zones[y][x] not in outer:
                continue
            for nx, ny in neighbors(x, y, width, height):
                marked += _mark(grid, edges, nx, ny)

    # Border cells have no exterior zone on their outer side
    for x in range(width):
        marked += _mark(grid, edges, x, 0)
        marked += _mark(grid, edges, x, height - 1)
    for y in range(height):
        marked += _mark(grid, edges, 0, y)
        marked += _mark(grid, edges, width - 1, y)

    return marked


def detect_outer_edges(
    grid: Grid, zones: Layer, outer_zones: Collection[int]
) -> Layer:
    """
    Build the outer edges layer (1 = edge, 0 = anything else).

    Args:
        grid: The analyzed grid
        zones: Zones layer from detect_zones
        outer_zones: Ids of the zones touching the grid border

    Returns:
        New edges layer.
    """
    edges = new_layer(grid.width, grid.height)
    marked = mark_outer_edges(grid, zones, outer_zones, edges)
    logger.debug("Traced %d outer edge cell(s)", marked)
    return edges
