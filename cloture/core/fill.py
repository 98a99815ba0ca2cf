"""
Cloture - Interior Fill

Floods the inside of the traced outer edges so that lakes (empty pockets
enclosed by the shape) are treated like the shape itself. Cells left at 0
in the filled layer are the ones outside the fence.
"""

import logging
from typing import Optional

from .constants import DEFAULT_FILL, EDGE, EMPTY
from .flood import flood
from .grid import Grid
from .layers import Layer, copy_layer, is_border, neighbors

logger = logging.getLogger(__name__)


def _is_surrounded(grid: Grid, x: int, y: int) -> bool:
    """Whether a non-border cell has occupied cells on all four sides."""
    width, height = grid.width, grid.height
    if is_border(x, y, width, height):
        return False
    return all(grid.is_occupied(nx, ny) for nx, ny in neighbors(x, y, width, height))


def find_fill_seed(grid: Grid, edges: Layer) -> Optional[tuple[int, int]]:
    """
    Find the cell to start the interior fill from.

    Walks the grid diagonally from (0, 0), stepping to
    ((x + 1) % width, (y + 1) % height), looking for an occupied cell
    that is not an outer edge. The walk stops early on an empty cell
    enclosed on all four sides, which is used as the seed instead.

    Args:
        grid: The analyzed grid
        edges: Outer edges layer

    Returns:
        (x, y) of the seed, or None when the walk reaches the last cell
        of the grid without finding one.
    """
    width, height = grid.width, grid.height
    x = y = 0

    while grid[y][x] == EMPTY or edges[y][x] == EDGE:
        if _is_surrounded(grid, x, y):
            break

        if x == width - 1 and y == height - 1:
            return None

        x = (x + 1) % width
        y = (y + 1) % height

    return x, y


def fill_map(
    grid: Grid, edges: Layer, seed: Optional[tuple[int, int]] = None
) -> Layer:
    """
    Build the filled layer: the outer edges with their inside flooded.

    Args:
        grid: The analyzed grid
        edges: Outer edges layer
        seed: Start cell of the fill; found with find_fill_seed when omitted

    Returns:
        New filled layer. Equal to a copy of the edges when no seed exists.

    Raises:
        StructuralValidityError: If the fill finds the exterior border
            entering the shape
    """
    filled = copy_layer(edges)

    if seed is None:
        seed = find_fill_seed(grid, edges)
    if seed is None:
        logger.debug("No interior to fill")
        return filled

    x, y = seed
    size = flood(grid, filled, x, y, DEFAULT_FILL)
    logger.debug("Filled %d interior cell(s) from (%d, %d)", size, x, y)
    return filled
