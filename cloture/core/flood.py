"""
Cloture - Flood Engine

Labels 4-connected regions of zero cells in a layer. Every flood also
checks that the region it covers does not sit between two edges of the
shape while touching the grid border, which would mean the exterior
border is entering the shape.
"""

import logging
from dataclasses import dataclass, field

from .constants import DEFAULT_FILL
from .grid import Grid
from .layers import Layer, neighbors

logger = logging.getLogger(__name__)

# Marks an edge coordinate that has not been seen yet
NO_EDGE = -1


class StructuralValidityError(ValueError):
    """Raised when a flood finds the exterior border entering the shape."""

    def __init__(self, x: int, y: int):
        self.x = x
        self.y = y
        super().__init__(str(self))

    def __str__(self) -> str:
        return (
            "Map does not have correct format: exterior border is entering "
            f"at position [{self.y}][{self.x}]"
        )


@dataclass
class FloodTracker:
    """
    Convexity bookkeeping for a single flood.

    Tracks the bounding box of the visited cells and the x coordinate of
    the last visited cell with an occupied cell directly to its left
    (left_edge_x) or directly to its right (right_edge_x).
    """

    width: int
    height: int
    min_x: int = field(init=False)
    max_x: int = 0
    min_y: int = field(init=False)
    max_y: int = 0
    left_edge_x: int = NO_EDGE
    right_edge_x: int = NO_EDGE

    def __post_init__(self):
        self.min_x = self.width
        self.min_y = self.height

    def visit(self, x: int, y: int, grid: Grid) -> None:
        """Record a visited cell."""
        self.min_x = min(self.min_x, x)
        self.max_x = max(self.max_x, x)
        self.min_y = min(self.min_y, y)
        self.max_y = max(self.max_y, y)

        if grid.neighbor_is_occupied(x, y, "left"):
            self.left_edge_x = x
        if grid.neighbor_is_occupied(x, y, "right"):
            self.right_edge_x = x

    @property
    def is_between_edges(self) -> bool:
        if self.left_edge_x == NO_EDGE or self.right_edge_x == NO_EDGE:
            return False
        return self.left_edge_x <= self.right_edge_x

    @property
    def has_reached_border(self) -> bool:
        return (
            self.min_x == 0
            or self.min_y == 0
            or self.max_x == self.width - 1
            or self.max_y == self.height - 1
        )

    def check(self, x: int, y: int) -> None:
        """
        Check the flood after visiting (x, y).

        Raises:
            StructuralValidityError: If the flood is between two edges and
                has reached the grid border
        """
        if self.is_between_edges and self.has_reached_border:
            raise StructuralValidityError(x, y)


def flood(
    grid: Grid,
    layer: Layer,
    x: int,
    y: int,
    fill_value: int = DEFAULT_FILL,
) -> int:
    """
    Flood a region of zero cells with fill_value.

    The start cell is always set to fill_value. From there every
    4-connected neighbor still equal to 0 is filled, examining neighbors
    in up, down, left, right order. Uses an explicit stack so region size
    is not limited by the recursion limit.

    Args:
        grid: The grid the layer was derived from (used for edge checks)
        layer: Layer to flood, modified in place
        x: Column of the start cell
        y: Row of the start cell
        fill_value: Value written into the flooded cells

    Returns:
        Number of cells written.

    Raises:
        StructuralValidityError: If the exterior border enters the shape
    """
    width, height = grid.width, grid.height
    tracker = FloodTracker(width, height)

    layer[y][x] = fill_value
    stack = [(x, y)]
    filled = 1

    while stack:
        cx, cy = stack.pop()
        tracker.visit(cx, cy, grid)

        for nx, ny in neighbors(cx, cy, width, height):
            if layer[ny][nx] == 0:
                layer[ny][nx] = fill_value
                stack.append((nx, ny))
                filled += 1

        try:
            tracker.check(cx, cy)
        except StructuralValidityError:
            logger.warning(
                "Flood with value %d from (%d, %d) entered the shape at (%d, %d)",
                fill_value, x, y, cx, cy,
            )
            raise

    return filled
