"""
Cloture - Edge Map

Runs the whole analysis of a grid on construction: zones, outer edges,
interior fill and fence perimeter. The resulting layers are exposed as
read-only tuples.
"""

import logging
from typing import Any, Optional, Sequence

from .edges import detect_outer_edges
from .fill import fill_map, find_fill_seed
from .grid import Grid
from .layers import FrozenLayer, freeze_layer
from .perimeter import calculate_fence_perimeter, get_fence_count
from .zones import detect_zones, get_inner_zones, get_outer_zones

logger = logging.getLogger(__name__)

# Layer names, in pipeline order
LAYER_NAMES = ("map", "zones", "outer_edges", "filled_map")


class EdgeMap:
    """
    Edge detection and fence perimeter of a binary grid.

    Construction either completes the full analysis or raises, so an
    EdgeMap instance is always fully populated.

    Raises:
        InvalidGridError: If the rows are empty, ragged or not 0/1
        StructuralValidityError: If the exterior border enters the shape
    """

    def __init__(self, rows: Sequence[Sequence[Any]]):
        self._grid = Grid.from_rows(rows)
        grid = self._grid

        zones, self._zone_count = detect_zones(grid)
        self._outer_zones = get_outer_zones(zones)
        self._inner_zones = get_inner_zones(zones, self._zone_count)

        outer_edges = detect_outer_edges(grid, zones, self._outer_zones)

        self._fill_seed = find_fill_seed(grid, outer_edges)
        filled_map = fill_map(grid, outer_edges, self._fill_seed)

        self._fence_count = get_fence_count(outer_edges, filled_map)
        self._perimeter = calculate_fence_perimeter(self._fence_count)

        self._zones = freeze_layer(zones)
        self._outer_edges = freeze_layer(outer_edges)
        self._filled_map = freeze_layer(filled_map)

        logger.debug(
            "Analyzed %dx%d grid: %d zone(s), %d fence(s), perimeter %.1f",
            grid.width, grid.height, self._zone_count,
            self._fence_count, self._perimeter,
        )

    @property
    def grid(self) -> Grid:
        return self._grid

    @property
    def width(self) -> int:
        return self._grid.width

    @property
    def height(self) -> int:
        return self._grid.height

    # Layers

    @property
    def map(self) -> FrozenLayer:
        """The input grid (1 = occupied, 0 = empty)."""
        return self._grid.rows

    @property
    def zones(self) -> FrozenLayer:
        """Zone id of every empty cell, 0 for occupied cells."""
        return self._zones

    @property
    def outer_edges(self) -> FrozenLayer:
        """1 for every occupied cell facing the outside of the shape."""
        return self._outer_edges

    @property
    def filled_map(self) -> FrozenLayer:
        """Outer edges with their inside filled; 0 only outside the fence."""
        return self._filled_map

    def layers(self) -> dict[str, FrozenLayer]:
        """All layers keyed by name, in pipeline order."""
        return {name: getattr(self, name) for name in LAYER_NAMES}

    # Results

    @property
    def zone_count(self) -> int:
        return self._zone_count

    @property
    def outer_zones(self) -> tuple[int, ...]:
        return self._outer_zones

    @property
    def inner_zones(self) -> tuple[int, ...]:
        return self._inner_zones

    @property
    def fill_seed(self) -> Optional[tuple[int, int]]:
        """Cell the interior fill started from, if any."""
        return self._fill_seed

    @property
    def fence_count(self) -> int:
        return self._fence_count

    @property
    def fence_perimeter(self) -> float:
        """Total fence length needed to enclose the shape."""
        return self._perimeter

    def get_fence_perimeter(self) -> float:
        return self._perimeter

    def __repr__(self) -> str:
        return (
            f"EdgeMap({self.width}x{self.height}, zones={self._zone_count}, "
            f"fences={self._fence_count}, perimeter={self._perimeter})"
        )
