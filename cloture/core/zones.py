"""
Cloture - Zone Detection

Splits the empty cells of a grid into 4-connected zones and sorts the
zones into outer zones (touching the grid border) and inner zones
(lakes enclosed by the shape).
"""

import logging

from .constants import DEFAULT_FILL, EMPTY, FIRST_ZONE_ID
from .flood import flood
from .grid import Grid
from .layers import Layer, layer_size, replace_values

logger = logging.getLogger(__name__)


def detect_zones(grid: Grid) -> tuple[Layer, int]:
    """
    Label every empty region of the grid with its own zone id.

    Zone ids start at FIRST_ZONE_ID and increase in row-major order of the
    first cell found in each zone. Occupied cells end up as 0.

    Args:
        grid: The grid to split into zones

    Returns:
        Tuple of (zones layer, number of zones found)

    Raises:
        StructuralValidityError: If a zone's flood finds the exterior
            border entering the shape
    """
    zones = grid.to_layer()
    zone_id = FIRST_ZONE_ID - 1

    for y in range(grid.height):
        for x in range(grid.width):
            if zones[y][x] == EMPTY:
                zone_id += 1
                size = flood(grid, zones, x, y, zone_id)
                logger.debug("Zone %d starts at (%d, %d), %d cells", zone_id, x, y, size)

    # Occupied cells still hold the default marker
    replace_values(zones, DEFAULT_FILL, EMPTY)

    zone_count = zone_id - FIRST_ZONE_ID + 1
    logger.debug("Detected %d zone(s)", zone_count)
    return zones, zone_count


def get_outer_zones(zones: Layer) -> tuple[int, ...]:
    """
    Find the zones that touch the border of the grid.

    Scans the top row, the bottom row, then the left and right cell of
    each row.

    Returns:
        Zone ids in the order they were first found.
    """
    width, height = layer_size(zones)
    outer: list[int] = []

    border_cells = list(zones[0]) + list(zones[height - 1])
    for y in range(height):
        border_cells.append(zones[y][0])
        border_cells.append(zones[y][width - 1])

    for zone in border_cells:
        if zone > DEFAULT_FILL and zone not in outer:
            outer.append(zone)

    return tuple(outer)


def get_inner_zones(zones: Layer, zone_count: int) -> tuple[int, ...]:
    """Zone ids that never reach the border, in ascending order."""
    outer = set(get_outer_zones(zones))
    return tuple(
        zone
        for zone in range(FIRST_ZONE_ID, FIRST_ZONE_ID + zone_count)
        if zone not in outer
    )
