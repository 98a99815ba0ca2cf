"""
Cloture - Fence Perimeter

Counts the fence segments around the outer edges: one per side of an edge
cell that faces the outside of the filled shape or the grid border.
"""

from .constants import DIRECTIONS, EDGE, FENCE_SEGMENT_LENGTH
from .layers import Layer, layer_size, neighbor_value


def count_cell_fences(edges: Layer, filled: Layer, x: int, y: int) -> int:
    """
    Count the fence segments of a single edge cell.

    Args:
        edges: Outer edges layer
        filled: Filled layer from fill_map
        x: Column of the edge cell
        y: Row of the edge cell

    Returns:
        Number of fence segments (0-4).
    """
    width, height = layer_size(edges)
    fences = 0

    if x == 0 or x == width - 1:
        fences += 1
    if y == 0 or y == height - 1:
        fences += 1

    for direction in DIRECTIONS:
        # Sides facing off the grid are covered by the border terms above
        if neighbor_value(filled, x, y, direction) == 0:
            fences += 1

    return fences


def get_fence_count(edges: Layer, filled: Layer) -> int:
    """Total fence segments needed around every outer edge cell."""
    width, height = layer_size(edges)
    fence_count = 0

    for y in range(height):
        for x in range(width):
            if edges[y][x] != EDGE:
                continue
            fence_count += count_cell_fences(edges, filled, x, y)

    return fence_count


def calculate_fence_perimeter(fence_count: int) -> float:
    """Convert a fence count to a length."""
    return fence_count * FENCE_SEGMENT_LENGTH
