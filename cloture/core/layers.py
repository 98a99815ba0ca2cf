"""
Cloture - Layer Utilities

A layer is an H x W matrix of ints indexed as layer[y][x]. These helpers
are shared by every pipeline stage so that bounds checks and neighbor
lookups live in one place.
"""

from typing import Iterator, Optional, Sequence

from .constants import DIR_VECTORS, DIRECTIONS

Layer = list[list[int]]
FrozenLayer = tuple[tuple[int, ...], ...]


def layer_size(layer: Sequence[Sequence[int]]) -> tuple[int, int]:
    """Return (width, height) of a layer."""
    height = len(layer)
    width = len(layer[0]) if height > 0 else 0
    return width, height


def in_bounds(x: int, y: int, width: int, height: int) -> bool:
    return 0 <= x < width and 0 <= y < height


def neighbor_position(
    x: int, y: int, direction: str, width: int, height: int
) -> Optional[tuple[int, int]]:
    """
    Get the position of the neighbor in a direction.

    Args:
        x: Column of the cell
        y: Row of the cell
        direction: "up", "down", "left" or "right"
        width: Layer width
        height: Layer height

    Returns:
        (x, y) of the neighbor, or None if it falls outside the layer.
    """
    dx, dy = DIR_VECTORS[direction]
    nx, ny = x + dx, y + dy
    if not in_bounds(nx, ny, width, height):
        return None
    return nx, ny


def neighbor_value(
    layer: Sequence[Sequence[int]], x: int, y: int, direction: str
) -> Optional[int]:
    """
    Get the value of the neighboring cell in a direction.

    Returns:
        The neighbor's value, or None when the cell sits on the edge of
        the layer in that direction.
    """
    width, height = layer_size(layer)
    position = neighbor_position(x, y, direction, width, height)
    if position is None:
        return None
    nx, ny = position
    return layer[ny][nx]


def neighbors(
    x: int, y: int, width: int, height: int
) -> Iterator[tuple[int, int]]:
    """Yield in-bounds neighbor positions in up, down, left, right order."""
    for direction in DIRECTIONS:
        position = neighbor_position(x, y, direction, width, height)
        if position is not None:
            yield position


def is_border(x: int, y: int, width: int, height: int) -> bool:
    """Whether a cell lies on the outermost row or column."""
    return x == 0 or y == 0 or x == width - 1 or y == height - 1


def new_layer(width: int, height: int, value: int = 0) -> Layer:
    return [[value] * width for _ in range(height)]


def copy_layer(layer: Sequence[Sequence[int]]) -> Layer:
    """Make a mutable deep copy of a layer."""
    return [list(row) for row in layer]


def freeze_layer(layer: Sequence[Sequence[int]]) -> FrozenLayer:
    """Make an immutable copy of a layer."""
    return tuple(tuple(row) for row in layer)


def replace_values(layer: Layer, old: int, new: int) -> int:
    """
    Replace every cell equal to old with new, in place.

    Returns:
        Number of cells replaced.
    """
    replaced = 0
    for row in layer:
        for x, value in enumerate(row):
            if value == old:
                row[x] = new
                replaced += 1
    return replaced
