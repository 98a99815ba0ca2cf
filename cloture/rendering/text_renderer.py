"""
Cloture - Text Renderer

Prints layers one row per line, e.g. "[1, _, 2]", with every 0 value
shown as a placeholder so the interesting cells stand out.
"""

import sys
from typing import Sequence, TextIO

from ..core.constants import EMPTY_PLACEHOLDER
from ..core.edge_map import EdgeMap


def format_row(row: Sequence[int], placeholder: str = EMPTY_PLACEHOLDER) -> str:
    cells = [placeholder if value == 0 else str(value) for value in row]
    return "[" + ", ".join(cells) + "]"


def format_layer(
    layer: Sequence[Sequence[int]], placeholder: str = EMPTY_PLACEHOLDER
) -> str:
    """
    Format a layer as text.

    Args:
        layer: Matrix of ints indexed as layer[y][x]
        placeholder: Text shown for 0 values

    Returns:
        One formatted row per line, with a trailing newline.
    """
    return "".join(format_row(row, placeholder) + "\n" for row in layer)


def display_layer(layer: Sequence[Sequence[int]], file: TextIO | None = None):
    """Print a formatted layer followed by a blank line."""
    print(format_layer(layer), file=file or sys.stdout)


def display_map(edge_map: EdgeMap, file: TextIO | None = None):
    display_layer(edge_map.map, file)


def display_zones(edge_map: EdgeMap, file: TextIO | None = None):
    display_layer(edge_map.zones, file)


def display_outer_edges(edge_map: EdgeMap, file: TextIO | None = None):
    display_layer(edge_map.outer_edges, file)


def display_filled_map(edge_map: EdgeMap, file: TextIO | None = None):
    display_layer(edge_map.filled_map, file)
