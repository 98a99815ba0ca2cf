"""
Cloture - PIL Renderer

PIL-based rendering for generating PNG images of grid layers and of the
complete fence analysis. Used by the visualize tool.
"""

from typing import Sequence

try:
    from PIL import Image, ImageDraw
except ImportError:
    raise ImportError("Pillow library required. Install with: pip install Pillow")

from ..core.constants import (
    CELL_SIZE,
    COLOR_BACKGROUND,
    COLOR_ENCLOSED,
    COLOR_EXTERIOR,
    COLOR_FENCE,
    COLOR_LAKE,
    COLOR_OCCUPIED,
    FIRST_ZONE_ID,
    ZONE_PALETTE,
    RGBColor,
)
from ..core.edge_map import EdgeMap


def layer_color(value: int) -> RGBColor:
    """
    Color for a layer value.

    0 is background, 1 is an occupied/marked cell and zone ids cycle
    through ZONE_PALETTE.
    """
    if value == 0:
        return COLOR_BACKGROUND
    if value < FIRST_ZONE_ID:
        return COLOR_OCCUPIED
    return ZONE_PALETTE[(value - FIRST_ZONE_ID) % len(ZONE_PALETTE)]


def _draw_cells(
    colors: Sequence[Sequence[RGBColor]], cell_size: int
) -> Image.Image:
    """Draw a matrix of colors as cell_size x cell_size squares."""
    height = len(colors)
    width = len(colors[0]) if height > 0 else 0

    img = Image.new("RGB", (width * cell_size, height * cell_size), COLOR_BACKGROUND)
    draw = ImageDraw.Draw(img)

    for y, row in enumerate(colors):
        for x, color in enumerate(row):
            base_x = x * cell_size
            base_y = y * cell_size
            draw.rectangle(
                [base_x, base_y, base_x + cell_size - 1, base_y + cell_size - 1],
                fill=color,
            )

    return img


def render_layer_to_image(
    layer: Sequence[Sequence[int]], cell_size: int = CELL_SIZE
) -> Image.Image:
    """
    Render a single layer to a PIL Image.

    Args:
        layer: Matrix of ints indexed as layer[y][x]
        cell_size: Pixel size of one cell (default: CELL_SIZE)

    Returns:
        PIL Image object
    """
    colors = [[layer_color(value) for value in row] for row in layer]
    return _draw_cells(colors, cell_size)


def render_edge_map_to_image(
    edge_map: EdgeMap, cell_size: int = CELL_SIZE
) -> Image.Image:
    """
    Render the fence analysis to a PIL Image.

    Cells are colored as exterior, fence (outer edge), enclosed occupied
    cell or enclosed lake.

    Args:
        edge_map: Analyzed EdgeMap
        cell_size: Pixel size of one cell (default: CELL_SIZE)

    Returns:
        PIL Image object
    """
    grid = edge_map.map
    edges = edge_map.outer_edges
    filled = edge_map.filled_map

    colors = []
    for y in range(edge_map.height):
        row = []
        for x in range(edge_map.width):
            if edges[y][x]:
                color = COLOR_FENCE
            elif filled[y][x] == 0:
                color = COLOR_EXTERIOR
            elif grid[y][x]:
                color = COLOR_ENCLOSED
            else:
                color = COLOR_LAKE
            row.append(color)
        colors.append(row)

    return _draw_cells(colors, cell_size)
