"""
Integration tests for PNG rendering of layers and fence analyses.
"""

from cloture import EdgeMap
from cloture.core.constants import (
    COLOR_BACKGROUND,
    COLOR_ENCLOSED,
    COLOR_EXTERIOR,
    COLOR_FENCE,
    COLOR_LAKE,
    COLOR_OCCUPIED,
    ZONE_PALETTE,
)
from cloture.rendering.pil_renderer import (
    layer_color,
    render_edge_map_to_image,
    render_layer_to_image,
)


def cell_pixel(img, x, y, cell_size):
    """Color at the center of a cell."""
    return img.getpixel((x * cell_size + cell_size // 2, y * cell_size + cell_size // 2))


class TestLayerColor:
    """Tests for layer_color."""

    def test_zero_is_background(self):
        assert layer_color(0) == COLOR_BACKGROUND

    def test_one_is_occupied(self):
        assert layer_color(1) == COLOR_OCCUPIED

    def test_zones_cycle_through_palette(self):
        assert layer_color(2) == ZONE_PALETTE[0]
        assert layer_color(2 + len(ZONE_PALETTE)) == ZONE_PALETTE[0]
        assert layer_color(3) == ZONE_PALETTE[1]


class TestRenderLayer:
    """Tests for render_layer_to_image."""

    def test_image_size(self, l_shape_grid):
        img = render_layer_to_image(l_shape_grid.rows, cell_size=4)
        assert img.size == (6 * 4, 6 * 4)

    def test_cell_colors(self, lake_grid):
        edge_map = EdgeMap(lake_grid)
        img = render_layer_to_image(edge_map.zones, cell_size=8)
        assert cell_pixel(img, 0, 0, 8) == ZONE_PALETTE[0]
        assert cell_pixel(img, 2, 2, 8) == ZONE_PALETTE[1]
        assert cell_pixel(img, 1, 1, 8) == COLOR_BACKGROUND


class TestRenderEdgeMap:
    """Tests for render_edge_map_to_image."""

    def test_solid_square(self, square_grid):
        img = render_edge_map_to_image(EdgeMap(square_grid), cell_size=6)
        assert img.size == (30, 30)
        assert cell_pixel(img, 0, 0, 6) == COLOR_EXTERIOR
        assert cell_pixel(img, 1, 1, 6) == COLOR_FENCE
        assert cell_pixel(img, 2, 2, 6) == COLOR_ENCLOSED

    def test_lake(self, lake_grid):
        img = render_edge_map_to_image(EdgeMap(lake_grid), cell_size=6)
        assert cell_pixel(img, 2, 2, 6) == COLOR_LAKE
        assert cell_pixel(img, 2, 1, 6) == COLOR_FENCE
