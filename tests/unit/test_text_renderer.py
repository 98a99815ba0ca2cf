"""
Unit tests for the text layer display.
"""

import io

from cloture.core.edge_map import EdgeMap
from cloture.rendering.text_renderer import (
    display_filled_map,
    display_layer,
    display_map,
    display_outer_edges,
    display_zones,
    format_layer,
    format_row,
)


class TestFormatLayer:
    """Tests for format_layer."""

    def test_zeros_become_placeholder(self):
        assert format_row([1, 0, 2]) == "[1, _, 2]"

    def test_one_row_per_line(self):
        assert format_layer([[1, 1], [0, 1]]) == "[1, 1]\n[_, 1]\n"

    def test_multi_digit_values_keep_their_zeros(self):
        assert format_row([10, 0]) == "[10, _]"

    def test_custom_placeholder(self):
        assert format_layer([[0, 1]], placeholder=".") == "[., 1]\n"


class TestDisplay:
    """Tests for the display helpers."""

    def test_display_layer_prints(self):
        out = io.StringIO()
        display_layer([[0, 1]], out)
        assert out.getvalue() == "[_, 1]\n\n"

    def test_display_edge_map_layers(self, ring_grid):
        edge_map = EdgeMap(ring_grid)
        outputs = {}
        for name, display in (
            ("map", display_map),
            ("zones", display_zones),
            ("outer_edges", display_outer_edges),
            ("filled_map", display_filled_map),
        ):
            out = io.StringIO()
            display(edge_map, out)
            outputs[name] = out.getvalue()

        assert outputs["map"] == "[1, 1, 1]\n[1, _, 1]\n[1, 1, 1]\n\n"
        assert outputs["zones"] == "[_, _, _]\n[_, 2, _]\n[_, _, _]\n\n"
        assert outputs["outer_edges"] == outputs["map"]
        assert outputs["filled_map"] == "[1, 1, 1]\n[1, 1, 1]\n[1, 1, 1]\n\n"
