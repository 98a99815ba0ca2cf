"""
Layer display.

Text and image rendering of grid layers. Pure presentation: nothing in
the analysis depends on it.
"""

from .text_renderer import (
    display_filled_map,
    display_layer,
    display_map,
    display_outer_edges,
    display_zones,
    format_layer,
)

__all__ = [
    "display_filled_map",
    "display_layer",
    "display_map",
    "display_outer_edges",
    "display_zones",
    "format_layer",
]
