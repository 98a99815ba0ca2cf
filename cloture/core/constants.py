"""
Cloture - Shared Constants

Cell values, layer markers and display settings used across the
analysis pipeline, the renderers and the command line tools.
"""

from typing import List, Tuple

# Type alias for RGB color
RGBColor = Tuple[int, int, int]

# Cell states in the input grid
EMPTY = 0
OCCUPIED = 1

# Value written by a flood when no zone id is given
DEFAULT_FILL = 1

# First id handed out by zone detection (1 is the default flood marker)
FIRST_ZONE_ID = 2

# Marker for a traced boundary cell in the outer edges layer
EDGE = 1

# Length of a single fence segment
FENCE_SEGMENT_LENGTH = 2.5

# Neighbor order used by every flood and neighbor scan: up, down, left, right
DIRECTIONS = ("up", "down", "left", "right")

# Direction vectors as (dx, dy); y increases downward
DIR_VECTORS = {
    "up": (0, -1),
    "down": (0, 1),
    "left": (-1, 0),
    "right": (1, 0),
}

# Text display
EMPTY_PLACEHOLDER = "_"

# Image rendering
CELL_SIZE = 16  # Pixels per grid cell

COLOR_BACKGROUND: RGBColor = (32, 32, 32)
COLOR_OCCUPIED: RGBColor = (150, 150, 150)
COLOR_FENCE: RGBColor = (188, 120, 40)
COLOR_ENCLOSED: RGBColor = (92, 228, 48)
COLOR_LAKE: RGBColor = (100, 176, 255)
COLOR_EXTERIOR: RGBColor = (0, 82, 0)

# Zone ids are colored by cycling through this palette
ZONE_PALETTE: List[RGBColor] = [
    (100, 176, 255),
    (255, 160, 68),
    (188, 190, 0),
    (228, 92, 160),
    (76, 220, 220),
    (160, 100, 255),
]
