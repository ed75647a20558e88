from __future__ import annotations

import math


# Horizontal fill in eighths of a cell, empty to full.
HBLOCKS = " ▏▎▍▌▋▊▉█"
# Vertical fill in eighths of a cell, empty to full.
VBLOCKS = " ▁▂▃▄▅▆▇█"

QUAD_UPPER_LEFT = 1
QUAD_UPPER_RIGHT = 2
QUAD_LOWER_LEFT = 4
QUAD_LOWER_RIGHT = 8

# Indexed by the OR of the QUAD_* bits that are lit.
QUADRANTS = (
    " ",
    "▘",
    "▝",
    "▀",
    "▖",
    "▌",
    "▞",
    "▛",
    "▗",
    "▚",
    "▐",
    "▜",
    "▄",
    "▙",
    "▟",
    "█",
)

EMPTY = " "
FULL = "█"


def quadrant_mask(upper_left: bool, upper_right: bool, lower_left: bool, lower_right: bool) -> int:
    mask = 0
    if upper_left:
        mask |= QUAD_UPPER_LEFT
    if upper_right:
        mask |= QUAD_UPPER_RIGHT
    if lower_left:
        mask |= QUAD_LOWER_LEFT
    if lower_right:
        mask |= QUAD_LOWER_RIGHT
    return mask


def quadrant_glyph(upper_left: bool, upper_right: bool, lower_left: bool, lower_right: bool) -> str:
    """Pick the block element that lights the given quarters of a cell."""
    return QUADRANTS[quadrant_mask(upper_left, upper_right, lower_left, lower_right)]


def fill_index(filled: float) -> int:
    """Map a fill amount measured in ninths of a cell onto a 0..8 palette index.

    NaN counts as empty.
    """
    if math.isnan(filled):
        return 0
    return int(max(0.0, min(8.0, filled)))
