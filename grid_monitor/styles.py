"""Color palettes shared by the overlay and the pattern renderer."""

from typing import Tuple

from grid_monitor.types import Color


# Indexed by a team's position in name order.
TEAM_COLORS: Tuple[Color, ...] = (
    "#0074d9",
    "#2ecc40",
    "#ff851b",
    "#b10dc9",
    "#ffdc00",
    "#39cccc",
    "#f012be",
    "#85144b",
)

# Indexed by a block type's position in ``StaticWorld.block_types``.
BLOCK_COLORS: Tuple[Color, ...] = (
    "#7fdbff",
    "#3d9970",
    "#ff4136",
    "#001f3f",
    "#01ff70",
    "#aaaaaa",
)

ORIGIN_MARKER_COLOR: Color = "red"
BLOCK_OUTLINE_COLOR: Color = "black"
TRANSPARENT: Tuple[int, int, int, int] = (0, 0, 0, 0)


def team_color(palette: Tuple[Color, ...], color_index: int) -> Color:
    """Palette lookup that wraps around for more teams than colors."""
    return palette[color_index % len(palette)]
