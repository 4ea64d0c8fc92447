"""Overlay configuration.

A single frozen :class:`OverlayConfig` carries the knobs of the projection.
The defaults reproduce the live monitor: a 318 pixel wide task pattern panel
with cells of at most 50 pixels.
"""

from dataclasses import dataclass
from typing import Tuple

from grid_monitor.styles import TEAM_COLORS
from grid_monitor.types import Color


DEFAULT_SURFACE_WIDTH = 318
DEFAULT_MAX_CELL_SIZE = 50


@dataclass(frozen=True)
class OverlayConfig:
    """Projection settings.

    Attributes:
        surface_width: Width in pixels of the task pattern surface.
        max_cell_size: Upper bound for the pattern cell size in pixels.
        team_palette: Colors indexed by team position in name order.
        clamp_cell_size: If True a pattern wider than the surface still gets
            1 pixel cells instead of a zero-size surface.
    """

    surface_width: int = DEFAULT_SURFACE_WIDTH
    max_cell_size: int = DEFAULT_MAX_CELL_SIZE
    team_palette: Tuple[Color, ...] = TEAM_COLORS
    clamp_cell_size: bool = True

    def __post_init__(self) -> None:
        if self.surface_width < 1:
            raise ValueError(f"surface_width must be positive: {self.surface_width}")
        if self.max_cell_size < 1:
            raise ValueError(f"max_cell_size must be positive: {self.max_cell_size}")
        if len(self.team_palette) == 0:
            raise ValueError("team_palette must not be empty")


DEFAULT_CONFIG = OverlayConfig()
