"""Task pattern layout.

A task's requirements are block offsets around an origin (the cell of the
agent that submits the task). The pattern is shown on a fixed-width raster
surface. :func:`pattern_layout` picks a bounding box that is symmetric around
the origin, so the origin cell always sits in the middle of the surface, and
an integer cell size that fits that box into the surface width.

Policy for degenerate inputs:

* A task without requirements is laid out as the origin cell alone
    (``width == height == 1``).
* A pattern wider than the surface would floor the cell size to zero. With
    ``clamp=True`` (the default) the cell size is clamped to 1 pixel and the
    pattern is clipped at the surface edges instead of producing a zero-area
    surface.
"""

from dataclasses import dataclass
from typing import Sequence, Tuple

from pyrsistent import PVector, pvector

from grid_monitor.config import DEFAULT_MAX_CELL_SIZE, DEFAULT_SURFACE_WIDTH
from grid_monitor.world import Block


@dataclass(frozen=True)
class PatternLayout:
    """Pixel layout of a task pattern.

    Attributes:
        width: Bounding box width in cells (odd, >= 1).
        height: Bounding box height in cells (odd, >= 1).
        cell_size: Pixel size of one cell.
        surface_width: Surface width in pixels.
        surface_height: Surface height in pixels (``cell_size * height``).
    """

    width: int
    height: int
    cell_size: int
    surface_width: int
    surface_height: int

    @property
    def origin_offset(self) -> Tuple[float, float]:
        """Translation that puts the top-left corner of cell (0, 0) on the surface center cell."""
        return (
            (self.surface_width - self.cell_size) / 2,
            (self.surface_height - self.cell_size) / 2,
        )

    @property
    def origin_marker(self) -> Tuple[float, float, float, float]:
        """``(x, y, w, h)`` of the origin marker, relative to ``origin_offset``."""
        return (
            self.cell_size * 0.4,
            self.cell_size * 0.4,
            self.cell_size * 0.2,
            self.cell_size * 0.2,
        )


@dataclass(frozen=True)
class PatternDrawing:
    """Draw instruction: paint ``requirements`` with ``layout``.

    Carried in the view tree instead of a callback so the tree stays a value.
    """

    layout: PatternLayout
    requirements: PVector[Block] = pvector()


def pattern_layout(
    requirements: Sequence[Block],
    surface_width: int = DEFAULT_SURFACE_WIDTH,
    max_cell_size: int = DEFAULT_MAX_CELL_SIZE,
    clamp: bool = True,
) -> PatternLayout:
    """Compute the bounding box and cell size for a requirement pattern.

    Args:
        requirements: Block offsets relative to the task origin.
        surface_width: Fixed surface width in pixels.
        max_cell_size: Cap for the cell size in pixels.
        clamp: Clamp a zero cell size to 1.

    Returns:
        PatternLayout: ``width = 2 * max|x| + 1``, ``height = 2 * max|y| + 1``,
        ``cell_size = min(surface_width // width, max_cell_size)``.
    """
    max_abs_x = max((abs(b.x) for b in requirements), default=0)
    max_abs_y = max((abs(b.y) for b in requirements), default=0)
    width = 2 * max_abs_x + 1
    height = 2 * max_abs_y + 1
    cell_size = min(surface_width // width, max_cell_size)
    if clamp and cell_size < 1:
        cell_size = 1
    return PatternLayout(
        width=width,
        height=height,
        cell_size=cell_size,
        surface_width=surface_width,
        surface_height=cell_size * height,
    )


def pattern_drawing(
    requirements: Sequence[Block],
    surface_width: int = DEFAULT_SURFACE_WIDTH,
    max_cell_size: int = DEFAULT_MAX_CELL_SIZE,
    clamp: bool = True,
) -> PatternDrawing:
    return PatternDrawing(
        layout=pattern_layout(requirements, surface_width, max_cell_size, clamp),
        requirements=pvector(requirements),
    )
