import colorsys
import random
from functools import lru_cache
from typing import Callable, Optional, Sequence, Tuple

from PIL import Image, ImageDraw

from grid_monitor.overlay.layout import PatternDrawing
from grid_monitor.styles import (
    BLOCK_COLORS,
    BLOCK_OUTLINE_COLOR,
    ORIGIN_MARKER_COLOR,
    TRANSPARENT,
)
from grid_monitor.types import BlockType
from grid_monitor.utils.image import RGBA, clear_image, to_rgba
from grid_monitor.world import Block, StaticWorld


BlockDrawFn = Callable[
    [Image.Image, StaticWorld, Sequence[Block], int, Tuple[int, int]], None
]


@lru_cache(maxsize=2048)
def hashed_color(block_type: BlockType) -> Tuple[int, int, int]:
    """
    Deterministically map a block type the server never announced to an RGB color.
    """
    rng = random.Random(block_type)
    h = rng.random()
    s = 0.6 + 0.3 * rng.random()
    v = 0.7 + 0.25 * rng.random()
    r, g, b = colorsys.hsv_to_rgb(h, s, v)
    return int(r * 255), int(g * 255), int(b * 255)


def block_color(static: StaticWorld, block_type: BlockType) -> RGBA:
    """Palette color by position in ``static.block_types``, else a hashed color."""
    if block_type in static.block_types:
        idx = static.block_types.index(block_type)
        return to_rgba(BLOCK_COLORS[idx % len(BLOCK_COLORS)])
    r, g, b = hashed_color(block_type)
    return (r, g, b, 255)


def render_blocks(
    image: Image.Image,
    static: StaticWorld,
    blocks: Sequence[Block],
    cell_size: int,
    offset: Tuple[int, int] = (0, 0),
) -> None:
    """
    Paint each block as a filled cell at ``offset + (x, y) * cell_size``.
    Blocks outside the image are clipped.
    """
    draw = ImageDraw.Draw(image)
    ox, oy = offset
    outline: Optional[RGBA] = to_rgba(BLOCK_OUTLINE_COLOR) if cell_size > 2 else None
    for block in blocks:
        x0 = ox + block.x * cell_size
        y0 = oy + block.y * cell_size
        draw.rectangle(
            (x0, y0, x0 + cell_size - 1, y0 + cell_size - 1),
            fill=block_color(static, block.type),
            outline=outline,
        )


class PatternCanvas:
    """Raster surface of one task detail panel.

    The surface is reused across redraws and wiped at the start of every
    :meth:`draw`, so nothing of a previously shown pattern survives.
    """

    image: Image.Image
    draw_blocks: BlockDrawFn

    def __init__(self, draw_blocks: BlockDrawFn = render_blocks):
        self.image = Image.new("RGBA", (1, 1), TRANSPARENT)
        self.draw_blocks = draw_blocks

    def draw(self, drawing: PatternDrawing, static: StaticWorld) -> Image.Image:
        layout = drawing.layout
        size = (layout.surface_width, layout.surface_height)
        if self.image.size != size:
            self.image = Image.new("RGBA", size, TRANSPARENT)
        if layout.cell_size <= 0 or 0 in size:
            return self.image
        clear_image(self.image)

        ox, oy = (int(v) for v in layout.origin_offset)
        mx, my, mw, mh = (int(round(v)) for v in layout.origin_marker)
        ImageDraw.Draw(self.image).rectangle(
            (ox + mx, oy + my, ox + mx + max(mw, 1) - 1, oy + my + max(mh, 1) - 1),
            fill=to_rgba(ORIGIN_MARKER_COLOR),
        )
        self.draw_blocks(
            self.image, static, drawing.requirements, layout.cell_size, (ox, oy)
        )
        return self.image
