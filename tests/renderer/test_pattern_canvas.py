# tests/renderer/test_pattern_canvas.py

from typing import List, Sequence, Tuple

from PIL import Image

from grid_monitor.overlay.layout import pattern_drawing
from grid_monitor.renderer import PatternCanvas, block_color, render_blocks
from grid_monitor.utils.image import is_blank, opaque_mask, pixel, to_rgba
from grid_monitor.world import Block, StaticWorld
from tests.test_utils import make_static

RED = (255, 0, 0, 255)
BLUE_ISH = to_rgba("#7fdbff")  # palette color of "b0"


def test_block_color_palette_and_fallback() -> None:
    static = make_static(block_types=["b0", "b1"])
    assert block_color(static, "b0") == BLUE_ISH
    unknown = block_color(static, "zz")
    assert unknown == block_color(static, "zz")
    assert unknown[3] == 255


def test_draw_marks_origin_and_blocks() -> None:
    static = make_static(block_types=["b0"])
    drawing = pattern_drawing([Block(0, 1, "b0")])
    image = PatternCanvas().draw(drawing, static)

    assert image.size == (318, 150)
    # origin cell spans x 134..183, y 50..99; marker is its central 10x10 square
    assert pixel(image, 158, 74) == RED
    assert pixel(image, 140, 55) == (0, 0, 0, 0)
    # block (0, 1) sits one cell below the origin
    assert pixel(image, 158, 124) == BLUE_ISH
    assert pixel(image, 134, 100) == to_rgba("black")
    # nothing outside the middle column
    assert not opaque_mask(image)[:, :134].any()
    assert not opaque_mask(image)[:, 184:].any()


def test_redraw_clears_previous_pattern() -> None:
    static = make_static(block_types=["b0"])
    canvas = PatternCanvas()
    canvas.draw(pattern_drawing([Block(-1, 0, "b0"), Block(1, 0, "b0")]), static)
    first_size = canvas.image.size

    image = canvas.draw(pattern_drawing([Block(1, 0, "b0")]), static)
    assert image.size == first_size
    # left block of the previous pattern is gone
    assert pixel(image, 84 + 25, 25) == (0, 0, 0, 0)
    assert pixel(image, 184 + 25, 25) == BLUE_ISH


def test_redraw_with_new_size_starts_blank() -> None:
    static = make_static()
    canvas = PatternCanvas()
    canvas.draw(pattern_drawing([Block(0, 3, "b1")]), static)
    image = canvas.draw(pattern_drawing([]), static)
    assert image.size == (318, 50)
    mask = opaque_mask(image)
    # only the origin marker is painted
    assert mask.sum() == 10 * 10


def test_draw_delegates_blocks() -> None:
    calls: List[Tuple[Sequence[Block], int, Tuple[int, int]]] = []

    def fake_draw(
        image: Image.Image,
        static: StaticWorld,
        blocks: Sequence[Block],
        cell_size: int,
        offset: Tuple[int, int],
    ) -> None:
        calls.append((list(blocks), cell_size, offset))

    reqs = [Block(2, 0, "b0")]
    PatternCanvas(draw_blocks=fake_draw).draw(pattern_drawing(reqs), make_static())
    assert calls == [(reqs, 50, (134, 0))]


def test_zero_size_surface_stays_blank() -> None:
    drawing = pattern_drawing([Block(400, 0, "b0")], clamp=False)
    image = PatternCanvas().draw(drawing, make_static())
    assert image.size == (318, 0)


def test_render_blocks_clips_outside_image() -> None:
    image = Image.new("RGBA", (20, 20), (0, 0, 0, 0))
    render_blocks(image, make_static(), [Block(5, 5, "b0")], 10)
    assert is_blank(image)
