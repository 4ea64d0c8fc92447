# tests/unit/test_layout.py

from typing import List, Tuple

import pytest

from grid_monitor.overlay.layout import pattern_drawing, pattern_layout
from grid_monitor.world import Block


def blocks(offsets: List[Tuple[int, int]]) -> List[Block]:
    return [Block(x, y, "b0") for x, y in offsets]


@pytest.mark.parametrize(
    "offsets, expected_width, expected_height",
    [
        ([(0, 0)], 1, 1),
        ([(2, -1)], 5, 3),
        ([(0, 1)], 1, 3),
        ([(-3, 0), (1, 2)], 7, 5),
        ([(0, 1), (0, 2), (0, 3)], 1, 7),
    ],
)
def test_symmetric_bounding_box(
    offsets: List[Tuple[int, int]], expected_width: int, expected_height: int
) -> None:
    layout = pattern_layout(blocks(offsets))
    assert (layout.width, layout.height) == (expected_width, expected_height)


@pytest.mark.parametrize(
    "offsets, expected_cell",
    [
        ([(0, 1)], 50),  # 318 // 1 capped at 50
        ([(2, 0)], 50),  # 318 // 5 == 63 capped at 50
        ([(3, 0)], 45),  # 318 // 7
        ([(10, 0)], 15),  # 318 // 21
    ],
)
def test_cell_size(offsets: List[Tuple[int, int]], expected_cell: int) -> None:
    layout = pattern_layout(blocks(offsets))
    assert layout.cell_size == expected_cell
    assert layout.cell_size <= 50
    assert layout.cell_size <= layout.surface_width // layout.width
    assert layout.surface_width == 318
    assert layout.surface_height == layout.cell_size * layout.height


def test_custom_surface_and_cap() -> None:
    layout = pattern_layout(blocks([(1, 1)]), surface_width=100, max_cell_size=10)
    assert layout.cell_size == 10
    assert layout.surface_height == 30


def test_zero_requirements_is_origin_only() -> None:
    layout = pattern_layout([])
    assert (layout.width, layout.height) == (1, 1)
    assert layout.cell_size == 50
    assert layout.surface_height == 50


def test_zero_requirements_small_surface() -> None:
    layout = pattern_layout([], surface_width=30)
    assert layout.cell_size == 30


def test_pattern_wider_than_surface_is_clamped() -> None:
    layout = pattern_layout(blocks([(200, 0)]), surface_width=318)
    assert layout.width == 401
    assert layout.cell_size == 1
    assert layout.surface_height == 1


def test_pattern_wider_than_surface_without_clamp() -> None:
    layout = pattern_layout(blocks([(200, 0)]), surface_width=318, clamp=False)
    assert layout.cell_size == 0
    assert layout.surface_height == 0


def test_origin_offset_centers_origin_cell() -> None:
    layout = pattern_layout(blocks([(0, 1)]))
    # 318 wide, 50 px cells, 3 rows
    assert layout.origin_offset == (134.0, 50.0)
    assert layout.origin_marker == pytest.approx((20.0, 20.0, 10.0, 10.0))


def test_pattern_drawing_carries_requirements() -> None:
    reqs = blocks([(1, 0), (1, 1)])
    drawing = pattern_drawing(reqs)
    assert list(drawing.requirements) == reqs
    assert drawing.layout == pattern_layout(reqs)
