# tests/unit/test_tasks.py

import logging

import pytest

from grid_monitor.config import OverlayConfig
from grid_monitor.overlay.layout import PatternDrawing
from grid_monitor.overlay.tasks import (
    TaskOption,
    find_task,
    task_catalog,
    task_label,
    task_views,
)
from tests.test_utils import make_task


def test_selected_task_by_name() -> None:
    tasks = [make_task("A"), make_task("B")]
    catalog = task_catalog(tasks, "B")
    assert catalog.selected is not None
    assert catalog.selected.name == "B"


@pytest.mark.parametrize("task_name", ["", "missing"])
def test_no_selection(task_name: str) -> None:
    tasks = [make_task("A"), make_task("B")]
    assert task_catalog(tasks, task_name).selected is None


def test_summary_label_pluralized() -> None:
    assert task_catalog([], "").summary_label == "0 tasks"
    assert task_catalog([make_task("A")], "").summary_label == "1 task"
    assert task_catalog([make_task("A"), make_task("B")], "").summary_label == "2 tasks"


def test_options_keep_source_order() -> None:
    tasks = [
        make_task("late", reward=10, deadline=300),
        make_task("early", reward=90, deadline=20),
    ]
    catalog = task_catalog(tasks, "")
    assert catalog.options == (
        TaskOption("late", "10$ for late until step 300"),
        TaskOption("early", "90$ for early until step 20"),
    )


def test_task_label() -> None:
    assert task_label(make_task("t7", reward=40, deadline=180)) == (
        "40$ for t7 until step 180"
    )


def test_duplicate_names_first_match_wins(caplog: pytest.LogCaptureFixture) -> None:
    first = make_task("dup", reward=1)
    second = make_task("dup", reward=2)
    with caplog.at_level(logging.DEBUG, logger="grid_monitor.overlay.tasks"):
        found = find_task([first, second], "dup")
    assert found is first
    assert "Duplicate task name" in caplog.text


def test_task_views_without_selection() -> None:
    catalog = task_catalog([make_task("A"), make_task("B")], "")
    views = task_views(catalog, OverlayConfig())
    assert len(views) == 1
    select = views[0]
    assert select.tag == "select"
    assert select.props["value"] == ""
    options = [c for c in select.children if not isinstance(c, str)]
    assert [o.props["value"] for o in options] == ["", "A", "B"]
    assert options[0].text == "2 tasks"


def test_task_views_with_selection() -> None:
    task = make_task("B", requirements=[(0, 1), (0, 2), (1, 2)])
    catalog = task_catalog([make_task("A"), task], "B")
    select, canvas, count = task_views(catalog, OverlayConfig())
    assert select.props["value"] == "B"
    assert canvas.tag == "canvas"
    drawing = canvas.data["drawing"]
    assert isinstance(drawing, PatternDrawing)
    assert list(drawing.requirements) == list(task.requirements)
    assert canvas.props["width"] == drawing.layout.surface_width == 318
    assert canvas.props["height"] == drawing.layout.surface_height
    assert count.text == "3 blocks"


def test_task_views_respect_config() -> None:
    catalog = task_catalog([make_task("A", requirements=[(1, 0)])], "A")
    _, canvas, _ = task_views(catalog, OverlayConfig(surface_width=90, max_cell_size=20))
    layout = canvas.data["drawing"].layout
    assert layout.surface_width == 90
    assert layout.cell_size == 20
