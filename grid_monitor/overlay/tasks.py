"""Task catalog projection.

Tasks are listed in the order the server announced them; the list is never
re-sorted (deadline order is not guaranteed). The selected task is resolved by
name, and only a resolved task gets a detail panel with its block pattern.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from grid_monitor.config import OverlayConfig
from grid_monitor.overlay.layout import pattern_drawing
from grid_monitor.utils.text import simple_plural
from grid_monitor.view import VNode, h
from grid_monitor.world import Task

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TaskOption:
    value: str
    label: str


@dataclass(frozen=True)
class TaskCatalog:
    """Selectable task summary.

    Attributes:
        summary_label: ``"N task(s)"``; also the label of the empty choice.
        options: One option per task, in source order.
        selected: First task whose name matches the selection, if any.
    """

    summary_label: str
    options: Tuple[TaskOption, ...]
    selected: Optional[Task]


def task_label(task: Task) -> str:
    return f"{task.reward}$ for {task.name} until step {task.deadline}"


def find_task(tasks: Sequence[Task], task_name: str) -> Optional[Task]:
    """First task named ``task_name``; ``None`` for ``""`` or no match."""
    if not task_name:
        return None
    matches = [t for t in tasks if t.name == task_name]
    if len(matches) > 1:
        logger.debug(
            "Duplicate task name %r (%d tasks), using the first",
            task_name,
            len(matches),
        )
    return matches[0] if matches else None


def task_catalog(tasks: Sequence[Task], task_name: str) -> TaskCatalog:
    return TaskCatalog(
        summary_label=simple_plural(len(tasks), "task"),
        options=tuple(TaskOption(value=t.name, label=task_label(t)) for t in tasks),
        selected=find_task(tasks, task_name),
    )


def task_details(task: Task, config: OverlayConfig) -> Tuple[VNode, ...]:
    """Pattern canvas followed by the block count."""
    drawing = pattern_drawing(
        task.requirements,
        surface_width=config.surface_width,
        max_cell_size=config.max_cell_size,
        clamp=config.clamp_cell_size,
    )
    return (
        h(
            "canvas",
            {
                "props": {
                    "width": drawing.layout.surface_width,
                    "height": drawing.layout.surface_height,
                },
                "drawing": drawing,
            },
        ),
        h("p", simple_plural(len(task.requirements), "block")),
    )


def task_views(catalog: TaskCatalog, config: OverlayConfig) -> Tuple[VNode, ...]:
    """Task ``select`` plus the selected task's details.

    The select's first option has value ``""`` and clears the selection. The
    front end reports changes through :func:`grid_monitor.selection.select_task`.
    """
    selected_value = catalog.selected.name if catalog.selected is not None else ""
    select = h(
        "select",
        {"props": {"value": selected_value}},
        [h("option", {"props": {"value": ""}}, catalog.summary_label)]
        + [
            h("option", {"props": {"value": o.value}}, o.label)
            for o in catalog.options
        ],
    )
    details = task_details(catalog.selected, config) if catalog.selected else ()
    return (select, *details)
