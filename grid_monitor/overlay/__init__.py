"""World-to-view projection.

Modules, leaf first:

* :mod:`~grid_monitor.overlay.teams` – sorted team scoreboard.
* :mod:`~grid_monitor.overlay.tasks` – task select and selected-task details.
* :mod:`~grid_monitor.overlay.layout` – task pattern bounding box and cell size.
* :mod:`~grid_monitor.overlay.inspector` – facts about one grid cell.
* :mod:`~grid_monitor.overlay.composer` – picks and assembles the view.
"""

from .composer import Controller, overlay_state, render
from .inspector import inspect_cell
from .layout import PatternDrawing, PatternLayout, pattern_layout
from .tasks import TaskCatalog, task_catalog
from .teams import TeamSummary, team_summaries

__all__ = [
    "Controller",
    "PatternDrawing",
    "PatternLayout",
    "TaskCatalog",
    "TeamSummary",
    "inspect_cell",
    "overlay_state",
    "pattern_layout",
    "render",
    "task_catalog",
    "team_summaries",
]
