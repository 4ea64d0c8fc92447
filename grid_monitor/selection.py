"""Spectator selection state and the events that change it.

UI input never mutates shared state in place. Each event handler is a pure
reducer that takes the previous :class:`Selection` and returns a new one; the
controller stores the result and asks for a redraw. The overlay then renders
from the new value.
"""

from dataclasses import dataclass, replace
from typing import Optional

from grid_monitor.types import ConnectionState
from grid_monitor.world import Pos


@dataclass(frozen=True)
class Selection:
    """Transient UI state owned by the controller.

    Attributes:
        state: Connection state reported by the session layer.
        task_name: Name of the selected task; ``""`` means no selection.
        hover: Hovered grid cell, if any.
        location: Current address (path and query) used by the retry link.
    """

    state: ConnectionState = ConnectionState.CONNECTING
    task_name: str = ""
    hover: Optional[Pos] = None
    location: str = ""


def select_task(selection: Selection, task_name: str) -> Selection:
    """Return a selection with ``task_name`` selected (``""`` clears it)."""
    return replace(selection, task_name=task_name)


def hover_cell(selection: Selection, pos: Pos) -> Selection:
    return replace(selection, hover=pos)


def clear_hover(selection: Selection) -> Selection:
    return replace(selection, hover=None)


def set_connection_state(selection: Selection, state: ConnectionState) -> Selection:
    return replace(selection, state=state)
