"""Overlay composer.

:func:`render` is the only public entry point of the overlay. It is a pure
function of the controller value: the connection state and the presence of
both snapshots pick one of three views, and the connected view is assembled
from the team, task and cell projections. Calling it again with equal inputs
returns an equal tree, so it can be re-run on every redraw request.
"""

from dataclasses import dataclass
from typing import Optional

from grid_monitor.config import DEFAULT_CONFIG, OverlayConfig
from grid_monitor.overlay.inspector import hover_views
from grid_monitor.overlay.tasks import task_catalog, task_views
from grid_monitor.overlay.teams import team_summaries, team_views
from grid_monitor.selection import Selection
from grid_monitor.types import ConnectionState, OverlayState
from grid_monitor.view import VNode, h
from grid_monitor.world import DynamicWorld, StaticWorld


DISCONNECTED_MESSAGE = "Live server not connected."
RETRY_LABEL = "Retry now."
LOADING_LABEL = "Loading ..."


@dataclass(frozen=True)
class Controller:
    """Everything the overlay reads for one render.

    Attributes:
        selection: Spectator selection and connection state.
        static: Session metadata, once connected.
        dynamic: Latest step snapshot, once connected.
    """

    selection: Selection = Selection()
    static: Optional[StaticWorld] = None
    dynamic: Optional[DynamicWorld] = None


def overlay_state(controller: Controller) -> OverlayState:
    """Three-way dispatch; the connection state wins over snapshot presence."""
    state = controller.selection.state
    if state == ConnectionState.ERROR:
        return OverlayState.ERROR
    if (
        state == ConnectionState.CONNECTING
        or controller.static is None
        or controller.dynamic is None
    ):
        return OverlayState.LOADING
    return OverlayState.CONNECTED


def disconnected(selection: Selection) -> VNode:
    """Error view with a manual retry link back to the current location."""
    return h(
        "div.box",
        [
            h("p", DISCONNECTED_MESSAGE),
            h("a", {"props": {"href": selection.location}}, RETRY_LABEL),
        ],
    )


def loading() -> VNode:
    return h("div.box", [h("div.loader", LOADING_LABEL)])


def connected(
    selection: Selection,
    static: StaticWorld,
    dynamic: DynamicWorld,
    config: OverlayConfig = DEFAULT_CONFIG,
) -> VNode:
    catalog = task_catalog(dynamic.tasks, selection.task_name)
    hover = (
        hover_views(dynamic, selection.hover) if selection.hover is not None else ()
    )
    return h(
        "div#overlay",
        [
            h("div.box", f"Step: {dynamic.step} / {static.steps - 1}"),
            h("div.box", team_views(team_summaries(static, dynamic), config.team_palette)),
            h("div.box", task_views(catalog, config)),
            h("div.box", hover),
        ],
    )


def render(controller: Controller, config: OverlayConfig = DEFAULT_CONFIG) -> VNode:
    state = overlay_state(controller)
    if state == OverlayState.ERROR:
        return disconnected(controller.selection)
    if state == OverlayState.LOADING:
        return loading()
    assert controller.static is not None and controller.dynamic is not None
    return connected(controller.selection, controller.static, controller.dynamic, config)
