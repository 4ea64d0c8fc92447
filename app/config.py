from __future__ import annotations

from dataclasses import dataclass
from typing import List

import streamlit as st

from grid_monitor.config import DEFAULT_MAX_CELL_SIZE, DEFAULT_SURFACE_WIDTH, OverlayConfig
from replay import available_steps

DEFAULT_REPLAY_DIR = "replay"


@dataclass(frozen=True)
class MonitorConfig:
    """Spectator app settings.

    Attributes:
        replay_dir: Directory holding ``static.json`` and one ``<step>.json``
            per simulation step.
        step: Step currently shown.
        surface_width: Width of the task pattern panel in pixels.
        max_cell_size: Largest pattern cell in pixels.
    """

    replay_dir: str
    step: int
    surface_width: int = DEFAULT_SURFACE_WIDTH
    max_cell_size: int = DEFAULT_MAX_CELL_SIZE

    def overlay_config(self) -> OverlayConfig:
        return OverlayConfig(
            surface_width=self.surface_width, max_cell_size=self.max_cell_size
        )


def set_default_config() -> None:
    if "config" not in st.session_state:
        st.session_state["config"] = MonitorConfig(
            replay_dir=DEFAULT_REPLAY_DIR, step=0
        )


def get_config_from_widgets() -> MonitorConfig:
    current: MonitorConfig = st.session_state["config"]

    st.subheader("Source")
    replay_dir: str = st.text_input(
        "Replay directory", value=current.replay_dir, key="replay_dir"
    )

    st.subheader("Step")
    steps: List[int] = available_steps(replay_dir)
    step = current.step
    if len(steps) > 1:
        step = st.select_slider(
            "Step",
            options=steps,
            value=step if step in steps else steps[-1],
            key="step",
        )
    elif steps:
        step = steps[0]
        st.markdown(f"Step {step}")
    else:
        st.markdown("No steps recorded yet")

    st.subheader("Task pattern")
    surface_width: int = st.slider(
        "Panel width", 100, 800, current.surface_width, key="surface_width"
    )
    max_cell_size: int = st.slider(
        "Max cell size", 5, 100, current.max_cell_size, key="max_cell_size"
    )

    return MonitorConfig(
        replay_dir=replay_dir,
        step=step,
        surface_width=surface_width,
        max_cell_size=max_cell_size,
    )
