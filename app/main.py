import logging
import os
from dataclasses import replace
from urllib.parse import urlencode

import streamlit as st

from config import MonitorConfig, set_default_config, get_config_from_widgets
from replay import load_controller
from widgets import render_vnode
from grid_monitor.overlay import render
from grid_monitor.selection import Selection, clear_hover, hover_cell, select_task
from grid_monitor.world import Pos

logging.basicConfig(level=logging.INFO)

script_dir: str = os.path.dirname(os.path.realpath(__file__))

st.set_page_config(layout="wide", page_title="Grid Monitor")

with open(os.path.join(script_dir, "styles.css")) as f:
    st.markdown(f"<style>{f.read()}</style>", unsafe_allow_html=True)


# --------- Main App ---------

set_default_config()
if "selection" not in st.session_state:
    st.session_state["selection"] = Selection()

tab_overlay, tab_config = st.tabs(["Overlay", "Config"])

with tab_config:
    config: MonitorConfig = get_config_from_widgets()
    st.session_state["config"] = config
    if st.button("🔁 Reload", key="reload_btn", use_container_width=True):
        st.rerun()

with tab_overlay:
    selection: Selection = st.session_state["selection"]
    query = st.query_params.to_dict()
    location = "?" + urlencode(query) if query else ""

    left_col, right_col = st.columns([0.35, 0.65])

    with right_col:
        st.subheader("Inspect cell")
        inspect = st.checkbox("Inspect", value=selection.hover is not None, key="inspect")
        x_col, y_col = st.columns([1, 1])
        with x_col:
            x: int = st.number_input("x", value=0, step=1, key="hover_x")
        with y_col:
            y: int = st.number_input("y", value=0, step=1, key="hover_y")
        selection = hover_cell(selection, Pos(x, y)) if inspect else clear_hover(selection)

    controller = load_controller(
        config.replay_dir, config.step, replace(selection, location=location)
    )
    view = render(controller, config.overlay_config())

    with left_col:
        new_selection = render_vnode(view, controller.selection, controller.static)

    if new_selection.task_name != selection.task_name:
        selection = select_task(selection, new_selection.task_name)
        st.session_state["selection"] = selection
        st.rerun()
    st.session_state["selection"] = selection
