"""Streamlit front end for the overlay view tree."""

from __future__ import annotations

from typing import List, Optional

import streamlit as st

from grid_monitor.overlay.layout import PatternDrawing
from grid_monitor.renderer import PatternCanvas
from grid_monitor.selection import Selection, select_task
from grid_monitor.view import VNode
from grid_monitor.world import StaticWorld


def pattern_canvas() -> PatternCanvas:
    if "pattern_canvas" not in st.session_state:
        st.session_state["pattern_canvas"] = PatternCanvas()
    return st.session_state["pattern_canvas"]


def render_vnode(
    node: VNode, selection: Selection, static: Optional[StaticWorld]
) -> Selection:
    """Draw ``node`` with Streamlit widgets.

    Returns the selection after applying what the user changed in the widgets
    (only the task select produces events).
    """
    if node.sel == "div.box":
        with st.container(border=True):
            return _render_children(node, selection, static)
    if node.sel == "div.team":
        background = node.style.get("background", "transparent")
        st.markdown(
            f'<div class="team" style="background: {background}">{node.text}</div>',
            unsafe_allow_html=True,
        )
        return selection
    if node.sel == "div.loader":
        st.info(node.text, icon="⏳")
        return selection
    if node.tag == "p":
        st.write(node.text)
        return selection
    if node.tag == "a":
        st.markdown(f"[{node.text}]({node.props.get('href', '')})")
        return selection
    if node.tag == "select":
        return _render_select(node, selection)
    if node.tag == "canvas":
        drawing: Optional[PatternDrawing] = node.data.get("drawing")
        if drawing is not None and static is not None:
            st.image(pattern_canvas().draw(drawing, static).copy())
        return selection
    return _render_children(node, selection, static)


def _render_children(
    node: VNode, selection: Selection, static: Optional[StaticWorld]
) -> Selection:
    for child in node.children:
        if isinstance(child, str):
            st.write(child)
        else:
            selection = render_vnode(child, selection, static)
    return selection


def _render_select(node: VNode, selection: Selection) -> Selection:
    options: List[VNode] = [c for c in node.children if isinstance(c, VNode)]
    values = [o.props.get("value", "") for o in options]
    labels = {o.props.get("value", ""): o.text for o in options}
    current = node.props.get("value", "")
    chosen: str = st.selectbox(
        "Task",
        values,
        index=values.index(current) if current in values else 0,
        format_func=lambda v: labels[v],
        label_visibility="collapsed",
        key="task_select",
    )
    if chosen != selection.task_name:
        return select_task(selection, chosen)
    return selection
