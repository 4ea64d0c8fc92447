"""Replay directory session.

Plays the role of the live connection for the spectator app: it reads the
static document and the requested step's dynamic document from disk and hands
back a :class:`grid_monitor.overlay.Controller`. A missing directory or an
undecodable document puts the session into the error state; a step that has
not been written yet keeps it loading.
"""

from __future__ import annotations

import json
import logging
import os
from typing import Any, List

from grid_monitor.overlay import Controller
from grid_monitor.selection import Selection, set_connection_state
from grid_monitor.snapshot import SnapshotError, parse_dynamic, parse_static
from grid_monitor.types import ConnectionState

logger = logging.getLogger(__name__)

STATIC_FILE = "static.json"


def available_steps(replay_dir: str) -> List[int]:
    if not os.path.isdir(replay_dir):
        return []
    steps: List[int] = []
    for entry in os.listdir(replay_dir):
        stem, ext = os.path.splitext(entry)
        if ext == ".json" and stem.isdigit():
            steps.append(int(stem))
    return sorted(steps)


def read_json(path: str) -> Any:
    with open(path, encoding="utf-8") as f:
        return json.load(f)


def load_controller(replay_dir: str, step: int, selection: Selection) -> Controller:
    static_path = os.path.join(replay_dir, STATIC_FILE)
    if not os.path.isfile(static_path):
        logger.warning("No static snapshot at %s", static_path)
        return Controller(set_connection_state(selection, ConnectionState.ERROR))

    step_path = os.path.join(replay_dir, f"{step}.json")
    if not os.path.isfile(step_path):
        return Controller(set_connection_state(selection, ConnectionState.CONNECTING))

    try:
        static = parse_static(read_json(static_path))
        dynamic = parse_dynamic(read_json(step_path))
    except (OSError, json.JSONDecodeError, SnapshotError) as e:
        logger.warning("Failed to load step %d from %s: %s", step, replay_dir, e)
        return Controller(set_connection_state(selection, ConnectionState.ERROR))

    logger.info("Loaded step %d from %s", dynamic.step, replay_dir)
    return Controller(
        set_connection_state(selection, ConnectionState.CONNECTED), static, dynamic
    )
