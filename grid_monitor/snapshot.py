"""Decoding of server snapshot documents.

The simulation server publishes a static document once per session and a
dynamic document once per step, both as JSON objects. The functions here turn
the decoded JSON (plain ``dict`` / ``list`` values) into the immutable
:mod:`grid_monitor.world` types.

Static document::

    {"teams": {"A": {...}, "B": {...}}, "steps": 500,
     "blockTypes": ["b0", "b1"], "grid": {"width": 40, "height": 40}}

Dynamic document::

    {"step": 12, "scores": {"A": 40, "B": 0},
     "tasks": [{"name": "task3", "reward": 40, "deadline": 180,
                "requirements": [{"x": 0, "y": 1, "type": "b0"}]}],
     "cells": [[0, 0, 2], [1, 0]],
     "dispensers": [{"id": "d1", "x": 3, "y": 4, "type": "b1"}],
     "blocks": [{"x": 5, "y": 5, "type": "b0"}],
     "entities": [{"id": "e1", "x": 2, "y": 2, "name": "agentA1", "team": "A"}]}

Missing collections decode as empty ones; ``cells`` rows and cells may be
``null``. Anything structurally wrong raises :class:`SnapshotError`.
"""

import logging
from typing import Any, Callable, List, Mapping, Optional, Sequence, TypeVar

from pyrsistent import pmap, pvector

from grid_monitor.world import (
    Block,
    Dispenser,
    DynamicWorld,
    Entity,
    StaticWorld,
    Task,
    TeamInfo,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


class SnapshotError(ValueError):
    """Raised when a snapshot document cannot be decoded."""


def parse_static(doc: Mapping[str, Any]) -> StaticWorld:
    """Decode the per-session static document.

    Raises:
        SnapshotError: If ``teams`` or ``steps`` is missing or invalid.
    """
    _require_mapping(doc, "static snapshot")
    teams = doc.get("teams")
    if isinstance(teams, Mapping):
        names: List[str] = [str(name) for name in teams.keys()]
    elif isinstance(teams, list):
        names = [str(name) for name in teams]
    else:
        raise SnapshotError(f"static snapshot: invalid teams: {teams!r}")

    steps = _int(doc.get("steps"), "static snapshot: steps")
    if steps < 1:
        raise SnapshotError(f"static snapshot: steps must be >= 1, got {steps}")

    grid = doc.get("grid")
    grid_size = None
    if isinstance(grid, Mapping):
        grid_size = (
            _int(grid.get("width"), "grid.width"),
            _int(grid.get("height"), "grid.height"),
        )

    static = StaticWorld(
        teams=pmap({name: TeamInfo(name=name) for name in names}),
        steps=steps,
        block_types=pvector(str(t) for t in doc.get("blockTypes") or []),
        grid=grid_size,
    )
    logger.debug("Decoded static snapshot: %d teams, %d steps", len(names), steps)
    return static


def parse_dynamic(doc: Mapping[str, Any]) -> DynamicWorld:
    """Decode one per-step dynamic document.

    Raises:
        SnapshotError: If a field has the wrong shape.
    """
    _require_mapping(doc, "dynamic snapshot")
    scores = doc.get("scores") or {}
    _require_mapping(scores, "scores")

    world = DynamicWorld(
        step=_int(doc.get("step"), "dynamic snapshot: step"),
        scores=pmap({str(k): _number(v, f"scores.{k}") for k, v in scores.items()}),
        tasks=_collection(doc, "tasks", _parse_task),
        cells=pvector(_parse_row(row) for row in _list(doc.get("cells"), "cells")),
        dispensers=_collection(doc, "dispensers", _parse_dispenser),
        blocks=_collection(doc, "blocks", _parse_block),
        entities=_collection(doc, "entities", _parse_entity),
    )
    logger.debug(
        "Decoded step %d: %d tasks, %d entities",
        world.step,
        len(world.tasks),
        len(world.entities),
    )
    return world


def _parse_task(obj: Mapping[str, Any]) -> Task:
    return Task(
        name=str(_field(obj, "name", "task")),
        reward=_number(_field(obj, "reward", "task"), "task.reward"),
        deadline=_int(_field(obj, "deadline", "task"), "task.deadline"),
        requirements=pvector(
            _parse_block(_require_mapping(r, "requirement"))
            for r in _list(obj.get("requirements"), "task.requirements")
        ),
    )


def _parse_block(obj: Mapping[str, Any]) -> Block:
    return Block(
        x=_int(_field(obj, "x", "block"), "block.x"),
        y=_int(_field(obj, "y", "block"), "block.y"),
        type=str(_field(obj, "type", "block")),
    )


def _parse_dispenser(obj: Mapping[str, Any]) -> Dispenser:
    return Dispenser(
        x=_int(_field(obj, "x", "dispenser"), "dispenser.x"),
        y=_int(_field(obj, "y", "dispenser"), "dispenser.y"),
        type=str(_field(obj, "type", "dispenser")),
        id=_optional_str(obj.get("id")),
    )


def _parse_entity(obj: Mapping[str, Any]) -> Entity:
    return Entity(
        x=_int(_field(obj, "x", "entity"), "entity.x"),
        y=_int(_field(obj, "y", "entity"), "entity.y"),
        name=str(_field(obj, "name", "entity")),
        team=str(_field(obj, "team", "entity")),
        id=_optional_str(obj.get("id")),
    )


def _parse_row(row: Any):
    if row is None:
        return None
    return pvector(
        None if cell is None else _int(cell, "cells[][]")
        for cell in _list(row, "cells[]")
    )


def _collection(
    doc: Mapping[str, Any], key: str, parse: Callable[[Mapping[str, Any]], T]
):
    return pvector(
        parse(_require_mapping(item, key)) for item in _list(doc.get(key), key)
    )


def _field(obj: Mapping[str, Any], key: str, what: str) -> Any:
    if key not in obj:
        raise SnapshotError(f"{what}: missing field {key!r}")
    return obj[key]


def _require_mapping(value: Any, what: str) -> Any:
    if not isinstance(value, Mapping):
        raise SnapshotError(f"{what}: expected an object, got {type(value).__name__}")
    return value


def _list(value: Any, what: str) -> Sequence[Any]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise SnapshotError(f"{what}: expected a list, got {type(value).__name__}")
    return value


def _int(value: Any, what: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise SnapshotError(f"{what}: expected an integer, got {value!r}")
    return value


def _number(value: Any, what: str):
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise SnapshotError(f"{what}: expected a number, got {value!r}")
    return value


def _optional_str(value: Any) -> Optional[str]:
    return None if value is None else str(value)
