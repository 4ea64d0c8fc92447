"""Immutable world snapshots consumed by the overlay.

The monitor receives two kinds of documents from the simulation server:

* :class:`StaticWorld` is created once when the session connects. It holds the
    team registry and the total number of steps and never changes afterwards.
* :class:`DynamicWorld` is one per-step snapshot. The controller replaces it
    wholesale on every simulation step; no history is kept.

Both are frozen dataclasses whose collections are persistent
(``pyrsistent.PMap`` / ``PVector``) so snapshots behave as values: two
snapshots decoded from the same document compare equal, and nothing in the
overlay can mutate them. Use :mod:`grid_monitor.snapshot` to build them from
JSON documents.

Coordinates of dispensers, blocks and entities share the frame of ``cells``
(``cells[y][x]``). ``cells`` is sparse: rows may be missing (``None``), shorter
than others, or contain ``None`` holes.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from pyrsistent import PMap, PVector, pmap, pvector

from grid_monitor.types import BlockType, Score, TeamName


@dataclass(frozen=True)
class Pos:
    """Absolute grid coordinate.

    Attributes:
        x: Column index (0 at left).
        y: Row index (0 at top).
    """

    x: int
    y: int


@dataclass(frozen=True)
class Block:
    """A block, or one cell of a task's required pattern.

    In ``Task.requirements`` ``x`` / ``y`` are signed offsets from the task
    origin (the position of the agent performing the task). In
    ``DynamicWorld.blocks`` they are absolute grid coordinates.
    """

    x: int
    y: int
    type: BlockType


@dataclass(frozen=True)
class Dispenser:
    x: int
    y: int
    type: BlockType
    id: Optional[str] = None


@dataclass(frozen=True)
class Entity:
    """An agent on the grid."""

    x: int
    y: int
    name: str
    team: TeamName
    id: Optional[str] = None


@dataclass(frozen=True)
class Task:
    """Reward-bearing goal: assemble ``requirements`` before ``deadline``.

    Attributes:
        name: Unique task identifier.
        reward: Score awarded on completion.
        deadline: Last step at which the task can be completed.
        requirements: Ordered block pattern relative to the task origin.
    """

    name: str
    reward: Score
    deadline: int
    requirements: PVector[Block] = pvector()


@dataclass(frozen=True)
class TeamInfo:
    name: TeamName


@dataclass(frozen=True)
class StaticWorld:
    """Per-session simulation metadata.

    Attributes:
        teams (PMap[TeamName, TeamInfo]): Team registry keyed by unique name.
        steps (int): Total number of simulation steps (>= 1).
        block_types (PVector[BlockType]): Known block types, in server order.
            Used to pick stable block colors.
        grid (Tuple[int, int] | None): Grid ``(width, height)`` when announced.
    """

    teams: PMap[TeamName, TeamInfo]
    steps: int
    block_types: PVector[BlockType] = pvector()
    grid: Optional[Tuple[int, int]] = None


@dataclass(frozen=True)
class DynamicWorld:
    """Snapshot of one simulation step.

    Attributes:
        step (int): Current step index (``0 <= step < steps``).
        scores (PMap[TeamName, Score]): Current score per team.
        tasks (PVector[Task]): Active tasks in server order (not sorted).
        cells (PVector[Optional[PVector[Optional[int]]]]): Terrain codes indexed
            ``[y][x]``; sparse.
        dispensers (PVector[Dispenser]): Dispensers on the map.
        blocks (PVector[Block]): Loose or attached blocks on the map.
        entities (PVector[Entity]): Agents on the map.
    """

    step: int
    scores: PMap[TeamName, Score] = pmap()
    tasks: PVector[Task] = pvector()
    cells: PVector[Optional[PVector[Optional[int]]]] = pvector()
    dispensers: PVector[Dispenser] = pvector()
    blocks: PVector[Block] = pvector()
    entities: PVector[Entity] = pvector()

    def terrain_at(self, pos: Pos) -> Optional[int]:
        """Terrain code at ``pos`` or ``None`` if the cell is not known."""
        if not 0 <= pos.y < len(self.cells):
            return None
        row = self.cells[pos.y]
        if row is None or not 0 <= pos.x < len(row):
            return None
        return row[pos.x]
