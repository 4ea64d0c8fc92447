from typing import Iterable, Mapping, Optional, Sequence, Tuple

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


def make_static(
    teams: Iterable[str] = ("A", "B"),
    steps: int = 500,
    block_types: Sequence[str] = ("b0", "b1", "b2"),
) -> StaticWorld:
    return StaticWorld(
        teams=pmap({name: TeamInfo(name=name) for name in teams}),
        steps=steps,
        block_types=pvector(block_types),
    )


def make_task(
    name: str,
    requirements: Sequence[Tuple[int, int]] = ((0, 1),),
    reward: int = 40,
    deadline: int = 100,
    block_type: str = "b0",
) -> Task:
    return Task(
        name=name,
        reward=reward,
        deadline=deadline,
        requirements=pvector(Block(x, y, block_type) for x, y in requirements),
    )


def make_dynamic(
    step: int = 0,
    scores: Optional[Mapping[str, int]] = None,
    tasks: Sequence[Task] = (),
    cells: Sequence[Optional[Sequence[Optional[int]]]] = ((0, 1), (2,)),
    dispensers: Sequence[Dispenser] = (),
    blocks: Sequence[Block] = (),
    entities: Sequence[Entity] = (),
) -> DynamicWorld:
    return DynamicWorld(
        step=step,
        scores=pmap(scores if scores is not None else {"A": 0, "B": 0}),
        tasks=pvector(tasks),
        cells=pvector(None if row is None else pvector(row) for row in cells),
        dispensers=pvector(dispensers),
        blocks=pvector(blocks),
        entities=pvector(entities),
    )
