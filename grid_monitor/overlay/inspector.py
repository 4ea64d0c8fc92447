"""Cell inspector.

Answers "what is at (x, y)?" for the hovered cell. The facts come in a fixed
order: position, terrain, dispensers, blocks, agents. Each of the three entity
collections is scanned linearly for exact coordinate matches, so facts keep
the collection order.
"""

import logging
from typing import Dict, Iterator, Tuple

from grid_monitor.types import Terrain
from grid_monitor.view import VNode, h
from grid_monitor.world import DynamicWorld, Pos

logger = logging.getLogger(__name__)


TERRAIN_NAMES: Dict[int, str] = {
    Terrain.EMPTY: "empty",
    Terrain.GOAL: "goal",
    Terrain.OBSTACLE: "obstacle",
}


def inspect_cell(world: DynamicWorld, pos: Pos) -> Iterator[str]:
    """Yield descriptive facts about ``pos``.

    Yields nothing when the row ``pos.y`` or the cell ``pos.x`` is not part of
    ``world.cells``. The returned generator is lazy and can only be consumed
    once.
    """
    terrain = world.terrain_at(pos)
    if terrain is None:
        return

    yield f"x = {pos.x}, y = {pos.y}"

    name = TERRAIN_NAMES.get(terrain)
    if name is not None:
        yield f"terrain: {name}"
    else:
        logger.debug("Unknown terrain code %r at (%d, %d)", terrain, pos.x, pos.y)

    for dispenser in world.dispensers:
        if dispenser.x == pos.x and dispenser.y == pos.y:
            yield f"dispenser: type = {dispenser.type}"

    for block in world.blocks:
        if block.x == pos.x and block.y == pos.y:
            yield f"block: type = {block.type}"

    for agent in world.entities:
        if agent.x == pos.x and agent.y == pos.y:
            yield f"agent: name = {agent.name}, team = {agent.team}"


def hover_views(world: DynamicWorld, pos: Pos) -> Tuple[VNode, ...]:
    return tuple(h("p", fact) for fact in inspect_cell(world, pos))
