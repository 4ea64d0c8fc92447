"""Common type aliases and enumerations.

``Terrain`` mirrors the integer codes used by the simulation server for grid
cells. ``ConnectionState`` is owned by the controller; ``OverlayState`` is the
view state the composer derives from it.
"""

from enum import IntEnum, StrEnum, auto
from typing import Union


Score = Union[int, float]
BlockType = str
TeamName = str
Color = str


class Terrain(IntEnum):
    """Terrain codes of ``DynamicWorld.cells``."""

    EMPTY = 0
    GOAL = 1
    OBSTACLE = 2


class ConnectionState(StrEnum):
    """Live session state as reported by the connection layer."""

    CONNECTING = auto()
    ERROR = auto()
    CONNECTED = auto()


class OverlayState(StrEnum):
    """Which of the three overlay views is shown."""

    ERROR = auto()
    LOADING = auto()
    CONNECTED = auto()
