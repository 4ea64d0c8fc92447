"""Team scoreboard projection.

Teams are listed in lexicographic name order. The position in that order is
the team's color index, so a team keeps its color across renders and steps.
"""

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from grid_monitor.styles import team_color
from grid_monitor.types import Color, Score, TeamName
from grid_monitor.utils.text import format_score
from grid_monitor.view import VNode, h
from grid_monitor.world import DynamicWorld, StaticWorld


@dataclass(frozen=True)
class TeamSummary:
    name: TeamName
    score: Optional[Score]
    color_index: int


def team_summaries(
    static: StaticWorld, dynamic: DynamicWorld
) -> Tuple[TeamSummary, ...]:
    """Sorted team summaries; a team missing from ``dynamic.scores`` scores ``None``."""
    return tuple(
        TeamSummary(name=name, score=dynamic.scores.get(name), color_index=i)
        for i, name in enumerate(sorted(static.teams.keys()))
    )


def team_views(
    summaries: Sequence[TeamSummary], palette: Sequence[Color]
) -> Tuple[VNode, ...]:
    return tuple(
        h(
            "div.team",
            {"style": {"background": team_color(tuple(palette), s.color_index)}},
            f"{s.name}: ${format_score(s.score)}",
        )
        for s in summaries
    )
