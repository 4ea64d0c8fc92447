"""Label formatting helpers."""

from typing import Optional

from grid_monitor.types import Score


MISSING_SCORE = "?"


def simple_plural(n: int, singular: str) -> str:
    """``"1 task"`` for one, ``"<n> tasks"`` otherwise (including zero)."""
    if n == 1:
        return f"1 {singular}"
    return f"{n} {singular}s"


def format_score(score: Optional[Score]) -> str:
    """Render a score; a team without a reported score shows ``MISSING_SCORE``."""
    if score is None:
        return MISSING_SCORE
    return str(score)
