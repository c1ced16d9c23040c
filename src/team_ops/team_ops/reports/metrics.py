"""Pure dashboard metrics. Every ratio is defined as 0 when its base is 0."""

from __future__ import annotations


def weekly_growth(this_week: int, last_week: int) -> float:
    """Percentage change of this week's count against last week's."""
    if last_week <= 0:
        return 0.0
    return (this_week - last_week) / last_week * 100


def completion_rate(done: int, total: int) -> float:
    if total <= 0:
        return 0.0
    return done / total * 100


def productivity_score(done: int, in_progress: int, total: int) -> int:
    """Done tasks weigh 2, in-progress tasks weigh 1."""
    return round((done * 2 + in_progress) / max(total, 1) * 100)
