# accessors.py
# Small pure helpers over a decoded Competition / Competitor.

from __future__ import annotations

from typing import Tuple

from models import HOME, SENTINEL_COMPETITOR, Competition, Competitor


def _competitor_at(competition: Competition, index: int) -> Competitor:
    if index < len(competition.competitors):
        return competition.competitors[index]
    return SENTINEL_COMPETITOR


def first_competitor(competition: Competition) -> Competitor:
    """Competitor at position 0, or the ERR sentinel if there is none."""
    return _competitor_at(competition, 0)


def second_competitor(competition: Competition) -> Competitor:
    """Competitor at position 1, or the ERR sentinel if there is none."""
    return _competitor_at(competition, 1)


def is_home(competitor: Competitor) -> bool:
    # Anything other than an exact "home" counts as away.
    return competitor.home_away == HOME


def total_score(competitor: Competitor) -> int:
    """
    Points from the period-by-period linescores.

    The feed's `score` string is display data and is never used here.
    """
    if competitor.linescores is None:
        return 0
    return sum(competitor.linescores)


def competitors_by_side(competition: Competition) -> Tuple[Competitor, Competitor]:
    """
    (home, away). When the feed does not mark exactly one home side we
    fall back to positional order (first, second).
    """
    first = first_competitor(competition)
    second = second_competitor(competition)
    if is_home(second) and not is_home(first):
        return second, first
    return first, second


def record_summary(competitor: Competitor) -> str:
    if not competitor.records:
        return ""
    return competitor.records[0].summary
