# scoring.py
# Watchability score for a single college football game.
#
# Formula (provisional, coefficients are tunable):
#   score = clock_factor * probability_factor * rank_factor
#
#   clock_factor       = 0.08 * (3600 - status.clock)
#   probability_factor = 1 - |home_wp - away_wp|   with a live probability
#                      = 0.5                      otherwise
#   rank_factor        = 1.0                      (reserved for ranked teams)
#
# Result is truncated toward zero. No cross-game normalization happens
# here; ordering games is left to the presentation layer.

from __future__ import annotations

from dataclasses import dataclass
from typing import Final, Optional

from accessors import is_home
from models import Competition, Competitor, Probability, Situation, Status

CLOCK_WEIGHT: Final[float] = 0.08
PERIOD_SECONDS: Final[int] = 3600
NEUTRAL_PROBABILITY: Final[float] = 0.5


@dataclass(frozen=True)
class WatchResult:
    score: int
    clock_factor: float
    probability_factor: float
    rank_factor: float


def _probability(situation: Optional[Situation]) -> Optional[Probability]:
    if situation is None:
        return None
    return situation.last_play.probability


def clock_factor(status: Status) -> float:
    """Grows as the clock runs down."""
    return CLOCK_WEIGHT * (PERIOD_SECONDS - status.clock)


def probability_factor(situation: Optional[Situation]) -> float:
    prob = _probability(situation)
    if prob is None:
        return NEUTRAL_PROBABILITY
    return 1.0 - abs(prob.home_win_percentage - prob.away_win_percentage)


def rank_factor(competition: Competition) -> float:
    # TODO: weight games between ranked teams once a rank curve is agreed on.
    return 1.0


def win_percentage(competition: Competition, competitor: Competitor) -> float:
    """
    Live win probability for `competitor`, or 0.5 when the feed has none
    (unknown, not "cannot win").
    """
    prob = _probability(competition.situation)
    if prob is None:
        return NEUTRAL_PROBABILITY
    if is_home(competitor):
        return prob.home_win_percentage
    return prob.away_win_percentage


def score_competition(competition: Competition) -> WatchResult:
    c = clock_factor(competition.status)
    p = probability_factor(competition.situation)
    r = rank_factor(competition)
    return WatchResult(
        score=int(c * p * r),
        clock_factor=c,
        probability_factor=p,
        rank_factor=r,
    )


def watchability(competition: Competition) -> int:
    """Integer watchability score for one competition."""
    return score_competition(competition).score
