# presentation.py
# Maps decoded competitions (plus derived values) into plain records a
# renderer can draw directly.
#
# Public API:
#   build_card(competition) -> GameCard
#   build_cards(response, sort_by_score=True, keep=None) -> list[GameCard]
#   line_score_header(cards) -> list[str]
#
# No scoring or defaulting decisions live here; those belong to
# decoder / accessors / scoring.

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional, Sequence, Tuple

from accessors import (
    competitors_by_side,
    first_competitor,
    record_summary,
    second_competitor,
    total_score,
)
from config import BAR_OUTLINE_COLOR, BAR_TRACK_WIDTH, REGULAR_PERIODS
from formatting import broadcast_label, down_distance_text, hex_color, odds_label, rank_label
from models import SENTINEL_COMPETITOR, Competition, Competitor, Response
from scoring import watchability, win_percentage
from vibe_tags import pick_vibe


@dataclass(frozen=True)
class TeamLine:
    abbreviation: str
    rank_label: str
    primary_color: str
    secondary_color: str
    logo: str
    record: str
    periods: Tuple[Optional[int], ...]
    overtime: Optional[int]
    total: int
    has_possession: bool
    is_error: bool


@dataclass(frozen=True)
class BarSegment:
    start: float
    end: float
    color: str

    @property
    def width(self) -> float:
        return self.end - self.start


@dataclass(frozen=True)
class ProbabilityBar:
    track_width: float
    left: BarSegment
    right: BarSegment
    outline_color: str


@dataclass(frozen=True)
class GameCard:
    first: TeamLine
    second: TeamLine
    matchup: str
    bar: ProbabilityBar
    watchability: int
    vibe: str
    status_text: str
    situation_text: str
    broadcast: str
    odds: str
    neutral_site: bool
    conference_game: bool


def lerp(start: float, end: float, t: float) -> float:
    return start + (end - start) * t


def line_score_row(
    linescores: Optional[Sequence[int]],
) -> Tuple[Tuple[Optional[int], ...], Optional[int]]:
    """
    Pad to exactly REGULAR_PERIODS cells (None = not played yet).
    Everything past the fourth entry is folded into one overtime cell,
    which only exists when there are more than four entries.
    """
    values = list(linescores or ())
    regular = values[:REGULAR_PERIODS]
    periods = tuple(regular) + (None,) * (REGULAR_PERIODS - len(regular))
    overtime = sum(values[REGULAR_PERIODS:]) if len(values) > REGULAR_PERIODS else None
    return periods, overtime


def team_line(competition: Competition, competitor: Competitor) -> TeamLine:
    team = competitor.team
    periods, overtime = line_score_row(competitor.linescores)
    situation = competition.situation
    has_possession = (
        situation is not None
        and situation.possession is not None
        and situation.possession == competitor.id
    )
    return TeamLine(
        abbreviation=team.abbreviation,
        rank_label=rank_label(competitor.curated_rank),
        primary_color=hex_color(team.color),
        secondary_color=hex_color(team.alternate_color),
        logo=team.logo,
        record=record_summary(competitor),
        periods=periods,
        overtime=overtime,
        total=total_score(competitor),
        has_possession=has_possession,
        is_error=competitor is SENTINEL_COMPETITOR,
    )


def probability_bar(
    competition: Competition,
    track_width: float = BAR_TRACK_WIDTH,
) -> ProbabilityBar:
    """
    First competitor grows from the left edge, second from the right.
    Whatever is left in the middle is the tie share.
    """
    first = first_competitor(competition)
    second = second_competitor(competition)
    p_first = win_percentage(competition, first)
    # segments never overlap, e.g. when both sides read as home
    p_second = min(win_percentage(competition, second), 1.0 - p_first)

    left = BarSegment(
        start=lerp(0.0, track_width, 0.0),
        end=lerp(0.0, track_width, p_first),
        color=hex_color(first.team.color),
    )
    right = BarSegment(
        start=lerp(0.0, track_width, 1.0 - p_second),
        end=lerp(0.0, track_width, 1.0),
        color=hex_color(second.team.color),
    )
    return ProbabilityBar(
        track_width=track_width,
        left=left,
        right=right,
        outline_color=BAR_OUTLINE_COLOR,
    )


def matchup_label(competition: Competition) -> str:
    """'AWAY @ HOME', or 'HOME vs AWAY' at a neutral site."""
    home, away = competitors_by_side(competition)
    if competition.neutral_site:
        return f"{home.team.abbreviation} vs {away.team.abbreviation}"
    return f"{away.team.abbreviation} @ {home.team.abbreviation}"


def build_card(competition: Competition) -> GameCard:
    score = watchability(competition)
    return GameCard(
        first=team_line(competition, first_competitor(competition)),
        second=team_line(competition, second_competitor(competition)),
        matchup=matchup_label(competition),
        bar=probability_bar(competition),
        watchability=score,
        vibe=pick_vibe(score),
        status_text=competition.status.type.short_detail,
        situation_text=down_distance_text(competition.situation),
        broadcast=broadcast_label(competition.broadcasts),
        odds=odds_label(competition.odds),
        neutral_site=competition.neutral_site,
        conference_game=competition.conference_competition,
    )


def build_cards(
    response: Response,
    sort_by_score: bool = True,
    keep: Optional[Callable[[Competition], bool]] = None,
) -> List[GameCard]:
    """
    One card per competition across all events (optionally only those
    `keep` accepts). Sorting is stable, so equal scores keep feed order.
    """
    cards = [
        build_card(c)
        for c in response.competitions()
        if keep is None or keep(c)
    ]
    if sort_by_score:
        cards.sort(key=lambda card: card.watchability, reverse=True)
    return cards


def line_score_header(cards: Iterable[GameCard]) -> List[str]:
    header = [str(i) for i in range(1, REGULAR_PERIODS + 1)]
    if any(c.first.overtime is not None or c.second.overtime is not None for c in cards):
        header.append("OT")
    return header
