# models.py
# Typed, immutable view of one scoreboard fetch, validated straight from
# the feed's camelCase JSON.
#
# Shape (leaves first):
#   Response -> Event -> Competition -> Competitor -> Team
#                                    -> Situation -> LastPlay -> Probability
#                                    -> Status -> StatusType
#                                    -> Broadcast, Odds
#
# Defaulting policy for optional feed fields:
#   competition.situation            -> None
#   situation.lastPlay               -> LastPlay(text="", probability=None)
#   situation.possessionText/possession -> None
#   situation.down/yardLine/distance/homeTimeouts/awayTimeouts -> 0
#   situation.isRedZone              -> False
#   lastPlay.text                    -> ""
#   lastPlay.probability             -> None
#   competitor.linescores            -> None  (not the same as [])
#   competitor.curatedRank.current   -> 99 means unranked -> None
#   team.alternateColor              -> "000000"
#   competition.odds                 -> first list entry, else None
#
# A null optional field counts as missing; a null required field fails.

from __future__ import annotations

from typing import Annotated, Any, Final, Optional, Tuple

from pydantic import (
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    StrictBool,
    field_validator,
    model_validator,
)

from config import DEFAULT_ALTERNATE_COLOR, SENTINEL_COLOR

HOME: Final[str] = "home"
UNRANKED: Final[int] = 99


def _integer(value: Any) -> Any:
    # bool is an int subclass and numeric strings would coerce; the feed
    # means neither. Integral floats (0.0, 7.0) are left for pydantic.
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError("an integer")
    return value


def _number(value: Any) -> Any:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError("a number")
    return value


FeedInt = Annotated[int, BeforeValidator(_integer)]
FeedFloat = Annotated[float, BeforeValidator(_number)]
Share = Annotated[float, BeforeValidator(_number), Field(ge=0, le=1)]


class FeedModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    @model_validator(mode="before")
    @classmethod
    def _drop_null_optionals(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        optional = set()
        for name, f in cls.model_fields.items():
            if not f.is_required():
                optional.update((name, f.alias or name))
        return {k: v for k, v in data.items() if not (v is None and k in optional)}


class Team(FeedModel):
    abbreviation: str
    color: str
    logo: str
    alternate_color: str = Field(default=DEFAULT_ALTERNATE_COLOR, alias="alternateColor")


class Record(FeedModel):
    summary: str
    name: str = ""


class Competitor(FeedModel):
    id: str
    order: FeedInt
    home_away: str = Field(alias="homeAway")
    team: Team
    score: str
    linescores: Optional[Tuple[FeedInt, ...]] = None
    curated_rank: Optional[FeedInt] = Field(alias="curatedRank")
    records: Tuple[Record, ...]

    @field_validator("linescores", mode="before")
    @classmethod
    def _unwrap_linescores(cls, value: Any) -> Any:
        """Entries come as {"value": 7.0}; bare numbers pass through."""
        if not isinstance(value, list):
            return value
        return [v["value"] if isinstance(v, dict) and "value" in v else v for v in value]

    @field_validator("curated_rank", mode="before")
    @classmethod
    def _unranked_is_none(cls, value: Any) -> Any:
        if not isinstance(value, dict) or "current" not in value:
            raise ValueError("an object with a field named 'current'")
        current = value["current"]
        if not isinstance(current, bool) and current == UNRANKED:
            return None
        return _integer(current)


class Probability(FeedModel):
    tie_percentage: Share = Field(alias="tiePercentage")
    home_win_percentage: Share = Field(alias="homeWinPercentage")
    away_win_percentage: Share = Field(alias="awayWinPercentage")
    seconds_left: FeedInt = Field(alias="secondsLeft", ge=0)


class LastPlay(FeedModel):
    text: str = ""
    probability: Optional[Probability] = None


class Situation(FeedModel):
    last_play: LastPlay = Field(default_factory=LastPlay, alias="lastPlay")
    down: FeedInt = 0
    yard_line: FeedInt = Field(default=0, alias="yardLine")
    distance: FeedInt = 0
    possession_text: Optional[str] = Field(default=None, alias="possessionText")
    is_red_zone: StrictBool = Field(default=False, alias="isRedZone")
    home_timeouts: FeedInt = Field(default=0, alias="homeTimeouts")
    away_timeouts: FeedInt = Field(default=0, alias="awayTimeouts")
    possession: Optional[str] = None


class StatusType(FeedModel):
    name: str
    short_detail: str = Field(alias="shortDetail")


class Status(FeedModel):
    clock: FeedInt
    display_clock: str = Field(alias="displayClock")
    period: FeedInt = Field(ge=0)
    type: StatusType


class Broadcast(FeedModel):
    market: str
    names: Tuple[str, ...] = ()


class Odds(FeedModel):
    details: str
    over_under: FeedFloat = Field(alias="overUnder")


class Competition(FeedModel):
    date: str
    neutral_site: StrictBool = Field(alias="neutralSite")
    conference_competition: StrictBool = Field(alias="conferenceCompetition")
    competitors: Tuple[Competitor, ...]
    status: Status
    broadcasts: Tuple[Broadcast, ...]
    situation: Optional[Situation] = None
    odds: Optional[Odds] = None

    @field_validator("odds", mode="before")
    @classmethod
    def _first_book(cls, value: Any) -> Any:
        """
        The feed may list several books; only the first one is kept and
        the rest are dropped without being checked.
        """
        if isinstance(value, list):
            return value[0] if value else None
        return value


class Event(FeedModel):
    competitions: Tuple[Competition, ...]


class Response(FeedModel):
    events: Tuple[Event, ...]

    def competitions(self) -> Tuple[Competition, ...]:
        """Every competition of every event, in feed order."""
        return tuple(c for e in self.events for c in e.competitions)


# Stand-in for a competitor the feed did not send. Rendered as an error
# ("ERR" in red), never as a real team. Built unvalidated since its rank
# is already normalized.
SENTINEL_COMPETITOR: Final[Competitor] = Competitor.model_construct(
    id="0",
    order=0,
    home_away=HOME,
    team=Team(
        abbreviation="ERR",
        color=SENTINEL_COLOR,
        logo="",
        alternate_color=DEFAULT_ALTERNATE_COLOR,
    ),
    score="0",
    linescores=None,
    curated_rank=None,
    records=(),
)
