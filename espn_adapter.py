# espn_adapter.py
# ESPN college football scoreboard adapter.
#
# Public API:
#   scoreboard_params(today: date) -> dict
#   fetch_scoreboard(url: str | None = None, params: dict | None = None) -> FetchState
#
# One GET per call: no retry, no backoff. The result is always one of
#   Success(response)   fully decoded models.Response
#   Failure(error)      FetchError with a tagged kind
# and Loading is what a caller shows while the call is outstanding.

from __future__ import annotations

import datetime
import enum
from dataclasses import dataclass
from typing import Any, Dict, Final, Optional, Union

import requests

from config import (
    DEBUG,
    FETCH_TIMEOUT,
    SCOREBOARD_DAYS_AHEAD,
    SCOREBOARD_DAYS_BACK,
    SCOREBOARD_GROUPS,
    SCOREBOARD_LIMIT,
    scoreboard_url,
)
from decoder import DecodeError, decode_response
from models import Response

USER_AGENT: Final[str] = "cfb-watchability/0.1.0 (college football scoreboard reader)"

HEADERS: Final[Dict[str, str]] = {
    "User-Agent": USER_AGENT,
    "Accept": "application/json",
}


def _log(level: str, msg: str) -> None:
    if DEBUG or level == "ERROR":
        print(f"[ESPN] [{level}] {msg}", flush=True)


class FetchErrorKind(enum.Enum):
    BAD_URL = "bad-url"
    TIMEOUT = "timeout"
    NETWORK_ERROR = "network-error"
    BAD_STATUS = "bad-status"
    BAD_BODY = "bad-body"


@dataclass(frozen=True)
class FetchError:
    kind: FetchErrorKind
    # only BAD_BODY carries a message
    detail: Optional[str] = None

    def describe(self) -> str:
        if self.detail:
            return f"{self.kind.value}: {self.detail}"
        return self.kind.value


@dataclass(frozen=True)
class Loading:
    pass


@dataclass(frozen=True)
class Success:
    response: Response


@dataclass(frozen=True)
class Failure:
    error: FetchError


FetchState = Union[Loading, Success, Failure]


def _espn_date_param(day: datetime.date) -> str:
    """ESPN wants YYYYMMDD."""
    return day.strftime("%Y%m%d")


def scoreboard_params(today: Optional[datetime.date] = None) -> Dict[str, Any]:
    """
    Query string for the configured date window around `today`, e.g.
    {"dates": "20261017-20261020", "groups": "80", "limit": 300}.
    """
    today = today or datetime.date.today()
    start = today - datetime.timedelta(days=SCOREBOARD_DAYS_BACK)
    end = today + datetime.timedelta(days=SCOREBOARD_DAYS_AHEAD)
    if start == end:
        dates = _espn_date_param(start)
    else:
        dates = f"{_espn_date_param(start)}-{_espn_date_param(end)}"
    return {
        "dates": dates,
        "groups": SCOREBOARD_GROUPS,
        "limit": SCOREBOARD_LIMIT,
    }


def fetch_scoreboard(
    url: Optional[str] = None,
    params: Optional[Dict[str, Any]] = None,
) -> FetchState:
    """
    Fetch and decode one scoreboard. Never raises for transport or
    payload problems; those come back as Failure.
    """
    url = url or scoreboard_url()
    if params is None:
        params = scoreboard_params()

    try:
        r = requests.get(url, headers=HEADERS, params=params, timeout=FETCH_TIMEOUT)
    except (
        requests.exceptions.MissingSchema,
        requests.exceptions.InvalidSchema,
        requests.exceptions.InvalidURL,
    ) as e:
        _log("ERROR", f"bad url {url!r}: {e}")
        return Failure(FetchError(FetchErrorKind.BAD_URL))
    except requests.exceptions.Timeout:
        _log("ERROR", f"GET {url} timed out after {FETCH_TIMEOUT}s")
        return Failure(FetchError(FetchErrorKind.TIMEOUT))
    except requests.exceptions.RequestException as e:
        _log("ERROR", f"GET {url} network error: {e}")
        return Failure(FetchError(FetchErrorKind.NETWORK_ERROR))

    if not r.ok:
        _log("ERROR", f"GET {url} params={params} -> {r.status_code}")
        return Failure(FetchError(FetchErrorKind.BAD_STATUS))

    try:
        raw = r.json()
    except ValueError as e:
        _log("ERROR", f"GET {url} returned invalid JSON: {e}")
        return Failure(FetchError(FetchErrorKind.BAD_BODY, f"invalid JSON: {e}"))

    try:
        response = decode_response(raw)
    except DecodeError as e:
        _log("ERROR", f"GET {url} payload rejected: {e}")
        return Failure(FetchError(FetchErrorKind.BAD_BODY, str(e)))

    _log(
        "INFO",
        f"scoreboard OK via {url} params={params}: "
        f"{len(response.competitions())} competitions"
    )
    return Success(response)
