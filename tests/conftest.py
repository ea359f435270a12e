import copy

import pytest


def _competitor(team_id, abbr, home_away, order, linescores=None, rank=99):
    raw = {
        "id": team_id,
        "uid": f"s:20~l:23~t:{team_id}",
        "type": "team",
        "order": order,
        "homeAway": home_away,
        "team": {
            "id": team_id,
            "abbreviation": abbr,
            "displayName": abbr,
            "color": "00274c",
            "alternateColor": "ffcb05",
            "logo": f"https://a.espncdn.com/i/teamlogos/ncaa/500/{team_id}.png",
        },
        "score": str(sum(linescores or [])),
        "curatedRank": {"current": rank},
        "records": [{"name": "overall", "type": "total", "summary": "6-1"}],
    }
    if linescores is not None:
        raw["linescores"] = [{"value": float(v)} for v in linescores]
    return raw


def _competition():
    return {
        "id": "401628374",
        "date": "2026-10-17T19:30Z",
        "neutralSite": False,
        "conferenceCompetition": True,
        "competitors": [
            _competitor("130", "MICH", "home", 0, [7, 3, 0, 10], rank=12),
            _competitor("194", "OSU", "away", 1, [0, 14, 3, 0]),
        ],
        "situation": {
            "lastPlay": {
                "id": "4016283741234",
                "text": "J.J. McCarthy pass complete to Roman Wilson for 12 yds",
                "probability": {
                    "tiePercentage": 0.0,
                    "homeWinPercentage": 0.62,
                    "awayWinPercentage": 0.38,
                    "secondsLeft": 312,
                },
            },
            "down": 3,
            "yardLine": 35,
            "distance": 7,
            "downDistanceText": "3rd & 7 at OSU 35",
            "possessionText": "OSU 35",
            "isRedZone": False,
            "homeTimeouts": 2,
            "awayTimeouts": 1,
            "possession": "130",
        },
        "status": {
            "clock": 312.0,
            "displayClock": "5:12",
            "period": 4,
            "type": {
                "id": "2",
                "name": "STATUS_IN_PROGRESS",
                "state": "in",
                "completed": False,
                "shortDetail": "5:12 - 4th",
            },
        },
        "broadcasts": [{"market": "national", "names": ["FOX"]}],
        "odds": [
            {"provider": {"name": "ESPN BET"}, "details": "MICH -3.5", "overUnder": 44.5},
            {"provider": {"name": "Other"}, "details": "MICH -4", "overUnder": 45.0},
        ],
    }


@pytest.fixture
def raw_competitor():
    """Factory for one raw feed competitor."""
    return _competitor


@pytest.fixture
def raw_competition():
    """A fresh, fully populated in-progress competition."""
    return copy.deepcopy(_competition())


@pytest.fixture
def wrap():
    """Wrap raw competitions into a scoreboard payload, one event each."""

    def _wrap(*competitions):
        return {
            "leagues": [{"abbreviation": "NCAAF"}],
            "events": [
                {"id": str(i), "competitions": [c]} for i, c in enumerate(competitions)
            ],
        }

    return _wrap


@pytest.fixture
def raw_payload(raw_competition, wrap):
    return wrap(raw_competition)
