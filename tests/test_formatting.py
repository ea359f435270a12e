import pytest

from formatting import (
    broadcast_label,
    down_distance_text,
    hex_color,
    odds_label,
    ordinal,
    rank_label,
)
from models import Broadcast, Odds, Situation
from vibe_tags import pick_vibe


def test_hex_color():
    assert hex_color("00274c") == "#00274c"
    assert hex_color("#BA0C2F") == "#BA0C2F"


def test_rank_label():
    assert rank_label(None) == ""
    assert rank_label(3) == "#3"


@pytest.mark.parametrize(
    "n, expected",
    [(1, "1st"), (2, "2nd"), (3, "3rd"), (4, "4th"), (11, "11th"), (12, "12th"), (21, "21st")],
)
def test_ordinal(n, expected):
    assert ordinal(n) == expected


def test_down_distance_text():
    assert down_distance_text(None) == ""
    assert down_distance_text(Situation()) == ""
    assert down_distance_text(Situation(down=1, distance=10)) == "1st & 10"
    assert (
        down_distance_text(Situation(down=4, distance=2, possession_text="UGA 48"))
        == "4th & 2 at UGA 48"
    )


def test_broadcast_label_puts_national_first():
    broadcasts = [
        Broadcast(market="home", names=("SECN+",)),
        Broadcast(market="national", names=("ABC", "ESPN+")),
        Broadcast(market="away", names=("ABC",)),
    ]
    assert broadcast_label(broadcasts) == "ABC / ESPN+ / SECN+"
    assert broadcast_label([]) == ""


def test_odds_label():
    assert odds_label(None) == ""
    assert odds_label(Odds(details="UGA -7", over_under=51.0)) == "UGA -7 · O/U 51"


@pytest.mark.parametrize(
    "score, tag",
    [(288, "Must Watch"), (200, "Nail-Biter"), (160, "Heating Up"), (1, "Early Going"), (0, "Not Started")],
)
def test_pick_vibe(score, tag):
    assert pick_vibe(score) == tag
