import pytest

from accessors import first_competitor, second_competitor
from decoder import decode_response
from models import LastPlay, Probability, Situation, Status, StatusType
from scoring import (
    clock_factor,
    probability_factor,
    rank_factor,
    score_competition,
    watchability,
    win_percentage,
)


def _status(clock):
    return Status(
        clock=clock,
        display_clock="",
        period=4,
        type=StatusType(name="STATUS_IN_PROGRESS", short_detail=""),
    )


def _situation(home, away, tie=0.0):
    return Situation(
        last_play=LastPlay(
            text="",
            probability=Probability(
                tie_percentage=tie,
                home_win_percentage=home,
                away_win_percentage=away,
                seconds_left=0,
            ),
        )
    )


def _competition(raw_competition, wrap, clock=None, home=None, away=None):
    if clock is not None:
        raw_competition["status"]["clock"] = clock
    if home is not None:
        prob = raw_competition["situation"]["lastPlay"]["probability"]
        prob["homeWinPercentage"] = home
        prob["awayWinPercentage"] = away
    return decode_response(wrap(raw_competition)).competitions()[0]


def test_clock_factor():
    assert clock_factor(_status(0)) == pytest.approx(288.0)
    assert clock_factor(_status(3600)) == 0.0
    assert clock_factor(_status(1800)) == pytest.approx(144.0)


def test_probability_factor():
    assert probability_factor(_situation(0.5, 0.5)) == pytest.approx(1.0)
    assert probability_factor(_situation(0.9, 0.1)) == pytest.approx(0.2)
    assert probability_factor(_situation(0.1, 0.9)) == pytest.approx(0.2)
    assert probability_factor(Situation()) == 0.5
    assert probability_factor(None) == 0.5


def test_even_game_at_final_whistle_scores_288(raw_competition, wrap):
    comp = _competition(raw_competition, wrap, clock=0, home=0.5, away=0.5)
    result = score_competition(comp)
    assert result.clock_factor == pytest.approx(288.0)
    assert result.probability_factor == pytest.approx(1.0)
    assert result.rank_factor == 1.0
    assert result.score == 288
    assert watchability(comp) == 288


@pytest.mark.parametrize("home, away", [(0.5, 0.5), (1.0, 0.0), (0.3, 0.6)])
def test_not_started_scores_zero(raw_competition, wrap, home, away):
    comp = _competition(raw_competition, wrap, clock=3600, home=home, away=away)
    assert watchability(comp) == 0


def test_score_truncates(raw_competition, wrap):
    # 0.08 * 3288 * (1 - |0.62 - 0.38|) = 263.04 * 0.76 = 199.9104
    comp = _competition(raw_competition, wrap, clock=312)
    assert watchability(comp) == 199


def test_score_without_situation(raw_competition, wrap):
    del raw_competition["situation"]
    comp = _competition(raw_competition, wrap, clock=0)
    assert watchability(comp) == 144


def test_rank_factor_is_flat(raw_competition, wrap):
    comp = _competition(raw_competition, wrap)
    assert rank_factor(comp) == 1.0


def test_win_percentage_from_probability(raw_competition, wrap):
    comp = _competition(raw_competition, wrap)
    home = first_competitor(comp)
    away = second_competitor(comp)
    assert win_percentage(comp, home) == pytest.approx(0.62)
    assert win_percentage(comp, away) == pytest.approx(0.38)


def test_win_percentage_neutral_without_situation(raw_competition, wrap):
    del raw_competition["situation"]
    comp = _competition(raw_competition, wrap)
    assert win_percentage(comp, first_competitor(comp)) == 0.5
    assert win_percentage(comp, second_competitor(comp)) == 0.5


def test_win_percentage_neutral_without_probability(raw_competition, wrap):
    del raw_competition["situation"]["lastPlay"]["probability"]
    comp = _competition(raw_competition, wrap)
    assert win_percentage(comp, first_competitor(comp)) == 0.5
    assert win_percentage(comp, second_competitor(comp)) == 0.5


def test_scoring_is_repeatable(raw_payload):
    first = [watchability(c) for c in decode_response(raw_payload).competitions()]
    second = [watchability(c) for c in decode_response(raw_payload).competitions()]
    assert first == second
