import pytest

from suistone.game.rules import HIGHERLOWER_MAX, HIGHERLOWER_MIN, draw_number, next_round


@pytest.mark.parametrize("guess", ["higher", "lower"])
def test_tie_never_wins(guess):
    for n in range(HIGHERLOWER_MIN, HIGHERLOWER_MAX + 1):
        assert next_round(n, guess, draw=n).correct is False


def test_higher_wins_only_when_strictly_greater():
    assert next_round(7, "higher", draw=8).correct is True
    assert next_round(7, "higher", draw=15).correct is True
    assert next_round(7, "higher", draw=6).correct is False
    assert next_round(7, "higher", draw=1).correct is False


def test_lower_wins_only_when_strictly_less():
    assert next_round(7, "lower", draw=6).correct is True
    assert next_round(7, "lower", draw=1).correct is True
    assert next_round(7, "lower", draw=8).correct is False


def test_unrecognised_guess_never_wins():
    assert next_round(7, "sideways", draw=1).correct is False
    assert next_round(7, "sideways", draw=15).correct is False


def test_result_carries_draw():
    result = next_round(4, "higher", draw=9)
    assert result.next_number == 9
    assert result.to_dict() == {"nextNumber": 9, "correct": True}


def test_draws_stay_in_range():
    draws = {draw_number() for _ in range(2000)}
    assert draws <= set(range(HIGHERLOWER_MIN, HIGHERLOWER_MAX + 1))
    assert HIGHERLOWER_MIN in draws and HIGHERLOWER_MAX in draws
