"""
Testing pure game logic.
"""

from itertools import product

import pytest

from mastermind.engine import score_guess, format_feedback
from mastermind.errors import ContractViolation
from mastermind.types import ScoreResult

ALL_CODES = [list(c) for c in product(range(1, 7), repeat=4)]

def test_score_guess_no_matches():
    result = score_guess([1, 2, 3, 4], [5, 5, 6, 6])
    assert result == ScoreResult(exact=0, partial=0)

def test_duplicates_in_secret_are_not_over_counted():
    result = score_guess([1, 1, 1, 1], [1, 1, 2, 2])
    assert result.exact == 2
    assert result.partial == 0

def test_all_digits_misplaced():
    assert score_guess([1, 2, 3, 4], [4, 3, 2, 1]) == (0, 4)

def test_duplicates_mixed_with_exact_match():
    # idx1 is exact (2); leftovers secret {1, 2, 3} vs guess {2, 4, 4} share one 2
    assert score_guess([1, 2, 2, 3], [2, 2, 4, 4]) == (1, 1)

def test_duplicates_in_guess_only():
    # secret has one 5; the guess's extra 5s get nothing
    assert score_guess([5, 1, 2, 3], [6, 5, 5, 5]) == (0, 1)

def test_same_pair_scores_the_same_twice():
    secret, guess = [3, 6, 3, 1], [3, 3, 6, 6]
    assert score_guess(secret, guess) == score_guess(secret, guess)
    assert secret == [3, 6, 3, 1] and guess == [3, 3, 6, 6]

@pytest.mark.parametrize("secret", [[1, 1, 1, 1], [1, 2, 3, 4], [6, 5, 6, 5], [2, 2, 3, 3], [4, 1, 6, 4]])
def test_bounds_and_win_condition_hold_for_every_guess(secret):
    for guess in ALL_CODES:
        exact, partial = score_guess(secret, guess)
        assert exact >= 0 and partial >= 0
        assert exact + partial <= 4
        assert (exact == 4) == (guess == secret)

def test_length_mismatch_is_a_contract_violation():
    with pytest.raises(ContractViolation):
        score_guess([1, 2, 3, 4], [1, 2, 3])
    with pytest.raises(ContractViolation):
        score_guess([], [])

def test_format_feedback():
    assert format_feedback(ScoreResult(2, 1)) == "BBW"
    assert format_feedback(ScoreResult(0, 4)) == "WWWW"
    assert format_feedback(ScoreResult(0, 0)) == "-"

def test_digit_outside_range_is_a_contract_violation():
    with pytest.raises(ContractViolation):
        score_guess([1, 2, 3, 4], [0, 2, 3, 4])
