"""
Testing the secret sources on their own, with stand-in API objects.
"""

import pytest

from mastermind.errors import ContractViolation, DecodingError
from mastermind.schemas import GuessOut
from mastermind.sources import LocalSecretSource, RemoteSecretSource, generate_secret
from mastermind.types import ScoreResult


class StubAPI:
    """Records calls; answers guesses with `feedback`, optionally fails deletes."""

    def __init__(self, feedback=None, fail_delete=False):
        self.feedback = feedback or GuessOut(black=0, white=0)
        self.fail_delete = fail_delete
        self.guesses = []
        self.deleted = []

    def create_game(self):
        return "game-42"

    def make_guess(self, game_id, guess):
        self.guesses.append((game_id, guess))
        return self.feedback

    def delete_game(self, game_id):
        self.deleted.append(game_id)
        if self.fail_delete:
            raise RuntimeError("connection dropped")


def test_remote_score_posts_digit_string():
    api = StubAPI(GuessOut(black=1, white=2))
    source = RemoteSecretSource(api)
    assert source.create() == "game-42"

    assert source.score([1, 2, 3, 4]) == ScoreResult(1, 2)
    assert api.guesses == [("game-42", "1234")]
    assert source.revealed_secret() is None

def test_remote_score_without_game_is_a_contract_violation():
    api = StubAPI()
    source = RemoteSecretSource(api)
    with pytest.raises(ContractViolation):
        source.score([1, 2, 3, 4])
    assert api.guesses == []

def test_remote_score_over_code_length_is_a_decoding_error():
    # each count is individually in range, together they are impossible
    source = RemoteSecretSource(StubAPI(GuessOut(black=3, white=2)))
    source.create()
    with pytest.raises(DecodingError):
        source.score([1, 2, 3, 4])

def test_release_swallows_delete_failure_and_runs_once():
    api = StubAPI(fail_delete=True)
    source = RemoteSecretSource(api)
    source.create()

    source.release()
    source.release()
    assert api.deleted == ["game-42"]
    assert source.game_id is None

def test_release_before_create_does_nothing():
    api = StubAPI()
    RemoteSecretSource(api).release()
    assert api.deleted == []

def test_local_source_uses_injected_random():
    calls = []

    def randint(a, b):
        calls.append((a, b))
        return 5

    source = LocalSecretSource(randint=randint)
    source.create()
    assert source.revealed_secret() == [5, 5, 5, 5]
    assert calls == [(1, 6)] * 4
    assert source.score([5, 5, 1, 1]) == ScoreResult(2, 0)

def test_generate_secret_rejects_out_of_range_random():
    with pytest.raises(ContractViolation):
        generate_secret(lambda a, b: 7)

def test_generate_secret_default_stays_in_range():
    for _ in range(50):
        secret = generate_secret()
        assert len(secret) == 4
        assert all(1 <= d <= 6 for d in secret)
