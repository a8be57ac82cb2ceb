"""
Where the secret lives.

Both variants expose the same small interface so GameSession never needs to
know which one it is driving:
- create()           allocate the secret (remote: returns the game id)
- score(guess)       -> ScoreResult
- release()          best-effort cleanup, never raises
- revealed_secret()  the secret if we know it locally, else None
"""

import logging
from abc import ABC, abstractmethod
from secrets import SystemRandom
from typing import Callable, Optional

from .api_client import MastermindAPI
from .engine import score_guess
from .errors import ContractViolation, DecodingError
from .types import Code, ScoreResult, CODE_LENGTH, DIGIT_MIN, DIGIT_MAX
from .validator import format_code

logger = logging.getLogger(__name__)

# randint(a, b) -> int in [a, b]; swap it in tests for a predictable secret
RandInt = Callable[[int, int], int]


class SecretSource(ABC):
    @abstractmethod
    def create(self) -> Optional[str]:
        ...

    @abstractmethod
    def score(self, guess: Code) -> ScoreResult:
        ...

    def release(self) -> None:
        pass

    def revealed_secret(self) -> Optional[Code]:
        return None


def generate_secret(randint: Optional[RandInt] = None) -> Code:
    """CODE_LENGTH independent, uniformly drawn digits in DIGIT_MIN..DIGIT_MAX."""
    randint = randint or SystemRandom().randint
    secret = [randint(DIGIT_MIN, DIGIT_MAX) for _ in range(CODE_LENGTH)]
    for digit in secret:
        if not DIGIT_MIN <= digit <= DIGIT_MAX:
            raise ContractViolation(f"Random source produced {digit}, outside {DIGIT_MIN}..{DIGIT_MAX}.")
    return secret


class LocalSecretSource(SecretSource):
    """Secret generated and scored in-process; it never leaves this object."""

    def __init__(self, randint: Optional[RandInt] = None):
        self._randint = randint
        self._secret: Optional[Code] = None

    def create(self) -> None:
        self._secret = generate_secret(self._randint)

    def score(self, guess: Code) -> ScoreResult:
        if self._secret is None:
            raise ContractViolation("No secret yet; call create() first.")
        return score_guess(self._secret, guess)

    def revealed_secret(self) -> Optional[Code]:
        return list(self._secret) if self._secret is not None else None


class RemoteSecretSource(SecretSource):
    """
    Secret held by the remote service. We only ever see black/white counts,
    which map one-to-one onto ScoreResult.
    """

    def __init__(self, api: Optional[MastermindAPI] = None):
        self.api = api or MastermindAPI()
        self.game_id: Optional[str] = None

    def create(self) -> str:
        self.game_id = self.api.create_game()
        return self.game_id

    def score(self, guess: Code) -> ScoreResult:
        if not self.game_id:
            raise ContractViolation("Guess submitted without an active game id.")
        feedback = self.api.make_guess(self.game_id, format_code(guess))
        if feedback.black + feedback.white > CODE_LENGTH:
            raise DecodingError(ValueError(
                f"server reported {feedback.black} black + {feedback.white} white for a {CODE_LENGTH}-digit code"
            ))
        return ScoreResult(feedback.black, feedback.white)

    def release(self) -> None:
        if self.game_id is None:
            return
        game_id, self.game_id = self.game_id, None
        try:
            self.api.delete_game(game_id)
        except Exception as exc:  # cleanup must never escalate
            logger.debug("Cleanup of game %s failed: %s", game_id, exc)
