"""
One play-through, from secret creation to a terminal outcome.

    ongoing --exit / end of input---------> aborted
    ongoing --valid guess, exact == 4-----> won
    ongoing --valid guess, attempts == 10-> lost
    ongoing --remote 404------------------> aborted (game_not_found)
    ongoing --contract violation----------> aborted (contract_violation)
    ongoing --invalid guess / other API---> ongoing

The transition table is the same for local and remote play; only the
SecretSource behind it differs. Every terminal transition releases the
source exactly once.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Literal, Optional, Tuple

from .errors import APIError, ContractViolation
from .sources import SecretSource
from .types import AbortReason, Code, GameStatus, ScoreResult, CODE_LENGTH, MAX_ATTEMPTS
from .validator import is_exit_command, parse_guess

logger = logging.getLogger(__name__)

TurnKind = Literal["exit", "invalid", "scored", "error"]


@dataclass
class TurnResult:
    kind: TurnKind
    status: GameStatus
    attempts: int
    guess: Optional[Code] = None
    score: Optional[ScoreResult] = None
    error: Optional[str] = None


@dataclass
class GameSession:
    source: SecretSource
    max_attempts: int = MAX_ATTEMPTS
    attempts: int = 0
    status: GameStatus = "ongoing"
    reason: Optional[AbortReason] = None
    game_id: Optional[str] = None
    history: List[Tuple[Code, ScoreResult]] = field(default_factory=list)

    def start(self) -> Optional[str]:
        """Allocate the secret. Errors propagate: the session cannot begin."""
        self.game_id = self.source.create()
        return self.game_id

    @property
    def is_over(self) -> bool:
        return self.status != "ongoing"

    @property
    def attempts_left(self) -> int:
        return self.max_attempts - self.attempts

    def revealed_secret(self) -> Optional[Code]:
        return self.source.revealed_secret()

    def play_turn(self, raw: str) -> TurnResult:
        if self.is_over:
            raise ContractViolation(f"Session already finished ({self.status}).")

        if is_exit_command(raw):
            self.abort("exit")
            return self._result("exit")

        guess = parse_guess(raw)
        if guess is None:
            # No transition and no attempt consumed
            return self._result("invalid")

        self.attempts += 1
        try:
            score = self.source.score(guess)
        except ContractViolation as exc:
            logger.error("Aborting session: %s", exc)
            self.abort("contract_violation")
            return self._result("error", guess=guess, error=str(exc))
        except APIError as exc:
            if exc.is_not_found:
                self.abort("game_not_found")
            elif self.attempts >= self.max_attempts:
                self._settle("lost")
            return self._result("error", guess=guess, error=str(exc))

        self.history.append((guess, score))
        if score.exact == CODE_LENGTH:
            self._settle("won")
        elif self.attempts >= self.max_attempts:
            self._settle("lost")
        return self._result("scored", guess=guess, score=score)

    def abort(self, reason: AbortReason) -> None:
        if self.is_over:
            return
        self.reason = reason
        self._settle("aborted")

    def _settle(self, status: GameStatus) -> None:
        self.status = status
        logger.info(
            "Session ended: %s%s after %d attempt(s)",
            status,
            f" ({self.reason})" if self.reason else "",
            self.attempts,
        )
        try:
            self.source.release()
        except Exception as exc:  # status is already settled
            logger.debug("Ignoring release failure: %s", exc)

    def _result(self, kind: TurnKind, **extra) -> TurnResult:
        return TurnResult(kind=kind, status=self.status, attempts=self.attempts, **extra)
