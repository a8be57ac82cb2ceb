"""
Text front-end for both game variants.

    mastermind       -> local game, secret generated in this process
    mastermind-api   -> game hosted by the remote service (api_client.API_URL)

One line of input per turn; 'exit' (any case) quits at any prompt.
"""

import sys
from typing import Callable, Optional

from .config import configure_logging, CLI_LOG_LEVEL
from .engine import format_feedback
from .errors import MastermindError
from .session import GameSession, TurnResult
from .sources import LocalSecretSource, RemoteSecretSource, SecretSource
from .types import CODE_LENGTH, DIGIT_MIN, DIGIT_MAX
from .validator import format_code

BANNER = f"""\
---------------------------
        Mastermind
---------------------------
{{mode}}Rules:
- Each guess is a {CODE_LENGTH}-digit code using digits {DIGIT_MIN}-{DIGIT_MAX}.
- Type 'exit' to quit at any time.
- Feedback:
  - B: right digit in the right position
  - W: right digit in the wrong position
Example: BBBW means 3 blacks and 1 white."""

INVALID_INPUT = (
    f"Invalid input. Example: 1234 (exactly {CODE_LENGTH} digits, "
    f"each between {DIGIT_MIN} and {DIGIT_MAX})."
)


def _read_line(prompt: str) -> Optional[str]:
    try:
        return input(prompt)
    except EOFError:
        return None


class MastermindCLI:
    """
    Drives a GameSession from a line reader and prints to `write`.
    Both are injectable so tests can script a whole game.
    """

    def __init__(
        self,
        source: SecretSource,
        read_line: Callable[[str], Optional[str]] = _read_line,
        write: Callable[[str], None] = print,
        mode_label: Optional[str] = None,
    ):
        self.session = GameSession(source)
        self.read_line = read_line
        self.write = write
        self.mode_label = mode_label

    def run(self) -> int:
        mode = f"{self.mode_label}\n" if self.mode_label else ""
        self.write(BANNER.format(mode=mode))

        try:
            game_id = self.session.start()
        except MastermindError as exc:
            self.write(f"Failed to create game: {exc}")
            return 1
        if game_id:
            self.write(f"New game created. id={game_id}")

        try:
            self._loop()
        except KeyboardInterrupt:
            self.session.abort("interrupted")
        finally:
            # anything else escaping the loop still settles (and releases) the session
            if not self.session.is_over:
                self.session.abort("interrupted")

        self.write(self.summary())
        return 0

    def _loop(self) -> None:
        while not self.session.is_over:
            prompt = (
                f"\nGuess {self.session.attempts + 1}/{self.session.max_attempts} - "
                f"enter a {CODE_LENGTH}-digit code using digits {DIGIT_MIN}-{DIGIT_MAX} "
                "(or type 'exit'): "
            )
            line = self.read_line(prompt)
            if line is None:
                self.session.abort("end_of_input")
                return
            self._report_turn(self.session.play_turn(line))

    def _report_turn(self, turn: TurnResult) -> None:
        if turn.kind == "invalid":
            self.write(INVALID_INPUT)
        elif turn.kind == "scored":
            score = turn.score
            self.write(f"Result: {format_feedback(score)}  (B={score.exact}, W={score.partial})")
        elif turn.kind == "error":
            label = "Internal error" if self.session.reason == "contract_violation" else "API error"
            self.write(f"{label}: {turn.error}")

    def summary(self) -> str:
        session = self.session
        secret = session.revealed_secret()
        secret_text = f" The secret was {format_code(secret)}." if secret else ""

        if session.status == "won":
            return f"You win.{secret_text} Attempts: {session.attempts}."
        if session.status == "lost":
            return f"Out of attempts. You lost.{secret_text}"
        if session.reason == "exit":
            return "Exit. Goodbye."
        if session.reason == "end_of_input":
            return "\nExiting."
        if session.reason == "interrupted":
            return "\nInterrupted. Exiting."
        if session.reason == "game_not_found":
            return "Game not found on server. Exiting."
        if session.reason == "contract_violation":
            return "The game reached an inconsistent state and was stopped."
        return "Game over."


def main() -> None:
    configure_logging(CLI_LOG_LEVEL)
    sys.exit(MastermindCLI(LocalSecretSource()).run())


def main_api() -> None:
    configure_logging(CLI_LOG_LEVEL)
    sys.exit(MastermindCLI(RemoteSecretSource(), mode_label="API-backed mode").run())
