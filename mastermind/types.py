"""
Labels and fixed game constants.
"""

from typing import List, Literal, NamedTuple

CODE_LENGTH = 4
DIGIT_MIN = 1
DIGIT_MAX = 6
MAX_ATTEMPTS = 10  # client-side cap; the remote service does not enforce it

Digit = int  # 1 -> 6
Code = List[Digit]  # 4 digit secret or guess
GameStatus = Literal["ongoing", "won", "lost", "aborted"]
AbortReason = Literal["exit", "end_of_input", "interrupted", "game_not_found", "contract_violation"]


class ScoreResult(NamedTuple):
    exact: int    # right digit, right place (B)
    partial: int  # right digit, wrong place (W)
