"""
Pure game logic (no HTTP, no storage, no I/O).
We compute two feedback numbers for each guess:
- exact (B): how many indices are exactly correct (right digit, right place)
- partial (W): how many of the remaining digits appear in the secret, each
  secret/guess digit used at most once

Duplicates are allowed in both the secret and the guess.
"""

from .errors import ContractViolation
from .types import Code, ScoreResult, DIGIT_MIN, DIGIT_MAX

def score_guess(secret: Code, guess: Code) -> ScoreResult:
    """
    Example:
      secret = [1, 1, 1, 1]
      guess  = [1, 1, 2, 2]
      exact   = 2  (the first two 1s)
      partial = 0  (the other 1s in the secret have no partner left in the guess)
    """

    # 0. Validate lengths match
    n = len(secret)
    if n == 0 or len(guess) != n:
        raise ContractViolation("Secret and guess must be the same non-zero length.")

    # 1. Count exact position matches, keep the leftovers for step 2
    exact = 0
    secret_rest = []
    guess_rest = []
    for s, g in zip(secret, guess):
        if s == g:
            exact += 1
        else:
            secret_rest.append(s)
            guess_rest.append(g)

    # 2. Frequency tables over the digit range, leftovers only
    size = DIGIT_MAX - DIGIT_MIN + 1
    secret_counts = [0] * size
    guess_counts = [0] * size
    for digit in secret_rest + guess_rest:
        if not DIGIT_MIN <= digit <= DIGIT_MAX:
            raise ContractViolation(f"Digit {digit} is outside {DIGIT_MIN}..{DIGIT_MAX}.")
    for digit in secret_rest:
        secret_counts[digit - DIGIT_MIN] += 1
    for digit in guess_rest:
        guess_counts[digit - DIGIT_MIN] += 1

    # 3. Overlap is the sum of the smaller count for each digit
    partial = 0
    for s_count, g_count in zip(secret_counts, guess_counts):
        partial += min(s_count, g_count)

    return ScoreResult(exact, partial)

def format_feedback(result: ScoreResult) -> str:
    # "BBW" for 2 exact + 1 partial, a dash when nothing matched
    pegs = "B" * result.exact + "W" * result.partial
    return pegs if pegs else "-"
