"""
Turns one raw line of player input into a Code, or rejects it.

Rules, in order:
1. trim surrounding whitespace
2. exactly CODE_LENGTH characters
3. every character is a decimal digit
4. every digit is between DIGIT_MIN and DIGIT_MAX

A single bad character invalidates the whole guess.
"""

from typing import Optional

from .types import Code, CODE_LENGTH, DIGIT_MIN, DIGIT_MAX

EXIT_COMMAND = "exit"

_ASCII_DIGITS = frozenset("0123456789")


def parse_guess(raw: str) -> Optional[Code]:
    text = raw.strip()
    if len(text) != CODE_LENGTH:
        return None
    # str.isdigit() also accepts things like superscripts, so check explicitly
    if not all(ch in _ASCII_DIGITS for ch in text):
        return None

    digits = [int(ch) for ch in text]
    if not all(DIGIT_MIN <= d <= DIGIT_MAX for d in digits):
        return None
    return digits


def is_exit_command(raw: str) -> bool:
    return raw.strip().lower() == EXIT_COMMAND


def format_code(code: Code) -> str:
    """[1, 2, 3, 4] -> "1234" (also the wire form of a guess)."""
    return "".join(str(d) for d in code)
