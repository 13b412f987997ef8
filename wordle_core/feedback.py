"""
Feedback utilities for Wordle.

A feedback is a tuple of `Mark` values, one per position of the guess:
- Mark.HIT     = letter matches the secret at that position (green)
- Mark.PRESENT = letter occurs elsewhere in the secret (yellow)
- Mark.MISS    = letter absent, or over-used relative to the secret counts (gray)

Feedback tuples are hashable and are used directly as partition keys.
"""

from __future__ import annotations

from collections import Counter
from enum import Enum
from typing import Tuple

from wordle_core.errors import InvalidInputError


class Mark(Enum):
    MISS = 0
    PRESENT = 1
    HIT = 2


Feedback = Tuple[Mark, ...]


def evaluate(secret: str, guess: str) -> Feedback:
    """
    Compute the Wordle feedback for `guess` against `secret`.

    Duplicate letters follow the two-pass rule:

    1) HITS PASS: every position where guess and secret agree is marked HIT,
       and that letter is consumed from the secret's letter counter.
    2) PRESENT PASS: every remaining position is marked PRESENT while the
       counter still has that letter available (consuming it), MISS otherwise.

    So 'lolly' against 'knoll' gives exactly two non-MISS 'l' marks, the same
    as the number of 'l' in the secret.

    Raises
    ------
    InvalidInputError
        If the two words do not have the same length.
    """
    if len(secret) != len(guess):
        raise InvalidInputError(
            f"guess length ({len(guess)}) != secret length ({len(secret)})"
        )

    pattern = [Mark.MISS] * len(guess)
    remaining = Counter(secret)

    # Pass 1: mark hits and decrement availability
    for i, (g, s) in enumerate(zip(guess, secret)):
        if g == s:
            pattern[i] = Mark.HIT
            remaining[g] -= 1

    # Pass 2: mark presents where counts allow (else miss)
    for i, g in enumerate(guess):
        if pattern[i] is Mark.MISS and remaining[g] > 0:
            pattern[i] = Mark.PRESENT
            remaining[g] -= 1

    return tuple(pattern)


def all_hits(length: int) -> Feedback:
    """The feedback of a solved round."""
    return (Mark.HIT,) * length


def is_solved(feedback: Feedback) -> bool:
    return len(feedback) > 0 and all(m is Mark.HIT for m in feedback)


def pattern_to_int(feedback: Feedback) -> int:
    """
    Encode a feedback of length L into a single integer in [0, 3**L).

    Base-3 positional: value = value * 3 + mark, left to right. Distinct
    feedbacks of the same length map to distinct integers.
    """
    value = 0
    for mark in feedback:
        if not isinstance(mark, Mark):
            raise InvalidInputError(f"not a Mark: {mark!r}")
        value = value * 3 + mark.value
    return value


def int_to_pattern(value: int, length: int) -> Feedback:
    """Inverse of `pattern_to_int` for a known word length."""
    if value < 0 or value >= 3 ** length:
        raise InvalidInputError(f"code {value} out of range for length {length}")
    marks = []
    for _ in range(length):
        value, digit = divmod(value, 3)
        marks.append(Mark(digit))
    return tuple(reversed(marks))


def consistent_with(word: str, guess: str, feedback: Feedback) -> bool:
    """
    True if `word`, taken as the secret, would have produced `feedback` for `guess`.

    Delegates to `evaluate` so filtering can never drift from scoring.
    """
    if len(feedback) != len(guess):
        raise InvalidInputError("feedback length must match the guess length")
    return evaluate(word, guess) == tuple(feedback)
