"""
constraints.py

Keeps track of the feedback received so far and the candidates it still allows.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import FrozenSet, Iterable, List, Optional, Tuple

from wordle_core.errors import ContradictionError, EmptyDictionaryError, InvalidInputError
from wordle_core.feedback import Feedback, Mark, evaluate

logger = logging.getLogger(__name__)


class GameStatus(Enum):
    INITIAL = "initial"
    IN_PROGRESS = "in_progress"
    SOLVED = "solved"
    EXHAUSTED = "exhausted"


class ConstraintState:
    """
    Candidate set of one game plus the (guess, feedback) history that produced it.

    The candidate set is a frozenset that is replaced on every `accept`, so a
    ranking call can keep reading the snapshot it was given. Only one driver
    should call `accept`/`reset`.
    """

    def __init__(self, words: Iterable[str]):
        self._initial: FrozenSet[str] = frozenset(words)
        if not self._initial:
            raise EmptyDictionaryError("no candidate words to start a game with")
        lengths = {len(w) for w in self._initial}
        if len(lengths) != 1:
            raise InvalidInputError(f"candidate words have mixed lengths: {sorted(lengths)}")
        self.word_length: int = lengths.pop()
        self.reset()

    def reset(self) -> None:
        """Start a new game from the full answer set."""
        self._candidates: FrozenSet[str] = self._initial
        self._history: List[Tuple[str, Feedback]] = []
        self._status = GameStatus.INITIAL

    def accept(self, guess: str, feedback: Feedback) -> FrozenSet[str]:
        """
        Apply one round of feedback and return the new candidate set.

        - Green = the letter is fixed at that slot
        - Yellow = the letter is in the word but not at that slot
        - Gray = the letter is absent, or already used up by other marks

        A candidate survives iff it would have produced exactly `feedback`.

        Raises
        ------
        InvalidInputError
            Guess or feedback of the wrong length, feedback that is not made
            of Mark values, or the game is exhausted.
        ContradictionError
            No candidate is consistent with the history; the state is left EXHAUSTED.
        """
        if self._status is GameStatus.EXHAUSTED:
            raise InvalidInputError("game is exhausted; reset before accepting more feedback")
        feedback = tuple(feedback)
        if not all(isinstance(m, Mark) for m in feedback):
            raise InvalidInputError("feedback elements must be Mark values")
        if len(guess) != self.word_length or len(feedback) != self.word_length:
            raise InvalidInputError(
                f"guess and feedback must both have length {self.word_length}"
            )

        remaining = frozenset(c for c in self._candidates if evaluate(c, guess) == feedback)

        self._history.append((guess, feedback))
        self._candidates = remaining

        if not remaining:
            self._status = GameStatus.EXHAUSTED
            raise ContradictionError(
                f"no candidate is consistent with feedback for {guess!r}; check your inputs"
            )
        self._status = GameStatus.SOLVED if len(remaining) == 1 else GameStatus.IN_PROGRESS
        logger.debug("accepted %s -> %d candidates (%s)", guess, len(remaining), self._status.value)
        return remaining

    # -------------------------
    # Introspection helpers
    # -------------------------
    @property
    def candidates(self) -> FrozenSet[str]:
        return self._candidates

    @property
    def history(self) -> List[Tuple[str, Feedback]]:
        return list(self._history)

    @property
    def status(self) -> GameStatus:
        return self._status

    @property
    def solution(self) -> Optional[str]:
        if self._status is GameStatus.SOLVED:
            return next(iter(self._candidates))
        return None


def filter_candidates(words: Iterable[str], history: Iterable[Tuple[str, Feedback]]) -> List[str]:
    """
    Keep only candidates that match *all* (guess, feedback) pairs in history.
    Uses evaluate for correctness and preserves the input order.
    """
    history = [(g, tuple(f)) for g, f in history]
    candidates = []
    for w in words:
        if all(evaluate(w, guess) == fb for guess, fb in history):
            candidates.append(w)
    return candidates
