"""
replay.py

Play a whole game against a known secret, with the solver choosing every guess.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, NamedTuple, Optional

from wordle_core.constraints import ConstraintState
from wordle_core.errors import ExhaustionError, InvalidInputError, UnknownWordError
from wordle_core.feedback import Feedback, evaluate, is_solved
from wordle_core.ranking import rank, recommend, suggest
from wordle_core.scoring import DEFAULT_STRATEGY, Strategy

logger = logging.getLogger(__name__)

DEFAULT_MAX_ROUNDS = 20


class Round(NamedTuple):
    guess: str
    feedback: Feedback
    remaining: int


@dataclass
class ReplayResult:
    secret: str
    rounds: List[Round] = field(default_factory=list)

    @property
    def tries(self) -> int:
        return len(self.rounds)

    @property
    def solved(self) -> bool:
        return bool(self.rounds) and is_solved(self.rounds[-1].feedback)


def play_word(
    secret: str,
    dictionary: Iterable[str],
    answers: Optional[Iterable[str]] = None,
    strategy: Strategy = DEFAULT_STRATEGY,
    *,
    max_rounds: int = DEFAULT_MAX_ROUNDS,
    probe: bool = False,
    workers: Optional[int] = None,
) -> ReplayResult:
    """
    Replay a game to guess `secret`.

    Each round ranks the remaining candidates and plays the best one (or, with
    `probe=True`, a non-candidate suggestion when it splits clearly better),
    then narrows the candidates with the feedback against `secret`.

    Parameters
    ----------
    secret : str
        Word to find; must be in `dictionary`.
    dictionary : iterable of str
        Every word that may be typed as a guess.
    answers : iterable of str, optional
        Starting candidate set; defaults to `dictionary`.
    max_rounds : int
        Guesses allowed before giving up.

    Raises
    ------
    InvalidInputError
        `secret` has the wrong length.
    UnknownWordError
        `secret` is not in the dictionary.
    ContradictionError
        `secret` is not among the answers, so the candidates run out.
    ExhaustionError
        `max_rounds` guesses were played without finding `secret`.
    """
    words = list(dictionary)
    state = ConstraintState(words if answers is None else answers)
    if len(secret) != state.word_length:
        raise InvalidInputError(f"word {secret!r} must have length {state.word_length}")
    if secret not in set(words):
        raise UnknownWordError(f"word {secret!r} is not in the dictionary")

    result = ReplayResult(secret)
    while not result.solved:
        if result.tries >= max_rounds:
            raise ExhaustionError(f"could not find {secret!r} within {max_rounds} guesses")
        if probe:
            attempt = recommend(*suggest(words, state.candidates, strategy, workers))
        else:
            attempt = rank(state.candidates, state.candidates, strategy, workers)[0].word
        outcome = evaluate(secret, attempt)
        remaining = state.accept(attempt, outcome)
        result.rounds.append(Round(attempt, outcome, len(remaining)))
        logger.debug("try %d: %s -> %d remaining", result.tries, attempt, len(remaining))
    return result
