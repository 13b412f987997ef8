"""
ranking.py

Order guesses by how well they split the current candidate set.

Two rankings matter to a player:
- suggestions: every dictionary word, even ones already ruled out as answers
- guesses: only words still consistent with the feedback so far
"""

from __future__ import annotations

import logging
import time
from concurrent.futures import ThreadPoolExecutor
from typing import Collection, Dict, Iterable, List, NamedTuple, Optional, Tuple

from wordle_core.partition import group_sizes
from wordle_core.scoring import DEFAULT_STRATEGY, Strategy

logger = logging.getLogger(__name__)

# a suggestion must beat the best consistent guess by this much to be preferred
SUGGESTION_MARGIN = 0.005


class ScoredGuess(NamedTuple):
    word: str
    score: float


def score_guess(guess: str, candidates: Collection[str], strategy: Strategy = DEFAULT_STRATEGY) -> float:
    return strategy.score(group_sizes(guess, candidates), len(candidates))


def score_guesses(
    dictionary: Iterable[str],
    candidates: Collection[str],
    strategy: Strategy = DEFAULT_STRATEGY,
    workers: Optional[int] = None,
) -> Dict[str, float]:
    """
    Score every dictionary word against `candidates`.

    With `workers` > 1 the per-guess work is spread over a thread pool. Each
    task only reads the candidate snapshot and returns its own score.
    """
    words = list(dict.fromkeys(dictionary))
    pool = frozenset(candidates)
    t0 = time.perf_counter()
    if workers is not None and workers > 1 and len(words) > 1:
        with ThreadPoolExecutor(max_workers=workers) as executor:
            scores = list(executor.map(lambda g: score_guess(g, pool, strategy), words))
    else:
        scores = [score_guess(g, pool, strategy) for g in words]
    logger.debug(
        "scored %d guesses against %d candidates (%s) in %.3fs",
        len(words), len(pool), strategy.name, time.perf_counter() - t0,
    )
    return dict(zip(words, scores))


def _ordered(scores: Dict[str, float], words: Iterable[str]) -> List[ScoredGuess]:
    ranked = [ScoredGuess(w, scores[w]) for w in set(words)]
    # best score first, then alphabetical so ties are stable across runs
    ranked.sort(key=lambda sg: (-sg.score, sg.word))
    return ranked


def rank(
    dictionary: Iterable[str],
    candidates: Collection[str],
    strategy: Strategy = DEFAULT_STRATEGY,
    workers: Optional[int] = None,
) -> List[ScoredGuess]:
    """Rank dictionary words against candidates, best first, ties broken alphabetically."""
    scores = score_guesses(dictionary, candidates, strategy, workers)
    return _ordered(scores, scores)


def suggest(
    dictionary: Iterable[str],
    candidates: Collection[str],
    strategy: Strategy = DEFAULT_STRATEGY,
    workers: Optional[int] = None,
) -> Tuple[List[ScoredGuess], List[ScoredGuess]]:
    """
    Return (suggestions, guesses) for the current round.

    Scores computed for the dictionary are reused for the candidates; only
    candidates missing from the dictionary are scored separately.
    """
    scores = score_guesses(dictionary, candidates, strategy, workers)
    missing = [c for c in candidates if c not in scores]
    if missing:
        scores.update(score_guesses(missing, candidates, strategy, workers))
    suggestions = _ordered(scores, (w for w in scores if w not in missing))
    guesses = _ordered(scores, candidates)
    return suggestions, guesses


def recommend(
    suggestions: List[ScoredGuess],
    guesses: List[ScoredGuess],
    margin: float = SUGGESTION_MARGIN,
) -> str:
    """
    Pick the word to play next.

    The best consistent guess might be the answer, so a suggestion only wins
    when its score is better by at least `margin`.
    """
    if not guesses:
        raise ValueError("no consistent guesses to choose from")
    best_guess = guesses[0]
    if suggestions and suggestions[0].score >= best_guess.score + margin:
        return suggestions[0].word
    return best_guess.word
