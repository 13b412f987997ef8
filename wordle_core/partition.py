"""
partition.py

Group a candidate set by the feedback each candidate would produce against a guess.
"""

from __future__ import annotations

from collections import defaultdict
from typing import Dict, Iterable, List

from wordle_core.feedback import Feedback, evaluate


def partition(guess: str, candidates: Iterable[str]) -> Dict[Feedback, List[str]]:
    """
    Map each feedback to the candidates that would yield it for `guess`.

    Every candidate lands in exactly one group, so the groups are disjoint and
    their union is the input. Group contents keep the input iteration order.
    """
    groups: Dict[Feedback, List[str]] = defaultdict(list)
    for c in candidates:
        groups[evaluate(c, guess)].append(c)
    return dict(groups)


def group_sizes(guess: str, candidates: Iterable[str]) -> List[int]:
    """Size distribution of `partition(guess, candidates)`, which is all the scorer needs."""
    counts: Dict[Feedback, int] = defaultdict(int)
    for c in candidates:
        counts[evaluate(c, guess)] += 1
    return list(counts.values())
