"""
scoring.py

Reduce a partition's group-size distribution to one comparable number.

Every strategy follows the same convention: higher is better, and the score is
the negative of a "how many candidates would remain" figure:

- ExpectedCase:  -(sum of size**2) / total, i.e. minus the expected remaining
                 count when the secret is uniform over the candidates.
- WorstCase:     -(largest group), the objective against an adversarial host.
- Percentile(p): -(size of the group reached when the cumulative count of the
                 ascending-sorted groups first reaches p * total).

A strategy is chosen once per run and passed around as an immutable value.
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from fractions import Fraction
from typing import Optional, Sequence

import numpy as np

from wordle_core.errors import ScoringUndefinedError


class Strategy(ABC):
    name: str = "strategy"

    def score(self, sizes: Sequence[int], total: int) -> float:
        """Validate the distribution, then defer to `_reduce`."""
        if total <= 0 or len(sizes) == 0:
            raise ScoringUndefinedError("cannot score a guess over an empty candidate set")
        arr = np.asarray(sizes, dtype=np.int64)
        return float(self._reduce(arr, total))

    @abstractmethod
    def _reduce(self, sizes: np.ndarray, total: int) -> float:
        ...


@dataclass(frozen=True)
class ExpectedCase(Strategy):
    name: str = "expected-case"

    def _reduce(self, sizes: np.ndarray, total: int) -> float:
        return -float(np.sum(sizes * sizes)) / total


@dataclass(frozen=True)
class WorstCase(Strategy):
    name: str = "worst-case"

    def _reduce(self, sizes: np.ndarray, total: int) -> float:
        return -float(sizes.max())


@dataclass(frozen=True)
class Percentile(Strategy):
    p: float = 1.0
    name: str = "percentile"

    def __post_init__(self) -> None:
        if not 0.0 <= self.p <= 1.0:
            raise ValueError(f"gambling percentile must be within [0, 1], got {self.p}")

    def _reduce(self, sizes: np.ndarray, total: int) -> float:
        ordered = np.sort(sizes)
        cumulative = np.cumsum(ordered)
        # first group whose cumulative count reaches p * total; counts are
        # integers, so the exact rational threshold can be rounded up
        threshold = math.ceil(Fraction(self.p).limit_denominator() * total)
        idx = int(np.searchsorted(cumulative, threshold, side="left"))
        idx = min(idx, len(ordered) - 1)
        return -float(ordered[idx])


DEFAULT_STRATEGY = ExpectedCase()


def strategy_from_options(gambling: Optional[float] = None, pessimistic: bool = False) -> Strategy:
    """
    Resolve the mutually exclusive command-line options into a strategy.

    Raises ValueError when both a gambling percentile and pessimistic mode are requested.
    """
    if gambling is not None and pessimistic:
        raise ValueError("--gambling and --pessimistic are mutually exclusive")
    if gambling is not None:
        return Percentile(float(gambling))
    if pessimistic:
        return WorstCase()
    return DEFAULT_STRATEGY
