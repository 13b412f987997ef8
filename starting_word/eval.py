"""
starting_word/eval.py

Score candidate first guesses by how well they split the answer set.

Metrics per guess:
- score: the chosen strategy's score (higher is better)
- exp_remaining: expected remaining candidates after the first feedback
- worst_case: size of the largest bucket (lower is better)
- partitions: number of distinct feedback patterns induced

Usage:
  python -m starting_word.eval --dict words.txt --guesses answers.txt
  python -m starting_word.eval --dict words.txt --pessimistic --top 30 --limit-guesses 500
"""

from __future__ import annotations

import argparse
import csv
import time
from typing import Dict, List, Optional, Sequence

from wordle_core.data_utils import load_dictionary
from wordle_core.partition import group_sizes
from wordle_core.ranking import rank
from wordle_core.scoring import DEFAULT_STRATEGY, ExpectedCase, Strategy, WorstCase, strategy_from_options

FIELDNAMES = ["guess", "score", "exp_remaining", "worst_case", "partitions"]


def evaluate_first_guesses(
    answers: Sequence[str],
    guesses: Optional[Sequence[str]] = None,
    strategy: Strategy = DEFAULT_STRATEGY,
    *,
    workers: Optional[int] = None,
) -> List[Dict[str, float]]:
    """
    Evaluate each candidate first guess against the full answer set.

    Parameters
    ----------
    answers : list[str]
        The set of possible secrets.
    guesses : list[str] | None
        Candidate guesses to score. If None, uses `answers`.
    strategy : Strategy
        Decides the order of the rows.

    Returns
    -------
    list[dict]
        Records best first, with keys 'guess', 'score', 'exp_remaining',
        'worst_case', 'partitions'.
    """
    if not answers:
        raise ValueError("answers must be non-empty")
    pool = guesses if guesses is not None else answers
    N = len(answers)

    results: List[Dict[str, float]] = []
    for sg in rank(pool, answers, strategy, workers):
        sizes = group_sizes(sg.word, answers)
        results.append(
            {
                "guess": sg.word,
                "score": sg.score,
                "exp_remaining": -ExpectedCase().score(sizes, N),
                "worst_case": int(-WorstCase().score(sizes, N)),
                "partitions": len(sizes),
            }
        )
    return results


def _print_top(results: List[Dict[str, float]], k: int = 20) -> None:
    print(f"\nTop {k} starting words:")
    print(f"{'rank':>4}  {'guess':<8}  {'score':>9}  {'exp_rem':>8}  {'worst':>5}  {'parts':>6}")
    for idx, r in enumerate(results[:k], start=1):
        print(
            f"{idx:>4}  {r['guess']:<8}  {r['score']:>9.3f}  {r['exp_remaining']:>8.2f}  {int(r['worst_case']):>5}  {int(r['partitions']):>6}"
        )


def _write_csv(results: List[Dict[str, float]], path: str) -> None:
    with open(path, mode="w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=FIELDNAMES)
        writer.writeheader()
        for row in results:
            writer.writerow(row)


def main(argv: Optional[List[str]] = None) -> None:
    ap = argparse.ArgumentParser(description="Rank opening guesses against the whole answer set.")
    ap.add_argument("--dict", default="words.txt", help="Word list used as guesses")
    ap.add_argument("--guesses", default=None, help="Reduced answer list (defaults to the dictionary)")
    ap.add_argument("-g", "--gambling", type=float, default=None, help="Gambling percentile in [0, 1]")
    ap.add_argument("-p", "--pessimistic", action="store_true", help="Rank by worst case")
    ap.add_argument("--length", type=int, default=5, help="Word length (0 = infer)")
    ap.add_argument("--limit-guesses", type=int, default=None, help="Evaluate only the first K guesses (for speed)")
    ap.add_argument("--workers", type=int, default=None, help="Threads used to score guesses")
    ap.add_argument("--top", type=int, default=20, help="How many top rows to print")
    ap.add_argument("--out", default="starting_word_results.csv", help="Output CSV path")
    args = ap.parse_args(argv)

    strategy = strategy_from_options(args.gambling, args.pessimistic)
    vocab = load_dictionary(args.dict, args.length or None)
    answers = vocab.words() if args.guesses is None else load_dictionary(args.guesses, vocab.word_length).words()
    guesses = vocab.words()
    if args.limit_guesses is not None:
        guesses = guesses[: args.limit_guesses]

    print(f"Scoring {len(guesses)} guesses against {len(answers)} answers ({strategy.name})...", flush=True)
    t0 = time.perf_counter()
    results = evaluate_first_guesses(answers, guesses, strategy, workers=args.workers)
    dt = time.perf_counter() - t0
    print(f"Done in {dt:.2f}s", flush=True)
    _print_top(results, k=args.top)
    _write_csv(results, args.out)
    print(f"Wrote results to {args.out}")


if __name__ == "__main__":
    main()
