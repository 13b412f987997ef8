"""
starting_word/eval_whole_game_sim.py

Simulate *full games* to evaluate a strategy.
Secrets are sampled from the answer set and each one is replayed with the
solver picking every guess, until solved or the round budget runs out.

Usage examples:
  python -m starting_word.eval_whole_game_sim --dict words.txt --games 200
  python -m starting_word.eval_whole_game_sim --dict words.txt --guesses answers.txt --pessimistic --probe
  python -m starting_word.eval_whole_game_sim --dict words.txt --gambling 0.25 --max-rounds 6

Prints a summary and writes one CSV row per game.
"""

from __future__ import annotations

import argparse
import csv
import statistics as stats
import time
from typing import Dict, List, Optional, Sequence

from wordle_core.data_utils import load_dictionary
from wordle_core.errors import ExhaustionError, UnknownWordError
from wordle_core.replay import DEFAULT_MAX_ROUNDS, play_word
from wordle_core.sampler import WordSampler
from wordle_core.scoring import DEFAULT_STRATEGY, Strategy, strategy_from_options
from wordle_core.vocab import WordVocab


def simulate_games(
    vocab: WordVocab,
    answers: Sequence[str],
    secrets: Sequence[str],
    strategy: Strategy = DEFAULT_STRATEGY,
    *,
    max_rounds: int = DEFAULT_MAX_ROUNDS,
    probe: bool = False,
    progress: bool = False,
) -> List[Dict[str, object]]:
    """
    Replay every secret. An exhausted round budget, or a secret missing from
    the dictionary, counts as a failed game.
    """
    rows: List[Dict[str, object]] = []
    for i, secret in enumerate(secrets, start=1):
        try:
            result = play_word(secret, vocab.words(), answers, strategy, max_rounds=max_rounds, probe=probe)
            rows.append({"secret": secret, "solved": True, "tries": result.tries,
                         "guesses": " ".join(r.guess for r in result.rounds)})
        except ExhaustionError:
            rows.append({"secret": secret, "solved": False, "tries": max_rounds, "guesses": ""})
        except UnknownWordError:
            rows.append({"secret": secret, "solved": False, "tries": 0, "guesses": ""})
        if progress and i % 10 == 0:
            print(f"Played {i}/{len(secrets)} games...", flush=True)
    return rows


def summarize(rows: List[Dict[str, object]]) -> Dict[str, float]:
    tries = [int(r["tries"]) for r in rows if r["solved"]]
    return {
        "games": len(rows),
        "solve_rate": round(len(tries) / len(rows), 4) if rows else float("nan"),
        "avg_tries": round(stats.mean(tries), 3) if tries else float("nan"),
        "median_tries": stats.median(tries) if tries else float("nan"),
        "p90_tries": stats.quantiles(tries, n=10)[8] if len(tries) >= 10 else float("nan"),
        "max_tries": max(tries) if tries else float("nan"),
    }


def _write_csv(rows: List[Dict[str, object]], path: str) -> None:
    if not rows:
        return
    fieldnames = list(rows[0].keys())
    with open(path, "w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=fieldnames)
        w.writeheader()
        w.writerows(rows)


def main(argv: Optional[List[str]] = None) -> None:
    ap = argparse.ArgumentParser(description="Whole-game Monte Carlo evaluation of a solving strategy.")
    ap.add_argument("--dict", default="words.txt", help="Word list used as guesses")
    ap.add_argument("--guesses", default=None, help="Reduced answer list (defaults to the dictionary)")
    ap.add_argument("-g", "--gambling", type=float, default=None, help="Gambling percentile in [0, 1]")
    ap.add_argument("-p", "--pessimistic", action="store_true", help="Use the worst case strategy")
    ap.add_argument("--length", type=int, default=5, help="Word length (0 = infer)")
    ap.add_argument("--games", type=int, default=100, help="Number of sampled secrets")
    ap.add_argument("--max-rounds", type=int, default=DEFAULT_MAX_ROUNDS, help="Round budget per game")
    ap.add_argument("--probe", action="store_true", help="Allow non-candidate guesses that split better")
    ap.add_argument("--seed", type=int, default=0, help="RNG seed for secret sampling")
    ap.add_argument("--out", default="whole_game_results.csv", help="Output CSV path")
    ap.add_argument("--progress", action=argparse.BooleanOptionalAction, default=True,
                    help="Show progress (use --no-progress to disable)")
    args = ap.parse_args(argv)

    strategy = strategy_from_options(args.gambling, args.pessimistic)
    vocab = load_dictionary(args.dict, args.length or None)
    answer_vocab = vocab if args.guesses is None else load_dictionary(args.guesses, vocab.word_length)
    secrets = WordSampler(answer_vocab, seed=args.seed).sample_words(args.games)

    print(f"Playing {len(secrets)} games ({strategy.name}, probe={args.probe})", flush=True)
    t0 = time.perf_counter()
    rows = simulate_games(vocab, answer_vocab.words(), secrets, strategy,
                          max_rounds=args.max_rounds, probe=args.probe, progress=args.progress)
    dt = time.perf_counter() - t0
    print(f"Done in {dt:.2f}s", flush=True)

    print(summarize(rows))
    _write_csv(rows, args.out)
    print(f"Wrote results to {args.out}")


if __name__ == "__main__":
    main()
