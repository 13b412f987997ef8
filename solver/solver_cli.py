"""
solver/solver_cli.py

Wordle solver driver.

Interactive mode (default):
- The solver prints the best suggestions (any dictionary word) and guesses
  (words still consistent with the feedback).
- You play a word in the game and type one line: the word, a space, the marks.
- Marks: '-' = absent, '+' = present elsewhere, the letter itself = right spot.
  e.g. for guess 'crane':  c-+--   (c green, r gray, a yellow, n and e gray)
  Digits '21001' or a list '[2, 1, 0, 0, 1]' are accepted too.

Replay mode (--word):
- The solver plays a whole game against the given secret and prints each try.

Run:
  python -m solver.solver_cli --dict words.txt
  python -m solver.solver_cli --dict words.txt --guesses answers.txt --word cigar

Shortcuts:
  quit / q / exit  -> exit
"""
from __future__ import annotations

import argparse
import logging
import re
import sys
from typing import Iterable, List, Optional, TextIO, Tuple

from wordle_core.constraints import ConstraintState
from wordle_core.data_utils import load_dictionary
from wordle_core.errors import ContradictionError, ExhaustionError
from wordle_core.feedback import Feedback, Mark
from wordle_core.ranking import ScoredGuess, recommend, suggest
from wordle_core.replay import DEFAULT_MAX_ROUNDS, play_word
from wordle_core.scoring import Strategy, strategy_from_options
from wordle_core.vocab import WordVocab

SHOWN_GUESSES = 10
QUIT_WORDS = {"q", "quit", "exit"}

_SYMBOLS = {"-": Mark.MISS, "+": Mark.PRESENT}
_DIGITS = {"0": Mark.MISS, "1": Mark.PRESENT, "2": Mark.HIT}


def parse_feedback(s: str, length: int = 5) -> Feedback:
    """Parse typed marks into a feedback tuple.
    Accepted forms:
      - symbols: '-' absent, '+' present, any letter = right position
      - digits:  0/1/2
      - list:   [0, 1, 2, 2, 0]
    Raises ValueError on invalid input.
    """
    s = s.strip().lower()
    if s.startswith("[") and s.endswith("]"):
        nums = re.findall(r"[012]", s)
        if len(nums) != length:
            raise ValueError(f"list form must contain exactly {length} 0/1/2 values")
        return tuple(_DIGITS[x] for x in nums)

    if len(s) != length:
        raise ValueError(f"feedback must have {length} marks")
    if s.isdigit():
        try:
            return tuple(_DIGITS[ch] for ch in s)
        except KeyError as e:
            raise ValueError("digit feedback must use only 0/1/2") from e
    marks = []
    for ch in s:
        if ch in _SYMBOLS:
            marks.append(_SYMBOLS[ch])
        elif ch.isalpha():
            marks.append(Mark.HIT)
        else:
            raise ValueError(f"unexpected mark {ch!r}; use '-', '+' or a letter")
    return tuple(marks)


def format_feedback(feedback: Feedback, guess: str) -> str:
    """Render feedback in the same notation `parse_feedback` reads."""
    out = []
    for mark, ch in zip(feedback, guess):
        if mark is Mark.HIT:
            out.append(ch)
        elif mark is Mark.PRESENT:
            out.append("+")
        else:
            out.append("-")
    return "".join(out)


def parse_line(line: str, length: int = 5) -> Tuple[str, Feedback]:
    """Split one interactive line 'word marks' into (word, feedback)."""
    parts = line.split()
    if len(parts) != 2:
        raise ValueError("expected '<word> <marks>', e.g. 'crane c-+--'")
    word = parts[0].lower()
    if len(word) != length or not word.isalpha():
        raise ValueError(f"word must be {length} letters")
    return word, parse_feedback(parts[1], length)


def _format_ranked(ranked: List[ScoredGuess], shown: int) -> str:
    return ", ".join(f"{sg.word} ({sg.score:.3f})" for sg in ranked[:shown])


def print_rankings(
    suggestions: List[ScoredGuess],
    guesses: List[ScoredGuess],
    shown: int = SHOWN_GUESSES,
    out: Optional[TextIO] = None,
) -> None:
    out = out or sys.stdout
    print(f"Suggestions: {len(suggestions)} [{_format_ranked(suggestions, shown)}]", file=out, flush=True)
    print(f"Guesses: {len(guesses)} [{_format_ranked(guesses, shown)}]", file=out, flush=True)


def interactive(
    vocab: WordVocab,
    answers: Iterable[str],
    strategy: Strategy,
    *,
    shown: int = SHOWN_GUESSES,
    workers: Optional[int] = None,
    lines: Optional[Iterable[str]] = None,
    out: Optional[TextIO] = None,
) -> ConstraintState:
    """
    Human-in-the-loop session. Reads 'word marks' lines until EOF or quit and
    returns the final state.
    """
    out = out or sys.stdout
    state = ConstraintState(answers)
    words = vocab.words()

    def show() -> None:
        suggestions, guesses = suggest(words, state.candidates, strategy, workers)
        print_rankings(suggestions, guesses, shown, out)
        if len(guesses) <= shown:
            print("Candidates:", ", ".join(sg.word for sg in guesses), file=out, flush=True)
        print(f"Suggest you try {recommend(suggestions, guesses)!r}", file=out, flush=True)

    show()
    for raw in (sys.stdin if lines is None else lines):
        line = raw.strip()
        if not line:
            continue
        if line.lower() in QUIT_WORDS:
            print("bye!", file=out, flush=True)
            break
        try:
            guess, feedback = parse_line(line, state.word_length)
        except ValueError as e:
            print("Invalid input:", e, file=out, flush=True)
            continue

        print(f"Got word {guess} and marks: {format_feedback(feedback, guess)}", file=out, flush=True)
        try:
            state.accept(guess, feedback)
        except ContradictionError as e:
            print(f"{e}. Starting a new game.", file=out, flush=True)
            state.reset()
            show()
            continue

        if state.solution is not None:
            print(f"Solved! The answer is: {state.solution}", file=out, flush=True)
            state.reset()
            print("New game.", file=out, flush=True)
        show()
    return state


def replay(
    word: str,
    vocab: WordVocab,
    answers: Iterable[str],
    strategy: Strategy,
    *,
    max_rounds: int = DEFAULT_MAX_ROUNDS,
    probe: bool = False,
    workers: Optional[int] = None,
    out: Optional[TextIO] = None,
) -> int:
    """Fixed-target mode: play the whole game and return the number of tries."""
    out = out or sys.stdout
    result = play_word(
        word,
        vocab.words(),
        answers,
        strategy,
        max_rounds=max_rounds,
        probe=probe,
        workers=workers,
    )
    for i, rnd in enumerate(result.rounds, 1):
        print(
            f"Try {i}, word {rnd.guess!r}: {format_feedback(rnd.feedback, rnd.guess)} "
            f"({rnd.remaining} remaining)",
            file=out,
            flush=True,
        )
    print(f"Got it on try {result.tries}! The answer is: {word!r}", file=out, flush=True)
    return result.tries


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="A Wordle solver")
    ap.add_argument("-d", "--dict", default="words.txt", help="Path to the word dictionary to use")
    ap.add_argument("--guesses", default=None, help="Path to a reduced answer list (defaults to the dictionary)")
    ap.add_argument(
        "-g", "--gambling", type=float, default=None,
        help="Use a gambling strategy with percentile P in [0, 1] (instead of best average case)",
    )
    ap.add_argument(
        "-p", "--pessimistic", action="store_true",
        help="Use the worst case strategy (instead of best average case). Good against Absurdle",
    )
    ap.add_argument("-w", "--word", default=None, help="Disable interactive mode and replay a game to guess this word")
    ap.add_argument("--length", type=int, default=5, help="Word length (0 = most common length in the dictionary)")
    ap.add_argument("--shown", type=int, default=SHOWN_GUESSES, help="How many ranked words to print")
    ap.add_argument("--max-rounds", type=int, default=DEFAULT_MAX_ROUNDS, help="Give up replay after this many tries")
    ap.add_argument("--probe", action="store_true", help="In replay, allow non-candidate words that split better")
    ap.add_argument("--workers", type=int, default=None, help="Threads used to score guesses")
    ap.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(name)s: %(message)s")

    try:
        strategy = strategy_from_options(args.gambling, args.pessimistic)
    except ValueError as e:
        print("Wrong set of options:", e, file=sys.stderr)
        return 1

    try:
        word_len = args.length or None
        vocab = load_dictionary(args.dict, word_len)
        answers = vocab.words() if args.guesses is None else load_dictionary(args.guesses, vocab.word_length).words()

        if args.word is None:
            interactive(vocab, answers, strategy, shown=args.shown, workers=args.workers)
            return 0
        replay(
            args.word.lower(),
            vocab,
            answers,
            strategy,
            max_rounds=args.max_rounds,
            probe=args.probe,
            workers=args.workers,
        )
        return 0
    except ContradictionError as e:
        print("Stumped, cannot figure it out:", e, file=sys.stderr)
    except ExhaustionError as e:
        print("Gave up:", e, file=sys.stderr)
    except (ValueError, KeyError, OSError) as e:
        print("Error:", e, file=sys.stderr)
    return 1


if __name__ == "__main__":
    sys.exit(main())
