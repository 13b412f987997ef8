import csv

import pytest

from starting_word.eval import _write_csv, evaluate_first_guesses
from starting_word.eval_whole_game_sim import simulate_games, summarize
from wordle_core.scoring import WorstCase
from wordle_core.vocab import WordVocab


def test_first_guess_table(dictionary, rhymes):
    rows = evaluate_first_guesses(rhymes, dictionary)
    best = rows[0]
    assert best["guess"] == "bfhkm"
    assert best["exp_remaining"] == pytest.approx(1.0)
    assert best["worst_case"] == 1
    assert best["partitions"] == 6

    bills = next(r for r in rows if r["guess"] == "bills")
    assert bills["exp_remaining"] == pytest.approx(26 / 6)
    assert bills["worst_case"] == 5
    assert bills["partitions"] == 2


def test_first_guess_table_follows_strategy(dictionary, rhymes):
    rows = evaluate_first_guesses(rhymes, dictionary, WorstCase())
    assert [r["score"] for r in rows[:2]] == [-1.0, -5.0]


def test_first_guess_table_needs_answers():
    with pytest.raises(ValueError):
        evaluate_first_guesses([])


def test_csv_output(tmp_path, dictionary, rhymes):
    path = tmp_path / "out.csv"
    _write_csv(evaluate_first_guesses(rhymes, dictionary), str(path))
    with open(path, newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert len(rows) == len(dictionary)
    assert rows[0]["guess"] == "bfhkm"


def test_whole_game_simulation(dictionary, rhymes):
    rows = simulate_games(WordVocab(dictionary), rhymes, rhymes, probe=True)
    assert all(r["solved"] for r in rows)
    summary = summarize(rows)
    assert summary["games"] == 6
    assert summary["solve_rate"] == 1.0
    assert summary["max_tries"] == 2


def test_exhausted_games_count_as_failures(dictionary, rhymes):
    rows = simulate_games(WordVocab(dictionary), rhymes, ["bills", "pills"], max_rounds=1)
    assert [r["solved"] for r in rows] == [True, False]
    assert summarize(rows)["solve_rate"] == 0.5


def test_secret_missing_from_dictionary_counts_as_failure(dictionary, rhymes):
    rows = simulate_games(WordVocab(dictionary), rhymes + ["gills"], ["gills", "bills"])
    assert [r["solved"] for r in rows] == [False, True]
    assert rows[0]["tries"] == 0
