import pytest

from wordle_core.errors import ContradictionError, ExhaustionError, InvalidInputError, UnknownWordError
from wordle_core.feedback import is_solved
from wordle_core.replay import play_word
from wordle_core.scoring import Percentile, WorstCase


def test_replay_finds_every_secret(dictionary, rhymes):
    for secret in rhymes:
        result = play_word(secret, dictionary, rhymes)
        assert result.solved
        assert result.rounds[-1].guess == secret
        assert result.rounds[-1].remaining == 1
        assert result.tries <= len(rhymes)


def test_replay_plays_only_candidates_by_default(dictionary, rhymes):
    # ties between rhymes go alphabetically, so 'pills' comes last
    result = play_word("pills", dictionary, rhymes)
    assert [r.guess for r in result.rounds] == rhymes
    assert [r.remaining for r in result.rounds] == [5, 4, 3, 2, 1, 1]
    assert is_solved(result.rounds[-1].feedback)


def test_probe_uses_better_splitting_word(dictionary, rhymes):
    result = play_word("pills", dictionary, rhymes, probe=True)
    assert [r.guess for r in result.rounds] == ["bfhkm", "pills"]
    assert result.tries == 2


@pytest.mark.parametrize("strategy", [WorstCase(), Percentile(0.2)])
def test_other_strategies_also_converge(dictionary, rhymes, strategy):
    assert play_word("mills", dictionary, rhymes, strategy, probe=True).solved


def test_answers_default_to_dictionary(rhymes):
    assert play_word("hills", rhymes).solved


def test_round_budget_exhaustion(dictionary, rhymes):
    with pytest.raises(ExhaustionError):
        play_word("pills", dictionary, rhymes, max_rounds=1)


def test_secret_must_be_known_and_right_length(dictionary, rhymes):
    with pytest.raises(UnknownWordError):
        play_word("gills", dictionary, rhymes)
    with pytest.raises(InvalidInputError):
        play_word("pill", dictionary, rhymes)


def test_secret_outside_answers_contradicts(dictionary):
    with pytest.raises(ContradictionError):
        play_word("pills", dictionary, ["bills", "fills"])
