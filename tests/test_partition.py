from itertools import chain

from wordle_core.feedback import Mark, evaluate
from wordle_core.partition import group_sizes, partition

WORDS = ["total", "stoal", "allot", "tally", "alloy", "atoll", "bleed", "blend", "crane", "trace"]


def test_groups_cover_candidates_exactly_once():
    for guess in ["allot", "crane", "zzzzz", "eerie"]:
        groups = partition(guess, WORDS)
        members = list(chain.from_iterable(groups.values()))
        assert sorted(members) == sorted(WORDS)
        assert len(members) == len(set(members))


def test_group_key_is_the_feedback_of_every_member():
    for fb, members in partition("allot", WORDS).items():
        for w in members:
            assert evaluate(w, "allot") == fb


def test_group_count_bounded():
    assert len(partition("crane", WORDS)) <= 3 ** 5
    assert len(partition("crane", WORDS)) <= len(WORDS)


def test_group_sizes_match_partition():
    groups = partition("trace", WORDS)
    assert sorted(group_sizes("trace", WORDS)) == sorted(len(g) for g in groups.values())


def test_uninformative_guess_gives_one_group(rhymes):
    groups = partition("xyzzy", rhymes)
    assert list(groups) == [(Mark.MISS,) * 5]
    assert group_sizes("xyzzy", rhymes) == [len(rhymes)]


def test_empty_candidates():
    assert partition("crane", []) == {}
    assert group_sizes("crane", []) == []
