import pytest

# Six secrets that differ only in the first letter, plus a probe word that
# separates all of them in one guess.
RHYMES = ["bills", "fills", "hills", "kills", "mills", "pills"]
PROBE = "bfhkm"


@pytest.fixture
def rhymes():
    return list(RHYMES)


@pytest.fixture
def dictionary():
    return RHYMES + [PROBE]
