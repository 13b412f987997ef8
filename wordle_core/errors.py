"""
errors.py

Error kinds raised by the solver core. None of them is retried locally:
each one is either a caller precondition violation or an unsolvable game.
"""


class InvalidInputError(ValueError):
    """Words of different lengths compared, or a malformed guess/feedback."""


class ScoringUndefinedError(ValueError):
    """Scoring attempted over an empty candidate set."""


class ContradictionError(ValueError):
    """Applied feedback leaves no consistent candidate."""


class EmptyDictionaryError(ValueError):
    """No usable words survived loading."""


class UnknownWordError(KeyError):
    """A word required to be in the dictionary is not there."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else "unknown word"


class ExhaustionError(RuntimeError):
    """Automated replay ran out of rounds before finding the secret."""
