from __future__ import annotations

import random
from wordle_core.vocab import WordVocab


class WordSampler:
    def __init__(self, vocab: WordVocab, seed: int | None = None) -> None:
        if not isinstance(vocab, WordVocab):
            raise TypeError("vocab must be a WordVocab")

        self._vocab = vocab
        # deterministic if seed provided
        self._rng = random.Random(seed)

    def choice_index(self) -> int:
        return self._rng.randrange(len(self._vocab))

    def choice_word(self) -> str:
        return self._vocab.word_at(self.choice_index())

    def sample_words(self, k: int) -> list[str]:
        """k secrets, without repeats while the vocab is large enough."""
        if not isinstance(k, int) or k <= 0:
            raise ValueError("k must be a positive integer")
        n = len(self._vocab)
        if k <= n:
            return [self._vocab.word_at(i) for i in self._rng.sample(range(n), k)]
        return [self.choice_word() for _ in range(k)]
