from __future__ import annotations
from pathlib import Path
from typing import Iterator, List, Optional
import pandas as pd

from wordle_core.errors import EmptyDictionaryError, InvalidInputError, UnknownWordError


class WordVocab:
    def __init__(self, words: List[str]) -> None:
        if not isinstance(words, list):
            raise TypeError("`words` must be a list of strings")
        if not words:
            raise EmptyDictionaryError("no words provided")
        if not all(isinstance(w, str) for w in words):
            raise TypeError("all items in `words` must be str")

        # Enforce uniqueness (first occurrence policy is handled by the loaders)
        if len(set(words)) != len(words):
            raise ValueError("duplicate words detected; input to WordVocab must be deduplicated")

        lengths = {len(w) for w in words}
        if len(lengths) != 1:
            raise InvalidInputError(f"all words must share one length, got {sorted(lengths)}")

        self._words: List[str] = list(words)
        self._index = {w: i for i, w in enumerate(self._words)}
        self.word_length: int = lengths.pop()

    # ---------- Construction helpers ----------

    @classmethod
    def from_series(
        cls,
        raw: pd.Series,
        *,
        word_len: Optional[int] = 5,
        lowercase: bool = True,
        alpha_only: bool = True,
    ) -> "WordVocab":
        """
        Clean a column of raw entries and build a WordVocab.

        Entries are stripped (and lowercased if asked); entries of the wrong
        length or with non-letters are dropped; later duplicates are dropped.
        With `word_len=None` the length is the most common one among the
        remaining entries.

        Raises
        ------
        EmptyDictionaryError
            If nothing survives the filtering.
        """
        words = raw.dropna().astype(str).str.strip()
        if lowercase:
            words = words.str.lower()
        if alpha_only:
            words = words[words.str.isalpha()]
        words = words[words.str.len() > 0]
        if word_len is None and not words.empty:
            word_len = int(words.str.len().value_counts().idxmax())
        words = words[words.str.len() == word_len]
        clean = words.drop_duplicates(keep="first").tolist()

        if not clean:
            raise EmptyDictionaryError("no valid words after filtering")
        return cls(clean)

    @classmethod
    def from_text(cls, path: str, *, word_len: Optional[int] = 5, lowercase: bool = True) -> "WordVocab":
        """Load a plain word list, one word per line."""
        lines = Path(path).read_text(encoding="utf-8").splitlines()
        # whole lines, so a stray tab or comma only drops that entry
        return cls.from_series(pd.Series(lines, dtype=object), word_len=word_len, lowercase=lowercase)

    @classmethod
    def from_csv(
        cls,
        path: str,
        column: str = "word",
        *,
        word_len: Optional[int] = 5,
        lowercase: bool = True,
    ) -> "WordVocab":
        """
        Load words from a CSV with a header row.

        Raises
        ------
        FileNotFoundError, KeyError, EmptyDictionaryError
        """
        df = pd.read_csv(path, dtype=str, keep_default_na=False)
        if column not in df.columns:
            raise KeyError(f"column '{column}' not found in {path}")
        return cls.from_series(df[column], word_len=word_len, lowercase=lowercase)

    # ---------- Basic protocol ----------

    def __len__(self) -> int:
        """Number of words in the vocabulary."""
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __contains__(self, word: object) -> bool:
        return word in self._index

    def words(self) -> List[str]:
        """Return a copy of the internal word list (to avoid external mutation)."""
        return list(self._words)

    def contains(self, word: str) -> bool:
        """Return True iff `word` exists in the vocabulary (case-sensitive)."""
        return word in self._index

    def index_of(self, word: str) -> int:
        """Return the index for `word`; raise UnknownWordError if unknown."""
        try:
            return self._index[word]
        except KeyError:
            raise UnknownWordError(f"unknown word: {word}") from None

    def word_at(self, idx: int) -> str:
        """Return the word at position `idx`; raise IndexError if out of bounds."""
        if idx < 0 or idx >= len(self._words):
            raise IndexError(f"index out of range: {idx}")
        return self._words[idx]
