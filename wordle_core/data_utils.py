from pathlib import Path
from typing import Optional

from wordle_core.vocab import WordVocab


def load_dictionary(path: str, word_len: Optional[int] = 5) -> WordVocab:
    """
    Load a word list for one run.
    `.csv` files need a 'word' column; anything else is read as one word per line.
    """
    if Path(path).suffix.lower() == ".csv":
        return WordVocab.from_csv(path, column="word", word_len=word_len)
    return WordVocab.from_text(path, word_len=word_len)
