import pytest

from wordle_core.data_utils import load_dictionary
from wordle_core.errors import EmptyDictionaryError, InvalidInputError, UnknownWordError
from wordle_core.sampler import WordSampler
from wordle_core.vocab import WordVocab


def _write(path, text):
    path.write_text(text, encoding="utf-8")
    return str(path)


def test_text_loader_cleans_entries(tmp_path):
    path = _write(tmp_path / "words.txt", "Crane\nslate\n  trace \ncranes\ndon't\n\ncrane\nnull\nab1de\n")
    vocab = WordVocab.from_text(path)
    assert vocab.words() == ["crane", "slate", "trace"]
    assert vocab.word_length == 5


def test_text_loader_infers_length(tmp_path):
    path = _write(tmp_path / "words.txt", "cat\ndog\nhorse\nowl\n")
    vocab = WordVocab.from_text(path, word_len=None)
    assert vocab.words() == ["cat", "dog", "owl"]
    assert vocab.word_length == 3


def test_text_loader_keeps_words_pandas_would_read_as_missing(tmp_path):
    path = _write(tmp_path / "words.txt", "null\nnone\nnan\n")
    assert WordVocab.from_text(path, word_len=None).words() == ["null", "none"]
    assert WordVocab.from_text(path, word_len=3).words() == ["nan"]


def test_empty_word_lists_rejected(tmp_path):
    with pytest.raises(EmptyDictionaryError):
        WordVocab.from_text(_write(tmp_path / "empty.txt", ""))
    with pytest.raises(EmptyDictionaryError):
        WordVocab.from_text(_write(tmp_path / "short.txt", "cat\ndog\n"))


def test_csv_loader_uses_word_column(tmp_path):
    path = _write(tmp_path / "word_list.csv", "word,day\ncigar,1\nrebut,2\nCIGAR,\nsissy,3\n")
    vocab = load_dictionary(path)
    assert vocab.words() == ["cigar", "rebut", "sissy"]

    with pytest.raises(KeyError):
        WordVocab.from_csv(path, column="answer")


def test_load_dictionary_reads_plain_text(tmp_path):
    path = _write(tmp_path / "words", "cigar\nrebut\n")
    assert load_dictionary(path).words() == ["cigar", "rebut"]


def test_vocab_protocol():
    vocab = WordVocab(["cigar", "rebut", "sissy"])
    assert len(vocab) == 3
    assert "rebut" in vocab
    assert vocab.contains("sissy")
    assert list(vocab) == ["cigar", "rebut", "sissy"]
    assert vocab.index_of("sissy") == 2
    assert vocab.word_at(0) == "cigar"
    with pytest.raises(UnknownWordError):
        vocab.index_of("humph")
    with pytest.raises(KeyError):
        vocab.index_of("humph")
    with pytest.raises(IndexError):
        vocab.word_at(3)


def test_vocab_rejects_bad_input():
    with pytest.raises(EmptyDictionaryError):
        WordVocab([])
    with pytest.raises(ValueError):
        WordVocab(["cigar", "cigar"])
    with pytest.raises(InvalidInputError):
        WordVocab(["cigar", "cigars"])
    with pytest.raises(TypeError):
        WordVocab(("cigar",))


def test_sampler_is_deterministic_with_seed():
    vocab = WordVocab(["cigar", "rebut", "sissy", "humph", "awake"])
    a = WordSampler(vocab, seed=7).sample_words(3)
    b = WordSampler(vocab, seed=7).sample_words(3)
    assert a == b
    assert len(set(a)) == 3
    assert len(WordSampler(vocab, seed=1).sample_words(8)) == 8
    with pytest.raises(ValueError):
        WordSampler(vocab).sample_words(0)


def test_text_loader_drops_lines_with_tabs_or_commas(tmp_path):
    path = _write(tmp_path / "words.txt", "cigar\nrebut\tx\nsissy\nhu,mph\n")
    assert WordVocab.from_text(path).words() == ["cigar", "sissy"]
