from pathlib import Path

import pytest
from packages.datasets import (
    WordCorpus,
    load_corpus,
    load_dictionary,
    load_frequency_corpus,
    load_word_list,
    read_lines,
    write_lines,
)
from packages.datasets.io import parse_frequency_line


@pytest.mark.parametrize("line,expected", [
    ("1\tHotel\t50", ("hotel", 50)),
    ("bevel\t90", ("bevel", 90)),
    ("7\trepel\t20\textra", ("repel", 20)),
    ("2\tthe\t900", None),
    ("3\tJ.R.R\t4", None),
    ("4\tcrane\tmany", None),
    ("5\tcrane\t-3", None),
    ("crane", None),
])
def test_parse_frequency_line(line, expected):
    assert parse_frequency_line(line) == expected


def test_load_frequency_corpus_keeps_duplicates(tmp_path: Path):
    p = tmp_path / "eng_news-words.txt"
    write_lines(["1\tHotel\t50", "2\tthe\t900", "3\trepel\t20", "4\thotel\t7"], p)

    corpus = load_frequency_corpus(p)
    assert corpus.words() == ["hotel", "repel", "hotel"]
    assert len(corpus) == 3
    # first occurrence of a duplicate wins
    assert corpus.frequency_map() == {"hotel": 50, "repel": 20}


def test_load_word_list_and_dictionary(tmp_path: Path):
    p = tmp_path / "dictionary.txt"
    write_lines(["Hotel", "", "aardvark", " repel ", "hotel"], p)

    corpus = load_word_list(p)
    assert corpus.words() == ["hotel", "repel", "hotel"]
    assert corpus.frequency_map() == {}
    assert load_dictionary(p) == {"hotel", "repel"}


def test_load_corpus_detects_layout(tmp_path: Path):
    freq = tmp_path / "freq.txt"
    plain = tmp_path / "plain.txt"
    write_lines(["1\tcrane\t3"], freq)
    write_lines(["crane"], plain)

    assert list(load_corpus(freq)) == [("crane", 3)]
    assert list(load_corpus(plain)) == [("crane", None)]


def test_missing_source_raises(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        read_lines(tmp_path / "missing.txt")
    with pytest.raises(FileNotFoundError):
        load_dictionary(tmp_path / "missing.txt")


def test_word_corpus_from_words():
    c = WordCorpus.from_words(["crane", "stone"])
    assert c.entries == (("crane", None), ("stone", None))
    assert WordCorpus().words() == []


def test_load_corpus_mixed_layout_is_decided_per_line(tmp_path: Path):
    p = tmp_path / "mixed.txt"
    write_lines(["crane", "stone", "4\thotel\t7", "hotel\tnote"], p)

    corpus = load_corpus(p)
    # a tab line is a frequency record; plain lines stay plain words
    assert list(corpus) == [("crane", None), ("stone", None), ("hotel", 7)]
    assert corpus.frequency_map() == {"hotel": 7}
