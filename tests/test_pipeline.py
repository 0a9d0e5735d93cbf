import csv
import json
from pathlib import Path

import pytest
from packages.datasets import WordCorpus
from packages.engine import Constraint
from packages.pipeline import render_report, run_pipeline, write_csv, write_manifest
from packages.pipeline.io import timestamp_id

CONSTRAINTS = [
    Constraint.absent("s"),
    Constraint.present_elsewhere("e", {0, 2, 4}),
    Constraint.exact("l", 4),
]
CORPUS = WordCorpus((
    ("hotel", 50),
    ("eagle", 100),
    ("repel", 20),
    ("hotel", 7),
    ("bevel", 90),
    ("jewel", 40),
))
DICT = {"hotel", "repel", "bevel", "eagle", "crane"}


def test_run_pipeline_counts_and_rankings():
    r = run_pipeline(CORPUS, DICT, CONSTRAINTS, N=5)
    assert r.word_count == 6
    assert r.dictionary_count == 5
    assert r.match_count == 5          # hotel twice + jewel, before the dictionary
    assert r.confirmed_count == 3
    assert r.candidates == ["bevel", "hotel", "repel"]
    assert r.by_letter_score == ["hotel", "repel", "bevel"]
    assert r.by_corpus_freq == ["bevel", "hotel", "repel"]
    # computed over the whole corpus, not the candidates
    assert r.best_start == "hotel"
    assert r.dictionary_empty is False


def test_best_start_ignores_constraints():
    corpus = WordCorpus((("bevel", 1), ("stone", 1)))
    r = run_pipeline(corpus, {"bevel", "stone"}, CONSTRAINTS)
    assert r.candidates == ["bevel"]
    assert r.best_start == "stone"


def test_empty_dictionary_is_distinguishable():
    r = run_pipeline(CORPUS, set(), CONSTRAINTS)
    assert r.candidates == []
    assert r.dictionary_empty is True
    assert r.match_count == 5

    no_match = run_pipeline(CORPUS, DICT, CONSTRAINTS + [Constraint.absent("l")])
    assert no_match.candidates == []
    assert no_match.dictionary_empty is False


def test_empty_corpus():
    r = run_pipeline(WordCorpus(), DICT, CONSTRAINTS)
    assert r.word_count == 0 and r.candidates == [] and r.best_start is None


def test_run_pipeline_rejects_bad_length():
    with pytest.raises(ValueError):
        run_pipeline(CORPUS, DICT, [], N=0)
    with pytest.raises(ValueError):
        run_pipeline(CORPUS, DICT, [], rankers=["nope"])


def test_render_report_truncates():
    r = run_pipeline(CORPUS, DICT, CONSTRAINTS)
    text = render_report(r, top=2)
    lines = text.splitlines()
    assert lines[:4] == [
        "word list count: 6",
        "dictionary word count: 5",
        "found 5 possible matches.",
        "found 3 dictionary matches.",
    ]
    i = lines.index("==== Sorted by letter frequency")
    assert lines[i + 1:i + 3] == ["hotel", "repel"]
    j = lines.index("==== Sorted by word frequency")
    assert lines[j + 1:j + 3] == ["bevel", "hotel"]
    assert lines[-2:] == ["==== Best start word", "hotel"]
    # full orderings are still on the report
    assert len(r.by_letter_score) == 3


def test_render_report_warns_on_empty_dictionary():
    text = render_report(run_pipeline(CORPUS, set(), CONSTRAINTS))
    assert "dictionary is empty" in text


def test_write_csv_and_manifest(tmp_path: Path):
    r = run_pipeline(CORPUS, DICT, CONSTRAINTS)
    out = write_csv(r, CORPUS, str(tmp_path / "out" / "solve.csv"), top=15)
    with open(out, newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert len(rows) == 3
    assert rows[0] == {"rank": "1", "letter_word": "hotel", "letter_score": "39400",
                       "freq_word": "bevel", "corpus_freq": "90"}

    m = write_manifest({"run_id": timestamp_id(), "best_start": r.best_start},
                       str(tmp_path / "out" / "m.json"))
    data = json.loads(Path(m).read_text(encoding="utf-8"))
    assert data["best_start"] == "hotel"
    assert data["run_id"].endswith("Z") and len(data["run_id"]) == 16
