from pathlib import Path
from packages.datasets import validate_sources, pretty_summary


def _write(p: Path, lines):
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")


def test_validate_sources_happy_path(tmp_path: Path):
    cor = tmp_path / "words.txt"
    dic = tmp_path / "dictionary.txt"
    _write(cor, ["1\tHotel\t50", "2\tthe\t900", "3\trepel\t20", "4\thotel\t7"])
    _write(dic, ["hotel", "repel", "bevel", "Crane", "aardvark"])

    rep = validate_sources(5, str(cor), str(dic))
    assert rep["passed"] is True
    assert rep["corpus"]["count"] == 3
    assert rep["corpus"]["unique_count"] == 2
    assert rep["corpus"]["skipped_lines"] == 1
    assert rep["dictionary"]["count"] == 4
    assert rep["dictionary"]["skipped_lines"] == 1
    assert rep["overlap_count"] == 2
    assert len(rep["corpus"]["sha256"]) == 64
    s = pretty_summary(rep)
    assert "N=5" in s and "overlap=2" in s and s.endswith("OK")


def test_validate_sources_missing_file(tmp_path: Path):
    dic = tmp_path / "dictionary.txt"
    _write(dic, ["hotel"])

    rep = validate_sources(5, str(tmp_path / "nope.txt"), str(dic))
    assert rep["passed"] is False
    assert rep["corpus"]["exists"] is False
    assert any("corpus file not found" in msg for msg in rep["issues"])
    assert pretty_summary(rep).endswith("FAIL")


def test_validate_sources_empty_and_disjoint(tmp_path: Path):
    cor = tmp_path / "words.txt"
    dic = tmp_path / "dictionary.txt"
    _write(cor, ["hotel", "repel"])
    _write(dic, ["crane"])

    rep = validate_sources(5, str(cor), str(dic))
    assert rep["passed"] is False
    assert any("no corpus word" in msg for msg in rep["issues"])

    rep = validate_sources(6, str(cor), str(dic))
    assert rep["passed"] is False
    assert any("0 valid 6-letter" in msg for msg in rep["issues"])


def test_validate_sources_counts_match_loader_on_mixed_corpus(tmp_path: Path):
    from packages.datasets import load_corpus

    cor = tmp_path / "words.txt"
    dic = tmp_path / "dictionary.txt"
    _write(cor, ["crane", "stone", "hotel\tnote"])
    _write(dic, ["crane", "stone"])

    rep = validate_sources(5, str(cor), str(dic))
    corpus = load_corpus(cor)
    assert rep["corpus"]["count"] == len(corpus) == 2
    assert rep["corpus"]["skipped_lines"] == 1
    assert rep["overlap_count"] == 2
