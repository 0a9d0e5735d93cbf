"""
Source validator for the candidate corpus and the spelling dictionary.

What this module does:
- Inspect the two inputs of a solve: the corpus (word list or word-frequency
  list) and the dictionary (one word per line).
- Count valid N-letter words, unique words and skipped lines; compute SHA-256
  of the raw files.
- Count how many unique corpus words the dictionary confirms.
- Return a machine-readable dict (for manifests) and provide a pretty one-line summary.

Skipped lines are normal here (both sources are general-purpose lists full of
other lengths, proper nouns and punctuation), so they are reported but don't
fail validation. Missing files and empty results do.

Typical use:
    from packages.datasets import validate_sources, pretty_summary
    rep = validate_sources(5, "data/eng_news_2023_1M-words.txt", "data/english-dictionary.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List, Set, Tuple
import hashlib

from .io import read_lines, parse_corpus_line


# -----------------------------
# Dataclasses for structured reports
# -----------------------------

@dataclass
class FileReport:
    """Per-file diagnostics and metadata."""
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    count: int           # number of VALID words after normalization
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    unique_count: int    # unique valid words (after dedupe)
    skipped_lines: int   # lines that didn't yield a valid word


@dataclass
class ValidationReport:
    """Top-level validation result for the (corpus, dictionary) pair."""
    N: int
    corpus: FileReport
    dictionary: FileReport
    overlap_count: int   # unique corpus words found in the dictionary
    passed: bool
    issues: List[str]    # human-friendly list of problems (if any)


# -----------------------------
# Helpers
# -----------------------------

def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _scan(path: Path, N: int) -> Tuple[List[str], int]:
    """
    Load words from a source file line by line, the same way load_corpus()
    does. Returns (valid_words, skipped_count).
    """
    valid: List[str] = []
    skipped = 0
    for line in read_lines(path):
        e = parse_corpus_line(line, N)
        if e is None:
            skipped += 1
        else:
            valid.append(e[0])
    return valid, skipped


def _file_report(path: Path, words: List[str], skipped: int) -> FileReport:
    return FileReport(
        path=str(path),
        exists=True,
        count=len(words),
        sha256=_sha256_file(path),
        unique_count=len(set(words)),
        skipped_lines=skipped,
    )


def _as_dict(rep: ValidationReport) -> Dict:
    """Dataclass → plain dict (stable ordering)."""
    return asdict(rep)


# -----------------------------
# Public API
# -----------------------------

def validate_sources(N: int, corpus_path: str, dictionary_path: str) -> Dict:
    """
    Validate the corpus/dictionary pair for word length N.

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see ValidationReport schema) with:
          - counts, unique counts, skipped lines and SHA-256 per file
          - overlap_count: unique corpus words the dictionary confirms
          - `passed` boolean (both files present and non-empty, overlap > 0)
          - `issues` (list of strings) to surface any problems
    """
    issues: List[str] = []

    cor_p = Path(corpus_path)
    dic_p = Path(dictionary_path)

    cor_exists = cor_p.exists()
    dic_exists = dic_p.exists()

    if not cor_exists or not dic_exists:
        if not cor_exists:
            issues.append(f"corpus file not found: {corpus_path}")
        if not dic_exists:
            issues.append(f"dictionary file not found: {dictionary_path}")
        rep = ValidationReport(
            N=N,
            corpus=FileReport(corpus_path, cor_exists, 0, "", 0, 0),
            dictionary=FileReport(dictionary_path, dic_exists, 0, "", 0, 0),
            overlap_count=0,
            passed=False,
            issues=issues,
        )
        return _as_dict(rep)

    corpus, cor_skipped = _scan(cor_p, N)
    dictionary, dic_skipped = _scan(dic_p, N)

    cor_report = _file_report(cor_p, corpus, cor_skipped)
    dic_report = _file_report(dic_p, dictionary, dic_skipped)

    dictionary_set: Set[str] = set(dictionary)
    overlap = len(set(corpus) & dictionary_set)

    if cor_report.count == 0:
        issues.append(f"corpus file contains 0 valid {N}-letter words")
    if dic_report.count == 0:
        issues.append(f"dictionary file contains 0 valid {N}-letter words")
    if cor_report.count and dic_report.count and overlap == 0:
        issues.append("no corpus word appears in the dictionary")

    passed = cor_report.count > 0 and dic_report.count > 0 and overlap > 0

    rep = ValidationReport(
        N=N,
        corpus=cor_report,
        dictionary=dic_report,
        overlap_count=overlap,
        passed=passed,
        issues=issues,
    )
    return _as_dict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/docs.

    Example:
        N=5 | corpus=9212 (uniq=8120, sha=abc123...) | dictionary=15918 (uniq=15918, sha=def456...) | overlap=5402 | OK
    """
    N = report["N"]
    a = report["corpus"]
    b = report["dictionary"]
    status = "OK" if report["passed"] else "FAIL"
    a_sha = (a.get("sha256") or "")[:12]
    b_sha = (b.get("sha256") or "")[:12]
    return (
        f"N={N} | corpus={a['count']} (uniq={a['unique_count']}, sha={a_sha}) "
        f"| dictionary={b['count']} (uniq={b['unique_count']}, sha={b_sha}) "
        f"| overlap={report['overlap_count']} | {status}"
    )
