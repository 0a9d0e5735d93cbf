"""
I/O utilities for solve runs.

Responsibilities:
- render_report: the textual console report (counts + top-N lists + best start).
- write_csv:     ranked suggestions, one row per rank.
- write_manifest:dump a JSON manifest with config, source hashes, and counts.
- timestamp_id:  stable UTC run ID string.
- git_commit_or_unknown: best-effort short commit hash for reproducibility.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict
import csv
import json
import subprocess
import datetime as dt

from packages.datasets import WordCorpus
from packages.engine import ENGLISH_LETTER_WEIGHTS, FrequencyTable, score
from .core import SolveReport

DEFAULT_TOP = 15


def render_report(report: SolveReport, top: int = DEFAULT_TOP) -> str:
    """
    Console report. The caller decides `top`; the report holds full orderings.
    """
    lines = [
        f"word list count: {report.word_count}",
        f"dictionary word count: {report.dictionary_count}",
        f"found {report.match_count} possible matches.",
        f"found {report.confirmed_count} dictionary matches.",
    ]
    if report.dictionary_empty:
        lines.append("warning: dictionary is empty; no word can be confirmed.")

    lines.append("==== Sorted by letter frequency")
    lines.extend(report.by_letter_score[:top])
    lines.append("==== Sorted by word frequency")
    lines.extend(report.by_corpus_freq[:top])
    lines.append("==== Best start word")
    lines.append(report.best_start or "(none)")
    return "\n".join(lines)


def write_csv(report: SolveReport, corpus: WordCorpus, path: str, top: int = DEFAULT_TOP,
              table: FrequencyTable = ENGLISH_LETTER_WEIGHTS) -> str:
    """
    Serialize the top of each ranking side by side.

    Schema (columns):
      rank, letter_word, letter_score, freq_word, corpus_freq

    Returns:
      The path written (string).
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    freqs = corpus.frequency_map()
    by_letter = report.by_letter_score[:top]
    by_freq = report.by_corpus_freq[:top]

    fields = ["rank", "letter_word", "letter_score", "freq_word", "corpus_freq"]
    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=fields)
        w.writeheader()

        for i in range(max(len(by_letter), len(by_freq))):
            row = {"rank": i + 1, "letter_word": "", "letter_score": "",
                   "freq_word": "", "corpus_freq": ""}
            if i < len(by_letter):
                row["letter_word"] = by_letter[i]
                row["letter_score"] = score(by_letter[i], table)
            if i < len(by_freq):
                row["freq_word"] = by_freq[i]
                row["corpus_freq"] = freqs.get(by_freq[i], 0)
            w.writerow(row)

    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    """
    Write a JSON manifest with run configuration and source validation summary.

    Typical keys:
      - run_id, git_commit
      - config: CLI args (paths, N, constraints, top, outdir)
      - sources: output of datasets.validate_sources(...)
      - counts: word/dictionary/match/confirmed counts, best_start
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2)
    return str(p)


def timestamp_id() -> str:
    """
    Return a compact UTC timestamp suitable for filenames, e.g. 20250820T024121Z.
    """
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    """
    Best-effort short git hash of the current repo state.
    Returns 'unknown' if git is not available or the call fails.
    """
    try:
        return (
            subprocess.check_output(
                ["git", "rev-parse", "--short", "HEAD"],
                stderr=subprocess.DEVNULL,
            )
            .decode()
            .strip()
        )
    except (OSError, subprocess.CalledProcessError):
        return "unknown"
