# apps/cli/run.py
"""
CLI entry point for suggesting the next guess.

This script:
  1) Validates the sources (prints counts + SHA + corpus/dictionary overlap).
  2) Loads the corpus, dictionary and constraints (file, tokens and/or feedback).
  3) Runs the filter-and-rank pipeline and prints the report:
       - counts of loaded, matching and dictionary-confirmed words
       - top-N by letter-frequency score and by corpus frequency
       - the best opening word over the whole corpus
  4) Optionally writes a CSV of the rankings and a JSON manifest.

Usage:
    python -m apps.cli.run --corpus data/eng_news_2023_1M-words.txt \
        --dictionary data/english-dictionary.txt \
        --constraint=-s --constraint=+e:0,2,4 --constraint==l:4
    python -m apps.cli.run ... --feedback eagle:Y---Y --feedback=stale:---GY
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List

from packages.datasets import (
    validate_sources,
    pretty_summary,
    load_corpus,
    load_dictionary,
    load_constraints,
    parse_constraint,
    constraints_from_history,
)
from packages.engine import Constraint, ENGLISH_LETTER_WEIGHTS, FrequencyTable, DEFAULT_WORD_LENGTH
from packages.pipeline import run_pipeline, render_report, DEFAULT_TOP, DEFAULT_RANKERS
from packages.pipeline.io import write_csv, write_manifest, timestamp_id, git_commit_or_unknown
from packages.rankers import get_ranker_ids


def _parse_feedback(item: str) -> tuple[str, str]:
    guess, sep, pattern = item.partition(":")
    if not sep:
        raise ValueError(f"feedback must look like GUESS:PATTERN; got {item!r}")
    return guess, pattern


def _collect_constraints(args) -> List[Constraint]:
    """Constraints from all sources, in order: file, tokens, feedback."""
    constraints: List[Constraint] = []
    if args.constraints:
        constraints += load_constraints(args.constraints, args.N)
    constraints += [parse_constraint(t, args.N) for t in args.constraint]
    history = [_parse_feedback(f) for f in args.feedback]
    constraints += constraints_from_history(history, args.N)
    return constraints


def build_parser() -> argparse.ArgumentParser:
    ranker_choices = ", ".join(get_ranker_ids())

    ap = argparse.ArgumentParser(description="wordle-sieve — filter and rank candidate guesses")
    ap.add_argument("--corpus", default="packages/datasets/data/words.txt",
                    help="word list or tab-separated word-frequency list (candidate corpus)")
    ap.add_argument("--dictionary", default="packages/datasets/data/dictionary.txt",
                    help="spelling dictionary, one word per line")
    ap.add_argument("--constraints",
                    help="JSON file of constraint records")
    ap.add_argument("--constraint", action="append", default=[], metavar="TOKEN",
                    help="compact constraint: -s (absent), +e:0,2,4 (elsewhere), =l:4 (exact); "
                         "repeatable")
    ap.add_argument("--feedback", action="append", default=[], metavar="GUESS:PATTERN",
                    help="guess feedback with G/Y/- pattern, e.g. eagle:Y---Y; repeatable")
    ap.add_argument("--N", type=int, default=DEFAULT_WORD_LENGTH, help="word length")
    ap.add_argument("--top", type=int, default=DEFAULT_TOP, help="rows to show per ranking")
    ap.add_argument("--rankers", nargs="+", default=list(DEFAULT_RANKERS),
                    help=f"ranker ids to run (any of: {ranker_choices})")
    ap.add_argument("--letter-weights",
                    help="JSON file of [weight, letters] groups (default: English table)")
    ap.add_argument("--outdir", help="write CSV + manifest here")
    ap.add_argument(
        "--progress",
        choices=["auto", "bar", "off"],
        default="auto",
        help="progress bar over the constraint pass (auto = bar when stderr is a tty)."
    )
    return ap


def main(argv: List[str] | None = None) -> int:
    """
    Parse CLI args, validate and load sources, solve, print and optionally write outputs.
    """
    args = build_parser().parse_args(argv)

    try:
        # 1) Validate sources and print a one-liner summary
        rep = validate_sources(args.N, args.corpus, args.dictionary)
        print(pretty_summary(rep))

        # 2) Load everything up front; a missing source is fatal here, not in the pipeline
        table = (FrequencyTable.from_json(args.letter_weights)
                 if args.letter_weights else ENGLISH_LETTER_WEIGHTS)
        constraints = _collect_constraints(args)
        corpus = load_corpus(args.corpus, args.N)
        dictionary = load_dictionary(args.dictionary, args.N)

        mode = args.progress
        if mode == "auto":
            mode = "bar" if sys.stderr.isatty() else "off"

        # 3) Solve
        report = run_pipeline(corpus, dictionary, constraints, N=args.N, table=table,
                              rankers=args.rankers, progress=(mode == "bar"))
    except (OSError, ValueError) as e:
        sys.stderr.write(f"error: {e}\n")
        return 2

    print(render_report(report, top=args.top))

    # 4) Optional outputs (CSV + manifest)
    if args.outdir:
        run_id = timestamp_id()
        outdir = Path(args.outdir)
        outdir.mkdir(parents=True, exist_ok=True)

        csv_path = outdir / f"solve_{run_id}.csv"
        manifest_path = outdir / f"solve_{run_id}_manifest.json"

        write_csv(report, corpus, str(csv_path), top=args.top, table=table)
        manifest = {
            "run_id": run_id,
            "git_commit": git_commit_or_unknown(),
            "config": vars(args),
            "constraints": [str(c) for c in constraints],
            "letter_weights": table.as_dict(),
            "sources": rep,
            "counts": {
                "words": report.word_count,
                "dictionary": report.dictionary_count,
                "matches": report.match_count,
                "confirmed": report.confirmed_count,
            },
            "best_start": report.best_start,
        }
        write_manifest(manifest, str(manifest_path))

        print(f"Wrote: {csv_path}")
        print(f"Wrote: {manifest_path}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
