"""
Clean a raw word list down to canonical N-letter words.

Features:
- Normalizes every line (trim, a–z only, exact length N, lowercase); drops the rest.
- Removes duplicates, preserving first-seen order by default (stable dedupe).
- Optional sorting AFTER dedupe (alphabetical).
- Overwrite in place by default, or write to a separate --out path.

Usage:
    python -m script.clean_wordlist --in words-umich.txt --out packages/datasets/data/words.txt
    python -m script.clean_wordlist --in english-dictionary.txt --N 6 --sort
"""

import argparse
from pathlib import Path

from packages.datasets.io import read_lines, write_lines
from packages.engine import normalize_all, DEFAULT_WORD_LENGTH


def unique_preserve_order(words: list[str]) -> list[str]:
    seen, out = set(), []
    for w in words:
        if w not in seen:
            seen.add(w)
            out.append(w)
    return out


def clean(lines: list[str], N: int = DEFAULT_WORD_LENGTH, sort: bool = False) -> list[str]:
    out = unique_preserve_order(normalize_all(lines, N))
    if sort:
        out = sorted(out)
    return out


def main(argv=None):
    ap = argparse.ArgumentParser(description="Normalize and dedupe a word list.")
    ap.add_argument("--in", dest="inp", required=True, help="input .txt file")
    ap.add_argument("--out", dest="out", help="output file (default: overwrite input)")
    ap.add_argument("--N", type=int, default=DEFAULT_WORD_LENGTH, help="word length to keep")
    ap.add_argument("--sort", action="store_true", help="sort alphabetically after dedupe (otherwise keep original order)")
    args = ap.parse_args(argv)

    inp = Path(args.inp)
    outp = Path(args.out) if args.out else inp

    lines = read_lines(inp)
    out = clean(lines, args.N, args.sort)

    write_lines(out, outp)
    print(f"Input: {inp} ({len(lines)} lines) -> Output: {outp} ({len(out)} words)")


if __name__ == "__main__":
    main()
