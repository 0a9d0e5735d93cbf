"""
Download a newline-delimited word list and write a clean N-letter copy.

What it does:
- Downloads the raw list over HTTP (e.g. a spelling dictionary).
- Normalizes every line (trim, a–z only, exact length N, lowercase).
- De-duplicates while preserving source order, and writes to file.

Usage:
    python -m script.fetch_wordlist --out packages/datasets/data/dictionary.txt
    python -m script.fetch_wordlist --url https://example.org/words.txt --N 6 --sort
"""

import argparse
from pathlib import Path

import requests

from packages.engine import DEFAULT_WORD_LENGTH
from script.clean_wordlist import clean

URL = "https://raw.githubusercontent.com/dwyl/english-words/master/words_alpha.txt"


def fetch_words(url: str = URL, N: int = DEFAULT_WORD_LENGTH) -> list[str]:
    r = requests.get(url, timeout=30)
    r.raise_for_status()
    return clean(r.text.splitlines(), N)


def main(argv=None):
    ap = argparse.ArgumentParser(description="Download and clean a word list")
    ap.add_argument("--url", default=URL)
    ap.add_argument("--out", default="packages/datasets/data/dictionary.txt")
    ap.add_argument("--N", type=int, default=DEFAULT_WORD_LENGTH, help="word length to keep")
    ap.add_argument("--sort", action="store_true", help="sort alphabetically instead of keeping "
                                                        "source order")
    args = ap.parse_args(argv)

    words = fetch_words(args.url, args.N)
    if args.sort:
        words = sorted(words)

    out = Path(args.out)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text("\n".join(words) + "\n", encoding="utf-8")
    print(f"Wrote {len(words)} words -> {args.out}")


if __name__ == "__main__":
    main()
