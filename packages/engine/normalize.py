"""
Word normalization.

This module answers the question: "Is this raw token a usable word?"
A token is accepted iff, after trimming surrounding whitespace:
  - it has exact length N
  - every character is an ASCII letter a–z / A–Z

Accepted tokens are returned lowercased. Rejected tokens return None; they are
never an error, callers simply drop them (word lists are full of proper nouns,
numbers and OCR noise).
"""

from __future__ import annotations

from typing import Iterable, List, Optional

DEFAULT_WORD_LENGTH = 5


def normalize(raw: str, N: int = DEFAULT_WORD_LENGTH) -> Optional[str]:
    """
    Return the canonical form of `raw`, or None if it is rejected.

    Examples:
      normalize("  Crane\\n") -> "crane"
      normalize("crane", N=6) -> None
      normalize("o'neil")     -> None

    Normalization is idempotent: normalize(normalize(w)) == normalize(w).
    """
    if not isinstance(raw, str):
        return None

    w = raw.strip()

    if len(w) != N:
        return None
    # str.isalpha() accepts non-ASCII letters too; restrict to a–z.
    if not (w.isascii() and w.isalpha()):
        return None

    return w.lower()


def normalize_all(raws: Iterable[str], N: int = DEFAULT_WORD_LENGTH) -> List[str]:
    """Normalize every token, keeping accepted ones in input order."""
    out: List[str] = []
    for raw in raws:
        w = normalize(raw, N)
        if w is not None:
            out.append(w)
    return out
