from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Set, Tuple

from packages.engine import normalize, DEFAULT_WORD_LENGTH

Entry = Tuple[str, Optional[int]]  # (word, corpus frequency or None)


@dataclass(frozen=True)
class WordCorpus:
    """
    Normalized words in source order, each with an optional frequency.

    Dictionary-only sources carry None frequencies. Duplicates are kept: a
    newspaper corpus can list the same lowercased word several times
    (e.g. "Apple" and "apple").
    """
    entries: Tuple[Entry, ...] = ()

    @classmethod
    def from_words(cls, words: Iterable[str]) -> "WordCorpus":
        return cls(tuple((w, None) for w in words))

    def words(self) -> List[str]:
        return [w for w, _ in self.entries]

    def frequency_map(self) -> Dict[str, int]:
        """Word -> frequency. The first occurrence of a duplicated word wins."""
        out: Dict[str, int] = {}
        for w, f in self.entries:
            if f is not None and w not in out:
                out[w] = f
        return out

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self):
        return iter(self.entries)


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    # Word lists in the wild aren't always clean UTF-8; a bad byte only spoils its token.
    return [ln.rstrip("\r\n") for ln in p.read_text(encoding="utf-8", errors="replace").splitlines()]


def write_lines(lines: Iterable[str], p: Path | str) -> str:
    """
    Write lines to a UTF-8 text file, ensuring a trailing newline.
    Returns the string path written.
    """
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return str(p)


def parse_frequency_line(line: str, N: int = DEFAULT_WORD_LENGTH) -> Optional[Entry]:
    """
    Parse one line of a word-frequency list.

    Accepted layouts (tab-separated):
      id<TAB>word<TAB>freq   (Leipzig corpora *-words.txt)
      word<TAB>freq

    Returns None for lines whose word fails normalization or whose
    frequency isn't a non-negative integer.
    """
    parts = line.split("\t")
    if len(parts) >= 3:
        token, freq = parts[1], parts[2]
    elif len(parts) == 2:
        token, freq = parts
    else:
        return None

    w = normalize(token, N)
    if w is None:
        return None
    try:
        f = int(freq.strip())
    except ValueError:
        return None
    if f < 0:
        return None
    return w, f


def _frequency_entries(lines: Iterable[str], N: int) -> WordCorpus:
    entries: List[Entry] = []
    for line in lines:
        e = parse_frequency_line(line, N)
        if e is not None:
            entries.append(e)
    return WordCorpus(tuple(entries))


def _plain_entries(lines: Iterable[str], N: int) -> WordCorpus:
    words = []
    for line in lines:
        w = normalize(line, N)
        if w is not None:
            words.append(w)
    return WordCorpus.from_words(words)


def load_frequency_corpus(p: Path | str, N: int = DEFAULT_WORD_LENGTH) -> WordCorpus:
    """Load a tab-separated word-frequency list, keeping only valid N-letter words."""
    return _frequency_entries(read_lines(p), N)


def load_word_list(p: Path | str, N: int = DEFAULT_WORD_LENGTH) -> WordCorpus:
    """Load a newline-separated word list (no frequencies)."""
    return _plain_entries(read_lines(p), N)


def parse_corpus_line(line: str, N: int = DEFAULT_WORD_LENGTH) -> Optional[Entry]:
    """
    Parse one line of a corpus in either layout: lines carrying a tab are
    word-frequency records, all others a bare token (frequency None).
    """
    if "\t" in line:
        return parse_frequency_line(line, N)
    w = normalize(line, N)
    return (w, None) if w is not None else None


def load_corpus(p: Path | str, N: int = DEFAULT_WORD_LENGTH) -> WordCorpus:
    """Load a corpus whose lines may mix both layouts; the layout is decided per line."""
    entries: List[Entry] = []
    for line in read_lines(p):
        e = parse_corpus_line(line, N)
        if e is not None:
            entries.append(e)
    return WordCorpus(tuple(entries))


def load_dictionary(p: Path | str, N: int = DEFAULT_WORD_LENGTH) -> Set[str]:
    """Load a spelling dictionary as a membership set of valid N-letter words."""
    return set(load_word_list(p, N).words())
