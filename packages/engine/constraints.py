"""
Letter constraints and candidate filtering.

Given:
  - a pool of words (the corpus, possibly with duplicates)
  - a list of constraints derived from guess feedback
  - a dictionary of real words
  - target word length N

Return:
  - the sorted, de-duplicated dictionary words consistent with ALL constraints.

Constraint kinds:
  ABSENT(L)                       L appears nowhere in the word
  PRESENT_ELSEWHERE(L, excluded)  L appears somewhere, and not at any excluded slot
  EXACT(L, pos)                   word[pos] == L

Known limitation: PRESENT_ELSEWHERE only checks presence plus the excluded
slots. It does not model occurrence counts, so double-letter feedback
("exactly one e") cannot be expressed.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import AbstractSet, FrozenSet, Iterable, List, Optional, Sequence

from .normalize import DEFAULT_WORD_LENGTH


class ConstraintKind(Enum):
    ABSENT = "absent"
    PRESENT_ELSEWHERE = "present"
    EXACT = "exact"


@dataclass(frozen=True)
class Constraint:
    """
    One piece of feedback about one letter.

    Positions are validated against N when the constraint is built, so an
    out-of-range slot is reported up front instead of surfacing as an
    IndexError in the middle of a filter pass.
    """
    kind: ConstraintKind
    letter: str
    position: Optional[int] = None
    excluded: FrozenSet[int] = field(default_factory=frozenset)
    N: int = DEFAULT_WORD_LENGTH

    def __post_init__(self):
        if not isinstance(self.kind, ConstraintKind):
            raise ValueError(f"kind must be a ConstraintKind; got {self.kind!r}")
        if self.N <= 0:
            raise ValueError(f"word length must be positive; got {self.N}")

        letter = self.letter
        if not isinstance(letter, str) or len(letter) != 1 or not (
                letter.isascii() and letter.isalpha()):
            raise ValueError(f"letter must be a single a–z character; got {letter!r}")
        # frozen dataclass: canonicalize through object.__setattr__
        object.__setattr__(self, "letter", letter.lower())

        if self.kind is ConstraintKind.EXACT:
            if self.position is None:
                raise ValueError(f"exact constraint for {letter!r} needs a position")
            self._check_index(self.position)
        elif self.position is not None:
            raise ValueError(f"{self.kind.value} constraint for {letter!r} takes no position")

        # check each slot before hashing; a nested list is a bad slot, not a TypeError
        try:
            slots = tuple(self.excluded)
        except TypeError as e:
            raise ValueError(
                f"exclusions for {letter!r} must be a collection of slots; "
                f"got {self.excluded!r}") from e
        if self.kind is not ConstraintKind.PRESENT_ELSEWHERE and slots:
            raise ValueError(f"{self.kind.value} constraint for {letter!r} takes no exclusions")
        for i in slots:
            self._check_index(i)
        object.__setattr__(self, "excluded", frozenset(slots))

    def _check_index(self, i) -> None:
        if isinstance(i, bool) or not isinstance(i, int) or not 0 <= i < self.N:
            raise ValueError(
                f"position {i!r} for {self.letter!r} is outside 0..{self.N - 1}")

    # -----------------------------
    # Factories
    # -----------------------------

    @classmethod
    def absent(cls, letter: str, N: int = DEFAULT_WORD_LENGTH) -> "Constraint":
        return cls(ConstraintKind.ABSENT, letter, N=N)

    @classmethod
    def present_elsewhere(cls, letter: str, excluded: Iterable[int] = (),
                          N: int = DEFAULT_WORD_LENGTH) -> "Constraint":
        return cls(ConstraintKind.PRESENT_ELSEWHERE, letter, excluded=excluded, N=N)

    @classmethod
    def exact(cls, letter: str, position: int, N: int = DEFAULT_WORD_LENGTH) -> "Constraint":
        return cls(ConstraintKind.EXACT, letter, position=position, N=N)

    def __str__(self) -> str:
        if self.kind is ConstraintKind.ABSENT:
            return f"-{self.letter}"
        if self.kind is ConstraintKind.EXACT:
            return f"={self.letter}:{self.position}"
        return f"+{self.letter}:" + ",".join(str(i) for i in sorted(self.excluded))


# -----------------------------
# Evaluation
# -----------------------------

def satisfies(word: str, c: Constraint) -> bool:
    """Does `word` agree with a single constraint?"""
    if c.kind is ConstraintKind.ABSENT:
        return c.letter not in word
    if c.kind is ConstraintKind.PRESENT_ELSEWHERE:
        if c.letter not in word:
            return False
        return all(word[i] != c.letter for i in c.excluded)
    # EXACT
    return word[c.position] == c.letter


def satisfies_all(word: str, constraints: Iterable[Constraint]) -> bool:
    """Conjunction over all constraints; an empty list accepts everything."""
    return all(satisfies(word, c) for c in constraints)


def _check_lengths(constraints: Sequence[Constraint], N: int) -> None:
    for c in constraints:
        if c.N != N:
            raise ValueError(f"constraint {c} was built for N={c.N}, filtering N={N}")


# -----------------------------
# Filter stages
# -----------------------------

def match_constraints(words: Iterable[str], constraints: Sequence[Constraint],
                      N: int = DEFAULT_WORD_LENGTH) -> List[str]:
    """
    Stage 1: keep words of length N that satisfy every constraint.

    Order and duplicates are preserved as in `words`.
    """
    constraints = list(constraints)
    _check_lengths(constraints, N)
    return [w for w in words if len(w) == N and satisfies_all(w, constraints)]


def confirm_in_dictionary(words: Iterable[str], dictionary: AbstractSet[str]) -> List[str]:
    """Stage 2: drop tokens the dictionary doesn't know (proper nouns, OCR noise...)."""
    return [w for w in words if w in dictionary]


def dedupe_sorted(words: Iterable[str]) -> List[str]:
    """Stage 3: unique words in lexicographic order (canonical pre-ranking order)."""
    return sorted(set(words))


def filter_candidates(words: Iterable[str], constraints: Sequence[Constraint],
                      dictionary: AbstractSet[str], N: int = DEFAULT_WORD_LENGTH) -> List[str]:
    """
    Run all three stages.

    Args:
      words       : corpus words (normalized)
      constraints : feedback constraints; [] keeps everything
      dictionary  : set of real words; an empty set yields []
      N           : expected word length

    Returns:
      Sorted list of unique candidates. An empty result is ambiguous on its
      own: check len(dictionary) to tell "no data" from "no matches".
    """
    matched = match_constraints(words, constraints, N)
    return dedupe_sorted(confirm_in_dictionary(matched, dictionary))
