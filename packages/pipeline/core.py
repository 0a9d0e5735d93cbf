"""
Solve pipeline core.

- run_pipeline: one batch pass from loaded sources to ranked suggestions.
    corpus -> constraint match -> dictionary confirm -> dedupe/sort -> rankers
  plus the best opening word over the whole, unfiltered corpus.

The pipeline takes in-memory collections only; reading files is the caller's
job, so a missing source never gets this far. It's UI-agnostic so a CLI, a
notebook, or tests can drive it the same way.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import AbstractSet, Dict, List, Optional, Sequence

from tqdm import tqdm

from packages.datasets import WordCorpus
from packages.engine import (
    Constraint,
    ENGLISH_LETTER_WEIGHTS,
    FrequencyTable,
    DEFAULT_WORD_LENGTH,
    match_constraints,
    confirm_in_dictionary,
    dedupe_sorted,
)
from packages.rankers import create_ranker, best_overall

DEFAULT_RANKERS = ("letter_score", "corpus_freq")


@dataclass
class SolveReport:
    """Everything a report needs: counts, candidates and full rankings."""
    N: int
    word_count: int            # corpus entries loaded
    dictionary_count: int      # unique dictionary words
    match_count: int           # corpus entries passing every constraint (duplicates kept)
    confirmed_count: int       # unique matches the dictionary confirms
    candidates: List[str]      # confirmed matches, sorted
    rankings: Dict[str, List[str]] = field(default_factory=dict)  # ranker id -> full ordering
    best_start: Optional[str] = None  # best opening word over the whole corpus

    @property
    def dictionary_empty(self) -> bool:
        """True when no candidates can exist because no dictionary was loaded."""
        return self.dictionary_count == 0

    @property
    def by_letter_score(self) -> List[str]:
        return self.rankings.get("letter_score", [])

    @property
    def by_corpus_freq(self) -> List[str]:
        return self.rankings.get("corpus_freq", [])


def _assert_word_length(N: int) -> None:
    """Guardrail: word length must be a positive integer."""
    if isinstance(N, bool) or not isinstance(N, int) or N <= 0:
        raise ValueError(f"N must be a positive integer; got {N!r}")


def run_pipeline(
        corpus: WordCorpus,
        dictionary: AbstractSet[str],
        constraints: Sequence[Constraint],
        *,
        N: int = DEFAULT_WORD_LENGTH,
        table: FrequencyTable = ENGLISH_LETTER_WEIGHTS,
        rankers: Sequence[str] = DEFAULT_RANKERS,
        progress: bool = False,
) -> SolveReport:
    """
    Filter and rank in one pass.

    Args:
        corpus:      loaded word(+frequency) entries, normalized to length N
        dictionary:  set of real words used to confirm matches
        constraints: feedback constraints built for length N
        N:           word length
        table:       letter weights for letter scoring
        rankers:     registered ranker ids to run over the candidates
        progress:    show a tqdm bar over the constraint pass

    Returns:
        SolveReport. Both "no dictionary" and "no matches" give an empty
        candidate list; use report.dictionary_empty to tell them apart.
    """
    _assert_word_length(N)

    words = corpus.words()
    it = tqdm(words, desc="Matching", unit="word", ncols=80, disable=not progress)
    matched = match_constraints(it, constraints, N)
    candidates = dedupe_sorted(confirm_in_dictionary(matched, dictionary))

    rankings: Dict[str, List[str]] = {}
    for rid in rankers:
        rankings[rid] = create_ranker(rid, table=table).rank(candidates, corpus)

    return SolveReport(
        N=N,
        word_count=len(corpus),
        dictionary_count=len(dictionary),
        match_count=len(matched),
        confirmed_count=len(candidates),
        candidates=candidates,
        rankings=rankings,
        best_start=best_overall(words, table) if words else None,
    )
