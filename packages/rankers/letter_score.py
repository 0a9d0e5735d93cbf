"""
Letter-Score ranker (distinct-letter coverage).

Idea:
  - Score each candidate with the reference letter weights, counting each
    DISTINCT letter once, and order highest first.

Also home of best_overall(): the single best-scoring word of the whole
corpus, regardless of any constraints. That's the "what should I open with"
answer.

Notes:
  - Ties keep the input order (stable sort); the pipeline feeds candidates
    in lexicographic order, so ties come out alphabetical.
  - best_overall() ties go to the first occurrence in corpus order.
"""

from __future__ import annotations
from typing import List, Sequence

import numpy as np

from packages.datasets import WordCorpus
from packages.engine import ENGLISH_LETTER_WEIGHTS, FrequencyTable, score
from .base import BaseRanker, register, stable_descending


def rank_by_letter_score(candidates: Sequence[str],
                         table: FrequencyTable = ENGLISH_LETTER_WEIGHTS) -> List[str]:
    candidates = list(candidates)
    return stable_descending(candidates, [score(w, table) for w in candidates])


def best_overall(all_words: Sequence[str],
                 table: FrequencyTable = ENGLISH_LETTER_WEIGHTS) -> str:
    """
    Highest letter score over `all_words`; the first one wins a tie.
    Raises ValueError on an empty sequence.
    """
    all_words = list(all_words)
    if not all_words:
        raise ValueError("best_overall() needs at least one word")
    scores = np.fromiter((score(w, table) for w in all_words), dtype=np.int64,
                         count=len(all_words))
    # argmax returns the first index of the maximum
    return all_words[int(np.argmax(scores))]


@register
class LetterScoreRanker(BaseRanker):
    id = "letter_score"
    name = "Letter Frequency (distinct)"
    version = "1.0.0"

    def keys(self, candidates: Sequence[str], corpus: WordCorpus) -> List[int]:
        return [score(w, self.table) for w in candidates]
