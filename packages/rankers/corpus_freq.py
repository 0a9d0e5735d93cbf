"""
Corpus-Frequency ranker.

Orders candidates by how often they occur in the frequency corpus (news text),
most common first. Common words are likelier puzzle answers than obscure
ones with great letter coverage.

Words without a recorded frequency (plain word-list corpora) count as 0.
"""

from __future__ import annotations
from typing import Mapping, List, Sequence

from packages.datasets import WordCorpus
from .base import BaseRanker, register, stable_descending


def rank_by_corpus_frequency(candidates: Sequence[str],
                             freq_lookup: Mapping[str, int]) -> List[str]:
    candidates = list(candidates)
    return stable_descending(candidates, [freq_lookup.get(w, 0) for w in candidates])


@register
class CorpusFrequencyRanker(BaseRanker):
    id = "corpus_freq"
    name = "Corpus Word Frequency"
    version = "1.0.0"

    def keys(self, candidates: Sequence[str], corpus: WordCorpus) -> List[int]:
        freqs = corpus.frequency_map()
        return [freqs.get(w, 0) for w in candidates]
