from __future__ import annotations
from typing import Dict, List, Sequence, Type

import numpy as np

from packages.datasets import WordCorpus
from packages.engine import ENGLISH_LETTER_WEIGHTS, FrequencyTable

# ---- Global ranker registry ----
REGISTRY: Dict[str, Type["BaseRanker"]] = {}


def register(cls: Type["BaseRanker"]) -> Type["BaseRanker"]:
    """
    Decorator: @register on a ranker class adds it to REGISTRY by its `id`.
    """
    rid = getattr(cls, "id", None)
    if not rid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if rid in REGISTRY:
        raise ValueError(f"Duplicate ranker id: {rid}")
    REGISTRY[rid] = cls
    return cls


def stable_descending(words: Sequence[str], keys: Sequence[int]) -> List[str]:
    """
    Order `words` by `keys`, highest first; equal keys keep input order.

    argsort on the negated keys with kind="stable" is exactly a stable
    descending sort.
    """
    if not words:
        return []
    k = np.asarray(keys, dtype=np.int64)
    order = np.argsort(-k, kind="stable")
    return [words[i] for i in order]


# ---- Base class that rankers inherit ----
class BaseRanker:
    id = "base"
    name = "Base"
    version = "0.0.0"

    def __init__(self, table: FrequencyTable = ENGLISH_LETTER_WEIGHTS):
        self.table = table

    def keys(self, candidates: Sequence[str], corpus: WordCorpus) -> List[int]:
        raise NotImplementedError("Override in subclass")

    def rank(self, candidates: Sequence[str], corpus: WordCorpus) -> List[str]:
        """Full ordering of `candidates`; truncation is up to the caller."""
        candidates = list(candidates)
        return stable_descending(candidates, self.keys(candidates, corpus))
