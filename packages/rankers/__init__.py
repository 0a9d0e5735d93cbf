from __future__ import annotations
from typing import List
from .base import BaseRanker, REGISTRY, register

from . import letter_score  # noqa: F401
from . import corpus_freq  # noqa: F401
from .letter_score import rank_by_letter_score, best_overall
from .corpus_freq import rank_by_corpus_frequency


def create_ranker(ranker_id: str, **kwargs) -> BaseRanker:
    """
    Factory: instantiate a registered ranker by id.
    """
    try:
        cls = REGISTRY[ranker_id]
    except KeyError as e:
        raise ValueError(
            f"Unknown ranker id: {ranker_id}. Available: {sorted(REGISTRY.keys())}") from e
    return cls(**kwargs)


def get_ranker_ids() -> List[str]:
    """
    Return all registered ranker ids (sorted for stable CLI help).
    """
    return sorted(REGISTRY.keys())


__all__ = [
    "BaseRanker", "REGISTRY", "register", "create_ranker", "get_ranker_ids",
    "rank_by_letter_score", "rank_by_corpus_frequency", "best_overall",
]
