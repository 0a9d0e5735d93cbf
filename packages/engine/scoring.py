"""
Letter-frequency score for a single word.

score(word) = sum of reference weights over the word's DISTINCT letters.

Repeated letters are counted once, so "three" is not rewarded for its second
'e' and a word covering five different common letters beats one that repeats
its best letter. Consequences:
  - permutation-invariant: score("crane") == score("nacre")
  - repetition-invariant:  score("aabbc") == score("abc")
"""

from __future__ import annotations

from .frequency import ENGLISH_LETTER_WEIGHTS, FrequencyTable


def score(word: str, table: FrequencyTable = ENGLISH_LETTER_WEIGHTS) -> int:
    """
    Examples (English table):
      score("e")     -> 12000
      score("three") -> 9000 + 6400 + 6200 + 12000 = 33600
    """
    return sum(table.weight_of(ch) for ch in set(word))
