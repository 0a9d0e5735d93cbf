"""
Reference letter-frequency weights.

A FrequencyTable is an ordered list of (weight, letters) groups: every letter
in a group shares the same weight. The English table below is the classic
printing-press ordering (e, t, a/i/n/o/s, h, r, ...). Letters missing from all
groups weigh 0.

The table is configuration data, not logic: other corpora or languages can ship
their own table as JSON and load it with FrequencyTable.from_json().
"""

from __future__ import annotations

import json
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Iterable, List, Tuple

Group = Tuple[int, str]  # (weight, letters)


class FrequencyTable:
    """
    Immutable letter -> weight lookup built from weight groups.

    Raises ValueError if a weight is not a positive integer, a group contains
    something other than lowercase letters, or a letter appears in two groups.
    """

    __slots__ = ("_groups", "_weights")

    def __init__(self, groups: Iterable[Group]):
        weights: Dict[str, int] = {}
        frozen: List[Group] = []

        for weight, letters in groups:
            if isinstance(weight, bool) or not isinstance(weight, int) or weight <= 0:
                raise ValueError(f"weight must be a positive integer; got {weight!r}")
            if not isinstance(letters, str) or not letters:
                raise ValueError(f"letters must be a non-empty string; got {letters!r}")
            for ch in letters:
                if not ("a" <= ch <= "z"):
                    raise ValueError(f"invalid letter {ch!r} in group {letters!r}")
                if ch in weights:
                    raise ValueError(f"letter {ch!r} appears in more than one group")
                weights[ch] = weight
            frozen.append((weight, letters))

        self._groups: Tuple[Group, ...] = tuple(frozen)
        self._weights = MappingProxyType(weights)

    @classmethod
    def from_json(cls, path: Path | str) -> "FrequencyTable":
        """
        Load a table from a JSON file shaped like:
            [[12000, "e"], [9000, "t"], [8000, "ainos"], ...]
        """
        p = Path(path)
        if not p.exists():
            raise FileNotFoundError(p)
        data = json.loads(p.read_text(encoding="utf-8"))
        if not isinstance(data, list):
            raise ValueError(f"{p}: expected a JSON list of [weight, letters] pairs")
        groups: List[Group] = []
        for item in data:
            if not isinstance(item, (list, tuple)) or len(item) != 2:
                raise ValueError(f"{p}: bad group {item!r}")
            groups.append((item[0], item[1]))
        return cls(groups)

    @property
    def groups(self) -> Tuple[Group, ...]:
        return self._groups

    def weight_of(self, letter: str) -> int:
        return self._weights.get(letter, 0)

    def as_dict(self) -> Dict[str, int]:
        """Letter -> weight, for manifests and debugging."""
        return dict(self._weights)

    def __len__(self) -> int:
        return len(self._weights)

    def __repr__(self) -> str:
        return f"FrequencyTable({list(self._groups)!r})"


# Process-wide reference table; never mutated after import.
ENGLISH_LETTER_WEIGHTS = FrequencyTable([
    (12000, "e"),
    (9000, "t"),
    (8000, "ainos"),
    (6400, "h"),
    (6200, "r"),
    (4400, "d"),
    (4000, "l"),
    (3400, "u"),
    (3000, "cm"),
    (2500, "f"),
    (2000, "wy"),
    (1700, "gp"),
    (1600, "b"),
    (1200, "v"),
    (800, "k"),
    (500, "q"),
    (400, "jx"),
    (200, "z"),
])
