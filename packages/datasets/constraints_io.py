"""
Constraint sources.

Three ways to describe what the feedback has told us so far:

1) JSON file, a list of records:
     [{"kind": "absent",  "letter": "s"},
      {"kind": "present", "letter": "e", "exclude": [0, 2, 4]},
      {"kind": "exact",   "letter": "l", "position": 4}]

2) Compact tokens (CLI friendly):
     -s          absent
     +e:0,2,4    present elsewhere, not at slots 0, 2, 4 (slots optional: "+e")
     =l:4        exact at slot 4

3) Raw feedback: a guess plus a pattern of 'G' (green), 'Y' (yellow) and
   '-' (gray), e.g. ("eagle", "Y---Y").

Slots are 0-based everywhere. Every malformed record raises ValueError.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Dict, List, Set, Tuple

from packages.engine import Constraint, ConstraintKind, DEFAULT_WORD_LENGTH

_KINDS = {
    "absent": ConstraintKind.ABSENT,
    "not_present": ConstraintKind.ABSENT,
    "present": ConstraintKind.PRESENT_ELSEWHERE,
    "present_elsewhere": ConstraintKind.PRESENT_ELSEWHERE,
    "exact": ConstraintKind.EXACT,
    "perfect": ConstraintKind.EXACT,
}


def constraint_from_record(rec: Dict, N: int = DEFAULT_WORD_LENGTH) -> Constraint:
    if not isinstance(rec, dict):
        raise ValueError(f"constraint record must be an object; got {rec!r}")
    kind_name = str(rec.get("kind", "")).strip().lower()
    if kind_name not in _KINDS:
        raise ValueError(f"unknown constraint kind in {rec!r}; expected one of {sorted(_KINDS)}")
    kind = _KINDS[kind_name]
    letter = rec.get("letter")

    try:
        if kind is ConstraintKind.ABSENT:
            return Constraint.absent(letter, N=N)
        if kind is ConstraintKind.EXACT:
            return Constraint.exact(letter, rec.get("position"), N=N)
        exclude = rec.get("exclude", rec.get("exclude_positions", []))
        if not isinstance(exclude, list):
            raise ValueError("exclude must be a list of slots")
        return Constraint.present_elsewhere(letter, exclude, N=N)
    except ValueError as e:
        raise ValueError(f"bad constraint record {rec!r}: {e}") from e


def load_constraints(p: Path | str, N: int = DEFAULT_WORD_LENGTH) -> List[Constraint]:
    """Read a JSON list of constraint records."""
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    data = json.loads(p.read_text(encoding="utf-8"))
    if not isinstance(data, list):
        raise ValueError(f"{p}: expected a JSON list of constraint records")
    return [constraint_from_record(rec, N) for rec in data]


def _parse_slots(s: str, token: str) -> List[int]:
    try:
        return [int(x) for x in s.split(",") if x.strip()]
    except ValueError as e:
        raise ValueError(f"bad slot list in constraint {token!r}") from e


def parse_constraint(token: str, N: int = DEFAULT_WORD_LENGTH) -> Constraint:
    """
    Parse one compact token: "-s", "+e:0,2,4", "+e", "=l:4".
    """
    t = token.strip()
    if len(t) < 2:
        raise ValueError(f"bad constraint {token!r}")
    op, rest = t[0], t[1:]
    letter, _, slots = rest.partition(":")

    try:
        if op == "-":
            if slots:
                raise ValueError("absent constraints take no slots")
            return Constraint.absent(letter, N=N)
        if op == "+":
            return Constraint.present_elsewhere(letter, _parse_slots(slots, token), N=N)
        if op == "=":
            pos = _parse_slots(slots, token)
            if len(pos) != 1:
                raise ValueError("exact constraints take exactly one slot")
            return Constraint.exact(letter, pos[0], N=N)
    except ValueError as e:
        raise ValueError(f"bad constraint {token!r}: {e}") from e
    raise ValueError(f"bad constraint {token!r}: must start with '-', '+' or '='")


def constraints_from_feedback(guess: str, pattern: str,
                              N: int = DEFAULT_WORD_LENGTH) -> List[Constraint]:
    """
    Translate one (guess, pattern) pair into constraints.

      'G' -> exact at that slot
      'Y' -> present elsewhere, excluding that slot
      '-' -> absent, unless the same letter is G/Y elsewhere in this guess
             (a duplicate that ran out); then the slot becomes an exclusion.

    Yellow/gray exclusions for the same letter are merged into one constraint.
    """
    guess = guess.strip().lower()
    pattern = pattern.strip().upper()
    if len(guess) != N or not (guess.isascii() and guess.isalpha()):
        raise ValueError(f"guess must be {N} letters a–z; got {guess!r}")
    if len(pattern) != N or set(pattern) - set("GY-"):
        raise ValueError(f"pattern must be {N} chars of 'G', 'Y', '-'; got {pattern!r}")

    hit: Set[str] = {g for g, p in zip(guess, pattern) if p in "GY"}
    out: List[Constraint] = []
    absent: List[str] = []
    excluded: Dict[str, Set[int]] = {}

    for i, (g, p) in enumerate(zip(guess, pattern)):
        if p == "G":
            out.append(Constraint.exact(g, i, N=N))
        elif p == "Y":
            excluded.setdefault(g, set()).add(i)
        elif g in hit:
            excluded.setdefault(g, set()).add(i)
        elif g not in absent:
            absent.append(g)

    for g, slots in excluded.items():
        out.append(Constraint.present_elsewhere(g, slots, N=N))
    out.extend(Constraint.absent(g, N=N) for g in absent)
    return out


def constraints_from_history(history: List[Tuple[str, str]],
                             N: int = DEFAULT_WORD_LENGTH) -> List[Constraint]:
    """Concatenate the constraints of several (guess, pattern) rounds, dropping repeats."""
    out: List[Constraint] = []
    seen = set()
    for guess, pattern in history:
        for c in constraints_from_feedback(guess, pattern, N):
            if c not in seen:
                seen.add(c)
                out.append(c)
    return out
