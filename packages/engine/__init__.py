from .normalize import normalize, normalize_all, DEFAULT_WORD_LENGTH
from .frequency import FrequencyTable, ENGLISH_LETTER_WEIGHTS
from .scoring import score
from .constraints import (
    Constraint,
    ConstraintKind,
    satisfies,
    satisfies_all,
    match_constraints,
    confirm_in_dictionary,
    dedupe_sorted,
    filter_candidates,
)

__all__ = [
    "normalize", "normalize_all", "DEFAULT_WORD_LENGTH",
    "FrequencyTable", "ENGLISH_LETTER_WEIGHTS", "score",
    "Constraint", "ConstraintKind", "satisfies", "satisfies_all",
    "match_constraints", "confirm_in_dictionary", "dedupe_sorted", "filter_candidates",
]
