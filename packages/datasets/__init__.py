from .validator import validate_sources, pretty_summary
from .io import (
    WordCorpus,
    read_lines,
    write_lines,
    load_corpus,
    load_frequency_corpus,
    load_word_list,
    load_dictionary,
)
from .constraints_io import (
    load_constraints,
    parse_constraint,
    constraints_from_feedback,
    constraints_from_history,
)

__all__ = [
    "validate_sources", "pretty_summary",
    "WordCorpus", "load_corpus", "load_frequency_corpus", "load_word_list", "load_dictionary",
    "load_constraints", "parse_constraint", "constraints_from_feedback", "constraints_from_history",
]
