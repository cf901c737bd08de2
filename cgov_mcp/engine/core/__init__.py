"""Engine core: section parsing, term matching and section resolution.

All functions here are pure; they never raise for any text input and
never touch shared state.
"""

from .document import SearchResult, Section
from .matcher import filter_sections, search_sections, tokenize_query
from .parser import parse_sections
from .resolver import (
    ResolverRule,
    extract_coded_clauses,
    numbered_section_rule,
    pillar_rule,
    resolve_sections,
    section_code_rule,
    tenet_rule,
    whole_word_rule,
)

__all__ = [
    # Document structures
    "Section",
    "SearchResult",
    # Parsing and matching
    "parse_sections",
    "tokenize_query",
    "filter_sections",
    "search_sections",
    # Resolution
    "ResolverRule",
    "resolve_sections",
    "extract_coded_clauses",
    "tenet_rule",
    "whole_word_rule",
    "pillar_rule",
    "section_code_rule",
    "numbered_section_rule",
]
