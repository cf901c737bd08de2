"""Free-text term matching over parsed sections.

Matching is literal substring presence of any query term; there is no
scoring. Snippets are the matching line plus one line of context either
side, de-duplicated across the whole search.
"""

from .document import SearchResult, Section

MIN_TERM_LENGTH = 3


def tokenize_query(query: str) -> list[str]:
    """Lower-case the query and keep whitespace-separated terms of 3+ chars."""
    return [t for t in query.lower().split() if len(t) >= MIN_TERM_LENGTH]


def filter_sections(sections: list[Section], needle: str) -> list[Section]:
    """Keep sections whose title or content contains `needle` (case-insensitive)."""
    needle_lower = needle.lower()
    return [
        s
        for s in sections
        if needle_lower in s.title.lower() or needle_lower in s.content.lower()
    ]


def _section_matches(section: Section, terms: list[str]) -> bool:
    content_lower = section.content.lower()
    title_lower = section.title.lower()
    # Content starts with the heading line, so the title check rarely decides
    return any(t in content_lower for t in terms) or any(t in title_lower for t in terms)


def _snippets_for(section: Section, terms: list[str]) -> list[str]:
    lines = section.content.split("\n")
    found: list[str] = []
    for i, line in enumerate(lines):
        line_lower = line.lower()
        if any(t in line_lower for t in terms):
            window = lines[max(0, i - 1) : min(len(lines), i + 2)]
            snippet = "\n".join(window).strip()
            if snippet:
                found.append(snippet)
    return found


def search_sections(query: str, sections: list[Section]) -> SearchResult:
    """Find sections containing any query term and extract snippets.

    Args:
        query: Free-text query; terms shorter than 3 characters are ignored
        sections: Sections in document order

    Returns:
        SearchResult with matches in document order and unique snippets in
        discovery order. A query with no usable terms matches nothing.
    """
    terms = tokenize_query(query)
    if not terms:
        return SearchResult()

    matches: list[Section] = []
    snippets: list[str] = []
    seen: set[str] = set()

    for section in sections:
        if not _section_matches(section, terms):
            continue
        matches.append(section)
        for snippet in _snippets_for(section, terms):
            if snippet not in seen:
                seen.add(snippet)
                snippets.append(snippet)

    return SearchResult(matches=tuple(matches), snippets=tuple(snippets))
