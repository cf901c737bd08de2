"""Text rendering for document tool results.

Truncation happens here, not in the matcher or resolver: they always
return the complete match set.
"""

from dataclasses import dataclass

from .core import SearchResult, Section
from .documents import DocumentSpec


@dataclass(frozen=True)
class ResultLimits:
    """How many items each rendering shows before summarising the rest."""

    section_lookup: int = 3
    full_sections: int = 5
    summary: int = 10


def _quote(snippet: str) -> str:
    return "> " + snippet.replace("\n", "\n> ")


def format_search_result(
    spec: DocumentSpec,
    query: str,
    result: SearchResult,
    filter_value: str | None = None,
    include_full_sections: bool = False,
    limits: ResultLimits = ResultLimits(),
) -> str:
    """Render a term search as markdown text."""
    if result.is_empty:
        scope = f" (searched within: {filter_value})" if filter_value else ""
        return f'No matches found for "{query}" in the {spec.display_name}.{scope}'

    matches, snippets = result.matches, result.snippets
    out = [f'Found {len(matches)} matching section(s) for "{query}":\n\n']

    if include_full_sections:
        for match in matches[: limits.full_sections]:
            out.append(f"## {match.title}\n{match.content}\n\n---\n\n")
        if len(matches) > limits.full_sections:
            out.append(
                f"... and {len(matches) - limits.full_sections} more sections. "
                "Refine your query for more specific results.\n"
            )
        return "".join(out)

    out.append("### Matching Sections:\n")
    for match in matches[: limits.summary]:
        out.append(f"- {match.title}\n")
    if len(matches) > limits.summary:
        out.append(f"  ... and {len(matches) - limits.summary} more\n")

    out.append("\n### Relevant Excerpts:\n\n")
    for snippet in snippets[: limits.summary]:
        out.append(f"{_quote(snippet)}\n\n")
    if len(snippets) > limits.summary:
        out.append(
            f"... and {len(snippets) - limits.summary} more excerpts. "
            "Use include_full_sections=true for complete text.\n"
        )
    return "".join(out)


def format_section_not_found(spec: DocumentSpec, section_name: str) -> str:
    return f'Section "{section_name}" not found in the {spec.display_name}.\n\n{spec.not_found_hint}'


def format_coded_clauses(found: list[tuple[Section, list[str]]]) -> str:
    """Render guardrail clauses grouped by the section they were found in."""
    out: list[str] = []
    for section, clauses in found:
        out.append(f"## Found in: {section.title}\n\n")
        out.extend(f"{clause}\n\n" for clause in clauses)
    return "".join(out)


def format_sections(matches: list[Section], limits: ResultLimits = ResultLimits()) -> str:
    """Render whole sections for a direct lookup."""
    out: list[str] = []
    for match in matches[: limits.section_lookup]:
        out.append(f"## {match.title}\n\n{match.content}\n\n---\n\n")
    if len(matches) > limits.section_lookup:
        out.append(f"\n... and {len(matches) - limits.section_lookup} more matching sections.\n")
    return "".join(out)
