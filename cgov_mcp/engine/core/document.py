"""Document data structures for the search engine.

Sections are a flat, ordered sequence. Nothing here is mutated after
construction; every tool call builds its own sections from fresh text.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Section:
    """A titled span of a markdown document.

    Attributes:
        title: Heading text, stripped of surrounding whitespace
        content: The heading line followed by every body line up to the next heading
        level: Number of '#' characters in the heading marker (1-4)
        start_line: Line of the heading (0-indexed)
        end_line: Last line belonging to the section (0-indexed, inclusive)
    """

    title: str
    content: str
    level: int
    start_line: int
    end_line: int


@dataclass(frozen=True)
class SearchResult:
    """Sections matching a query plus de-duplicated context snippets."""

    matches: tuple[Section, ...] = field(default_factory=tuple)
    snippets: tuple[str, ...] = field(default_factory=tuple)

    @property
    def is_empty(self) -> bool:
        return not self.matches
