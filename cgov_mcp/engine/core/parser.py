"""Markdown section parsing.

Splits raw markdown into `Section` records using `#`..`####` headings as
boundaries. Text before the first heading belongs to no section.
"""

import re

from .document import Section

HEADING_PATTERN = re.compile(r"^(#{1,4})\s+(.+)$")
FRONT_MATTER_DELIMITER = "---"


def _front_matter_end(lines: list[str]) -> int:
    """Index of the first line after a leading front matter block.

    Returns 0 when there is no block. An unterminated block swallows
    the whole document.
    """
    if not lines or lines[0].strip() != FRONT_MATTER_DELIMITER:
        return 0
    for i in range(1, len(lines)):
        if lines[i].strip() == FRONT_MATTER_DELIMITER:
            return i + 1
    return len(lines)


def parse_sections(text: str, skip_front_matter: bool = False) -> list[Section]:
    """Parse markdown text into an ordered list of sections.

    Args:
        text: Raw document text
        skip_front_matter: Drop a leading `---` delimited metadata block

    Returns:
        Sections in document order. Never raises; heading-less text
        yields an empty list.
    """
    lines = text.split("\n")
    start = _front_matter_end(lines) if skip_front_matter else 0

    sections: list[Section] = []
    # Open section as [title, content_parts, level, start_line]
    current: tuple[str, list[str], int, int] | None = None

    for i in range(start, len(lines)):
        line = lines[i]
        heading = HEADING_PATTERN.match(line)

        if heading:
            if current is not None:
                title, parts, level, first = current
                sections.append(Section(title, "\n".join(parts), level, first, i - 1))
            current = (heading.group(2).strip(), [line], len(heading.group(1)), i)
        elif current is not None:
            current[1].append(line)

    if current is not None:
        title, parts, level, first = current
        sections.append(Section(title, "\n".join(parts), level, first, len(lines) - 1))

    return sections
