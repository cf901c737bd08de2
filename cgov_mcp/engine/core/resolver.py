"""Direct section lookup by name, number or code.

Every section whose title contains the token is returned. Documents add
their own structured rules on top (numbered tenets/pillars, section codes,
guardrail codes). A rule returns True/False to decide a section, or None
to defer to the next rule.
"""

import re
from collections.abc import Callable, Sequence

from .document import Section

ResolverRule = Callable[[str, Section], bool | None]

CODED_IDENTIFIER = re.compile(r"^[A-Z]+-\d+[a-z]?$", re.IGNORECASE)
TENET_PATTERN = re.compile(r"tenet\s*(\d+)")
PILLAR_PATTERN = re.compile(r"^pillar\s*\d$")
SECTION_CODE_PATTERN = re.compile(r"^([a-z])\.(\d)$")
SECTION_NUMBER_PATTERN = re.compile(r"^section\s*\d$")
NUMBERED_PREFIX_PATTERN = re.compile(r"^\d\.?\s")


def resolve_sections(
    token: str, sections: Sequence[Section], rules: Sequence[ResolverRule] = ()
) -> list[Section]:
    """Return the sections identified by `token`, preserving document order.

    Args:
        token: Section name, number or code as typed by the caller
        sections: Parsed document sections
        rules: Document-specific rules tried after the title-substring rule
    """
    token_lower = token.lower()
    matches: list[Section] = []

    for section in sections:
        if token_lower in section.title.lower():
            matches.append(section)
            continue
        for rule in rules:
            decision = rule(token, section)
            if decision is not None:
                if decision:
                    matches.append(section)
                break

    return matches


def extract_coded_clauses(
    token: str, sections: Sequence[Section]
) -> list[tuple[Section, list[str]]]:
    """Pull `CODE (label) text` clauses for a guardrail-style code.

    Only applies when the whole token is a coded identifier such as
    PARAM-01 or TREASURY-01a. Sections without a clause are omitted; an
    empty list tells the caller to fall back to whole sections.
    """
    if not CODED_IDENTIFIER.match(token):
        return []

    clause = re.compile(
        rf"{re.escape(token.upper())}[a-z]?\s+\([^)]+\)\s+[^\n]+", re.IGNORECASE
    )
    found: list[tuple[Section, list[str]]] = []
    for section in sections:
        clauses = clause.findall(section.content)
        if clauses:
            found.append((section, clauses))
    return found


# ============ CONSTITUTION RULES ============


def tenet_rule(token: str, section: Section) -> bool | None:
    """'Tenet 5' matches the section containing the bold **Tenet 5** marker."""
    token_lower = token.lower()
    if not token_lower.startswith("tenet"):
        return None
    number = TENET_PATTERN.search(token_lower)
    if not number:
        return None
    return f"**tenet {number.group(1)}**" in section.content.lower()


def whole_word_rule(token: str, section: Section) -> bool | None:
    """The token matches as a whole word anywhere in the content.

    Hyphens inside the token are optional, so PARAM-01 also finds PARAM01
    and "DReps" finds the sections that mention DReps.
    """
    body = "-?".join(re.escape(part) for part in token.split("-"))
    if re.search(rf"\b{body}\b", section.content, re.IGNORECASE):
        return True
    return None
    body = "-?".join(re.escape(part) for part in token.split("-"))
    if re.search(rf"\b{body}\b", section.content, re.IGNORECASE):
        return True
    return None


# ============ VISION RULES ============


def pillar_rule(token: str, section: Section) -> bool | None:
    """'Pillar 2' or a bare '2' matches headings naming that pillar."""
    token_lower = token.lower()
    if PILLAR_PATTERN.match(token_lower) or re.fullmatch(r"\d", token_lower):
        number = re.sub(r"\D", "", token_lower)
        if f"pillar {number}" in section.title.lower():
            return True
    return None


def section_code_rule(token: str, section: Section) -> bool | None:
    """Focus-area codes like 'G.3' match headings that contain them."""
    code = SECTION_CODE_PATTERN.match(token.lower())
    if code and f"{code.group(1)}.{code.group(2)}" in section.title.lower():
        return True
    return None


# ============ VOTING PRINCIPLES RULES ============


def numbered_section_rule(token: str, section: Section) -> bool | None:
    """'Section 4' or '4. ...' matches headings starting with '4.'."""
    token_lower = token.lower()
    if SECTION_NUMBER_PATTERN.match(token_lower) or NUMBERED_PREFIX_PATTERN.match(token_lower):
        number = re.sub(r"\D", "", token_lower)
        if section.title.lower().startswith(f"{number}."):
            return True
    return None
