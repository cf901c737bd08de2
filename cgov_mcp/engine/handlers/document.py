"""Document tool handlers.

The search and section tools of all three policy documents go through
the same two handlers, parameterised by a DocumentSpec. Each call reads
and parses the document afresh.
"""

import asyncio
import logging
from typing import Any

from ...errors import CgovError
from ...models import GetSectionParams, SearchDocumentParams, ToolResult, text_result
from ..core import (
    extract_coded_clauses,
    filter_sections,
    parse_sections,
    resolve_sections,
    search_sections,
)
from ..documents import DocumentSpec
from ..formatting import (
    format_coded_clauses,
    format_search_result,
    format_section_not_found,
    format_sections,
)
from .base import HandlerContext

logger = logging.getLogger(__name__)


async def load_document(spec: DocumentSpec, ctx: HandlerContext) -> str:
    """Read a document's text off the event loop."""
    return await asyncio.to_thread(ctx.store.load, spec)


async def handle_search_document(
    spec: DocumentSpec, params: dict[str, Any], ctx: HandlerContext
) -> ToolResult:
    """Search a document for query terms.

    Args:
        spec: Document to search
        params: Dict containing:
            - query: Free-text query
            - section / pillar: Optional text a section must mention
            - include_full_sections: Render whole sections instead of snippets

    Returns:
        ToolResult with matching titles and excerpts, or a no-match message
    """
    args = SearchDocumentParams.model_validate(params)

    try:
        content = await load_document(spec, ctx)
    except CgovError as e:
        return text_result(f"Error searching {spec.search_error_label}: {e}", is_error=True)

    sections = parse_sections(content, skip_front_matter=spec.skip_front_matter)
    if args.section:
        sections = filter_sections(sections, args.section)

    result = search_sections(args.query, sections)
    logger.debug(
        f"{spec.key}: query={args.query!r} matched {len(result.matches)} section(s), "
        f"{len(result.snippets)} snippet(s)"
    )
    return text_result(
        format_search_result(
            spec,
            args.query,
            result,
            filter_value=args.section,
            include_full_sections=args.include_full_sections,
            limits=ctx.limits,
        )
    )


async def handle_get_section(
    spec: DocumentSpec, params: dict[str, Any], ctx: HandlerContext
) -> ToolResult:
    """Retrieve sections of a document by name, number or code.

    Args:
        spec: Document to look in
        params: Dict containing:
            - section_name: e.g. 'Article I', 'Tenet 5', 'PARAM-01', 'G.3'

    Returns:
        ToolResult with the matching clauses or sections
    """
    args = GetSectionParams.model_validate(params)

    try:
        content = await load_document(spec, ctx)
    except CgovError as e:
        return text_result(f"Error retrieving section: {e}", is_error=True)

    sections = parse_sections(content, skip_front_matter=spec.skip_front_matter)
    matches = resolve_sections(args.section_name, sections, spec.rules)
    if not matches:
        return text_result(format_section_not_found(spec, args.section_name))

    if spec.extract_coded_clauses:
        clauses = extract_coded_clauses(args.section_name, matches)
        if clauses:
            return text_result(format_coded_clauses(clauses))

    return text_result(format_sections(matches, ctx.limits))
