"""Policy document registry and storage access.

The three governance documents share one parse/match/resolve pipeline;
a `DocumentSpec` carries everything that differs between them.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path

from ..errors import DocumentUnavailableError
from .core import (
    ResolverRule,
    numbered_section_rule,
    pillar_rule,
    section_code_rule,
    tenet_rule,
    whole_word_rule,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DocumentSpec:
    """Per-document configuration for the shared search pipeline.

    Attributes:
        key: Stable document key ("constitution", "vision", ...)
        filename: File name inside the documents directory
        display_name: Name used in user-facing messages
        skip_front_matter: Strip a leading `---` metadata block before parsing
        filter_param: Name of the optional search filter argument
        rules: Structured resolver rules applied after title matching
        search_error_label: Wording for search failures ("searching ...")
        not_found_hint: Suggestions shown when a section lookup finds nothing
        extract_coded_clauses: Return only matching guardrail clauses for code lookups
    """

    key: str
    filename: str
    display_name: str
    skip_front_matter: bool = False
    filter_param: str = "section"
    rules: tuple[ResolverRule, ...] = field(default_factory=tuple)
    search_error_label: str = ""
    not_found_hint: str = ""
    extract_coded_clauses: bool = False


CONSTITUTION = DocumentSpec(
    key="constitution",
    filename="cardano-constitution.md",
    display_name="Cardano Constitution",
    rules=(tenet_rule, whole_word_rule),
    search_error_label="constitution",
    not_found_hint=(
        "Try searching for:\n"
        '- Article names (e.g., "Article I", "Article VII")\n'
        '- Tenets (e.g., "Tenet 1", "Tenet 10")\n'
        '- Guardrail codes (e.g., "PARAM-01", "TREASURY-01a")\n'
        '- General terms (e.g., "Preamble", "DReps", "Constitutional Committee")'
    ),
    extract_coded_clauses=True,
)

VISION = DocumentSpec(
    key="vision",
    filename="cardano-vision-2030.md",
    display_name="Cardano Vision 2030 document",
    skip_front_matter=True,
    filter_param="pillar",
    rules=(pillar_rule, section_code_rule),
    search_error_label="vision document",
    not_found_hint=(
        "Try searching for:\n"
        '- Pillar names (e.g., "Pillar 1", "Infrastructure", "Governance")\n'
        '- Section codes (e.g., "I.1", "A.2", "G.3")\n'
        '- Keywords (e.g., "KPI", "Treasury", "SPO", "DeFi")'
    ),
)

VOTING_PRINCIPLES = DocumentSpec(
    key="voting-principles",
    filename="vision-analysis-criteria.md",
    display_name="Voting Principles document",
    rules=(numbered_section_rule,),
    search_error_label="voting principles",
    not_found_hint=(
        "Try searching for:\n"
        '- Section numbers (e.g., "2", "4.2", "5.1")\n'
        '- Keywords (e.g., "Budget", "Front-Loaded", "Recognized Party", "Voting Decision")\n'
        '- Topics (e.g., "NCL", "KPI", "Partition")'
    ),
)

DOCUMENTS: dict[str, DocumentSpec] = {
    spec.key: spec for spec in (CONSTITUTION, VISION, VOTING_PRINCIPLES)
}


class DocumentStore:
    """Reads document text from a directory.

    Every `load` re-reads the file. With `cache_enabled` the text is
    memoised per (path, mtime) so edits on disk are still picked up.
    """

    def __init__(self, documents_dir: Path | str, cache_enabled: bool = False):
        self.documents_dir = Path(documents_dir)
        self.cache_enabled = cache_enabled
        self._cache: dict[Path, tuple[int, str]] = {}

    def path_for(self, spec: DocumentSpec) -> Path:
        return self.documents_dir / spec.filename

    def load(self, spec: DocumentSpec) -> str:
        """Return the raw text of a document.

        Raises:
            DocumentUnavailableError: If the file cannot be read
        """
        path = self.path_for(spec)
        try:
            if not self.cache_enabled:
                return path.read_text(encoding="utf-8")

            mtime = path.stat().st_mtime_ns
            cached = self._cache.get(path)
            if cached and cached[0] == mtime:
                return cached[1]
            text = path.read_text(encoding="utf-8")
            self._cache[path] = (mtime, text)
            return text
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Failed to load document '{spec.key}' from {path}: {e}")
            raise DocumentUnavailableError(spec.key, str(e)) from e
