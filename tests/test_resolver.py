"""
Tests for direct section lookup.

Tests cover:
- Title substring matching shared by all documents
- Tenet, guardrail code, pillar, focus-area code and numbered section rules
- Coded clause extraction
"""

from cgov_mcp.config import STATIC_DIR
from cgov_mcp.engine.core import (
    extract_coded_clauses,
    parse_sections,
    resolve_sections,
)
from cgov_mcp.engine.documents import CONSTITUTION, VISION, VOTING_PRINCIPLES

from .conftest import CONSTITUTION_TEXT, VISION_TEXT, VOTING_TEXT


def titles(sections) -> list[str]:
    return [s.title for s in sections]


class TestTitleMatching:
    """Tests for the title-substring rule."""

    def test_case_insensitive_title_substring(self) -> None:
        sections = parse_sections(CONSTITUTION_TEXT)

        assert titles(resolve_sections("preamble", sections)) == ["PREAMBLE"]

    def test_all_matching_titles_in_order(self) -> None:
        sections = parse_sections("# Article I\n# Article II\n# Other")

        assert titles(resolve_sections("article", sections)) == ["Article I", "Article II"]

    def test_no_match(self) -> None:
        assert resolve_sections("nothing", parse_sections(CONSTITUTION_TEXT), CONSTITUTION.rules) == []


class TestConstitutionRules:
    """Tests for tenet and guardrail code lookup."""

    def setup_method(self) -> None:
        self.sections = parse_sections(CONSTITUTION_TEXT)

    def test_tenet_number(self) -> None:
        """The section holding the bold tenet marker is returned."""
        result = resolve_sections("Tenet 5", self.sections, CONSTITUTION.rules)

        assert titles(result) == ["ARTICLE I. TENETS AND GUARDRAILS"]

    def test_tenet_number_without_space(self) -> None:
        result = resolve_sections("tenet5", self.sections, CONSTITUTION.rules)

        assert titles(result) == ["ARTICLE I. TENETS AND GUARDRAILS"]

    def test_unknown_tenet(self) -> None:
        assert resolve_sections("Tenet 9", self.sections, CONSTITUTION.rules) == []

    def test_tenet_one_does_not_match_tenet_ten(self) -> None:
        """The closing bold marker keeps Tenet 1 distinct from Tenet 10."""
        sections = parse_sections("# S\n**Tenet 10**: text")

        assert resolve_sections("Tenet 1", sections, CONSTITUTION.rules) == []

    def test_guardrail_code(self) -> None:
        result = resolve_sections("PARAM-01", self.sections, CONSTITUTION.rules)

        assert titles(result) == ["APPENDIX I: GUARDRAILS"]

    def test_guardrail_code_is_whole_word(self) -> None:
        """PARAM-0 does not match PARAM-01."""
        assert resolve_sections("PARAM-0", self.sections, CONSTITUTION.rules) == []

    def test_guardrail_code_hyphen_optional_in_text(self) -> None:
        sections = parse_sections("# Rules\nPARAM01 applies here")

        assert titles(resolve_sections("param-01", sections, CONSTITUTION.rules)) == ["Rules"]

    def test_guardrail_code_with_suffix(self) -> None:
        result = resolve_sections("TREASURY-01a", self.sections, CONSTITUTION.rules)

        assert titles(result) == ["APPENDIX I: GUARDRAILS"]

    def test_general_term_as_whole_word(self) -> None:
        """Any token matches sections whose content holds it as a word."""
        result = resolve_sections("budget", self.sections, CONSTITUTION.rules)

        assert titles(result) == ["ARTICLE III. GOVERNANCE"]

    def test_general_term_prefix_does_not_match(self) -> None:
        assert resolve_sections("budge", self.sections, CONSTITUTION.rules) == []

    def test_general_term_in_shipped_constitution(self) -> None:
        """DReps is mentioned in the bodies of two articles."""
        text = (STATIC_DIR / CONSTITUTION.filename).read_text(encoding="utf-8")

        result = resolve_sections("DReps", parse_sections(text), CONSTITUTION.rules)

        assert titles(result) == ["Section 1", "Section 1"]
        assert "Governance actions shall be submitted" in result[0].content
        assert "Delegated Representatives (DReps)" in result[1].content


class TestVisionRules:
    """Tests for pillar and focus-area lookup."""

    def setup_method(self) -> None:
        self.sections = parse_sections(VISION_TEXT, skip_front_matter=True)

    def test_pillar_by_name(self) -> None:
        result = resolve_sections("Pillar 3", self.sections, VISION.rules)

        assert titles(result) == ["Pillar 3: Governance"]

    def test_pillar_without_space(self) -> None:
        result = resolve_sections("Pillar1", self.sections, VISION.rules)

        assert titles(result) == ["Pillar 1: Infrastructure"]

    def test_section_code(self) -> None:
        result = resolve_sections("G.3", self.sections, VISION.rules)

        assert titles(result) == ["G.3. Treasury Seasons"]

    def test_keyword(self) -> None:
        result = resolve_sections("KPI", self.sections, VISION.rules)

        assert titles(result) == ["Core Key Performance Indicators (KPIs)"]


class TestVotingPrinciplesRules:
    """Tests for numbered section lookup."""

    def setup_method(self) -> None:
        self.sections = parse_sections(VOTING_TEXT)

    def test_section_keyword_and_number(self) -> None:
        result = resolve_sections("Section 4", self.sections, VOTING_PRINCIPLES.rules)

        assert titles(result) == ["4. Front-Loaded Funding Model"]

    def test_numbered_prefix_includes_subsections(self) -> None:
        """Sub-sections numbered 6.x also start with "6."."""
        result = resolve_sections("6. Voting", self.sections, VOTING_PRINCIPLES.rules)

        assert titles(result) == [
            "6. Voting Decision Framework",
            "6.1 Team Capability",
            "6.2 Cost Efficiency",
        ]

    def test_bare_number_matches_titles_containing_it(self) -> None:
        """A bare number is a plain title substring."""
        result = resolve_sections("5", self.sections, VOTING_PRINCIPLES.rules)

        assert titles(result) == ["5. Recognized Party Requirement"]


class TestExtractCodedClauses:
    """Tests for extract_coded_clauses."""

    def setup_method(self) -> None:
        self.sections = parse_sections(CONSTITUTION_TEXT)

    def test_extracts_clause_lines(self) -> None:
        found = extract_coded_clauses("PARAM-01", self.sections)

        assert len(found) == 1
        section, clauses = found[0]
        assert section.title == "APPENDIX I: GUARDRAILS"
        assert clauses == ['PARAM-01 (x - "must not") Parameters must not change without a governance action.']

    def test_letter_suffix_included(self) -> None:
        """PARAM-02 also picks up the PARAM-02a clause."""
        _, clauses = extract_coded_clauses("PARAM-02", self.sections)[0]

        assert clauses[0].startswith("PARAM-02a (")

    def test_non_code_token(self) -> None:
        assert extract_coded_clauses("Tenet 5", self.sections) == []

    def test_code_without_clause(self) -> None:
        assert extract_coded_clauses("HARDFORK-01", self.sections) == []
