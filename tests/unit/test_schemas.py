"""
Unit tests for Research Advisor schemas.

Tests verify:
1. Defaults are the sentinel values, never None
2. Parsed records are immutable
3. Invalid data raises ValidationError
"""

import pytest
from pydantic import ValidationError

from research_advisor.schemas import (
    AcademicLevel,
    EducationLevel,
    FeedbackAnalysis,
    HistoryItem,
    Paper,
    StructureSection,
    TopicAnalysis,
    UploadedDocument,
    ViabilityStatus,
)
from research_advisor.schemas.markdown import Block


# =============================================================================
# DEFAULTS
# =============================================================================

class TestDefaults:
    """Tests for sentinel defaults."""

    def test_topic_analysis_defaults(self):
        analysis = TopicAnalysis()
        assert analysis.papers == []
        assert analysis.structure == []
        assert analysis.overview.summary == "Not found."
        assert analysis.overview.prerequisites == "N/A"
        assert analysis.viability.status == ViabilityStatus.UNKNOWN

    def test_paper_defaults(self):
        paper = Paper()
        assert (paper.title, paper.authors, paper.journal, paper.year) == ("N/A",) * 4

    def test_structure_section_requires_title(self):
        with pytest.raises(ValidationError):
            StructureSection()
        assert StructureSection(title="Results").expert_tip == "N/A"

    def test_example_validates(self):
        example = TopicAnalysis.model_config["json_schema_extra"]["examples"][0]
        analysis = TopicAnalysis.model_validate(example)
        assert analysis.viability.status == ViabilityStatus.WISE_CHOICE


# =============================================================================
# VALIDATION
# =============================================================================

class TestValidation:
    """Tests for field constraints and immutability."""

    def test_records_are_frozen(self):
        paper = Paper(title="A")
        with pytest.raises(ValidationError):
            paper.title = "B"

    def test_negative_grade_rejected(self):
        with pytest.raises(ValidationError):
            FeedbackAnalysis(grade=-1)

    def test_negative_document_size_rejected(self):
        with pytest.raises(ValidationError):
            UploadedDocument(name="a.txt", size=-5, mime_type="text/plain", content="x")

    def test_unknown_viability_status_rejected(self):
        with pytest.raises(ValidationError):
            TopicAnalysis.model_validate({"viability": {"status": "MAYBE"}})

    def test_history_item_round_trip(self):
        item = HistoryItem(id="abc", topic="T", analysis="### Topic Overview\n", timestamp=1)
        assert HistoryItem.model_validate_json(item.model_dump_json()) == item


# =============================================================================
# ENUMS AND BLOCKS
# =============================================================================

class TestEnums:
    """Tests for enum values shown in the UI."""

    @pytest.mark.parametrize(
        "status,title",
        [
            (ViabilityStatus.WISE_CHOICE, "Wise Choice"),
            (ViabilityStatus.CAUTION_ADVISED, "Caution Advised"),
            (ViabilityStatus.NOVEL_OPPORTUNITY, "Novel Opportunity"),
            (ViabilityStatus.UNKNOWN, "Analysis"),
        ],
    )
    def test_display_title(self, status, title):
        assert status.display_title == title

    def test_level_values(self):
        assert [lvl.value for lvl in AcademicLevel][-1] == "Professional"
        assert [lvl.value for lvl in EducationLevel][-1] == "Expert"


class TestBlock:
    """Tests for Block.from_chunk."""

    def test_label_and_body(self):
        block = Block.from_chunk("Topic Overview\nline one\nline two")
        assert block.label == "Topic Overview"
        assert block.body == "line one\nline two"
        assert block.has_body

    def test_empty_chunk(self):
        block = Block.from_chunk("")
        assert block.label == ""
        assert block.body == ""
        assert not block.has_body
