"""
Prompt / Parser Vocabulary

The labels the prompt templates ask the model to emit and the parsers
look for. Both sides import from here: changing a label in one place
without the other silently degrades recognition to zero matches.
"""

from research_advisor.schemas.base import ViabilityStatus

SECTION_DELIMITER = "### "


class AnalysisLabels:
    """Top-level headings of the topic analysis reply."""
    OVERVIEW = "Topic Overview"
    EXISTING_RESEARCH = "Existing Research"
    VIABILITY = "Topic Viability Analysis"
    STRUCTURE = "Recommended Paper Structure"

    # Bold sub-labels under the overview summary
    EDUCATION_LEVEL = "Education Level:"
    PREREQUISITES = "Prerequisites:"

    # Citation fields, in the order they must appear
    PAPER_TITLE = "Title:"
    PAPER_AUTHORS = "Authors:"
    PAPER_JOURNAL = "Journal/Conference:"
    PAPER_YEAR = "Year:"


class FeedbackLabels:
    """Top-level headings of the paper feedback reply."""
    GRADE = "Predicted Grade"
    GENERAL = "General Feedback"
    SPECIFIC = "Specific Feedback"

    GRADE_FIELD = "Grade:"
    QUOTE = "Quote:"
    COMMENT = "Comment:"


class InspirationLabels:
    DESCRIPTION = "Description:"


# Closed, ordered set of section names the structure guide covers
STRUCTURE_SECTIONS: tuple[str, ...] = (
    "Title",
    "Abstract",
    "Introduction",
    "Literature Review",
    "Methodology",
    "Experimentation/Data Collection",
    "Results",
    "Discussion",
    "Conclusion",
)

# Per-section sub-labels, in prompt order
STRUCTURE_SUBLABELS: tuple[str, ...] = (
    "Core Content",
    "Guiding Questions",
    "Expert Tip",
)

# Verdict tokens the viability section must open with
VIABILITY_TOKENS: tuple[str, ...] = tuple(
    status.value for status in ViabilityStatus if status != ViabilityStatus.UNKNOWN
)
