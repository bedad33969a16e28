"""
Topic Analysis Schemas

Typed records recovered from the four-section topic analysis reply:
overview, existing research, viability verdict and recommended structure.
"""

from pydantic import BaseModel, Field

from research_advisor.schemas.base import (
    FROZEN,
    NOT_AVAILABLE,
    NOT_FOUND,
    ViabilityStatus,
)


class TopicOverview(BaseModel):
    """Summary paragraph plus the two labelled facts that follow it."""
    model_config = FROZEN

    summary: str = Field(default=NOT_FOUND, description="One-paragraph overview")
    education_level: str = Field(
        default=NOT_AVAILABLE,
        description="Minimum education level the topic calls for"
    )
    prerequisites: str = Field(
        default=NOT_AVAILABLE,
        description="Prerequisite knowledge or material"
    )


class Paper(BaseModel):
    """A single citation from the Existing Research section."""
    model_config = FROZEN

    title: str = NOT_AVAILABLE
    authors: str = NOT_AVAILABLE
    journal: str = Field(default=NOT_AVAILABLE, description="Journal or conference")
    year: str = NOT_AVAILABLE


class ViabilityAnalysis(BaseModel):
    """Verdict token and the reasoning that accompanies it."""
    model_config = FROZEN

    status: ViabilityStatus = ViabilityStatus.UNKNOWN
    reasoning: str = NOT_FOUND


class StructureSection(BaseModel):
    """
    Guidance for one section of the recommended paper structure.

    `title` is always one of the known academic section names.
    """
    model_config = FROZEN

    title: str
    core_content: str = NOT_AVAILABLE
    guiding_questions: str = NOT_AVAILABLE
    expert_tip: str = NOT_AVAILABLE


class TopicAnalysis(BaseModel):
    """
    Aggregate record for one topic analysis.

    Lists keep document order; nothing is deduplicated or sorted.
    """
    papers: list[Paper] = Field(default_factory=list)
    overview: TopicOverview = Field(default_factory=TopicOverview)
    viability: ViabilityAnalysis = Field(default_factory=ViabilityAnalysis)
    structure: list[StructureSection] = Field(default_factory=list)

    model_config = {
        "frozen": True,
        "json_schema_extra": {
            "examples": [
                {
                    "papers": [
                        {
                            "title": "Attention Is All You Need",
                            "authors": "Vaswani et al.",
                            "journal": "NeurIPS",
                            "year": "2017",
                        }
                    ],
                    "overview": {
                        "summary": "Transformers for low-resource translation.",
                        "education_level": "Postgraduate",
                        "prerequisites": "Linear algebra, deep learning basics",
                    },
                    "viability": {
                        "status": "WISE_CHOICE",
                        "reasoning": "Well studied with a clear gap.",
                    },
                    "structure": [],
                }
            ]
        },
    }
