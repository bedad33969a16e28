"""
Research Advisor Schemas Package

Pydantic models for every record the parsers produce and the
collaborators exchange. All records are frozen: they are built once
from a reply and never mutated afterwards.
"""

from research_advisor.schemas.analysis import (
    Paper,
    StructureSection,
    TopicAnalysis,
    TopicOverview,
    ViabilityAnalysis,
)
from research_advisor.schemas.base import AcademicLevel, EducationLevel, ViabilityStatus
from research_advisor.schemas.feedback import (
    FeedbackAnalysis,
    SpecificFeedback,
    UploadedDocument,
)
from research_advisor.schemas.inspiration import HistoryItem, InspirationTopic
from research_advisor.schemas.markdown import Block, Span

__all__ = [
    "AcademicLevel",
    "Block",
    "EducationLevel",
    "FeedbackAnalysis",
    "HistoryItem",
    "InspirationTopic",
    "Paper",
    "Span",
    "SpecificFeedback",
    "StructureSection",
    "TopicAnalysis",
    "TopicOverview",
    "UploadedDocument",
    "ViabilityAnalysis",
    "ViabilityStatus",
]
