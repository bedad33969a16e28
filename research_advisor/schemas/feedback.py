"""
Paper Feedback Schemas

Records recovered from the grade / general / specific feedback reply,
plus the uploaded document that feeds the feedback prompt.
"""

from pydantic import BaseModel, Field

from research_advisor.schemas.base import FROZEN, NOT_FOUND


class SpecificFeedback(BaseModel):
    """A quote lifted from the paper and the reviewer's comment on it."""
    model_config = FROZEN

    quote: str
    comment: str


class FeedbackAnalysis(BaseModel):
    """
    Parsed paper critique.

    A grade of 0 means the reply carried no readable grade.
    """
    model_config = FROZEN

    grade: int = Field(default=0, ge=0, description="Predicted grade out of 100")
    general_feedback: str = NOT_FOUND
    specific_feedback: list[SpecificFeedback] = Field(default_factory=list)


class UploadedDocument(BaseModel):
    """Plain text extracted from an uploaded paper or rubric."""
    model_config = FROZEN

    name: str
    size: int = Field(ge=0, description="Size of the original file in bytes")
    mime_type: str
    content: str = Field(description="Cleaned extracted text")
