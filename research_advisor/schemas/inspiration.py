"""
Inspiration and History Schemas
"""

from pydantic import BaseModel, Field

from research_advisor.schemas.base import FROZEN


class InspirationTopic(BaseModel):
    """A suggested research topic."""
    model_config = FROZEN

    title: str = Field(description="Topic title with placeholder brackets removed")
    description: str


class HistoryItem(BaseModel):
    """A past topic analysis, stored as the raw reply so it can be re-parsed."""
    model_config = FROZEN

    id: str
    topic: str
    analysis: str = Field(description="Raw Markdown returned by the model")
    timestamp: int = Field(description="Creation time, milliseconds since epoch")
