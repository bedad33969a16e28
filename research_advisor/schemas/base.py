"""
Base types and constants used across all schemas.

This module defines the shared enums and sentinel values that keep
every parsed record renderable: a field that could not be matched in
the model's reply holds a sentinel, never None.
"""

from enum import Enum

from pydantic import ConfigDict


# =============================================================================
# SENTINEL DEFAULTS
# =============================================================================

NOT_AVAILABLE = "N/A"
NOT_FOUND = "Not found."
NO_OVERVIEW = "No overview provided."

# Shared by every parsed record: built once, never mutated
FROZEN = ConfigDict(frozen=True)


# =============================================================================
# ENUMS
# =============================================================================

class ViabilityStatus(str, Enum):
    """Verdict the model gives on a research topic."""
    WISE_CHOICE = "WISE_CHOICE"
    CAUTION_ADVISED = "CAUTION_ADVISED"
    NOVEL_OPPORTUNITY = "NOVEL_OPPORTUNITY"
    UNKNOWN = "UNKNOWN"  # No recognised token in the reply

    @property
    def display_title(self) -> str:
        """Heading shown on the viability card."""
        if self == ViabilityStatus.UNKNOWN:
            return "Analysis"
        return self.value.replace("_", " ").title()


class AcademicLevel(str, Enum):
    """Intended level of a paper submitted for feedback."""
    HIGH_SCHOOL = "High School"
    UNDERGRADUATE = "Undergraduate"
    POSTGRADUATE = "Postgraduate"
    PROFESSIONAL = "Professional"


class EducationLevel(str, Enum):
    """Student profile offered by the topic inspiration form."""
    HIGH_SCHOOL = "High School"
    UNDERGRADUATE = "Undergraduate"
    POSTGRADUATE = "Postgraduate"
    EXPERT = "Expert"
