"""
Feedback Extractor

Turns the paper critique reply into a FeedbackAnalysis: a predicted
grade, free-form general feedback and quote/comment pairs.
"""

import logging
import re
from typing import List

from research_advisor.parsing.segmenter import segment
from research_advisor.parsing.vocabulary import FeedbackLabels
from research_advisor.schemas.base import NOT_FOUND
from research_advisor.schemas.feedback import FeedbackAnalysis, SpecificFeedback

logger = logging.getLogger(__name__)

_GRADE_PATTERN = re.compile(rf"{re.escape(FeedbackLabels.GRADE_FIELD)}\D*(\d+)")

_QUOTE_LABEL = rf"\*\*{re.escape(FeedbackLabels.QUOTE)}\*\*"
_COMMENT_LABEL = rf"\*\*{re.escape(FeedbackLabels.COMMENT)}\*\*"
_FEEDBACK_PATTERN = re.compile(
    rf"- {_QUOTE_LABEL}\s*(?P<quote>.+?)\s*"
    rf"-\s*{_COMMENT_LABEL}\s*(?P<comment>.+?)"
    rf"(?=\n- {_QUOTE_LABEL}|\Z)",
    re.DOTALL,
)

# Opening glyph -> closing glyph
QUOTE_PAIRS = {
    '"': '"',
    "“": "”",
    "'": "'",
    "‘": "’",
}


def strip_quotes(text: str) -> str:
    """Remove one layer of matching surrounding quotation marks."""
    if len(text) >= 2:
        closing = QUOTE_PAIRS.get(text[0])
        if closing is not None and text.endswith(closing):
            return text[1:-1]
    return text


def parse_grade(text: str) -> int:
    """First integer after the grade label, or 0."""
    match = _GRADE_PATTERN.search(text)
    if not match:
        return 0
    return int(match.group(1), 10)


def parse_specific_feedback(body: str) -> List[SpecificFeedback]:
    """
    Collect quote/comment pairs in document order.

    A trailing entry without a comment does not match and is dropped.
    """
    return [
        SpecificFeedback(
            quote=strip_quotes(match.group("quote").strip()),
            comment=match.group("comment").strip(),
        )
        for match in _FEEDBACK_PATTERN.finditer(body)
    ]


def parse_feedback(markdown: str) -> FeedbackAnalysis:
    """
    Parse a complete paper feedback reply.

    Args:
        markdown: Raw reply text

    Returns:
        FeedbackAnalysis; grade 0 and no entries when nothing matched
    """
    fields: dict = {}
    specific: List[SpecificFeedback] = []

    for block in segment(markdown):
        if block.starts_with(FeedbackLabels.GRADE):
            grade = parse_grade(block.text)
            if grade:
                fields["grade"] = grade
        elif block.starts_with(FeedbackLabels.GENERAL):
            fields["general_feedback"] = block.body.strip() or NOT_FOUND
        elif block.starts_with(FeedbackLabels.SPECIFIC):
            specific.extend(parse_specific_feedback(block.body))
        else:
            logger.debug(f"Ignoring unrecognised section '{block.label.strip()}'")

    return FeedbackAnalysis(specific_feedback=specific, **fields)
