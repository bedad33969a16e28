"""
Section Segmenter

Splits a reply into top-level blocks on the heading delimiter.
This is a plain total split: nothing is validated here, and text
before the first delimiter is discarded.
"""

from typing import List

from research_advisor.parsing.vocabulary import SECTION_DELIMITER
from research_advisor.schemas.markdown import Block


def segment(markdown: str, delimiter: str = SECTION_DELIMITER) -> List[Block]:
    """
    Split markdown into ordered blocks.

    Args:
        markdown: Complete reply text
        delimiter: Heading marker to split on

    Returns:
        One Block per delimiter occurrence, in document order.
        Empty when the delimiter never occurs.
    """
    chunks = markdown.split(delimiter)[1:]
    return [Block.from_chunk(chunk) for chunk in chunks]

