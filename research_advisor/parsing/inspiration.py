"""
Inspiration Extractor

Every block of the inspiration reply is one suggested topic: the
heading line is the title, the text after the bold Description label
is the description.
"""

import logging
import re
from typing import List

from research_advisor.parsing.segmenter import segment
from research_advisor.parsing.vocabulary import InspirationLabels
from research_advisor.schemas.inspiration import InspirationTopic
from research_advisor.schemas.markdown import Block

logger = logging.getLogger(__name__)

_DESCRIPTION_PATTERN = re.compile(
    rf"\*\*{re.escape(InspirationLabels.DESCRIPTION)}\*\* (?P<description>.*)",
    re.DOTALL,
)
_BRACKETS = re.compile(r"[\[\]]")


def parse_topic_block(block: Block) -> InspirationTopic | None:
    """Return the topic held by one block, or None if it is malformed."""
    if not block.has_body:
        return None
    match = _DESCRIPTION_PATTERN.search(block.text)
    if not match:
        return None
    return InspirationTopic(
        title=_BRACKETS.sub("", block.label.strip()),
        description=match.group("description").strip(),
    )


def parse_inspiration(markdown: str) -> List[InspirationTopic]:
    """
    Parse the inspiration reply into topics.

    Malformed blocks are dropped, so an empty list is a valid result.
    """
    topics = []
    for block in segment(markdown):
        topic = parse_topic_block(block)
        if topic is None:
            logger.debug(f"Dropping malformed inspiration block '{block.label.strip()}'")
            continue
        topics.append(topic)
    return topics
