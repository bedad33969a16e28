"""
Topic-Analysis Extractor

Turns the four-section topic analysis reply into a TopicAnalysis.

Recognised blocks (matched by prefix, unknown blocks are ignored):
- Topic Overview: summary paragraph + Education Level / Prerequisites
- Existing Research: Title / Authors / Journal/Conference / Year groups
- Topic Viability Analysis: verdict token + reasoning
- Recommended Paper Structure: the nine known sections, each with
  Core Content / Guiding Questions / Expert Tip

Nothing here raises on malformed input: every miss falls back to the
sentinel defaults declared on the schemas.
"""

import logging
import re
from typing import List

from research_advisor.parsing.segmenter import segment
from research_advisor.parsing.vocabulary import (
    STRUCTURE_SECTIONS,
    STRUCTURE_SUBLABELS,
    VIABILITY_TOKENS,
    AnalysisLabels,
)
from research_advisor.schemas.analysis import (
    Paper,
    StructureSection,
    TopicAnalysis,
    TopicOverview,
    ViabilityAnalysis,
)
from research_advisor.schemas.base import NO_OVERVIEW, NOT_AVAILABLE, ViabilityStatus
from research_advisor.schemas.markdown import Block

logger = logging.getLogger(__name__)


# =============================================================================
# PATTERNS
# =============================================================================

# A bullet introducing a bold sub-label
OVERVIEW_SPLIT = "\n- **"

_BULLET = r"(?:[-*]|\d+\.)"


def _label_prefix(label: str) -> re.Pattern:
    """Match `Label:` at the start of a fragment, bold markers optional."""
    name = re.escape(label.rstrip(":"))
    return re.compile(rf"^{name}(?:\*\*)?:(?:\*\*)?[ \t]?")


_EDUCATION_PREFIX = _label_prefix(AnalysisLabels.EDUCATION_LEVEL)
_PREREQUISITES_PREFIX = _label_prefix(AnalysisLabels.PREREQUISITES)


def _paper_field(label: str, group: str, last: bool = False) -> str:
    capture = rf"(?P<{group}>.*)" if last else rf"(?P<{group}>.*?)[ \t]*\n"
    return rf"[ \t]*[-*][ \t]*\*\*{re.escape(label)}\*\*[ \t]*{capture}"


_PAPER_PATTERN = re.compile(
    _paper_field(AnalysisLabels.PAPER_TITLE, "title")
    + r"\s*"
    + _paper_field(AnalysisLabels.PAPER_AUTHORS, "authors")
    + r"\s*"
    + _paper_field(AnalysisLabels.PAPER_JOURNAL, "journal")
    + r"\s*"
    + _paper_field(AnalysisLabels.PAPER_YEAR, "year", last=True)
)

# Whole token, optionally wrapped in `_` or `__` emphasis, never inside another word
_VIABILITY_PATTERN = re.compile(
    r"(?<!\w)_{0,2}(?P<token>" + "|".join(VIABILITY_TOKENS) + r")_{0,2}(?!\w)"
)
# Closing emphasis and a separator left behind by the removed token
_AFTER_TOKEN = re.compile(r"^[*_]*[ \t]*[:.\-–—]?[ \t]*(?:\*\*)?[ \t]*")
_BEFORE_TOKEN = re.compile(r"[\s*_]+$")

_SECTION_NAMES = "|".join(re.escape(name) for name in STRUCTURE_SECTIONS)
_STRUCTURE_PATTERN = re.compile(
    rf"\s*{_BULLET}\s+\*\*(?P<title>{_SECTION_NAMES}):\*\*"
    rf"(?P<details>.*?)"
    rf"(?=\n\s*{_BULLET}\s+\*\*(?:{_SECTION_NAMES}):\*\*|\Z)",
    re.DOTALL,
)

_SUBLABEL_NAMES = "|".join(re.escape(name) for name in STRUCTURE_SUBLABELS)


def _sublabel_pattern(label: str) -> re.Pattern:
    return re.compile(
        rf"\*\*{re.escape(label)}:\*\*\s*(?P<value>.*?)"
        rf"(?=\n\s*{_BULLET}?\s*\*\*(?:{_SUBLABEL_NAMES}):\*\*|\Z)",
        re.DOTALL,
    )


_SUBLABEL_PATTERNS = {label: _sublabel_pattern(label) for label in STRUCTURE_SUBLABELS}


# =============================================================================
# SECTION PARSERS
# =============================================================================

def parse_overview(body: str) -> TopicOverview:
    """Split the summary from the labelled facts that follow it."""
    parts = body.strip().split(OVERVIEW_SPLIT)
    summary = parts[0].strip() or NO_OVERVIEW

    education_level = NOT_AVAILABLE
    prerequisites = NOT_AVAILABLE
    for part in parts[1:]:
        if _EDUCATION_PREFIX.match(part):
            education_level = _EDUCATION_PREFIX.sub("", part, count=1).strip()
        elif _PREREQUISITES_PREFIX.match(part):
            prerequisites = _PREREQUISITES_PREFIX.sub("", part, count=1).strip()

    return TopicOverview(
        summary=summary,
        education_level=education_level or NOT_AVAILABLE,
        prerequisites=prerequisites or NOT_AVAILABLE,
    )


def parse_papers(body: str) -> List[Paper]:
    """
    Collect every complete citation group.

    A group missing any of its four labels does not match and is
    dropped; an empty value inside a matched group becomes N/A.
    """
    papers = []
    for match in _PAPER_PATTERN.finditer(body):
        fields = {
            key: (value or "").strip() or NOT_AVAILABLE
            for key, value in match.groupdict().items()
        }
        papers.append(Paper(**fields))
    return papers


def parse_viability(body: str) -> ViabilityAnalysis:
    """
    Find the first whole-word verdict token.

    The token and the markup hugging it are cut out of the text;
    whatever remains is the reasoning.
    """
    content = body.strip()
    match = _VIABILITY_PATTERN.search(content)
    if not match:
        return ViabilityAnalysis(status=ViabilityStatus.UNKNOWN, reasoning=content)

    head = _BEFORE_TOKEN.sub("", content[:match.start()])
    tail = _AFTER_TOKEN.sub("", content[match.end():], count=1)
    if head and tail.strip():
        reasoning = f"{head} {tail.lstrip()}"
    else:
        reasoning = head or tail

    return ViabilityAnalysis(
        status=ViabilityStatus(match.group("token")),
        reasoning=reasoning.strip(),
    )


def _extract_sublabel(details: str, label: str) -> str:
    match = _SUBLABEL_PATTERNS[label].search(details)
    if not match:
        return NOT_AVAILABLE
    return match.group("value").strip() or NOT_AVAILABLE


def parse_structure(body: str) -> List[StructureSection]:
    """Recover the known sections of the recommended paper structure."""
    sections = []
    for match in _STRUCTURE_PATTERN.finditer(body):
        details = match.group("details")
        core, questions, tip = (
            _extract_sublabel(details, label) for label in STRUCTURE_SUBLABELS
        )
        sections.append(
            StructureSection(
                title=match.group("title").strip(),
                core_content=core,
                guiding_questions=questions,
                expert_tip=tip,
            )
        )
    return sections


# =============================================================================
# ENTRY POINT
# =============================================================================

def parse_topic_analysis(markdown: str) -> TopicAnalysis:
    """
    Parse a complete topic analysis reply.

    Args:
        markdown: Raw reply text

    Returns:
        TopicAnalysis; all-default when no known block is present
    """
    papers: List[Paper] = []
    structure: List[StructureSection] = []
    overview = TopicOverview()
    viability = ViabilityAnalysis()
    recognised = 0

    for block in segment(markdown):
        if block.starts_with(AnalysisLabels.OVERVIEW):
            overview = parse_overview(block.body)
        elif block.starts_with(AnalysisLabels.EXISTING_RESEARCH):
            papers.extend(parse_papers(block.body))
        elif block.starts_with(AnalysisLabels.VIABILITY):
            viability = parse_viability(block.body)
        elif block.starts_with(AnalysisLabels.STRUCTURE):
            structure.extend(parse_structure(block.body))
        else:
            _log_skipped(block)
            continue
        recognised += 1

    if not recognised:
        logger.debug("No topic analysis sections recognised in reply")

    return TopicAnalysis(
        papers=papers,
        overview=overview,
        viability=viability,
        structure=structure,
    )


def _log_skipped(block: Block) -> None:
    logger.debug(f"Ignoring unrecognised section '{block.label.strip()}'")
