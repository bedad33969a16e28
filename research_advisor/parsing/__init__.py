"""
Research Advisor Parsing Package

Extractors that recover typed records from the model's Markdown
replies. Every extractor follows the same segment -> match -> project
pattern and never raises on malformed input.
"""

from research_advisor.parsing.emphasis import render_emphasis, split_emphasis
from research_advisor.parsing.feedback import parse_feedback
from research_advisor.parsing.inspiration import parse_inspiration
from research_advisor.parsing.segmenter import segment
from research_advisor.parsing.topic_analysis import parse_topic_analysis

__all__ = [
    "parse_feedback",
    "parse_inspiration",
    "parse_topic_analysis",
    "render_emphasis",
    "segment",
    "split_emphasis",
]
