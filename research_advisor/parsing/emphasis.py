"""
Text-Emphasis Renderer

Splits a string on `**bold**` spans so every display surface can
render emphasis without a Markdown engine. Unpaired markers stay in
the text as literal characters.
"""

import re
from typing import Callable, List

from research_advisor.schemas.markdown import Span

# Non-greedy, single line
_EMPHASIS_PATTERN = re.compile(r"(\*\*.*?\*\*)")
MARKER = "**"


def split_emphasis(text: str) -> List[Span]:
    """
    Split text into plain and emphasised spans, in original order.

    Empty fragments are dropped, so "" gives [] and text without
    markers gives a single plain span equal to the input.
    """
    spans = []
    for part in _EMPHASIS_PATTERN.split(text):
        if not part:
            continue
        if len(part) >= 2 * len(MARKER) and part.startswith(MARKER) and part.endswith(MARKER):
            inner = part[len(MARKER):-len(MARKER)]
            if inner:
                spans.append(Span(text=inner, emphasized=True))
            continue
        spans.append(Span(text=part))
    return spans


def render_emphasis(text: str, fmt: Callable[[Span], str]) -> str:
    """Join the spans of `text` through a per-span formatter."""
    return "".join(fmt(span) for span in split_emphasis(text))


def to_html(span: Span) -> str:
    """Formatter emitting escaped HTML with <strong> for emphasis."""
    escaped = (
        span.text.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")
    )
    if span.emphasized:
        return f"<strong>{escaped}</strong>"
    return escaped
