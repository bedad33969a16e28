"""
Unit tests for the text-emphasis renderer.
"""

import pytest

from research_advisor.parsing.emphasis import render_emphasis, split_emphasis, to_html
from research_advisor.schemas.markdown import Span


class TestSplitEmphasis:
    """Tests for split_emphasis."""

    def test_mixed_text(self) -> None:
        assert split_emphasis("a **b** c") == [
            Span(text="a "),
            Span(text="b", emphasized=True),
            Span(text=" c"),
        ]

    def test_empty_input(self) -> None:
        assert split_emphasis("") == []

    def test_plain_text_is_single_span(self) -> None:
        assert split_emphasis("no markers here") == [Span(text="no markers here")]

    def test_unpaired_marker_is_literal(self) -> None:
        assert split_emphasis("a ** b") == [Span(text="a ** b")]

    def test_adjacent_emphasis(self) -> None:
        spans = split_emphasis("**one****two**")
        assert spans == [Span(text="one", emphasized=True), Span(text="two", emphasized=True)]

    def test_empty_pair_is_dropped(self) -> None:
        assert split_emphasis("x****y") == [Span(text="x"), Span(text="y")]

    def test_emphasis_does_not_cross_lines(self) -> None:
        assert split_emphasis("**open\nclose**") == [Span(text="**open\nclose**")]

    @pytest.mark.parametrize(
        "text",
        ["a **b** c", "**lead** tail", "none", "x ** y **z**"],
    )
    def test_text_is_preserved(self, text: str) -> None:
        rebuilt = "".join(
            f"**{s.text}**" if s.emphasized else s.text for s in split_emphasis(text)
        )
        assert rebuilt == text


class TestRenderEmphasis:
    """Tests for render_emphasis and the HTML formatter."""

    def test_html(self) -> None:
        assert render_emphasis("a **b** c", to_html) == "a <strong>b</strong> c"

    def test_html_escapes_text(self) -> None:
        assert render_emphasis("1 < 2 & **x > y**", to_html) == (
            "1 &lt; 2 &amp; <strong>x &gt; y</strong>"
        )

    def test_custom_formatter(self) -> None:
        upper = render_emphasis("a **b**", lambda s: s.text.upper() if s.emphasized else s.text)
        assert upper == "a B"
