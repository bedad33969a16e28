"""
Intermediate Markdown Structures

Blocks are produced by the section segmenter and consumed by every
extractor; spans are produced by the emphasis renderer for display.
"""

from pydantic import BaseModel

from research_advisor.schemas.base import FROZEN


class Block(BaseModel):
    """
    One top-level segment of a reply, split on the heading delimiter.

    `label` is the first line of the segment, `body` everything after
    that line break. `text` keeps the raw segment so that joining all
    blocks with the delimiter gives back the segmented input.
    """
    model_config = FROZEN

    label: str
    body: str
    text: str

    @classmethod
    def from_chunk(cls, chunk: str) -> "Block":
        label, _, body = chunk.partition("\n")
        return cls(label=label, body=body, text=chunk)

    @property
    def has_body(self) -> bool:
        """True when the label line is terminated by a line break."""
        return "\n" in self.text

    def starts_with(self, label: str) -> bool:
        return self.text.startswith(label)


class Span(BaseModel):
    """A run of text that is either plain or emphasised."""
    model_config = FROZEN

    text: str
    emphasized: bool = False
