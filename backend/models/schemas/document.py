"""Formatted blocks produced by the document renderer.

Sizes are in half-points and spacing in twips (1/20 pt), the units used by
the DOCX writer.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict


class BlockKind(str, Enum):
    HEADING = "heading"
    PARAGRAPH = "paragraph"
    LIST_ITEM = "list_item"


class Alignment(str, Enum):
    LEFT = "left"
    CENTER = "center"
    JUSTIFIED = "justified"


class TextRun(BaseModel):
    """A run of uniformly formatted text inside a block."""
    model_config = ConfigDict(frozen=True)

    text: str
    bold: bool = False
    underline: bool = False
    size: int = 22
    tab: bool = False  # preceded by a right-aligned tab stop


class Block(BaseModel):
    """One rendered unit: a heading, paragraph or bulleted list item."""
    model_config = ConfigDict(frozen=True)

    kind: BlockKind = BlockKind.PARAGRAPH
    runs: tuple[TextRun, ...] = ()
    alignment: Alignment = Alignment.LEFT
    space_before: int = 0
    space_after: int = 0

    @property
    def text(self) -> str:
        return "".join(("\t" if r.tab else "") + r.text for r in self.runs)
