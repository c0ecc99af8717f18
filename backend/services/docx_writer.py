"""Write rendered blocks to a single-section DOCX file with python-docx."""

import io
from collections.abc import Sequence

from docx import Document
from docx.enum.text import WD_ALIGN_PARAGRAPH, WD_TAB_ALIGNMENT
from docx.shared import Emu, Pt, Twips

from models.schemas.document import Alignment, Block, BlockKind

PAGE_MARGIN = 1440  # twips, 1 inch on every side
BULLET_STYLE = "List Bullet"
BULLET_INDENT = 720
BULLET_HANGING = 360

MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"

_ALIGNMENT = {
    Alignment.LEFT: WD_ALIGN_PARAGRAPH.LEFT,
    Alignment.CENTER: WD_ALIGN_PARAGRAPH.CENTER,
    Alignment.JUSTIFIED: WD_ALIGN_PARAGRAPH.JUSTIFY,
}


def _add_block(doc, block: Block, text_width: int) -> None:
    is_bullet = block.kind is BlockKind.LIST_ITEM
    paragraph = doc.add_paragraph(style=BULLET_STYLE if is_bullet else None)
    paragraph.alignment = _ALIGNMENT[block.alignment]

    fmt = paragraph.paragraph_format
    fmt.space_before = Twips(block.space_before)
    fmt.space_after = Twips(block.space_after)
    if is_bullet:
        fmt.left_indent = Twips(BULLET_INDENT)
        fmt.first_line_indent = Twips(-BULLET_HANGING)
    if block.kind is BlockKind.HEADING:
        fmt.keep_with_next = True
    if any(r.tab for r in block.runs):
        fmt.tab_stops.add_tab_stop(text_width, WD_TAB_ALIGNMENT.RIGHT)

    for r in block.runs:
        run = paragraph.add_run(("\t" if r.tab else "") + r.text)
        run.bold = r.bold
        if r.underline:
            run.underline = True
        run.font.size = Pt(r.size / 2)


def write_docx(blocks: Sequence[Block]) -> bytes:
    """Serialize blocks, in order, to DOCX bytes."""
    doc = Document()
    section = doc.sections[0]
    section.top_margin = Twips(PAGE_MARGIN)
    section.right_margin = Twips(PAGE_MARGIN)
    section.bottom_margin = Twips(PAGE_MARGIN)
    section.left_margin = Twips(PAGE_MARGIN)
    text_width = Emu(section.page_width - section.left_margin - section.right_margin)

    for block in blocks:
        _add_block(doc, block, text_width)

    buffer = io.BytesIO()
    doc.save(buffer)
    return buffer.getvalue()
