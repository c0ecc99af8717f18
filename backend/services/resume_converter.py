"""Conversion pipeline.

Pipeline:
1. Input checks (file present, credential present, size ceiling)
2. Raw text extraction (PDF / DOCX / plain text)
3. Gemini structured extraction with model fallback -> ResumeRecord
4. Template layout -> ordered blocks
5. DOCX serialization
Any failure aborts the whole conversion; nothing partial is returned.
"""

import logging
from dataclasses import dataclass

from config import settings
from services import docx_writer, text_extractor
from services.document_renderer import render_blocks
from services.errors import FileTooLarge, MissingInput
from services.resume_extractor import extract_record

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConvertedDocument:
    filename: str
    content: bytes
    media_type: str = docx_writer.MEDIA_TYPE


async def convert(
    filename: str | None,
    content: bytes | None,
    content_type: str | None,
    api_key: str | None,
) -> ConvertedDocument:
    """Run the full pipeline on one uploaded resume."""
    if content is None:
        raise MissingInput("No file uploaded")
    if not api_key or not api_key.strip():
        raise MissingInput("API key is required")

    max_bytes = settings.max_upload_size_mb * 1024 * 1024
    if len(content) > max_bytes:
        raise FileTooLarge(f"File too large. Max size: {settings.max_upload_size_mb}MB")

    logger.info("Processing file: %s (%s)", filename, content_type)

    # --- Stage 1: Raw text ---
    resume_text = text_extractor.extract_text(content, content_type, filename)
    logger.info("Text extracted successfully (%d chars)", len(resume_text))

    # --- Stage 2: Structured record ---
    record = await extract_record(resume_text, api_key)
    logger.info("Resume data structured successfully")

    # --- Stage 3: Layout + DOCX ---
    blocks = render_blocks(record)
    document = docx_writer.write_docx(blocks)
    logger.info("Word document generated successfully (%d blocks)", len(blocks))

    return ConvertedDocument(
        filename=text_extractor.output_filename(filename, settings.output_suffix),
        content=document,
    )
