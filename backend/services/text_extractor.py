import io
import logging
import re

import pdfplumber
from docx import Document

from services.errors import UnreadableDocument, UnsupportedFormat

logger = logging.getLogger(__name__)

PDF = "pdf"
DOCX = "docx"
TEXT = "text"

_MIME_TYPES = {
    "application/pdf": PDF,
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document": DOCX,
    "application/msword": DOCX,
    "text/plain": TEXT,
}

_EXTENSIONS = {
    ".pdf": PDF,
    ".docx": DOCX,
    ".doc": DOCX,
    ".txt": TEXT,
}

_EXTENSION_RE = re.compile(r"\.[^/.]+$")


def detect_format(content_type: str | None, filename: str | None) -> str:
    """Resolve the document kind from the MIME type, then the file extension."""
    mime = (content_type or "").split(";")[0].strip().lower()
    if mime in _MIME_TYPES:
        return _MIME_TYPES[mime]
    match = _EXTENSION_RE.search(filename or "")
    if match and match.group(0).lower() in _EXTENSIONS:
        return _EXTENSIONS[match.group(0).lower()]
    raise UnsupportedFormat("Unsupported file type")


def extract_text_pdf(pdf_bytes: bytes) -> str:
    """Extract all text from a PDF file."""
    with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
        pages = [page.extract_text() or "" for page in pdf.pages]
    return "\n".join(pages).strip()


def extract_text_docx(docx_bytes: bytes) -> str:
    """Extract all text from a DOCX file, table cells included."""
    doc = Document(io.BytesIO(docx_bytes))
    lines = [p.text for p in doc.paragraphs]
    for table in doc.tables:
        for row in table.rows:
            lines.append(" | ".join(cell.text for cell in row.cells))
    return "\n".join(lines).strip()


def extract_text_plain(data: bytes) -> str:
    return data.decode("utf-8", errors="replace").strip()


_EXTRACTORS = {
    PDF: extract_text_pdf,
    DOCX: extract_text_docx,
    TEXT: extract_text_plain,
}


def extract_text(content: bytes, content_type: str | None, filename: str | None = None) -> str:
    """Extract raw resume text from an uploaded document.

    Raises UnsupportedFormat for unknown types and UnreadableDocument when the
    file cannot be parsed or holds no text.
    """
    kind = detect_format(content_type, filename)
    try:
        text = _EXTRACTORS[kind](content)
    except Exception as e:
        logger.error("Could not parse %s file %s: %s", kind, filename, e)
        raise UnreadableDocument(f"Could not parse {kind.upper()} file") from e

    if not text:
        raise UnreadableDocument("No text could be extracted from the document")
    return text


def output_filename(filename: str | None, suffix: str) -> str:
    """'cv.pdf' -> 'cv_converted.docx' for suffix '_converted'."""
    stem = _EXTENSION_RE.sub("", filename or "") or "resume"
    return f"{stem}{suffix}.docx"
