"""Raw-text extraction for uploaded JD documents (PDF, DOCX, DOC)."""

import io
import logging
from pathlib import Path

import pdfplumber
from docx import Document
from docx.table import Table

from services.errors import ExtractionFailed, UnsupportedFormat

logger = logging.getLogger(__name__)

SUPPORTED_EXTENSIONS = (".pdf", ".docx", ".doc")


def check_supported(filename: str) -> str:
    """Return the lower-cased extension of ``filename`` or raise UnsupportedFormat."""
    ext = Path(filename).suffix.lower()
    if ext not in SUPPORTED_EXTENSIONS:
        raise UnsupportedFormat(ext, SUPPORTED_EXTENSIONS)
    return ext


def extract_text_pdf(pdf_bytes: bytes) -> str:
    """Page texts joined by newlines; pages without a text layer add a blank line."""
    page_texts: list[str] = []
    with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
        for number, page in enumerate(pdf.pages, start=1):
            page_text = page.extract_text() or ""
            if not page_text.strip():
                logger.debug("PDF page %d has no extractable text", number)
            page_texts.append(page_text)
    return "\n".join(page_texts).strip()


def _table_lines(table: Table) -> list[str]:
    """One line per cell, row by row."""
    return [cell.text for row in table.rows for cell in row.cells]


def extract_text_docx(docx_bytes: bytes) -> str:
    """Paragraph and table text in document order."""
    doc = Document(io.BytesIO(docx_bytes))
    lines: list[str] = []
    for block in doc.iter_inner_content():
        if isinstance(block, Table):
            lines.extend(_table_lines(block))
        else:
            lines.append(block.text)
    return "\n".join(lines).strip()


_EXTRACTORS = {
    ".pdf": extract_text_pdf,
    ".docx": extract_text_docx,
    # Legacy .doc only works when it is really OOXML; binary .doc fails below
    ".doc": extract_text_docx,
}


def extract_raw_text(source: bytes | str | Path, filename: str | None = None) -> str:
    """Convert a PDF/Word document to plain text.

    ``source`` is either the file bytes (``filename`` then names the upload)
    or a filesystem path. The format check runs before anything is read.

    Raises:
        UnsupportedFormat: extension outside .pdf/.docx/.doc.
        ExtractionFailed: the converter could not produce any text.
    """
    if isinstance(source, (str, Path)):
        path = Path(source)
        filename = filename or path.name
        ext = check_supported(filename)
        try:
            data = path.read_bytes()
        except OSError as e:
            raise ExtractionFailed(filename, str(e)) from e
    else:
        filename = filename or ""
        ext = check_supported(filename)
        data = source

    try:
        text = _EXTRACTORS[ext](data)
    except Exception as e:
        logger.warning("Text extraction failed for %s: %s", filename, e)
        raise ExtractionFailed(filename, str(e) or type(e).__name__) from e

    if not text.strip():
        logger.warning("No text could be extracted from %s", filename)
        raise ExtractionFailed(filename, "no text could be extracted")

    logger.debug("Extracted %d characters from %s", len(text), filename)
    return text
