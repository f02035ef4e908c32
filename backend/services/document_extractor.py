"""Upload-to-text conversion, dispatched on the filename suffix."""

import asyncio
import io
import logging

import pdfplumber
from docx import Document

from config import settings
from models.documents import ExtractedText, RawDocument
from services.errors import (
    DocxParseError,
    LegacyFormatError,
    PdfParseError,
    SizeError,
    UnsupportedFormatError,
)

logger = logging.getLogger(__name__)

SUPPORTED_EXTENSIONS = ("pdf", "docx", "doc", "txt")

EMPTY_TEXT_PLACEHOLDER = "Resume uploaded: {file_name}"


def extract_text_txt(data: bytes) -> str:
    return data.decode("utf-8", errors="replace")


def extract_text_pdf(pdf_bytes: bytes) -> str:
    """Extract text page by page: words joined by a space, pages by a newline."""
    try:
        with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
            pages = []
            for page in pdf.pages:
                words = page.extract_words() or []
                pages.append(" ".join(w["text"] for w in words))
    except Exception as e:
        logger.warning("PDF parsing failed: %s", e)
        raise PdfParseError(
            "Failed to parse PDF file. Please ensure it is a valid PDF document."
        ) from e
    return "\n".join(pages)


def extract_text_docx(docx_bytes: bytes) -> str:
    """Extract raw body text from a DOCX archive (paragraphs, then table cells)."""
    try:
        doc = Document(io.BytesIO(docx_bytes))
        lines = [p.text for p in doc.paragraphs]
        for table in doc.tables:
            for row in table.rows:
                lines.extend(cell.text for cell in row.cells)
    except Exception as e:
        logger.warning("DOCX parsing failed: %s", e)
        raise DocxParseError(
            "Failed to parse DOCX file. Please ensure it is a valid Word document."
        ) from e
    return "\n".join(lines)


def _reject_legacy_doc(_: bytes) -> str:
    raise LegacyFormatError("Old .doc format detected. Please convert to .docx or .pdf.")


_EXTRACTORS = {
    "txt": extract_text_txt,
    "pdf": extract_text_pdf,
    "docx": extract_text_docx,
    "doc": _reject_legacy_doc,
}


def check_size(document: RawDocument) -> None:
    if document.size > settings.max_upload_bytes:
        raise SizeError(
            f"File too large. Please upload a file smaller than {settings.max_upload_size_mb}MB."
        )


def extract_text(document: RawDocument) -> ExtractedText:
    """Convert an upload to text. Raises an ExtractionError subclass on failure."""
    check_size(document)

    extractor = _EXTRACTORS.get(document.declared_extension)
    if extractor is None:
        raise UnsupportedFormatError(
            "Unsupported file format. Please upload PDF, DOCX, DOC, or TXT files."
        )

    text = extractor(document.content).strip()
    if not text:
        logger.info("No text extracted from %s, using placeholder", document.file_name)
        text = EMPTY_TEXT_PLACEHOLDER.format(file_name=document.file_name)

    return ExtractedText(text=text, source_file_name=document.file_name)


async def extract(document: RawDocument) -> ExtractedText:
    """Async wrapper: parsing runs in a worker thread so the event loop stays free."""
    return await asyncio.to_thread(extract_text, document)
