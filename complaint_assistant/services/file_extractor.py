from __future__ import annotations

import logging
import os
from io import BytesIO

from docx import Document
from pypdf import PdfReader

from complaint_assistant.core.errors import ExtractionEmpty, ExtractionFailed, InvalidUpload

logger = logging.getLogger(__name__)

SUPPORTED = {"txt", "doc", "docx", "pdf"}
MAX_UPLOAD_BYTES = 5 * 1024 * 1024


def file_extension(filename: str) -> str:
    return os.path.splitext((filename or "").lower())[1].lstrip(".")


def is_supported(filename: str) -> bool:
    return file_extension(filename) in SUPPORTED


def _pdf_text(data: bytes) -> str:
    reader = PdfReader(BytesIO(data))
    pages = []
    for p in reader.pages:
        pages.append(p.extract_text() or "")
    return "\n".join(pages)


def _word_text(data: bytes) -> str:
    # python-docx only reads OOXML; a legacy binary .doc raises here
    doc = Document(BytesIO(data))
    return "\n".join(p.text for p in doc.paragraphs)


def extract_text(data: bytes, filename: str) -> str:
    """Return the plain text of an uploaded document.

    Raises ExtractionEmpty when nothing but whitespace comes out and
    ExtractionFailed when the underlying library chokes on the file.
    """
    ext = file_extension(filename)

    if ext not in SUPPORTED:
        raise InvalidUpload(detail=f"Unsupported file type: {ext!r}")

    try:
        if ext == "txt":
            text = data.decode("utf-8", errors="replace")
        elif ext == "pdf":
            text = _pdf_text(data)
        else:
            text = _word_text(data)
    except Exception as e:
        raise ExtractionFailed(detail=f"{type(e).__name__}: {e}") from e

    if not text.strip():
        raise ExtractionEmpty(detail=f"No text in {filename} ({ext})")

    logger.debug("Extracted %d characters from %s", len(text), filename)
    return text
