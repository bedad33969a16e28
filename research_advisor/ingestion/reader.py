"""
Document Reader

Turns uploaded papers and grading rubrics into cleaned plain text.

Supported formats:
- PDF via PyMuPDF, page by page
- DOCX (and legacy .doc names) via python-docx
- TXT, decoded as UTF-8

Extraction artifacts such as hyphenated line breaks and runs of
spaces are cleaned before the text reaches a prompt.
"""

import io
import logging
import mimetypes
import os
import re

import docx
import fitz

from research_advisor.errors import DocumentReadError, UnsupportedFileTypeError
from research_advisor.schemas.feedback import UploadedDocument

logger = logging.getLogger(__name__)

PDF_TYPE = "application/pdf"
DOCX_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
DOC_TYPE = "application/msword"
TEXT_TYPE = "text/plain"

WORD_TYPES = {DOCX_TYPE, DOC_TYPE}

_HYPHEN_BREAK = re.compile(r"(\w)-(\s*\n\s*)(\w)")
_HORIZONTAL_RUNS = re.compile(r"[ \t]{2,}")
_BLANK_RUNS = re.compile(r"\n{3,}")


def clean_extracted_text(text: str) -> str:
    """Undo the usual extraction artifacts while keeping paragraph breaks."""
    # Re-join words broken by hyphenation and a newline
    cleaned = _HYPHEN_BREAK.sub(r"\1\3", text)
    cleaned = _HORIZONTAL_RUNS.sub(" ", cleaned)
    cleaned = _BLANK_RUNS.sub("\n\n", cleaned)
    cleaned = "\n".join(line.strip() for line in cleaned.split("\n"))
    return cleaned.strip()


def guess_mime_type(name: str) -> str:
    if name.lower().endswith(".docx"):
        return DOCX_TYPE
    mime_type, _ = mimetypes.guess_type(name)
    return mime_type or "application/octet-stream"


def parse_pdf(data: bytes) -> str:
    text = ""
    with fitz.open(stream=data, filetype="pdf") as doc:
        for number, page in enumerate(doc, start=1):
            try:
                text += page.get_text() + "\n"
            except Exception as e:
                logger.error(f"Error processing page {number}: {e}")
    return text


def parse_docx(data: bytes) -> str:
    document = docx.Document(io.BytesIO(data))
    return "\n".join(paragraph.text for paragraph in document.paragraphs)


def parse_text(data: bytes) -> str:
    return data.decode("utf-8", errors="ignore")


def extract_text(data: bytes, mime_type: str, name: str = "") -> str:
    """
    Extract cleaned plain text from an uploaded file.

    Raises:
        UnsupportedFileTypeError: If the type is not PDF, Word or plain text
        DocumentReadError: If the file cannot be parsed
    """
    if mime_type == PDF_TYPE:
        reader = parse_pdf
    elif mime_type in WORD_TYPES or name.lower().endswith(".doc"):
        reader = parse_docx
    elif mime_type == TEXT_TYPE:
        reader = parse_text
    else:
        raise UnsupportedFileTypeError(mime_type)

    try:
        raw = reader(data)
    except Exception as e:
        logger.error(f"Failed to read {name or mime_type}: {e}")
        raise DocumentReadError(f"Error reading file {name}: {e}") from e

    return clean_extracted_text(raw)


def read_document(path: str, mime_type: str | None = None) -> UploadedDocument:
    """Read a file from disk into an UploadedDocument."""
    name = os.path.basename(path)
    mime_type = mime_type or guess_mime_type(name)
    with open(path, "rb") as f:
        data = f.read()
    return UploadedDocument(
        name=name,
        size=len(data),
        mime_type=mime_type,
        content=extract_text(data, mime_type, name),
    )


def read_upload(name: str, data: bytes, mime_type: str | None = None) -> UploadedDocument:
    """Same as read_document, for bytes already in memory (Streamlit uploads)."""
    mime_type = mime_type or guess_mime_type(name)
    return UploadedDocument(
        name=name,
        size=len(data),
        mime_type=mime_type,
        content=extract_text(data, mime_type, name),
    )
