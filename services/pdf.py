"""
PDF text extraction

Validates an uploaded workout plan and returns its plain text, page by page.
"""

import os

import fitz  # PyMuPDF

from models import InvalidDocumentError, DocumentReadError

MAX_DOCUMENT_BYTES = 5 * 1024 * 1024
PDF_MAGIC = b"%PDF"

NOT_A_PDF_MESSAGE = "Please select a PDF file."
TOO_LARGE_MESSAGE = "File is too large. Please select a file under 5MB."
READ_FAILED_MESSAGE = "Failed to read the PDF file."


def validate_document(path: str) -> None:
    """Raise InvalidDocumentError unless `path` is a readable PDF under the size limit."""
    if not path or not os.path.isfile(path):
        raise InvalidDocumentError(NOT_A_PDF_MESSAGE, detail=f"File not found: {path}")
    if not path.lower().endswith(".pdf"):
        raise InvalidDocumentError(NOT_A_PDF_MESSAGE, detail=f"Not a .pdf file: {path}")
    size = os.path.getsize(path)
    if size > MAX_DOCUMENT_BYTES:
        raise InvalidDocumentError(TOO_LARGE_MESSAGE, detail=f"{size} bytes")
    with open(path, "rb") as f:
        head = f.read(len(PDF_MAGIC))
    if head != PDF_MAGIC:
        raise InvalidDocumentError(NOT_A_PDF_MESSAGE, detail="Missing %PDF header")


def _document_text(doc) -> str:
    # Each page's text is followed by a single space separator
    parts = []
    for page in doc:
        parts.append(" ".join(page.get_text("text").split()) + " ")
    return "".join(parts)


def extract_text_from_bytes(data: bytes) -> str:
    try:
        with fitz.open(stream=data, filetype="pdf") as doc:
            text = _document_text(doc)
    except Exception as e:
        raise DocumentReadError(READ_FAILED_MESSAGE, detail=str(e)) from e
    print(f"[pdf] extracted {len(text)} chars from {len(data)} bytes")
    return text


def extract_text(path: str) -> str:
    """Return the concatenated text of every page of the PDF at `path`."""
    print(f"[pdf] reading {path}")
    try:
        with open(path, "rb") as f:
            data = f.read()
    except OSError as e:
        raise DocumentReadError(READ_FAILED_MESSAGE, detail=str(e)) from e
    return extract_text_from_bytes(data)
