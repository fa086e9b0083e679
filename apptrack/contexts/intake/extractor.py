"""
Document-to-text extraction for the Intake context.

This is the I/O edge in front of the normalizer: it turns an uploaded file
into UTF-8 plain text and raises DocumentExtractionError when it cannot.
Supported inputs:
- PDF (pdfplumber), one blank line between pages
- Plain text, read as strict UTF-8
- Anything else, read as UTF-8 best-effort (undecodable bytes replaced)
"""

from pathlib import Path
from typing import Optional, Union

import pdfplumber

from apptrack.contexts.intake.exceptions import DocumentExtractionError
from apptrack.contexts.intake.logger import _log_debug, _log_error, _log_warning

PDF_FILE_TYPES = {"application/pdf", "pdf"}
TEXT_FILE_TYPES = {"text/plain", "txt", "text"}

PAGE_SEPARATOR = "\n\n"


def resolve_file_type(path: Path, file_type: Optional[str] = None) -> str:
    """
    Decide how to read a document.

    The explicit hint (MIME type or extension) wins; otherwise the file
    suffix decides.

    Args:
        path: Document path
        file_type: Optional hint such as "application/pdf", "pdf", "text/plain"

    Returns:
        "pdf", "text", or "other"
    """
    hint = (file_type or path.suffix).lower().lstrip(".")
    if hint in PDF_FILE_TYPES:
        return "pdf"
    if hint in TEXT_FILE_TYPES:
        return "text"
    return "other"


def extract_pdf_text(pdf_path: Path) -> str:
    """Extract text from every page of a PDF, pages separated by a blank line."""
    with pdfplumber.open(pdf_path) as pdf:
        pages = [page.extract_text() or "" for page in pdf.pages]
    _log_debug(f"Extracted {len(pages)} PDF pages from {pdf_path.name}")
    return PAGE_SEPARATOR.join(pages)


def extract_text(path: Union[str, Path], file_type: Optional[str] = None) -> str:
    """
    Convert a document into plain text for normalize().

    Args:
        path: Document path
        file_type: Optional MIME type or extension hint

    Returns:
        Extracted UTF-8 text

    Raises:
        DocumentExtractionError: If the file is missing or cannot be read/decoded
    """
    path = Path(path)
    if not path.exists():
        _log_error(f"Document not found: {path}")
        raise DocumentExtractionError("Document not found", path=path, file_type=file_type)

    kind = resolve_file_type(path, file_type)

    try:
        if kind == "pdf":
            return extract_pdf_text(path)
        if kind == "text":
            return path.read_text(encoding="utf-8")
        _log_warning(f"Unrecognized file type for {path.name}, reading as UTF-8 text")
        return path.read_text(encoding="utf-8", errors="replace")
    except Exception as e:
        raise DocumentExtractionError(
            f"Failed to extract text ({kind})", path=path, file_type=file_type, original_error=e
        ) from e
