"""Custom exceptions for the intake context with source-file references."""

from pathlib import Path
from typing import Optional


class DocumentExtractionError(Exception):
    """
    Exception raised when a document cannot be converted to plain text.

    Raised only by the extractor, before any text reaches normalize(). The
    normalizer, segmenter and analyzer never raise or wrap it.

    Attributes:
        message: Error description
        path: Document that failed to extract
        file_type: File-type hint used to pick the extraction method
        original_error: The underlying I/O or PDF parsing error
    """

    def __init__(
        self,
        message: str,
        path: Optional[Path] = None,
        file_type: Optional[str] = None,
        original_error: Optional[Exception] = None,
    ):
        self.message = message
        self.path = path
        self.file_type = file_type
        self.original_error = original_error

        # Build enhanced error message
        parts = [message]

        if path:
            parts.append(f"\nDocument: {path}")
        if file_type:
            parts.append(f"File type: {file_type}")

        if original_error:
            parts.append(f"\nOriginal error: {str(original_error)}")

        super().__init__("\n".join(parts))
