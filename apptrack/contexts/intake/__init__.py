"""
Intake Context

Responsibilities:
- Converts uploaded documents (PDF, plain text) into plain text
- Normalizes line structure of extracted text
- Segments text into categorized résumé sections

Owns: Document-to-text extraction, normalization, section segmentation
Never: Scores or interprets section content
"""

from apptrack.contexts.intake.document_data_structure import (
    ParsedDocument,
    Section,
    SectionCategory,
)
from apptrack.contexts.intake.exceptions import DocumentExtractionError
from apptrack.contexts.intake.extractor import extract_text
from apptrack.contexts.intake.normalizer import normalize
from apptrack.contexts.intake.segmenter import parse_resume_text, segment

__all__ = [
    # Data structures
    "ParsedDocument",
    "Section",
    "SectionCategory",
    # Pipeline steps
    "extract_text",
    "normalize",
    "segment",
    "parse_resume_text",
    # Errors
    "DocumentExtractionError",
]
