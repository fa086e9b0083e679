"""
Text normalizer for the Intake context.

Canonicalizes line breaks in extracted document text before segmentation.
Normalize BEFORE parsing: the segmenter assumes LF line endings and at most
one blank line between paragraphs.
"""

import re

LINE_BREAK_RE = re.compile(r"\r\n?")
EXCESS_NEWLINES_RE = re.compile(r"\n{3,}")


def normalize(raw_text: str) -> str:
    """
    Normalize raw extracted text into line-oriented canonical form.

    Handles:
    - CRLF (and stray CR) line endings -> LF
    - Runs of 3+ newlines -> exactly one blank line
    - Leading/trailing whitespace of the whole document

    Idempotent: normalize(normalize(x)) == normalize(x).

    Args:
        raw_text: Text from the document-to-text extractor

    Returns:
        Normalized text (empty string for empty input)
    """
    text = LINE_BREAK_RE.sub("\n", raw_text)
    text = EXCESS_NEWLINES_RE.sub("\n\n", text)
    return text.strip()
