"""
Résumé section segmentation for the Intake context.

Partitions normalized document text into an ordered tuple of categorized
Sections. Two paths, with strict precedence:

1. Header pass: detect header lines with line-local cues, categorize each
   one, and slice the lines between consecutive headers into bodies.
2. Content fallback (only when the header pass finds nothing): run an
   ordered list of named strategies, each carving one section out of the
   text the earlier strategies left behind.

This module produces data; the structures in document_data_structure.py
hold it.
"""

import re
from dataclasses import dataclass
from typing import Callable, Optional

from apptrack.contexts.intake.document_data_structure import (
    ParsedDocument,
    Section,
    SectionCategory,
)
from apptrack.contexts.intake.logger import _log_debug, _log_info, log_segmentation_result
from apptrack.contexts.intake.normalizer import normalize
from apptrack.contexts.intake.section_patterns import (
    FALLBACK_TITLES,
    ContentCuePatterns,
    HeaderLinePatterns,
    clean_header_title,
    is_all_caps,
    is_underline,
    match_section_category,
)
from apptrack.utils.config import DEFAULT_CONFIG, ParserConfig


@dataclass(frozen=True)
class HeaderLine:
    """A detected header: its line index, stripped text and category."""

    index: int
    text: str
    category: SectionCategory


@dataclass(frozen=True)
class FallbackMatch:
    """Section carved by a fallback strategy, plus the text left for later strategies."""

    section: Section
    remaining: str


FallbackStrategy = Callable[[str, ParserConfig], Optional[FallbackMatch]]


# =============================================================================
# HEADER PASS
# =============================================================================


def is_header_candidate(lines: list[str], index: int, config: ParserConfig = DEFAULT_CONFIG) -> bool:
    """
    Decide whether lines[index] looks like a section header.

    A non-blank line qualifies if ANY of:
    - it is all-caps and shorter than config.header_max_length
    - it ends with a colon
    - the line directly before or after it is an underline marker

    Underline marker lines themselves never qualify.

    Args:
        lines: All document lines
        index: Line to test
        config: Parser thresholds

    Returns:
        True if the line is a header candidate
    """
    stripped = lines[index].strip()
    if not stripped or is_underline(stripped):
        return False

    if is_all_caps(stripped) and len(stripped) < config.header_max_length:
        return True

    if re.search(HeaderLinePatterns.TRAILING_COLON, stripped):
        return True

    previous_line = lines[index - 1] if index > 0 else ""
    next_line = lines[index + 1] if index + 1 < len(lines) else ""
    return is_underline(previous_line) or is_underline(next_line)


def categorize_header(header: str) -> SectionCategory:
    """Assign a category to header text, defaulting to OTHER."""
    return match_section_category(header) or SectionCategory.OTHER


def detect_headers(lines: list[str], config: ParserConfig = DEFAULT_CONFIG) -> list[HeaderLine]:
    """
    Find and categorize every header candidate line.

    Args:
        lines: Document lines
        config: Parser thresholds

    Returns:
        HeaderLine list in document order
    """
    headers = []
    for index, line in enumerate(lines):
        if is_header_candidate(lines, index, config):
            text = line.strip()
            headers.append(HeaderLine(index=index, text=text, category=categorize_header(text)))
    return headers


def _body_text(lines: list[str]) -> str:
    """Join non-blank, non-underline lines."""
    return "\n".join(line.strip() for line in lines if line.strip() and not is_underline(line))


def slice_sections(lines: list[str], headers: list[HeaderLine]) -> tuple[list[Section], list[str]]:
    """
    Slice lines into sections at the given headers.

    Each header owns the lines up to (not including) the next header. Text
    before the first header is kept as an untitled OTHER section so that no
    content is lost.

    Args:
        lines: Document lines
        headers: Non-empty list of detected headers, in document order

    Returns:
        Tuple of (sections, warnings)
    """
    sections = []
    warnings = []

    preamble = _body_text(lines[: headers[0].index])
    if preamble:
        sections.append(Section(category=SectionCategory.OTHER, title="", body=preamble))
        warnings.append(
            f"Kept {len(preamble)} chars before the first header as an untitled section"
        )

    for position, header in enumerate(headers):
        end = headers[position + 1].index if position + 1 < len(headers) else len(lines)
        sections.append(
            Section(
                category=header.category,
                title=clean_header_title(header.text),
                body=_body_text(lines[header.index + 1 : end]),
            )
        )

    return sections, warnings


# =============================================================================
# CONTENT FALLBACK
# =============================================================================


def _window_bounds(text: str, index: int, max_length: int) -> tuple[int, int]:
    """
    Bounds of a window that starts at the beginning of the line containing
    index and stops at the next paragraph break or after max_length chars.
    """
    start = text.rfind("\n", 0, index) + 1
    end = min(start + max_length, len(text))

    paragraph_break = text.find("\n\n", start)
    if start < paragraph_break < end:
        end = paragraph_break

    return start, end


def _carve_window(
    text: str, pattern: str, category: SectionCategory, max_length: int
) -> Optional[FallbackMatch]:
    match = re.search(pattern, text, re.IGNORECASE)
    if not match:
        return None

    start, end = _window_bounds(text, match.start(), max_length)
    body = text[start:end].strip()
    if not body:
        return None

    section = Section(category=category, title=FALLBACK_TITLES[category], body=body)
    return FallbackMatch(section=section, remaining=text[:start] + text[end:])


def carve_summary(text: str, config: ParserConfig = DEFAULT_CONFIG) -> Optional[FallbackMatch]:
    """Take the first paragraph as a summary if it is short enough."""
    match = re.match(ContentCuePatterns.FIRST_PARAGRAPH, text, re.DOTALL)
    if not match:
        return None

    paragraph = match.group(1).strip()
    if not paragraph or len(match.group(1)) >= config.summary_max_length:
        return None

    section = Section(
        category=SectionCategory.SUMMARY,
        title=FALLBACK_TITLES[SectionCategory.SUMMARY],
        body=paragraph,
    )
    return FallbackMatch(section=section, remaining=text[match.end() :])


def carve_skills(text: str, config: ParserConfig = DEFAULT_CONFIG) -> Optional[FallbackMatch]:
    """Take a window around the first skill-list cue."""
    return _carve_window(
        text, ContentCuePatterns.SKILLS_CUE, SectionCategory.SKILLS, config.skills_window
    )


def carve_experience(text: str, config: ParserConfig = DEFAULT_CONFIG) -> Optional[FallbackMatch]:
    """Take a window around the first year range."""
    return _carve_window(
        text, ContentCuePatterns.DATE_RANGE, SectionCategory.EXPERIENCE, config.experience_window
    )


# Evaluated in this order; each sees only the text earlier strategies left behind
FALLBACK_STRATEGIES: tuple[tuple[str, FallbackStrategy], ...] = (
    ("summary", carve_summary),
    ("skills", carve_skills),
    ("experience", carve_experience),
)


def segment_by_content(text: str, config: ParserConfig = DEFAULT_CONFIG) -> list[Section]:
    """
    Segment header-less text with the fallback strategies.

    Args:
        text: Normalized, non-empty document text
        config: Parser thresholds

    Returns:
        Sections in discovery order; a single OTHER section holding the whole
        text if no strategy produced anything
    """
    sections = []
    remaining = text

    for name, strategy in FALLBACK_STRATEGIES:
        result = strategy(remaining, config)
        if result is None:
            _log_debug(f"Fallback '{name}': no match")
            continue
        _log_debug(f"Fallback '{name}': carved {len(result.section.body)} chars")
        sections.append(result.section)
        remaining = result.remaining

    if not sections:
        sections.append(
            Section(
                category=SectionCategory.OTHER,
                title=FALLBACK_TITLES[SectionCategory.OTHER],
                body=text,
            )
        )

    return sections


# =============================================================================
# ENTRY POINTS
# =============================================================================


def segment(normalized_text: str, config: Optional[ParserConfig] = None) -> ParsedDocument:
    """
    Segment normalized document text into categorized sections.

    This is the main segmentation function. The header pass always wins; the
    content fallback runs only if no header line is detected.

    Args:
        normalized_text: Output of normalize()
        config: Parser thresholds (defaults to built-ins)

    Returns:
        ParsedDocument with sections and the normalized text. Empty input
        yields zero sections.
    """
    config = config or DEFAULT_CONFIG

    if not normalized_text.strip():
        document = ParsedDocument(
            sections=(), normalized_text=normalized_text, warnings=("Document is empty",)
        )
        log_segmentation_result(document)
        return document

    lines = normalized_text.split("\n")
    headers = detect_headers(lines, config)
    _log_debug(f"Detected {len(headers)} header lines in {len(lines)} lines")

    if headers:
        sections, warnings = slice_sections(lines, headers)
    else:
        _log_info("No header lines found, falling back to content heuristics")
        sections = segment_by_content(normalized_text, config)
        warnings = ["No section headers detected; used content heuristics"]

    document = ParsedDocument(
        sections=tuple(sections),
        normalized_text=normalized_text,
        warnings=tuple(warnings),
    )
    log_segmentation_result(document)
    return document


def parse_resume_text(raw_text: str, config: Optional[ParserConfig] = None) -> ParsedDocument:
    """
    Normalize and segment raw extracted text in one call.

    Args:
        raw_text: Text from the document-to-text extractor
        config: Parser thresholds

    Returns:
        ParsedDocument
    """
    return segment(normalize(raw_text), config)
