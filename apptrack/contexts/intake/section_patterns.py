"""
Pattern tables for résumé section identification.

This module provides regex patterns and helper functions to detect section
header lines, assign them a SectionCategory, and find content cues used when
a document has no recognizable headers.

Pattern classes follow a fixed convention:
- Dataclasses with frozen=True for immutability
- Class-level constants for patterns
- Helper functions that use these patterns
"""

import re
from dataclasses import dataclass
from typing import Optional

from apptrack.contexts.intake.document_data_structure import SectionCategory

# =============================================================================
# HEADER LINE PATTERNS
# =============================================================================


@dataclass(frozen=True)
class HeaderLinePatterns:
    """
    Regex patterns for line-local header cues.

    A line is a header candidate if it is short all-caps text, ends with a
    colon, or sits directly above/below an underline marker line.
    """

    # Underline marker: a line made only of 3+ dashes or equals signs
    UNDERLINE: str = r"^[-=]{3,}$"

    # Trailing colon (after stripping)
    TRAILING_COLON: str = r":$"

    # Any colon, removed when building display titles
    COLON: str = r":"


# =============================================================================
# SECTION CATEGORY PATTERNS
# =============================================================================


@dataclass(frozen=True)
class SectionCategoryPatterns:
    """
    Regex patterns for categorizing header text.

    Matched with re.search against the lowercased header, so a keyword inside
    a longer header ("Professional Work Experience") still matches.
    """

    SKILLS: tuple = (
        r"\bskills?\b",
        r"\btechnical skills\b",
        r"\bcore competenc(?:y|ies)\b",
        r"\btechnologies\b",
        r"\bproficienc(?:y|ies)\b",
        r"\bexpertise\b",
    )

    EXPERIENCE: tuple = (
        r"\bexperience\b",
        r"\bwork experience\b",
        r"\bemployment\b",
        r"\bprofessional experience\b",
        r"\bwork history\b",
    )

    EDUCATION: tuple = (
        r"\beducation\b",
        r"\bacademic background\b",
        r"\bqualifications\b",
        r"\bacademic credentials\b",
        r"\bdegrees\b",
    )

    PROJECTS: tuple = (
        r"\bprojects\b",
        r"\bpersonal projects\b",
        r"\bkey projects\b",
        r"\bportfolio\b",
        r"\bproject experience\b",
    )

    ACHIEVEMENTS: tuple = (
        r"\bachievements\b",
        r"\baccomplishments\b",
        r"\bawards\b",
        r"\bhonors\b",
        r"\brecognitions\b",
        r"\bcertifications\b",
    )

    SUMMARY: tuple = (
        r"\bsummary\b",
        r"\bprofile\b",
        r"\bprofessional summary\b",
        r"\bcareer objective\b",
        r"\bobjective\b",
        r"\babout me\b",
    )

    CONTACT: tuple = (
        r"\bcontact\b",
        r"\bcontact information\b",
        r"\bpersonal information\b",
        r"\bcontact details\b",
    )


# Checked in this order; first category with a matching pattern wins.
# "Project Experience" therefore lands in experience, not projects.
CATEGORY_PATTERNS = {
    SectionCategory.SKILLS: SectionCategoryPatterns.SKILLS,
    SectionCategory.EXPERIENCE: SectionCategoryPatterns.EXPERIENCE,
    SectionCategory.EDUCATION: SectionCategoryPatterns.EDUCATION,
    SectionCategory.PROJECTS: SectionCategoryPatterns.PROJECTS,
    SectionCategory.ACHIEVEMENTS: SectionCategoryPatterns.ACHIEVEMENTS,
    SectionCategory.SUMMARY: SectionCategoryPatterns.SUMMARY,
    SectionCategory.CONTACT: SectionCategoryPatterns.CONTACT,
}

# =============================================================================
# CONTENT CUE PATTERNS (used only when no header is detected)
# =============================================================================


@dataclass(frozen=True)
class ContentCuePatterns:
    """
    Regex patterns that locate section content in header-less text.

    All are compiled with re.IGNORECASE by their callers.
    """

    # First paragraph: everything up to the first blank line
    FIRST_PARAGRAPH: str = r"^(.*?)\n\n"

    # Skill/tool/language word followed shortly by a list delimiter
    SKILLS_CUE: str = (
        r"\b(?:skills|technologies|tools|languages|frameworks|proficient in|expertise in)\b"
        r"[\s\S]{0,100}?(?:•|\*|,|;|/)"
    )

    # Year range: 2019-2023, 2019 – Present, 1998—current, 2020now
    DATE_RANGE: str = (
        r"\b(19\d{2}|20\d{2})[ \t]*[-–—]?[ \t]*(19\d{2}|20\d{2}|present|current|now)\b"
    )


FALLBACK_TITLES = {
    SectionCategory.SUMMARY: "Summary",
    SectionCategory.SKILLS: "Skills",
    SectionCategory.EXPERIENCE: "Experience",
    SectionCategory.OTHER: "Resume Content",
}

# =============================================================================
# HELPER FUNCTIONS
# =============================================================================


def normalize_header_text(text: str) -> str:
    """
    Normalize header text for matching.

    Args:
        text: Raw header line

    Returns:
        Lowercased text with internal whitespace collapsed
    """
    return re.sub(r"\s+", " ", text.lower().strip())


def is_underline(line: str) -> bool:
    """Check if a line is an underline marker (---, ===)."""
    return re.match(HeaderLinePatterns.UNDERLINE, line.strip()) is not None


def is_all_caps(line: str) -> bool:
    """
    Check if a line equals its uppercased form.

    Lines with no letters ("2019 - 2023", "(555) 123-4567") also pass, so a
    short date or phone line can start a section.
    """
    return line == line.upper()


def match_section_category(header: str) -> Optional[SectionCategory]:
    """
    Match header text to a section category.

    Args:
        header: Header line text

    Returns:
        First matching SectionCategory in table order, or None if no match
    """
    normalized = normalize_header_text(header)

    for category, patterns in CATEGORY_PATTERNS.items():
        if any(re.search(pattern, normalized) for pattern in patterns):
            return category

    return None


def clean_header_title(header: str) -> str:
    """Strip colons and surrounding whitespace from a header line for display."""
    return re.sub(HeaderLinePatterns.COLON, "", header).strip()
