"""
Rule-based résumé analysis.

Derives skills, missing keywords, an experience-years estimate, an education
level and improvement suggestions from a ParsedDocument. Every check is an
independent function over plain text so it can be tested on its own; analyze()
only wires them together.
"""

import re
from typing import Optional

from apptrack.contexts.analysis.analysis_data_structure import AnalysisResult, EducationLevel
from apptrack.contexts.analysis.analysis_patterns import (
    ACTION_VERB_PATTERN,
    COMMON_SKILLS,
    EDUCATION_LEVEL_PATTERNS,
    QUANTIFIABLE_PATTERNS,
    SKILL_PATTERNS,
    SUGGESTION_ACTION_VERBS,
    SUGGESTION_ADD_SUMMARY,
    SUGGESTION_EXPAND_SKILLS,
    SUGGESTION_QUANTIFY,
    ExperiencePatterns,
)
from apptrack.contexts.analysis.logger import log_analysis_result
from apptrack.contexts.intake.document_data_structure import ParsedDocument, SectionCategory
from apptrack.contexts.intake.section_patterns import ContentCuePatterns
from apptrack.utils.config import DEFAULT_CONFIG, ParserConfig
from apptrack.utils.timestamp import current_year as _current_year


def extract_skills(text: str) -> list[str]:
    """
    Find dictionary skills mentioned anywhere in the text.

    Matching is case-insensitive; output uses the dictionary's spelling.

    Args:
        text: Any text (segmented or not)

    Returns:
        Skills in dictionary order, each at most once

    Example:
        >>> extract_skills("I know PYTHON and react.js")
        ['Python', 'React']
    """
    return [skill for skill, pattern in SKILL_PATTERNS if pattern.search(text)]


def find_missing_keywords(skills: list[str]) -> list[str]:
    """Common skills absent from the given list, in common-skill order."""
    found = set(skills)
    return [skill for skill in COMMON_SKILLS if skill not in found]


def find_date_ranges(text: str, current_year: int) -> list[tuple[int, int]]:
    """
    Find year ranges such as 2019-2023 or 2020 - Present.

    Args:
        text: Section text
        current_year: Year substituted for present/current/now

    Returns:
        (start_year, end_year) tuples in text order
    """
    ranges = []
    for match in re.finditer(ContentCuePatterns.DATE_RANGE, text, re.IGNORECASE):
        start_token, end_token = match.group(1), match.group(2)
        if end_token.lower() in ExperiencePatterns.OPEN_ENDED:
            end_year = current_year
        else:
            end_year = int(end_token)
        ranges.append((int(start_token), end_year))
    return ranges


def estimate_experience_years(text: str, current_year: Optional[int] = None) -> Optional[int]:
    """
    Estimate years of experience from experience-section text.

    An explicit "N years" / "N+ years" phrase wins. Otherwise the longest
    single date range is used; reversed ranges (end before start) are ignored.

    Args:
        text: Experience section body
        current_year: Year used for open-ended ranges (defaults to today)

    Returns:
        Estimated years, or None if nothing usable was found
    """
    explicit = re.search(ExperiencePatterns.EXPLICIT_YEARS, text, re.IGNORECASE)
    if explicit:
        return int(explicit.group(1))

    year = current_year if current_year is not None else _current_year()
    spans = [end - start for start, end in find_date_ranges(text, year) if end >= start]
    return max(spans) if spans else None


def classify_education(text: str) -> Optional[EducationLevel]:
    """
    Classify the highest degree mentioned in education-section text.

    Priority: PhD > Master's > Bachelor's > Associate's.

    Args:
        text: Education section body

    Returns:
        EducationLevel, or None if no degree keyword is found
    """
    lowered = text.lower()
    for level, patterns in EDUCATION_LEVEL_PATTERNS.items():
        if any(re.search(pattern, lowered) for pattern in patterns):
            return level
    return None


def has_quantifiable_achievements(text: str) -> bool:
    """Check for percentages, multipliers, currency amounts or impact verbs."""
    return any(re.search(pattern, text, re.IGNORECASE) for pattern in QUANTIFIABLE_PATTERNS)


def has_action_verbs(text: str) -> bool:
    return ACTION_VERB_PATTERN.search(text) is not None


def generate_suggestions(
    document: ParsedDocument, skills: list[str], config: ParserConfig = DEFAULT_CONFIG
) -> list[str]:
    """
    Build improvement suggestions.

    Each check is evaluated independently, in fixed order:
    1. No summary section
    2. Fewer than config.min_skills skills
    3. No quantifiable achievement in the full text
    4. No action verb in the full text

    Args:
        document: Segmented document
        skills: Skills found by extract_skills()
        config: Parser thresholds

    Returns:
        Suggestion strings (empty if nothing to improve)
    """
    suggestions = []

    if not document.has_section(SectionCategory.SUMMARY):
        suggestions.append(SUGGESTION_ADD_SUMMARY)

    if len(skills) < config.min_skills:
        suggestions.append(SUGGESTION_EXPAND_SKILLS)

    if not has_quantifiable_achievements(document.normalized_text):
        suggestions.append(SUGGESTION_QUANTIFY)

    if not has_action_verbs(document.normalized_text):
        suggestions.append(SUGGESTION_ACTION_VERBS)

    return suggestions


def analyze(
    document: ParsedDocument,
    config: Optional[ParserConfig] = None,
    current_year: Optional[int] = None,
) -> AnalysisResult:
    """
    Analyze a segmented résumé.

    This is the main analysis function. Skills are scanned over the whole
    normalized text; experience and education only over the first section of
    their category.

    Args:
        document: Output of segment()
        config: Parser thresholds (defaults to built-ins)
        current_year: Year used for open-ended date ranges (defaults to today)

    Returns:
        AnalysisResult
    """
    config = config or DEFAULT_CONFIG

    skills = extract_skills(document.normalized_text)

    experience = document.get_section(SectionCategory.EXPERIENCE)
    experience_years = (
        estimate_experience_years(experience.body, current_year) if experience else None
    )

    education = document.get_section(SectionCategory.EDUCATION)
    education_level = classify_education(education.body) if education else None

    result = AnalysisResult(
        skills=tuple(skills),
        missing_keywords=tuple(find_missing_keywords(skills)),
        experience_years=experience_years,
        education_level=education_level,
        suggestions=tuple(generate_suggestions(document, skills, config)),
    )
    log_analysis_result(result)
    return result
