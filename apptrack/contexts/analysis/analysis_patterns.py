"""
Keyword dictionaries and regex patterns for résumé analysis.

Everything here is a module-level constant built once at import time. The
analyzer only reads these tables.

These lists aren't meant to be exhaustive. They cover the terms a typical
software résumé is screened for.
"""

import re
from dataclasses import dataclass

from apptrack.contexts.analysis.analysis_data_structure import EducationLevel

# =============================================================================
# SKILL DICTIONARY
# =============================================================================

# Output order of extract_skills() follows this order
SKILL_DICTIONARY: tuple = (
    # Programming languages
    "JavaScript", "TypeScript", "Python", "Java", "C++", "C#", "Ruby", "PHP",
    "Swift", "Kotlin", "Go", "Rust",
    # Web technologies
    "HTML", "CSS", "React", "Angular", "Vue", "Node.js", "Express", "Django",
    "Flask", "Spring", "ASP.NET",
    # Databases
    "SQL", "MySQL", "PostgreSQL", "MongoDB", "Firebase", "Oracle", "Redis",
    "Cassandra", "DynamoDB",
    # Cloud & DevOps
    "Docker", "Kubernetes", "AWS", "Azure", "GCP", "Jenkins", "CI/CD",
    "Terraform", "Ansible",
    # Data science & ML
    "Machine Learning", "Deep Learning", "TensorFlow", "PyTorch", "Scikit-learn",
    "NLP", "Computer Vision",
    # Mobile
    "iOS", "Android", "React Native", "Flutter", "Xamarin",
    # Tools & methodologies
    "Git", "GitHub", "Agile", "Scrum", "Kanban", "JIRA", "Confluence",
    # Soft skills
    "Leadership", "Communication", "Teamwork", "Problem Solving",
    "Critical Thinking", "Time Management",
)

# Widely requested skills surfaced as "consider adding" when absent
COMMON_SKILLS: tuple = ("JavaScript", "Python", "SQL", "AWS", "React", "Git", "Agile")


def _skill_pattern(skill: str) -> re.Pattern:
    # Alphanumeric boundaries instead of \b so "C++" and "C#" still anchor,
    # while "Java" stays out of "JavaScript" and "SQL" out of "PostgreSQL"
    return re.compile(rf"(?<![A-Za-z0-9]){re.escape(skill)}(?![A-Za-z0-9])", re.IGNORECASE)


SKILL_PATTERNS: tuple = tuple((skill, _skill_pattern(skill)) for skill in SKILL_DICTIONARY)

# =============================================================================
# EXPERIENCE PATTERNS
# =============================================================================


@dataclass(frozen=True)
class ExperiencePatterns:
    """Regex patterns for the experience-years estimate."""

    # "5 years", "10+ years", "1 year"
    EXPLICIT_YEARS: str = r"\b(\d+)\+?\s+years?\b"

    # Tokens that mean the range runs to the current year
    OPEN_ENDED: tuple = ("present", "current", "now")


# =============================================================================
# EDUCATION PATTERNS
# =============================================================================


@dataclass(frozen=True)
class EducationPatterns:
    """Degree keyword patterns, matched against the lowercased education body."""

    PHD: tuple = (r"\bph\.?\s?d\b", r"\bdoctorate\b")
    MASTERS: tuple = (r"\bmaster", r"\bmsc\b", r"\bms\b", r"\bma\b")
    BACHELORS: tuple = (r"\bbachelor", r"\bbsc\b", r"\bbs\b", r"\bba\b")
    ASSOCIATES: tuple = (r"\bassociate", r"\bdiploma\b")


# Checked in this order; highest degree wins
EDUCATION_LEVEL_PATTERNS = {
    EducationLevel.PHD: EducationPatterns.PHD,
    EducationLevel.MASTERS: EducationPatterns.MASTERS,
    EducationLevel.BACHELORS: EducationPatterns.BACHELORS,
    EducationLevel.ASSOCIATES: EducationPatterns.ASSOCIATES,
}

# =============================================================================
# SUGGESTION PATTERNS
# =============================================================================


@dataclass(frozen=True)
class AchievementPatterns:
    """Signals that a résumé quantifies its impact."""

    PERCENTAGE: str = r"\d+(?:\.\d+)?\s?%"
    MULTIPLIER: str = r"\b\d+(?:\.\d+)?x\b"
    CURRENCY: str = r"\$\s?\d"
    IMPACT_VERB: str = r"\b(?:increased|decreased|improved|reduced|saved|generated)\b"


QUANTIFIABLE_PATTERNS: tuple = (
    AchievementPatterns.PERCENTAGE,
    AchievementPatterns.MULTIPLIER,
    AchievementPatterns.CURRENCY,
    AchievementPatterns.IMPACT_VERB,
)

ACTION_VERBS: tuple = (
    "led",
    "managed",
    "developed",
    "created",
    "implemented",
    "designed",
    "built",
    "launched",
)

ACTION_VERB_PATTERN = re.compile(rf"\b(?:{'|'.join(ACTION_VERBS)})\b", re.IGNORECASE)

SUGGESTION_ADD_SUMMARY = "Add a professional summary to highlight your key qualifications"
SUGGESTION_EXPAND_SKILLS = "Expand your skills section with more technical and soft skills"
SUGGESTION_QUANTIFY = (
    'Add quantifiable achievements to demonstrate impact (e.g., "Increased efficiency by 20%")'
)
SUGGESTION_ACTION_VERBS = (
    'Use strong action verbs to describe your experience (e.g., "Led", "Developed", "Implemented")'
)
