"""Analysis result data structures."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional


class EducationLevel(str, Enum):
    """Highest degree detected in an education section."""

    PHD = "PhD"
    MASTERS = "Master's"
    BACHELORS = "Bachelor's"
    ASSOCIATES = "Associate's"


@dataclass(frozen=True)
class AnalysisResult:
    """
    Signals derived from one ParsedDocument.

    Attributes:
        skills: Recognized skills, in skill dictionary order, no duplicates
        missing_keywords: Common skills not found in the document
        experience_years: Estimated years of experience, None if undeterminable
        education_level: Highest degree found, None if undeterminable
        suggestions: Improvement suggestions, in fixed check order
    """

    skills: tuple[str, ...]
    missing_keywords: tuple[str, ...]
    experience_years: Optional[int]
    education_level: Optional[EducationLevel]
    suggestions: tuple[str, ...]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "skills": list(self.skills),
            "missing_keywords": list(self.missing_keywords),
            "experience_years": self.experience_years,
            "education_level": self.education_level.value if self.education_level else None,
            "suggestions": list(self.suggestions),
        }
