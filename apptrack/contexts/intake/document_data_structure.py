"""
Parsed résumé data structures for the Intake context.

Section and ParsedDocument are immutable values produced by the segmenter and
consumed by the Analysis context and by presentation layers. Nothing here
parses text; see segmenter.py.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional


class SectionCategory(str, Enum):
    """Closed set of semantic section labels."""

    SKILLS = "skills"
    EXPERIENCE = "experience"
    EDUCATION = "education"
    PROJECTS = "projects"
    ACHIEVEMENTS = "achievements"
    SUMMARY = "summary"
    CONTACT = "contact"
    OTHER = "other"


@dataclass(frozen=True)
class Section:
    """
    One categorized region of a résumé.

    Attributes:
        category: Semantic label assigned from the header text
        title: Header text as found (colons removed), or a fixed display title
               for sections discovered by content heuristics
        body: Text between this header and the next one
    """

    category: SectionCategory
    title: str
    body: str

    def to_dict(self) -> Dict[str, str]:
        return {"category": self.category.value, "title": self.title, "body": self.body}


@dataclass(frozen=True)
class ParsedDocument:
    """
    Output of a single segmentation pass.

    Sections are in document order when headers were found, or in heuristic
    discovery order otherwise. Warnings are informational notes about how the
    document was segmented; they never indicate a failure.
    """

    sections: tuple[Section, ...]
    normalized_text: str
    warnings: tuple[str, ...] = field(default_factory=tuple)

    @property
    def categories(self) -> tuple[SectionCategory, ...]:
        return tuple(section.category for section in self.sections)

    def get_section(self, category: SectionCategory) -> Optional[Section]:
        """
        Get the first section with the given category.

        Args:
            category: Category to look up

        Returns:
            First matching Section, or None if the document has none
        """
        for section in self.sections:
            if section.category == category:
                return section
        return None

    def get_sections(self, category: SectionCategory) -> tuple[Section, ...]:
        """Get every section with the given category, in order."""
        return tuple(section for section in self.sections if section.category == category)

    def has_section(self, category: SectionCategory) -> bool:
        return self.get_section(category) is not None

    def to_dict(self) -> Dict[str, Any]:
        """Plain-dict form for JSON output or external persistence."""
        return {
            "sections": [section.to_dict() for section in self.sections],
            "normalized_text": self.normalized_text,
            "warnings": list(self.warnings),
        }
