"""
Analysis Context

Responsibilities:
- Extracts recognized skills and missing common keywords
- Estimates years of experience and education level
- Generates improvement suggestions

Owns: Résumé heuristics and keyword tables
Never: Reads files or changes how a document was segmented
"""

from apptrack.contexts.analysis.analysis_data_structure import AnalysisResult, EducationLevel
from apptrack.contexts.analysis.analyzer import analyze, extract_skills

__all__ = [
    "AnalysisResult",
    "EducationLevel",
    "analyze",
    "extract_skills",
]
