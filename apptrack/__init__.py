"""
APPTRACK - Application Tracking with Résumé Analysis

Document-analysis core of a job-application tracker. Takes plain text
extracted from an uploaded résumé, splits it into labeled sections, and
derives lightweight signals for the host application.

Architecture:
- Intake Context: Document text extraction, normalization and segmentation
- Analysis Context: Skill, experience, education and suggestion heuristics
"""

__version__ = "0.1.0"
