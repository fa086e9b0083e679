"""
Analysis context logger.

Provides logging interface for the analysis context with automatic [analysis] prefix.
"""

from loguru import logger

CONTEXT_PREFIX = "[analysis]"


def _log_info(message: str) -> None:
    """Log info message with [analysis] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [analysis] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_analysis_result(result) -> None:
    """Log what an analysis pass derived."""
    _log_debug(f"Skills found ({len(result.skills)}): {', '.join(result.skills) or 'none'}")
    _log_debug(f"Experience years: {result.experience_years}")
    level = result.education_level.value if result.education_level else None
    _log_debug(f"Education level: {level}")
    _log_debug(f"Suggestions: {len(result.suggestions)}")
    _log_info(
        f"Analysis complete: {len(result.skills)} skills, {len(result.suggestions)} suggestions"
    )
