"""
Intake context logger.

Provides logging interface for the intake context with automatic [intake] prefix.
All intake modules should import from this module, not from loguru directly.
"""

from loguru import logger

CONTEXT_PREFIX = "[intake]"


def _log_info(message: str) -> None:
    """Log info message with [intake] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [intake] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [intake] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [intake] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_segmentation_result(document) -> None:
    """
    Log a one-line summary of a segmentation pass, then one debug line per section.

    Args:
        document: ParsedDocument returned by segment()
    """
    categories = ", ".join(section.category.value for section in document.sections)
    _log_debug(f"Segmented {len(document.normalized_text)} chars into {len(document.sections)} sections: [{categories}]")
    for section in document.sections:
        _log_debug(f"  {section.category.value}: '{section.title}' ({len(section.body)} chars)")
    for warning in document.warnings:
        _log_debug(f"  Note: {warning}")
