"""Clock helpers, kept in one place so callers can pin the date in tests."""

from datetime import datetime


def now() -> str:
    """Local time formatted for log directory names (YYYYMMDD_HHMMSS)."""
    return datetime.now().strftime("%Y%m%d_%H%M%S")


def current_year() -> int:
    return datetime.now().year
