"""
Shared utilities for APPTRACK.

Common functionality used across contexts:
- Parser configuration
- Logging setup
- Clock helpers
- Report formatting
"""

from apptrack.utils.config import DEFAULT_CONFIG, ParserConfig, load_parser_config
from apptrack.utils.timestamp import current_year, now

__all__ = ["DEFAULT_CONFIG", "ParserConfig", "load_parser_config", "current_year", "now"]
