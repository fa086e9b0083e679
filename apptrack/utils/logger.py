"""
Shared loguru setup for command-line sessions.

Library code never configures sinks. Scripts call setup_logger() once, and
context-specific wrappers live in contexts/{context}/logger.py.
"""

import sys
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from loguru import logger

load_dotenv()

LEVEL_COLORS = {
    "WARNING": "<yellow>",
    "ERROR": "<red>",
    "CRITICAL": "<bold><red>",
}

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {message}"
CONSOLE_FORMAT = (
    "{time:YYYY-MM-DD HH:mm:ss} | <level>{level: <7}</level> | <level>{message}</level>"
)


def setup_logger(
    session_name: str,
    log_dir: Path,
    extra_provenance: Optional[dict] = None,
    console_level: str = "INFO",
) -> Path:
    """
    Configure loguru for one CLI session.

    Replaces the default stderr sink with a DEBUG file sink inside log_dir
    and a colorized console sink, then writes a provenance header.

    Args:
        session_name: Log file stem (e.g., "analyze", "validate")
        log_dir: Directory for this session's log file
        extra_provenance: Additional key-value pairs for the provenance header
        console_level: Minimum level echoed to the console

    Returns:
        Path to log file

    Example:
        log_file = setup_logger("analyze", Path("outs/logs/analyze_20261017"))
    """
    log_dir.mkdir(exist_ok=True, parents=True)
    log_file = log_dir / f"{session_name}.log"

    logger.remove()

    for level_name, color in LEVEL_COLORS.items():
        logger.level(level_name, color=color)

    logger.add(log_file, format=FILE_FORMAT, level="DEBUG")

    # stderr keeps stdout clean for --json output
    logger.add(sys.stderr, format=CONSOLE_FORMAT, level=console_level, colorize=True)

    log_provenance(extra_provenance)

    return log_file


def log_provenance(extra_context: Optional[dict] = None) -> None:
    """
    Log how the current process was invoked.

    Args:
        extra_context: Additional key-value pairs to log
    """
    logger.debug("=" * 80)
    logger.debug(f"Script: {sys.argv[0]}")
    logger.debug(f"Command: {' '.join(sys.argv)}")
    logger.debug(f"Working directory: {Path.cwd()}")
    logger.debug(f"Python: {sys.version.split()[0]}")

    if extra_context:
        for key, value in extra_context.items():
            logger.debug(f"{key}: {value}")

    logger.debug("=" * 80)
