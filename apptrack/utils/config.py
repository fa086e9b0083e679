"""
Tunable thresholds for the segmentation and analysis heuristics.

Defaults live in ParserConfig. A YAML file can override any subset of them:

    # parser.yaml
    header_max_length: 40
    min_skills: 8

The file is found via the config_path argument or the APPTRACK_PARSER_CONFIG
environment variable (loaded from .env).
"""

import os
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Optional, Union

from dotenv import load_dotenv
from omegaconf import OmegaConf
from omegaconf.errors import OmegaConfBaseException

load_dotenv()


@dataclass(frozen=True)
class ParserConfig:
    """
    Thresholds shared by the segmenter and analyzer.

    Attributes:
        header_max_length: All-caps lines at or above this length are prose, not headers
        summary_max_length: Longest first paragraph accepted as a fallback summary
        skills_window: Max characters captured by the fallback skills window
        experience_window: Max characters captured by the fallback experience window
        min_skills: Fewer recognized skills than this triggers a suggestion
    """

    header_max_length: int = 30
    summary_max_length: int = 1000
    skills_window: int = 1000
    experience_window: int = 1500
    min_skills: int = 5


DEFAULT_CONFIG = ParserConfig()


def _config_path_from_env() -> Optional[Path]:
    value = os.getenv("APPTRACK_PARSER_CONFIG")
    return Path(value) if value else None


def load_parser_config(config_path: Union[str, Path, None] = None) -> ParserConfig:
    """
    Load parser thresholds, merging a YAML override onto the defaults.

    Args:
        config_path: Optional YAML file (defaults to APPTRACK_PARSER_CONFIG, then built-ins)

    Returns:
        ParserConfig with overrides applied

    Raises:
        FileNotFoundError: If an explicit config file does not exist
        ValueError: If the file has unknown keys or non-positive/non-integer values
    """
    if config_path is None:
        config_path = _config_path_from_env()
    if config_path is None:
        return DEFAULT_CONFIG

    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Parser config not found: {config_path}")

    base = OmegaConf.create(asdict(DEFAULT_CONFIG))
    OmegaConf.set_struct(base, True)

    try:
        merged = OmegaConf.merge(base, OmegaConf.load(config_path))
    except OmegaConfBaseException as e:
        raise ValueError(f"Invalid parser config {config_path}: {e}") from e

    values = OmegaConf.to_container(merged, resolve=True)
    for key, value in values.items():
        # bool is an int subclass, reject it explicitly
        if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
            raise ValueError(
                f"Parser config key '{key}' must be a positive integer, got: {value!r}"
            )

    return ParserConfig(**values)
