"""Analyzer configuration management."""

import logging
from functools import lru_cache
from pathlib import Path

from .schemas import AnalyzerConfig
from .utils import load_json

logger = logging.getLogger('league_analyzer.config')

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent / 'data' / 'analyzer_config.json'


def load_config(path: Path | str | None = None) -> AnalyzerConfig:
    """
    Load analyzer configuration from a JSON file.

    A missing default file yields the built-in defaults; an explicitly
    named file must exist.

    Raises:
        FileNotFoundError: If an explicit path doesn't exist
        ValueError: If the file has an invalid structure
    """
    if path is None:
        if not DEFAULT_CONFIG_PATH.exists():
            logger.debug(f'No config at {DEFAULT_CONFIG_PATH}; using defaults')
            return AnalyzerConfig()
        path = DEFAULT_CONFIG_PATH
    return load_json(path, schema=AnalyzerConfig)


@lru_cache(maxsize=1)
def get_config() -> AnalyzerConfig:
    """
    Load configuration from data/analyzer_config.json (cached after first load).

    Example:
        from league_analyzer.config import get_config
        config = get_config()
        print(config.league_ids)
    """
    return load_config()


def clear_config_cache() -> None:
    """Clear the configuration cache so the next get_config() re-reads the file."""
    get_config.cache_clear()
