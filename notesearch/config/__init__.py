"""Configuration module for notesearch."""

from notesearch.config.loader import get_config_path, load_config, save_config
from notesearch.config.schema import Config, SearchConfig

__all__ = ["Config", "SearchConfig", "get_config_path", "load_config", "save_config"]
