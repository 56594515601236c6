"""Configuration module."""
from .settings import Config, find_codex_home, load_config

__all__ = ["Config", "find_codex_home", "load_config"]
