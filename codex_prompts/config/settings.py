"""Configuration settings."""
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from codex_prompts.exceptions import ConfigError

logger = logging.getLogger(__name__)

CODEX_HOME_ENV = "CODEX_HOME"
CONFIG_FILENAME = "prompts.yaml"


def find_codex_home() -> Path:
    """Return the config home: $CODEX_HOME if set, else ~/.codex."""
    env_home = os.getenv(CODEX_HOME_ENV)
    if env_home:
        return Path(env_home).expanduser()
    return Path.home() / ".codex"


@dataclass
class Config:
    """Main configuration."""

    codex_home: Path = field(default_factory=find_codex_home)
    project_root: Path = field(default_factory=Path.cwd)
    personal_dir: Path | None = None
    reserved_commands: list[str] = field(default_factory=list)
    log_level: str = "INFO"

    @property
    def prompts_dir(self) -> Path:
        """Directory holding personal prompts."""
        if self.personal_dir is not None:
            return self.personal_dir
        return self.codex_home / "prompts"


def load_config(path: Path | str | None = None) -> Config:
    """Load configuration from YAML file.

    Args:
        path: Explicit config file. Defaults to <codex-home>/prompts.yaml.

    Returns:
        Parsed Config, or defaults when the file does not exist.

    Raises:
        ConfigError: If the file is not valid YAML or not a mapping.
    """
    if path is None:
        path = find_codex_home() / CONFIG_FILENAME
    else:
        path = Path(path)

    if not path.exists():
        logger.debug(f"No config file at {path}, using defaults")
        return Config()

    try:
        with open(path) as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Failed to parse config {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Config {path} must be a mapping")

    logger.info(f"Loaded configuration from {path}")
    return _parse_config(data)


def _parse_config(data: dict[str, Any]) -> Config:
    """Parse config dictionary into Config object."""
    reserved = data.get("reserved_commands") or []
    if isinstance(reserved, str):
        reserved = [reserved]
    if not isinstance(reserved, list):
        raise ConfigError(
            f"reserved_commands must be a list of names, got {type(reserved).__name__}"
        )

    log_level = str(data.get("log_level") or "INFO").upper()
    # getLevelName maps known names to ints and unknown ones to "Level X"
    if not isinstance(logging.getLevelName(log_level), int):
        raise ConfigError(f"Unknown log_level: {log_level}")

    config = Config(
        reserved_commands=[str(name) for name in reserved],
        log_level=log_level,
    )

    if data.get("project_root"):
        config.project_root = Path(data["project_root"]).expanduser()

    if data.get("personal_dir"):
        config.personal_dir = Path(data["personal_dir"]).expanduser()

    return config
