"""
Configuration loader — reads docktool.yml into a ToolConfig.

The file is optional.  When present it is read as YAML, validated
against the Pydantic schema, and returned as a typed model.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from src.core.errors import DocktoolError
from src.core.models.tool import ToolConfig

logger = logging.getLogger(__name__)

# Default config filenames, checked in order
CONFIG_FILES = ("docktool.yml", "docktool.yaml")


class ConfigError(DocktoolError):
    """Raised when tool configuration is invalid or unreadable."""


def find_config_file(project_root: Path) -> Path | None:
    """Return the first docktool config file in *project_root*, if any."""
    for name in CONFIG_FILES:
        candidate = project_root / name
        if candidate.is_file():
            return candidate
    return None


def load_config(path: Path | None = None) -> ToolConfig:
    """Load and validate tool configuration.

    Args:
        path: Path to docktool.yml.  None returns the defaults.

    Returns:
        Validated ToolConfig.

    Raises:
        ConfigError: If the file is missing, unreadable or invalid.
    """
    if path is None:
        return ToolConfig()

    if not path.is_file():
        raise ConfigError(f"Config file not found: {path}")

    logger.debug("Loading tool config from %s", path)

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        return ToolConfig()

    if not isinstance(data, dict):
        raise ConfigError(f"Expected a YAML mapping in {path}, got {type(data).__name__}")

    try:
        config = ToolConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration in {path}: {e}") from e

    logger.info("Loaded tool config from %s", path)
    return config
