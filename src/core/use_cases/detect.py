"""
Detection use case — report what docktool sees in a project.

Runs the same analysis as ``generate`` but renders nothing: ecosystem,
base image, env file and the collected variables with their secret
labels.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from src.core.config.loader import find_config_file, load_config
from src.core.errors import DocktoolError
from src.core.models.build import BuildConfiguration
from src.core.services.docker_generate import analyze_project
from src.core.services.env_collector import is_secret_like

logger = logging.getLogger(__name__)


@dataclass
class DetectResult:
    """Result of the detect use case."""

    project_root: Path | None = None
    config: BuildConfiguration | None = None
    env_file: Path | None = None
    file_count: int = 0
    user_keys: set[str] = field(default_factory=set)
    error: str | None = None

    @property
    def variables(self) -> list[dict]:
        """Collected variables; secret-like values are withheld."""
        if self.config is None:
            return []
        items = []
        for key, value in self.config.environment.items():
            secret = is_secret_like(key)
            items.append({
                "key": key,
                "secret": secret,
                "value": None if secret else value,
                "source": "env_file" if key in self.user_keys else "default",
            })
        return items

    def to_dict(self) -> dict:
        result: dict = {}
        if self.error:
            result["error"] = self.error
            return result

        assert self.config is not None
        result["project_root"] = str(self.project_root)
        result["files"] = self.file_count
        result["ecosystem"] = self.config.ecosystem.value
        result["base_image"] = self.config.base_image
        result["ports"] = list(self.config.ports)
        result["env_file"] = self.env_file.name if self.env_file else None
        result["variables"] = self.variables
        return result


def run_detect(
    project_root: Path,
    config_path: Path | None = None,
) -> DetectResult:
    """Analyze the project at *project_root* without writing anything."""
    result = DetectResult(project_root=project_root)

    try:
        if config_path is None:
            config_path = find_config_file(project_root)
        settings = load_config(config_path)
        analysis = analyze_project(project_root, settings)
    except DocktoolError as e:
        result.error = str(e)
        return result

    result.config = analysis.config
    result.env_file = analysis.env_file
    result.file_count = len(analysis.inspector.files)
    result.user_keys = set(analysis.parsed_env)
    return result
