"""
Generate use case — orchestrate Dockerfile / compose generation.

Ties together config loading, project analysis, rendering and writing.
Every failure is reported through ``GenerateResult.error``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from src.core.config.loader import find_config_file, load_config
from src.core.errors import DocktoolError, WriteError
from src.core.models.build import BuildConfiguration
from src.core.models.template import GeneratedFile
from src.core.services.docker_generate import (
    analyze_project,
    render_files,
    write_generated_file,
)

logger = logging.getLogger(__name__)


@dataclass
class GenerateResult:
    """Result of the generate use case."""

    project_root: Path | None = None
    config: BuildConfiguration | None = None
    env_file: Path | None = None
    files: list[GeneratedFile] = field(default_factory=list)
    written: list[Path] = field(default_factory=list)
    dry_run: bool = False
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_dict(self) -> dict:
        result: dict = {"ok": self.ok}
        if self.error:
            result["error"] = self.error
        # Partial writes are reported even on failure
        result["written"] = [str(p) for p in self.written]
        if self.config is None:
            return result

        result["project_root"] = str(self.project_root)
        result["ecosystem"] = self.config.ecosystem.value
        result["base_image"] = self.config.base_image
        result["env_file"] = self.env_file.name if self.env_file else None
        result["dry_run"] = self.dry_run
        result["files"] = [f.model_dump() for f in self.files]
        return result


def run_generate(
    project_root: Path,
    *,
    compose: bool = False,
    both: bool = False,
    output_dir: Path | None = None,
    dry_run: bool = False,
    config_path: Path | None = None,
) -> GenerateResult:
    """Generate Docker configuration for the project at *project_root*.

    Args:
        project_root: Directory to inspect.
        compose: Emit docker-compose.yml instead of a Dockerfile.
        both: Emit both files.
        output_dir: Where to write (default: config setting, else project root).
        dry_run: Render only; write nothing.
        config_path: Explicit docktool.yml (default: look in project root).

    Returns:
        GenerateResult with the rendered files and what was written.
    """
    result = GenerateResult(project_root=project_root, dry_run=dry_run)

    try:
        if config_path is None:
            config_path = find_config_file(project_root)
        settings = load_config(config_path)

        analysis = analyze_project(project_root, settings, compose=compose)
    except DocktoolError as e:
        result.error = str(e)
        return result

    result.config = analysis.config
    result.env_file = analysis.env_file
    result.files = render_files(analysis.config, settings, both=both)

    if dry_run:
        logger.info("Dry run: %d file(s) rendered, none written", len(result.files))
        return result

    if output_dir is None:
        output_dir = project_root / settings.output_dir if settings.output_dir else project_root

    for file in result.files:
        try:
            result.written.append(write_generated_file(output_dir, file))
        except WriteError as e:
            result.error = str(e)
            break

    return result
