"""Docker config generation — analyze a project, render and write files."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from src.core.errors import WriteError
from src.core.models.build import BuildConfiguration
from src.core.models.template import GeneratedFile
from src.core.models.tool import ToolConfig
from src.core.services.env_collector import collect, find_env_file, load_env_file
from src.core.services.project_inspector import ProjectInspector
from src.core.services.synthesis import synthesize

logger = logging.getLogger(__name__)


@dataclass
class ProjectAnalysis:
    """Everything learned about a project in one pass."""

    inspector: ProjectInspector
    config: BuildConfiguration
    env_file: Path | None = None
    parsed_env: dict[str, str] = field(default_factory=dict)


def analyze_project(
    project_root: Path,
    settings: ToolConfig | None = None,
    *,
    compose: bool = False,
) -> ProjectAnalysis:
    """List files, read the env file, collect variables and synthesize.

    Raises:
        DetectionError: If the project root cannot be listed.
        EnvFileError: If the env file exists but cannot be read.
    """
    settings = settings or ToolConfig()

    inspector = ProjectInspector.from_directory(project_root)
    logger.info("Inspecting %s (%d files)", project_root, len(inspector.files))

    env_file = find_env_file(project_root, settings.env_files or None)
    parsed_env = load_env_file(env_file) if env_file else {}

    environment = collect(inspector, parsed_env)
    config = synthesize(
        inspector,
        environment,
        compose,
        profile_env_overrides=settings.profile_env_overrides,
        secrets_file=settings.secrets_file,
    )
    return ProjectAnalysis(
        inspector=inspector,
        config=config,
        env_file=env_file,
        parsed_env=parsed_env,
    )


def render_files(
    config: BuildConfiguration,
    settings: ToolConfig | None = None,
    *,
    both: bool = False,
) -> list[GeneratedFile]:
    """Render the file(s) requested by *config*.

    ``config.compose`` picks docker-compose.yml over the Dockerfile;
    *both* renders the two of them, Dockerfile first.
    """
    from src.core.services.generators.compose import generate_compose
    from src.core.services.generators.dockerfile import generate_dockerfile

    settings = settings or ToolConfig()
    files: list[GeneratedFile] = []

    if both or not config.compose:
        files.append(generate_dockerfile(config, output_path=settings.dockerfile_name))
    if both or config.compose:
        files.append(generate_compose(config, output_path=settings.compose_name))
    return files


def write_generated_file(output_dir: Path, file: GeneratedFile) -> Path:
    """Write a GeneratedFile under *output_dir*.

    Existing files are replaced when ``file.overwrite`` is set.

    Returns:
        The path written.

    Raises:
        WriteError: If the file exists and may not be replaced, or the
            write itself fails.
    """
    target = output_dir / file.path

    if target.exists() and not file.overwrite:
        raise WriteError(target, "file already exists")

    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(file.content, encoding="utf-8")
    except OSError as e:
        raise WriteError(target, e.strerror or str(e)) from e

    logger.info("Wrote generated file: %s", target)
    return target
