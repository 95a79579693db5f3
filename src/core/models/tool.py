"""
Tool configuration model — optional ``docktool.yml`` settings.

Every field has a default, so a project without a config file behaves
exactly like one with an empty file.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ToolConfig(BaseModel):
    """Per-project generation settings.

    Attributes:
        env_files:             Env file names to try, in order (empty = catalog default).
        secrets_file:          File referenced by compose secret entries.
        output_dir:            Where generated files go (relative to the project root).
        dockerfile_name:       File name for the image-build recipe.
        compose_name:          File name for the compose descriptor.
        profile_env_overrides: Let profile seeds replace user env values.
    """

    model_config = ConfigDict(extra="forbid")

    env_files: list[str] = Field(default_factory=list)
    secrets_file: str = ".env"
    output_dir: str | None = None
    dockerfile_name: str = "Dockerfile"
    compose_name: str = "docker-compose.yml"
    profile_env_overrides: bool = False
