"""
Dockerfile generator — render a build configuration as a Dockerfile.

Layout::

    FROM <base image>

    # Build arguments          (only when there are variables)
    ARG KEY
    ...

    <profile instructions, verbatim>

    # Environment variables    (only when there are variables)
    ENV KEY=value
"""

from __future__ import annotations

from src.core.models.build import BuildConfiguration
from src.core.models.template import GeneratedFile


_NEEDS_QUOTES = "\"'\\$"
_ESCAPED = "\\\"$"


def _env_value(value: str) -> str:
    """Quote an ENV value when Docker would otherwise split, strip or expand it.

    Inside double quotes Docker unescapes ``\\``, ``"`` and ``$``; every
    other character, non-ASCII included, is written as-is.
    """
    if value and not any(c.isspace() or c in _NEEDS_QUOTES for c in value):
        return value
    escaped = "".join(f"\\{c}" if c in _ESCAPED else c for c in value)
    return f'"{escaped}"'


def render_dockerfile(config: BuildConfiguration) -> str:
    """Return Dockerfile text for *config*."""
    lines = [f"FROM {config.base_image}", ""]

    if config.environment:
        lines.append("# Build arguments")
        lines.extend(f"ARG {key}" for key in config.environment)
        lines.append("")

    lines.extend(config.instructions)

    if config.environment:
        lines.append("")
        lines.append("# Environment variables")
        lines.extend(
            f"ENV {key}={_env_value(value)}"
            for key, value in config.environment.items()
        )

    return "\n".join(lines) + "\n"


# ── Public API ──────────────────────────────────────────────────


def generate_dockerfile(
    config: BuildConfiguration,
    *,
    output_path: str = "Dockerfile",
) -> GeneratedFile:
    """Generate a Dockerfile for the given configuration.

    Args:
        config: Synthesized build configuration.
        output_path: Relative path for the Dockerfile.
    """
    return GeneratedFile(
        path=output_path,
        content=render_dockerfile(config),
        overwrite=True,
        reason=f"Generated Dockerfile for {config.ecosystem} project",
    )
