"""
Compose generator — render a build configuration as docker-compose.yml.

Produces a single ``app`` service.  Secret-like variables never appear
in the plain ``environment`` list; they are declared as top-level
secrets backed by the project's env file and referenced by lower-cased
name from the service.
"""

from __future__ import annotations

import logging

import yaml

from src.core.models.build import BuildConfiguration
from src.core.models.template import GeneratedFile
from src.core.services.env_collector import is_secret_like

logger = logging.getLogger(__name__)

COMPOSE_VERSION = "3.8"


def _split_environment(config: BuildConfiguration) -> tuple[list[str], list[str]]:
    """Split variables into ``KEY=value`` entries and secret-like keys."""
    plain: list[str] = []
    secrets: list[str] = []
    for key, value in config.environment.items():
        if is_secret_like(key):
            secrets.append(key)
        else:
            plain.append(f"{key}={value}")
    return plain, secrets


def _secret_names(secrets: list[str]) -> list[str]:
    """Lower-cased compose secret names, first occurrence wins."""
    names: list[str] = []
    for key in secrets:
        name = key.lower()
        if name in names:
            logger.warning("Secret %s collides with an earlier key as %r; emitting it once", key, name)
            continue
        names.append(name)
    return names


def build_compose(config: BuildConfiguration) -> dict:
    """Return the compose document for *config* as a plain dict."""
    plain, secrets = _split_environment(config)
    secret_names = _secret_names(secrets)

    compose: dict = {"version": COMPOSE_VERSION}

    if secret_names:
        compose["secrets"] = {
            name: {"file": config.secrets_file} for name in secret_names
        }

    service: dict = {
        "image": config.base_image,
        "build": {"context": "."},
    }
    if config.ports:
        service["ports"] = list(config.ports)
    if plain:
        service["environment"] = plain
    if secret_names:
        service["secrets"] = secret_names

    compose["services"] = {"app": service}
    return compose


def render_compose(config: BuildConfiguration) -> str:
    """Return docker-compose.yml text for *config*."""
    return yaml.dump(
        build_compose(config),
        default_flow_style=False,
        sort_keys=False,
        allow_unicode=True,
    )


# ── Public API ──────────────────────────────────────────────────


def generate_compose(
    config: BuildConfiguration,
    *,
    output_path: str = "docker-compose.yml",
) -> GeneratedFile:
    """Generate a docker-compose.yml for the given configuration.

    Args:
        config: Synthesized build configuration.
        output_path: Relative path for the compose file.
    """
    return GeneratedFile(
        path=output_path,
        content=render_compose(config),
        overwrite=True,
        reason=f"Generated docker-compose.yml for {config.ecosystem} project",
    )
