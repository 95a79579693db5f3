"""
Synthesis service — pick an ecosystem and build its configuration.

Selection walks a fixed marker list top to bottom and stops at the first
hit, so exactly one ecosystem is chosen for any file set.  The chosen
profile row supplies the image, instructions and ports; the collected
environment is folded in unchanged apart from the profile's own seed.

Pure logic — no side effects, no persistence.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from src.core.models.build import BuildConfiguration, Ecosystem
from src.core.services.generators.profiles import get_profile
from src.core.services.project_inspector import ProjectInspector

logger = logging.getLogger(__name__)


def select_ecosystem(inspector: ProjectInspector) -> Ecosystem:
    """Return the ecosystem for the project's marker files.

    Order: Node → Python → Go → Java → Ruby → PHP → generic.
    Java resolves to Maven when ``pom.xml`` exists, Gradle otherwise.
    """
    has = inspector.has_marker_file

    if has("package.json"):
        return Ecosystem.NODEJS
    if has("requirements.txt") or has("Pipfile"):
        return Ecosystem.PYTHON
    if has("go.mod"):
        return Ecosystem.GO
    if has("pom.xml") or has("build.gradle"):
        return Ecosystem.JAVA_MAVEN if has("pom.xml") else Ecosystem.JAVA_GRADLE
    if has("Gemfile"):
        return Ecosystem.RUBY
    if has("composer.json") or inspector.has_file_with_extension({".php"}):
        return Ecosystem.PHP
    return Ecosystem.GENERIC


def synthesize(
    inspector: ProjectInspector,
    environment: Mapping[str, str],
    compose: bool = False,
    *,
    profile_env_overrides: bool = False,
    secrets_file: str = ".env",
) -> BuildConfiguration:
    """Build the configuration for the project behind *inspector*.

    Args:
        inspector: Project file queries.
        environment: Collected environment variables.
        compose: True to mark the configuration for docker-compose output.
        profile_env_overrides: When True, a profile's seeded variables
            replace user-supplied values of the same name.  By default
            user values win.
        secrets_file: Env file referenced by compose secret entries.
    """
    ecosystem = select_ecosystem(inspector)
    profile = get_profile(ecosystem)

    merged = dict(environment)
    for key, value in profile.environment.items():
        if key in merged and merged[key] != value:
            if not profile_env_overrides:
                logger.info("Keeping user value for %s over %s default", key, ecosystem)
                continue
            logger.warning("Overriding user value for %s with %s default", key, ecosystem)
        merged[key] = value

    logger.info("Selected %s profile (%s)", ecosystem, profile.base_image)

    return BuildConfiguration(
        ecosystem=ecosystem,
        base_image=profile.base_image,
        instructions=profile.instructions,
        ports=profile.ports,
        environment=merged,
        compose=compose,
        secrets_file=secrets_file,
    )
