"""
Environment collector — .env discovery, parsing, defaults, secret labels.

Builds the environment mapping that flows into the build configuration:

1. Values parsed from the project's env file are authoritative.
2. The selected ecosystem's default table fills in missing keys only.
3. Every key is labelled secret-like or not by name pattern.

Secret detection is advisory: it decides whether a key is rendered as a
plain variable or as a compose secret reference, nothing more.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Mapping
from pathlib import Path

from src.core.data import get_registry
from src.core.errors import EnvFileError
from src.core.models.build import Ecosystem
from src.core.services.project_inspector import ProjectInspector

logger = logging.getLogger(__name__)

_KEY_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


# ═══════════════════════════════════════════════════════════════════
#  Classification
# ═══════════════════════════════════════════════════════════════════


def is_secret_like(key: str, patterns: Iterable[str] | None = None) -> bool:
    """Return True if *key* looks like it names a secret.

    Matching is a case-insensitive substring test against *patterns*
    (default: the registry's secret pattern list)::

        is_secret_like("DB_PASSWORD")  # True
        is_secret_like("apiKey")       # True
        is_secret_like("NODE_ENV")     # False
    """
    if patterns is None:
        patterns = get_registry().secret_patterns
    lower = key.lower()
    return any(p.lower() in lower for p in patterns)


def secret_keys(
    environment: Mapping[str, str],
    patterns: Iterable[str] | None = None,
) -> list[str]:
    """Return the keys of *environment* that are secret-like, in map order."""
    if patterns is None:
        patterns = get_registry().secret_patterns
    patterns = tuple(patterns)
    return [k for k in environment if is_secret_like(k, patterns)]


# ═══════════════════════════════════════════════════════════════════
#  .env files
# ═══════════════════════════════════════════════════════════════════


def parse_env_content(content: str) -> dict[str, str]:
    """Parse .env content into a key/value dict.

    Handles:
    - KEY=value
    - KEY="value" / KEY='value'
    - export KEY=value
    - Comments (#) and empty lines

    Lines without ``=`` or with a key that is not a shell identifier
    are skipped.  A later definition of the same key wins.
    """
    result: dict[str, str] = {}
    for line in content.splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        if line.startswith("export "):
            line = line[7:].strip()

        if "=" not in line:
            continue

        key, _, value = line.partition("=")
        key = key.strip()
        value = value.strip()

        if not _KEY_RE.match(key):
            logger.debug("Skipping malformed env line: %r", line)
            continue

        if len(value) >= 2 and value[0] == value[-1] and value[0] in ('"', "'"):
            value = value[1:-1]

        result[key] = value

    return result


def find_env_file(root: Path, candidates: Iterable[str] | None = None) -> Path | None:
    """Return the first env file variant that exists under *root*."""
    if candidates is None:
        candidates = get_registry().env_files
    for name in candidates:
        path = root / name
        if path.exists():
            return path
    return None


def load_env_file(path: Path) -> dict[str, str]:
    """Read and parse an env file.

    A missing file yields an empty mapping.

    Raises:
        EnvFileError: If the file exists but cannot be read.
    """
    try:
        content = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return {}
    except (OSError, UnicodeDecodeError) as e:
        raise EnvFileError(f"Cannot read {path}: {e}") from e

    parsed = parse_env_content(content)
    logger.info("Loaded %d variable(s) from %s", len(parsed), path.name)
    return parsed


# ═══════════════════════════════════════════════════════════════════
#  Collection
# ═══════════════════════════════════════════════════════════════════


def defaults_ecosystem(inspector: ProjectInspector) -> Ecosystem | None:
    """Ecosystem whose default table applies to this project, if any.

    Only ecosystems that have a default table are checked, in profile
    order: Node → Python → Ruby → PHP.  ``go.mod``, ``pom.xml`` and
    ``build.gradle`` are not consulted, so a ``go.mod`` + ``Gemfile``
    project still gets the Ruby defaults.
    """
    has = inspector.has_marker_file

    if has("package.json"):
        return Ecosystem.NODEJS
    if has("requirements.txt") or has("Pipfile"):
        return Ecosystem.PYTHON
    if has("Gemfile"):
        return Ecosystem.RUBY
    if has("composer.json") or inspector.has_file_with_extension({".php"}):
        return Ecosystem.PHP
    return None


def collect(
    inspector: ProjectInspector,
    parsed_env: Mapping[str, str] | None = None,
    *,
    defaults: Mapping[str, Mapping[str, str]] | None = None,
) -> dict[str, str]:
    """Merge parsed env values with the ecosystem's defaults.

    Args:
        inspector: Project file queries.
        parsed_env: Values from the project's env file; never overwritten.
        defaults: Ecosystem name → default variables
            (default: the registry's env defaults catalog).

    Returns:
        A new mapping.  Re-running ``collect`` on its own output returns
        an equal mapping.
    """
    if defaults is None:
        defaults = get_registry().env_defaults

    environment = dict(parsed_env or {})
    ecosystem = defaults_ecosystem(inspector)
    if ecosystem is None:
        return environment

    added = 0
    for key, value in defaults.get(ecosystem.value, {}).items():
        if key not in environment:
            environment[key] = value
            added += 1

    if added:
        logger.debug("Added %d %s default variable(s)", added, ecosystem.value)
    return environment
