"""
Central data registry for static catalogs and patterns.

Loads catalogs from ``src/core/data/`` once at first access and caches
them for the process lifetime.  The environment collector and the
renderers read from this single source of truth.

Usage::

    from src.core.data import get_registry

    registry = get_registry()
    patterns = registry.secret_patterns   # tuple[str, ...]
    defaults = registry.env_defaults      # dict[str, dict[str, str]]
"""

from __future__ import annotations

import json
import logging
from functools import cached_property
from pathlib import Path

logger = logging.getLogger(__name__)

_DATA_DIR = Path(__file__).parent


def _load_json(relative_path: str, default: list | dict) -> list | dict:
    """Load a JSON file relative to the data directory."""
    path = _DATA_DIR / relative_path
    if not path.exists():
        logger.warning("Data file not found: %s", path)
        return default
    with open(path, encoding="utf-8") as f:
        return json.load(f)


class DataRegistry:
    """Central registry for all static data catalogs.

    Each property lazily loads its JSON file on first access and caches
    the result for the lifetime of the instance.
    """

    # ── Patterns ─────────────────────────────────────────────────

    @cached_property
    def secret_patterns(self) -> tuple[str, ...]:
        """Lower-case substrings that mark a variable name as secret-like."""
        data = _load_json("patterns/secret_patterns.json", [])
        result = tuple(p.lower() for p in data)
        logger.debug("Loaded %d secret key patterns", len(result))
        return result

    # ── Environment ──────────────────────────────────────────────

    @cached_property
    def env_files(self) -> tuple[str, ...]:
        """Environment file names, checked in order; the first one found wins."""
        data = _load_json("catalogs/env_files.json", [])
        logger.debug("Loaded %d env file variants", len(data))
        return tuple(data)

    @cached_property
    def env_defaults(self) -> dict[str, dict[str, str]]:
        """Ecosystem name → default variables filled in when absent."""
        data = _load_json("catalogs/env_defaults.json", {})
        logger.debug("Loaded env defaults for %d ecosystems", len(data))
        return {eco: dict(values) for eco, values in data.items()}


# ── Module-level singleton ───────────────────────────────────────

_registry: DataRegistry | None = None


def get_registry() -> DataRegistry:
    """Return the process-level DataRegistry singleton.

    Creates the instance on first call; subsequent calls return the
    same object.
    """
    global _registry  # noqa: PLW0603
    if _registry is None:
        _registry = DataRegistry()
    return _registry
