"""
Shared test fixtures and configuration.
"""

from collections.abc import Callable
from pathlib import Path

import pytest

from src.core.services.project_inspector import ProjectInspector


@pytest.fixture
def make_project(tmp_path: Path) -> Callable[..., Path]:
    """Return a factory that lays out files under a fresh project dir.

    Usage::

        root = make_project("package.json", "src/index.js", **{".env": "A=1"})
    """

    def _make(*names: str, **contents: str) -> Path:
        root = tmp_path / "project"
        root.mkdir(exist_ok=True)
        for name in names:
            path = root / name
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text("", encoding="utf-8")
        for name, text in contents.items():
            path = root / name
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(text, encoding="utf-8")
        return root

    return _make


@pytest.fixture
def inspector_for() -> Callable[..., ProjectInspector]:
    """Return a factory building an inspector over an in-memory file list."""

    def _make(*files: str) -> ProjectInspector:
        return ProjectInspector(Path("/nonexistent"), files)

    return _make
