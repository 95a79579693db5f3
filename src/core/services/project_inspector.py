"""
Project inspector — marker-file queries over a project's file list.

The file list is enumerated once (``list_project_files``) and never
touched again; every question the synthesizer or the environment
collector asks is answered from that snapshot.

Pure logic after construction — no side effects, no persistence.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable
from pathlib import Path

from src.core.errors import DetectionError

logger = logging.getLogger(__name__)


def list_project_files(root: Path) -> tuple[str, ...]:
    """Return every non-directory entry under *root* as a relative POSIX path.

    Raises:
        DetectionError: If *root* is missing, not a directory, or any
            directory beneath it cannot be read.
    """
    if not root.is_dir():
        raise DetectionError(f"Project root is not a directory: {root}")

    def _fail(err: OSError) -> None:
        raise DetectionError(f"Cannot read {err.filename}: {err.strerror}") from err

    files: list[str] = []
    for dirpath, _dirnames, filenames in os.walk(root, onerror=_fail):
        base = Path(dirpath)
        for name in filenames:
            files.append((base / name).relative_to(root).as_posix())

    files.sort()
    logger.debug("Listed %d files under %s", len(files), root)
    return tuple(files)


class ProjectInspector:
    """Answer membership questions about a project's files.

    Args:
        root: Project root the file list was taken from.
        files: Relative paths of every file under *root*.
    """

    def __init__(self, root: Path, files: Iterable[str]) -> None:
        self.root = root
        self.files: tuple[str, ...] = tuple(files)
        self._names = frozenset(Path(f).name.lower() for f in self.files)

    @classmethod
    def from_directory(cls, root: Path) -> ProjectInspector:
        """Walk *root* and build an inspector over its files."""
        return cls(root, list_project_files(root))

    def has_marker_file(self, name: str) -> bool:
        """True if any file, at any depth, has the base name *name*.

        The comparison ignores case so ``Gemfile`` and ``gemfile`` match.
        """
        return name.lower() in self._names

    def has_file_with_extension(self, extensions: Iterable[str]) -> bool:
        """True if any file path ends with one of *extensions* (case-insensitive)."""
        suffixes = tuple(e.lower() for e in extensions)
        if not suffixes:
            return False
        return any(f.lower().endswith(suffixes) for f in self.files)

    def __repr__(self) -> str:
        return f"ProjectInspector(root={self.root!s}, files={len(self.files)})"
