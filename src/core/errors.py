"""
Error taxonomy for the generate pipeline.

Every failure the CLI can report derives from ``DocktoolError`` so the
use case layer can turn it into a single ``error`` message.
"""

from __future__ import annotations

from pathlib import Path


class DocktoolError(Exception):
    """Base class for all docktool failures."""


class DetectionError(DocktoolError):
    """Raised when the project root cannot be listed."""


class EnvFileError(DocktoolError):
    """Raised when an environment file exists but cannot be read."""


class WriteError(DocktoolError):
    """Raised when a generated file cannot be written.

    Attributes:
        path: The file that failed to write.
    """

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(f"Cannot write {path}: {reason}")
