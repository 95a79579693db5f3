"""
Tests for the project inspector — file listing and marker queries.
"""

from pathlib import Path

import pytest

from src.core.errors import DetectionError
from src.core.services.project_inspector import ProjectInspector, list_project_files


# ═══════════════════════════════════════════════════════════════════
#  list_project_files
# ═══════════════════════════════════════════════════════════════════


class TestListProjectFiles:
    def test_relative_posix_paths(self, make_project):
        root = make_project("package.json", "src/app/index.js")
        files = list_project_files(root)
        assert files == ("package.json", "src/app/index.js")

    def test_directories_are_not_listed(self, make_project):
        root = make_project("a.txt")
        (root / "empty_dir").mkdir()
        assert list_project_files(root) == ("a.txt",)

    def test_empty_directory(self, tmp_path: Path):
        assert list_project_files(tmp_path) == ()

    def test_missing_root_raises(self, tmp_path: Path):
        with pytest.raises(DetectionError, match="not a directory"):
            list_project_files(tmp_path / "missing")

    def test_file_as_root_raises(self, tmp_path: Path):
        f = tmp_path / "file.txt"
        f.write_text("x")
        with pytest.raises(DetectionError):
            list_project_files(f)


# ═══════════════════════════════════════════════════════════════════
#  has_marker_file
# ═══════════════════════════════════════════════════════════════════


class TestHasMarkerFile:
    def test_root_level_match(self, inspector_for):
        assert inspector_for("go.mod").has_marker_file("go.mod")

    def test_nested_match(self, inspector_for):
        """Markers count at any depth, not only the project root."""
        assert inspector_for("services/api/package.json").has_marker_file("package.json")

    def test_case_insensitive(self, inspector_for):
        assert inspector_for("GEMFILE").has_marker_file("Gemfile")
        assert inspector_for("Gemfile").has_marker_file("gemfile")

    def test_base_name_only(self, inspector_for):
        """A directory named like a marker is not a marker."""
        inspector = inspector_for("go.mod.d/readme.txt", "my-package.json")
        assert not inspector.has_marker_file("go.mod")
        assert not inspector.has_marker_file("package.json")

    def test_absent(self, inspector_for):
        assert not inspector_for().has_marker_file("pom.xml")


# ═══════════════════════════════════════════════════════════════════
#  has_file_with_extension
# ═══════════════════════════════════════════════════════════════════


class TestHasFileWithExtension:
    def test_match(self, inspector_for):
        assert inspector_for("public/index.php").has_file_with_extension({".php"})

    def test_case_insensitive(self, inspector_for):
        assert inspector_for("INDEX.PHP").has_file_with_extension({".php"})

    def test_any_of_several(self, inspector_for):
        assert inspector_for("main.rs").has_file_with_extension({".go", ".rs"})

    def test_no_match(self, inspector_for):
        assert not inspector_for("index.phps", "notes.txt").has_file_with_extension({".php"})

    def test_empty_extension_set(self, inspector_for):
        assert not inspector_for("a.php").has_file_with_extension(set())


class TestFromDirectory:
    def test_builds_from_disk(self, make_project):
        root = make_project("pom.xml", "src/main/java/App.java")
        inspector = ProjectInspector.from_directory(root)
        assert inspector.root == root
        assert inspector.has_marker_file("pom.xml")
        assert len(inspector.files) == 2
