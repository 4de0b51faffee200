"""Tests for project path resolution and entry path containment."""

import os

import pytest

from projseed.scaffold.errors import InvalidBasePath, InvalidProjectName, PathEscapesProject
from projseed.scaffold.paths import check_relative_path, resolve_project_path


@pytest.mark.unit
class TestResolveProjectPath:

    def test_joins_base_path_and_project_name(self, tmp_path):
        assert resolve_project_path(str(tmp_path), "demo") == os.path.join(str(tmp_path), "demo")

    def test_does_not_create_project_directory(self, tmp_path):
        resolve_project_path(str(tmp_path), "demo")

        assert not (tmp_path / "demo").exists()

    def test_missing_base_path_raises(self, tmp_path):
        with pytest.raises(InvalidBasePath, match="not found"):
            resolve_project_path(str(tmp_path / "missing"), "demo")

    def test_base_path_that_is_a_file_raises(self, tmp_path):
        base = tmp_path / "file.txt"
        base.write_text("x")

        with pytest.raises(InvalidBasePath):
            resolve_project_path(str(base), "demo")

    def test_empty_base_path_raises(self):
        with pytest.raises(InvalidBasePath):
            resolve_project_path("", "demo")

    @pytest.mark.parametrize("name", ["", "   ", ".", "..", "a/b"])
    def test_rejects_unusable_project_names(self, tmp_path, name):
        with pytest.raises(InvalidProjectName):
            resolve_project_path(str(tmp_path), name)


@pytest.mark.unit
class TestCheckRelativePath:

    @pytest.mark.parametrize("path", ["src", "src/__init__.py", ".github/workflows/ci.yml", ".env"])
    def test_accepts_paths_inside_project(self, path):
        check_relative_path(path)

    @pytest.mark.parametrize("path", ["../outside", "src/../../x", "..", "docs/..\\..\\x"])
    def test_rejects_parent_directory_segments(self, path):
        with pytest.raises(PathEscapesProject):
            check_relative_path(path)

    def test_rejects_absolute_paths(self):
        with pytest.raises(PathEscapesProject, match="relative"):
            check_relative_path("/etc/passwd")

    def test_rejects_empty_path(self):
        with pytest.raises(PathEscapesProject):
            check_relative_path("")
