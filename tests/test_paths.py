"""Tests for panevim.paths — relative paths between shell and editor."""

import os
from pathlib import Path

from panevim.paths import relative_path, resolve_for_editor


class TestRelativePath:
    def test_target_inside_base(self, project_dir: Path):
        assert relative_path(str(project_dir), str(project_dir / "x" / "y")) == "x/y"

    def test_sibling(self, project_dir: Path):
        base = project_dir / "a" / "b"
        assert relative_path(str(base), str(project_dir / "a" / "c")) == "../c"

    def test_identical(self, project_dir: Path):
        assert relative_path(str(project_dir), str(project_dir)) == ""

    def test_target_is_ancestor(self, project_dir: Path):
        assert relative_path(str(project_dir / "a" / "b"), str(project_dir)) == "../.."

    def test_component_aligned_prefix(self, project_dir: Path):
        """proj/src is not an ancestor of proj/srcgen/x."""
        result = relative_path(str(project_dir / "src"), str(project_dir / "srcgen" / "x"))
        assert result == "../srcgen/x"

    def test_only_root_in_common(self):
        assert relative_path("/panevim-missing-a/b", "/panevim-missing-c/d") == "/panevim-missing-c/d"

    def test_base_is_root(self):
        assert relative_path("/", "/panevim-missing-c/d") == "panevim-missing-c/d"

    def test_symlinks_followed(self, project_dir: Path, tmp_path: Path):
        link = tmp_path / "link"
        link.symlink_to(project_dir / "src")
        assert relative_path(str(link), str(project_dir / "main.go")) == "../main.go"

    def test_nonexistent_target(self, project_dir: Path):
        assert relative_path(str(project_dir), str(project_dir / "new" / "file.txt")) == "new/file.txt"


class TestResolveForEditor:
    def test_same_directory(self, project_dir: Path):
        assert resolve_for_editor("util.go", str(project_dir), str(project_dir)) == "util.go"

    def test_shell_below_editor(self, project_dir: Path):
        shell = str(project_dir / "src")
        assert resolve_for_editor("lib.go", shell, str(project_dir)) == "src/lib.go"

    def test_shell_beside_editor(self, project_dir: Path):
        editor = str(project_dir / "src")
        assert resolve_for_editor("README.md", str(project_dir), editor) == "../README.md"

    def test_absolute_argument(self, project_dir: Path):
        target = str(project_dir / "src" / "a.go")
        assert resolve_for_editor(target, "/", str(project_dir)) == "src/a.go"

    def test_editor_directory_itself(self, project_dir: Path):
        assert resolve_for_editor(".", str(project_dir), str(project_dir)) == os.curdir
