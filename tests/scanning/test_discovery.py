"""Tests for go_complexity.scanning.discovery - package patterns."""

import pytest

from go_complexity.exceptions import InvalidPathError
from go_complexity.scanning.discovery import (
    AD_HOC_PACKAGE,
    expand_targets,
    find_module,
    go_files,
    import_path_for,
    read_module_path,
)


@pytest.fixture
def module_tree(tmp_path):
    """A module ``example.com/app`` with a few package directories."""
    root = tmp_path / "app"
    for rel in ("cmd/server", "store", "vendor/dep", "testdata", "_scratch", ".hidden", "docs"):
        (root / rel).mkdir(parents=True)
    (root / "go.mod").write_text("// app module\nmodule example.com/app\n\ngo 1.22\n")
    (root / "main.go").write_text("package main\n")
    (root / "cmd/server/main.go").write_text("package main\n")
    (root / "store/store.go").write_text("package store\n")
    (root / "store/store_test.go").write_text("package store\n")
    (root / "vendor/dep/dep.go").write_text("package dep\n")
    (root / "testdata/x.go").write_text("package x\n")
    (root / "_scratch/y.go").write_text("package y\n")
    (root / ".hidden/z.go").write_text("package z\n")
    (root / "docs/README.md").write_text("docs\n")
    return root


class TestModule:
    def test_read_module_path(self, module_tree):
        assert read_module_path(module_tree / "go.mod") == "example.com/app"

    def test_find_module_from_subdirectory(self, module_tree):
        root, path = find_module(module_tree / "store")
        assert root == module_tree
        assert path == "example.com/app"

    def test_import_paths(self, module_tree):
        assert import_path_for(module_tree) == "example.com/app"
        assert import_path_for(module_tree / "cmd/server") == "example.com/app/cmd/server"

    def test_outside_module_uses_relative_path(self, tmp_path, monkeypatch):
        (tmp_path / "lib").mkdir()
        monkeypatch.chdir(tmp_path)
        assert import_path_for(tmp_path / "lib") == "lib"


class TestGoFiles:
    def test_tests_included_by_default(self, module_tree):
        names = [p.name for p in go_files(module_tree / "store")]
        assert names == ["store.go", "store_test.go"]

    def test_tests_excluded(self, module_tree):
        names = [p.name for p in go_files(module_tree / "store", include_tests=False)]
        assert names == ["store.go"]


class TestExpandTargets:
    def test_recursive_pattern(self, module_tree):
        packages = expand_targets([f"{module_tree}/..."])
        paths = sorted(p.import_path for p in packages)
        assert paths == ["example.com/app", "example.com/app/cmd/server", "example.com/app/store"]

    def test_recursive_from_cwd(self, module_tree, monkeypatch):
        monkeypatch.chdir(module_tree)
        assert len(expand_targets(["./..."])) == 3

    def test_single_directory(self, module_tree):
        packages = expand_targets([str(module_tree / "store")])
        assert len(packages) == 1
        assert packages[0].import_path == "example.com/app/store"

    def test_directory_without_go_files(self, module_tree):
        assert expand_targets([str(module_tree / "docs")]) == []

    def test_file_list_is_ad_hoc_package(self, module_tree):
        packages = expand_targets([str(module_tree / "main.go")])
        assert packages[0].import_path == AD_HOC_PACKAGE
        assert [p.name for p in packages[0].files] == ["main.go"]

    def test_missing_target(self, tmp_path):
        with pytest.raises(InvalidPathError):
            expand_targets([str(tmp_path / "missing")])

    def test_non_go_file(self, module_tree):
        with pytest.raises(InvalidPathError):
            expand_targets([str(module_tree / "docs/README.md")])
