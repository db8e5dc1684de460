"""Tests for go_complexity.scanning.loader - packages to compilation units."""

import io
import logging

import pytest

from go_complexity.analysis import ComplexityAnalyzer
from go_complexity.config import AnalysisConfig, Thresholds
from go_complexity.exceptions import ParsingError
from go_complexity.scanning.treesitter_parser import TREE_SITTER_AVAILABLE

pytestmark = pytest.mark.skipif(not TREE_SITTER_AVAILABLE, reason="tree-sitter-go not installed")


STORE_SRC = """package store

import (
    "fmt"

    "example.com/app/util"
)

func Describe(n int) string {
    if n > 10 && n < 100 {
        return util.Pad(fmt.Sprint(n))
    }
    return ""
}
"""

STORE_TEST_SRC = """package store

import "testing"

func TestDescribe(t *testing.T) {
    if Describe(50) == "" {
        t.Fatal("empty")
    }
}
"""

EXT_TEST_SRC = """package store_test

import "testing"

func TestExternal(t *testing.T) {}
"""

UTIL_SRC = """package util

func Pad(s string) string { return " " + s }
"""


@pytest.fixture
def module_root(tmp_path):
    root = tmp_path / "app"
    (root / "store").mkdir(parents=True)
    (root / "util").mkdir()
    (root / "go.mod").write_text("module example.com/app\n")
    (root / "store/store.go").write_text(STORE_SRC)
    (root / "store/store_test.go").write_text(STORE_TEST_SRC)
    (root / "store/ext_test.go").write_text(EXT_TEST_SRC)
    (root / "util/util.go").write_text(UTIL_SRC)
    return root


def _loader(**config):
    from go_complexity.scanning import PackageLoader

    return PackageLoader(AnalysisConfig(**config))


class TestPackageLoader:
    """Grouping files into compilation units."""

    def test_units_by_package(self, module_root):
        units = list(_loader().load([f"{module_root}/..."]))
        assert sorted((u.path, u.name) for u in units) == [
            ("example.com/app/store", "store"),
            ("example.com/app/store_test", "store_test"),
            ("example.com/app/util", "util"),
        ]

    def test_test_files_join_their_package(self, module_root):
        units = {u.name: u for u in _loader().load([f"{module_root}/..."])}
        names = [f.name.name for f in units["store"].functions()]
        assert names == ["Describe", "TestDescribe"]
        assert units["store"].imports == ["example.com/app/util", "fmt", "testing"]

    def test_without_tests(self, module_root):
        units = list(_loader(include_tests=False).load([f"{module_root}/..."]))
        assert sorted(u.name for u in units) == ["store", "util"]
        store = next(u for u in units if u.name == "store")
        assert len(store.files) == 1

    def test_broken_file_skipped(self, module_root, caplog):
        (module_root / "util/broken.go").write_text("package util\n\nfunc broken( {\n")
        with caplog.at_level(logging.WARNING, logger="go_complexity"):
            units = list(_loader().load([str(module_root / "util")]))
        assert len(units) == 1
        assert len(units[0].files) == 1
        assert "broken.go" in caplog.text

    def test_broken_file_strict(self, module_root):
        (module_root / "util/broken.go").write_text("package util\n\nfunc broken( {\n")
        with pytest.raises(ParsingError):
            list(_loader(strict=True).load([str(module_root / "util")]))


class TestEndToEnd:
    """Loading and analyzing real sources."""

    def test_csv_stats_with_self_imports(self, module_root):
        config = AnalysisConfig(
            thresholds=Thresholds(cyclomatic_over=2, self_import_depth=3),
            csv_stats=True,
            include_tests=False,
        )
        out = io.StringIO()
        units = _loader(include_tests=False).load([str(module_root / "store")])
        report = ComplexityAnalyzer(config, stream=out).run(units)

        assert report.issues_found
        row = out.getvalue().strip().split(",")
        assert row[0].endswith("store.go")
        assert row[1:5] == ["9", "1", "Describe", "3"]
        assert row[8:] == ["6", "2", "1"]
