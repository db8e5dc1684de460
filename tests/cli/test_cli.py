"""Tests for the go-complexity command line."""

import pytest
from typer.testing import CliRunner

from go_complexity import __version__
from go_complexity.cli import app
from go_complexity.scanning.treesitter_parser import TREE_SITTER_AVAILABLE

runner = CliRunner()

COMPLEX_SRC = """package calc

func Grade(score int, bonus bool) string {
    if score > 90 || bonus {
        return "A"
    }
    if score > 80 {
        return "B"
    }
    for score > 0 && score < 10 {
        score++
    }
    return "C"
}

func Add(a, b int) int { return a + b }
"""


@pytest.fixture
def project(tmp_path, monkeypatch):
    """A module with one package and an isolated config environment."""
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.chdir(tmp_path)
    (tmp_path / "go.mod").write_text("module example.com/calc\n")
    (tmp_path / "calc.go").write_text(COMPLEX_SRC)
    return tmp_path


class TestVersion:
    def test_version(self):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output


@pytest.mark.skipif(not TREE_SITTER_AVAILABLE, reason="tree-sitter-go not installed")
class TestCheckCommand:
    """Running the analyzer end to end."""

    def test_clean_run(self, project):
        """Default thresholds: nothing to report, exit 0."""
        result = runner.invoke(app, [])
        assert result.exit_code == 0
        assert "seems to be" not in result.output

    def test_reports_complex_function(self, project):
        result = runner.invoke(app, ["--cycloover", "3", "./..."])
        assert result.exit_code == 0
        assert "calc.go:3:1: func Grade seems to be complex (cyclomatic complexity=6)" in result.output
        assert "func Add" not in result.output

    def test_mustfail_exits_one(self, project):
        result = runner.invoke(app, ["--cycloover", "3", "--mustfail"])
        assert result.exit_code == 1
        assert "complexity test failed" in result.output

    def test_mustfail_without_issues(self, project):
        result = runner.invoke(app, ["--mustfail"])
        assert result.exit_code == 0

    def test_csv_totals(self, project):
        result = runner.invoke(app, ["--cycloover", "3", "--csvtotals", str(project)])
        assert result.exit_code == 0
        assert "calc,-1,1,total,6," in result.output

    def test_csv_stats(self, project):
        result = runner.invoke(app, ["--cycloover", "0", "--csvstats", "calc.go"])
        assert result.exit_code == 0
        rows = [line for line in result.output.splitlines() if line.startswith("calc.go,")]
        assert [r.split(",")[3] for r in rows] == ["Grade", "Add"]

    def test_config_file_thresholds(self, project):
        (project / "go-complexity.toml").write_text("[thresholds]\ncyclomatic_over = 3\n")
        result = runner.invoke(app, [])
        assert "func Grade seems to be complex" in result.output

    def test_missing_target(self, project):
        result = runner.invoke(app, ["does-not-exist"])
        assert result.exit_code == 1
        assert "Invalid path" in result.output

    def test_negative_threshold_accepted(self, project):
        """A negative threshold reports every function."""
        result = runner.invoke(app, ["--cycloover", "-1"])
        assert result.exit_code == 0
        assert "func Grade seems to be complex" in result.output
        assert "func Add seems to be complex (cyclomatic complexity=1)" in result.output
