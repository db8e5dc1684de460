"""Tests for the go-complexity exception hierarchy."""

from pathlib import Path

import pytest

from go_complexity.exceptions import (
    AnalysisError,
    ConfigurationError,
    FileAccessError,
    GoComplexityError,
    InvalidConfigError,
    InvalidPathError,
    ParserUnavailableError,
    ParsingError,
    ThresholdsExceededError,
)


class TestHierarchy:
    @pytest.mark.parametrize(
        "error",
        [
            FileAccessError(Path("a.go"), "denied"),
            ParsingError(Path("a.go"), "go", "syntax error at line 3"),
            ParserUnavailableError("go"),
            ThresholdsExceededError(2, 1),
        ],
    )
    def test_analysis_errors(self, error):
        assert isinstance(error, AnalysisError)
        assert isinstance(error, GoComplexityError)

    @pytest.mark.parametrize(
        "error",
        [InvalidPathError(Path("x"), "missing"), InvalidConfigError("k", 1, "bad")],
    )
    def test_configuration_errors(self, error):
        assert isinstance(error, ConfigurationError)
        assert isinstance(error, GoComplexityError)


class TestMessages:
    def test_details_in_str(self):
        error = ParsingError(Path("a.go"), "go", "syntax error at line 3")
        assert str(error).startswith("Failed to parse go file: a.go")
        assert "reason=syntax error at line 3" in str(error)

    def test_no_details(self):
        assert str(GoComplexityError("boom")) == "boom"

    def test_thresholds_exceeded(self):
        error = ThresholdsExceededError(3, 2)
        assert error.message == "complexity test failed"
        assert error.function_count == 3
        assert error.unit_count == 2

    def test_parser_unavailable_hint(self):
        error = ParserUnavailableError("go")
        assert error.hint == "pip install tree-sitter tree-sitter-go"
        assert "hint" not in str(error)
