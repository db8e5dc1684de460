"""Analysis-related exceptions: file access, parsing, threshold failures."""

from pathlib import Path

from .base import GoComplexityError


class AnalysisError(GoComplexityError):
    """Base class for analysis-related errors."""
    pass


class FileAccessError(AnalysisError):
    """Raised when a source file cannot be accessed or read."""

    def __init__(self, filepath: Path, reason: str):
        super().__init__(
            f"Cannot access file: {filepath}",
            details={"filepath": str(filepath), "reason": reason},
        )
        self.filepath = filepath
        self.reason = reason


class ParsingError(AnalysisError):
    """Raised when file content cannot be parsed."""

    def __init__(self, filepath: Path, language: str, reason: str):
        super().__init__(
            f"Failed to parse {language} file: {filepath}",
            details={"filepath": str(filepath), "language": language, "reason": reason},
        )
        self.filepath = filepath
        self.language = language
        self.reason = reason


class ParserUnavailableError(AnalysisError):
    """Raised when tree-sitter or the grammar for a language is not installed."""

    def __init__(self, language: str):
        super().__init__(
            f"No parser available for {language}",
            details={"language": language, "hint": f"pip install tree-sitter tree-sitter-{language}"},
        )
        self.language = language


class ThresholdsExceededError(AnalysisError):
    """Raised after a run in which some function crossed a threshold
    and failing on issues was requested."""

    def __init__(self, function_count: int, unit_count: int):
        super().__init__(
            "complexity test failed",
            details={"functions": str(function_count), "packages": str(unit_count)},
        )
        self.function_count = function_count
        self.unit_count = unit_count
