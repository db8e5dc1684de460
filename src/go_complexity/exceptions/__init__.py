"""Exception hierarchy for go-complexity."""

from .analysis import (
    AnalysisError,
    FileAccessError,
    ParserUnavailableError,
    ParsingError,
    ThresholdsExceededError,
)
from .base import GoComplexityError
from .config import (
    ConfigurationError,
    InvalidConfigError,
    InvalidPathError,
)

__all__ = [
    "GoComplexityError",
    "AnalysisError",
    "FileAccessError",
    "ParsingError",
    "ParserUnavailableError",
    "ThresholdsExceededError",
    "ConfigurationError",
    "InvalidPathError",
    "InvalidConfigError",
]
