"""Base formatter interface for go-complexity report lines."""

from abc import ABC, abstractmethod
from typing import List, TextIO

from ..config import Thresholds
from ..metrics.models import FunctionResult


class BaseFormatter(ABC):
    """Abstract base class for per-function report formatters."""

    @abstractmethod
    def format_function(self, result: FunctionResult, thresholds: Thresholds) -> List[str]:
        """Return the report lines for a function that crossed a threshold."""

    def render_function(self, result: FunctionResult, thresholds: Thresholds, stream: TextIO) -> None:
        for line in self.format_function(result, thresholds):
            stream.write(line + "\n")
