"""Plain text formatter: one line per exceeded threshold."""

from typing import List

from ..config import Thresholds
from ..metrics.models import FunctionResult
from .base import BaseFormatter


class TextFormatter(BaseFormatter):
    """Render compiler-style ``file:line:col: message`` lines."""

    def format_function(self, result: FunctionResult, thresholds: Thresholds) -> List[str]:
        pos = result.function.position
        name = result.function.name
        m = result.metrics
        lines: list[str] = []
        if m.cyclomatic > thresholds.cyclomatic_over:
            lines.append(
                f"{pos}: func {name} seems to be complex (cyclomatic complexity={m.cyclomatic})"
            )
        if m.maintainability < thresholds.maintainability_under:
            lines.append(
                f"{pos}: func {name} seems to have low maintainability "
                f"(maintainability index={m.maintainability})"
            )
        return lines
