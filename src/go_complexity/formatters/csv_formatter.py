"""CSV formatter for go-complexity.

Columns: filename, line, column, name, cyclomatic complexity, maintainability
index, Halstead difficulty, Halstead volume, lines of code, imports, self
imports. The totals row of a package carries the package name as filename,
-1 as line, the number of reported functions as column and "total" as name.
"""

import csv
import io
from typing import List, Sequence, TextIO, Union

from ..config import Thresholds
from ..metrics.models import FunctionResult, Totals
from .base import BaseFormatter

TOTALS_LINE = -1
TOTALS_NAME = "total"


class CsvFormatter(BaseFormatter):
    """Render one fixed-column CSV row per function or package total."""

    def format_function(self, result: FunctionResult, thresholds: Thresholds) -> List[str]:
        pos = result.function.position
        m = result.metrics
        return [
            _row(
                [
                    pos.filename, pos.line, pos.column, result.function.name,
                    m.cyclomatic, m.maintainability,
                    f"{m.halstead_difficulty:.3f}", f"{m.halstead_volume:.3f}",
                    m.loc, m.imports_count, m.self_imports_count,
                ]
            )
        ]

    def format_totals(self, unit_name: str, totals: Totals) -> str:
        """Return the totals row of a compilation unit."""
        t = totals
        return _row(
            [
                unit_name, TOTALS_LINE, t.function_count, TOTALS_NAME,
                t.cyclomatic, t.maintainability,
                f"{t.halstead_difficulty:.3f}", f"{t.halstead_volume:.3f}",
                t.loc, t.imports_count, t.self_imports_count,
            ]
        )

    def render_totals(self, unit_name: str, totals: Totals, stream: TextIO) -> None:
        stream.write(self.format_totals(unit_name, totals) + "\n")


def _row(values: Sequence[Union[str, int]]) -> str:
    output = io.StringIO()
    writer = csv.writer(output, lineterminator="")
    writer.writerow(values)
    return output.getvalue()
