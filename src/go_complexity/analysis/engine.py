"""Per-package complexity analysis.

For every function of a compilation unit:

    classify → Halstead ─┐
    cyclomatic ──────────┼→ maintainability → Metrics → threshold check
    lines of code ───────┘                               ├→ Totals
                                                         └→ report line

Each unit gets its own Totals accumulator; cross-unit summaries merge the
completed accumulators.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, TextIO

from ..config import AnalysisConfig
from ..exceptions import ThresholdsExceededError
from ..formatters import BaseFormatter, CsvFormatter, get_formatter
from ..logging_config import get_logger
from ..metrics import (
    FunctionResult,
    FunctionUnit,
    Metrics,
    Totals,
    classify,
    compute_halstead,
    count_imports,
    cyclomatic_complexity,
    lines_of_code,
    maintainability_index,
    merge_totals,
)
from ..syntax.nodes import CompilationUnit, FuncDecl

logger = get_logger(__name__)


@dataclass
class UnitReport:
    """Outcome of analyzing one compilation unit.

    Attributes:
        path: Import path of the unit
        name: Package name
        results: Metrics of every function, in declaration order
        flagged: The subset of results that crossed a threshold
        totals: Sum over the flagged functions
    """

    path: str
    name: str
    results: List[FunctionResult] = field(default_factory=list)
    flagged: List[FunctionResult] = field(default_factory=list)
    totals: Totals = field(default_factory=Totals)

    @property
    def issues_found(self) -> bool:
        return bool(self.flagged)


@dataclass
class RunReport:
    units: List[UnitReport] = field(default_factory=list)

    @property
    def issues_found(self) -> bool:
        return any(u.issues_found for u in self.units)

    @property
    def totals(self) -> Totals:
        return merge_totals(u.totals for u in self.units)


def measure_function(func: FuncDecl, imports_count: int = 0, self_imports_count: int = 0) -> Metrics:
    """Compute the metrics record of a single function."""
    halstead = compute_halstead(classify(func))
    loc = lines_of_code(func)
    cyclomatic = cyclomatic_complexity(func)
    return Metrics(
        loc=loc,
        cyclomatic=cyclomatic,
        halstead_difficulty=halstead.difficulty,
        halstead_volume=halstead.volume,
        maintainability=maintainability_index(halstead.volume, cyclomatic, loc),
        imports_count=imports_count,
        self_imports_count=self_imports_count,
    )


class ComplexityAnalyzer:
    """Measures functions, applies thresholds and emits report lines.

    Usage:
        analyzer = ComplexityAnalyzer(config)
        report = analyzer.run(units)   # raises ThresholdsExceededError
                                       # when config.fail_on_issues is set
    """

    def __init__(
        self,
        config: Optional[AnalysisConfig] = None,
        stream: Optional[TextIO] = None,
        formatter: Optional[BaseFormatter] = None,
    ):
        self.config = config or AnalysisConfig()
        self._stream = stream if stream is not None else sys.stdout
        self._formatter = formatter or get_formatter("csv" if self.config.csv_stats else "text")
        self._totals_formatter = CsvFormatter()

    def analyze_unit(self, unit: CompilationUnit) -> UnitReport:
        """Measure every function of ``unit`` and report the ones over threshold."""
        thresholds = self.config.thresholds
        imports_count, self_imports_count = count_imports(
            unit.path, unit.imports, thresholds.self_import_depth
        )
        report = UnitReport(path=unit.path, name=unit.name)
        report.totals.imports_count = imports_count
        report.totals.self_imports_count = self_imports_count

        for decl in unit.functions():
            function = FunctionUnit.from_decl(decl)
            metrics = measure_function(decl, imports_count, self_imports_count)
            result = FunctionResult(function=function, metrics=metrics)
            report.results.append(result)

            logger.debug(
                f"{function.position}: Cyclomatic complexity: {metrics.cyclomatic}, "
                f"Halstead difficulty: {metrics.halstead_difficulty:0.3f}, "
                f"volume: {metrics.halstead_volume:0.3f}"
            )

            if not thresholds.is_exceeded(metrics.cyclomatic, metrics.maintainability):
                continue

            report.totals.add(metrics)
            report.flagged.append(result)
            if not self.config.csv_totals:
                self._formatter.render_function(result, thresholds, self._stream)

        if self.config.csv_totals:
            self._totals_formatter.render_totals(unit.name, report.totals, self._stream)

        logger.debug(
            f"{unit.path}: {len(report.results)} functions, {len(report.flagged)} over thresholds"
        )
        return report

    def run(self, units: Iterable[CompilationUnit]) -> RunReport:
        """Analyze all units, then signal failure if requested and warranted.

        Raises:
            ThresholdsExceededError: If ``fail_on_issues`` is set and any
                function crossed a threshold. Raised only after every unit
                has been processed and reported.
        """
        report = RunReport()
        for unit in units:
            report.units.append(self.analyze_unit(unit))

        totals = report.totals
        logger.info(
            f"{totals.function_count} functions over thresholds in {len(report.units)} packages"
        )

        if report.issues_found and self.config.fail_on_issues:
            raise ThresholdsExceededError(totals.function_count, len(report.units))
        return report
