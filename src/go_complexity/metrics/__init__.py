"""Per-function complexity metrics."""

from .cyclomatic import cyclomatic_complexity
from .halstead import HalsteadMetrics, compute_halstead
from .maintainability import maintainability_index
from .models import FunctionResult, FunctionUnit, Metrics, Totals, merge_totals
from .size import SELF_IMPORTS_DISABLED, count_imports, lines_of_code
from .symbols import TokenTables, classify

__all__ = [
    "classify",
    "TokenTables",
    "cyclomatic_complexity",
    "compute_halstead",
    "HalsteadMetrics",
    "maintainability_index",
    "lines_of_code",
    "count_imports",
    "SELF_IMPORTS_DISABLED",
    "Metrics",
    "Totals",
    "FunctionUnit",
    "FunctionResult",
    "merge_totals",
]
