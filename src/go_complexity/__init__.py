"""
go-complexity - Complexity metrics for Go functions

Measures cyclomatic complexity, Halstead difficulty and volume, a derived
maintainability index, lines of code and import coupling for every function
of a Go package, and reports the functions that cross configurable
thresholds.
"""

__version__ = "0.1.0"

from .analysis import ComplexityAnalyzer, RunReport, UnitReport, measure_function
from .config import AnalysisConfig, Thresholds, load_config
from .metrics import Metrics, Totals

__all__ = [
    "ComplexityAnalyzer",  # Main entry point
    "AnalysisConfig",
    "Thresholds",
    "load_config",
    "Metrics",
    "Totals",
    "RunReport",
    "UnitReport",
    "measure_function",
]
