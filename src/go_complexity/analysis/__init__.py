"""Threshold-driven analysis of compilation units."""

from .engine import ComplexityAnalyzer, RunReport, UnitReport, measure_function

__all__ = [
    "ComplexityAnalyzer",
    "RunReport",
    "UnitReport",
    "measure_function",
]
