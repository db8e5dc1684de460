"""Shared CLI helpers."""

from pathlib import Path
from typing import Optional

from rich.console import Console

from ..config import AnalysisConfig, load_config

console = Console(stderr=True)


def resolve_config(
    config: Optional[Path] = None,
    cyclomatic_over: Optional[int] = None,
    maintainability_under: Optional[int] = None,
    self_import_depth: Optional[int] = None,
    csv_stats: bool = False,
    csv_totals: bool = False,
    fail_on_issues: bool = False,
    include_tests: Optional[bool] = None,
    verbose: bool = False,
    quiet: bool = False,
) -> AnalysisConfig:
    """Build the run configuration from CLI options.

    Flags left at their defaults do not override config files or the
    environment.
    """
    overrides = {
        "cyclomatic_over": cyclomatic_over,
        "maintainability_under": maintainability_under,
        "self_import_depth": self_import_depth,
        "include_tests": include_tests,
        "verbose": verbose,
        "quiet": quiet,
    }
    if csv_stats:
        overrides["csv_stats"] = True
    if csv_totals:
        overrides["csv_totals"] = True
    if fail_on_issues:
        overrides["fail_on_issues"] = True
    return load_config(config_file=config, **overrides)
