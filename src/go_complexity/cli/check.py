"""Main command: measure Go packages and report complex functions."""

from pathlib import Path
from typing import List, Optional

import typer

from ..analysis import ComplexityAnalyzer
from ..exceptions import GoComplexityError, ThresholdsExceededError
from ..logging_config import get_logger, setup_logging
from ..scanning import PackageLoader
from . import app
from ._common import console, resolve_config

DEFAULT_TARGET = "./..."

logger = get_logger(__name__)


@app.command()
def main(
    targets: Optional[List[str]] = typer.Argument(
        None,
        help="Packages to analyze: directories, dir/... patterns or .go files (default: ./...)",
        show_default=False,
    ),
    cycloover: Optional[int] = typer.Option(
        None,
        "--cycloover",
        help="Report functions with cyclomatic complexity over N (default: 10)",
    ),
    maintunder: Optional[int] = typer.Option(
        None,
        "--maintunder",
        help="Report functions with maintainability index under N (default: 20)",
    ),
    selfimpdepth: Optional[int] = typer.Option(
        None,
        "--selfimpdepth",
        help="Path segments an import must share with its package to count as a self import (default: -1, disabled)",
    ),
    csvstats: bool = typer.Option(
        False,
        "--csvstats",
        help="Print per-function stats as CSV rows",
    ),
    csvtotals: bool = typer.Option(
        False,
        "--csvtotals",
        help="Print only one CSV totals row per package",
    ),
    mustfail: bool = typer.Option(
        False,
        "--mustfail",
        help="Exit 1 if any function crossed a threshold",
    ),
    tests: Optional[bool] = typer.Option(
        None,
        "--tests/--no-tests",
        help="Include _test.go files (default: include)",
        show_default=False,
    ),
    config: Optional[Path] = typer.Option(
        None,
        "-c",
        "--config",
        help="Configuration file (TOML)",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Log per-function diagnostics",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Log errors only",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        help="Show version and exit",
        is_eager=True,
    ),
) -> None:
    """
    Report Go functions that are too complex or hard to maintain.

    [bold cyan]Examples:[/bold cyan]

      go-complexity

      go-complexity --cycloover 15 ./internal/...

      go-complexity --csvtotals --mustfail ./cmd/server
    """
    from .. import __version__

    if version:
        console.print(f"[bold cyan]go-complexity[/bold cyan] version [green]{__version__}[/green]")
        raise typer.Exit(0)

    try:
        settings = resolve_config(
            config=config,
            cyclomatic_over=cycloover,
            maintainability_under=maintunder,
            self_import_depth=selfimpdepth,
            csv_stats=csvstats,
            csv_totals=csvtotals,
            fail_on_issues=mustfail,
            include_tests=tests,
            verbose=verbose,
            quiet=quiet,
        )
        setup_logging(settings.verbosity)
        loader = PackageLoader(settings)
        analyzer = ComplexityAnalyzer(settings)
        analyzer.run(loader.load(targets or [DEFAULT_TARGET]))

    except ThresholdsExceededError as e:
        logger.info(f"{e.function_count} functions over thresholds")
        console.print(f"[red]{e.message}[/red]")
        raise typer.Exit(1)

    except GoComplexityError as e:
        console.print(f"[red]Error:[/red] {e}")
        if e.hint:
            console.print(f"[yellow]Hint:[/yellow] {e.hint}")
        raise typer.Exit(1)

    except KeyboardInterrupt:
        logger.warning("Analysis interrupted by user")
        console.print("\n[yellow]Analysis interrupted[/yellow]")
        raise typer.Exit(130)
