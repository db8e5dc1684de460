"""CLI entry point."""

import typer

from .. import __version__  # noqa: F401
from ._common import console  # noqa: F401

app = typer.Typer(
    name="go-complexity",
    help="go-complexity - Cyclomatic, Halstead and maintainability metrics for Go functions",
    add_completion=False,
    rich_markup_mode="rich",
)


# Import the command to register it
from .check import main as _main_callback  # noqa: F401, E402
