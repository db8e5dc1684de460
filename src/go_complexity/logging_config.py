"""
Logging configuration for go-complexity.

Log records go to stderr through rich; report lines are written to stdout
by the formatters and never pass through logging, so redirecting stdout
captures a clean report.
"""

import logging
from typing import Dict, Optional

from rich.console import Console
from rich.logging import RichHandler

from .config import Verbosity

ROOT_LOGGER = "go_complexity"

LEVELS: Dict[str, int] = {
    "quiet": logging.ERROR,
    "normal": logging.WARNING,
    "verbose": logging.DEBUG,
}


def setup_logging(verbosity: Verbosity = "normal") -> logging.Logger:
    """
    Route go_complexity log records to a rich handler on stderr.

    Args:
        verbosity: "quiet" logs errors only, "normal" adds warnings such as
            skipped files, "verbose" adds per-function diagnostics

    Returns:
        The go_complexity root logger
    """
    verbose = verbosity == "verbose"
    handler = RichHandler(
        console=Console(stderr=True),
        rich_tracebacks=True,
        tracebacks_show_locals=verbose,
        markup=False,
        show_time=verbose,
        show_path=verbose,
    )
    logging.basicConfig(
        level=LEVELS[verbosity], format="%(message)s", datefmt="[%X]", handlers=[handler], force=True
    )

    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(LEVELS[verbosity])
    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger below the go_complexity root.

    Args:
        name: Module name (e.g., 'go_complexity.analysis')
              If None, returns the root go_complexity logger
    """
    if name is None:
        return logging.getLogger(ROOT_LOGGER)
    if not name.startswith(ROOT_LOGGER):
        name = f"{ROOT_LOGGER}.{name}"
    return logging.getLogger(name)
