"""Allow ``python -m go_complexity``."""

from .cli import app

app()
