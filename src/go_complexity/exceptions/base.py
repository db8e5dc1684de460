"""Base exception for go-complexity."""

from typing import Dict, Optional


class GoComplexityError(Exception):
    """Root of every error go-complexity raises on purpose.

    ``details`` is key/value context rendered after the message. A ``hint``
    entry is split off into ``hint`` so the CLI can print it on its own line.
    """

    def __init__(self, message: str, details: Optional[Dict[str, str]] = None):
        super().__init__(message)
        self.message = message
        self.details = dict(details or {})
        self.hint: Optional[str] = self.details.pop("hint", None)

    def __str__(self) -> str:
        if not self.details:
            return self.message
        context = ", ".join(f"{k}={v}" for k, v in self.details.items())
        return f"{self.message} ({context})"
