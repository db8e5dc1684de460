"""Lexical scopes for identifier resolution.

Go's parser binds an identifier to an object when a declaration of that
name is visible: a local variable, parameter, result, receiver, type
parameter, label, or any top-level declaration of the same file. Builtins
(``len``, ``nil``, ``int``), imported package names and selector fields
are never bound. The blank identifier ``_`` is never entered into a scope.
"""

from __future__ import annotations

from typing import Iterable, Optional, Set

BLANK = "_"


class Scope:
    """A set of declared names chained to its enclosing scope."""

    def __init__(self, parent: Optional["Scope"] = None) -> None:
        self.parent = parent
        self._names: Set[str] = set()

    def declare(self, name: str) -> None:
        if name != BLANK:
            self._names.add(name)

    def declare_all(self, names: Iterable[str]) -> None:
        for name in names:
            self.declare(name)

    def lookup(self, name: str, stop: Optional["Scope"] = None) -> bool:
        """Report whether ``name`` is declared here or in an enclosing scope.

        With ``stop``, the search ends before reaching that scope.
        """
        scope: Optional[Scope] = self
        while scope is not None and scope is not stop:
            if name in scope._names:
                return True
            scope = scope.parent
        return False

    def __contains__(self, name: str) -> bool:
        return name in self._names
