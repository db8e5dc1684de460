"""Syntax model consumed by the metric calculators."""

from .nodes import (
    CompilationUnit,
    File,
    FuncDecl,
    Node,
    Position,
    iter_child_nodes,
    walk,
)
from .tokens import LOGICAL_OPERATORS, OPERATORS, is_operator

__all__ = [
    "CompilationUnit",
    "File",
    "FuncDecl",
    "Node",
    "Position",
    "iter_child_nodes",
    "walk",
    "OPERATORS",
    "LOGICAL_OPERATORS",
    "is_operator",
]
