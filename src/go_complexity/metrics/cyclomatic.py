"""Cyclomatic complexity by decision-point counting."""

from __future__ import annotations

from ..syntax import nodes as ast
from ..syntax.nodes import walk
from ..syntax.tokens import LOGICAL_OPERATORS

# Each of these adds one linearly independent path.
_BRANCH_NODES = (
    ast.IfStmt,
    ast.ForStmt,
    ast.RangeStmt,
    ast.CaseClause,
    ast.CommClause,
)


def cyclomatic_complexity(node: ast.Node) -> int:
    """
    Count decision points in ``node`` plus one.

    Every ``if``, ``for``, range loop, switch ``case``/``default`` clause,
    ``select`` communication clause and short-circuit ``&&``/``||`` adds one,
    wherever it appears in the subtree. Nesting does not weigh in.

    Args:
        node: Function declaration (or any subtree)

    Returns:
        Cyclomatic complexity, at least 1
    """
    complexity = 1
    for n in walk(node):
        if isinstance(n, _BRANCH_NODES):
            complexity += 1
        elif isinstance(n, ast.BinaryExpr) and n.op in LOGICAL_OPERATORS:
            complexity += 1
    return complexity
