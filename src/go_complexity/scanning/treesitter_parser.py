"""Tree-sitter parser wrapper for Go.

Handles a missing tree-sitter dependency gracefully: the module always
imports, and ``TREE_SITTER_AVAILABLE`` tells callers whether a Go parser
can be built.

Usage:
    if TREE_SITTER_AVAILABLE:
        parser = TreeSitterParser()
        tree = parser.parse(code_bytes)
        captures = parser.query(tree, query_str)
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ..exceptions import ParserUnavailableError

LANGUAGE = "go"

# Try to import tree-sitter and the Go grammar
TREE_SITTER_AVAILABLE = False
_tree_sitter_module: Any = None
_go_module: Any = None

try:
    import tree_sitter as _tree_sitter_module  # type: ignore[no-redef]
    import tree_sitter_go as _go_module  # type: ignore[no-redef]

    TREE_SITTER_AVAILABLE = True
except ImportError:
    TREE_SITTER_AVAILABLE = False


if TYPE_CHECKING:
    # Type stubs for tree-sitter (not installed, just for type checking)
    class Node:
        type: str
        is_named: bool
        is_missing: bool
        has_error: bool
        start_byte: int
        end_byte: int
        start_point: tuple[int, int]
        end_point: tuple[int, int]
        children: list[Node]
        named_children: list[Node]

    class Tree:
        root_node: Node

    Capture = tuple[Node, str]


class TreeSitterParser:
    """Wrapper around tree-sitter's Go grammar.

    Raises:
        ParserUnavailableError: On construction when tree-sitter or
            tree-sitter-go is not installed
    """

    def __init__(self) -> None:
        if not TREE_SITTER_AVAILABLE:
            raise ParserUnavailableError(LANGUAGE)

        # tree-sitter >= 0.23 returns PyCapsule; wrap in Language()
        self._language = _tree_sitter_module.Language(_go_module.language())
        self._parser = _tree_sitter_module.Parser(self._language)
        self._queries: dict[str, Any] = {}

    def parse(self, code: bytes) -> Tree:
        """Parse Go source and return the syntax tree.

        Syntax errors do not raise; they show up as ERROR or missing nodes
        and ``tree.root_node.has_error``.
        """
        result: Tree = self._parser.parse(code)
        return result

    def query(self, tree: Tree, query_str: str) -> list[Capture]:
        """Run a query on a syntax tree.

        Args:
            tree: Syntax tree from parse()
            query_str: S-expression query string, compiled once per parser

        Returns:
            List of (node, capture_name) tuples in match order
        """
        query = self._queries.get(query_str)
        if query is None:
            query = _tree_sitter_module.Query(self._language, query_str)
            self._queries[query_str] = query
        # tree-sitter 0.25+: use QueryCursor for execution
        cursor = _tree_sitter_module.QueryCursor(query)
        matches = cursor.matches(tree.root_node)
        # Convert from [(pattern_id, {name: [nodes]})] to [(node, name)]
        result: list[Capture] = []
        for _pattern_id, captures_dict in matches:
            for capture_name, nodes in captures_dict.items():
                for node in nodes:
                    result.append((node, capture_name))
        return result
