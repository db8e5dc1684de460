"""Tests for the tree-sitter Go parser wrapper."""

import pytest

from go_complexity.exceptions import ParserUnavailableError
from go_complexity.scanning import treesitter_parser
from go_complexity.scanning.queries import IMPORT_QUERY, PACKAGE_QUERY
from go_complexity.scanning.treesitter_parser import TREE_SITTER_AVAILABLE, TreeSitterParser


class TestTreeSitterAvailability:
    """Test tree-sitter availability detection."""

    def test_availability_flag_is_bool(self):
        assert isinstance(TREE_SITTER_AVAILABLE, bool)

    def test_unavailable_raises(self, monkeypatch):
        """Constructing a parser without the grammar raises."""
        monkeypatch.setattr(treesitter_parser, "TREE_SITTER_AVAILABLE", False)
        with pytest.raises(ParserUnavailableError):
            TreeSitterParser()


class TestQueries:
    def test_go_queries(self):
        assert "package_clause" in PACKAGE_QUERY
        assert "import_spec" in IMPORT_QUERY


@pytest.mark.skipif(not TREE_SITTER_AVAILABLE, reason="tree-sitter-go not installed")
class TestTreeSitterParser:
    """Tests that require tree-sitter-go to be installed."""

    def test_parse_returns_tree(self):
        tree = TreeSitterParser().parse(b"package main\n\nfunc main() {}\n")
        assert tree.root_node.type == "source_file"
        assert not tree.root_node.has_error

    def test_syntax_error_flagged(self):
        tree = TreeSitterParser().parse(b"package main\n\nfunc main( {\n")
        assert tree.root_node.has_error

    def test_import_query(self):
        parser = TreeSitterParser()
        source = b'package main\n\nimport (\n\t"fmt"\n\tlog "github.com/acme/log"\n)\n'
        tree = parser.parse(source)
        paths = [
            source[n.start_byte : n.end_byte].decode()
            for n, name in parser.query(tree, IMPORT_QUERY)
            if name == "import.path"
        ]
        assert paths == ['"fmt"', '"github.com/acme/log"']

    def test_queries_compiled_once(self):
        parser = TreeSitterParser()
        tree = parser.parse(b"package main\n")
        parser.query(tree, PACKAGE_QUERY)
        parser.query(tree, PACKAGE_QUERY)
        assert len(parser._queries) == 1
