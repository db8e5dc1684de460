"""Go front end: discovery, tree-sitter parsing and conversion to the syntax model."""

from .converter import GoTreeConverter
from .discovery import PackageDir, expand_targets, find_module, import_path_for
from .loader import PackageLoader
from .treesitter_parser import TREE_SITTER_AVAILABLE, TreeSitterParser

__all__ = [
    "GoTreeConverter",
    "PackageDir",
    "PackageLoader",
    "TREE_SITTER_AVAILABLE",
    "TreeSitterParser",
    "expand_targets",
    "find_module",
    "import_path_for",
]
