"""Package loader: Go sources to compilation units.

    targets ─→ discovery ─→ PackageDir ─→ parse each file ─→ group by
                                          (tree-sitter)      package name
                                                               │
                                                   CompilationUnit per group

A directory normally holds one package, plus an external ``_test``
package when black-box tests are present; each becomes its own unit.
"""

from __future__ import annotations

from collections import OrderedDict
from pathlib import Path
from typing import Dict, Iterator, List, Optional, Sequence

from ..config import AnalysisConfig
from ..exceptions import FileAccessError, ParsingError
from ..logging_config import get_logger
from ..syntax.nodes import CompilationUnit, File
from .converter import LANGUAGE, GoTreeConverter
from .discovery import PackageDir, expand_targets
from .queries import IMPORT_QUERY, PACKAGE_QUERY
from .treesitter_parser import TreeSitterParser

logger = get_logger(__name__)

EXTERNAL_TEST_SUFFIX = "_test"


def read_source(filepath: Path) -> bytes:
    """Read a source file.

    Raises:
        FileAccessError: If the file cannot be read
    """
    try:
        return filepath.read_bytes()
    except OSError as e:
        raise FileAccessError(filepath, f"OS error: {e}")


def _unquote(literal: str) -> str:
    return literal[1:-1] if len(literal) >= 2 else literal


class PackageLoader:
    """Loads Go packages into CompilationUnits.

    Usage:
        loader = PackageLoader(config)
        for unit in loader.load(["./..."]):
            ...

    Raises:
        ParserUnavailableError: On construction when tree-sitter-go is missing
    """

    def __init__(self, config: Optional[AnalysisConfig] = None, parser: Optional[TreeSitterParser] = None):
        self.config = config or AnalysisConfig()
        self._parser = parser or TreeSitterParser()

    def load(self, targets: Sequence[str]) -> Iterator[CompilationUnit]:
        """Yield one unit per package found under ``targets``."""
        for package_dir in expand_targets(targets, self.config.include_tests):
            yield from self.load_package_dir(package_dir)

    def load_package_dir(self, package_dir: PackageDir) -> List[CompilationUnit]:
        groups: Dict[str, List[File]] = OrderedDict()
        for filepath in package_dir.files:
            parsed = self._parse_or_skip(filepath)
            if parsed is not None:
                groups.setdefault(parsed.package, []).append(parsed)

        units = []
        for name, files in groups.items():
            path = package_dir.import_path
            if name.endswith(EXTERNAL_TEST_SUFFIX) and len(groups) > 1:
                path += EXTERNAL_TEST_SUFFIX
            units.append(CompilationUnit(path=path, name=name, files=files))
            logger.debug(f"Loaded package {path} ({len(files)} files)")
        return units

    def _parse_or_skip(self, filepath: Path) -> Optional[File]:
        try:
            return self.parse_file(filepath)
        except (ParsingError, FileAccessError) as e:
            if self.config.strict:
                raise
            logger.warning(f"Skipping {filepath}: {e}")
            return None

    def parse_file(self, filepath: Path) -> File:
        """Parse one Go file into the syntax model.

        Raises:
            FileAccessError: If the file cannot be read
            ParsingError: If the file has syntax errors
        """
        source = read_source(filepath)
        return self.parse_source(source, str(filepath))

    def parse_source(self, source: bytes, filename: str) -> File:
        tree = self._parser.parse(source)
        decls = GoTreeConverter(source, filename).convert(tree.root_node)

        package = ""
        imports: List[str] = []
        for node, capture in self._parser.query(tree, PACKAGE_QUERY):
            if capture == "package.name":
                package = source[node.start_byte : node.end_byte].decode("utf-8")
        for node, capture in self._parser.query(tree, IMPORT_QUERY):
            if capture == "import.path":
                imports.append(_unquote(source[node.start_byte : node.end_byte].decode("utf-8")))

        if not package:
            raise ParsingError(filename, LANGUAGE, "missing package clause")  # type: ignore[arg-type]
        return File(filename=filename, package=package, imports=imports, decls=decls)
