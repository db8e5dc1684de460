"""Line counts and import coupling."""

from __future__ import annotations

from typing import Iterable, List, Sequence, Tuple

from ..syntax.nodes import FuncDecl

# Self-import detection is off at this depth.
SELF_IMPORTS_DISABLED = -1


def lines_of_code(func: FuncDecl) -> int:
    """Lines spanned by the function, first to last token inclusive."""
    return func.end.line - func.pos.line + 1


def count_imports(
    unit_path: str, import_paths: Iterable[str], self_import_depth: int = SELF_IMPORTS_DISABLED
) -> Tuple[int, int]:
    """Count a unit's imports and how many of them are "self" imports.

    An import is a self import when it lives under the same application
    root as the importing package: both paths have at least
    ``self_import_depth`` segments and their first ``self_import_depth - 1``
    segments match.

    Args:
        unit_path: Import path of the importing package
        import_paths: Import paths referenced by the package
        self_import_depth: Shared prefix depth, -1 disables detection

    Returns:
        (imports_count, self_imports_count)
    """
    imports = list(import_paths)
    if self_import_depth == SELF_IMPORTS_DISABLED:
        return len(imports), 0

    own = split_path(unit_path)
    self_imports = sum(
        1 for imp in imports if shares_path_prefix(own, split_path(imp), self_import_depth)
    )
    return len(imports), self_imports


def split_path(path: str) -> List[str]:
    return path.split("/")


def shares_path_prefix(a: Sequence[str], b: Sequence[str], depth: int) -> bool:
    if len(a) < depth or len(b) < depth:
        return False
    return all(a[i] == b[i] for i in range(depth - 1))
