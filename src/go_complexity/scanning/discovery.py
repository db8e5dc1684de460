"""Target discovery: package patterns to package directories.

Targets follow the ``go`` command's shapes:

    dir         the package in ``dir``
    dir/...     ``dir`` and every package below it
    a.go b.go   an ad-hoc package made of the named files

Recursive patterns skip ``vendor`` and ``testdata`` directories and those
whose name starts with ``.`` or ``_``, as the go command does.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Tuple

from ..exceptions import InvalidPathError
from ..logging_config import get_logger

logger = get_logger(__name__)

GO_SUFFIX = ".go"
TEST_SUFFIX = "_test.go"
RECURSIVE_SUFFIX = "..."
GO_MOD = "go.mod"

# Import path the go command gives to packages named by file list
AD_HOC_PACKAGE = "command-line-arguments"

SKIP_DIRS = frozenset({"vendor", "testdata"})


@dataclass
class PackageDir:
    """A directory (or file list) holding Go sources of one import path.

    Attributes:
        directory: Directory containing the files
        import_path: Import path of the package
        files: Source files, sorted by name
    """

    directory: Path
    import_path: str
    files: List[Path] = field(default_factory=list)


def is_test_file(path: Path) -> bool:
    return path.name.endswith(TEST_SUFFIX)


def go_files(directory: Path, include_tests: bool = True) -> List[Path]:
    """Go source files directly inside ``directory``, sorted by name."""
    files = [
        p
        for p in directory.iterdir()
        if p.suffix == GO_SUFFIX
        and p.is_file()
        and not p.name.startswith((".", "_"))
        and (include_tests or not is_test_file(p))
    ]
    return sorted(files)


def find_module(start: Path) -> Optional[Tuple[Path, str]]:
    """Find the enclosing ``go.mod``.

    Returns:
        (module root directory, module path), or None outside a module
    """
    for directory in [start, *start.parents]:
        gomod = directory / GO_MOD
        if gomod.is_file():
            module_path = read_module_path(gomod)
            if module_path:
                return directory, module_path
    return None


def read_module_path(gomod: Path) -> Optional[str]:
    """Return the path of the ``module`` directive of a go.mod file."""
    for line in gomod.read_text(encoding="utf-8", errors="replace").splitlines():
        line = line.split("//", 1)[0].strip()
        if line.startswith("module"):
            rest = line[len("module") :].strip()
            if rest:
                return rest.strip('"`')
    return None


def import_path_for(directory: Path) -> str:
    """Import path of the package in ``directory``.

    Inside a module the path is the module path joined with the directory's
    location below the module root; outside one the directory path relative
    to the working directory is used.
    """
    directory = directory.resolve()
    module = find_module(directory)
    if module is not None:
        root, module_path = module
        rel = directory.relative_to(root).as_posix()
        return module_path if rel == "." else f"{module_path}/{rel}"

    try:
        rel = directory.relative_to(Path.cwd().resolve()).as_posix()
    except ValueError:
        rel = directory.as_posix()
    return rel if rel != "." else directory.name


def _walk_package_dirs(root: Path) -> Iterable[Path]:
    pending = [root]
    while pending:
        directory = pending.pop()
        yield directory
        children = sorted(
            (
                d
                for d in directory.iterdir()
                if d.is_dir() and d.name not in SKIP_DIRS and not d.name.startswith((".", "_"))
            ),
            reverse=True,
        )
        pending.extend(children)


def expand_targets(targets: Sequence[str], include_tests: bool = True) -> List[PackageDir]:
    """Expand package patterns into package directories.

    Raises:
        InvalidPathError: If a target does not exist or names a non-Go file
    """
    packages: List[PackageDir] = []
    loose_files: List[Path] = []

    for target in targets:
        recursive = target == RECURSIVE_SUFFIX or target.endswith("/" + RECURSIVE_SUFFIX)
        base = Path(target[: -len(RECURSIVE_SUFFIX)] or ".") if recursive else Path(target)

        if not base.exists():
            raise InvalidPathError(base, "no such file or directory")

        if base.is_file():
            if base.suffix != GO_SUFFIX:
                raise InvalidPathError(base, "not a Go source file")
            loose_files.append(base)
            continue

        directories = list(_walk_package_dirs(base)) if recursive else [base]
        for directory in directories:
            files = go_files(directory, include_tests)
            if not files:
                if not recursive:
                    logger.warning(f"No Go files in {directory}")
                continue
            packages.append(PackageDir(directory, import_path_for(directory), files))

    if loose_files:
        packages.append(PackageDir(loose_files[0].parent, AD_HOC_PACKAGE, sorted(loose_files)))

    logger.debug(f"Expanded {len(targets)} targets into {len(packages)} package directories")
    return packages
