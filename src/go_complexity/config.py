"""Configuration loading and management for go-complexity.

Configuration sources are merged in priority order:
    1. Defaults (defined in AnalysisConfig and Thresholds)
    2. Global config (~/.go-complexity.toml)
    3. Project config (./go-complexity.toml)
    4. Explicit config file
    5. Environment variables (GO_COMPLEXITY_* prefix)
    6. CLI overrides (passed as kwargs)

Example:
    >>> config = load_config(cyclomatic_over=15, fail_on_issues=True)
    >>> config.thresholds.cyclomatic_over
    15
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, Literal, Optional, get_type_hints

from .exceptions import ConfigurationError, InvalidConfigError

Verbosity = Literal["quiet", "normal", "verbose"]

ENV_PREFIX = "GO_COMPLEXITY_"
CONFIG_FILENAME = "go-complexity.toml"


@dataclass(frozen=True)
class Thresholds:
    """Report thresholds.

    Attributes:
        cyclomatic_over: Report functions with cyclomatic complexity > N
        maintainability_under: Report functions with maintainability index < N
        self_import_depth: How many leading path segments a package and an
            import must share to count as the same application; -1 disables.
            Any integer is accepted; 0 and depths below -1 count every import.
    """

    cyclomatic_over: int = 10
    maintainability_under: int = 20
    self_import_depth: int = -1

    def is_exceeded(self, cyclomatic: int, maintainability: int) -> bool:
        return cyclomatic > self.cyclomatic_over or maintainability < self.maintainability_under


@dataclass(frozen=True)
class AnalysisConfig:
    """Complete run configuration, passed explicitly to the analyzer.

    Attributes:
        thresholds: Report thresholds
        csv_stats: Emit per-function rows as CSV instead of prose
        csv_totals: Emit only the per-package totals row
        fail_on_issues: Signal failure if any function crossed a threshold
        include_tests: Analyze ``_test.go`` files too
        strict: Abort on the first file that fails to parse
        verbosity: Logging verbosity
    """

    thresholds: Thresholds = field(default_factory=Thresholds)
    csv_stats: bool = False
    csv_totals: bool = False
    fail_on_issues: bool = False
    include_tests: bool = True
    strict: bool = False
    verbosity: Verbosity = "normal"

    def __post_init__(self) -> None:
        if self.verbosity not in ("quiet", "normal", "verbose"):
            raise InvalidConfigError("verbosity", self.verbosity, "expected quiet, normal or verbose")


_THRESHOLD_FIELDS = frozenset(f.name for f in fields(Thresholds))


def load_config(config_file: Optional[Path] = None, **overrides: Any) -> AnalysisConfig:
    """Load configuration with auto-discovery and merging.

    Threshold fields may be given either flat (``cyclomatic_over=15``) or in
    a ``[thresholds]`` table / ``thresholds`` dict.

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides (typically from CLI flags); None values
            are ignored

    Returns:
        Validated AnalysisConfig instance

    Raises:
        ConfigurationError: If a config file is missing or invalid
        InvalidConfigError: If a value fails validation
    """
    merged: Dict[str, Any] = {}

    global_config = Path.home() / f".{CONFIG_FILENAME}"
    if global_config.exists():
        _merge(merged, _load_toml_file(global_config))

    project_config = Path.cwd() / CONFIG_FILENAME
    if project_config.exists():
        _merge(merged, _load_toml_file(project_config))

    if config_file is not None:
        if not config_file.exists():
            raise ConfigurationError(f"Config file not found: {config_file}")
        _merge(merged, _load_toml_file(config_file))

    _merge(merged, _load_env_vars())

    if overrides.pop("verbose", False):
        overrides["verbosity"] = "verbose"
    if overrides.pop("quiet", False):
        overrides["verbosity"] = "quiet"
    _merge(merged, {k: v for k, v in overrides.items() if v is not None})

    thresholds = merged.pop("thresholds", {})
    try:
        merged["thresholds"] = Thresholds(**thresholds)
        return AnalysisConfig(**merged)
    except TypeError as e:
        # Unknown field in config
        raise ConfigurationError(f"Invalid configuration: {e}")


def _merge(target: Dict[str, Any], source: Dict[str, Any]) -> None:
    """Merge ``source`` into ``target``, routing threshold keys into their table."""
    thresholds = target.setdefault("thresholds", {})
    for key, value in source.items():
        if key == "thresholds":
            if not isinstance(value, dict):
                raise InvalidConfigError("thresholds", value, "expected a table")
            thresholds.update(value)
        elif key in _THRESHOLD_FIELDS:
            thresholds[key] = value
        else:
            target[key] = value


def _load_env_vars() -> Dict[str, Any]:
    """Load configuration from GO_COMPLEXITY_* environment variables.

    Every scalar field of AnalysisConfig and Thresholds can be set, e.g.
    GO_COMPLEXITY_CYCLOMATIC_OVER=15 or GO_COMPLEXITY_FAIL_ON_ISSUES=true.
    """
    result: Dict[str, Any] = {}
    for cls in (AnalysisConfig, Thresholds):
        type_hints = get_type_hints(cls)
        for f in fields(cls):
            env_key = f"{ENV_PREFIX}{f.name.upper()}"
            env_value = os.environ.get(env_key)
            if env_value is None:
                continue
            try:
                parsed = _parse_env_value(env_value, type_hints[f.name])
            except ValueError as e:
                raise InvalidConfigError(env_key, env_value, str(e))
            if parsed is not None:
                result[f.name] = parsed
    return result


def _parse_env_value(value: str, type_hint: Any) -> Any:
    """Parse an environment variable string to the field's type.

    Returns None for types that cannot be set from the environment.
    """
    origin = getattr(type_hint, "__origin__", None)

    if type_hint is bool:
        lower = value.lower()
        if lower in ("true", "1", "yes", "on"):
            return True
        if lower in ("false", "0", "no", "off"):
            return False
        raise ValueError(f"expected true/false, got '{value}'")

    if type_hint is int:
        return int(value)

    if type_hint is str or origin is Literal:
        return value

    return None


def _load_toml_file(path: Path) -> Dict[str, Any]:
    """Load a TOML file and return the parsed dict.

    Raises:
        ConfigurationError: If the file cannot be read or parsed
    """
    try:
        # Python 3.11+ has tomllib in stdlib
        import tomllib
    except ModuleNotFoundError:
        import tomli as tomllib  # type: ignore[no-redef]

    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigurationError(f"Invalid config file '{path}': {e}")
