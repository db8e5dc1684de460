"""Metric records produced per function and per compilation unit."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterable

from ..syntax.nodes import FuncDecl, Position


@dataclass(frozen=True)
class Metrics:
    """Complexity metrics of a single function."""

    loc: int
    cyclomatic: int
    halstead_difficulty: float
    halstead_volume: float
    maintainability: int
    imports_count: int = 0
    self_imports_count: int = 0


@dataclass(frozen=True)
class FunctionUnit:
    """A function together with where it was declared."""

    name: str
    position: Position
    decl: FuncDecl

    @classmethod
    def from_decl(cls, decl: FuncDecl) -> "FunctionUnit":
        return cls(name=decl.name.name, position=decl.pos, decl=decl)


@dataclass(frozen=True)
class FunctionResult:
    function: FunctionUnit
    metrics: Metrics


@dataclass
class Totals:
    """Sum of the metrics of the functions that crossed a threshold.

    Import counts describe the compilation unit as a whole, so ``add`` leaves
    them alone; they are set once per unit and summed only by ``merge``.
    """

    function_count: int = 0
    loc: int = 0
    cyclomatic: int = 0
    halstead_difficulty: float = 0.0
    halstead_volume: float = 0.0
    maintainability: int = 0
    imports_count: int = 0
    self_imports_count: int = 0

    def add(self, metrics: Metrics) -> None:
        self.function_count += 1
        self.loc += metrics.loc
        self.cyclomatic += metrics.cyclomatic
        self.halstead_difficulty += metrics.halstead_difficulty
        self.halstead_volume += metrics.halstead_volume
        self.maintainability += metrics.maintainability

    def merge(self, other: "Totals") -> "Totals":
        """Combine two completed accumulators into a new one."""
        return replace(
            self,
            function_count=self.function_count + other.function_count,
            loc=self.loc + other.loc,
            cyclomatic=self.cyclomatic + other.cyclomatic,
            halstead_difficulty=self.halstead_difficulty + other.halstead_difficulty,
            halstead_volume=self.halstead_volume + other.halstead_volume,
            maintainability=self.maintainability + other.maintainability,
            imports_count=self.imports_count + other.imports_count,
            self_imports_count=self.self_imports_count + other.self_imports_count,
        )


def merge_totals(totals: Iterable[Totals]) -> Totals:
    result = Totals()
    for t in totals:
        result = result.merge(t)
    return result
