"""Halstead difficulty and volume."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .symbols import TokenTables


@dataclass(frozen=True)
class HalsteadMetrics:
    """Halstead measures derived from operator/operand counts.

    Attributes:
        distinct_operators: n1
        distinct_operands: n2
        total_operators: N1
        total_operands: N2
    """

    distinct_operators: int
    distinct_operands: int
    total_operators: int
    total_operands: int

    @property
    def vocabulary(self) -> int:
        return self.distinct_operators + self.distinct_operands

    @property
    def length(self) -> int:
        return self.total_operators + self.total_operands

    @property
    def volume(self) -> float:
        """V = N * log2(n); zero for an empty vocabulary."""
        return float(self.length) * log2_or_zero(float(self.vocabulary))

    @property
    def difficulty(self) -> float:
        """D = (n1 * N2) / (2 * n2), with n2 floored to 1."""
        n2 = self.distinct_operands or 1
        return float(self.distinct_operators * self.total_operands) / float(2 * n2)


def compute_halstead(tables: TokenTables) -> HalsteadMetrics:
    return HalsteadMetrics(
        distinct_operators=tables.distinct_operators,
        distinct_operands=tables.distinct_operands,
        total_operators=tables.total_operators,
        total_operands=tables.total_operands,
    )


def log2_or_zero(value: float) -> float:
    if value <= 0:
        return 0.0
    return math.log2(value)
