"""Maintainability index.

Source: https://docs.microsoft.com/en-us/archive/blogs/codeanalysis/maintainability-index-range-and-meaning
"""

from __future__ import annotations

import math


def maintainability_index(volume: float, cyclomatic: int, loc: int) -> int:
    """
    Compute the normalized maintainability index.

    MI = max(0, (171 - 5.2 ln V - 0.23 CC - 16.2 ln LOC) * 100 / 171)

    The logarithm of a non-positive value is taken as 0 so degenerate
    inputs stay well-defined. The result is truncated toward zero and is
    not clamped from above.
    """
    raw = 171.0 - 5.2 * ln_or_zero(volume) - 0.23 * float(cyclomatic) - 16.2 * ln_or_zero(float(loc))
    return int(max(0.0, raw * 100.0 / 171.0))


def ln_or_zero(value: float) -> float:
    if value <= 0:
        return 0.0
    return math.log(value)
