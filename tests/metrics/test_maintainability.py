"""Tests for go_complexity.metrics.maintainability."""

import math

import pytest

from go_complexity.metrics.maintainability import ln_or_zero, maintainability_index


class TestMaintainabilityIndex:
    """MI = max(0, (171 - 5.2 ln V - 0.23 CC - 16.2 ln LOC) * 100 / 171)."""

    def test_degenerate_inputs_give_100(self):
        """All-zero inputs: every logarithm is taken as 0."""
        assert maintainability_index(0.0, 0, 0) == 100

    def test_truncates_toward_zero(self):
        """171 - 0.23 = 170.77 -> 99.86..., truncated to 99, not rounded."""
        assert maintainability_index(1.0, 1, 1) == 99

    def test_known_function(self):
        """V = 11 log2(9), CC = 4, LOC = 5 -> 73."""
        volume = 11 * math.log2(9)
        assert maintainability_index(volume, 4, 5) == 73

    def test_floored_at_zero(self):
        """Huge functions clamp to 0 instead of going negative."""
        assert maintainability_index(1e12, 500, 100000) == 0

    def test_never_negative(self):
        for volume, cyclo, loc in [(1e6, 100, 5000), (0.0, 10000, 1), (50.0, 3, 10)]:
            assert maintainability_index(volume, cyclo, loc) >= 0

    def test_returns_int(self):
        assert isinstance(maintainability_index(100.0, 3, 10), int)

    def test_decreases_with_size(self):
        assert maintainability_index(100.0, 3, 100) < maintainability_index(100.0, 3, 10)


class TestLnOrZero:
    def test_non_positive(self):
        assert ln_or_zero(0) == 0.0
        assert ln_or_zero(-1.5) == 0.0

    def test_positive(self):
        assert ln_or_zero(math.e) == pytest.approx(1.0)
