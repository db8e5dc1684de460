"""Tests for go_complexity.metrics.size - lines and import coupling."""

from go_complexity.metrics.size import (
    SELF_IMPORTS_DISABLED,
    count_imports,
    lines_of_code,
    shares_path_prefix,
    split_path,
)


class TestLinesOfCode:
    """Inclusive line span of a function."""

    def test_multi_line(self, branchy_func):
        """Lines 10 through 14 are 5 lines."""
        assert lines_of_code(branchy_func) == 5

    def test_single_line(self, empty_func):
        assert lines_of_code(empty_func) == 1


class TestCountImports:
    """Import and self-import counting."""

    IMPORTS = [
        "fmt",
        "github.com/acme/app/store",
        "github.com/acme/lib/log",
        "golang.org/x/sync/errgroup",
    ]

    def test_disabled_depth_counts_no_self_imports(self):
        count, self_count = count_imports("github.com/acme/app/api", self.IMPORTS, SELF_IMPORTS_DISABLED)
        assert count == 4
        assert self_count == 0

    def test_default_depth_is_disabled(self):
        assert count_imports("github.com/acme/app/api", self.IMPORTS) == (4, 0)

    def test_non_positive_depth_counts_every_import(self):
        """Only -1 disables; 0 and other negative depths match every path."""
        assert count_imports("github.com/acme/app/api", self.IMPORTS, 0) == (4, 4)
        assert count_imports("github.com/acme/app/api", self.IMPORTS, -2) == (4, 4)

    def test_depth_two_shares_host(self):
        """Depth 2 compares the first segment: both github.com paths count."""
        _, self_count = count_imports("github.com/acme/app/api", self.IMPORTS, 2)
        assert self_count == 2

    def test_depth_three_shares_owner(self):
        """Depth 3 compares host and owner."""
        _, self_count = count_imports("github.com/acme/app/api", self.IMPORTS, 3)
        assert self_count == 2

    def test_depth_four_shares_repository(self):
        _, self_count = count_imports("github.com/acme/app/api", self.IMPORTS, 4)
        assert self_count == 1

    def test_short_paths_never_match(self):
        """Imports with fewer segments than the depth are not self imports."""
        _, self_count = count_imports("example.com/app", ["fmt", "os"], 2)
        assert self_count == 0

    def test_no_imports(self):
        assert count_imports("example.com/app", [], 2) == (0, 0)

    def test_self_imports_never_exceed_imports(self):
        for depth in (0, 1, 2, 3, 4, 5):
            count, self_count = count_imports("github.com/acme/app/api", self.IMPORTS, depth)
            assert 0 <= self_count <= count


class TestPathHelpers:
    def test_split_path(self):
        assert split_path("a/b/c") == ["a", "b", "c"]

    def test_prefix_requires_depth_segments(self):
        assert not shares_path_prefix(["a"], ["a", "b"], 2)

    def test_prefix_ignores_segment_at_depth(self):
        """Only the first depth-1 segments must be equal."""
        assert shares_path_prefix(["a", "x"], ["a", "y"], 2)
