"""Tests for go_complexity.metrics.cyclomatic."""

from go_complexity.metrics.cyclomatic import cyclomatic_complexity
from go_complexity.syntax.nodes import (
    AssignStmt,
    BinaryExpr,
    BlockStmt,
    CaseClause,
    CommClause,
    ExprStmt,
    ForStmt,
    FuncLit,
    FuncType,
    Ident,
    IfStmt,
    RangeStmt,
    SelectStmt,
    SwitchStmt,
    TypeSwitchStmt,
    TypeAssertExpr,
    UnaryExpr,
)
from conftest import make_func


def _cond(op="&&"):
    return BinaryExpr(Ident("a", resolved=True), op, Ident("b", resolved=True))


class TestCyclomaticComplexity:
    """Decision-point counting."""

    def test_empty_function_is_one(self, empty_func):
        """A function without branches has complexity 1."""
        assert cyclomatic_complexity(empty_func) == 1

    def test_if_for_and(self, branchy_func):
        """if + for + && gives 4."""
        assert cyclomatic_complexity(branchy_func) == 4

    def test_or_counts(self):
        func = make_func([IfStmt(cond=_cond("||"), body=BlockStmt())])
        assert cyclomatic_complexity(func) == 3

    def test_comparison_does_not_count(self):
        func = make_func([IfStmt(cond=_cond("=="), body=BlockStmt())])
        assert cyclomatic_complexity(func) == 2

    def test_else_if_chain(self):
        inner = IfStmt(cond=Ident("c", resolved=True), body=BlockStmt())
        outer = IfStmt(cond=Ident("b", resolved=True), body=BlockStmt(), else_=inner)
        assert cyclomatic_complexity(make_func([outer])) == 3

    def test_range_loop(self):
        loop = RangeStmt(x=Ident("xs", resolved=True), body=BlockStmt())
        assert cyclomatic_complexity(make_func([loop])) == 2

    def test_switch_cases_including_default(self):
        """Every case clause counts, default too; the switch itself does not."""
        switch = SwitchStmt(
            body=BlockStmt([CaseClause([Ident("x")]), CaseClause([Ident("y")]), CaseClause(None)])
        )
        assert cyclomatic_complexity(make_func([switch])) == 4

    def test_type_switch_cases(self):
        guard = ExprStmt(TypeAssertExpr(Ident("v", resolved=True)))
        switch = TypeSwitchStmt(assign=guard, body=BlockStmt([CaseClause([Ident("int")])]))
        assert cyclomatic_complexity(make_func([switch])) == 2

    def test_select_clauses(self):
        comm = ExprStmt(UnaryExpr("<-", Ident("ch", resolved=True)))
        select = SelectStmt(BlockStmt([CommClause(comm), CommClause(None)]))
        assert cyclomatic_complexity(make_func([select])) == 3

    def test_function_literal_counts_toward_enclosing(self):
        """Branches inside a closure count toward the declaring function."""
        closure = FuncLit(
            FuncType(), BlockStmt([ForStmt(body=BlockStmt(), cond=_cond())])
        )
        stmt = AssignStmt([Ident("g", resolved=True)], ":=", [closure])
        assert cyclomatic_complexity(make_func([stmt])) == 3

    def test_never_below_one(self, func_factory):
        """Complexity is at least 1 for any function."""
        assert cyclomatic_complexity(func_factory([])) >= 1
