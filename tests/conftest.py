"""Shared test fixtures for go-complexity tests."""

import pytest

from go_complexity.syntax.nodes import (
    BinaryExpr,
    BlockStmt,
    CompilationUnit,
    File,
    ForStmt,
    FuncDecl,
    FuncType,
    Ident,
    IfStmt,
    Position,
)


def pytest_addoption(parser):
    """Add --run-slow option for slow tests."""
    parser.addoption(
        "--run-slow",
        action="store_true",
        default=False,
        help="run slow tests",
    )


def pytest_configure(config):
    """Configure slow marker."""
    config.addinivalue_line("markers", "slow: mark test as slow to run")


def pytest_collection_modifyitems(config, items):
    """Skip slow tests unless --run-slow is given."""
    if config.getoption("--run-slow"):
        return
    skip_slow = pytest.mark.skip(reason="need --run-slow option to run")
    for item in items:
        if "slow" in item.keywords:
            item.add_marker(skip_slow)


def make_func(stmts=None, name="f", line=10, end_line=14, filename="a.go", recv=None):
    """Build a function declaration spanning ``line``..``end_line``."""
    return FuncDecl(
        name=Ident(name),
        type=FuncType(),
        pos=Position(filename, line, 1),
        end=Position(filename, end_line, 2),
        body=BlockStmt(list(stmts or [])),
        recv=recv,
    )


def make_unit(funcs, path="example.com/app/pkg", name="pkg", imports=None, filename="a.go"):
    """Wrap functions into a single-file compilation unit."""
    f = File(filename=filename, package=name, imports=list(imports or []), decls=list(funcs))
    return CompilationUnit(path=path, name=name, files=[f])


@pytest.fixture
def func_factory():
    """Factory for function declarations."""
    return make_func


@pytest.fixture
def unit_factory():
    """Factory for compilation units."""
    return make_unit


@pytest.fixture
def branchy_func():
    """Lines 10-14: ``if a && b { for { } }``.

    Cyclomatic complexity 4, 5 lines, operators
    {func, f, (), {}x3, if, &&, for}, operands {a, b}.
    """
    cond = BinaryExpr(Ident("a", resolved=True), "&&", Ident("b", resolved=True))
    loop = ForStmt(body=BlockStmt())
    return make_func([IfStmt(cond=cond, body=BlockStmt([loop]))])


@pytest.fixture
def empty_func():
    """A function with an empty body on a single line."""
    return make_func(name="noop", line=3, end_line=3)
