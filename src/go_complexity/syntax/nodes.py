"""Closed syntax model for Go compilation units.

The node set mirrors the shape of Go's own ``go/ast`` package closely enough
that metrics computed over it match the Go tooling: every bracketing construct
records whether its opening and closing delimiters are present, identifiers
record whether the parser resolved them to a declared object, and function
declarations carry their source span.

Nodes are produced by the front end in ``go_complexity.scanning`` but can be
built directly (the test-suite does this a lot).
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Iterator, List, Optional


@dataclass(frozen=True)
class Position:
    """A source position. Lines and columns are 1-indexed."""

    filename: str
    line: int
    column: int

    def __str__(self) -> str:
        return f"{self.filename}:{self.line}:{self.column}"


class Node:
    """Base class of every syntax node."""


class Expr(Node):
    """Expression and type nodes."""


class Stmt(Node):
    """Statement nodes."""


class Decl(Node):
    """Declaration nodes."""


class Spec(Node):
    """Specs inside a general declaration."""


# ---------------------------------------------------------------------------
# Expressions
# ---------------------------------------------------------------------------


@dataclass
class Ident(Expr):
    """An identifier.

    Attributes:
        name: Identifier text
        resolved: True when the parser bound the identifier to a declared
            object (local, parameter, result, receiver, label or a
            declaration of the same file)
    """

    name: str
    resolved: bool = False


@dataclass
class BasicLit(Expr):
    """A literal of basic type. ``value`` is the literal's source text."""

    kind: str  # INT, FLOAT, IMAG, CHAR or STRING
    value: str


@dataclass
class ParenExpr(Expr):
    x: Expr
    lparen: bool = True
    rparen: bool = True


@dataclass
class SelectorExpr(Expr):
    x: Expr
    sel: Ident


@dataclass
class IndexExpr(Expr):
    """``x[index]``; generic instantiations carry several indices."""

    x: Expr
    indices: List[Expr]
    lbrack: bool = True
    rbrack: bool = True


@dataclass
class SliceExpr(Expr):
    x: Expr
    low: Optional[Expr] = None
    high: Optional[Expr] = None
    max: Optional[Expr] = None
    lbrack: bool = True
    rbrack: bool = True


@dataclass
class TypeAssertExpr(Expr):
    """``x.(T)``; ``type`` is None for the ``x.(type)`` switch guard."""

    x: Expr
    type: Optional[Expr] = None
    lparen: bool = True
    rparen: bool = True


@dataclass
class CallExpr(Expr):
    fun: Expr
    args: List[Expr] = field(default_factory=list)
    ellipsis: bool = False
    lparen: bool = True
    rparen: bool = True


@dataclass
class StarExpr(Expr):
    """Pointer type ``*T``."""

    x: Expr


@dataclass
class UnaryExpr(Expr):
    op: str
    x: Expr


@dataclass
class BinaryExpr(Expr):
    x: Expr
    op: str
    y: Expr


@dataclass
class KeyValueExpr(Expr):
    key: Expr
    value: Expr
    colon: bool = True


@dataclass
class Field(Node):
    """A parameter, result, struct field or interface method."""

    names: List[Ident]
    type: Optional[Expr] = None


@dataclass
class FuncType(Expr):
    params: List[Field] = field(default_factory=list)
    results: List[Field] = field(default_factory=list)
    func_keyword: bool = True


@dataclass
class FuncLit(Expr):
    type: FuncType
    body: "BlockStmt"


@dataclass
class CompositeLit(Expr):
    type: Optional[Expr] = None
    elts: List[Expr] = field(default_factory=list)
    lbrace: bool = True
    rbrace: bool = True


@dataclass
class Ellipsis(Expr):
    """``...T`` in a variadic parameter list or ``[...]T`` array length."""

    elt: Optional[Expr] = None


@dataclass
class ChanType(Expr):
    """Channel type. ``dir`` is one of ``both``, ``send`` or ``recv``."""

    value: Expr
    dir: str = "both"

    @property
    def arrow(self) -> bool:
        return self.dir != "both"


@dataclass
class ArrayType(Expr):
    """``[len]elt``, or a slice type ``[]elt`` when ``len`` is None."""

    elt: Expr
    len: Optional[Expr] = None
    lbrack: bool = True
    rbrack: bool = True


@dataclass
class MapType(Expr):
    key: Expr
    value: Expr


@dataclass
class StructType(Expr):
    fields: List[Field] = field(default_factory=list)
    lbrace: bool = True
    rbrace: bool = True


@dataclass
class InterfaceType(Expr):
    methods: List[Field] = field(default_factory=list)
    lbrace: bool = True
    rbrace: bool = True


# ---------------------------------------------------------------------------
# Statements
# ---------------------------------------------------------------------------


@dataclass
class BlockStmt(Stmt):
    stmts: List[Stmt] = field(default_factory=list)
    lbrace: bool = True
    rbrace: bool = True


@dataclass
class DeclStmt(Stmt):
    decl: "GenDecl"


@dataclass
class EmptyStmt(Stmt):
    pass


@dataclass
class LabeledStmt(Stmt):
    label: Ident
    stmt: Stmt


@dataclass
class ExprStmt(Stmt):
    x: Expr


@dataclass
class SendStmt(Stmt):
    chan: Expr
    value: Expr


@dataclass
class IncDecStmt(Stmt):
    x: Expr
    tok: str  # "++" or "--"


@dataclass
class AssignStmt(Stmt):
    lhs: List[Expr]
    tok: str
    rhs: List[Expr]


@dataclass
class GoStmt(Stmt):
    call: Expr


@dataclass
class DeferStmt(Stmt):
    call: Expr


@dataclass
class ReturnStmt(Stmt):
    results: List[Expr] = field(default_factory=list)


@dataclass
class BranchStmt(Stmt):
    tok: str  # break, continue, goto or fallthrough
    label: Optional[Ident] = None


@dataclass
class IfStmt(Stmt):
    cond: Expr
    body: BlockStmt
    init: Optional[Stmt] = None
    else_: Optional[Stmt] = None


@dataclass
class CaseClause(Stmt):
    """A ``case`` of a switch; ``exprs`` is None for ``default``."""

    exprs: Optional[List[Expr]]
    body: List[Stmt] = field(default_factory=list)
    colon: bool = True


@dataclass
class SwitchStmt(Stmt):
    body: BlockStmt
    init: Optional[Stmt] = None
    tag: Optional[Expr] = None


@dataclass
class TypeSwitchStmt(Stmt):
    """``assign`` is ``x := y.(type)`` or ``y.(type)``."""

    assign: Stmt
    body: BlockStmt
    init: Optional[Stmt] = None


@dataclass
class CommClause(Stmt):
    """A ``case`` of a select; ``comm`` is None for ``default``."""

    comm: Optional[Stmt]
    body: List[Stmt] = field(default_factory=list)
    colon: bool = True


@dataclass
class SelectStmt(Stmt):
    body: BlockStmt


@dataclass
class ForStmt(Stmt):
    body: BlockStmt
    init: Optional[Stmt] = None
    cond: Optional[Expr] = None
    post: Optional[Stmt] = None


@dataclass
class RangeStmt(Stmt):
    x: Expr
    body: BlockStmt
    key: Optional[Expr] = None
    value: Optional[Expr] = None
    tok: str = ""  # ":=", "=" or empty when there is no key


# ---------------------------------------------------------------------------
# Declarations
# ---------------------------------------------------------------------------


@dataclass
class ValueSpec(Spec):
    names: List[Ident]
    type: Optional[Expr] = None
    values: List[Expr] = field(default_factory=list)


@dataclass
class TypeSpec(Spec):
    name: Ident
    type: Expr


@dataclass
class ImportSpec(Spec):
    path: str
    name: Optional[Ident] = None


@dataclass
class GenDecl(Decl):
    """``var``, ``const``, ``type`` or ``import`` declaration.

    ``lparen``/``rparen`` are only set for the grouped form ``var ( ... )``.
    """

    tok: str
    specs: List[Spec] = field(default_factory=list)
    lparen: bool = False
    rparen: bool = False


@dataclass
class FuncDecl(Decl):
    """A function or method declaration together with its source span."""

    name: Ident
    type: FuncType
    pos: Position
    end: Position
    body: Optional[BlockStmt] = None
    recv: Optional[List[Field]] = None

    @property
    def is_method(self) -> bool:
        return self.recv is not None


# ---------------------------------------------------------------------------
# Files and compilation units
# ---------------------------------------------------------------------------


@dataclass
class File:
    filename: str
    package: str
    imports: List[str] = field(default_factory=list)
    decls: List[Decl] = field(default_factory=list)

    @property
    def functions(self) -> List[FuncDecl]:
        return [d for d in self.decls if isinstance(d, FuncDecl)]


@dataclass
class CompilationUnit:
    """A Go package: the grouping totals are reported for.

    Attributes:
        path: Import path of the package (e.g. ``example.com/app/store``)
        name: Package name from the package clause
        files: Parsed files of the package
    """

    path: str
    name: str
    files: List[File] = field(default_factory=list)

    @property
    def imports(self) -> List[str]:
        """Distinct import paths over all files, sorted."""
        return sorted({imp for f in self.files for imp in f.imports})

    def functions(self) -> Iterator[FuncDecl]:
        for f in self.files:
            yield from f.functions


def iter_child_nodes(node: Node) -> Iterator[Node]:
    """Yield the direct child nodes of ``node`` in field order."""
    for f in fields(node):  # type: ignore[arg-type]
        value = getattr(node, f.name)
        if isinstance(value, Node):
            yield value
        elif isinstance(value, list):
            for item in value:
                if isinstance(item, Node):
                    yield item


def walk(node: Node) -> Iterator[Node]:
    """Yield ``node`` and all of its descendants in depth-first preorder."""
    stack = [node]
    while stack:
        current = stack.pop()
        yield current
        children = list(iter_child_nodes(current))
        stack.extend(reversed(children))


def concrete_node_classes() -> List[type]:
    """All concrete node classes of the model, grouped by kind."""
    result: List[type] = []
    pending = [Node]
    while pending:
        cls = pending.pop()
        for sub in cls.__subclasses__():
            pending.append(sub)
            if sub not in (Expr, Stmt, Decl, Spec):
                result.append(sub)
    return result
