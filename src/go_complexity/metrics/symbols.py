"""Operator/operand classification for Halstead metrics.

Each syntax construct contributes zero or more textual tokens, tagged as
operator or operand by a fixed per-construct rule:

    - bracketing pairs count once per construct as "()", "{}" or "[]",
      and only when both delimiters are present
    - keywords and punctuation operators are operators keyed by their text;
      declaration and branch keywords go wherever ``is_operator`` sends them
      (the operand table, since they are not operator tokens)
    - literals are operands keyed by their source text
    - identifiers the parser could NOT resolve are operators, resolved
      identifiers are operands

The identifier rule is the inverse of what one would guess. Thresholds
tuned against the Go tooling depend on it, so it is kept as is.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Callable, Dict, Iterable, Optional

from ..syntax import nodes as ast
from ..syntax.tokens import is_operator


@dataclass
class TokenTables:
    """Operator and operand frequency tables of one function."""

    operators: Counter = field(default_factory=Counter)
    operands: Counter = field(default_factory=Counter)

    @property
    def distinct_operators(self) -> int:
        return len(self.operators)

    @property
    def distinct_operands(self) -> int:
        return len(self.operands)

    @property
    def total_operators(self) -> int:
        return sum(self.operators.values())

    @property
    def total_operands(self) -> int:
        return sum(self.operands.values())


def classify(node: ast.Node) -> TokenTables:
    """Walk ``node`` and return fresh operator/operand tables for it."""
    classifier = _Classifier()
    classifier.visit(node)
    return classifier.tables


class _Classifier:
    def __init__(self) -> None:
        self.tables = TokenTables()
        self._opt = self.tables.operators
        self._opd = self.tables.operands

    def visit(self, node: Optional[ast.Node]) -> None:
        if node is None:
            return
        handler = _DISPATCH.get(type(node))
        if handler is None:
            raise TypeError(f"no symbol rule for node type {type(node).__name__}")
        handler(self, node)

    def visit_all(self, nodes: Optional[Iterable[ast.Node]]) -> None:
        for n in nodes or ():
            self.visit(n)

    # -- helpers --

    def _pair(self, opened: bool, closed: bool, symbol: str) -> None:
        if opened and closed:
            self._opt[symbol] += 1

    def _token(self, tok: str) -> None:
        if is_operator(tok):
            self._opt[tok] += 1
        else:
            self._opd[tok] += 1

    # -- declarations --

    def _func_decl(self, n: ast.FuncDecl) -> None:
        self._opt["func"] += 1
        self._opt[n.name.name] += 1
        self._opt["()"] += 2 if n.is_method else 1
        self.visit(n.body)

    def _gen_decl(self, n: ast.GenDecl) -> None:
        self._pair(n.lparen, n.rparen, "()")
        self._token(n.tok)
        self.visit_all(n.specs)

    def _value_spec(self, n: ast.ValueSpec) -> None:
        # Type and values are counted once per declared name.
        for name in n.names:
            self.visit(name)
            self.visit(n.type)
            self.visit_all(n.values)

    def _type_spec(self, n: ast.TypeSpec) -> None:
        self.visit(n.name)
        self.visit(n.type)

    def _import_spec(self, n: ast.ImportSpec) -> None:
        pass

    # -- statements --

    def _decl_stmt(self, n: ast.DeclStmt) -> None:
        self.visit(n.decl)

    def _empty_stmt(self, n: ast.EmptyStmt) -> None:
        pass

    def _labeled_stmt(self, n: ast.LabeledStmt) -> None:
        self.visit(n.label)
        self._opt[":"] += 1
        self.visit(n.stmt)

    def _expr_stmt(self, n: ast.ExprStmt) -> None:
        self.visit(n.x)

    def _send_stmt(self, n: ast.SendStmt) -> None:
        self.visit(n.chan)
        self._opt["<-"] += 1
        self.visit(n.value)

    def _inc_dec_stmt(self, n: ast.IncDecStmt) -> None:
        self.visit(n.x)
        self._token(n.tok)

    def _assign_stmt(self, n: ast.AssignStmt) -> None:
        self._token(n.tok)
        self.visit_all(n.lhs)
        self.visit_all(n.rhs)

    def _go_stmt(self, n: ast.GoStmt) -> None:
        self._opt["go"] += 1
        self.visit(n.call)

    def _defer_stmt(self, n: ast.DeferStmt) -> None:
        self._opt["defer"] += 1
        self.visit(n.call)

    def _return_stmt(self, n: ast.ReturnStmt) -> None:
        self._opt["return"] += 1
        self.visit_all(n.results)

    def _branch_stmt(self, n: ast.BranchStmt) -> None:
        self._token(n.tok)
        self.visit(n.label)

    def _block_stmt(self, n: ast.BlockStmt) -> None:
        self._pair(n.lbrace, n.rbrace, "{}")
        self.visit_all(n.stmts)

    def _if_stmt(self, n: ast.IfStmt) -> None:
        self._opt["if"] += 1
        self.visit(n.init)
        self.visit(n.cond)
        self.visit(n.body)
        if n.else_ is not None:
            self._opt["else"] += 1
            self.visit(n.else_)

    def _switch_stmt(self, n: ast.SwitchStmt) -> None:
        self._opt["switch"] += 1
        self.visit(n.init)
        self.visit(n.tag)
        self.visit(n.body)

    def _type_switch_stmt(self, n: ast.TypeSwitchStmt) -> None:
        self._opt["switch"] += 1
        self.visit(n.init)
        self.visit(n.assign)
        self.visit(n.body)

    def _select_stmt(self, n: ast.SelectStmt) -> None:
        self._opt["select"] += 1
        self.visit(n.body)

    def _for_stmt(self, n: ast.ForStmt) -> None:
        self._opt["for"] += 1
        self.visit(n.init)
        self.visit(n.cond)
        self.visit(n.post)
        self.visit(n.body)

    def _range_stmt(self, n: ast.RangeStmt) -> None:
        self._opt["for"] += 1
        if n.key is not None:
            self.visit(n.key)
            self._token(n.tok)
        self.visit(n.value)
        self._opt["range"] += 1
        self.visit(n.x)
        self.visit(n.body)

    def _case_clause(self, n: ast.CaseClause) -> None:
        if n.exprs is None:
            self._opt["default"] += 1
        else:
            self.visit_all(n.exprs)
        if n.colon:
            self._opt[":"] += 1
        self.visit_all(n.body)

    def _comm_clause(self, n: ast.CommClause) -> None:
        if n.comm is None:
            self._opt["default"] += 1
        else:
            self.visit(n.comm)
        if n.colon:
            self._opt[":"] += 1
        self.visit_all(n.body)

    # -- expressions --

    def _ident(self, n: ast.Ident) -> None:
        if n.resolved:
            self._opd[n.name] += 1
        else:
            self._opt[n.name] += 1

    def _basic_lit(self, n: ast.BasicLit) -> None:
        self._opd[n.value] += 1

    def _paren_expr(self, n: ast.ParenExpr) -> None:
        self._pair(n.lparen, n.rparen, "()")
        self.visit(n.x)

    def _selector_expr(self, n: ast.SelectorExpr) -> None:
        self.visit(n.x)
        self.visit(n.sel)

    def _index_expr(self, n: ast.IndexExpr) -> None:
        self.visit(n.x)
        self._pair(n.lbrack, n.rbrack, "[]")
        self.visit_all(n.indices)

    def _slice_expr(self, n: ast.SliceExpr) -> None:
        self.visit(n.x)
        self._pair(n.lbrack, n.rbrack, "[]")
        self.visit(n.low)
        self.visit(n.high)
        self.visit(n.max)

    def _type_assert_expr(self, n: ast.TypeAssertExpr) -> None:
        self.visit(n.x)
        self._pair(n.lparen, n.rparen, "()")
        self.visit(n.type)

    def _call_expr(self, n: ast.CallExpr) -> None:
        self.visit(n.fun)
        self._pair(n.lparen, n.rparen, "()")
        if n.ellipsis:
            self._opt["..."] += 1
        self.visit_all(n.args)

    def _star_expr(self, n: ast.StarExpr) -> None:
        self._opt["*"] += 1
        self.visit(n.x)

    def _unary_expr(self, n: ast.UnaryExpr) -> None:
        self._token(n.op)
        self.visit(n.x)

    def _binary_expr(self, n: ast.BinaryExpr) -> None:
        self.visit(n.x)
        self._opt[n.op] += 1
        self.visit(n.y)

    def _key_value_expr(self, n: ast.KeyValueExpr) -> None:
        self.visit(n.key)
        if n.colon:
            self._opt[":"] += 1
        self.visit(n.value)

    def _func_lit(self, n: ast.FuncLit) -> None:
        self.visit(n.type)
        self.visit(n.body)

    def _composite_lit(self, n: ast.CompositeLit) -> None:
        self._pair(n.lbrace, n.rbrace, "{}")
        self.visit(n.type)
        self.visit_all(n.elts)

    def _ellipsis(self, n: ast.Ellipsis) -> None:
        self._opt["..."] += 1
        self.visit(n.elt)

    def _field(self, n: ast.Field) -> None:
        # Only the type of a parameter or field is significant.
        self.visit(n.type)

    def _func_type(self, n: ast.FuncType) -> None:
        if n.func_keyword:
            self._opt["func"] += 1
        self._opt["()"] += 1
        self.visit_all(n.params)
        self.visit_all(n.results)

    def _chan_type(self, n: ast.ChanType) -> None:
        self._opt["chan"] += 1
        if n.arrow:
            self._opt["<-"] += 1
        self.visit(n.value)

    def _array_type(self, n: ast.ArrayType) -> None:
        self._pair(n.lbrack, n.rbrack, "[]")
        self.visit(n.len)
        self.visit(n.elt)

    def _map_type(self, n: ast.MapType) -> None:
        self._opt["map"] += 1
        self._opt["[]"] += 1
        self.visit(n.key)
        self.visit(n.value)

    def _struct_type(self, n: ast.StructType) -> None:
        self._opt["struct"] += 1
        self._pair(n.lbrace, n.rbrace, "{}")
        self.visit_all(n.fields)

    def _interface_type(self, n: ast.InterfaceType) -> None:
        self._opt["interface"] += 1
        self._pair(n.lbrace, n.rbrace, "{}")
        self.visit_all(n.methods)


_DISPATCH: Dict[type, Callable[[_Classifier, ast.Node], None]] = {
    ast.FuncDecl: _Classifier._func_decl,
    ast.GenDecl: _Classifier._gen_decl,
    ast.ValueSpec: _Classifier._value_spec,
    ast.TypeSpec: _Classifier._type_spec,
    ast.ImportSpec: _Classifier._import_spec,
    ast.DeclStmt: _Classifier._decl_stmt,
    ast.EmptyStmt: _Classifier._empty_stmt,
    ast.LabeledStmt: _Classifier._labeled_stmt,
    ast.ExprStmt: _Classifier._expr_stmt,
    ast.SendStmt: _Classifier._send_stmt,
    ast.IncDecStmt: _Classifier._inc_dec_stmt,
    ast.AssignStmt: _Classifier._assign_stmt,
    ast.GoStmt: _Classifier._go_stmt,
    ast.DeferStmt: _Classifier._defer_stmt,
    ast.ReturnStmt: _Classifier._return_stmt,
    ast.BranchStmt: _Classifier._branch_stmt,
    ast.BlockStmt: _Classifier._block_stmt,
    ast.IfStmt: _Classifier._if_stmt,
    ast.SwitchStmt: _Classifier._switch_stmt,
    ast.TypeSwitchStmt: _Classifier._type_switch_stmt,
    ast.SelectStmt: _Classifier._select_stmt,
    ast.ForStmt: _Classifier._for_stmt,
    ast.RangeStmt: _Classifier._range_stmt,
    ast.CaseClause: _Classifier._case_clause,
    ast.CommClause: _Classifier._comm_clause,
    ast.Ident: _Classifier._ident,
    ast.BasicLit: _Classifier._basic_lit,
    ast.ParenExpr: _Classifier._paren_expr,
    ast.SelectorExpr: _Classifier._selector_expr,
    ast.IndexExpr: _Classifier._index_expr,
    ast.SliceExpr: _Classifier._slice_expr,
    ast.TypeAssertExpr: _Classifier._type_assert_expr,
    ast.CallExpr: _Classifier._call_expr,
    ast.StarExpr: _Classifier._star_expr,
    ast.UnaryExpr: _Classifier._unary_expr,
    ast.BinaryExpr: _Classifier._binary_expr,
    ast.KeyValueExpr: _Classifier._key_value_expr,
    ast.FuncLit: _Classifier._func_lit,
    ast.CompositeLit: _Classifier._composite_lit,
    ast.Ellipsis: _Classifier._ellipsis,
    ast.Field: _Classifier._field,
    ast.FuncType: _Classifier._func_type,
    ast.ChanType: _Classifier._chan_type,
    ast.ArrayType: _Classifier._array_type,
    ast.MapType: _Classifier._map_type,
    ast.StructType: _Classifier._struct_type,
    ast.InterfaceType: _Classifier._interface_type,
}
