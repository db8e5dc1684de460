"""Converter: tree-sitter Go trees to the closed syntax model.

The converter walks the concrete tree produced by tree-sitter-go and builds
the ``go_complexity.syntax.nodes`` model, shaped the way Go's ``go/ast``
shapes it:

    - ``*x`` in expressions and types becomes StarExpr
    - ``T(x)`` conversions become CallExpr
    - ``x := <-ch`` in a select case becomes an AssignStmt
    - ``[]T``, ``[N]T`` and ``[...]T`` all become ArrayType
    - generic instantiations become IndexExpr

Identifiers are resolved while converting. Each function opens a scope
holding its receiver, type parameters, parameters and named results; each
block, if/for/switch header and case clause opens a nested one. Top-level
functions, types, vars and consts of the file are visible everywhere in the
file regardless of order, except to composite literal keys, which only see
those declared above them. Labels are visible throughout the function that
declares them. The blank identifier binds wherever it is declared but is
never found by lookup.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Callable, Dict, Iterator, List, Optional, Set

from ..exceptions import ParsingError
from ..syntax.nodes import (
    ArrayType,
    AssignStmt,
    BasicLit,
    BinaryExpr,
    BlockStmt,
    BranchStmt,
    CallExpr,
    CaseClause,
    ChanType,
    CommClause,
    CompositeLit,
    Decl,
    DeclStmt,
    DeferStmt,
    Ellipsis,
    EmptyStmt,
    Expr,
    ExprStmt,
    Field,
    ForStmt,
    FuncDecl,
    FuncLit,
    FuncType,
    GenDecl,
    GoStmt,
    Ident,
    IfStmt,
    IncDecStmt,
    IndexExpr,
    InterfaceType,
    KeyValueExpr,
    LabeledStmt,
    MapType,
    ParenExpr,
    Position,
    RangeStmt,
    ReturnStmt,
    SelectorExpr,
    SelectStmt,
    SendStmt,
    SliceExpr,
    Spec,
    StarExpr,
    Stmt,
    StructType,
    SwitchStmt,
    TypeAssertExpr,
    TypeSpec,
    TypeSwitchStmt,
    UnaryExpr,
    ValueSpec,
)
from .scope import Scope


LANGUAGE = "go"

_GEN_DECL_TOKENS = {
    "var_declaration": "var",
    "const_declaration": "const",
    "type_declaration": "type",
}

_LITERAL_KINDS = {
    "int_literal": "INT",
    "float_literal": "FLOAT",
    "imaginary_literal": "IMAG",
    "rune_literal": "CHAR",
    "interpreted_string_literal": "STRING",
    "raw_string_literal": "STRING",
}

_LABELED = ("labeled_statement", "empty_labeled_statement")


def _named(node: Any) -> List[Any]:
    """Named children of ``node`` without comments."""
    return [c for c in node.named_children if c.type != "comment"]


def _has_token(node: Any, token: str) -> bool:
    """True if ``node`` has a present (not error-recovered) ``token`` child."""
    return any(c.type == token and not c.is_named and not c.is_missing for c in node.children)


def _find_error(node: Any) -> Any:
    stack = [node]
    while stack:
        current = stack.pop()
        if current.type == "ERROR" or current.is_missing:
            return current
        stack.extend(reversed(current.children))
    return node


def _specs(decl: Any) -> Iterator[Any]:
    """Specs of a var/const/type declaration, grouped or not."""
    for child in _named(decl):
        if child.type.endswith("_spec_list"):
            yield from _named(child)
        else:
            yield child


class GoTreeConverter:
    """Converts one parsed Go file into syntax-model declarations.

    Usage:
        converter = GoTreeConverter(source_bytes, "store/db.go")
        decls = converter.convert(tree.root_node)

    Raises:
        ParsingError: If the tree contains syntax errors or a construct
            outside the Go grammar the converter knows
    """

    def __init__(self, source: bytes, filename: str):
        self._source = source
        self._filename = filename
        self._scope = Scope()
        self._file_scope = self._scope
        # Top-level names in source order, as far as conversion has reached
        self._file_declared: Set[str] = set()
        self._labels: Set[str] = set()

        self._stmt_handlers: Dict[str, Callable[[Any], Stmt]] = {
            "expression_statement": lambda n: ExprStmt(self._expr(_named(n)[0])),
            "send_statement": self._send,
            "receive_statement": self._receive,
            "inc_statement": lambda n: IncDecStmt(self._expr(_named(n)[0]), "++"),
            "dec_statement": lambda n: IncDecStmt(self._expr(_named(n)[0]), "--"),
            "assignment_statement": self._assignment,
            "short_var_declaration": self._short_var_decl,
            "var_declaration": lambda n: DeclStmt(self._gen_decl(n)),
            "const_declaration": lambda n: DeclStmt(self._gen_decl(n)),
            "type_declaration": lambda n: DeclStmt(self._gen_decl(n)),
            "go_statement": lambda n: GoStmt(self._expr(_named(n)[0])),
            "defer_statement": lambda n: DeferStmt(self._expr(_named(n)[0])),
            "return_statement": self._return,
            "break_statement": self._branch,
            "continue_statement": self._branch,
            "goto_statement": self._branch,
            "fallthrough_statement": self._branch,
            "labeled_statement": self._labeled,
            "empty_labeled_statement": self._labeled,
            "if_statement": self._if,
            "for_statement": self._for,
            "expression_switch_statement": self._switch,
            "type_switch_statement": self._type_switch,
            "select_statement": self._select,
            "block": self._block,
            "empty_statement": lambda n: EmptyStmt(),
        }

        self._expr_handlers: Dict[str, Callable[[Any], Expr]] = {
            "identifier": self._ident,
            "type_identifier": self._ident,
            "package_identifier": self._ident,
            "field_identifier": lambda n: Ident(self._text(n)),
            "label_name": lambda n: Ident(self._text(n), self._text(n) in self._labels),
            "blank_identifier": lambda n: Ident("_"),
            "nil": self._ident,
            "true": self._ident,
            "false": self._ident,
            "iota": self._ident,
            "parenthesized_expression": self._paren,
            "parenthesized_type": self._paren,
            "selector_expression": self._selector,
            "index_expression": self._index,
            "slice_expression": self._slice,
            "type_assertion_expression": self._type_assertion,
            "type_conversion_expression": self._type_conversion,
            "type_instantiation_expression": self._type_instantiation,
            "call_expression": self._call,
            "unary_expression": self._unary,
            "binary_expression": self._binary,
            "composite_literal": self._composite,
            "literal_value": lambda n: self._literal_value(n, None),
            "func_literal": self._func_lit,
            "pointer_type": lambda n: StarExpr(self._expr(_named(n)[0])),
            "array_type": self._array_type,
            "implicit_length_array_type": self._array_type,
            "slice_type": self._array_type,
            "map_type": lambda n: MapType(
                self._expr(n.child_by_field_name("key")), self._expr(n.child_by_field_name("value"))
            ),
            "channel_type": self._channel_type,
            "function_type": self._function_type,
            "struct_type": self._struct_type,
            "interface_type": self._interface_type,
            "qualified_type": self._qualified_type,
            "generic_type": self._generic_type,
            "negated_type": lambda n: UnaryExpr("~", self._expr(_named(n)[0])),
            "type_elem": self._type_elem,
            "type_constraint": self._type_elem,
        }
        for kind in _LITERAL_KINDS:
            self._expr_handlers[kind] = self._basic_lit

    # ------------------------------------------------------------------
    # Entry point
    # ------------------------------------------------------------------

    def convert(self, root: Any) -> List[Decl]:
        """Convert the function and var/const/type declarations of a file.

        The package clause and imports are left to the caller.
        """
        if root.has_error:
            raise self._error(_find_error(root), "syntax error")

        top = _named(root)
        self._declare_file_scope(top)

        decls: List[Decl] = []
        for node in top:
            if node.type in ("function_declaration", "method_declaration"):
                decls.append(self._func_decl(node))
                if node.type == "function_declaration":
                    self._declare_in_file_order(decls[-1].name.name)
            elif node.type in _GEN_DECL_TOKENS:
                decls.append(self._gen_decl(node))
            elif node.type not in ("package_clause", "import_declaration"):
                raise self._error(node, f"unexpected top-level {node.type}")
        return decls

    def _declare_file_scope(self, top: List[Any]) -> None:
        for node in top:
            if node.type == "function_declaration":
                name = self._text(node.child_by_field_name("name"))
                # init functions are never bound
                if name != "init":
                    self._scope.declare(name)
            elif node.type in _GEN_DECL_TOKENS:
                for spec in _specs(node):
                    self._scope.declare_all(
                        self._text(n) for n in spec.children_by_field_name("name")
                    )

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _text(self, node: Any) -> str:
        return self._source[node.start_byte : node.end_byte].decode("utf-8", errors="replace")

    def _position(self, point: Any) -> Position:
        row, column = point
        return Position(self._filename, row + 1, column + 1)

    def _error(self, node: Any, reason: str) -> ParsingError:
        line = node.start_point[0] + 1
        return ParsingError(self._filename, LANGUAGE, f"{reason} at line {line}")  # type: ignore[arg-type]

    @contextmanager
    def _nested_scope(self) -> Iterator[None]:
        saved = self._scope
        self._scope = Scope(saved)
        try:
            yield
        finally:
            self._scope = saved

    @contextmanager
    def _function_scope(self, body: Optional[Any]) -> Iterator[None]:
        saved_scope, saved_labels = self._scope, self._labels
        self._scope = Scope(saved_scope)
        self._labels = self._collect_labels(body)
        try:
            yield
        finally:
            self._scope, self._labels = saved_scope, saved_labels

    def _collect_labels(self, body: Optional[Any]) -> Set[str]:
        """Labels declared in ``body``, not descending into function literals."""
        labels: Set[str] = set()
        if body is None:
            return labels
        stack = [body]
        while stack:
            node = stack.pop()
            if node.type in _LABELED:
                labels.add(self._text(node.child_by_field_name("label")))
            stack.extend(c for c in node.named_children if c.type != "func_literal")
        return labels

    def _declare_targets(self, node: Any) -> List[Expr]:
        """Declare and convert the left-hand side of a ``:=``.

        Every declared identifier binds, ``_`` included, even though the
        blank identifier never enters a scope.
        """
        targets = _named(node) if node.type == "expression_list" else [node]
        result: List[Expr] = []
        for target in targets:
            if target.type in ("identifier", "blank_identifier"):
                name = self._text(target)
                self._scope.declare(name)
                result.append(Ident(name, True))
            else:
                result.append(self._expr(target))
        return result

    def _declare_in_file_order(self, name: str) -> None:
        if self._scope is self._file_scope and name != "init":
            self._file_declared.add(name)

    def _expr_list(self, node: Optional[Any]) -> List[Expr]:
        if node is None:
            return []
        if node.type == "expression_list":
            return [self._expr(c) for c in _named(node)]
        return [self._expr(node)]

    def _clause_body(self, node: Any) -> tuple:
        """Return (colon present, statements) of a case clause."""
        colon = next((c for c in node.children if c.type == ":"), None)
        if colon is None:
            return False, []
        stmt_nodes = [c for c in _named(node) if c.start_byte >= colon.end_byte]
        return not colon.is_missing, self._stmt_list(stmt_nodes)

    # ------------------------------------------------------------------
    # Declarations
    # ------------------------------------------------------------------

    def _func_decl(self, node: Any) -> FuncDecl:
        name = self._text(node.child_by_field_name("name"))
        is_method = node.type == "method_declaration"
        body_node = node.child_by_field_name("body")

        with self._function_scope(body_node):
            recv = self._params(node.child_by_field_name("receiver")) if is_method else None
            self._declare_type_params(node.child_by_field_name("type_parameters"))
            func_type = self._signature(node)
            body = self._block(body_node, scoped=False) if body_node is not None else None

        return FuncDecl(
            name=Ident(name, not is_method and self._scope.lookup(name)),
            type=func_type,
            pos=self._position(node.start_point),
            end=self._position(node.end_point),
            body=body,
            recv=recv,
        )

    def _declare_type_params(self, node: Optional[Any]) -> None:
        if node is None:
            return
        for decl in _named(node):
            self._scope.declare_all(self._text(n) for n in decl.children_by_field_name("name"))

    def _signature(self, node: Any, func_keyword: bool = True) -> FuncType:
        params = self._params(node.child_by_field_name("parameters"))
        result = node.child_by_field_name("result")
        if result is None:
            results: List[Field] = []
        elif result.type == "parameter_list":
            results = self._params(result)
        else:
            results = [Field([], self._expr(result))]
        return FuncType(params, results, func_keyword)

    def _params(self, node: Optional[Any]) -> List[Field]:
        """Convert a parameter list, declaring its names in the current scope."""
        if node is None:
            return []
        result: List[Field] = []
        for decl in _named(node):
            param_type: Expr = self._expr(decl.child_by_field_name("type"))
            if decl.type == "variadic_parameter_declaration":
                param_type = Ellipsis(param_type)
            names = [self._text(n) for n in decl.children_by_field_name("name")]
            self._scope.declare_all(names)
            result.append(Field([Ident(n, True) for n in names], param_type))
        return result

    def _gen_decl(self, node: Any) -> GenDecl:
        group = next((c for c in _named(node) if c.type.endswith("_spec_list")), node)
        specs = [self._spec(s) for s in _specs(node)]
        return GenDecl(
            tok=_GEN_DECL_TOKENS[node.type],
            specs=specs,
            lparen=_has_token(group, "("),
            rparen=_has_token(group, ")"),
        )

    def _spec(self, node: Any) -> Spec:
        if node.type in ("type_spec", "type_alias"):
            name = self._text(node.child_by_field_name("name"))
            self._scope.declare(name)
            self._declare_in_file_order(name)
            with self._nested_scope():
                self._declare_type_params(node.child_by_field_name("type_parameters"))
                spec_type = self._expr(node.child_by_field_name("type"))
            return TypeSpec(Ident(name, True), spec_type)

        if node.type in ("var_spec", "const_spec"):
            type_node = node.child_by_field_name("type")
            spec_type = self._expr(type_node) if type_node is not None else None
            values = self._expr_list(node.child_by_field_name("value"))
            names = [self._text(n) for n in node.children_by_field_name("name")]
            self._scope.declare_all(names)
            for name in names:
                self._declare_in_file_order(name)
            return ValueSpec([Ident(n, True) for n in names], spec_type, values)

        raise self._error(node, f"unsupported declaration {node.type}")

    # ------------------------------------------------------------------
    # Statements
    # ------------------------------------------------------------------

    def _stmt(self, node: Any) -> Stmt:
        handler = self._stmt_handlers.get(node.type)
        if handler is None:
            # A bare expression in a simple-statement position
            if node.type in self._expr_handlers:
                return ExprStmt(self._expr(node))
            raise self._error(node, f"unsupported statement {node.type}")
        return handler(node)

    def _opt_stmt(self, node: Optional[Any]) -> Optional[Stmt]:
        return self._stmt(node) if node is not None else None

    def _stmt_list(self, nodes: List[Any]) -> List[Stmt]:
        result: List[Stmt] = []
        for node in nodes:
            if node.type == "statement_list":
                result.extend(self._stmt_list(_named(node)))
            else:
                result.append(self._stmt(node))
        return result

    def _block(self, node: Any, scoped: bool = True) -> BlockStmt:
        if scoped:
            with self._nested_scope():
                stmts = self._stmt_list(_named(node))
        else:
            stmts = self._stmt_list(_named(node))
        return BlockStmt(stmts, lbrace=_has_token(node, "{"), rbrace=_has_token(node, "}"))

    def _send(self, node: Any) -> SendStmt:
        return SendStmt(
            self._expr(node.child_by_field_name("channel")),
            self._expr(node.child_by_field_name("value")),
        )

    def _receive(self, node: Any) -> Stmt:
        right = self._expr(node.child_by_field_name("right"))
        left = node.child_by_field_name("left")
        if left is None:
            return ExprStmt(right)
        if _has_token(node, ":="):
            return AssignStmt(self._declare_targets(left), ":=", [right])
        return AssignStmt(self._expr_list(left), "=", [right])

    def _assignment(self, node: Any) -> AssignStmt:
        rhs = self._expr_list(node.child_by_field_name("right"))
        lhs = self._expr_list(node.child_by_field_name("left"))
        return AssignStmt(lhs, self._text(node.child_by_field_name("operator")), rhs)

    def _short_var_decl(self, node: Any) -> AssignStmt:
        rhs = self._expr_list(node.child_by_field_name("right"))
        return AssignStmt(self._declare_targets(node.child_by_field_name("left")), ":=", rhs)

    def _return(self, node: Any) -> ReturnStmt:
        children = _named(node)
        return ReturnStmt(self._expr_list(children[0]) if children else [])

    def _branch(self, node: Any) -> BranchStmt:
        tok = node.type[: -len("_statement")]
        label = next((c for c in _named(node) if c.type == "label_name"), None)
        return BranchStmt(tok, self._expr(label) if label is not None else None)  # type: ignore[arg-type]

    def _labeled(self, node: Any) -> LabeledStmt:
        label_node = node.child_by_field_name("label")
        rest = [c for c in _named(node) if c.start_byte >= label_node.end_byte]
        stmt = self._stmt(rest[0]) if rest else EmptyStmt()
        return LabeledStmt(Ident(self._text(label_node), True), stmt)

    def _if(self, node: Any) -> IfStmt:
        with self._nested_scope():
            init = self._opt_stmt(node.child_by_field_name("initializer"))
            cond = self._expr(node.child_by_field_name("condition"))
            body = self._block(node.child_by_field_name("consequence"))
            else_ = self._opt_stmt(node.child_by_field_name("alternative"))
        return IfStmt(cond, body, init, else_)

    def _for(self, node: Any) -> Stmt:
        body_node = node.child_by_field_name("body")
        header = next((c for c in _named(node) if c.end_byte <= body_node.start_byte), None)

        with self._nested_scope():
            if header is not None and header.type == "range_clause":
                return self._range(header, body_node)
            if header is None:
                return ForStmt(self._block(body_node))
            if header.type != "for_clause":
                cond = self._expr(header)
                return ForStmt(self._block(body_node), cond=cond)

            init = self._opt_stmt(header.child_by_field_name("initializer"))
            cond_node = header.child_by_field_name("condition")
            cond = self._expr(cond_node) if cond_node is not None else None
            post = self._opt_stmt(header.child_by_field_name("update"))
            return ForStmt(self._block(body_node), init, cond, post)

    def _range(self, header: Any, body_node: Any) -> RangeStmt:
        x = self._expr(header.child_by_field_name("right"))
        left = header.child_by_field_name("left")
        key = value = None
        tok = ""
        if left is not None:
            tok = ":=" if _has_token(header, ":=") else "="
            targets = self._declare_targets(left) if tok == ":=" else self._expr_list(left)
            key = targets[0]
            value = targets[1] if len(targets) > 1 else None
        return RangeStmt(x, self._block(body_node), key, value, tok)

    def _switch(self, node: Any) -> SwitchStmt:
        with self._nested_scope():
            init = self._opt_stmt(node.child_by_field_name("initializer"))
            value = node.child_by_field_name("value")
            tag = self._expr(value) if value is not None else None
            clauses: List[Stmt] = [
                self._case_clause(c)
                for c in _named(node)
                if c.type in ("expression_case", "default_case")
            ]
        body = BlockStmt(clauses, lbrace=_has_token(node, "{"), rbrace=_has_token(node, "}"))
        return SwitchStmt(body, init, tag)

    def _case_clause(self, node: Any) -> CaseClause:
        with self._nested_scope():
            if node.type == "default_case":
                exprs: Optional[List[Expr]] = None
            elif node.type == "type_case":
                exprs = [self._expr(t) for t in node.children_by_field_name("type")]
            else:
                exprs = self._expr_list(node.child_by_field_name("value"))
            colon, body = self._clause_body(node)
        return CaseClause(exprs, body, colon)

    def _type_switch(self, node: Any) -> TypeSwitchStmt:
        with self._nested_scope():
            init = self._opt_stmt(node.child_by_field_name("initializer"))
            guard = TypeAssertExpr(
                self._expr(node.child_by_field_name("value")),
                None,
                lparen=_has_token(node, "("),
                rparen=_has_token(node, ")"),
            )
            alias = node.child_by_field_name("alias")
            if alias is not None:
                assign: Stmt = AssignStmt(self._declare_targets(alias), ":=", [guard])
            else:
                assign = ExprStmt(guard)
            clauses: List[Stmt] = [
                self._case_clause(c) for c in _named(node) if c.type in ("type_case", "default_case")
            ]
        body = BlockStmt(clauses, lbrace=_has_token(node, "{"), rbrace=_has_token(node, "}"))
        return TypeSwitchStmt(assign, body, init)

    def _select(self, node: Any) -> SelectStmt:
        clauses: List[Stmt] = [
            self._comm_clause(c)
            for c in _named(node)
            if c.type in ("communication_case", "default_case")
        ]
        return SelectStmt(BlockStmt(clauses, lbrace=_has_token(node, "{"), rbrace=_has_token(node, "}")))

    def _comm_clause(self, node: Any) -> CommClause:
        with self._nested_scope():
            comm = self._opt_stmt(node.child_by_field_name("communication"))
            colon, body = self._clause_body(node)
        return CommClause(comm, body, colon)

    # ------------------------------------------------------------------
    # Expressions and types
    # ------------------------------------------------------------------

    def _expr(self, node: Any) -> Expr:
        handler = self._expr_handlers.get(node.type)
        if handler is None:
            raise self._error(node, f"unsupported expression {node.type}")
        return handler(node)

    def _ident(self, node: Any) -> Ident:
        name = self._text(node)
        return Ident(name, self._scope.lookup(name))

    def _basic_lit(self, node: Any) -> BasicLit:
        return BasicLit(_LITERAL_KINDS[node.type], self._text(node))

    def _paren(self, node: Any) -> ParenExpr:
        return ParenExpr(
            self._expr(_named(node)[0]), lparen=_has_token(node, "("), rparen=_has_token(node, ")")
        )

    def _selector(self, node: Any) -> SelectorExpr:
        return SelectorExpr(
            self._expr(node.child_by_field_name("operand")),
            Ident(self._text(node.child_by_field_name("field"))),
        )

    def _index(self, node: Any) -> IndexExpr:
        return IndexExpr(
            self._expr(node.child_by_field_name("operand")),
            [self._expr(c) for c in node.children_by_field_name("index")],
            lbrack=_has_token(node, "["),
            rbrack=_has_token(node, "]"),
        )

    def _slice(self, node: Any) -> SliceExpr:
        def opt(name: str) -> Optional[Expr]:
            child = node.child_by_field_name(name)
            return self._expr(child) if child is not None else None

        return SliceExpr(
            self._expr(node.child_by_field_name("operand")),
            opt("start"),
            opt("end"),
            opt("capacity"),
            lbrack=_has_token(node, "["),
            rbrack=_has_token(node, "]"),
        )

    def _type_assertion(self, node: Any) -> TypeAssertExpr:
        return TypeAssertExpr(
            self._expr(node.child_by_field_name("operand")),
            self._expr(node.child_by_field_name("type")),
            lparen=_has_token(node, "("),
            rparen=_has_token(node, ")"),
        )

    def _type_conversion(self, node: Any) -> CallExpr:
        return CallExpr(
            self._expr(node.child_by_field_name("type")),
            [self._expr(node.child_by_field_name("operand"))],
            lparen=_has_token(node, "("),
            rparen=_has_token(node, ")"),
        )

    def _type_instantiation(self, node: Any) -> IndexExpr:
        children = _named(node)
        return IndexExpr(
            self._expr(children[0]),
            [self._expr(c) for c in children[1:]],
            lbrack=_has_token(node, "["),
            rbrack=_has_token(node, "]"),
        )

    def _type_args(self, node: Any) -> List[Expr]:
        return [self._expr(c) for c in _named(node)]

    def _call(self, node: Any) -> CallExpr:
        fun = self._expr(node.child_by_field_name("function"))
        type_args = node.child_by_field_name("type_arguments")
        if type_args is not None:
            fun = IndexExpr(
                fun,
                self._type_args(type_args),
                lbrack=_has_token(type_args, "["),
                rbrack=_has_token(type_args, "]"),
            )

        arguments = node.child_by_field_name("arguments")
        args: List[Expr] = []
        ellipsis = False
        for arg in _named(arguments):
            if arg.type == "variadic_argument":
                ellipsis = True
                arg = _named(arg)[0]
            args.append(self._expr(arg))
        return CallExpr(
            fun,
            args,
            ellipsis,
            lparen=_has_token(arguments, "("),
            rparen=_has_token(arguments, ")"),
        )

    def _unary(self, node: Any) -> Expr:
        op = self._text(node.child_by_field_name("operator"))
        operand = self._expr(node.child_by_field_name("operand"))
        if op == "*":
            return StarExpr(operand)
        return UnaryExpr(op, operand)

    def _binary(self, node: Any) -> BinaryExpr:
        return BinaryExpr(
            self._expr(node.child_by_field_name("left")),
            self._text(node.child_by_field_name("operator")),
            self._expr(node.child_by_field_name("right")),
        )

    def _composite(self, node: Any) -> CompositeLit:
        return self._literal_value(
            node.child_by_field_name("body"), self._expr(node.child_by_field_name("type"))
        )

    def _literal_value(self, node: Any, lit_type: Optional[Expr]) -> CompositeLit:
        elts: List[Expr] = []
        for element in _named(node):
            if element.type == "keyed_element":
                elts.append(self._keyed(element))
            else:
                elts.append(self._element(element))
        return CompositeLit(
            lit_type, elts, lbrace=_has_token(node, "{"), rbrace=_has_token(node, "}")
        )

    def _element(self, node: Any) -> Expr:
        if node.type == "literal_element":
            node = _named(node)[0]
        return self._expr(node)

    def _keyed(self, node: Any) -> KeyValueExpr:
        parts = _named(node)
        key_node = parts[0]
        if key_node.type == "literal_element":
            key_node = _named(key_node)[0]
        if key_node.type in ("identifier", "field_identifier"):
            # Keys never see top-level names declared further down the file
            name = self._text(key_node)
            bound = self._scope.lookup(name, stop=self._file_scope) or name in self._file_declared
            key: Expr = Ident(name, bound)
        else:
            key = self._expr(key_node)
        return KeyValueExpr(key, self._element(parts[-1]), colon=_has_token(node, ":"))

    def _func_lit(self, node: Any) -> FuncLit:
        body_node = node.child_by_field_name("body")
        with self._function_scope(body_node):
            func_type = self._signature(node)
            body = self._block(body_node, scoped=False)
        return FuncLit(func_type, body)

    def _array_type(self, node: Any) -> ArrayType:
        length: Optional[Expr] = None
        if node.type == "array_type":
            length = self._expr(node.child_by_field_name("length"))
        elif node.type == "implicit_length_array_type":
            length = Ellipsis()
        return ArrayType(
            self._expr(node.child_by_field_name("element")),
            length,
            lbrack=_has_token(node, "["),
            rbrack=_has_token(node, "]"),
        )

    def _channel_type(self, node: Any) -> ChanType:
        tokens = [c.type for c in node.children if not c.is_named]
        if tokens and tokens[0] == "<-":
            direction = "recv"
        elif "<-" in tokens:
            direction = "send"
        else:
            direction = "both"
        return ChanType(self._expr(node.child_by_field_name("value")), direction)

    def _function_type(self, node: Any) -> FuncType:
        with self._nested_scope():
            return self._signature(node)

    def _struct_type(self, node: Any) -> StructType:
        field_list = next(c for c in _named(node) if c.type == "field_declaration_list")
        struct_fields: List[Field] = []
        for decl in _named(field_list):
            field_type = self._expr(decl.child_by_field_name("type"))
            names = decl.children_by_field_name("name")
            if not names and _has_token(decl, "*"):
                field_type = StarExpr(field_type)
            struct_fields.append(Field([Ident(self._text(n), True) for n in names], field_type))
        return StructType(
            struct_fields, lbrace=_has_token(field_list, "{"), rbrace=_has_token(field_list, "}")
        )

    def _interface_type(self, node: Any) -> InterfaceType:
        methods: List[Field] = []
        for elem in _named(node):
            if elem.type in ("method_elem", "method_spec"):
                name = Ident(self._text(elem.child_by_field_name("name")), True)
                with self._nested_scope():
                    signature = self._signature(elem, func_keyword=False)
                methods.append(Field([name], signature))
            else:
                methods.append(Field([], self._expr(elem)))
        return InterfaceType(methods, lbrace=_has_token(node, "{"), rbrace=_has_token(node, "}"))

    def _qualified_type(self, node: Any) -> SelectorExpr:
        return SelectorExpr(
            self._ident(node.child_by_field_name("package")),
            Ident(self._text(node.child_by_field_name("name"))),
        )

    def _generic_type(self, node: Any) -> IndexExpr:
        type_args = node.child_by_field_name("type_arguments")
        return IndexExpr(
            self._expr(node.child_by_field_name("type")),
            self._type_args(type_args),
            lbrack=_has_token(type_args, "["),
            rbrack=_has_token(type_args, "]"),
        )

    def _type_elem(self, node: Any) -> Expr:
        """A type or a ``A | B`` union of types."""
        terms = [self._expr(c) for c in _named(node)]
        result = terms[0]
        for term in terms[1:]:
            result = BinaryExpr(result, "|", term)
        return result
