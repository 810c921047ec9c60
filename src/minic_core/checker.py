"""Semantic pass: scope population and static type inference.

``analyze`` walks a program, declaring symbols into a ``ScopeManager`` as it
goes, and infers the type of every expression it meets.  Unresolved
identifiers are counted and reported, never raised, so one pass surfaces
every error.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import IO

from .ast import (
    NODE_TYPES,
    Assign,
    BinaryExpr,
    Block,
    Call,
    ClassDef,
    Dot,
    FuncDef,
    Identifier,
    If,
    Literal,
    Main,
    MemberAssign,
    MethodCall,
    Node,
    Print,
    Program,
    Return,
    VarDecl,
    While,
)
from .errors import UnknownNodeError
from .literals import literal_type
from .symbols import CLASS, FUNCTION, VARIABLE, ScopeManager, SymbolInfo
from .typeinfo import BOOL, UNKNOWN, TypeInfo

# Operators whose result is bool whatever their operands are.
BOOL_OPERATORS = frozenset({"==", "!=", "<", ">", "<=", ">=", "&&", "||", "!"})


# ---------------------------------------------------------------------------
# Analysis context
# ---------------------------------------------------------------------------

@dataclass
class AnalysisContext:
    """State of one analysis run: the scope chain and the error counter."""

    scopes: ScopeManager = field(default_factory=ScopeManager)
    errors: int = 0
    err: IO[str] = field(default_factory=lambda: sys.stderr)

    def error(self, message: str, line: int) -> None:
        print(f"Error: {message} at line {line}", file=self.err)
        self.errors += 1

    def warning(self, message: str, line: int) -> None:
        print(f"Warning: {message} at line {line}", file=self.err)


# ---------------------------------------------------------------------------
# Type inference
# ---------------------------------------------------------------------------

def is_lvalue(node: Node) -> bool:
    """True for nodes that may appear on the left of an assignment."""
    return isinstance(node, (Identifier, Dot))


def infer_type(node: Node | None, ctx: AnalysisContext) -> TypeInfo:
    """Static type of *node* in the current scope of *ctx*."""
    if node is None:
        return UNKNOWN

    if isinstance(node, Literal):
        return literal_type(node.text)

    if isinstance(node, Identifier):
        sym = ctx.scopes.lookup(node.name)
        if sym is None:
            ctx.error(f"Semantic Error: Variable '{node.name}' undefined.", node.line)
            return UNKNOWN
        return sym.type

    if isinstance(node, Assign):
        sym = ctx.scopes.lookup(node.name)
        return sym.type if sym is not None else UNKNOWN

    if isinstance(node, BinaryExpr):
        left = infer_type(node.left, ctx)
        right = infer_type(node.right, ctx)
        if node.op in BOOL_OPERATORS:
            return BOOL
        if left.is_unknown or right.is_unknown:
            return UNKNOWN
        if left != right:
            return UNKNOWN
        return left

    if isinstance(node, Call):
        sym = ctx.scopes.lookup(node.name)
        return sym.type if sym is not None else UNKNOWN

    if isinstance(node, Dot):
        return _infer_dot(node, ctx)

    if isinstance(node, MemberAssign):
        return infer_type(node.value, ctx)

    if isinstance(node, MethodCall):
        if not isinstance(node.obj, Identifier):
            return UNKNOWN
        sym = ctx.scopes.lookup(node.obj.name)
        if sym is None or not sym.type.is_class:
            return UNKNOWN
        method = ctx.scopes.lookup_in_class(sym.type.class_name, node.method)
        if method is None or method.category != FUNCTION:
            return UNKNOWN
        return method.type

    if isinstance(node, NODE_TYPES):
        return UNKNOWN
    raise UnknownNodeError(node)


def _infer_dot(node: Dot, ctx: AnalysisContext) -> TypeInfo:
    # Only ``name.member``; chained access is not resolved.
    if not isinstance(node.obj, Identifier):
        return UNKNOWN
    name = node.obj.name
    sym = ctx.scopes.lookup(name)
    if sym is None:
        return UNKNOWN
    if sym.type.is_class:
        member = ctx.scopes.lookup_in_class(sym.type.class_name, node.member)
        if member is not None:
            return member.type
    # Static access through the class name itself.
    if name in ctx.scopes.class_scopes:
        member = ctx.scopes.lookup_in_class(name, node.member)
        if member is not None:
            return member.type
    return UNKNOWN


# ---------------------------------------------------------------------------
# Analysis walk
# ---------------------------------------------------------------------------

def analyze(program: Program, ctx: AnalysisContext | None = None) -> AnalysisContext:
    """Run the semantic pass over *program*; returns the populated context.

    ``ctx.errors`` holds the number of semantic errors found.
    """
    if ctx is None:
        ctx = AnalysisContext()
    _check(program, ctx)
    return ctx


def _check(node: Node, ctx: AnalysisContext) -> None:
    if isinstance(node, Program):
        for decl in node.globals:
            _check(decl, ctx)
        if node.main is not None:
            _check(node.main, ctx)
        return

    if isinstance(node, Main):
        ctx.scopes.enter_scope("main")
        _check_statements(node.body.statements, ctx)
        ctx.scopes.exit_scope()
        return

    if isinstance(node, Block):
        ctx.scopes.enter_scope("block")
        _check_statements(node.statements, ctx)
        ctx.scopes.exit_scope()
        return

    if isinstance(node, VarDecl):
        _declare_variable(node, ctx)
        return

    if isinstance(node, FuncDef):
        _check_function(node, ctx)
        return

    if isinstance(node, ClassDef):
        _check_class(node, ctx)
        return

    if isinstance(node, (If, While)):
        _infer_expr(node.condition, ctx)
        _check(node.then if isinstance(node, If) else node.body, ctx)
        return

    if isinstance(node, Print):
        _infer_expr(node.expr, ctx)
        return

    if isinstance(node, Return):
        if node.expr is not None:
            _infer_expr(node.expr, ctx)
        return

    if isinstance(node, Assign):
        infer_type(node, ctx)
        _infer_expr(node.value, ctx)
        sym = ctx.scopes.lookup(node.name)
        if sym is not None and sym.category == VARIABLE and isinstance(node.value, Literal):
            sym.value = node.value.text
        return

    # Expression statement
    _infer_expr(node, ctx)


def _check_statements(statements, ctx: AnalysisContext) -> None:
    for stmt in statements:
        _check(stmt, ctx)


def _declare_variable(node: VarDecl, ctx: AnalysisContext) -> None:
    if node.init is not None:
        _infer_expr(node.init, ctx)
    sym = SymbolInfo(
        name=node.name,
        type=node.type,
        category=VARIABLE,
        class_name=node.type.class_name,
        value=node.init.text if isinstance(node.init, Literal) else "",
    )
    if not ctx.scopes.add_symbol(sym):
        ctx.warning(
            f"'{node.name}' already declared in scope '{ctx.scopes.current_scope.name}'",
            node.line,
        )


def _check_function(node: FuncDef, ctx: AnalysisContext) -> None:
    sym = SymbolInfo(name=node.name, type=node.return_type, category=FUNCTION)
    added = ctx.scopes.add_symbol(sym)
    if not added:
        ctx.warning(
            f"'{node.name}' already declared in scope '{ctx.scopes.current_scope.name}'",
            node.line,
        )

    ctx.scopes.enter_scope(node.name)
    for param in node.params:
        _declare_variable(param, ctx)
    _check_statements(node.body.statements, ctx)
    ctx.scopes.exit_scope()

    if added:
        ctx.scopes.update_function_params(node.name, [p.type for p in node.params])


def _check_class(node: ClassDef, ctx: AnalysisContext) -> None:
    sym = SymbolInfo(
        name=node.name,
        type=TypeInfo.of_class(node.name),
        category=CLASS,
        class_name=node.name,
    )
    if not ctx.scopes.add_symbol(sym):
        ctx.warning(
            f"'{node.name}' already declared in scope '{ctx.scopes.current_scope.name}'",
            node.line,
        )

    ctx.scopes.enter_scope(node.name)
    for member in node.members:
        _check(member, ctx)
    ctx.scopes.save_class_scope(node.name)
    ctx.scopes.exit_scope()


def _infer_expr(node: Node, ctx: AnalysisContext) -> TypeInfo:
    """``infer_type`` plus a visit of call arguments, which it skips."""
    result = infer_type(node, ctx)
    _visit_call_args(node, ctx)
    return result


def _visit_call_args(node: Node | None, ctx: AnalysisContext) -> None:
    if isinstance(node, (Call, MethodCall)):
        for arg in node.args:
            _infer_expr(arg, ctx)
        if isinstance(node, MethodCall):
            _visit_call_args(node.obj, ctx)
    elif isinstance(node, BinaryExpr):
        _visit_call_args(node.left, ctx)
        _visit_call_args(node.right, ctx)
    elif isinstance(node, Dot):
        _visit_call_args(node.obj, ctx)
    elif isinstance(node, MemberAssign):
        _visit_call_args(node.value, ctx)
    elif isinstance(node, Assign):
        _infer_expr(node.value, ctx)
