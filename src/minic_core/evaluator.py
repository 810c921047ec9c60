"""Evaluator: direct tree-walking execution of a MiniC program."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import IO

from .ast import (
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
from .environment import Environment
from .errors import UnknownNodeError
from .literals import literal_value
from .options import DEFAULT_OPTIONS, EvalOptions
from .values import (
    Value,
    VBool,
    VFloat,
    VInt,
    VString,
    VVoid,
    Void,
    as_return,
    zero_value,
)


# ---------------------------------------------------------------------------
# Execution context
# ---------------------------------------------------------------------------

@dataclass
class ExecutionContext:
    """Everything one evaluation run reads and writes."""

    environment: Environment = field(default_factory=Environment)
    out: IO[str] = field(default_factory=lambda: sys.stdout)
    err: IO[str] = field(default_factory=lambda: sys.stderr)
    options: EvalOptions = DEFAULT_OPTIONS

    def report(self, message: str) -> None:
        print(message, file=self.err)

    def gap(self, message: str) -> None:
        """Report an unsupported construct, in strict mode only."""
        if self.options.strict:
            self.report(f"Runtime Error: {message}")


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def evaluate(program: Program, ctx: ExecutionContext | None = None) -> Value:
    """Evaluate *program* and return the value of its main block."""
    if ctx is None:
        ctx = ExecutionContext()
    return eval_node(program, ctx)


def eval_node(node: Node, ctx: ExecutionContext) -> Value:
    if isinstance(node, Program):
        for decl in node.globals:
            eval_node(decl, ctx)
        if node.main is None:
            return Void
        return eval_node(node.main, ctx)

    if isinstance(node, Main):
        return eval_node(node.body, ctx)

    if isinstance(node, Block):
        return _eval_block(node, ctx)

    if isinstance(node, VarDecl):
        value = eval_node(node.init, ctx) if node.init is not None else zero_value(node.type)
        ctx.environment.set_value(node.name, value)
        return value

    if isinstance(node, FuncDef):
        # Only the signature is recorded; bodies never run.
        ctx.environment.declare_function(node.name, node.return_type)
        return Void

    if isinstance(node, ClassDef):
        return Void

    if isinstance(node, If):
        cond = eval_node(node.condition, ctx)
        if isinstance(cond, VBool) and cond.value:
            return eval_node(node.then, ctx)
        return Void

    if isinstance(node, While):
        return _eval_while(node, ctx)

    if isinstance(node, Print):
        value = eval_node(node.expr, ctx)
        print(str(value), file=ctx.out)
        return value

    if isinstance(node, Assign):
        value = eval_node(node.value, ctx)
        ctx.environment.set_value(node.name, value)
        return value

    if isinstance(node, Return):
        value = eval_node(node.expr, ctx) if node.expr is not None else Void
        return as_return(value)

    if isinstance(node, BinaryExpr):
        if node.is_unary:
            return _eval_unary(node, ctx)
        return _eval_binary(node, ctx)

    if isinstance(node, Literal):
        value = literal_value(node.text)
        if value is None:
            ctx.report(f"Runtime Error: invalid literal '{node.text}'")
            return Void
        return value

    if isinstance(node, Identifier):
        value = ctx.environment.get_value(node.name)
        if value is None:
            ctx.report(f"Error: variable '{node.name}' has no value")
            return Void
        return value

    if isinstance(node, Call):
        return _eval_call(node, ctx)

    if isinstance(node, MethodCall):
        ctx.gap(f"method call '.{node.method}' is not executed")
        return Void

    if isinstance(node, Dot):
        ctx.gap(f"member access '.{node.member}' is not executed")
        return Void

    if isinstance(node, MemberAssign):
        ctx.gap(f"member assignment '.{node.member}' is not executed")
        return Void

    raise UnknownNodeError(node)


# ---------------------------------------------------------------------------
# Control flow
# ---------------------------------------------------------------------------

def _eval_block(node: Block, ctx: ExecutionContext) -> Value:
    result: Value = Void
    for stmt in node.statements:
        result = eval_node(stmt, ctx)
        if result.returning:
            return result
    return result


def _eval_while(node: While, ctx: ExecutionContext) -> Value:
    result: Value = Void
    while True:
        cond = eval_node(node.condition, ctx)
        if not (isinstance(cond, VBool) and cond.value):
            return result
        result = eval_node(node.body, ctx)
        if result.returning:
            return result


def _eval_call(node: Call, ctx: ExecutionContext) -> Value:
    # Placeholder: the callee body is not executed and arguments are not
    # evaluated.  A known function yields the zero value of its return type.
    return_type = ctx.environment.resolve_function(node.name)
    ctx.gap(f"call to '{node.name}' is not executed")
    if return_type is None:
        return Void
    return zero_value(return_type)


# ---------------------------------------------------------------------------
# Operators
# ---------------------------------------------------------------------------

def _eval_unary(node: BinaryExpr, ctx: ExecutionContext) -> Value:
    operand = eval_node(node.left, ctx)
    if node.op == "!" and isinstance(operand, VBool):
        return VBool(not operand.value)
    ctx.gap(f"unary operator '{node.op}' not defined for {_kind(operand)}")
    return Void


def _eval_binary(node: BinaryExpr, ctx: ExecutionContext) -> Value:
    left = eval_node(node.left, ctx)
    right = eval_node(node.right, ctx)
    op = node.op

    # Dispatch on the left operand's kind; the right operand is read as the
    # same kind without validation.
    if type(right) is not type(left):
        ctx.gap(f"operands of '{op}' have different kinds ({_kind(left)}, {_kind(right)})")

    if isinstance(left, VInt):
        return _int_op(op, left.value, _payload(right, VInt, 0), ctx)
    if isinstance(left, VFloat):
        return _float_op(op, left.value, _payload(right, VFloat, 0.0), ctx)
    if isinstance(left, VString):
        return _string_op(op, left.value, _payload(right, VString, ""), ctx)
    if isinstance(left, VBool):
        return _bool_op(op, left.value, _payload(right, VBool, False), ctx)

    ctx.gap(f"operator '{op}' not defined for {_kind(left)}")
    return Void


def _payload(value: Value, kind: type, zero):
    if isinstance(value, kind):
        return value.value
    return zero


def _kind(value: Value) -> str:
    return {
        VInt: "int",
        VFloat: "float",
        VBool: "bool",
        VString: "string",
        VVoid: "void",
    }[type(value)]


def _int_op(op: str, a: int, b: int, ctx: ExecutionContext) -> Value:
    if op == "+":
        return VInt(a + b)
    if op == "-":
        return VInt(a - b)
    if op == "*":
        return VInt(a * b)
    if op == "/":
        if b == 0:
            ctx.report("Runtime Error: Division by zero")
            return Void
        quotient = abs(a) // abs(b)
        return VInt(quotient if (a < 0) == (b < 0) else -quotient)
    compared = _compare(op, a, b)
    if compared is not None:
        return compared
    ctx.gap(f"operator '{op}' not defined for int")
    return Void


def _float_op(op: str, a: float, b: float, ctx: ExecutionContext) -> Value:
    if op == "+":
        return VFloat(a + b)
    if op == "-":
        return VFloat(a - b)
    if op == "*":
        return VFloat(a * b)
    if op == "/":
        if b == 0.0:
            ctx.report("Runtime Error: Division by zero")
            return Void
        return VFloat(a / b)
    compared = _compare(op, a, b)
    if compared is not None:
        return compared
    ctx.gap(f"operator '{op}' not defined for float")
    return Void


def _compare(op: str, a, b) -> VBool | None:
    if op == "<":
        return VBool(a < b)
    if op == ">":
        return VBool(a > b)
    if op == "<=":
        return VBool(a <= b)
    if op == ">=":
        return VBool(a >= b)
    if op == "==":
        return VBool(a == b)
    if op == "!=":
        return VBool(a != b)
    return None


def _string_op(op: str, a: str, b: str, ctx: ExecutionContext) -> Value:
    if op == "+":
        return VString(a + b)
    if op == "==":
        return VBool(a == b)
    if op == "!=":
        return VBool(a != b)
    ctx.gap(f"operator '{op}' not defined for string")
    return Void


def _bool_op(op: str, a: bool, b: bool, ctx: ExecutionContext) -> Value:
    # Both operands are already evaluated: no short-circuit.
    if op == "&&":
        return VBool(a and b)
    if op == "||":
        return VBool(a or b)
    if op == "==":
        return VBool(a == b)
    if op == "!=":
        return VBool(a != b)
    ctx.gap(f"operator '{op}' not defined for bool")
    return Void
