"""Diagnostic text dumps: the AST outline and the runtime variable table."""

from __future__ import annotations

import sys
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
from .values import VString


def dump_tree(node: Node, level: int = 0, dest: IO[str] | None = None) -> None:
    """Write an indented outline of *node* (two spaces per level) to *dest*."""
    out = dest or sys.stdout

    def emit(text: str, depth: int = level) -> None:
        print("  " * depth + text, file=out)

    def child(n: Node | None, depth: int = level + 1) -> None:
        if n is not None:
            dump_tree(n, depth, out)

    if isinstance(node, Program):
        emit("PROGRAM ROOT")
        for decl in node.globals:
            child(decl)
        child(node.main)
    elif isinstance(node, Block):
        emit("Block {")
        for stmt in node.statements:
            child(stmt)
        emit("}")
    elif isinstance(node, VarDecl):
        emit(f"VarDecl: {node.name}")
        child(node.init)
    elif isinstance(node, FuncDef):
        emit(f"Function: {node.name}")
        print(" " * (level + 2) + f"Params: {len(node.params)}", file=out)
        for param in node.params:
            child(param, level + 2)
        child(node.body)
    elif isinstance(node, ClassDef):
        emit(f"Class: {node.name}")
        for member in node.members:
            child(member)
    elif isinstance(node, Main):
        emit("MAIN BLOCK")
        child(node.body)
    elif isinstance(node, If):
        emit("If")
        child(node.condition)
        child(node.then)
    elif isinstance(node, While):
        emit("While")
        child(node.condition)
        child(node.body)
    elif isinstance(node, Print):
        emit("Print")
        child(node.expr)
    elif isinstance(node, Assign):
        emit(f"Assign: {node.name}")
        child(node.value)
    elif isinstance(node, MemberAssign):
        emit(f"MemberAssign: .{node.member}")
        child(node.obj)
        child(node.value)
    elif isinstance(node, Return):
        emit("Return")
        child(node.expr)
    elif isinstance(node, BinaryExpr):
        emit(f"Op: {node.op}")
        child(node.left)
        child(node.right)
    elif isinstance(node, Literal):
        emit(f"Literal: {node.text}")
    elif isinstance(node, Identifier):
        emit(f"ID: {node.name}")
    elif isinstance(node, Call):
        emit(f"Call: {node.name}")
        for arg in node.args:
            child(arg)
    elif isinstance(node, Dot):
        emit(f"Access .{node.member}")
        child(node.obj)
    elif isinstance(node, MethodCall):
        emit(f"MethodCall: .{node.method}")
        child(node.obj)
        for arg in node.args:
            child(arg)
    else:
        raise UnknownNodeError(node)


def show_vars(env: Environment, dest: IO[str] | None = None) -> None:
    """Print all runtime variables, one per line."""
    out = dest or sys.stdout
    if not env.variables:
        print("  (no variables defined)", file=out)
        return
    width = max(len(k) for k in env.variables)
    for name, value in env.variables.items():
        shown = f'"{value}"' if isinstance(value, VString) else str(value)
        print(f"  {name:<{width}} : {shown}", file=out)
