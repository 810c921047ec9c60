"""Tests for minic_core.printer: dump_tree, show_vars."""

import io

import pytest

from minic_core.ast import (
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
    Print,
    Program,
    Return,
    VarDecl,
    While,
)
from minic_core.environment import Environment
from minic_core.errors import UnknownNodeError
from minic_core.printer import dump_tree, show_vars
from minic_core.typeinfo import INT, TypeInfo
from minic_core.values import VFloat, VInt, VString


def _dump(node, level=0) -> str:
    buf = io.StringIO()
    dump_tree(node, level, buf)
    return buf.getvalue()


# ---------------------------------------------------------------------------
# dump_tree
# ---------------------------------------------------------------------------

def test_dump_literal_and_identifier():
    assert _dump(Literal("42")) == "Literal: 42\n"
    assert _dump(Identifier("x"), 2) == "    ID: x\n"

def test_dump_unary_operator():
    assert _dump(BinaryExpr("!", Identifier("ok"))) == "Op: !\n  ID: ok\n"

def test_dump_function_params_line():
    func = FuncDef(INT, "f", [VarDecl(INT, "a"), VarDecl(INT, "b")], Block([]))
    assert _dump(func, 2) == (
        "    Function: f\n"
        "    Params: 2\n"
        "        VarDecl: a\n"
        "        VarDecl: b\n"
        "      Block {\n"
        "      }\n"
    )

def test_dump_program():
    program = Program(
        globals=[
            VarDecl(INT, "g", Literal("1")),
            FuncDef(INT, "f", [VarDecl(INT, "n")], Block([Return(Identifier("n"))])),
        ],
        main=Main(Block([
            Assign("g", BinaryExpr("+", Identifier("g"), Literal("2"))),
            Print(Call("f", [Identifier("g")])),
        ])),
    )
    assert _dump(program) == (
        "PROGRAM ROOT\n"
        "  VarDecl: g\n"
        "    Literal: 1\n"
        "  Function: f\n"
        "   Params: 1\n"
        "      VarDecl: n\n"
        "    Block {\n"
        "      Return\n"
        "        ID: n\n"
        "    }\n"
        "  MAIN BLOCK\n"
        "    Block {\n"
        "      Assign: g\n"
        "        Op: +\n"
        "          ID: g\n"
        "          Literal: 2\n"
        "      Print\n"
        "        Call: f\n"
        "          ID: g\n"
        "    }\n"
    )

def test_dump_class_and_members():
    node = Block([
        ClassDef("P", [VarDecl(INT, "x")]),
        VarDecl(TypeInfo.of_class("P"), "p"),
        MemberAssign(Identifier("p"), "x", Literal("3")),
        Print(Dot(Identifier("p"), "x")),
        MethodCall(Identifier("p"), "move", [Literal("1")]),
    ])
    out = _dump(node)
    assert "  Class: P\n    VarDecl: x\n" in out
    assert "  MemberAssign: .x\n    ID: p\n    Literal: 3\n" in out
    assert "  Print\n    Access .x\n      ID: p\n" in out
    assert "  MethodCall: .move\n    ID: p\n    Literal: 1\n" in out

def test_dump_control_flow():
    node = While(Literal("true"), If(Literal("false"), Return()))
    assert _dump(node) == (
        "While\n"
        "  Literal: true\n"
        "  If\n"
        "    Literal: false\n"
        "    Return\n"
    )

def test_dump_defaults_to_stdout(capsys):
    dump_tree(Literal("1"))
    assert capsys.readouterr().out == "Literal: 1\n"

def test_dump_foreign_object():
    with pytest.raises(UnknownNodeError):
        _dump(object())


# ---------------------------------------------------------------------------
# show_vars
# ---------------------------------------------------------------------------

def test_show_vars_empty():
    buf = io.StringIO()
    show_vars(Environment(), buf)
    assert "no variables" in buf.getvalue()

def test_show_vars_with_entries():
    env = Environment()
    env.set_value("x", VInt(3))
    env.set_value("name", VString("Joe"))
    env.set_value("r", VFloat(0.5))
    buf = io.StringIO()
    show_vars(env, buf)
    assert buf.getvalue() == (
        "  x    : 3\n"
        '  name : "Joe"\n'
        "  r    : 0.5\n"
    )
