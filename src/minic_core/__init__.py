"""MiniC Core: semantic analysis and tree-walking evaluation for MiniC ASTs."""

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
from .checker import AnalysisContext, analyze, infer_type, is_lvalue
from .document import RunResult, run_program
from .environment import Environment
from .errors import MinicCoreError, UnknownNodeError
from .evaluator import ExecutionContext, eval_node, evaluate
from .literals import LiteralKind, classify_literal, literal_type, literal_value
from .options import EvalOptions
from .printer import dump_tree, show_vars
from .symbols import ScopeManager, SymbolInfo, SymbolTable
from .typeinfo import TypeInfo, TypeKind
from .values import Value, VBool, VFloat, VInt, VString, VVoid, Void, zero_value

__all__ = [
    "Assign",
    "BinaryExpr",
    "Block",
    "Call",
    "ClassDef",
    "Dot",
    "FuncDef",
    "Identifier",
    "If",
    "Literal",
    "Main",
    "MemberAssign",
    "MethodCall",
    "Node",
    "Print",
    "Program",
    "Return",
    "VarDecl",
    "While",
    "AnalysisContext",
    "analyze",
    "infer_type",
    "is_lvalue",
    "RunResult",
    "run_program",
    "Environment",
    "MinicCoreError",
    "UnknownNodeError",
    "ExecutionContext",
    "eval_node",
    "evaluate",
    "LiteralKind",
    "classify_literal",
    "literal_type",
    "literal_value",
    "EvalOptions",
    "dump_tree",
    "show_vars",
    "ScopeManager",
    "SymbolInfo",
    "SymbolTable",
    "TypeInfo",
    "TypeKind",
    "Value",
    "VBool",
    "VFloat",
    "VInt",
    "VString",
    "VVoid",
    "Void",
    "zero_value",
]
