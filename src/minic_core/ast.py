"""AST node kinds consumed by the checker and the evaluator.

Trees are built by an external parser.  Nodes are frozen and each node owns
its children exclusively; neither pass mutates a tree.  A unary operator is a
``BinaryExpr`` whose operand sits in ``left`` and whose ``right`` is ``None``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence, Union

from .typeinfo import TypeInfo


@dataclass(frozen=True, slots=True)
class _NodeBase:
    line: int = field(default=0, kw_only=True)


# ---------------------------------------------------------------------------
# Declarations
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Program(_NodeBase):
    globals: Sequence[Node]
    main: Main | None = None


@dataclass(frozen=True, slots=True)
class Block(_NodeBase):
    statements: Sequence[Node]


@dataclass(frozen=True, slots=True)
class VarDecl(_NodeBase):
    type: TypeInfo
    name: str
    init: Node | None = None


@dataclass(frozen=True, slots=True)
class FuncDef(_NodeBase):
    return_type: TypeInfo
    name: str
    params: Sequence[VarDecl]
    body: Block


@dataclass(frozen=True, slots=True)
class ClassDef(_NodeBase):
    name: str
    members: Sequence[Node]


@dataclass(frozen=True, slots=True)
class Main(_NodeBase):
    body: Block


# ---------------------------------------------------------------------------
# Statements
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class If(_NodeBase):
    condition: Node
    then: Node


@dataclass(frozen=True, slots=True)
class While(_NodeBase):
    condition: Node
    body: Node


@dataclass(frozen=True, slots=True)
class Print(_NodeBase):
    expr: Node


@dataclass(frozen=True, slots=True)
class Assign(_NodeBase):
    name: str
    value: Node


@dataclass(frozen=True, slots=True)
class MemberAssign(_NodeBase):
    obj: Node
    member: str
    value: Node


@dataclass(frozen=True, slots=True)
class Return(_NodeBase):
    expr: Node | None = None


# ---------------------------------------------------------------------------
# Expressions
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class BinaryExpr(_NodeBase):
    op: str
    left: Node
    right: Node | None = None

    @property
    def is_unary(self) -> bool:
        return self.right is None


@dataclass(frozen=True, slots=True)
class Literal(_NodeBase):
    text: str  # raw source text, e.g. '42', '3.5', '"hi"', 'true'


@dataclass(frozen=True, slots=True)
class Identifier(_NodeBase):
    name: str


@dataclass(frozen=True, slots=True)
class Call(_NodeBase):
    name: str
    args: Sequence[Node] = ()


@dataclass(frozen=True, slots=True)
class Dot(_NodeBase):
    obj: Node
    member: str


@dataclass(frozen=True, slots=True)
class MethodCall(_NodeBase):
    obj: Node
    method: str
    args: Sequence[Node] = ()


Node = Union[
    Program,
    Block,
    VarDecl,
    FuncDef,
    ClassDef,
    Main,
    If,
    While,
    Print,
    Assign,
    MemberAssign,
    Return,
    BinaryExpr,
    Literal,
    Identifier,
    Call,
    Dot,
    MethodCall,
]

NODE_TYPES: tuple[type, ...] = (
    Program,
    Block,
    VarDecl,
    FuncDef,
    ClassDef,
    Main,
    If,
    While,
    Print,
    Assign,
    MemberAssign,
    Return,
    BinaryExpr,
    Literal,
    Identifier,
    Call,
    Dot,
    MethodCall,
)
