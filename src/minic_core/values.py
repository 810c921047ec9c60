"""Runtime value types for MiniC Core."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field, replace
from typing import Union

from .typeinfo import TypeInfo, TypeKind

_I32_MIN = -(2**31)
_I32_MASK = 2**32


def wrap_i32(n: int) -> int:
    """Reduce *n* to the signed 32-bit range (two's complement wrap)."""
    return (n - _I32_MIN) % _I32_MASK + _I32_MIN


def to_f32(x: float) -> float:
    """Round *x* to the nearest single-precision float."""
    try:
        return struct.unpack("f", struct.pack("f", x))[0]
    except OverflowError:
        return float("inf") if x > 0 else float("-inf")


# Every value carries ``returning``: set on the result of a ``return`` while it
# unwinds enclosing blocks and loops.  It is not part of value equality.

@dataclass(frozen=True, slots=True)
class VInt:
    value: int
    returning: bool = field(default=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", wrap_i32(int(self.value)))

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True, slots=True)
class VFloat:
    value: float
    returning: bool = field(default=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", to_f32(float(self.value)))

    def __str__(self) -> str:
        return f"{self.value:g}"


@dataclass(frozen=True, slots=True)
class VBool:
    value: bool
    returning: bool = field(default=False, compare=False)

    def __str__(self) -> str:
        return str(self.value).lower()


@dataclass(frozen=True, slots=True)
class VString:
    value: str
    returning: bool = field(default=False, compare=False)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class VVoid:
    returning: bool = field(default=False, compare=False)

    def __repr__(self) -> str:
        return "Void" if not self.returning else "Void(returning)"

    def __str__(self) -> str:
        return "void"


Void = VVoid()

Value = Union[VInt, VFloat, VBool, VString, VVoid]


def as_return(value: Value) -> Value:
    """Return a copy of *value* marked as an in-flight ``return`` result."""
    return replace(value, returning=True)


def zero_value(t: TypeInfo) -> Value:
    """Default value for a declaration of static type *t*."""
    if t.kind is TypeKind.Int:
        return VInt(0)
    if t.kind is TypeKind.Float:
        return VFloat(0.0)
    if t.kind is TypeKind.Bool:
        return VBool(False)
    if t.kind is TypeKind.String:
        return VString("")
    return Void
