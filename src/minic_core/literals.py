"""Shape-based literal classification shared by the checker and the evaluator.

A literal node only stores its raw source text.  Its kind is derived from the
characters of that text, in this order:

- contains a ``"``      → string
- ``true`` / ``false``  → bool
- contains a ``.``      → float
- anything else        → int
"""

from __future__ import annotations

import re
from enum import Enum, auto

from .typeinfo import BOOL, FLOAT, INT, STRING, TypeInfo
from .values import Value, VBool, VFloat, VInt, VString

_INT_RE = re.compile(r"^[+-]?\d+$")
_FLOAT_RE = re.compile(r"^[+-]?(\d+\.\d*|\.\d+)([eE][+-]?\d+)?$")

_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1


class LiteralKind(Enum):
    String = auto()
    Bool = auto()
    Float = auto()
    Int = auto()


def classify_literal(text: str) -> LiteralKind:
    if '"' in text:
        return LiteralKind.String
    if text in ("true", "false"):
        return LiteralKind.Bool
    if "." in text:
        return LiteralKind.Float
    return LiteralKind.Int


_LITERAL_TYPES: dict[LiteralKind, TypeInfo] = {
    LiteralKind.String: STRING,
    LiteralKind.Bool: BOOL,
    LiteralKind.Float: FLOAT,
    LiteralKind.Int: INT,
}


def literal_type(text: str) -> TypeInfo:
    """Static type of a literal with raw text *text*."""
    return _LITERAL_TYPES[classify_literal(text)]


def string_body(text: str) -> str:
    """Strip the surrounding quotes of a string literal."""
    if len(text) >= 2 and text.startswith('"') and text.endswith('"'):
        return text[1:-1]
    return text.replace('"', "")


def literal_value(text: str) -> Value | None:
    """Runtime value of a literal, or ``None`` if its text is malformed
    or an int literal falls outside the signed 32-bit range.

    The returned value always has the same kind as ``literal_type(text)``.
    """
    kind = classify_literal(text)
    if kind is LiteralKind.String:
        return VString(string_body(text))
    if kind is LiteralKind.Bool:
        return VBool(text == "true")
    if kind is LiteralKind.Float:
        if not _FLOAT_RE.match(text):
            return None
        return VFloat(float(text))
    if not _INT_RE.match(text):
        return None
    n = int(text)
    if not _I32_MIN <= n <= _I32_MAX:
        return None
    return VInt(n)
