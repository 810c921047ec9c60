"""Runtime variable store.

Unlike the compile-time ``ScopeManager`` this is a single flat table: blocks
do not open frames, so a declaration inside a nested block overwrites the
binding of the same name in the enclosing block.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .typeinfo import TypeInfo
from .values import Value


@dataclass
class Environment:
    """Holds all bindings produced during evaluation."""

    variables: dict[str, Value] = field(default_factory=dict)
    functions: dict[str, TypeInfo] = field(default_factory=dict)

    # -- Variables ------------------------------------------------------

    def get_value(self, name: str) -> Value | None:
        return self.variables.get(name)

    def set_value(self, name: str, value: Value) -> None:
        self.variables[name] = value

    # -- Function signatures --------------------------------------------

    def declare_function(self, name: str, return_type: TypeInfo) -> None:
        self.functions[name] = return_type

    def resolve_function(self, name: str) -> TypeInfo | None:
        return self.functions.get(name)
