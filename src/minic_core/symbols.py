"""Compile-time symbol tables and scope management."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import IO

from .typeinfo import TypeInfo


VARIABLE = "variable"
FUNCTION = "function"
CLASS = "class"


@dataclass
class SymbolInfo:
    name: str
    type: TypeInfo
    category: str  # VARIABLE | FUNCTION | CLASS
    class_name: str = ""
    value: str = ""  # last known value text (variables only)
    param_types: list[TypeInfo] = field(default_factory=list)
    size: int = -1
    offset: int = 0

    def __post_init__(self) -> None:
        if self.size < 0:
            self.size = self.type.size


# ---------------------------------------------------------------------------
# SymbolTable: a single lexical scope
# ---------------------------------------------------------------------------

class SymbolTable:
    """Name → SymbolInfo bindings of one scope, linked to its parent."""

    def __init__(self, parent: SymbolTable | None, name: str) -> None:
        self.parent = parent
        self.name = name
        self.symbols: dict[str, SymbolInfo] = {}
        self._offset = 0

    def add_symbol(self, sym: SymbolInfo) -> bool:
        """Bind *sym* here.  Returns False, changing nothing, on a duplicate."""
        if sym.name in self.symbols:
            return False
        sym.offset = self._offset
        self._offset += sym.size
        self.symbols[sym.name] = sym
        return True

    def update_function_params(self, name: str, params: list[TypeInfo]) -> bool:
        sym = self.symbols.get(name)
        if sym is None:
            return False
        sym.param_types.extend(params)
        return True

    def lookup(self, name: str) -> SymbolInfo | None:
        scope: SymbolTable | None = self
        while scope is not None:
            sym = scope.symbols.get(name)
            if sym is not None:
                return sym
            scope = scope.parent
        return None

    def lookup_current(self, name: str) -> SymbolInfo | None:
        return self.symbols.get(name)

    def dump(self, dest: IO[str]) -> None:
        print(file=dest)
        print(f"===== SCOPE: {self.name} =====", file=dest)
        parent = self.parent.name if self.parent is not None else "none"
        print(f"Parent: {parent}", file=dest)
        print("Symbols:", file=dest)
        if not self.symbols:
            print("  (none)", file=dest)
        for name in sorted(self.symbols):
            sym = self.symbols[name]
            line = f"  {sym.name} : {sym.type} ({sym.category})"
            if sym.category == VARIABLE and sym.value and sym.value != "?":
                line += f" [Val: {sym.value}]"
            if sym.category == FUNCTION:
                line += f" [Params: {len(sym.param_types)}]"
            print(line, file=dest)

    def __repr__(self) -> str:
        return f"SymbolTable({self.name!r}, {len(self.symbols)} symbols)"


# ---------------------------------------------------------------------------
# ScopeManager
# ---------------------------------------------------------------------------

class ScopeManager:
    """Scope chain for one analysis run.

    Usage::

        scopes = ScopeManager()
        scopes.enter_scope("Point")
        scopes.add_symbol(SymbolInfo("x", INT, VARIABLE))
        scopes.save_class_scope("Point")
        scopes.exit_scope()
        scopes.lookup_in_class("Point", "x")   # → SymbolInfo for x
    """

    def __init__(self) -> None:
        self.global_scope = SymbolTable(None, "Global")
        self.current_scope = self.global_scope
        self.class_scopes: dict[str, SymbolTable] = {}
        self.all_scopes: list[SymbolTable] = [self.global_scope]

    # -- Scope chain ----------------------------------------------------

    def enter_scope(self, name: str) -> SymbolTable:
        self.current_scope = SymbolTable(self.current_scope, name)
        self.all_scopes.append(self.current_scope)
        return self.current_scope

    def exit_scope(self) -> None:
        if self.current_scope.parent is not None:
            self.current_scope = self.current_scope.parent

    # -- Symbols --------------------------------------------------------

    def add_symbol(self, sym: SymbolInfo) -> bool:
        return self.current_scope.add_symbol(sym)

    def update_function_params(self, name: str, params: list[TypeInfo]) -> bool:
        return self.current_scope.update_function_params(name, params)

    def lookup(self, name: str) -> SymbolInfo | None:
        return self.current_scope.lookup(name)

    def lookup_current(self, name: str) -> SymbolInfo | None:
        return self.current_scope.lookup_current(name)

    # -- Classes --------------------------------------------------------

    def save_class_scope(self, class_name: str) -> None:
        self.class_scopes[class_name] = self.current_scope

    def lookup_in_class(self, class_name: str, member: str) -> SymbolInfo | None:
        """Find *member* in the class's own scope only (no ancestors)."""
        scope = self.class_scopes.get(class_name)
        if scope is None:
            return None
        return scope.lookup_current(member)

    # -- Diagnostics ----------------------------------------------------

    def dump_all_scopes(self, path: str, info: IO[str] | None = None) -> None:
        """Write every scope ever created to *path*."""
        try:
            fh = open(path, "w", encoding="utf-8")
        except OSError:
            return
        with fh:
            for scope in self.all_scopes:
                scope.dump(fh)
        print(f"[Info] Symbol tables dumped to {path}", file=info or sys.stdout)
