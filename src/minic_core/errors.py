"""Exceptions raised by MiniC Core.

Language-level failures (undefined names, division by zero, unsupported
operators) are reported as diagnostics and never raised.  These exceptions
only signal misuse of the API.
"""

from __future__ import annotations


class MinicCoreError(Exception):
    """Base class for all MiniC Core exceptions."""


class UnknownNodeError(MinicCoreError, TypeError):
    """An object that is not an AST node was handed to a tree walker."""

    def __init__(self, node: object) -> None:
        super().__init__(f"not a MiniC AST node: {type(node).__name__}")
        self.node = node
