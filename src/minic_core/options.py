"""Evaluation options."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class EvalOptions:
    """Knobs for the evaluator.

    ``strict``: report the silent gaps (unsupported operator/operand
    combinations, mismatched operand kinds and the call/member placeholders)
    as ``Runtime Error`` diagnostics.  Results are unchanged: they still
    evaluate to ``void``.
    """

    strict: bool = False


DEFAULT_OPTIONS = EvalOptions()
