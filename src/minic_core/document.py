"""RunResult: analysis and evaluation of a program in one call."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import IO

from .ast import Program
from .checker import AnalysisContext, analyze
from .environment import Environment
from .evaluator import ExecutionContext, evaluate
from .options import DEFAULT_OPTIONS, EvalOptions
from .symbols import ScopeManager
from .values import Value


@dataclass
class RunResult:
    """Outcome of ``run_program``."""

    scopes: ScopeManager = field(default_factory=ScopeManager)
    environment: Environment = field(default_factory=Environment)
    errors: int = 0
    value: Value | None = None

    @property
    def evaluated(self) -> bool:
        """False when evaluation was skipped because of semantic errors."""
        return self.value is not None

    @property
    def variables(self) -> dict[str, Value]:
        return self.environment.variables


def run_program(
    program: Program,
    *,
    out: IO[str] | None = None,
    err: IO[str] | None = None,
    options: EvalOptions | None = None,
    run_on_errors: bool = False,
) -> RunResult:
    """Analyse *program*, then evaluate it if the analysis found no errors.

    - Semantic diagnostics and runtime errors go to *err* (default stderr)
    - ``print`` output goes to *out* (default stdout)
    - ``run_on_errors=True`` evaluates even when semantic errors were found
    """
    err = err or sys.stderr
    actx = analyze(program, AnalysisContext(err=err))
    result = RunResult(scopes=actx.scopes, errors=actx.errors)

    if actx.errors and not run_on_errors:
        return result

    ectx = ExecutionContext(
        environment=result.environment,
        out=out or sys.stdout,
        err=err,
        options=options or DEFAULT_OPTIONS,
    )
    result.value = evaluate(program, ectx)
    return result
