from __future__ import annotations

import logging
from dataclasses import dataclass, field
from os import PathLike
from typing import Any, Optional

from scribl.errors import ScriblParseError
from scribl.evaluation.evaluator import evaluate, evaluate0
from scribl.evaluation.node_forms.block_form import evaluate_statements
from scribl.runtime_context import Diagnostic, EvalContext
from scribl.syntax import SyntaxNode
from scribl.types.environment import Environment
from scribl.types.values import Block, RuntimeValue

logger = logging.getLogger(__name__)


@dataclass
class EvaluationResult:
    """Outcome of one run: the final value, the root scope, and recovered soft errors."""

    value: RuntimeValue
    environment: Environment
    diagnostics: list[Diagnostic] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.diagnostics

    def bindings(self) -> dict[str, Any]:
        """Snapshot of the program's bindings: the returned block's scope, else the root scope."""
        if isinstance(self.value, Block):
            return self.value.environment.snapshot_bindings()
        return self.environment.snapshot_bindings()


class Interpreter:
    """
    Runs parsed Scribl programs against a persistent root Environment.
    A root `block` (a whole file) evaluates its statements straight into that
    scope, so names bound by one run are visible to the next. The tree comes
    from the external parser (see scribl.reader.parser) or is built directly
    with scribl.syntax.
    """

    def __init__(self, env: Optional[Environment] = None, *, max_depth: Optional[int] = None):
        self.env: Environment = env if env is not None else Environment()
        self.max_depth = max_depth

    def _context(self) -> EvalContext:
        if self.max_depth is None:
            return EvalContext()
        return EvalContext(max_depth=self.max_depth)

    def run(self, tree: SyntaxNode) -> EvaluationResult:
        """Evaluate a whole tree. A tree carrying a syntax error is rejected before evaluation."""
        if tree.has_error:
            raise ScriblParseError(f"Parse errors detected:\n{tree}")
        ctx = self._context()
        if tree.kind == "block":
            value = evaluate_statements(tree, self.env, ctx, evaluate0)
        else:
            value = evaluate(tree, self.env, ctx)
        if ctx.diagnostics:
            logger.info("Evaluation finished with %d diagnostic(s)", len(ctx.diagnostics))
        return EvaluationResult(value, self.env, ctx.diagnostics)

    def eval(self, source: str) -> EvaluationResult:
        """Parse and evaluate source text."""
        from scribl.reader.parser import parse_source

        return self.run(parse_source(source))

    def eval_file(self, path: str | PathLike[str]) -> EvaluationResult:
        from scribl.reader.parser import parse_file

        return self.run(parse_file(path))
