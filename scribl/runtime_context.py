from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from scribl.config import get_max_depth
from scribl.errors import ScriblRecursionError, ScriblSoftError
from scribl.syntax import SyntaxNode, collapse_whitespace

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Diagnostic:
    """A soft error recovered during evaluation."""

    error: str
    message: str
    node_kind: str
    node_text: str

    def __str__(self) -> str:
        return f"{self.error}: {self.message} [{self.node_kind}: {self.node_text}]"


@dataclass
class EvalContext:
    """State threaded through one evaluation run: diagnostics and nesting depth."""

    max_depth: int = field(default_factory=get_max_depth)
    diagnostics: list[Diagnostic] = field(default_factory=list)
    depth: int = 0

    def enter(self, node: SyntaxNode) -> None:
        if self.depth >= self.max_depth:
            raise ScriblRecursionError(
                f"Syntax tree nests deeper than {self.max_depth} levels at {node.kind}"
            )
        self.depth += 1

    def leave(self) -> None:
        self.depth -= 1

    def report(self, err: ScriblSoftError, node: Optional[SyntaxNode]) -> Diagnostic:
        diagnostic = Diagnostic(
            error=type(err).__name__,
            message=str(err),
            node_kind=node.kind if node is not None else "",
            node_text=collapse_whitespace(node.text) if node is not None else "",
        )
        self.diagnostics.append(diagnostic)
        logger.warning("%s", diagnostic)
        return diagnostic
