"""Core evaluator for the Scribl interpreter.

A recursive walk over the syntax tree, dispatching on node kind through the
NODE_FORMS table. Evaluation order is pre-order and left to right.

Soft errors raised by a handler are recovered at the node that raised them:
they are recorded on the EvalContext and logged, and the node evaluates to
Void so that sibling statements still run. Hard errors propagate to the caller.
"""

from __future__ import annotations

import logging

from scribl.errors import ScriblSoftError, ScriblUnhandledNodeKind
from scribl.evaluation.node_forms import NODE_FORMS
from scribl.runtime_context import EvalContext
from scribl.syntax import SyntaxNode
from scribl.types.environment import Environment
from scribl.types.values import VOID, RuntimeValue

logger = logging.getLogger(__name__)


def evaluate(node: SyntaxNode, env: Environment, ctx: EvalContext | None = None) -> RuntimeValue:
    """
    Evaluate `node` in `env`, mutating the environment chain as assignments run.
    """
    if ctx is None:
        ctx = EvalContext()
    return evaluate0(node, env, ctx)


def evaluate0(node: SyntaxNode, env: Environment, ctx: EvalContext) -> RuntimeValue:
    """
    Single dispatch step. Handlers receive this function to evaluate children.
    """
    ctx.enter(node)
    try:
        handler = NODE_FORMS.get(node.kind)
        if handler is None:
            raise ScriblUnhandledNodeKind(f"Unhandled node kind: {node.kind}")
        logger.debug("evaluate %s at depth %d", node.kind, ctx.depth)
        return handler(node, env, ctx, evaluate0)
    except ScriblSoftError as err:
        ctx.report(err, node)
        return VOID
    finally:
        ctx.leave()
