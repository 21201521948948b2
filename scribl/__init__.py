# Core type aliases for Scribl's evaluation core.
# Syntax trees come from an external parser and are consumed through the
# SyntaxNode protocol (see scribl.syntax); runtime values are the closed set of
# variants in scribl.types.values.
#
# Naming guidance:
# - NodeHandler: signature of every entry in the node-kind dispatch table.
# - EvaluatorFn: the recursive evaluator handed to handlers so they can descend.

from typing import Any, Callable

__version__ = "0.1.0"

# Evaluator function type: evaluate0(node, env, ctx) -> RuntimeValue
EvaluatorFn = Callable[..., Any]

# Node handler type: handler(node, env, ctx, evaluate_fn) -> RuntimeValue
NodeHandler = Callable[..., Any]
