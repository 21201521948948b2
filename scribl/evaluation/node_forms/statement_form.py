from scribl import EvaluatorFn
from scribl.runtime_context import EvalContext
from scribl.syntax import SyntaxNode, named_children
from scribl.types.environment import Environment
from scribl.types.values import VOID, RuntimeValue


def statement_form(
    node: SyntaxNode,
    env: Environment,
    ctx: EvalContext,
    evaluate_fn: EvaluatorFn,
) -> RuntimeValue:
    # The terminating ';' is an anonymous token; an empty statement is Void.
    expressions = named_children(node)
    if not expressions:
        return VOID
    return evaluate_fn(expressions[0], env, ctx)


def comment_form(
    node: SyntaxNode,
    env: Environment,
    ctx: EvalContext,
    evaluate_fn: EvaluatorFn,
) -> RuntimeValue:
    return VOID
