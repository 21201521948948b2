from scribl import EvaluatorFn
from scribl.runtime_context import EvalContext
from scribl.syntax import SyntaxNode
from scribl.types.environment import Environment
from scribl.types.values import Block, RuntimeValue, make_block


def evaluate_statements(
    node: SyntaxNode,
    env: Environment,
    ctx: EvalContext,
    evaluate_fn: EvaluatorFn,
) -> Block:
    """Evaluate the statements of `node` into `env` and return `env` as a Block."""
    for child in node.children:
        if child.kind == "statement":
            evaluate_fn(child, env, ctx)
    return make_block(env)


def block_form(
    node: SyntaxNode,
    env: Environment,
    ctx: EvalContext,
    evaluate_fn: EvaluatorFn,
) -> RuntimeValue:
    """
    { statement; statement; ... }
    Opens a child scope, evaluates every statement into it in order, and returns
    the scope itself as a Block. Statement results are discarded; a failing
    statement does not stop the ones after it.
    """
    return evaluate_statements(node, env.extend(), ctx, evaluate_fn)
