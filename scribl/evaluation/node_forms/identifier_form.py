from scribl import EvaluatorFn
from scribl.runtime_context import EvalContext
from scribl.syntax import SyntaxNode
from scribl.types.environment import Environment
from scribl.types.values import RuntimeValue


def identifier_form(
    node: SyntaxNode,
    env: Environment,
    ctx: EvalContext,
    evaluate_fn: EvaluatorFn,
) -> RuntimeValue:
    # An unbound name is Void, not an error.
    return env.lookup(node.text.strip())
