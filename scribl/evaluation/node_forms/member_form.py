from scribl import EvaluatorFn
from scribl.errors import ScriblArityError, ScriblTypeMismatch
from scribl.runtime_context import EvalContext
from scribl.syntax import SyntaxNode
from scribl.types.environment import Environment
from scribl.types.values import Block, RuntimeValue


def member_form(
    node: SyntaxNode,
    env: Environment,
    ctx: EvalContext,
    evaluate_fn: EvaluatorFn,
) -> RuntimeValue:
    """
    object.name
    The member is read from the block's own table; its parent scopes are not searched.
    """
    if len(node.children) != 3:
        raise ScriblArityError(
            f"member_expression requires object, '.' and name, got {len(node.children)} children"
        )
    obj, _, name = node.children
    value = evaluate_fn(obj, env, ctx)
    if not isinstance(value, Block):
        raise ScriblTypeMismatch(f"Left hand side of member expression is not a block: {value.kind}")
    return value.environment.lookup_local(name.text.strip())
