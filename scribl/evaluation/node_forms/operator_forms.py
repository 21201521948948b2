from scribl import EvaluatorFn
from scribl.errors import ScriblArityError, ScriblUnhandledOperator
from scribl.evaluation.operators import BINARY_OPERATORS, UNARY_OPERATORS
from scribl.runtime_context import EvalContext
from scribl.syntax import SyntaxNode
from scribl.types.environment import Environment
from scribl.types.values import RuntimeValue


def unary_form(
    node: SyntaxNode,
    env: Environment,
    ctx: EvalContext,
    evaluate_fn: EvaluatorFn,
) -> RuntimeValue:
    """<op> operand, with op one of ! ~ -. The operand is evaluated before the operator is looked up."""
    if len(node.children) != 2:
        raise ScriblArityError(
            f"unary_expression requires an operator and an operand, got {len(node.children)} children"
        )
    op, operand = node.children
    value = evaluate_fn(operand, env, ctx)
    fn = UNARY_OPERATORS.get(op.text.strip())
    if fn is None:
        raise ScriblUnhandledOperator(f"Unhandled unary operator: {op.text!r}")
    return fn(value)


def binary_form(
    node: SyntaxNode,
    env: Environment,
    ctx: EvalContext,
    evaluate_fn: EvaluatorFn,
) -> RuntimeValue:
    """lhs <op> rhs. Both sides are always evaluated, left first; there is no short-circuit."""
    if len(node.children) != 3:
        raise ScriblArityError(
            f"binary_expression requires lhs, operator and rhs, got {len(node.children)} children"
        )
    lhs, op, rhs = node.children
    lhs_value = evaluate_fn(lhs, env, ctx)
    rhs_value = evaluate_fn(rhs, env, ctx)
    fn = BINARY_OPERATORS.get(op.text.strip())
    if fn is None:
        raise ScriblUnhandledOperator(f"Unhandled binary operator: {op.text!r}")
    return fn(lhs_value, rhs_value)
