import logging

from scribl import EvaluatorFn
from scribl.errors import ScriblArityError, ScriblUnresolvedMember
from scribl.runtime_context import EvalContext
from scribl.syntax import SyntaxNode
from scribl.types.environment import Environment
from scribl.types.values import VOID, RuntimeValue

logger = logging.getLogger(__name__)

# Operators that bind mutably. Every other operator whose text contains '='
# binds a constant.
MUTABLE_ASSIGNMENT_OPERATORS = frozenset({":="})


def binding_is_constant(op_text: str) -> bool:
    op = op_text.strip()
    if op in MUTABLE_ASSIGNMENT_OPERATORS:
        return False
    return "=" in op


def member_target_path(target: SyntaxNode) -> list[str]:
    """Names along a member target, outermost first: `a.b.c` gives [a, b, c].

    Every segment must be a plain identifier; anything else (a block literal,
    a call, a parenthesised expression) cannot be assigned through.
    """
    path: list[str] = []
    node = target
    while node.kind == "member_expression" and len(node.children) == 3:
        obj, _, prop = node.children
        if prop.kind != "identifier":
            raise ScriblUnresolvedMember(f"Invalid member name {prop.text!r} in {target.text!r}")
        path.append(prop.text.strip())
        node = obj
    if node.kind != "identifier":
        raise ScriblUnresolvedMember(f"Cannot assign through {node.kind} in {target.text!r}")
    path.append(node.text.strip())
    path.reverse()
    return path


def assignment_form(
    node: SyntaxNode,
    env: Environment,
    ctx: EvalContext,
    evaluate_fn: EvaluatorFn,
) -> RuntimeValue:
    """
    target <op> value
    `x = v` binds a constant, `x := v` a mutable name. The value is evaluated
    before the target is resolved. Member targets (`a.b.c = v`) resolve their
    path through nested blocks, creating missing blocks on a mutable path.
    Returns the assigned value.
    """
    if len(node.children) != 3:
        raise ScriblArityError(
            f"assignment_expression requires target, operator and value, got {len(node.children)} children"
        )
    target, op, rhs = node.children
    constant = binding_is_constant(op.text)
    value = evaluate_fn(rhs, env, ctx)

    match target.kind:
        case "identifier":
            return env.declare_or_assign(target.text.strip(), value, constant)
        case "member_expression":
            path = member_target_path(target)
            scope = env.resolve_member_path(path, constant)
            return scope.assign_member(path[-1], value, constant)
        case _:
            logger.debug("Ignoring assignment to %s target: %s", target.kind, target.text)
            return VOID
