import re

from scribl import EvaluatorFn
from scribl.errors import ScriblLiteralParseError
from scribl.runtime_context import EvalContext
from scribl.syntax import SyntaxNode
from scribl.types.environment import Environment
from scribl.types.values import RuntimeValue, make_boolean, make_number, make_string

DECIMAL_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
PREFIXED_RE = re.compile(r"0[xX][0-9a-fA-F]+|0[oO][0-7]+|0[bB][01]+")


def parse_number(text: str) -> float:
    """Decimal (with optional exponent) or 0x/0o/0b prefixed integer literal."""
    raw = text.strip()
    if PREFIXED_RE.fullmatch(raw):
        return float(int(raw, 0))
    if DECIMAL_RE.fullmatch(raw):
        return float(raw)
    raise ScriblLiteralParseError(f"Invalid number literal: {text!r}")


def unquote(text: str) -> str:
    """Strip one pair of matching surrounding quotes; the contents are kept verbatim."""
    if len(text) >= 2 and text[0] == text[-1] and text[0] in "\"'`":
        return text[1:-1]
    return text


def number_form(
    node: SyntaxNode,
    env: Environment,
    ctx: EvalContext,
    evaluate_fn: EvaluatorFn,
) -> RuntimeValue:
    return make_number(parse_number(node.text))


def string_form(
    node: SyntaxNode,
    env: Environment,
    ctx: EvalContext,
    evaluate_fn: EvaluatorFn,
) -> RuntimeValue:
    return make_string(unquote(node.text))


def boolean_form(
    node: SyntaxNode,
    env: Environment,
    ctx: EvalContext,
    evaluate_fn: EvaluatorFn,
) -> RuntimeValue:
    return make_boolean(node.text.strip() == "true")
