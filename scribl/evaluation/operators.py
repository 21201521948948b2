"""Unary and binary operator implementations.

Operators receive already-evaluated operands (both sides of a binary operator
are always evaluated, `&&` and `||` included) and either return a runtime value
or raise ScriblTypeMismatch when operand kinds are not the ones they accept.
"""

from __future__ import annotations

import operator
from typing import Callable

from scribl.errors import ScriblTypeMismatch
from scribl.types import numeric
from scribl.types.values import (
    Boolean,
    Number,
    RuntimeValue,
    String,
    ValueKind,
    make_boolean,
    make_number,
    make_string,
    values_equal,
)

UnaryOp = Callable[[RuntimeValue], RuntimeValue]
BinaryOp = Callable[[RuntimeValue, RuntimeValue], RuntimeValue]


def _mismatch(op: str, *values: RuntimeValue) -> ScriblTypeMismatch:
    kinds = ", ".join(str(v.kind) for v in values)
    return ScriblTypeMismatch(f"Mismatched types in '{op}': [{kinds}]")


def _numbers(op: str, lhs: RuntimeValue, rhs: RuntimeValue) -> tuple[float, float]:
    if not (isinstance(lhs, Number) and isinstance(rhs, Number)):
        raise _mismatch(op, lhs, rhs)
    return lhs.value, rhs.value


def _booleans(op: str, lhs: RuntimeValue, rhs: RuntimeValue) -> tuple[bool, bool]:
    if not (isinstance(lhs, Boolean) and isinstance(rhs, Boolean)):
        raise _mismatch(op, lhs, rhs)
    return lhs.value, rhs.value


def _numeric(op: str, fn: Callable[[float, float], float]) -> BinaryOp:
    def apply(lhs: RuntimeValue, rhs: RuntimeValue) -> RuntimeValue:
        return make_number(fn(*_numbers(op, lhs, rhs)))

    apply.__name__ = f"numeric_{fn.__name__}"
    return apply


# --- Unary ------------------------------------------------------------------

def logical_not(value: RuntimeValue) -> RuntimeValue:
    if not isinstance(value, Boolean):
        raise _mismatch("!", value)
    return make_boolean(not value.value)


def bitwise_not(value: RuntimeValue) -> RuntimeValue:
    if not isinstance(value, Number):
        raise _mismatch("~", value)
    return make_number(numeric.bitwise_not(value.value))


def negate(value: RuntimeValue) -> RuntimeValue:
    if not isinstance(value, Number):
        raise _mismatch("-", value)
    return make_number(-value.value)


# --- Binary -----------------------------------------------------------------

def logical_and(lhs: RuntimeValue, rhs: RuntimeValue) -> RuntimeValue:
    a, b = _booleans("&&", lhs, rhs)
    return make_boolean(a and b)


def logical_or(lhs: RuntimeValue, rhs: RuntimeValue) -> RuntimeValue:
    a, b = _booleans("||", lhs, rhs)
    return make_boolean(a or b)


def add(lhs: RuntimeValue, rhs: RuntimeValue) -> RuntimeValue:
    """Number sum or string concatenation; no other pairing is accepted."""
    if isinstance(lhs, Number) and isinstance(rhs, Number):
        return make_number(lhs.value + rhs.value)
    if isinstance(lhs, String) and isinstance(rhs, String):
        return make_string(lhs.value + rhs.value)
    raise _mismatch("+", lhs, rhs)


_ORDERED_KINDS = (ValueKind.NUMBER, ValueKind.STRING, ValueKind.BOOLEAN)


def _ordering(op: str, compare: Callable[[object, object], bool]) -> BinaryOp:
    def apply(lhs: RuntimeValue, rhs: RuntimeValue) -> RuntimeValue:
        if lhs.kind is not rhs.kind:
            raise _mismatch(op, lhs, rhs)
        if lhs.kind not in _ORDERED_KINDS:
            # void, blocks, functions and iterators have no order
            return make_boolean(False)
        return make_boolean(compare(lhs.value, rhs.value))

    return apply


less_than = _ordering("<", operator.lt)
greater_than = _ordering(">", operator.gt)


def equals(lhs: RuntimeValue, rhs: RuntimeValue) -> RuntimeValue:
    return make_boolean(values_equal(lhs, rhs))


def not_equals(lhs: RuntimeValue, rhs: RuntimeValue) -> RuntimeValue:
    return logical_not(equals(lhs, rhs))


def less_equal(lhs: RuntimeValue, rhs: RuntimeValue) -> RuntimeValue:
    return logical_or(less_than(lhs, rhs), equals(lhs, rhs))


def greater_equal(lhs: RuntimeValue, rhs: RuntimeValue) -> RuntimeValue:
    return logical_or(greater_than(lhs, rhs), equals(lhs, rhs))


def nullish(lhs: RuntimeValue, rhs: RuntimeValue) -> RuntimeValue:
    """`lhs ?? rhs`: rhs when lhs is Void or false, else lhs. Zero is kept."""
    if lhs.kind is ValueKind.VOID:
        return rhs
    if isinstance(lhs, Boolean) and lhs.value is False:
        return rhs
    return lhs


UNARY_OPERATORS: dict[str, UnaryOp] = {
    "!": logical_not,
    "~": bitwise_not,
    "-": negate,
}

BINARY_OPERATORS: dict[str, BinaryOp] = {
    "&&": logical_and,
    "||": logical_or,
    ">>": _numeric(">>", numeric.shift_right),
    ">>>": _numeric(">>>", numeric.shift_right_unsigned),
    "<<": _numeric("<<", numeric.shift_left),
    "&": _numeric("&", numeric.bitwise_and),
    "^": _numeric("^", numeric.bitwise_xor),
    "|": _numeric("|", numeric.bitwise_or),
    "+": add,
    "-": _numeric("-", operator.sub),
    "*": _numeric("*", operator.mul),
    "/": _numeric("/", numeric.divide),
    "%": _numeric("%", numeric.modulo),
    "**": _numeric("**", numeric.power),
    "<": less_than,
    "<=": less_equal,
    ">": greater_than,
    ">=": greater_equal,
    "==": equals,
    "!=": not_equals,
    "??": nullish,
}
