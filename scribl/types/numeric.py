"""Number semantics shared by the operators.

Numbers are IEEE-754 doubles. Arithmetic never raises: division by zero,
overflow and domain errors produce infinities or NaN. Bitwise operators work on
the value converted to a 32-bit integer (signed, or unsigned for `>>>`), with
shift counts masked to five bits and non-finite values converting to 0.
"""

from __future__ import annotations

import math

_TWO_32 = 1 << 32
_TWO_31 = 1 << 31


def to_uint32(x: float) -> int:
    if math.isnan(x) or math.isinf(x):
        return 0
    return int(x) % _TWO_32


def to_int32(x: float) -> int:
    n = to_uint32(x)
    return n - _TWO_32 if n >= _TWO_31 else n


def _shift_count(x: float) -> int:
    return to_uint32(x) & 0x1F


def divide(a: float, b: float) -> float:
    if b == 0.0:
        if a == 0.0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


def modulo(a: float, b: float) -> float:
    """Remainder with the sign of the dividend."""
    if math.isnan(a) or math.isnan(b) or math.isinf(a) or b == 0.0:
        return math.nan
    if math.isinf(b):
        return a
    return math.fmod(a, b)


def _is_odd_integer(x: float) -> bool:
    return math.isfinite(x) and x == math.floor(x) and math.fmod(x, 2.0) != 0.0


def power(a: float, b: float) -> float:
    if math.isnan(b):
        return math.nan
    if b == 0.0:
        return 1.0
    if math.isnan(a):
        return math.nan
    if abs(a) == 1.0 and math.isinf(b):
        return math.nan
    try:
        return math.pow(a, b)
    except OverflowError:
        negative = a < 0 and _is_odd_integer(b)
        return -math.inf if negative else math.inf
    except ValueError:
        # zero to a negative power, or a negative base with a fractional exponent
        if a == 0.0:
            negative = math.copysign(1.0, a) < 0 and _is_odd_integer(b)
            return -math.inf if negative else math.inf
        return math.nan


def bitwise_not(a: float) -> float:
    return float(~to_int32(a))


def bitwise_and(a: float, b: float) -> float:
    return float(to_int32(a) & to_int32(b))


def bitwise_or(a: float, b: float) -> float:
    return float(to_int32(a) | to_int32(b))


def bitwise_xor(a: float, b: float) -> float:
    return float(to_int32(a) ^ to_int32(b))


def shift_left(a: float, b: float) -> float:
    return float(to_int32(to_int32(a) << _shift_count(b)))


def shift_right(a: float, b: float) -> float:
    """Arithmetic (sign-propagating) shift."""
    return float(to_int32(a) >> _shift_count(b))


def shift_right_unsigned(a: float, b: float) -> float:
    """Logical (zero-filling) shift."""
    return float(to_uint32(a) >> _shift_count(b))
