"""Jsonnet operators and numeric standard-library functions on plain values."""

from __future__ import annotations

import math
from collections.abc import Callable, Mapping
from typing import Any

from .values import (
    JsonnetRuntimeError,
    check_double,
    raw_equals,
    to_string,
    type_name,
    value_cmp,
)

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _type_error(value: Any, expected: str) -> JsonnetRuntimeError:
    return JsonnetRuntimeError(
        f"Unexpected type {type_name(value)}, expected {expected}"
    )


def _number(value: Any) -> float:
    if not _is_number(value):
        raise _type_error(value, "number")
    return float(value)


def _boolean(value: Any) -> bool:
    if not isinstance(value, bool):
        raise _type_error(value, "boolean")
    return value


def _wrap64(n: int) -> int:
    return ((n + 2**63) % 2**64) - 2**63


def plus(x: Any, y: Any) -> Any:
    """``x + y``: numbers, string concatenation, arrays and object extension."""
    if isinstance(y, str):
        return to_string(x) + y
    if _is_number(x):
        return check_double(float(x) + _number(y))
    if isinstance(x, str):
        return x + to_string(y)
    if isinstance(x, Mapping):
        if not isinstance(y, Mapping):
            raise _type_error(y, "object")
        return {**x, **y}
    if isinstance(x, (list, tuple)):
        if not isinstance(y, (list, tuple)):
            raise _type_error(y, "array")
        return [*x, *y]
    raise JsonnetRuntimeError(f"Unexpected type {type_name(x)}")


def minus(x: Any, y: Any) -> float:
    return check_double(_number(x) - _number(y))


def mult(x: Any, y: Any) -> float:
    return check_double(_number(x) * _number(y))


def div(x: Any, y: Any) -> float:
    left, right = _number(x), _number(y)
    if right == 0:
        raise JsonnetRuntimeError("Division by zero.")
    return check_double(left / right)


def modulo(x: Any, y: Any) -> float:
    """Remainder whose sign follows the dividend."""
    left, right = _number(x), _number(y)
    if right == 0:
        raise JsonnetRuntimeError("Division by zero.")
    return check_double(math.fmod(left, right))


def less(x: Any, y: Any) -> bool:
    return value_cmp(x, y) == -1


def greater(x: Any, y: Any) -> bool:
    return value_cmp(x, y) == 1


def less_eq(x: Any, y: Any) -> bool:
    return value_cmp(x, y) <= 0


def greater_eq(x: Any, y: Any) -> bool:
    return value_cmp(x, y) >= 0


def equals(x: Any, y: Any) -> bool:
    return raw_equals(x, y)


def not_equals(x: Any, y: Any) -> bool:
    return not raw_equals(x, y)


def negation(x: Any) -> bool:
    return not _boolean(x)


def bit_neg(x: Any) -> float:
    return float(~_wrap64(int(_number(x))))


def unary_plus(x: Any) -> float:
    return _number(x)


def unary_minus(x: Any) -> float:
    return -_number(x)


def _bitwise(
    func: Callable[[int, int], int], x: Any, y: Any, positive_right: bool = False
) -> float:
    left, right = _number(x), _number(y)
    for arg in (left, right):
        if arg < _INT64_MIN or arg > float(2**63):
            raise JsonnetRuntimeError(
                f"Bitwise operator argument {arg!r} outside of range "
                f"[{_INT64_MIN}, {_INT64_MAX}]"
            )
    if positive_right and right < 0:
        raise JsonnetRuntimeError("Shift by negative exponent.")
    result = func(_wrap64(int(left)), _wrap64(int(right)))
    return check_double(float(_wrap64(result)))


def shift_l(x: Any, y: Any) -> float:
    return _bitwise(lambda a, b: a << (b % 64), x, y, positive_right=True)


def shift_r(x: Any, y: Any) -> float:
    return _bitwise(lambda a, b: a >> (b % 64), x, y, positive_right=True)


def bitwise_and(x: Any, y: Any) -> float:
    return _bitwise(lambda a, b: a & b, x, y)


def bitwise_or(x: Any, y: Any) -> float:
    return _bitwise(lambda a, b: a | b, x, y)


def bitwise_xor(x: Any, y: Any) -> float:
    return _bitwise(lambda a, b: a ^ b, x, y)


def _lift(func: Callable[[float], float], x: Any) -> float:
    """Apply ``func`` with IEEE results: domain errors give NaN, overflow gives inf."""
    n = _number(x)
    try:
        result = func(n)
    except ValueError:
        result = math.nan
    except OverflowError:
        result = math.inf
    return check_double(result)


def _log(f: float) -> float:
    if f == 0:
        return -math.inf
    return math.log(f)


def sqrt(x: Any) -> float:
    return _lift(math.sqrt, x)


def ceil(x: Any) -> float:
    return _lift(lambda f: float(math.ceil(f)), x)


def floor(x: Any) -> float:
    return _lift(lambda f: float(math.floor(f)), x)


def sin(x: Any) -> float:
    return _lift(math.sin, x)


def cos(x: Any) -> float:
    return _lift(math.cos, x)


def tan(x: Any) -> float:
    return _lift(math.tan, x)


def asin(x: Any) -> float:
    return _lift(math.asin, x)


def acos(x: Any) -> float:
    return _lift(math.acos, x)


def atan(x: Any) -> float:
    return _lift(math.atan, x)


def log(x: Any) -> float:
    return _lift(_log, x)


def exp(x: Any) -> float:
    return _lift(math.exp, x)


def mantissa(x: Any) -> float:
    return _lift(lambda f: math.frexp(f)[0], x)


def exponent(x: Any) -> float:
    return _lift(lambda f: float(math.frexp(f)[1]), x)


def pow(base: Any, exponent: Any) -> float:  # noqa: A001
    b, e = _number(base), _number(exponent)
    if b == 0 and e < 0:
        raise JsonnetRuntimeError("Overflow")
    try:
        result = math.pow(b, e)
    except ValueError:
        result = math.nan
    except OverflowError:
        result = math.inf
    return check_double(result)