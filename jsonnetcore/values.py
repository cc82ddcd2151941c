"""Jsonnet values as plain Python data: typing, ordering, equality, JSON output.

Values are ``None``, ``bool``, numbers, ``str``, lists, mappings with string
keys (objects) and callables (functions).
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from decimal import Decimal
from typing import Any


class JsonnetRuntimeError(Exception):
    """An error raised while evaluating Jsonnet."""


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def type_name(value: Any) -> str:
    """The Jsonnet type name of ``value``."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if _is_number(value):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (list, tuple)):
        return "array"
    if isinstance(value, Mapping):
        return "object"
    if callable(value):
        return "function"
    raise TypeError(f"not a Jsonnet value: {type(value).__name__}")


def _type_error(value: Any, expected: str) -> JsonnetRuntimeError:
    return JsonnetRuntimeError(
        f"Unexpected type {type_name(value)}, expected {expected}"
    )


def _general_type_error(value: Any) -> JsonnetRuntimeError:
    return JsonnetRuntimeError(f"Unexpected type {type_name(value)}")


def check_double(x: float) -> float:
    """``x`` as a float, rejecting NaN and infinities."""
    if math.isnan(x):
        raise JsonnetRuntimeError("Not a number")
    if math.isinf(x):
        raise JsonnetRuntimeError("Overflow")
    return float(x)


def _sign(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


def value_cmp(x: Any, y: Any) -> int:
    """Order two numbers, strings or arrays: -1, 0 or 1."""
    kind = type_name(x)
    if kind in ("number", "string"):
        if type_name(y) != kind:
            raise _type_error(y, kind)
        return _sign(x, y)
    if kind == "array":
        if type_name(y) != "array":
            raise _type_error(y, "array")
        for left, right in zip(x, y):
            result = value_cmp(left, right)
            if result:
                return result
        return _sign(len(x), len(y))
    raise _general_type_error(x)


def _visible_fields(obj: Mapping[str, Any]) -> list[str]:
    return sorted(obj.keys())


def raw_equals(x: Any, y: Any) -> bool:
    """Deep structural equality; values of different types are unequal."""
    kind = type_name(x)
    if kind != type_name(y):
        return False
    if kind == "function":
        raise JsonnetRuntimeError("Cannot test equality of functions")
    if kind == "array":
        if len(x) != len(y):
            return False
        for left, right in zip(x, y):
            if not raw_equals(left, right):
                return False
        return True
    if kind == "object":
        fields = _visible_fields(x)
        if fields != _visible_fields(y):
            return False
        for name in fields:
            if not raw_equals(x[name], y[name]):
                return False
        return True
    return x == y


def primitive_equals(x: Any, y: Any) -> bool:
    """Equality restricted to null, booleans, numbers and strings."""
    kind = type_name(x)
    if kind != type_name(y):
        return False
    if kind in ("null", "boolean", "number", "string"):
        return x == y
    if kind == "function":
        raise JsonnetRuntimeError("Cannot test equality of functions")
    raise JsonnetRuntimeError(
        "primitiveEquals operates on primitive types, got " + kind
    )


def json_encode_string(text: str) -> str:
    """``text`` as a JSON string literal, without HTML escaping."""
    out = ['"']
    for ch in text:
        code = ord(ch)
        if ch in ('"', "\\"):
            out.append("\\" + ch)
        elif ch == "\n":
            out.append("\\n")
        elif ch == "\r":
            out.append("\\r")
        elif ch == "\t":
            out.append("\\t")
        elif code < 0x20 or code in (0x2028, 0x2029):
            out.append(f"\\u{code:04x}")
        elif 0xD800 <= code <= 0xDFFF:
            out.append("\ufffd")
        else:
            out.append(ch)
    out.append('"')
    return "".join(out)


def _format_number(value: float) -> str:
    """Shortest round-tripping decimal form, never in exponent notation."""
    return format(Decimal(repr(float(value))).normalize(), "f")


def _compact(value: Any) -> str:
    kind = type_name(value)
    if kind == "null":
        return "null"
    if kind == "boolean":
        return "true" if value else "false"
    if kind == "number":
        return _format_number(value)
    if kind == "string":
        return json_encode_string(value)
    if kind == "array":
        if not value:
            return "[ ]"
        return "[" + ", ".join(_compact(item) for item in value) + "]"
    if kind == "object":
        fields = _visible_fields(value)
        if not fields:
            return "{ }"
        parts = (f"{json_encode_string(name)}: {_compact(value[name])}" for name in fields)
        return "{" + ", ".join(parts) + "}"
    raise JsonnetRuntimeError("Couldn't manifest function as JSON")


def to_string(value: Any) -> str:
    """Strings unchanged; anything else as single-line JSON."""
    if isinstance(value, str):
        return value
    return _compact(value)


def manifest_json_ex(
    value: Any, indent: str, newline: str = "\n", key_val_sep: str = ": "
) -> str:
    """Render ``value`` as JSON with the given indent, newline and separator."""
    for arg in (indent, newline, key_val_sep):
        if not isinstance(arg, str):
            raise _type_error(arg, "string")

    def aux(v: Any, path: list[str], cindent: str) -> str:
        try:
            kind = type_name(v)
        except TypeError:
            raise JsonnetRuntimeError(
                f"unknown type to marshal to JSON: {type(v).__name__}"
            ) from None
        if kind == "null":
            return "null"
        if kind == "string":
            return json_encode_string(v)
        if kind == "number":
            return _format_number(v)
        if kind == "boolean":
            return "true" if v else "false"
        if kind == "function":
            raise JsonnetRuntimeError(
                f"tried to manifest function at [{' '.join(path)}]"
            )
        new_indent = cindent + indent
        if kind == "array":
            lines = [
                new_indent + aux(item, [*path, str(position)], new_indent)
                for position, item in enumerate(v)
            ]
            return "[" + newline + ("," + newline).join(lines) + newline + cindent + "]"
        lines = [
            new_indent
            + json_encode_string(name)
            + key_val_sep
            + aux(v[name], [*path, name], new_indent)
            for name in _visible_fields(v)
        ]
        return "{" + newline + ("," + newline).join(lines) + newline + cindent + "}"

    return aux(value, [], "")