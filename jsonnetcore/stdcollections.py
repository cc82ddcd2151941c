"""Array, string and object functions of the standard library on plain values."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from functools import cmp_to_key
from typing import Any

from .values import JsonnetRuntimeError, type_name, value_cmp


def _type_error(value: Any, expected: str) -> JsonnetRuntimeError:
    return JsonnetRuntimeError(
        f"Unexpected type {type_name(value)}, expected {expected}"
    )


def _array(value: Any) -> list[Any]:
    if type_name(value) != "array":
        raise _type_error(value, "array")
    return list(value)


def _function(value: Any) -> Callable[..., Any]:
    if type_name(value) != "function":
        raise _type_error(value, "function")
    return value


def _object(value: Any) -> Mapping[str, Any]:
    if type_name(value) != "object":
        raise _type_error(value, "object")
    return value


def _string(value: Any) -> str:
    if type_name(value) != "string":
        raise _type_error(value, "string")
    return value


def _boolean(value: Any) -> bool:
    if type_name(value) != "boolean":
        raise _type_error(value, "boolean")
    return value


def _integer(value: Any) -> int:
    if type_name(value) != "number":
        raise _type_error(value, "number")
    n = float(value)
    if not n.is_integer():
        raise JsonnetRuntimeError(f"Expected an integer, but got {n!r}")
    return int(n)


def _required_parameters(func: Callable[..., Any]) -> int:
    bound_offset = 0
    target = func
    inner = getattr(func, "__func__", None)
    if inner is not None:
        target = inner
        bound_offset = 1
    code = getattr(target, "__code__", None)
    if code is None:
        raise JsonnetRuntimeError("Cannot determine the parameters of function")
    defaults = getattr(target, "__defaults__", None) or ()
    required = code.co_argcount - len(defaults) - bound_offset
    return max(required, 0)


def length(x: Any) -> int:
    """Fields of an object, elements of an array, characters of a string,
    or required parameters of a function."""
    kind = type_name(x)
    if kind in ("object", "array", "string"):
        return len(x)
    if kind == "function":
        return _required_parameters(x)
    raise JsonnetRuntimeError(f"Unexpected type {kind}")


def join(sep: Any, arr: Any) -> Any:
    """Join strings or arrays with ``sep``; nulls in ``arr`` are skipped."""
    items = _array(arr)
    kind = type_name(sep)
    if kind == "string":
        pieces = []
        for item in items:
            if item is None:
                continue
            if not isinstance(item, str):
                raise _type_error(item, "string")
            pieces.append(item)
        return sep.join(pieces)
    if kind == "array":
        result: list[Any] = []
        first = True
        for item in items:
            if item is None:
                continue
            if type_name(item) != "array":
                raise _type_error(item, "array")
            if not first:
                result.extend(sep)
            result.extend(item)
            first = False
        return result
    raise JsonnetRuntimeError(
        "join first parameter should be string or array, got " + kind
    )


def reverse(arr: Any) -> list[Any]:
    return _array(arr)[::-1]


def filter_array(func: Any, arr: Any) -> list[Any]:
    """The elements of ``arr`` for which ``func`` returns true."""
    items = _array(arr)
    predicate = _function(func)
    return [item for item in items if _boolean(predicate(item))]


def flat_map(func: Any, arr: Any) -> Any:
    """Map over an array (results concatenated) or a string's characters."""
    mapper = _function(func)
    kind = type_name(arr)
    if kind == "array":
        result: list[Any] = []
        for item in arr:
            result.extend(_array(mapper(item)))
        return result
    if kind == "string":
        return "".join(_string(mapper(ch)) for ch in arr)
    raise JsonnetRuntimeError(
        "std.flatMap second param must be array / string, got " + kind
    )


def _identity(x: Any) -> Any:
    return x


def sort_array(arr: Any, key_f: Any = _identity) -> list[Any]:
    """A stable sort of ``arr`` by the keys ``key_f`` gives its elements."""
    items = _array(arr)
    key_func = _function(key_f)
    keyed = [(key_func(item), item) for item in items]
    keyed.sort(key=cmp_to_key(lambda a, b: value_cmp(a[0], b[0])))
    return [item for _, item in keyed]


def make_range(start: Any, stop: Any) -> list[int]:
    """The integers from ``start`` to ``stop``, both inclusive."""
    first = _integer(start)
    last = _integer(stop)
    return list(range(first, last + 1))


def make_array(size: Any, func: Any) -> list[Any]:
    """``[func(0), ..., func(size - 1)]``."""
    count = _integer(size)
    maker = _function(func)
    return [maker(position) for position in range(count)]


def object_fields_ex(obj: Any, include_hidden: Any) -> list[str]:
    """The sorted field names of ``obj``."""
    mapping = _object(obj)
    _boolean(include_hidden)
    return sorted(mapping.keys())


def object_has_ex(obj: Any, name: Any, include_hidden: Any) -> bool:
    """Whether ``obj`` has a field called ``name``."""
    mapping = _object(obj)
    field_name = _string(name)
    _boolean(include_hidden)
    return field_name in mapping