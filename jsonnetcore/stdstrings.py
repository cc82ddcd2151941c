"""String, encoding and JSON-parsing functions of the standard library."""

from __future__ import annotations

import base64
import binascii
import hashlib
import json
from typing import Any

from .values import JsonnetRuntimeError, type_name

_CODEPOINT_MAX = 0x10FFFF


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _type_error(value: Any, expected: str) -> JsonnetRuntimeError:
    return JsonnetRuntimeError(
        f"Unexpected type {type_name(value)}, expected {expected}"
    )


def _string(value: Any) -> str:
    if not isinstance(value, str):
        raise _type_error(value, "string")
    return value


def _number(value: Any) -> float:
    if not _is_number(value):
        raise _type_error(value, "number")
    return float(value)


def _is_integer(value: Any) -> bool:
    return _is_number(value) and float(value).is_integer()


def _integer(value: Any) -> int:
    n = _number(value)
    if not n.is_integer():
        raise JsonnetRuntimeError(f"Expected an integer, but got {n!r}")
    return int(n)


def _fmt(n: float) -> str:
    return str(int(n)) if float(n).is_integer() else repr(float(n))


def md5(text: Any) -> str:
    """Hex MD5 digest of the UTF-8 encoding of ``text``."""
    return hashlib.md5(_string(text).encode("utf-8")).hexdigest()


def _check_byte(v: int) -> None:
    if v < 0 or v > 255:
        raise JsonnetRuntimeError(
            "base64 encountered invalid codepoint value in the array "
            f"(must be 0 <= X <= 255), got {v}"
        )


def base64_encode(data: Any) -> str:
    """Base64 of a string (as UTF-8) or of an array of byte values."""
    if isinstance(data, str):
        for ch in data:
            _check_byte(ord(ch))
        raw = data.encode("utf-8")
    elif isinstance(data, (list, tuple)):
        collected = bytearray()
        for item in data:
            if not _is_integer(item):
                raise JsonnetRuntimeError(
                    "base64 encountered a non-integer value in the array, "
                    f"got {type_name(item)}"
                )
            v = int(item)
            _check_byte(v)
            collected.append(v)
        raw = bytes(collected)
    else:
        raise JsonnetRuntimeError(
            "base64 can only base64 encode strings / arrays of single bytes, "
            f"got {type_name(data)}"
        )
    return base64.b64encode(raw).decode("ascii")


def _decode_bytes(text: Any) -> bytes:
    if not isinstance(text, str):
        raise JsonnetRuntimeError(
            f"base64DecodeBytes requires a string, got {type_name(text)}"
        )
    size = len(text.encode("utf-8"))
    if size % 4 != 0:
        raise JsonnetRuntimeError(
            "input string appears not to be a base64 encoded string. "
            f"Wrong length found ({size})"
        )
    try:
        return base64.b64decode(text, validate=True)
    except (binascii.Error, ValueError) as err:
        raise JsonnetRuntimeError(f"failed to decode: {err}") from None


def base64_decode(text: Any) -> str:
    """Decode base64 into a string; invalid UTF-8 becomes U+FFFD."""
    return _decode_bytes(text).decode("utf-8", errors="replace")


def base64_decode_bytes(text: Any) -> list[int]:
    """Decode base64 into a list of byte values."""
    return list(_decode_bytes(text))


def encode_utf8(text: Any) -> list[int]:
    return list(_string(text).encode("utf-8"))


def decode_utf8(arr: Any) -> str:
    """Decode an array of byte values as UTF-8."""
    if not isinstance(arr, (list, tuple)):
        raise _type_error(arr, "array")
    collected = bytearray()
    for item in arr:
        v = _integer(item)
        if v < 0 or v > 255:
            raise JsonnetRuntimeError(
                f"Bytes must be integers in range [0, 255], got {v}"
            )
        collected.append(v)
    return bytes(collected).decode("utf-8", errors="replace")


def char(n: Any) -> str:
    """The one-character string for codepoint ``n``."""
    value = _number(n)
    if value > _CODEPOINT_MAX:
        raise JsonnetRuntimeError(f"Invalid unicode codepoint, got {_fmt(value)}")
    if value < 0:
        raise JsonnetRuntimeError(f"Codepoints must be >= 0, got {_fmt(value)}")
    code = int(value)
    if 0xD800 <= code <= 0xDFFF:
        return "\ufffd"
    return chr(code)


def codepoint(text: Any) -> int:
    s = _string(text)
    if len(s) != 1:
        raise JsonnetRuntimeError(
            f"codepoint takes a string of length 1, got length {len(s)}"
        )
    return ord(s)


def substr(text: Any, start: Any, length: Any) -> str:
    """Up to ``length`` characters of ``text`` from position ``start``."""
    if not isinstance(text, str):
        raise JsonnetRuntimeError(
            f"substr first parameter should be a string, got {type_name(text)}"
        )
    if not _is_number(start):
        raise JsonnetRuntimeError(
            f"substr second parameter should be a number, got {type_name(start)}"
        )
    if not float(start).is_integer():
        raise JsonnetRuntimeError(
            f"substr second parameter should be an integer, got {float(start):f}"
        )
    if not _is_number(length):
        raise JsonnetRuntimeError(
            f"substr third parameter should be a number, got {type_name(length)}"
        )
    if not float(length).is_integer():
        raise JsonnetRuntimeError(
            f"substr third parameter should be an integer, got {float(length):f}"
        )
    count = int(length)
    if count < 0:
        raise JsonnetRuntimeError(
            f"substr third parameter should be greater than zero, got {count}"
        )
    begin = int(start)
    if begin < 0:
        raise JsonnetRuntimeError(
            f"substr second parameter should be non-negative, got {begin}"
        )
    if begin > len(text):
        return ""
    return text[begin : begin + count]


def split_limit(text: Any, sep: Any, max_splits: Any) -> list[str]:
    """Split on the single character ``sep`` at most ``max_splits`` times (-1: all)."""
    s = _string(text)
    c = _string(sep)
    limit = _integer(max_splits)
    if limit < -1:
        raise JsonnetRuntimeError(
            "std.splitLimit third parameter should be -1 or non-negative, "
            f"got {limit}"
        )
    size = len(c.encode("utf-8"))
    if size != 1:
        raise JsonnetRuntimeError(
            f"std.splitLimit second parameter should have length 1, got {size}"
        )
    return s.split(c, limit)


def str_replace(text: Any, old: Any, new: Any) -> str:
    s, a, b = _string(text), _string(old), _string(new)
    if not a:
        raise JsonnetRuntimeError("'from' string must not be zero length.")
    return s.replace(a, b)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"invalid literal {name}")


def parse_json(text: Any) -> Any:
    """Parse JSON text into plain values; numbers become floats."""
    s = _string(text)
    try:
        return json.loads(s, parse_int=float, parse_constant=_reject_constant)
    except ValueError as err:
        raise JsonnetRuntimeError(f"failed to parse JSON: {err}") from None