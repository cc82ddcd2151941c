"""Helpers shared by the command-line tools."""

from __future__ import annotations

import os
import re
import sys

_INTEGER = re.compile(r"[+-]?[0-9]+")
_INT_MIN = -(2**63)
_INT_MAX = 2**63 - 1


class CommandLineError(Exception):
    """A problem with the command line or its input that stops the tool."""


def next_arg(args: list[str], index: int) -> str:
    """The argument following position ``index``."""
    if index + 1 >= len(args):
        raise CommandLineError("Expected another commandline argument.")
    return args[index + 1]


def simplify_args(args: list[str]) -> list[str]:
    """Expand ``-abc`` into ``-a -b -c`` for every argument before ``--``."""
    result: list[str] = []
    for position, arg in enumerate(args):
        if arg == "--":
            result.extend(args[position:])
            break
        if len(arg) > 2 and arg[0] == "-" and arg[1] != "-":
            result.extend("-" + ch for ch in arg[1:])
        else:
            result.append(arg)
    return result


def safe_str_to_int(text: str) -> int:
    """Parse a decimal integer, raising CommandLineError if it is not one."""
    if _INTEGER.fullmatch(text) is None:
        raise CommandLineError(f'Invalid integer "{text}"')
    value = int(text)
    if not _INT_MIN <= value <= _INT_MAX:
        raise CommandLineError(f'Invalid integer "{text}"')
    return value


def read_input(filename_is_code: bool, filename: str) -> tuple[str, str]:
    """Read code from the command line, stdin (``-``) or a file.

    Returns the code and the name to use for it in diagnostics.
    """
    if filename_is_code:
        return filename, "<cmdline>"
    if filename == "-":
        return sys.stdin.read(), "<stdin>"
    try:
        with open(filename, encoding="utf-8", newline="") as handle:
            return handle.read(), filename
    except IsADirectoryError as err:
        raise CommandLineError(
            f"Reading input file: {filename}: {err.strerror}"
        ) from err
    except OSError as err:
        raise CommandLineError(
            f"Opening input file: {filename}: {err.strerror}"
        ) from err


def write_output_file(output: str, output_file: str, create_dirs: bool) -> None:
    """Write ``output`` to ``output_file``, or to stdout when it is empty."""
    if not output_file:
        sys.stdout.write(output)
        return
    if create_dirs:
        directory = os.path.dirname(output_file)
        if directory:
            os.makedirs(directory, exist_ok=True)
    with open(output_file, "w", encoding="utf-8", newline="") as handle:
        handle.write(output)