"""Syntax tree, source locations, fodder, command-line helpers and standard built-ins for Jsonnet."""

__version__ = "0.1.0"

__all__ = [
    "arith",
    "cliutil",
    "clone",
    "fodder",
    "identifier_set",
    "location",
    "nodes",
    "stdcollections",
    "stdstrings",
    "values",
]