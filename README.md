# jsonnetcore

Building blocks for a Jsonnet interpreter, using only the standard library.

## What is inside

- `jsonnetcore.location`: source files (`Source`, `build_source`), positions
  (`Location`, `LocationRange`) and helpers for error reporting:
  `location_before`, `location_range_between`, `make_location_range`,
  `make_location_range_message`, `get_snippet`, `line_beginning` and
  `line_ending`.
- `jsonnetcore.fodder`: whitespace and comment "fodder" kept alongside tokens
  (`FodderKind`, `FodderElement`, `make_fodder_element`, `has_clean_endline`,
  `fodder_append`, `fodder_concat`, `fodder_move_front`,
  `ensure_clean_newline`, `element_count_newlines`, `count_newlines`).
  Invalid element combinations raise `ValueError`.
- `jsonnetcore.identifier_set`: `IdentifierSet`, a set of identifier names
  with `union`, `intersect`, `difference`, `symmetric_difference`,
  subset/superset tests and export as a list (`to_slice`) or a sorted list
  (`to_ordered_slice`).
- `jsonnetcore.nodes`: dataclasses for the syntax tree (`Apply`, `Binary`,
  `Function`, `Object`, `DesugaredObject`, `Local`, `Var`, ...), the enums
  `BinaryOp`, `UnaryOp`, `LiteralStringKind`, `ObjectFieldKind` and
  `ObjectFieldHide`, plus `parse_binary_op`, `parse_unary_op` and
  `object_field_local_no_method`.
- `jsonnetcore.clone`: `clone(node)` returns an independent deep copy of a
  syntax tree; unknown node types raise `TypeError`.
- `jsonnetcore.cliutil`: helpers for command-line front ends:
  `simplify_args` (expands `-abc` into `-a -b -c` before `--`), `next_arg`,
  `safe_str_to_int`, `read_input` (code from the argument, stdin for `-`, or
  a file; returns the code and its diagnostic name) and `write_output_file`.
  Problems are raised as `CommandLineError`.
- `jsonnetcore.values`: Jsonnet value semantics on plain Python data
  (`None`, `bool`, numbers, `str`, lists, mappings, callables): `type_name`,
  `check_double`, `value_cmp`, `raw_equals`, `primitive_equals`,
  `json_encode_string`, `to_string` and `manifest_json_ex`.
- `jsonnetcore.arith`: operators and numeric functions (`plus`, `minus`,
  `div`, `modulo`, comparisons, equality, bitwise and shift operators on
  64-bit integers, `sqrt`, `floor`, `log`, `exp`, `mantissa`, `exponent`,
  `pow`, ...). NaN and infinite results are rejected.
- `jsonnetcore.stdstrings`: `md5`, `base64_encode`, `base64_decode`,
  `base64_decode_bytes`, `encode_utf8`, `decode_utf8`, `char`, `codepoint`,
  `substr`, `split_limit`, `str_replace` and `parse_json`.
- `jsonnetcore.stdcollections`: `length`, `join`, `reverse`,
  `filter_array`, `flat_map`, `sort_array` (stable, with an optional key
  function), `make_range`, `make_array`, `object_fields_ex` and
  `object_has_ex`.

Errors from the built-in functions are raised as
`jsonnetcore.values.JsonnetRuntimeError`.

## Examples

```python
from jsonnetcore.cliutil import simplify_args
from jsonnetcore.stdstrings import split_limit
from jsonnetcore.values import manifest_json_ex

simplify_args(["-abc", "--", "-xy"])   # ['-a', '-b', '-c', '--', '-xy']
split_limit("a,b,c", ",", 1)           # ['a', 'b,c']
print(manifest_json_ex({"b": [1, 2], "a": None}, "  "))
```

```python
from jsonnetcore.location import Location, build_source, get_snippet, make_location_range

src = build_source("example.jsonnet", "local x = foo();\nx\n")
loc = make_location_range("example.jsonnet", src, Location(1, 11), Location(1, 16))
get_snippet(loc)   # 'foo()'
```

## What it does not do

This package holds the pieces an interpreter is built from, not an
interpreter. It has no lexer or parser that turns Jsonnet text into the
nodes of `jsonnetcore.nodes`, no evaluator, no code formatter, no linter
and no command-line program; `jsonnetcore.cliutil` only offers helpers
such a program would use.

The built-in functions work on plain Python values. Objects are ordinary
mappings: they have no hidden fields (`object_fields_ex` and
`object_has_ex` check the `include_hidden` argument's type but otherwise
ignore it), no `self` or `super`, and `plus` on two objects is a simple
key merge. Functions are Python callables.

## Running the tests

```
pip install -e .[test]
pytest
```