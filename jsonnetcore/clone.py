"""Deep copies of abstract syntax trees."""

from __future__ import annotations

import copy
from collections.abc import Callable
from dataclasses import replace
from typing import TypeVar

from .nodes import (
    Apply,
    ApplyBrace,
    Arguments,
    Array,
    ArrayComp,
    Assert,
    Binary,
    CommaSeparatedExpr,
    Conditional,
    DesugaredObject,
    Dollar,
    Error,
    ForSpec,
    Function,
    Import,
    ImportStr,
    Index,
    InSuper,
    LiteralBoolean,
    LiteralNull,
    LiteralNumber,
    LiteralString,
    Local,
    Node,
    Object,
    ObjectComp,
    ObjectField,
    Parens,
    Self,
    Slice,
    SuperIndex,
    Unary,
    Var,
)

N = TypeVar("N", bound=Node)


def clone(node: N | None) -> N | None:
    """An independent deep copy of ``node``.

    Child nodes are copied recursively; source files referenced by
    locations are shared.
    """
    if node is None:
        return None
    handler = _HANDLERS.get(type(node))
    if handler is None:
        raise TypeError(f"clone() does not recognize ast: {type(node).__name__}")
    result = copy.copy(node)
    handler(result)
    result.free_vars = list(result.free_vars)
    return result


def _clone_exprs(items: list[CommaSeparatedExpr]) -> list[CommaSeparatedExpr]:
    return [replace(item, expr=clone(item.expr)) for item in items]


def _clone_for_spec(spec: ForSpec) -> ForSpec:
    return replace(
        spec,
        expr=clone(spec.expr),
        outer=_clone_for_spec(spec.outer) if spec.outer is not None else None,
        conditions=[replace(cond, expr=clone(cond.expr)) for cond in spec.conditions],
    )


def _clone_field(item: ObjectField) -> ObjectField:
    return replace(
        item,
        method=clone(item.method),
        expr1=clone(item.expr1),
        expr2=clone(item.expr2),
        expr3=clone(item.expr3),
    )


def _leaf(node: Node) -> None:
    """Nodes without children need nothing beyond the shallow copy."""


def _apply(node: Apply) -> None:
    node.target = clone(node.target)
    node.arguments = Arguments(
        positional=_clone_exprs(node.arguments.positional),
        named=[replace(arg, arg=clone(arg.arg)) for arg in node.arguments.named],
    )


def _apply_brace(node: ApplyBrace) -> None:
    node.left = clone(node.left)
    node.right = clone(node.right)


def _array(node: Array) -> None:
    node.elements = _clone_exprs(node.elements)


def _array_comp(node: ArrayComp) -> None:
    node.body = clone(node.body)
    node.spec = _clone_for_spec(node.spec)


def _assert(node: Assert) -> None:
    node.cond = clone(node.cond)
    node.message = clone(node.message)
    node.rest = clone(node.rest)


def _binary(node: Binary) -> None:
    node.left = clone(node.left)
    node.right = clone(node.right)


def _conditional(node: Conditional) -> None:
    node.cond = clone(node.cond)
    node.branch_true = clone(node.branch_true)
    node.branch_false = clone(node.branch_false)


def _error(node: Error) -> None:
    node.expr = clone(node.expr)


def _function(node: Function) -> None:
    node.parameters = [
        replace(param, default_arg=clone(param.default_arg))
        for param in node.parameters
    ]
    node.body = clone(node.body)


def _import(node: Import | ImportStr) -> None:
    node.file = copy.copy(node.file)


def _index(node: Index) -> None:
    node.target = clone(node.target)
    node.index = clone(node.index)


def _slice(node: Slice) -> None:
    node.target = clone(node.target)
    node.begin_index = clone(node.begin_index)
    node.end_index = clone(node.end_index)
    node.step = clone(node.step)


def _local(node: Local) -> None:
    node.binds = [
        replace(bind, fun=clone(bind.fun), body=clone(bind.body))
        for bind in node.binds
    ]
    node.body = clone(node.body)


def _object(node: Object) -> None:
    node.fields = [_clone_field(item) for item in node.fields]


def _desugared_object(node: DesugaredObject) -> None:
    node.fields = [
        replace(item, name=clone(item.name), body=clone(item.body))
        for item in node.fields
    ]


def _object_comp(node: ObjectComp) -> None:
    node.fields = [_clone_field(item) for item in node.fields]
    node.spec = _clone_for_spec(node.spec)


def _parens(node: Parens) -> None:
    node.inner = clone(node.inner)


def _indexed(node: SuperIndex | InSuper) -> None:
    node.index = clone(node.index)


def _unary(node: Unary) -> None:
    node.expr = clone(node.expr)


_HANDLERS: dict[type, Callable] = {
    Apply: _apply,
    ApplyBrace: _apply_brace,
    Array: _array,
    ArrayComp: _array_comp,
    Assert: _assert,
    Binary: _binary,
    Conditional: _conditional,
    Dollar: _leaf,
    Error: _error,
    Function: _function,
    Import: _import,
    ImportStr: _import,
    Index: _index,
    Slice: _slice,
    Local: _local,
    LiteralBoolean: _leaf,
    LiteralNull: _leaf,
    LiteralNumber: _leaf,
    LiteralString: _leaf,
    Object: _object,
    DesugaredObject: _desugared_object,
    ObjectComp: _object_comp,
    Parens: _parens,
    Self: _leaf,
    SuperIndex: _indexed,
    InSuper: _indexed,
    Unary: _unary,
    Var: _leaf,
}