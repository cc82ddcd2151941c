import pytest

from jsonnetcore.location import Location, LocationRange
from jsonnetcore.nodes import (
    Apply,
    Array,
    Binary,
    BinaryOp,
    ForSpec,
    Function,
    LiteralNumber,
    LiteralStringKind,
    ObjectFieldHide,
    ObjectFieldKind,
    Unary,
    UnaryOp,
    Var,
    object_field_local_no_method,
    parse_binary_op,
    parse_unary_op,
)


@pytest.mark.parametrize("op", list(BinaryOp))
def test_binary_op_round_trip(op):
    assert parse_binary_op(str(op)) is op


@pytest.mark.parametrize("op", list(UnaryOp))
def test_unary_op_round_trip(op):
    assert parse_unary_op(str(op)) is op


def test_binary_op_symbols_from_source():
    assert str(BinaryOp.MULT) == "*"
    assert str(BinaryOp.IN) == "in"
    assert parse_binary_op("&&") is BinaryOp.AND
    assert parse_binary_op("!=") is BinaryOp.MANIFEST_UNEQUAL


def test_binary_symbols_unique():
    parsed = [parse_binary_op(op.symbol) for op in BinaryOp]
    assert parsed == list(BinaryOp)
    assert len(set(parsed)) == len(parsed)


def test_unary_symbols():
    assert parse_unary_op("~") is UnaryOp.BITWISE_NOT
    assert str(UnaryOp.NOT) == "!"


def test_unknown_operators_raise():
    with pytest.raises(ValueError):
        parse_binary_op("**")
    with pytest.raises(ValueError):
        parse_unary_op("?")


def test_operator_order_follows_declaration():
    assert parse_binary_op("*") < parse_binary_op("+") < parse_binary_op("||")
    assert list(BinaryOp)[0] is parse_binary_op("*")
    assert list(UnaryOp)[-1] is parse_unary_op("-")


@pytest.mark.parametrize(
    "kind, expected",
    [
        (LiteralStringKind.SINGLE, True),
        (LiteralStringKind.DOUBLE, True),
        (LiteralStringKind.BLOCK, False),
        (LiteralStringKind.VERBATIM_DOUBLE, False),
        (LiteralStringKind.VERBATIM_SINGLE, False),
    ],
)
def test_fully_escaped(kind, expected):
    assert kind.fully_escaped() is expected


def test_object_field_local_no_method():
    loc = LocationRange(file_name="f", begin=Location(1, 1), end=Location(1, 5))
    body = LiteralNumber(original_string="1")
    fld = object_field_local_no_method("x", body, loc)
    assert fld.kind is ObjectFieldKind.LOCAL
    assert fld.hide is ObjectFieldHide.VISIBLE
    assert fld.id == "x"
    assert fld.expr2 is body
    assert fld.loc_range == loc
    assert fld.method is None
    assert fld.expr1 is None


def test_node_defaults_are_independent():
    a = Var(id="a")
    b = Var(id="b")
    a.free_vars.append("a")
    a.fodder.append("marker")
    assert b.free_vars == []
    assert b.fodder == []
    assert not a.loc_range.is_set()


def test_binary_construction_positional_fields():
    left = Var(id="x")
    right = Var(id="y")
    node = Binary(left=left, op=parse_binary_op("+"), right=right, free_vars=["x", "y"])
    assert node.left is left
    assert node.right is right
    assert node.op is BinaryOp.PLUS
    assert node.free_vars == ["x", "y"]


def test_nested_structures():
    inner = ForSpec(var_name="x")
    outer = ForSpec(var_name="y", outer=inner)
    assert outer.outer.var_name == "x"
    fn = Function(body=Unary(op=UnaryOp.MINUS, expr=Var(id="z")))
    assert fn.parameters == []
    assert fn.body.expr.id == "z"
    call = Apply(target=fn)
    assert call.arguments.positional == []
    assert call.arguments.named == []
    assert Array().elements == []


def test_nodes_compare_by_value():
    assert Var(id="q") == Var(id="q")
    assert Var(id="q") != Var(id="r")