"""Abstract syntax tree nodes and the enumerations they use."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

from .fodder import FodderElement
from .location import LocationRange

Fodder = list[FodderElement]


@dataclass(kw_only=True)
class Node:
    """Fields shared by every AST node.

    ``fodder`` is the fodder before the node's first token.  It is empty for
    left-recursive nodes, whose first token belongs to a sub-expression.
    """

    loc_range: LocationRange = field(default_factory=LocationRange)
    fodder: Fodder = field(default_factory=list)
    ctx: str | None = None
    free_vars: list[str] = field(default_factory=list)


# ---------------------------------------------------------------------------
# Comprehension specifications


@dataclass
class IfSpec:
    """An ``if`` clause of a comprehension."""

    if_fodder: Fodder = field(default_factory=list)
    expr: Node | None = None


@dataclass
class ForSpec:
    """A ``for`` clause of a comprehension.

    Clauses are nested by ``outer``: the leftmost clause is the outermost.
    ``if`` clauses are attached to the ``for`` clause on their left.
    """

    for_fodder: Fodder = field(default_factory=list)
    var_fodder: Fodder = field(default_factory=list)
    var_name: str = ""
    in_fodder: Fodder = field(default_factory=list)
    expr: Node | None = None
    conditions: list[IfSpec] = field(default_factory=list)
    outer: ForSpec | None = None


# ---------------------------------------------------------------------------
# Function calls


@dataclass
class NamedArgument:
    """A named argument of a call, ``x=1``."""

    name_fodder: Fodder = field(default_factory=list)
    name: str = ""
    eq_fodder: Fodder = field(default_factory=list)
    arg: Node | None = None
    comma_fodder: Fodder = field(default_factory=list)


@dataclass
class CommaSeparatedExpr:
    """An element of a comma-separated list of expressions."""

    expr: Node | None = None
    comma_fodder: Fodder = field(default_factory=list)


@dataclass
class Arguments:
    """Positional and named arguments of a call."""

    positional: list[CommaSeparatedExpr] = field(default_factory=list)
    named: list[NamedArgument] = field(default_factory=list)


@dataclass
class Apply(Node):
    """A function call."""

    target: Node | None = None
    fodder_left: Fodder = field(default_factory=list)
    arguments: Arguments = field(default_factory=Arguments)
    trailing_comma: bool = False
    tail_strict: bool = False
    fodder_right: Fodder = field(default_factory=list)
    tail_strict_fodder: Fodder = field(default_factory=list)


@dataclass
class ApplyBrace(Node):
    """``e { }``, which desugars to ``e + { }``."""

    left: Node | None = None
    right: Node | None = None


# ---------------------------------------------------------------------------
# Arrays


@dataclass
class Array(Node):
    """An array constructor ``[1, 2, 3]``."""

    elements: list[CommaSeparatedExpr] = field(default_factory=list)
    trailing_comma: bool = False
    close_fodder: Fodder = field(default_factory=list)


@dataclass
class ArrayComp(Node):
    """An array comprehension."""

    body: Node | None = None
    trailing_comma: bool = False
    trailing_comma_fodder: Fodder = field(default_factory=list)
    spec: ForSpec = field(default_factory=ForSpec)
    close_fodder: Fodder = field(default_factory=list)


# ---------------------------------------------------------------------------


@dataclass
class Assert(Node):
    """An assert expression; ``message`` may be absent."""

    cond: Node | None = None
    colon_fodder: Fodder = field(default_factory=list)
    message: Node | None = None
    semicolon_fodder: Fodder = field(default_factory=list)
    rest: Node | None = None


# ---------------------------------------------------------------------------
# Binary operators

_BINARY_SYMBOLS: dict[str, str] = {}


class BinaryOp(IntEnum):
    """A binary operator."""

    MULT = 0
    DIV = 1
    PERCENT = 2
    PLUS = 3
    MINUS = 4
    SHIFT_L = 5
    SHIFT_R = 6
    GREATER = 7
    GREATER_EQ = 8
    LESS = 9
    LESS_EQ = 10
    IN = 11
    MANIFEST_EQUAL = 12
    MANIFEST_UNEQUAL = 13
    BITWISE_AND = 14
    BITWISE_XOR = 15
    BITWISE_OR = 16
    AND = 17
    OR = 18

    @property
    def symbol(self) -> str:
        return _BINARY_SYMBOLS[self.name]

    def __str__(self) -> str:
        return self.symbol


_BINARY_SYMBOLS.update(
    MULT="*",
    DIV="/",
    PERCENT="%",
    PLUS="+",
    MINUS="-",
    SHIFT_L="<<",
    SHIFT_R=">>",
    GREATER=">",
    GREATER_EQ=">=",
    LESS="<",
    LESS_EQ="<=",
    IN="in",
    MANIFEST_EQUAL="==",
    MANIFEST_UNEQUAL="!=",
    BITWISE_AND="&",
    BITWISE_XOR="^",
    BITWISE_OR="|",
    AND="&&",
    OR="||",
)

_BINARY_BY_TOKEN = {op.symbol: op for op in BinaryOp}


def parse_binary_op(token: str) -> BinaryOp:
    """The binary operator written as ``token``."""
    try:
        return _BINARY_BY_TOKEN[token]
    except KeyError:
        raise ValueError(f"Unrecognised binary operator: {token!r}") from None


@dataclass
class Binary(Node):
    """A binary operation."""

    left: Node | None = None
    op_fodder: Fodder = field(default_factory=list)
    op: BinaryOp = BinaryOp.PLUS
    right: Node | None = None


# ---------------------------------------------------------------------------


@dataclass
class Conditional(Node):
    """``if/then/else``; ``branch_false`` may be absent before desugaring."""

    cond: Node | None = None
    then_fodder: Fodder = field(default_factory=list)
    branch_true: Node | None = None
    else_fodder: Fodder = field(default_factory=list)
    branch_false: Node | None = None


@dataclass
class Dollar(Node):
    """The ``$`` keyword."""


@dataclass
class Error(Node):
    """``error e``."""

    expr: Node | None = None


# ---------------------------------------------------------------------------
# Functions


@dataclass
class Parameter:
    """A function parameter; optional when ``default_arg`` is set."""

    name_fodder: Fodder = field(default_factory=list)
    name: str = ""
    eq_fodder: Fodder = field(default_factory=list)
    default_arg: Node | None = None
    comma_fodder: Fodder = field(default_factory=list)
    loc_range: LocationRange = field(default_factory=LocationRange)


@dataclass
class CommaSeparatedID:
    """An element of a comma-separated list of identifiers."""

    name_fodder: Fodder = field(default_factory=list)
    name: str = ""
    comma_fodder: Fodder = field(default_factory=list)


@dataclass
class Function(Node):
    """A function definition."""

    paren_left_fodder: Fodder = field(default_factory=list)
    parameters: list[Parameter] = field(default_factory=list)
    trailing_comma: bool = False
    paren_right_fodder: Fodder = field(default_factory=list)
    body: Node | None = None


# ---------------------------------------------------------------------------
# Literals


@dataclass
class LiteralBoolean(Node):
    """``true`` or ``false``."""

    value: bool = False


@dataclass
class LiteralNull(Node):
    """The ``null`` keyword."""


@dataclass
class LiteralNumber(Node):
    """A number literal, kept as written."""

    original_string: str = ""


class LiteralStringKind(IntEnum):
    """How a string literal was written."""

    SINGLE = 0
    DOUBLE = 1
    BLOCK = 2
    VERBATIM_DOUBLE = 3
    VERBATIM_SINGLE = 4

    def fully_escaped(self) -> bool:
        """Whether the literal may hold escape sequences needing unescaping."""
        return self in (LiteralStringKind.SINGLE, LiteralStringKind.DOUBLE)


@dataclass
class LiteralString(Node):
    """A string literal."""

    value: str = ""
    kind: LiteralStringKind = LiteralStringKind.DOUBLE
    block_indent: str = ""
    block_term_indent: str = ""


# ---------------------------------------------------------------------------
# Imports and indexing


@dataclass
class Import(Node):
    """``import "file"``."""

    file: LiteralString = field(default_factory=LiteralString)


@dataclass
class ImportStr(Node):
    """``importstr "file"``."""

    file: LiteralString = field(default_factory=LiteralString)


@dataclass
class Index(Node):
    """``e[e]`` or ``e.f``; after desugaring ``id`` is None."""

    target: Node | None = None
    left_bracket_fodder: Fodder = field(default_factory=list)
    index: Node | None = None
    right_bracket_fodder: Fodder = field(default_factory=list)
    id: str | None = None


@dataclass
class Slice(Node):
    """``a[begin:end:step]``; each part may be absent."""

    target: Node | None = None
    left_bracket_fodder: Fodder = field(default_factory=list)
    begin_index: Node | None = None
    end_colon_fodder: Fodder = field(default_factory=list)
    end_index: Node | None = None
    step_colon_fodder: Fodder = field(default_factory=list)
    step: Node | None = None
    right_bracket_fodder: Fodder = field(default_factory=list)


# ---------------------------------------------------------------------------
# Locals


@dataclass
class LocalBind:
    """One binding of a ``local``; when ``fun`` is set its body is ``body``."""

    var_fodder: Fodder = field(default_factory=list)
    variable: str = ""
    eq_fodder: Fodder = field(default_factory=list)
    body: Node | None = None
    fun: Function | None = None
    close_fodder: Fodder = field(default_factory=list)
    loc_range: LocationRange = field(default_factory=LocationRange)


@dataclass
class Local(Node):
    """``local x = e; e``."""

    binds: list[LocalBind] = field(default_factory=list)
    body: Node | None = None


# ---------------------------------------------------------------------------
# Objects


class ObjectFieldKind(IntEnum):
    """The syntactic form of an object member."""

    ASSERT = 0
    FIELD_ID = 1
    FIELD_EXPR = 2
    FIELD_STR = 3
    LOCAL = 4


class ObjectFieldHide(IntEnum):
    """The visibility of an object field."""

    HIDDEN = 0  # f:: e
    INHERIT = 1  # f: e
    VISIBLE = 2  # f::: e


@dataclass
class ObjectField:
    """A member of an object or object comprehension."""

    kind: ObjectFieldKind = ObjectFieldKind.FIELD_ID
    hide: ObjectFieldHide = ObjectFieldHide.INHERIT
    super_sugar: bool = False
    method: Function | None = None
    fodder1: Fodder = field(default_factory=list)
    expr1: Node | None = None
    id: str | None = None
    fodder2: Fodder = field(default_factory=list)
    op_fodder: Fodder = field(default_factory=list)
    expr2: Node | None = None
    expr3: Node | None = None
    comma_fodder: Fodder = field(default_factory=list)
    loc_range: LocationRange = field(default_factory=LocationRange)


def object_field_local_no_method(
    id: str | None, body: Node | None, loc: LocationRange
) -> ObjectField:
    """A non-method ``local`` member of an object."""
    return ObjectField(
        kind=ObjectFieldKind.LOCAL,
        hide=ObjectFieldHide.VISIBLE,
        id=id,
        expr2=body,
        loc_range=loc,
    )


@dataclass
class Object(Node):
    """An object constructor before desugaring."""

    fields: list[ObjectField] = field(default_factory=list)
    trailing_comma: bool = False
    close_fodder: Fodder = field(default_factory=list)


@dataclass
class DesugaredObjectField:
    """A field of a desugared object."""

    hide: ObjectFieldHide = ObjectFieldHide.INHERIT
    name: Node | None = None
    body: Node | None = None
    plus_super: bool = False
    loc_range: LocationRange = field(default_factory=LocationRange)


@dataclass
class DesugaredObject(Node):
    """An object constructor after desugaring."""

    asserts: list[Node] = field(default_factory=list)
    fields: list[DesugaredObjectField] = field(default_factory=list)
    locals: list[LocalBind] = field(default_factory=list)


@dataclass
class ObjectComp(Node):
    """An object comprehension ``{ [e]: e for x in e }``."""

    fields: list[ObjectField] = field(default_factory=list)
    trailing_comma_fodder: Fodder = field(default_factory=list)
    trailing_comma: bool = False
    spec: ForSpec = field(default_factory=ForSpec)
    close_fodder: Fodder = field(default_factory=list)


# ---------------------------------------------------------------------------


@dataclass
class Parens(Node):
    """``( e )``."""

    inner: Node | None = None
    close_fodder: Fodder = field(default_factory=list)


@dataclass
class Self(Node):
    """The ``self`` keyword."""


@dataclass
class SuperIndex(Node):
    """``super[e]`` or ``super.f``; after desugaring ``id`` is None."""

    dot_fodder: Fodder = field(default_factory=list)
    index: Node | None = None
    id_fodder: Fodder = field(default_factory=list)
    id: str | None = None


@dataclass
class InSuper(Node):
    """``e in super``."""

    index: Node | None = None
    in_fodder: Fodder = field(default_factory=list)
    super_fodder: Fodder = field(default_factory=list)


# ---------------------------------------------------------------------------
# Unary operators

_UNARY_SYMBOLS: dict[str, str] = {}


class UnaryOp(IntEnum):
    """A unary operator."""

    NOT = 0
    BITWISE_NOT = 1
    PLUS = 2
    MINUS = 3

    @property
    def symbol(self) -> str:
        return _UNARY_SYMBOLS[self.name]

    def __str__(self) -> str:
        return self.symbol


_UNARY_SYMBOLS.update(NOT="!", BITWISE_NOT="~", PLUS="+", MINUS="-")

_UNARY_BY_TOKEN = {op.symbol: op for op in UnaryOp}


def parse_unary_op(token: str) -> UnaryOp:
    """The unary operator written as ``token``."""
    try:
        return _UNARY_BY_TOKEN[token]
    except KeyError:
        raise ValueError(f"Unrecognised unary operator: {token!r}") from None


@dataclass
class Unary(Node):
    """A unary operation."""

    op: UnaryOp = UnaryOp.NOT
    expr: Node | None = None


@dataclass
class Var(Node):
    """A variable reference."""

    id: str = ""