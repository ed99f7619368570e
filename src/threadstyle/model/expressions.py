"""Expression model: the JavaScript expression subset found in attribute values.

Node names follow ESTree so that a tree produced by another parser can be
mapped onto these classes one to one.  Every node carries ``start``/``end``
character offsets into the full markup source, not into the expression text.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, kw_only=True)
class Expression:
    """Base class for all expression nodes."""

    start: int = 0
    end: int = 0


@dataclass(frozen=True)
class Literal(Expression):
    """A string, number, boolean or null literal.

    ``value`` is the literal's text form (string contents with escapes
    resolved, or the source text for numbers, booleans and null); ``raw`` is
    the literal exactly as written, quotes included.
    """

    value: str
    raw: str


@dataclass(frozen=True)
class Identifier(Expression):
    name: str


@dataclass(frozen=True)
class TemplateLiteral(Expression):
    """A backtick template; ``quasis`` has one more entry than ``expressions``."""

    quasis: tuple[str, ...]
    expressions: tuple[Expression, ...] = ()


@dataclass(frozen=True)
class UnaryExpression(Expression):
    operator: str
    argument: Expression


@dataclass(frozen=True)
class BinaryExpression(Expression):
    operator: str
    left: Expression
    right: Expression


@dataclass(frozen=True)
class LogicalExpression(Expression):
    operator: str  # "&&", "||" or "??"
    left: Expression
    right: Expression


@dataclass(frozen=True)
class ConditionalExpression(Expression):
    test: Expression
    consequent: Expression
    alternate: Expression


@dataclass(frozen=True)
class MemberExpression(Expression):
    object: Expression
    property: Expression
    computed: bool = False


@dataclass(frozen=True)
class CallExpression(Expression):
    callee: Expression
    arguments: tuple[Expression, ...] = ()


@dataclass(frozen=True)
class SpreadElement(Expression):
    argument: Expression


@dataclass(frozen=True)
class Property(Expression):
    """A ``key: value`` entry of an object literal, spanning key and value."""

    key: Expression
    value: Expression
    shorthand: bool = False


@dataclass(frozen=True)
class ObjectExpression(Expression):
    properties: tuple[Property | SpreadElement, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class ArrayExpression(Expression):
    elements: tuple[Expression, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class UnsupportedExpression(Expression):
    """Valid markup whose expression lies outside the supported subset."""

    source: str
