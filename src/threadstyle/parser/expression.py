"""Lark Transformer that converts an expression parse tree into expression nodes."""

from __future__ import annotations

import logging
import re
from functools import lru_cache
from pathlib import Path

from lark import Lark, Token, Transformer, v_args
from lark.exceptions import LarkError

from threadstyle.model.expressions import (
    ArrayExpression,
    BinaryExpression,
    CallExpression,
    ConditionalExpression,
    Expression,
    Identifier,
    Literal,
    LogicalExpression,
    MemberExpression,
    ObjectExpression,
    Property,
    SpreadElement,
    TemplateLiteral,
    UnaryExpression,
    UnsupportedExpression,
)
from threadstyle.parser.errors import ParseError

logger = logging.getLogger(__name__)

GRAMMAR_PATH = Path(__file__).parent / "expression.lark"

_ESCAPES = {"n": "\n", "t": "\t", "r": "\r", "b": "\b", "f": "\f", "v": "\v", "0": "\0"}
_ESCAPE_RE = re.compile(r"\\(.)", re.DOTALL)


def _unescape(body: str) -> str:
    """Resolve backslash escapes in the body of a quoted string."""
    return _ESCAPE_RE.sub(lambda m: _ESCAPES.get(m.group(1), m.group(1)), body)


def _nodes(children: list[object]) -> list[Expression]:
    """Drop punctuation tokens and absent optionals, keeping expression nodes."""
    return [c for c in children if isinstance(c, Expression)]


def _token(children: list[object], type_: str) -> Token:
    for child in children:
        if isinstance(child, Token) and child.type == type_:
            return child
    raise ValueError(f"No {type_} token in {children!r}")  # pragma: no cover


def split_template(raw: str) -> tuple[list[str], list[tuple[str, int]]]:
    """Split a backtick template into its text parts and interpolations.

    Returns ``(quasis, interpolations)`` where each interpolation is a
    ``(source, offset)`` pair, ``offset`` being relative to the opening
    backtick.  ``quasis`` always holds one more entry than ``interpolations``.
    """
    quasis: list[str] = []
    interpolations: list[tuple[str, int]] = []
    current: list[str] = []
    i = 1
    stop = len(raw) - 1
    while i < stop:
        ch = raw[i]
        if ch == "\\" and i + 1 < stop:
            current.append(raw[i : i + 2])
            i += 2
            continue
        if ch == "$" and raw.startswith("${", i):
            close = raw.index("}", i + 2)
            quasis.append("".join(current))
            current = []
            interpolations.append((raw[i + 2 : close], i + 2))
            i = close + 1
            continue
        current.append(ch)
        i += 1
    quasis.append("".join(current))
    return quasis, interpolations


@v_args(meta=True)
class ExpressionTransformer(Transformer):  # type: ignore[type-arg]
    """Transform a Lark parse tree into expression nodes.

    ``offset`` is added to every position so that nodes refer to the full
    markup source rather than to the expression text alone.
    """

    def __init__(self, offset: int = 0):
        super().__init__()
        self.offset = offset

    def _pos(self, meta) -> dict[str, int]:
        return {"start": meta.start_pos + self.offset, "end": meta.end_pos + self.offset}

    def _tok_pos(self, token: Token) -> dict[str, int]:
        return {"start": token.start_pos + self.offset, "end": token.end_pos + self.offset}

    # ---- literals ----

    def identifier(self, meta, children: list[Token]) -> Identifier:
        token = children[0]
        return Identifier(str(token), **self._tok_pos(token))

    def string_literal(self, meta, children: list[Token]) -> Literal:
        token = children[0]
        raw = str(token)
        return Literal(_unescape(raw[1:-1]), raw, **self._tok_pos(token))

    def number_literal(self, meta, children: list[Token]) -> Literal:
        token = children[0]
        return Literal(str(token), str(token), **self._tok_pos(token))

    def keyword_literal(self, meta, children: list[Token]) -> Literal:
        token = children[0]
        return Literal(str(token), str(token), **self._tok_pos(token))

    def template_literal(self, meta, children: list[Token]) -> TemplateLiteral:
        token = children[0]
        raw = str(token)
        start = token.start_pos + self.offset
        quasis, interpolations = split_template(raw)
        expressions = tuple(
            parse_expression(source, offset=start + relative)
            for source, relative in interpolations
        )
        return TemplateLiteral(
            tuple(quasis), expressions, start=start, end=token.end_pos + self.offset
        )

    # ---- operators ----

    def unary_expression(self, meta, children: list[object]) -> UnaryExpression:
        operator = children[0]
        (argument,) = _nodes(children)
        return UnaryExpression(str(operator), argument, **self._pos(meta))

    def binary_expression(self, meta, children: list[object]) -> BinaryExpression:
        left, operator, right = children
        return BinaryExpression(str(operator), left, right, **self._pos(meta))  # type: ignore[arg-type]

    def logical_expression(self, meta, children: list[object]) -> LogicalExpression:
        left, operator, right = children
        return LogicalExpression(str(operator), left, right, **self._pos(meta))  # type: ignore[arg-type]

    def conditional_expression(self, meta, children: list[object]) -> ConditionalExpression:
        test, consequent, alternate = _nodes(children)
        return ConditionalExpression(test, consequent, alternate, **self._pos(meta))

    # ---- member access and calls ----

    def member_expression(self, meta, children: list[object]) -> MemberExpression:
        obj = children[0]
        name = _token(children, "NAME")
        prop = Identifier(str(name), **self._tok_pos(name))
        return MemberExpression(obj, prop, computed=False, **self._pos(meta))  # type: ignore[arg-type]

    def computed_member_expression(self, meta, children: list[object]) -> MemberExpression:
        obj, prop = _nodes(children)
        return MemberExpression(obj, prop, computed=True, **self._pos(meta))

    def arguments(self, meta, children: list[object]) -> tuple[Expression, ...]:
        return tuple(_nodes(children))

    def call_expression(self, meta, children: list[object]) -> CallExpression:
        callee = children[0]
        args: tuple[Expression, ...] = ()
        for child in children[1:]:
            if isinstance(child, tuple):
                args = child
        return CallExpression(callee, args, **self._pos(meta))  # type: ignore[arg-type]

    # ---- object and array literals ----

    def property(self, meta, children: list[object]) -> Property:
        key, value = _nodes(children)
        return Property(key, value, shorthand=False, **self._pos(meta))

    def shorthand_property(self, meta, children: list[Token]) -> Property:
        token = children[0]
        name = Identifier(str(token), **self._tok_pos(token))
        return Property(name, name, shorthand=True, **self._tok_pos(token))

    def spread_element(self, meta, children: list[object]) -> SpreadElement:
        (argument,) = _nodes(children)
        return SpreadElement(argument, **self._pos(meta))

    def object_members(self, meta, children: list[object]) -> tuple[Expression, ...]:
        return tuple(_nodes(children))

    def object(self, meta, children: list[object]) -> ObjectExpression:
        members: tuple = ()
        for child in children:
            if isinstance(child, tuple):
                members = child
        return ObjectExpression(members, **self._pos(meta))

    def array_elements(self, meta, children: list[object]) -> tuple[Expression, ...]:
        return tuple(_nodes(children))

    def array(self, meta, children: list[object]) -> ArrayExpression:
        elements: tuple = ()
        for child in children:
            if isinstance(child, tuple):
                elements = child
        return ArrayExpression(elements, **self._pos(meta))


@lru_cache(maxsize=None)
def _expression_parser() -> Lark:
    return Lark(
        GRAMMAR_PATH.read_text(encoding="utf-8"),
        parser="lalr",
        start="start",
        propagate_positions=True,
    )


def parse_expression_strict(source: str, offset: int = 0) -> Expression:
    """Parse *source* as an expression, raising ParseError when it cannot."""
    try:
        tree = _expression_parser().parse(source)
    except LarkError as e:
        line = getattr(e, "line", None)
        column = getattr(e, "column", None)
        raise ParseError(str(e), offset=offset, line=line, column=column) from e
    try:
        return ExpressionTransformer(offset).transform(tree)
    except (LarkError, RecursionError) as e:
        # Transformer callbacks surface as VisitError, a LarkError.
        raise ParseError(f"Could not build expression: {e}", offset=offset) from e


def parse_expression(source: str, offset: int = 0) -> Expression:
    """Parse *source* as an expression.

    Expressions outside the supported subset (arrow functions, assignments,
    regex literals, ...) are returned as an UnsupportedExpression covering the
    whole text rather than failing the surrounding markup.
    """
    try:
        return parse_expression_strict(source, offset)
    except ParseError as exc:
        logger.debug("Unsupported expression %r at offset %d: %s", source, offset, exc)
        return UnsupportedExpression(source, start=offset, end=offset + len(source))
