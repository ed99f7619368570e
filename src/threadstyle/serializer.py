"""CSS declaration serializer: object-literal properties to an inline style string.

Each property value is classified into one of a closed set of style values
and then rendered into a declaration:

    Binding        gap: gapAmount               -> gap: {gapAmount};
    Static         gap: '10px'                  -> gap: 10px;
    Interpolation  gap: `${h}px`                -> gap: {h}px;
    Guarded        gap: isGap && '10px'         -> {isGap && `gap: ${'10px'}`};
                   gap: isGap ? '10px' : undefined
    Choice         gap: isGap ? '10px' : '20px' -> gap: {isGap ? '10px' : '20px'};

Values that fit none of these are left out of the output.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Union

from threadstyle.model.expressions import (
    BinaryExpression,
    ConditionalExpression,
    Expression,
    Identifier,
    Literal,
    LogicalExpression,
    Property,
    TemplateLiteral,
    UnaryExpression,
)
from threadstyle.model.nodes import Attribute, ExpressionTag, Text

logger = logging.getLogger(__name__)

__all__ = [
    "Binding",
    "Choice",
    "Guarded",
    "Interpolation",
    "Static",
    "StyleValue",
    "camel_to_kebab",
    "classify_value",
    "render_declaration",
    "resolve_existing_style",
    "resolve_key",
    "serialize_properties",
]

_UPPER_RE = re.compile(r"[A-Z]")


# ---------------------------------------------------------------------------
# Style values
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Binding:
    """A value bound to a variable at runtime."""

    name: str


@dataclass(frozen=True)
class Static:
    text: str


@dataclass(frozen=True)
class Interpolation:
    """Template text with identifiers spliced between ``quasis``."""

    quasis: tuple[str, ...]
    names: tuple[str, ...]


@dataclass(frozen=True)
class Guarded:
    """A whole declaration that only applies while ``condition`` holds.

    ``value`` is source text placed inside a ``${}`` interpolation.
    """

    condition: str
    value: str


@dataclass(frozen=True)
class Choice:
    test: str
    consequent: str
    alternate: str


StyleValue = Union[Binding, Static, Interpolation, Guarded, Choice]


# ---------------------------------------------------------------------------
# Keys
# ---------------------------------------------------------------------------


def camel_to_kebab(name: str) -> str:
    """Convert ``camelCase`` to ``kebab-case``; kebab input is returned unchanged."""
    return _UPPER_RE.sub(lambda m: "-" + m.group(0).lower(), name)


def resolve_key(key: Expression) -> str | None:
    """Return the CSS property name for an object key.

    Identifier keys are converted to kebab-case; quoted keys (custom
    properties such as ``'--gap'``) are used verbatim.
    """
    if isinstance(key, Identifier):
        return camel_to_kebab(key.name)
    if isinstance(key, Literal):
        return key.value or None
    return None


# ---------------------------------------------------------------------------
# Values
# ---------------------------------------------------------------------------


def _operand_text(node: Expression) -> str:
    if isinstance(node, Literal):
        return node.raw
    if isinstance(node, Identifier):
        return node.name
    return ""


def _guard_condition(test: Expression) -> str | None:
    """``ident`` or ``!ident``; anything else cannot guard a declaration."""
    if isinstance(test, Identifier):
        return test.name
    if (
        isinstance(test, UnaryExpression)
        and test.operator == "!"
        and isinstance(test.argument, Identifier)
    ):
        return f"!{test.argument.name}"
    return None


def _is_undefined(node: Expression) -> bool:
    return isinstance(node, Identifier) and node.name == "undefined"


def _literal_branch(consequent: Expression, alternate: Expression) -> str | None:
    """Raw text of the literal branch when the other branch is ``undefined``.

    The consequent is checked first, so ``c ? '10px' : undefined`` and
    ``c ? undefined : '10px'`` resolve to the same value.
    """
    if isinstance(consequent, Literal) and _is_undefined(alternate):
        return consequent.raw
    if isinstance(alternate, Literal) and _is_undefined(consequent):
        return alternate.raw
    return None


def _classify_template(value: TemplateLiteral) -> StyleValue | None:
    if not value.expressions:
        return Static(value.quasis[0])
    names = []
    for expression in value.expressions:
        if not isinstance(expression, Identifier):
            return None
        names.append(expression.name)
    return Interpolation(tuple(value.quasis), tuple(names))


def _classify_logical(value: LogicalExpression) -> StyleValue | None:
    if value.operator != "&&":
        return None
    condition = _guard_condition(value.left)
    consequent = _operand_text(value.right)
    if condition is None or not consequent:
        return None
    return Guarded(condition, consequent)


def _classify_conditional(value: ConditionalExpression) -> StyleValue | None:
    consequent, alternate = value.consequent, value.alternate
    test = value.test

    if not (isinstance(consequent, Literal) and isinstance(alternate, Literal)):
        literal = _literal_branch(consequent, alternate)
        condition = _guard_condition(test)
        if literal is None or condition is None:
            return None
        return Guarded(condition, literal)

    if isinstance(test, Identifier):
        return Choice(test.name, consequent.value, alternate.value)

    if isinstance(test, BinaryExpression):
        comparison = f"{_operand_text(test.left)} {test.operator} {_operand_text(test.right)}"
        return Choice(comparison, consequent.value, alternate.value)

    return None


def classify_value(value: Expression) -> StyleValue | None:
    """Classify a property value; None means the property is skipped."""
    if isinstance(value, Identifier):
        return Binding(value.name)
    if isinstance(value, Literal):
        return Static(value.value)
    if isinstance(value, TemplateLiteral):
        return _classify_template(value)
    if isinstance(value, LogicalExpression):
        return _classify_logical(value)
    if isinstance(value, ConditionalExpression):
        return _classify_conditional(value)
    return None


def render_declaration(name: str, value: StyleValue) -> str:
    """Render one declaration, including its trailing ``;``."""
    if isinstance(value, Binding):
        return f"{name}: {{{value.name}}};"
    if isinstance(value, Static):
        return f"{name}: {value.text};"
    if isinstance(value, Interpolation):
        parts = [value.quasis[0]]
        for var, quasi in zip(value.names, value.quasis[1:]):
            parts.append(f"{{{var}}}{quasi}")
        return f"{name}: {''.join(parts)};"
    if isinstance(value, Guarded):
        return f"{{{value.condition} && `{name}: ${{{value.value}}}`}};"
    if isinstance(value, Choice):
        return f"{name}: {{{value.test} ? '{value.consequent}' : '{value.alternate}'}};"
    raise TypeError(f"Unknown style value: {value!r}")


def serialize_properties(properties: Iterable[Property]) -> str:
    """Serialize object-literal properties into a CSS declaration list."""
    declarations: list[str] = []
    for prop in properties:
        name = resolve_key(prop.key)
        if name is None:
            logger.debug("Skipping property with unsupported key at %d", prop.start)
            continue
        value = classify_value(prop.value)
        if value is None:
            logger.debug(
                "Skipping %r: unsupported %s value at %d",
                name,
                type(prop.value).__name__,
                prop.value.start,
            )
            continue
        declarations.append(render_declaration(name, value))
    return " ".join(declarations).rstrip()


# ---------------------------------------------------------------------------
# Existing style attribute
# ---------------------------------------------------------------------------


def resolve_existing_style(attribute: Attribute | None) -> str:
    """Return the text an existing ``style`` attribute contributes.

    ``{style}`` and ``style={style}`` give the live placeholder ``{style}``;
    a quoted value is kept verbatim, with any ``{expr}`` segments re-emitted
    as written; anything else contributes nothing.
    """
    if attribute is None:
        return ""
    value = attribute.value
    if isinstance(value, ExpressionTag):
        if isinstance(value.expression, Identifier):
            return f"{{{value.expression.name}}}"
        return ""
    if isinstance(value, tuple) and value:
        parts = []
        for segment in value:
            if isinstance(segment, Text):
                parts.append(segment.raw)
            else:
                parts.append(f"{{{segment.source}}}")
        return "".join(parts)
    return ""
