"""Attribute lookup on elements."""

from __future__ import annotations

from collections.abc import Iterable

from threadstyle.model.expressions import ObjectExpression, Property
from threadstyle.model.nodes import AnyAttribute, Attribute, ExpressionTag

__all__ = ["find_attribute", "find_properties", "object_properties"]


def find_attribute(attributes: Iterable[AnyAttribute], name: str) -> Attribute | None:
    """Return the first attribute called *name* if it carries a value.

    Directives with a matching name are passed over; a boolean flag counts
    as absent.
    """
    for attribute in attributes:
        if not isinstance(attribute, Attribute) or attribute.name != name:
            continue
        if attribute.value is True:
            return None
        return attribute
    return None


def object_properties(expression: object) -> list[Property] | None:
    """Return the key/value entries of an object literal in source order."""
    if not isinstance(expression, ObjectExpression):
        return None
    return [p for p in expression.properties if isinstance(p, Property)]


def find_properties(attribute: Attribute | None) -> list[Property] | None:
    """Return the object-literal entries of ``name={{ ... }}``, spreads dropped.

    Returns None unless the value is a single expression tag holding an
    object literal.
    """
    if attribute is None or not isinstance(attribute.value, ExpressionTag):
        return None
    return object_properties(attribute.value.expression)
