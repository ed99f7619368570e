"""Shorthand rewrite: ``cs={{ ... }}`` becomes ``style="..."``."""

from __future__ import annotations

from threadstyle.locator import find_attribute, find_properties
from threadstyle.model.edits import Edit, delete, overwrite
from threadstyle.model.nodes import Element
from threadstyle.serializer import resolve_existing_style, serialize_properties
from threadstyle.transforms.base import WalkContext


class ShorthandRewriter:
    """Rewrite the shorthand attribute of a configured element.

    Without a ``style`` attribute the shorthand is overwritten in place.  With
    one, the existing style is overwritten with the merged declarations and
    the shorthand attribute is deleted.
    """

    def matches(self, element: Element, context: WalkContext) -> bool:
        return element.name in context.config.element_names and not context.is_story(element)

    def rewrite(self, element: Element, context: WalkContext) -> list[Edit]:
        shorthand = find_attribute(element.attributes, context.config.attribute_name)
        properties = find_properties(shorthand)
        if shorthand is None or properties is None:
            return []

        declarations = serialize_properties(properties)
        style = find_attribute(element.attributes, "style")
        if style is None or style is shorthand:
            return [overwrite(shorthand.span, f'style="{declarations}"')]

        combined = " ".join(filter(None, (resolve_existing_style(style), declarations)))
        return [
            overwrite(style.span, f'style="{combined}"'),
            delete(shorthand.span),
        ]
