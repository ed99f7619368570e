"""Story rewrite: the shorthand nested in a story's ``args`` object."""

from __future__ import annotations

from threadstyle.locator import find_attribute, find_properties, object_properties
from threadstyle.model.edits import Edit, overwrite
from threadstyle.model.expressions import Expression, Identifier, Literal
from threadstyle.model.nodes import Element, Span
from threadstyle.serializer import serialize_properties
from threadstyle.transforms.base import WalkContext


def _key_name(key: Expression) -> str | None:
    if isinstance(key, Identifier):
        return key.name
    if isinstance(key, Literal):
        return key.value
    return None


class StoryArgsRewriter:
    """Rewrite ``args={{ cs: { ... } }}`` on a story element into ``style: "..."``.

    Only applies in story files and when story rewriting is enabled; the
    ``args`` entry is replaced key and value together.
    """

    def matches(self, element: Element, context: WalkContext) -> bool:
        return context.config.include_story_files and context.is_story(element)

    def rewrite(self, element: Element, context: WalkContext) -> list[Edit]:
        args = find_properties(find_attribute(element.attributes, "args"))
        if not args:
            return []
        entry = next(
            (p for p in args if _key_name(p.key) == context.config.attribute_name), None
        )
        if entry is None:
            return []
        properties = object_properties(entry.value)
        if properties is None:
            return []
        return [overwrite(Span(entry.start, entry.end), f'style: "{serialize_properties(properties)}"')]
