"""Scoped-styles injection: design tokens appended to the component stylesheet."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from threadstyle.model.edits import Edit, overwrite
from threadstyle.model.nodes import Element
from threadstyle.transforms.base import WalkContext

logger = logging.getLogger(__name__)


def custom_properties(tokens: Mapping[str, Any], path: tuple[str, ...] = ()) -> list[tuple[str, str]]:
    """Flatten nested design tokens into ``(--a-b-c, value)`` pairs in mapping order."""
    flattened: list[tuple[str, str]] = []
    for key, value in tokens.items():
        key_path = path + (str(key),)
        if isinstance(value, Mapping):
            flattened.extend(custom_properties(value, key_path))
        else:
            flattened.append(("--" + "-".join(key_path), str(value)))
    return flattened


def render_ruleset(selector: str, properties: list[tuple[str, str]]) -> str:
    """``selector { --a: x; --b: y; }``, or an empty string without properties."""
    if not properties:
        return ""
    body = " ".join(f"{name}: {value};" for name, value in properties)
    return f"{selector} {{ {body} }}"


class ScopedStylesInjector:
    """Append the design-system custom properties to the top-level ``<style>``.

    Every marker element yields the same edit, so several markers in one
    document still inject a single ruleset.
    """

    def matches(self, element: Element, context: WalkContext) -> bool:
        return element.name == context.config.scoped_styles_element

    def rewrite(self, element: Element, context: WalkContext) -> list[Edit]:
        ruleset = render_ruleset(
            context.config.custom_property_selector,
            custom_properties(context.config.design_system),
        )
        if not ruleset:
            return []
        stylesheet = context.document.stylesheet
        if stylesheet is None:
            logger.debug("%s: <%s> found but there is no <style> block", context.filename, element.name)
            return []
        return [overwrite(stylesheet.content_span, stylesheet.content + ruleset)]
