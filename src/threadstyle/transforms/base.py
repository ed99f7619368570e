"""Base protocol for node rewriters and the context they run in."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from threadstyle.config import ThreadConfig
from threadstyle.model.edits import Edit
from threadstyle.model.nodes import Document, Element


@dataclass(frozen=True)
class WalkContext:
    """What a rewriter may consult besides the element it is given."""

    document: Document
    config: ThreadConfig
    filename: str

    @property
    def is_story_file(self) -> bool:
        return self.config.is_story_file(self.filename)

    def is_story(self, element: Element) -> bool:
        return element.name == self.config.story_element and self.is_story_file


class NodeRewriter(Protocol):
    """Turns one element into zero or more edits of the original text."""

    def matches(self, element: Element, context: WalkContext) -> bool: ...

    def rewrite(self, element: Element, context: WalkContext) -> list[Edit]: ...
