"""Node dispatcher: walk the markup tree and collect edits from rewriters."""

from __future__ import annotations

from threadstyle.config import ThreadConfig
from threadstyle.model.edits import Edit
from threadstyle.model.nodes import Document, Element, Node
from threadstyle.transforms.base import NodeRewriter, WalkContext
from threadstyle.transforms.scoped_styles import ScopedStylesInjector
from threadstyle.transforms.shorthand import ShorthandRewriter
from threadstyle.transforms.storybook import StoryArgsRewriter

__all__ = [
    "BUILTIN_REWRITERS",
    "NodeRewriter",
    "ScopedStylesInjector",
    "ShorthandRewriter",
    "StoryArgsRewriter",
    "WalkContext",
    "collect_edits",
    "visit",
]

BUILTIN_REWRITERS: list[NodeRewriter] = [
    StoryArgsRewriter(),
    ShorthandRewriter(),
    ScopedStylesInjector(),
]


def _is_eligible(element: Element, context: WalkContext) -> bool:
    config = context.config
    return (
        element.name in config.element_names
        or context.is_story(element)
        or element.name == config.scoped_styles_element
    )


def visit(node: Node, context: WalkContext, rewriters: list[NodeRewriter]) -> list[Edit]:
    """Return the edits for *node* and its descendants in document order.

    Anything other than an eligible element ends the descent: text, tags,
    blocks and unrelated elements are left alone together with their
    children.
    """
    edits: list[Edit] = []
    stack: list[Node] = [node]
    while stack:
        current = stack.pop()
        if not isinstance(current, Element) or not _is_eligible(current, context):
            continue
        for rewriter in rewriters:
            if rewriter.matches(current, context):
                edits.extend(rewriter.rewrite(current, context))
        stack.extend(reversed(current.children))
    return edits


def collect_edits(
    document: Document,
    config: ThreadConfig,
    filename: str,
    custom_rewriters: list[NodeRewriter] | None = None,
) -> list[Edit]:
    """Walk *document* with the built-in rewriters (and any custom ones)."""
    rewriters = list(BUILTIN_REWRITERS)
    if custom_rewriters:
        rewriters.extend(custom_rewriters)
    context = WalkContext(document=document, config=config, filename=filename)

    edits: list[Edit] = []
    for node in document.nodes:
        for edit in visit(node, context, rewriters):
            # Identical edits come from repeated markers; keep the first.
            if edit not in edits:
                edits.append(edit)
    return edits
