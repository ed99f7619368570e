"""Markup model: Span, template nodes, attributes and the parsed Document."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from threadstyle.model.expressions import Expression


@dataclass(frozen=True)
class Span:
    """A half-open ``[start, end)`` range of character offsets into the source."""

    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start < 0 or self.end < self.start:
            raise ValueError(f"Invalid span [{self.start}, {self.end})")

    def overlaps(self, other: Span) -> bool:
        return self.start < other.end and other.start < self.end


@dataclass(frozen=True, kw_only=True)
class Positioned:
    start: int = 0
    end: int = 0

    @property
    def span(self) -> Span:
        return Span(self.start, self.end)


# ---------------------------------------------------------------------------
# Template nodes
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Text(Positioned):
    raw: str


@dataclass(frozen=True)
class Comment(Positioned):
    data: str


@dataclass(frozen=True)
class ExpressionTag(Positioned):
    """A ``{...}`` tag; ``source`` is the text between the braces."""

    source: str
    expression: Expression


@dataclass(frozen=True)
class Tag(Positioned):
    """A special tag such as ``{@html ...}`` or a block branch like ``{:else}``."""

    source: str


@dataclass(frozen=True)
class Block(Positioned):
    """A logic block (``{#if}``, ``{#each}``, ...) with every branch's children."""

    kind: str
    expression_source: str = ""
    children: tuple[Node, ...] = ()


# ---------------------------------------------------------------------------
# Attributes
# ---------------------------------------------------------------------------

AttributeValue = Union[bool, tuple[Union[Text, ExpressionTag], ...], ExpressionTag]


@dataclass(frozen=True)
class Attribute(Positioned):
    """A ``name=value`` attribute spanning its full text.

    ``value`` is ``True`` for a bare flag, a tuple of Text/ExpressionTag
    segments for a quoted or unquoted value, and a single ExpressionTag for
    ``name={expr}`` and the ``{name}`` shorthand.
    """

    name: str
    value: AttributeValue = True


@dataclass(frozen=True)
class SpreadAttribute(Positioned):
    tag: ExpressionTag


@dataclass(frozen=True)
class Directive(Positioned):
    """``kind:name`` attributes (``on:click``, ``bind:value``, ``class:active``)."""

    kind: str
    name: str
    value: AttributeValue = True


AnyAttribute = Union[Attribute, SpreadAttribute, Directive]


# ---------------------------------------------------------------------------
# Elements and the document
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Element(Positioned):
    name: str
    attributes: tuple[AnyAttribute, ...] = ()
    children: tuple[Node, ...] = ()
    self_closing: bool = False


Node = Union[Text, Comment, ExpressionTag, Tag, Block, Element]


@dataclass(frozen=True)
class RawBlock(Positioned):
    """A top-level ``<script>`` or ``<style>`` element with unparsed content."""

    name: str
    attributes: tuple[AnyAttribute, ...] = ()
    content: str = ""
    content_start: int = 0
    content_end: int = 0

    @property
    def content_span(self) -> Span:
        return Span(self.content_start, self.content_end)


@dataclass(frozen=True)
class Document:
    """A parsed component file."""

    source: str
    nodes: tuple[Node, ...] = ()
    stylesheet: RawBlock | None = None
    scripts: tuple[RawBlock, ...] = field(default_factory=tuple)

