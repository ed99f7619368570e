"""Hand-written scanner for component markup.

Produces a Document whose nodes and attributes carry character offsets into
the original source, which is what the patch engine edits.

Supported syntax::

    <Name attr="text {expr}" attr={expr} {shorthand} {...spread} on:event={fn} flag />
    <!-- comments -->
    {expression}  {@html expr}  {#if cond} ... {:else} ... {/if}
    <script> ... </script>  <style> ... </style>   (content kept raw)

Structural problems (unclosed or mismatched tags, unterminated expressions,
stray ``<``, a second top-level ``<style>``, nesting deeper than the interpreter
stack allows) raise ParseError.
"""

from __future__ import annotations

import re

from threadstyle.model.nodes import (
    AnyAttribute,
    Attribute,
    Block,
    Comment,
    Directive,
    Document,
    Element,
    ExpressionTag,
    Node,
    RawBlock,
    SpreadAttribute,
    Tag,
    Text,
)
from threadstyle.parser.errors import ParseError
from threadstyle.parser.expression import parse_expression

__all__ = ["parse_markup", "VOID_ELEMENTS", "RAW_TEXT_ELEMENTS"]

VOID_ELEMENTS = frozenset(
    {
        "area", "base", "br", "col", "embed", "hr", "img", "input",
        "link", "meta", "param", "source", "track", "wbr",
    }
)

RAW_TEXT_ELEMENTS = frozenset({"script", "style"})

_TAG_NAME_RE = re.compile(r"[A-Za-z][\w.:-]*")
_ATTR_NAME_RE = re.compile(r"[^\s=/>\"'{}]+")
_UNQUOTED_VALUE_RE = re.compile(r"[^\s>\"'=`{]+")
_BLOCK_KIND_RE = re.compile(r"[a-z]+")
_WS_RE = re.compile(r"\s*")


class _MarkupScanner:
    """Recursive-descent scanner over a single source string."""

    def __init__(self, source: str):
        self.source = source
        self.pos = 0
        self.stylesheet: RawBlock | None = None
        self.scripts: list[RawBlock] = []

    # ---- helpers ----

    def error(self, message: str, offset: int | None = None) -> ParseError:
        return ParseError.at(message, self.source, self.pos if offset is None else offset)

    def at(self, text: str) -> bool:
        return self.source.startswith(text, self.pos)

    def skip_ws(self) -> None:
        self.pos = _WS_RE.match(self.source, self.pos).end()  # type: ignore[union-attr]

    def expect(self, text: str) -> None:
        if not self.at(text):
            raise self.error(f"Expected {text!r}")
        self.pos += len(text)

    def find_expression_end(self, pos: int) -> int:
        """Return the index of the ``}`` closing a tag whose body starts at *pos*.

        Quotes, template literals (including their ``${}`` parts) and nested
        braces are skipped.
        """
        source = self.source
        depth = 1
        i = pos
        while i < len(source):
            ch = source[i]
            if ch in "'\"":
                i = self._skip_string(i, ch)
                continue
            if ch == "`":
                i = self._skip_template(i)
                continue
            if ch == "{":
                depth += 1
            elif ch == "}":
                depth -= 1
                if depth == 0:
                    return i
            i += 1
        raise self.error("Unterminated expression", pos - 1)

    def _skip_string(self, i: int, quote: str) -> int:
        source = self.source
        j = i + 1
        while j < len(source):
            if source[j] == "\\":
                j += 2
                continue
            if source[j] == quote:
                return j + 1
            j += 1
        raise self.error("Unterminated string", i)

    def _skip_template(self, i: int) -> int:
        source = self.source
        j = i + 1
        while j < len(source):
            ch = source[j]
            if ch == "\\":
                j += 2
                continue
            if ch == "`":
                return j + 1
            if source.startswith("${", j):
                j = self.find_expression_end(j + 2) + 1
                continue
            j += 1
        raise self.error("Unterminated template literal", i)

    def read_expression_tag(self) -> ExpressionTag:
        """Read ``{expr}`` at the current position."""
        start = self.pos
        self.expect("{")
        close = self.find_expression_end(self.pos)
        source = self.source[self.pos : close]
        expression = parse_expression(source, offset=self.pos)
        self.pos = close + 1
        return ExpressionTag(source, expression, start=start, end=self.pos)

    # ---- fragments ----

    def parse_fragment(
        self, closing: str | None = None, in_block: bool = False, root: bool = False
    ) -> list[Node]:
        """Parse nodes until ``</closing>``, a block branch/close, or end of input.

        The closing tag itself is not consumed.
        """
        nodes: list[Node] = []
        source = self.source
        while self.pos < len(source):
            if self.at("<!--"):
                nodes.append(self.parse_comment())
            elif self.at("</"):
                if closing is None:
                    raise self.error("Unexpected closing tag")
                return nodes
            elif self.at("<"):
                element = self.parse_element(root=root)
                if element is not None:
                    nodes.append(element)
            elif self.at("{:") or self.at("{/"):
                if not in_block:
                    raise self.error("Unexpected block tag")
                return nodes
            elif self.at("{#"):
                nodes.append(self.parse_block())
            elif self.at("{@"):
                nodes.append(self.parse_tag())
            elif self.at("{"):
                nodes.append(self.read_expression_tag())
            else:
                nodes.append(self.parse_text())
        if closing is not None:
            raise self.error(f"<{closing}> was left open")
        if in_block:
            raise self.error("Block was left open")
        return nodes

    def parse_text(self) -> Text:
        start = self.pos
        end = start
        source = self.source
        while end < len(source) and source[end] not in "<{":
            end += 1
        self.pos = end
        return Text(source[start:end], start=start, end=end)

    def parse_comment(self) -> Comment:
        start = self.pos
        close = self.source.find("-->", start + 4)
        if close < 0:
            raise self.error("Unterminated comment")
        self.pos = close + 3
        return Comment(self.source[start + 4 : close], start=start, end=self.pos)

    def parse_tag(self) -> Tag:
        start = self.pos
        close = self.find_expression_end(start + 1)
        self.pos = close + 1
        return Tag(self.source[start + 1 : close], start=start, end=self.pos)

    def parse_block(self) -> Block:
        start = self.pos
        self.expect("{#")
        match = _BLOCK_KIND_RE.match(self.source, self.pos)
        if not match:
            raise self.error("Expected block name")
        kind = match.group(0)
        close = self.find_expression_end(match.end())
        expression_source = self.source[match.end() : close].strip()
        self.pos = close + 1

        children: list[Node] = []
        while True:
            children.extend(self.parse_fragment(in_block=True))
            if self.at("{:"):
                children.append(self.parse_tag())
                continue
            self.expect("{/")
            end_match = _BLOCK_KIND_RE.match(self.source, self.pos)
            if not end_match or end_match.group(0) != kind:
                raise self.error(f"Expected {{/{kind}}}")
            self.pos = end_match.end()
            self.skip_ws()
            self.expect("}")
            break
        return Block(kind, expression_source, tuple(children), start=start, end=self.pos)

    # ---- elements ----

    def parse_element(self, root: bool = False) -> Element | None:
        """Parse an element; top-level script/style blocks are stored aside."""
        start = self.pos
        self.expect("<")
        match = _TAG_NAME_RE.match(self.source, self.pos)
        if not match:
            raise self.error("Expected element name", start)
        name = match.group(0)
        self.pos = match.end()

        attributes = self.parse_attributes()
        self_closing = False
        if self.at("/>"):
            self.pos += 2
            self_closing = True
        else:
            self.expect(">")

        if name.lower() in RAW_TEXT_ELEMENTS and not self_closing:
            return self.parse_raw_element(name, attributes, start, root)

        children: list[Node] = []
        if not self_closing and name.lower() not in VOID_ELEMENTS:
            children = self.parse_fragment(closing=name)
            self.parse_closing_tag(name)

        return Element(
            name,
            tuple(attributes),
            tuple(children),
            self_closing=self_closing,
            start=start,
            end=self.pos,
        )

    def parse_closing_tag(self, name: str) -> None:
        tag_start = self.pos
        self.expect("</")
        match = _TAG_NAME_RE.match(self.source, self.pos)
        if not match or match.group(0) != name:
            found = match.group(0) if match else ""
            raise self.error(f"</{found}> attempted to close <{name}>", tag_start)
        self.pos = match.end()
        self.skip_ws()
        self.expect(">")

    def parse_raw_element(
        self, name: str, attributes: list[AnyAttribute], start: int, root: bool
    ) -> Element | None:
        content_start = self.pos
        close_re = re.compile(rf"</{re.escape(name)}\s*>", re.IGNORECASE)
        close = close_re.search(self.source, content_start)
        if close is None:
            raise self.error(f"<{name}> was left open", start)
        content = self.source[content_start : close.start()]
        self.pos = close.end()

        if root:
            block = RawBlock(
                name.lower(),
                tuple(attributes),
                content,
                content_start,
                close.start(),
                start=start,
                end=self.pos,
            )
            if block.name == "style":
                if self.stylesheet is not None:
                    raise self.error("A component can only have one top-level <style> element", start)
                self.stylesheet = block
            else:
                self.scripts.append(block)
            return None

        text = Text(content, start=content_start, end=close.start())
        return Element(name, tuple(attributes), (text,), start=start, end=self.pos)

    # ---- attributes ----

    def parse_attributes(self) -> list[AnyAttribute]:
        attributes: list[AnyAttribute] = []
        while True:
            self.skip_ws()
            if self.pos >= len(self.source):
                raise self.error("Unexpected end of input inside a tag")
            if self.at(">") or self.at("/>"):
                return attributes
            if self.at("{"):
                attributes.append(self.parse_brace_attribute())
            else:
                attributes.append(self.parse_named_attribute())

    def parse_brace_attribute(self) -> AnyAttribute:
        """``{...spread}`` or the ``{name}`` shorthand for ``name={name}``."""
        tag = self.read_expression_tag()
        if tag.source.lstrip().startswith("..."):
            return SpreadAttribute(tag, start=tag.start, end=tag.end)
        name = tag.source.strip()
        return Attribute(name, tag, start=tag.start, end=tag.end)

    def parse_named_attribute(self) -> AnyAttribute:
        start = self.pos
        match = _ATTR_NAME_RE.match(self.source, self.pos)
        if not match:
            raise self.error("Expected attribute name")
        full_name = match.group(0)
        self.pos = match.end()

        value: bool | tuple | ExpressionTag = True
        checkpoint = self.pos
        self.skip_ws()
        if self.at("="):
            self.pos += 1
            self.skip_ws()
            value = self.parse_attribute_value()
        else:
            self.pos = checkpoint

        if ":" in full_name:
            kind, _, name = full_name.partition(":")
            return Directive(kind, name, value, start=start, end=self.pos)
        return Attribute(full_name, value, start=start, end=self.pos)

    def parse_attribute_value(self) -> tuple | ExpressionTag:
        if self.at("{"):
            return self.read_expression_tag()
        if self.at('"') or self.at("'"):
            quote = self.source[self.pos]
            self.pos += 1
            segments = self.parse_quoted_segments(quote)
            self.pos += 1
            return tuple(segments)
        match = _UNQUOTED_VALUE_RE.match(self.source, self.pos)
        if not match:
            raise self.error("Expected attribute value")
        self.pos = match.end()
        return (Text(match.group(0), start=match.start(), end=match.end()),)

    def parse_quoted_segments(self, quote: str) -> list[Text | ExpressionTag]:
        """Read segments up to (not including) the closing *quote*."""
        segments: list[Text | ExpressionTag] = []
        source = self.source
        text_start = self.pos
        while True:
            if self.pos >= len(source):
                raise self.error("Unterminated attribute value", text_start)
            ch = source[self.pos]
            if ch == quote or ch == "{":
                if self.pos > text_start:
                    segments.append(
                        Text(source[text_start : self.pos], start=text_start, end=self.pos)
                    )
                if ch == quote:
                    return segments
                segments.append(self.read_expression_tag())
                text_start = self.pos
                continue
            self.pos += 1


def parse_markup(source: str, filename: str | None = None) -> Document:
    """Parse component markup into a Document.

    *filename* is accepted for parity with other parsers and is only used in
    error messages.
    """
    scanner = _MarkupScanner(source)
    try:
        try:
            nodes = scanner.parse_fragment(root=True)
        except RecursionError as exc:
            raise scanner.error("Markup nested too deeply") from exc
    except ParseError as exc:
        if filename:
            raise ParseError(f"{filename}: {exc}", exc.offset, exc.line, exc.column) from exc
        raise
    return Document(
        source=source,
        nodes=tuple(nodes),
        stylesheet=scanner.stylesheet,
        scripts=tuple(scanner.scripts),
    )
