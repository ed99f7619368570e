"""Data model: markup nodes, expressions and edits."""

from threadstyle.model.edits import Delete, Edit, Overwrite
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
from threadstyle.model.nodes import (
    Attribute,
    Block,
    Comment,
    Directive,
    Document,
    Element,
    ExpressionTag,
    Node,
    RawBlock,
    Span,
    SpreadAttribute,
    Tag,
    Text,
)

__all__ = [
    "ArrayExpression",
    "Attribute",
    "BinaryExpression",
    "Block",
    "CallExpression",
    "Comment",
    "ConditionalExpression",
    "Delete",
    "Directive",
    "Document",
    "Edit",
    "Element",
    "Expression",
    "ExpressionTag",
    "Identifier",
    "Literal",
    "LogicalExpression",
    "MemberExpression",
    "Node",
    "ObjectExpression",
    "Overwrite",
    "Property",
    "RawBlock",
    "Span",
    "SpreadAttribute",
    "SpreadElement",
    "Tag",
    "TemplateLiteral",
    "Text",
    "UnaryExpression",
    "UnsupportedExpression",
]
