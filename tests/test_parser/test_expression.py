"""Tests for the expression grammar and transformer."""

from __future__ import annotations

import pytest

from threadstyle.model.expressions import (
    ArrayExpression,
    BinaryExpression,
    CallExpression,
    ConditionalExpression,
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
from threadstyle.parser import ParseError, parse_expression, parse_expression_strict
from threadstyle.parser.expression import split_template


# ---------------------------------------------------------------------------
# Literals
# ---------------------------------------------------------------------------


class TestLiterals:
    def test_single_quoted_string(self):
        assert parse_expression("'10px'") == Literal("10px", "'10px'", start=0, end=6)

    def test_double_quoted_string_with_escape(self):
        literal = parse_expression(r'"say \"hi\""')
        assert literal.value == 'say "hi"'
        assert literal.raw == r'"say \"hi\""'

    def test_number(self):
        assert parse_expression("1.5").value == "1.5"

    @pytest.mark.parametrize("keyword", ["true", "false", "null"])
    def test_keywords(self, keyword):
        literal = parse_expression(keyword)
        assert isinstance(literal, Literal)
        assert literal.raw == keyword

    def test_keyword_prefix_is_an_identifier(self):
        assert parse_expression("nullable") == Identifier("nullable", start=0, end=8)

    def test_undefined_is_an_identifier(self):
        assert isinstance(parse_expression("undefined"), Identifier)


# ---------------------------------------------------------------------------
# Operators
# ---------------------------------------------------------------------------


class TestOperators:
    def test_and_binds_tighter_than_or(self):
        expr = parse_expression("a || b && c")
        assert isinstance(expr, LogicalExpression)
        assert expr.operator == "||"
        assert isinstance(expr.right, LogicalExpression)
        assert expr.right.operator == "&&"

    def test_nullish(self):
        assert parse_expression("a ?? b").operator == "??"

    def test_conditional_is_right_associative(self):
        expr = parse_expression("a ? 'x' : b ? 'y' : 'z'")
        assert isinstance(expr, ConditionalExpression)
        assert isinstance(expr.alternate, ConditionalExpression)

    def test_comparison_in_conditional_test(self):
        expr = parse_expression("size === 'l' ? '2rem' : '1rem'")
        assert isinstance(expr.test, BinaryExpression)
        assert expr.test.operator == "==="
        assert expr.test.right.raw == "'l'"

    def test_negation(self):
        expr = parse_expression("!open && '4px'")
        assert isinstance(expr.left, UnaryExpression)
        assert expr.left.argument == Identifier("open", start=1, end=5)

    def test_arithmetic_precedence(self):
        expr = parse_expression("a + b * 2")
        assert expr.operator == "+"
        assert expr.right.operator == "*"

    def test_parentheses(self):
        expr = parse_expression("(a + b) * 2")
        assert expr.operator == "*"
        assert isinstance(expr.left, BinaryExpression)

    def test_member_call_chain(self):
        expr = parse_expression("theme.space(2)[0]")
        assert isinstance(expr, MemberExpression)
        assert expr.computed
        call = expr.object
        assert isinstance(call, CallExpression)
        assert call.callee == MemberExpression(
            Identifier("theme", start=0, end=5),
            Identifier("space", start=6, end=11),
            start=0,
            end=11,
        )
        assert call.arguments == (Literal("2", "2", start=12, end=13),)

    def test_call_without_arguments(self):
        assert parse_expression("f()").arguments == ()


# ---------------------------------------------------------------------------
# Objects and arrays
# ---------------------------------------------------------------------------


class TestObjects:
    def test_property_positions(self):
        obj = parse_expression("{ gap: '10px' }")
        assert isinstance(obj, ObjectExpression)
        assert (obj.start, obj.end) == (0, 15)
        (prop,) = obj.properties
        assert (prop.start, prop.end) == (2, 13)
        assert prop.key == Identifier("gap", start=2, end=5)

    def test_offset_shifts_every_position(self):
        obj = parse_expression("{ gap: '10px' }", offset=100)
        (prop,) = obj.properties
        assert (obj.start, prop.start, prop.value.start) == (100, 102, 107)

    def test_empty_object(self):
        assert parse_expression("{}").properties == ()

    def test_mixed_members(self):
        obj = parse_expression("{ ...base, color, '--gap': g, 2: 'x', }")
        spread, shorthand, quoted, numeric = obj.properties
        assert isinstance(spread, SpreadElement)
        assert spread.argument.name == "base"
        assert isinstance(shorthand, Property) and shorthand.shorthand
        assert shorthand.value == Identifier("color", start=11, end=16)
        assert quoted.key.value == "--gap"
        assert numeric.key.raw == "2"

    def test_nested_object(self):
        obj = parse_expression("{ a: { b: 1 } }")
        assert isinstance(obj.properties[0].value, ObjectExpression)

    def test_array(self):
        arr = parse_expression("[1, ...rest]")
        assert isinstance(arr, ArrayExpression)
        assert isinstance(arr.elements[1], SpreadElement)


# ---------------------------------------------------------------------------
# Template literals
# ---------------------------------------------------------------------------


class TestTemplates:
    def test_split(self):
        quasis, interpolations = split_template("`a${x}b${y}`")
        assert quasis == ["a", "b", ""]
        assert interpolations == [("x", 4), ("y", 9)]

    def test_split_keeps_escapes(self):
        quasis, interpolations = split_template(r"`\${x}`")
        assert quasis == [r"\${x}"]
        assert interpolations == []

    def test_interpolation_positions(self):
        template = parse_expression("`${h}px`", offset=10)
        assert isinstance(template, TemplateLiteral)
        assert (template.start, template.end) == (10, 18)
        assert template.quasis == ("", "px")
        assert template.expressions == (Identifier("h", start=13, end=14),)

    def test_plain_template(self):
        template = parse_expression("`10px`")
        assert template.quasis == ("10px",)
        assert template.expressions == ()


# ---------------------------------------------------------------------------
# Unsupported syntax
# ---------------------------------------------------------------------------


class TestUnsupported:
    @pytest.mark.parametrize("source", ["x => x", "a = 1", "new Foo()", "a, b"])
    def test_soft_failure_covers_whole_source(self, source):
        expr = parse_expression(source, offset=3)
        assert expr == UnsupportedExpression(source, start=3, end=3 + len(source))

    def test_strict_raises(self):
        with pytest.raises(ParseError):
            parse_expression_strict("x => x")

    def test_deep_nesting_is_unsupported(self):
        source = "!" * 5000 + "a"
        assert isinstance(parse_expression(source), UnsupportedExpression)

    def test_unsupported_value_inside_object(self):
        obj = parse_expression("{ a: f(), b: 'c' }")
        assert isinstance(obj.properties[0].value, CallExpression)
