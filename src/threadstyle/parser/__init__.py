from threadstyle.parser.errors import ParseError
from threadstyle.parser.expression import parse_expression, parse_expression_strict
from threadstyle.parser.markup import parse_markup

__all__ = ["ParseError", "parse_expression", "parse_expression_strict", "parse_markup"]
