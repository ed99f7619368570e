"""Parser error types."""

from __future__ import annotations

from threadstyle.errors import ThreadStyleError


class ParseError(ThreadStyleError):
    """Raised when markup or an expression cannot be parsed."""

    def __init__(
        self,
        message: str,
        offset: int | None = None,
        line: int | None = None,
        column: int | None = None,
    ):
        self.offset = offset
        self.line = line
        self.column = column
        super().__init__(message)

    @classmethod
    def at(cls, message: str, source: str, offset: int) -> ParseError:
        """Build an error pointing at *offset* in *source* (1-based line/column)."""
        line = source.count("\n", 0, offset) + 1
        column = offset - (source.rfind("\n", 0, offset) + 1) + 1
        return cls(f"{message} (line {line}, column {column})", offset, line, column)
