"""Edit instructions applied by the patch engine."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from threadstyle.model.nodes import Span


@dataclass(frozen=True)
class Overwrite:
    """Replace ``[start, end)`` of the original text with ``text``."""

    start: int
    end: int
    text: str

    def __post_init__(self) -> None:
        if self.start < 0 or self.end < self.start:
            raise ValueError(f"Invalid edit range [{self.start}, {self.end})")

    @property
    def span(self) -> Span:
        return Span(self.start, self.end)

    @property
    def replacement(self) -> str:
        return self.text


@dataclass(frozen=True)
class Delete:
    """Remove ``[start, end)`` of the original text."""

    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start < 0 or self.end < self.start:
            raise ValueError(f"Invalid edit range [{self.start}, {self.end})")

    @property
    def span(self) -> Span:
        return Span(self.start, self.end)

    @property
    def replacement(self) -> str:
        return ""


Edit = Union[Overwrite, Delete]


def overwrite(span: Span, text: str) -> Overwrite:
    return Overwrite(span.start, span.end, text)


def delete(span: Span) -> Delete:
    return Delete(span.start, span.end)
