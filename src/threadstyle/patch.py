"""Apply range edits to the original text in a single pass."""

from __future__ import annotations

from collections.abc import Iterable

from threadstyle.errors import OverlappingEditError
from threadstyle.model.edits import Edit

__all__ = ["apply_edits", "sort_edits"]


def sort_edits(edits: Iterable[Edit]) -> list[Edit]:
    """Order edits by position and check that no two of them overlap.

    Raises OverlappingEditError when an edit starts before the previous one
    ends.
    """
    ordered = sorted(edits, key=lambda e: (e.start, e.end))
    for previous, current in zip(ordered, ordered[1:]):
        if current.span.overlaps(previous.span):
            raise OverlappingEditError(previous, current)
    return ordered


def apply_edits(text: str, edits: Iterable[Edit]) -> str:
    """Return *text* with every edit applied.

    All offsets refer to the original *text*, so edits may be given in any
    order.  Characters outside the edited ranges are copied unchanged.
    """
    ordered = sort_edits(edits)
    if not ordered:
        return text
    if ordered[-1].end > len(text):
        raise ValueError(f"Edit {ordered[-1]!r} ends past the text ({len(text)} characters)")

    parts: list[str] = []
    cursor = 0
    for edit in ordered:
        parts.append(text[cursor : edit.start])
        parts.append(edit.replacement)
        cursor = edit.end
    parts.append(text[cursor:])
    return "".join(parts)
