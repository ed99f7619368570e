"""Transform entry point: gate, parse, collect edits, patch."""

from __future__ import annotations

import logging
from collections.abc import Callable

from threadstyle.config import ThreadConfig
from threadstyle.model.edits import Edit
from threadstyle.model.nodes import Document
from threadstyle.parser import ParseError, parse_markup
from threadstyle.patch import apply_edits
from threadstyle.transforms import collect_edits

logger = logging.getLogger(__name__)

__all__ = ["MarkupParser", "plan_edits", "transform"]

MarkupParser = Callable[[str, str], Document]


def plan_edits(
    content: str,
    filename: str,
    config: ThreadConfig,
    parser: MarkupParser | None = None,
) -> list[Edit]:
    """Return the edits *transform* would apply, without applying them.

    Raises ParseError when the content cannot be parsed.
    """
    if not config.accepts_file(filename):
        logger.debug("Skipping %s: file identifier %r not in name", filename, config.file_identifier)
        return []
    document = (parser or parse_markup)(content, filename)
    return collect_edits(document, config, filename)


def transform(
    content: str,
    filename: str,
    config: ThreadConfig,
    parser: MarkupParser | None = None,
) -> str:
    """Rewrite every shorthand attribute in *content* into an inline style.

    Returns *content* unchanged when the file identifier gate rejects
    *filename* or when the content cannot be parsed; never partially patched.
    """
    try:
        edits = plan_edits(content, filename, config, parser)
    except ParseError as exc:
        logger.warning("Error parsing %s, leaving it unchanged: %s", filename, exc)
        return content
    return apply_edits(content, edits)
