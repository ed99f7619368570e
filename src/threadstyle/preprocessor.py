"""Build-tool hook: a named markup preprocessor around transform()."""

from __future__ import annotations

from dataclasses import dataclass

from threadstyle.config import ThreadConfig
from threadstyle.errors import ConfigurationError
from threadstyle.thread import transform

PREPROCESSOR_NAME = "thread-preprocessor"


@dataclass(frozen=True)
class ThreadPreprocessor:
    """Markup preprocessor returning ``{"code": ...}`` for each file it is fed."""

    config: ThreadConfig
    name: str = PREPROCESSOR_NAME

    def markup(self, content: str, filename: str | None = None) -> dict[str, str]:
        if not filename:
            raise ConfigurationError("No filename provided")
        return {"code": transform(content, filename, self.config)}


def thread_preprocessor(config: ThreadConfig) -> ThreadPreprocessor:
    """Create the preprocessor for *config*."""
    return ThreadPreprocessor(config)
