"""Exception types shared across threadstyle."""

from __future__ import annotations


class ThreadStyleError(Exception):
    """Base class for every error raised by threadstyle."""


class ConfigurationError(ThreadStyleError):
    """Raised when the transform cannot run with the configuration it was given."""


class OverlappingEditError(ThreadStyleError, ValueError):
    """Raised when two edits submitted for one document cover the same text."""

    def __init__(self, first: object, second: object):
        self.first = first
        self.second = second
        super().__init__(f"Edits overlap: {first!r} and {second!r}")
