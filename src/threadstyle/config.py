"""Transform configuration."""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any

from threadstyle.errors import ConfigurationError

# Option names used by the JavaScript preprocessor, accepted for drop-in configs.
_ALIASES = {
    "attributeName": "attribute_name",
    "elementNames": "element_names",
    "fileIdentifier": "file_identifier",
    "shouldIncludeStorybookFiles": "include_story_files",
    "includeStoryFiles": "include_story_files",
    "storyElement": "story_element",
    "storyFileMarkers": "story_file_markers",
    "scopedStylesElement": "scoped_styles_element",
    "designSystem": "design_system",
    "customPropertySelector": "custom_property_selector",
}


@dataclass(frozen=True)
class ThreadConfig:
    """Options for one run of the style shorthand transform."""

    attribute_name: str = "cs"
    element_names: frozenset[str] = frozenset()
    file_identifier: str | None = None
    include_story_files: bool = False
    story_element: str = "Story"
    story_file_markers: tuple[str, ...] = (".stories", ".story")
    scoped_styles_element: str = "ScopedStyles"
    design_system: Mapping[str, Any] = field(default_factory=dict)
    custom_property_selector: str = ":root"

    def __post_init__(self) -> None:
        if not self.attribute_name:
            raise ConfigurationError("attribute_name must be a non-empty string")
        if not isinstance(self.design_system, Mapping):
            raise ConfigurationError("design_system must be a mapping of design tokens")
        # Accept any iterable of names from callers.
        if not isinstance(self.element_names, frozenset):
            object.__setattr__(self, "element_names", frozenset(self.element_names))
        if not isinstance(self.story_file_markers, tuple):
            object.__setattr__(self, "story_file_markers", tuple(self.story_file_markers))

    def is_story_file(self, filename: str) -> bool:
        return any(marker in filename for marker in self.story_file_markers)

    def accepts_file(self, filename: str) -> bool:
        """Return False when a file identifier is set and *filename* lacks it."""
        return not self.file_identifier or self.file_identifier in filename

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ThreadConfig:
        """Build a config from a plain mapping (snake_case or camelCase keys)."""
        known = {f.name for f in fields(cls)}
        kwargs: dict[str, Any] = {}
        for key, value in data.items():
            name = _ALIASES.get(key, key)
            if name not in known:
                raise ConfigurationError(f"Unknown option: {key!r}")
            kwargs[name] = value
        if isinstance(kwargs.get("element_names"), str):
            raise ConfigurationError("element_names must be a list of element names")
        return cls(**kwargs)

    def merged(self, **overrides: Any) -> ThreadConfig:
        """Return a copy with every non-None override applied."""
        values = {f.name: getattr(self, f.name) for f in fields(self)}
        values.update({k: v for k, v in overrides.items() if v is not None})
        return ThreadConfig(**values)


def load_config(path: str | Path) -> ThreadConfig:
    """Read a JSON config file into a ThreadConfig."""
    config_path = Path(path)
    try:
        data = json.loads(config_path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise ConfigurationError(f"Could not read config {config_path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigurationError(f"Config {config_path} must contain a JSON object")
    return ThreadConfig.from_dict(data)
