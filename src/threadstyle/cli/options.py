"""Options shared by the CLI commands that build a ThreadConfig."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import click

from threadstyle.config import ThreadConfig, load_config
from threadstyle.errors import ConfigurationError


def config_options(command: Callable[..., Any]) -> Callable[..., Any]:
    """Attach the configuration flags to *command*."""
    decorators = [
        click.option(
            "--config",
            "config_path",
            type=click.Path(exists=True, dir_okay=False),
            help="JSON file with transform options.",
        ),
        click.option("-a", "--attribute", "attribute_name", help="Shorthand attribute name (default: cs)."),
        click.option("-e", "--element", "element_names", multiple=True, help="Element to rewrite; repeatable."),
        click.option("--file-identifier", help="Only rewrite files whose name contains this text."),
        click.option(
            "--stories/--no-stories",
            "include_story_files",
            default=None,
            help="Rewrite shorthand inside story args.",
        ),
    ]
    for decorator in reversed(decorators):
        command = decorator(command)
    return command


def build_config(
    config_path: str | None,
    attribute_name: str | None,
    element_names: tuple[str, ...],
    file_identifier: str | None,
    include_story_files: bool | None,
) -> ThreadConfig:
    """Load the config file (if any) and apply command-line overrides."""
    try:
        base = load_config(config_path) if config_path else ThreadConfig()
        config = base.merged(
            attribute_name=attribute_name,
            element_names=frozenset(element_names) if element_names else None,
            file_identifier=file_identifier,
            include_story_files=include_story_files,
        )
    except ConfigurationError as exc:
        raise click.UsageError(str(exc)) from exc
    if not config.element_names:
        raise click.UsageError("No elements to rewrite: pass --element or set element_names in --config")
    return config
