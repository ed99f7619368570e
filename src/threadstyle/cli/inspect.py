"""CLI command: threadstyle inspect -- show the edits planned for a file."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from threadstyle.cli.options import build_config, config_options
from threadstyle.model.edits import Delete
from threadstyle.parser import ParseError
from threadstyle.thread import plan_edits


@click.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False))
@config_options
def inspect(
    file: str,
    config_path: str | None,
    attribute_name: str | None,
    element_names: tuple[str, ...],
    file_identifier: str | None,
    include_story_files: bool | None,
) -> None:
    """Parse FILE and print the edits a rewrite would make, one per line."""
    path = Path(file)
    config = build_config(config_path, attribute_name, element_names, file_identifier, include_story_files)

    try:
        source = path.read_text(encoding="utf-8")
        edits = plan_edits(source, str(path), config)
    except ParseError as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)

    for edit in sorted(edits, key=lambda e: e.start):
        if isinstance(edit, Delete):
            click.echo(f"delete {edit.start}-{edit.end}  {source[edit.start:edit.end]!r}")
        else:
            click.echo(f"overwrite {edit.start}-{edit.end}  {edit.text!r}")
    click.echo(f"{len(edits)} edit(s)")
