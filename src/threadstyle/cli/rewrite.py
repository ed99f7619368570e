"""CLI command: threadstyle rewrite -- transform component files."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from threadstyle.cli.options import build_config, config_options
from threadstyle.thread import transform


@click.command()
@click.argument("files", nargs=-1, required=True, type=click.Path(exists=True, dir_okay=False))
@config_options
@click.option("--in-place", "-i", is_flag=True, help="Write the result back to each file.")
@click.option("--check", is_flag=True, help="List files that would change; exit 1 if any.")
def rewrite(
    files: tuple[str, ...],
    config_path: str | None,
    attribute_name: str | None,
    element_names: tuple[str, ...],
    file_identifier: str | None,
    include_story_files: bool | None,
    in_place: bool,
    check: bool,
) -> None:
    """Rewrite shorthand style attributes in FILES.

    With a single file and neither --in-place nor --check, the transformed
    text is printed to stdout.
    """
    if in_place and check:
        raise click.UsageError("--in-place and --check cannot be combined")
    if len(files) > 1 and not (in_place or check):
        raise click.UsageError("Pass --in-place or --check to process several files")

    config = build_config(config_path, attribute_name, element_names, file_identifier, include_story_files)

    changed: list[Path] = []
    for name in files:
        path = Path(name)
        source = path.read_text(encoding="utf-8")
        result = transform(source, str(path), config)

        if check:
            if result != source:
                changed.append(path)
        elif in_place:
            if result != source:
                path.write_text(result, encoding="utf-8")
                changed.append(path)
        else:
            click.echo(result, nl=False)

    if check:
        for path in changed:
            click.echo(f"would rewrite {path}")
        click.echo(f"{len(changed)} file(s) would be rewritten, {len(files) - len(changed)} unchanged")
        sys.exit(1 if changed else 0)
    if in_place:
        click.echo(f"Rewrote {len(changed)} of {len(files)} file(s)")
