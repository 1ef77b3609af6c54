"""ijroi list — list archive members without decoding them."""

from __future__ import annotations

from pathlib import Path

import click

from ijroi.cli.utils import OUTPUT_FORMATS, console, error_handler, format_output


@click.command("list")
@click.argument("archive", type=click.Path(exists=True, dir_okay=False))
@click.option("--format", "fmt", type=click.Choice(OUTPUT_FORMATS),
              default="table", help="Output format.")
@error_handler
def list_cmd(archive: str, fmt: str) -> None:
    """List the members of ARCHIVE with their sizes."""
    from ijroi.io.archive import list_zip

    members = list_zip(Path(archive))

    if not members:
        console.print("[dim]Archive is empty.[/dim]")
        return

    rows = [
        {"name": m.name, "compressed_size": m.compressed_size, "file_size": m.file_size}
        for m in members
    ]
    format_output(rows, ["name", "compressed_size", "file_size"], fmt, Path(archive).name)
