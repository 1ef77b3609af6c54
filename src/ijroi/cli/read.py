"""ijroi read — decode every ROI in a ROI Manager archive."""

from __future__ import annotations

from pathlib import Path

import click

from ijroi.cli.utils import OUTPUT_FORMATS, console, error_handler, format_output

_COLUMNS = ["key", "type", "subtype", "left", "top", "width", "height", "points", "position"]


@click.command()
@click.argument("archive", type=click.Path(exists=True, dir_okay=False))
@click.option("--names/--no-names", default=True,
              help="Key ROIs by file name, or by '<type>.<n>'.")
@click.option("--config", "config_path", type=click.Path(exists=True, dir_okay=False),
              default=None, help="YAML reader config.")
@click.option("--format", "fmt", type=click.Choice(OUTPUT_FORMATS),
              default="table", help="Output format.")
@error_handler
def read(archive: str, names: bool, config_path: str | None, fmt: str) -> None:
    """Decode all ROIs in ARCHIVE (.zip) in archive order."""
    from ijroi.io.collection import read_zip
    from ijroi.io.config import ReaderConfig

    config = None
    if config_path:
        try:
            config = ReaderConfig.from_yaml(Path(config_path))
        except ValueError as e:
            console.print(f"[red]Error:[/red] Invalid reader config {config_path}: {e}")
            raise SystemExit(1)

    collection = read_zip(Path(archive), use_names=names, config=config)

    if not collection:
        console.print("[dim]No ROIs found.[/dim]")
        return

    format_output(collection.summary_rows(), _COLUMNS, fmt, Path(archive).name)
