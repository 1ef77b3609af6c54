"""ijroi show — decode a single .roi file."""

from __future__ import annotations

import json
from pathlib import Path

import click

from ijroi.cli.utils import console, error_handler, format_output


@click.command()
@click.argument("roi_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--format", "fmt", type=click.Choice(["table", "json"]),
              default="table", help="Output format.")
@click.option("--coordinates", is_flag=True,
              help="Also list the x/y coordinates (table output).")
@error_handler
def show(roi_file: str, fmt: str, coordinates: bool) -> None:
    """Show the decoded fields of ROI_FILE."""
    from ijroi.io.decoder import read_roi

    record = read_roi(Path(roi_file))
    data = record.to_dict()

    if fmt == "json":
        console.print_json(json.dumps(data))
        return

    points = data.pop("coordinates")
    rows = [
        {"field": key, "value": "-" if value is None else value}
        for key, value in data.items()
    ]
    rows.append({"field": "n_coordinates", "value": len(points)})
    format_output(rows, ["field", "value"], "table", record.name or Path(roi_file).name)

    if coordinates and points:
        format_output(
            [{"x": x, "y": y} for x, y in points], ["x", "y"], "table", "Coordinates",
        )
