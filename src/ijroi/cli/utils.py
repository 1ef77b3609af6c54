"""Shared CLI utilities — Rich console, logging, error handling, output formats."""

from __future__ import annotations

import csv
import functools
import io
import json
import logging
import traceback
from typing import Any, Callable

from rich.console import Console
from rich.table import Table

console = Console()

# Set by the --verbose flag on the top-level CLI group.
verbose: bool = False

OUTPUT_FORMATS = ["table", "csv", "json"]


def setup_logging() -> None:
    """Enable DEBUG logging, which traces every header field read."""
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(levelname)s:%(name)s:%(message)s",
        force=True,
    )


def error_handler(func: Callable[..., Any]) -> Callable[..., Any]:
    """Decorator wrapping CLI commands with standard error handling.

    Catches RoiError and FileNotFoundError (exit 1) and unexpected
    exceptions (exit 2). With --verbose, unexpected errors include the
    full traceback.
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        from ijroi.core.exceptions import RoiError

        try:
            return func(*args, **kwargs)
        except SystemExit:
            raise
        except (RoiError, FileNotFoundError) as e:
            console.print(f"[red]Error:[/red] {e}")
            raise SystemExit(1)
        except Exception as e:
            if verbose:
                console.print(f"[red]Internal error:[/red] {e}")
                console.print(traceback.format_exc())
            else:
                console.print(
                    f"[red]Internal error:[/red] {type(e).__name__}: {e}\n"
                    "[dim]Use --verbose for the full traceback.[/dim]"
                )
            raise SystemExit(2)

    return wrapper


def format_output(
    rows: list[dict[str, Any]],
    columns: list[str],
    fmt: str,
    title: str,
) -> None:
    """Render rows in the requested format (table, csv, or json).

    Args:
        rows: List of dicts, each with keys matching columns.
        columns: Column names (display order).
        fmt: One of "table", "csv", "json".
        title: Title for table output.
    """
    if fmt == "table":
        table = Table(show_header=True, title=title)
        for col in columns:
            if col == columns[0]:
                table.add_column(col, style="bold")
            else:
                table.add_column(col)
        for row in rows:
            table.add_row(*(str(row.get(c, "")) for c in columns))
        console.print(table)
    elif fmt == "csv":
        buf = io.StringIO()
        writer = csv.writer(buf)
        writer.writerow(columns)
        for row in rows:
            writer.writerow([row.get(c, "") for c in columns])
        # Print without trailing newline from csv module
        console.print(buf.getvalue().rstrip())
    elif fmt == "json":
        console.print_json(json.dumps(rows))
