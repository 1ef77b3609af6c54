"""ijroi CLI — top-level Click group."""

from __future__ import annotations

import click


@click.group()
@click.version_option(package_name="ijroi")
@click.option("--verbose", "-v", is_flag=True, help="Show debug logs and full tracebacks.")
def cli(verbose: bool) -> None:
    """ijroi — Read ImageJ ROI files and ROI Manager archives."""
    from ijroi.cli import utils

    utils.verbose = verbose
    if verbose:
        utils.setup_logging()


def _register_commands() -> None:
    """Register all subcommands."""
    from ijroi.cli.list_cmd import list_cmd
    from ijroi.cli.read import read
    from ijroi.cli.show import show

    cli.add_command(list_cmd)
    cli.add_command(read)
    cli.add_command(show)


_register_commands()
