"""Root CLI group for tracksplit."""

from __future__ import annotations

import click

from tracksplit import __version__


@click.group()
@click.version_option(version=__version__, prog_name="tracksplit")
def cli() -> None:
    """tracksplit — split course recordings into per-track audio files."""


# Import and register subcommands
from tracksplit.cli.init_cmd import init_cmd  # noqa: E402
from tracksplit.cli.check_cmd import check_cmd  # noqa: E402
from tracksplit.cli.split_cmd import split_cmd  # noqa: E402

cli.add_command(init_cmd, "init")
cli.add_command(check_cmd, "check")
cli.add_command(split_cmd, "split")
