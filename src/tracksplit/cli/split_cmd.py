"""tracksplit split — cut source recordings into tracks."""

from __future__ import annotations

from pathlib import Path

import click

from tracksplit.errors import TrackSplitError
from tracksplit.models.config import CONFIG_FILENAME, load_config
from tracksplit.segments.formats import FORMATS
from tracksplit.utils.progress import log_error


@click.command()
@click.argument(
    "sources",
    nargs=-1,
    required=True,
    type=click.Path(exists=True, dir_okay=False),
)
@click.option(
    "--config", "-c",
    default=CONFIG_FILENAME,
    type=click.Path(),
    help="Path to tracksplit.yaml",
)
@click.option(
    "--format", "-f", "format_name",
    default=None,
    type=click.Choice(list(FORMATS)),
    help="Output format (defaults to the config's format)",
)
@click.option(
    "--output", "-o",
    default=None,
    type=click.Path(file_okay=False),
    help="Output directory (defaults to the config's output_dir)",
)
@click.option("--dry-run", is_flag=True, help="Print FFmpeg commands without running them")
def split_cmd(
    sources: tuple[str, ...],
    config: str,
    format_name: str | None,
    output: str | None,
    dry_run: bool,
) -> None:
    """Split SOURCES into per-track files.

    Each source file name must start with its section number,
    e.g. 3-lesson.wav for section 3.
    """
    config_path = Path(config).resolve()

    from tracksplit.pipeline.runner import run_split

    try:
        split_config = load_config(config_path)
        run_split(
            config_path.parent,
            split_config,
            [Path(s) for s in sources],
            format_name=format_name,
            output_dir=Path(output).resolve() if output else None,
            dry_run=dry_run,
        )
    except (TrackSplitError, FileNotFoundError) as e:
        log_error(f"Split failed: {e}")
        raise SystemExit(1)
