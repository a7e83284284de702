"""tracksplit init — write a project config file."""

from __future__ import annotations

from pathlib import Path

import click

from tracksplit.models.config import CONFIG_FILENAME, SplitConfig, save_config
from tracksplit.segments.formats import FORMATS
from tracksplit.utils.progress import log_error, log_success


@click.command()
@click.option("--sections", required=True, type=click.IntRange(min=1), help="Number of sections")
@click.option("--tracks", required=True, type=click.IntRange(min=1), help="Total number of tracks")
@click.option("--labels", default="labels", help="Directory holding the label files")
@click.option(
    "--pattern",
    default="section{section}.txt",
    help="Label file name pattern; {section} is replaced by the section number",
)
@click.option(
    "--format", "format_name",
    default="mp3",
    type=click.Choice(list(FORMATS)),
    help="Default output format",
)
@click.option("--output", "-o", default="output", help="Default output directory")
@click.option(
    "--dir", "project_dir",
    default=".",
    type=click.Path(file_okay=False),
    help="Where to write the config file",
)
@click.option("--force", is_flag=True, help="Overwrite an existing config file")
def init_cmd(
    sections: int,
    tracks: int,
    labels: str,
    pattern: str,
    format_name: str,
    output: str,
    project_dir: str,
    force: bool,
) -> None:
    """Write a tracksplit.yaml describing the course."""
    config_path = Path(project_dir).resolve() / CONFIG_FILENAME
    if config_path.exists() and not force:
        log_error(f"Config already exists: {config_path} (use --force to overwrite)")
        raise SystemExit(1)

    try:
        config = SplitConfig(
            labels_dir=labels,
            label_pattern=pattern,
            total_sections=sections,
            total_tracks=tracks,
            output_dir=output,
            format=format_name,
        )
    except ValueError as e:
        log_error(str(e))
        raise SystemExit(1)

    save_config(config_path, config)

    log_success(f"Config written: {config_path}")
    click.echo(f"\nNext: put {sections} label file(s) in {labels}/ and run `tracksplit check`")
