"""tracksplit check — validate the label files."""

from __future__ import annotations

from pathlib import Path

import click

from tracksplit.errors import TrackSplitError
from tracksplit.models.config import CONFIG_FILENAME, load_config
from tracksplit.utils.progress import log_error, log_success, show_section_table


@click.command()
@click.option(
    "--config", "-c",
    default=CONFIG_FILENAME,
    type=click.Path(),
    help="Path to tracksplit.yaml",
)
def check_cmd(config: str) -> None:
    """Build the track database and show a per-section summary."""
    config_path = Path(config).resolve()

    from tracksplit.pipeline.runner import load_database

    try:
        split_config = load_config(config_path)
        db = load_database(config_path.parent, split_config)
    except (TrackSplitError, FileNotFoundError) as e:
        log_error(f"Check failed: {e}")
        raise SystemExit(1)

    show_section_table(db)
    log_success(f"{len(db)} tracks in {len(db.sections())} sections")
