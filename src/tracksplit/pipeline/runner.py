"""Split run: labels → database → sources → segments → FFmpeg."""

from __future__ import annotations

import time
from collections.abc import Sequence
from pathlib import Path

from tracksplit.labels.associate import associate_sources
from tracksplit.labels.database import build_database
from tracksplit.labels.loader import read_label_files
from tracksplit.models.config import SplitConfig
from tracksplit.models.track import SegmentSpec, TrackDatabase
from tracksplit.pipeline.executor import execute_segments
from tracksplit.segments.derive import derive_segments
from tracksplit.segments.formats import get_format
from tracksplit.utils.progress import log, log_success, log_warning, show_run_summary


def load_database(root: Path, config: SplitConfig) -> TrackDatabase:
    """Read the label files under ``root`` and build the track database."""
    label_files = read_label_files(root, config)
    return build_database(
        label_files,
        total_sections=config.total_sections,
        total_tracks=config.total_tracks,
    )


def run_split(
    root: Path,
    config: SplitConfig,
    sources: Sequence[Path | str],
    *,
    format_name: str | None = None,
    output_dir: Path | None = None,
    dry_run: bool = False,
) -> list[SegmentSpec]:
    """Split ``sources`` into per-track files and return the segments produced.

    ``root`` is the directory holding the config file; relative label and
    output directories resolve against it.
    """
    fmt = get_format(format_name or config.format)
    out = output_dir if output_dir is not None else root / config.output_dir

    start_time = time.time()
    log(f"[bold]tracksplit[/bold] — {len(sources)} source file(s), format {fmt.name}")

    db = load_database(root, config)
    associate_sources(db, sources)
    segments = derive_segments(db, fmt)

    covered = sorted({s.section_number for s in segments})
    skipped = [s for s in range(1, config.total_sections + 1) if s not in covered]
    if skipped:
        log_warning(f"No source for section(s) {', '.join(map(str, skipped))}; skipped")

    if not segments:
        log_warning("Nothing to do")
        return segments

    execute_segments(segments, fmt, out, dry_run=dry_run)

    if dry_run:
        log_success(f"Dry run: {len(segments)} command(s) not executed")
    else:
        log_success(f"Wrote {len(segments)} track(s) to {out}")

    show_run_summary(
        "Split Complete" if not dry_run else "Dry Run",
        time.time() - start_time,
        {
            "Tracks": len(segments),
            "Sections": ", ".join(map(str, covered)),
            "Skipped sections": ", ".join(map(str, skipped)) or "none",
            "Output": str(out),
        },
    )
    return segments
