"""Run FFmpeg once per segment specification."""

from __future__ import annotations

import shlex
from pathlib import Path

from rich.markup import escape

from tracksplit.models.track import SegmentSpec
from tracksplit.segments.formats import FormatSpec
from tracksplit.utils.ffmpeg import ffmpeg_command, run_ffmpeg
from tracksplit.utils.progress import log, log_step


def build_ffmpeg_args(spec: SegmentSpec, fmt: FormatSpec, output_dir: Path) -> list[str]:
    """Arguments that trim one track out of its source and encode it."""
    return [
        "-i", spec.source_path,
        "-ss", spec.start_position,
        "-to", spec.end_position,
        *fmt.codec_args,
        "-metadata", f"title={spec.title}",
        str(output_dir / spec.output_name),
    ]


def execute_segments(
    segments: list[SegmentSpec],
    fmt: FormatSpec,
    output_dir: Path,
    *,
    dry_run: bool = False,
) -> list[list[str]]:
    """Encode every segment in order and return the commands run.

    Stops at the first failing command; files already written are kept.
    """
    commands: list[list[str]] = []

    if not dry_run:
        output_dir.mkdir(parents=True, exist_ok=True)

    total = len(segments)
    for i, spec in enumerate(segments, start=1):
        args = build_ffmpeg_args(spec, fmt, output_dir)
        commands.append(ffmpeg_command(args))

        if dry_run:
            log(escape(shlex.join(commands[-1])), style="dim")
            continue

        log_step("Encode", f"[{i}/{total}] {spec.output_name} ({spec.start_position} → {spec.end_position})")
        run_ffmpeg(args)

    return commands
