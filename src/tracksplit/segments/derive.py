"""Derive per-track segment specifications from the track database."""

from __future__ import annotations

from tracksplit.models.track import SegmentSpec, TrackDatabase
from tracksplit.segments.formats import FormatSpec


def segment_title(track_number: int, section_number: int) -> str:
    """Title metadata for a track, e.g. ``007_Section3``."""
    return f"{track_number:03d}_Section{section_number}"


def derive_segments(db: TrackDatabase, fmt: FormatSpec) -> list[SegmentSpec]:
    """Return one spec per track that has a source file, by track number.

    Tracks whose section has no associated source are left out.
    """
    segments: list[SegmentSpec] = []

    for record in db.sorted_tracks():
        if not record.source_path:
            continue

        title = segment_title(record.track_number, record.section_number)
        segments.append(SegmentSpec(
            track_number=record.track_number,
            section_number=record.section_number,
            source_path=record.source_path,
            start_position=record.start_position,
            end_position=record.end_position,
            output_name=f"{title}.{fmt.extension}",
            title=title,
        ))

    return segments
