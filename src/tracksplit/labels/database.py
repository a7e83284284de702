"""Build the track database from per-section label files.

Each label file lists one row per boundary: ``timestamp<TAB>...<TAB>track``.
Consecutive rows define one track each: row *i* starts the track named in
its third field and row *i + 1* ends it. The last row of a section only
closes the preceding track.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from itertools import pairwise

from tracksplit.errors import (
    DuplicateTrackError,
    LabelFormatError,
    MissingTrackError,
    ValidationError,
)
from tracksplit.models.track import TrackDatabase, TrackRecord
from tracksplit.utils.progress import log_step


@dataclass(frozen=True)
class LabelRow:
    """One parsed label file line."""

    timestamp: str
    track_number: int


def parse_label_lines(section: int, lines: Sequence[str]) -> list[LabelRow]:
    """Parse a section's label lines, skipping blank ones."""
    rows: list[LabelRow] = []
    for line_number, line in enumerate(lines, start=1):
        if not line.strip():
            continue

        fields = line.rstrip("\r\n").split("\t")
        if len(fields) < 3:
            raise LabelFormatError(
                section, line_number, f"expected 3 tab-separated fields, got {len(fields)}"
            )

        track_field = fields[2].strip()
        if not (track_field.isascii() and track_field.isdecimal()):
            raise LabelFormatError(
                section, line_number, f"track number is not numeric: {track_field!r}"
            )

        rows.append(LabelRow(timestamp=fields[0], track_number=int(track_field)))
    return rows


def _fold_section(
    registry: dict[int, TrackRecord],
    section: int,
    rows: list[LabelRow],
    total_tracks: int,
) -> dict[int, TrackRecord]:
    """Return ``registry`` extended with the tracks defined by one section."""
    updated = dict(registry)
    for current, following in pairwise(rows):
        number = current.track_number
        if number in updated:
            raise DuplicateTrackError(number, updated[number].section_number, section)
        if not 1 <= number <= total_tracks:
            raise ValidationError(
                f"Track {number} in section {section} is outside 1..{total_tracks}"
            )
        updated[number] = TrackRecord(
            track_number=number,
            start_position=current.timestamp,
            end_position=following.timestamp,
            section_number=section,
        )
    return updated


def build_database(
    label_files: Mapping[int, Sequence[str]],
    *,
    total_sections: int,
    total_tracks: int,
) -> TrackDatabase:
    """Build and validate the track database.

    Raises ValidationError (or a subclass) if any line is malformed, a track
    number appears twice, or any track in 1..total_tracks is undefined.
    """
    registry: dict[int, TrackRecord] = {}

    for section in range(1, total_sections + 1):
        if section not in label_files:
            raise ValidationError(f"No label data for section {section}")
        rows = parse_label_lines(section, label_files[section])
        registry = _fold_section(registry, section, rows, total_tracks)

    missing = [n for n in range(1, total_tracks + 1) if n not in registry]
    if missing:
        raise MissingTrackError(missing)

    log_step("Labels", f"Track database: {len(registry)} tracks in {total_sections} sections")
    return TrackDatabase(tracks=dict(sorted(registry.items())))
