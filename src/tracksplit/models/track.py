"""Track database and segment specification models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class TrackRecord(BaseModel):
    """One track of the course, as defined by its section's label file."""

    track_number: int = Field(ge=1)
    start_position: str
    end_position: str
    section_number: int = Field(ge=1)
    source_path: str | None = None  # set by associate_sources


class TrackDatabase(BaseModel):
    """All track records keyed by track number."""

    tracks: dict[int, TrackRecord] = Field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.tracks)

    def __getitem__(self, track_number: int) -> TrackRecord:
        return self.tracks[track_number]

    def sorted_tracks(self) -> list[TrackRecord]:
        return [self.tracks[n] for n in sorted(self.tracks)]

    def sections(self) -> list[int]:
        return sorted({t.section_number for t in self.tracks.values()})

    def tracks_in_section(self, section: int) -> list[TrackRecord]:
        return [t for t in self.sorted_tracks() if t.section_number == section]


class SegmentSpec(BaseModel):
    """Everything needed to extract and encode one track."""

    track_number: int
    section_number: int
    source_path: str
    start_position: str
    end_position: str
    output_name: str
    title: str
