"""Tests for segment derivation and output formats."""

from __future__ import annotations

import pytest

from tracksplit.errors import ConfigError
from tracksplit.labels.associate import associate_sources
from tracksplit.labels.database import build_database
from tracksplit.models.track import TrackDatabase, TrackRecord
from tracksplit.segments.derive import derive_segments, segment_title
from tracksplit.segments.formats import FORMATS, get_format


@pytest.fixture
def db(label_files):
    return build_database(label_files, total_sections=3, total_tracks=9)


def test_single_section_scenario(db):
    associate_sources(db, ["1-source.wav"])

    segments = derive_segments(db, get_format("wav"))

    assert len(segments) == 5
    first = segments[0]
    assert first.track_number == 1
    assert first.section_number == 1
    assert first.start_position == "00:00:00"
    assert first.end_position == "00:01:00"
    assert first.output_name == "001_Section1.wav"
    assert first.source_path == "1-source.wav"


def test_output_is_sorted_regardless_of_association_order(db):
    associate_sources(db, ["3-c.wav", "1-a.wav", "2-b.wav"])

    numbers = [s.track_number for s in derive_segments(db, get_format("mp3"))]

    assert numbers == list(range(1, 10))


def test_tracks_without_source_are_excluded(db):
    associate_sources(db, ["2-b.wav"])

    segments = derive_segments(db, get_format("aac"))

    assert [s.track_number for s in segments] == [6, 7]
    assert all(s.source_path == "2-b.wav" for s in segments)


def test_nothing_associated_gives_no_segments(db):
    assert derive_segments(db, get_format("mp3")) == []


def test_output_name_and_title():
    db = TrackDatabase(tracks={
        7: TrackRecord(
            track_number=7,
            start_position="00:01:00",
            end_position="00:02:00",
            section_number=3,
            source_path="3-x.wav",
        ),
    })

    (spec,) = derive_segments(db, get_format("mp3"))

    assert spec.output_name == "007_Section3.mp3"
    assert spec.title == "007_Section3"


@pytest.mark.parametrize(
    ("format_name", "extension"),
    [("mp3", "mp3"), ("aac", "m4a"), ("wav", "wav")],
)
def test_extension_per_format(db, format_name, extension):
    associate_sources(db, ["3-c.wav"])

    segments = derive_segments(db, get_format(format_name))

    assert segments[0].output_name == f"008_Section3.{extension}"


def test_derive_is_repeatable(db):
    associate_sources(db, ["1-a.wav", "3-c.wav"])
    fmt = get_format("wav")

    assert derive_segments(db, fmt) == derive_segments(db, fmt)


def test_track_numbers_over_999_are_not_truncated():
    assert segment_title(1234, 2) == "1234_Section2"


def test_formats_table():
    assert set(FORMATS) == {"mp3", "aac", "wav"}
    assert FORMATS["mp3"].codec_args == ("-c:a", "libmp3lame", "-q:a", "0")
    assert FORMATS["aac"].codec_args == ("-c:a", "aac", "-b:a", "256k")
    assert FORMATS["wav"].codec_args == ("-c:a", "pcm_s16le")


def test_unknown_format():
    with pytest.raises(ConfigError, match="flac"):
        get_format("flac")
