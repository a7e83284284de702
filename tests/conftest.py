"""Shared fixtures: label files and config for a small three-section course."""

from __future__ import annotations

from pathlib import Path

import pytest

from tracksplit.models.config import SplitConfig


def label_lines(rows: list[tuple[str, int]]) -> list[str]:
    """Label lines in the on-disk format: timestamp, end, track number."""
    return [f"{ts}\t{ts}\t{track}" for ts, track in rows]


# Section 1: tracks 1-5, section 2: tracks 6-7, section 3: tracks 8-9.
SECTION_ROWS = {
    1: [
        ("00:00:00", 1),
        ("00:01:00", 2),
        ("00:02:10", 3),
        ("00:03:00", 4),
        ("00:04:20", 5),
        ("00:05:00", 0),
    ],
    2: [
        ("00:00:00.000", 6),
        ("00:10:30.250", 7),
        ("00:20:00.000", 0),
    ],
    3: [
        ("00:00:05.500", 8),
        ("00:07:00.000", 9),
        ("00:09:59.999", 0),
    ],
}


@pytest.fixture
def label_files() -> dict[int, list[str]]:
    return {section: label_lines(rows) for section, rows in SECTION_ROWS.items()}


@pytest.fixture
def config() -> SplitConfig:
    return SplitConfig(total_sections=3, total_tracks=9, format="wav")


@pytest.fixture
def project(tmp_path: Path, label_files: dict[int, list[str]], config: SplitConfig) -> Path:
    """A project directory with label files on disk."""
    labels_dir = tmp_path / config.labels_dir
    labels_dir.mkdir()
    for section, lines in label_files.items():
        (labels_dir / f"section{section}.txt").write_text("\n".join(lines) + "\n")
    return tmp_path


@pytest.fixture
def make_lines():
    return label_lines
