"""Attach user-supplied source recordings to sections by file name."""

from __future__ import annotations

import re
from collections.abc import Sequence
from pathlib import Path

from tracksplit.errors import InputError
from tracksplit.models.track import TrackDatabase
from tracksplit.utils.progress import log_step, log_warning

_SECTION_PREFIX = re.compile(r"^([0-9]+)")


def section_from_filename(path: Path | str) -> int:
    """Return the section number encoded as the leading digits of a file name."""
    name = Path(path).name
    match = _SECTION_PREFIX.match(name)
    if not match:
        raise InputError(
            f"Source file name must start with its section number: {name}"
        )
    return int(match.group(1))


def associate_sources(
    db: TrackDatabase, source_files: Sequence[Path | str]
) -> TrackDatabase:
    """Set ``source_path`` on every track of each source file's section.

    A later file for the same section replaces the earlier one.
    """
    seen: dict[int, str] = {}

    for source in source_files:
        section = section_from_filename(source)
        source_path = str(source)

        if section in seen:
            log_warning(
                f"Section {section}: {Path(source_path).name} replaces "
                f"{Path(seen[section]).name}"
            )
        seen[section] = source_path

        records = db.tracks_in_section(section)
        if not records:
            log_warning(f"{Path(source_path).name}: no tracks in section {section}")
            continue

        for record in records:
            record.source_path = source_path
        log_step("Sources", f"Section {section} ← {Path(source_path).name} ({len(records)} tracks)")

    return db
