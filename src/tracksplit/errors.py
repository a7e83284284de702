"""Exception hierarchy for tracksplit."""

from __future__ import annotations


class TrackSplitError(Exception):
    """Base class for all tracksplit errors."""


class ConfigError(TrackSplitError):
    """Raised when the configuration or a format name is invalid."""


class ValidationError(TrackSplitError):
    """Raised when the label data cannot produce a valid track database."""


class LabelFormatError(ValidationError):
    """Raised for a malformed label file line."""

    def __init__(self, section: int, line_number: int, reason: str):
        self.section = section
        self.line_number = line_number
        super().__init__(f"Section {section}, line {line_number}: {reason}")


class DuplicateTrackError(ValidationError):
    """Raised when a track number is defined more than once."""

    def __init__(self, track_number: int, first_section: int, second_section: int):
        self.track_number = track_number
        self.first_section = first_section
        self.second_section = second_section
        super().__init__(
            f"Track {track_number} defined twice "
            f"(section {first_section} and section {second_section})"
        )


class MissingTrackError(ValidationError):
    """Raised when the completed database has gaps."""

    def __init__(self, missing: list[int]):
        self.missing = missing
        self.track_number = missing[0]
        more = f" (and {len(missing) - 1} more)" if len(missing) > 1 else ""
        super().__init__(f"Track {missing[0]} missing from label data{more}")


class InputError(TrackSplitError):
    """Raised when a source file cannot be associated with a section."""


class ExecutionError(TrackSplitError):
    """Raised when an external command fails."""
