"""Configuration model for a tracksplit project."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field, field_validator
from ruamel.yaml.error import YAMLError

from tracksplit.errors import ConfigError
from tracksplit.segments.formats import FORMATS
from tracksplit.utils.io import read_yaml, write_yaml

CONFIG_FILENAME = "tracksplit.yaml"


class SplitConfig(BaseModel):
    """Where the label files live and what the course looks like."""

    labels_dir: str = "labels"
    label_pattern: str = "section{section}.txt"
    total_sections: int = Field(ge=1)
    total_tracks: int = Field(ge=1)
    output_dir: str = "output"
    format: str = "mp3"  # mp3 | aac | wav

    @field_validator("format")
    @classmethod
    def _known_format(cls, value: str) -> str:
        if value not in FORMATS:
            raise ValueError(
                f"Unknown format '{value}' (expected one of: {', '.join(FORMATS)})"
            )
        return value

    @field_validator("label_pattern")
    @classmethod
    def _has_section_field(cls, value: str) -> str:
        try:
            first, second = value.format(section=1), value.format(section=2)
        except (AttributeError, IndexError, KeyError, TypeError, ValueError) as e:
            raise ValueError(f"label_pattern is not a valid pattern: {e!r}") from e
        if first == second:
            raise ValueError("label_pattern must contain a {section} field")
        return value

    def label_path(self, root: Path, section: int) -> Path:
        return root / self.labels_dir / self.label_pattern.format(section=section)


def load_config(path: Path) -> SplitConfig:
    """Load and validate a tracksplit.yaml file.

    Unparseable YAML, a non-mapping document and field errors all raise
    ConfigError.
    """
    if not path.exists():
        raise ConfigError(f"Config not found: {path}")
    try:
        return SplitConfig.model_validate(read_yaml(path))
    except (YAMLError, ValueError) as e:
        raise ConfigError(f"Invalid config {path.name}: {e}") from e


def save_config(path: Path, config: SplitConfig) -> None:
    """Save the config atomically."""
    write_yaml(path, config.model_dump(mode="json"))
