"""Read per-section label files from disk."""

from __future__ import annotations

from pathlib import Path

from tracksplit.errors import ValidationError
from tracksplit.models.config import SplitConfig
from tracksplit.utils.io import read_lines
from tracksplit.utils.progress import log_step


def read_label_files(root: Path, config: SplitConfig) -> dict[int, list[str]]:
    """Return the raw lines of every section's label file, keyed by section."""
    label_files: dict[int, list[str]] = {}

    for section in range(1, config.total_sections + 1):
        path = config.label_path(root, section)
        if not path.exists():
            raise FileNotFoundError(f"Label file not found: {path} (section {section})")
        try:
            label_files[section] = read_lines(path)
        except UnicodeDecodeError as e:
            raise ValidationError(
                f"Label file for section {section} is not UTF-8 text: {path} ({e.reason})"
            ) from e

    log_step("Labels", f"Read {len(label_files)} label files from {config.labels_dir}/")
    return label_files
