"""Tests for loading and saving tracksplit.yaml."""

from __future__ import annotations

import pytest

from tracksplit.errors import ConfigError
from tracksplit.models.config import SplitConfig, load_config, save_config


def test_round_trip(tmp_path):
    path = tmp_path / "tracksplit.yaml"
    config = SplitConfig(total_sections=4, total_tracks=120, format="aac", labels_dir="lbl")

    save_config(path, config)

    assert load_config(path) == config


def test_defaults():
    config = SplitConfig(total_sections=1, total_tracks=1)

    assert config.format == "mp3"
    assert config.labels_dir == "labels"
    assert config.output_dir == "output"


def test_label_path(tmp_path):
    config = SplitConfig(total_sections=2, total_tracks=2, label_pattern="CD{section:02d}.txt")

    assert config.label_path(tmp_path, 2) == tmp_path / "labels" / "CD02.txt"


def test_missing_config(tmp_path):
    with pytest.raises(ConfigError, match="not found"):
        load_config(tmp_path / "tracksplit.yaml")


@pytest.mark.parametrize(
    "body",
    [
        "total_sections: 2\ntotal_tracks: 5\nformat: flac\n",
        "total_sections: 0\ntotal_tracks: 5\n",
        "total_tracks: 5\n",
        "total_sections: 2\ntotal_tracks: 5\nlabel_pattern: labels.txt\n",
        "total_sections: 2\ntotal_tracks: 5\nlabel_pattern: \"section{section}{x}.txt\"\n",
        "total_sections: 2\ntotal_tracks: 5\nlabel_pattern: \"section{section\"\n",
        "total_sections: [1\ntotal_tracks: 5\n",
        "- a\n- b\n",
        "just a string\n",
    ],
)
def test_invalid_config(tmp_path, body):
    path = tmp_path / "tracksplit.yaml"
    path.write_text(body)

    with pytest.raises(ConfigError):
        load_config(path)


def test_config_that_is_not_utf8(tmp_path):
    path = tmp_path / "tracksplit.yaml"
    path.write_bytes(b"total_sections: 2\ntotal_tracks: \xff\xfe\n")

    with pytest.raises(ConfigError):
        load_config(path)


@pytest.mark.parametrize("pattern", ["section{section}{x}.txt", "CD{0}.txt", "{{section}}.txt"])
def test_label_pattern_must_format_with_section(pattern):
    with pytest.raises(ValueError, match="label_pattern"):
        SplitConfig(total_sections=1, total_tracks=1, label_pattern=pattern)
