"""File I/O utilities — atomic YAML writes, label files."""

from __future__ import annotations

import tempfile
from pathlib import Path

from ruamel.yaml import YAML

_yaml = YAML()
_yaml.preserve_quotes = True
_yaml.default_flow_style = False


def read_yaml(path: Path | str) -> dict:
    """Read a YAML mapping; raise ValueError if the document is anything else."""
    path = Path(path)
    with open(path, encoding="utf-8") as f:
        data = _yaml.load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"{path.name}: expected a mapping, got {type(data).__name__}")
    return dict(data)


def write_yaml(path: Path | str, data: dict) -> None:
    """Write a dict to a YAML file atomically (write to temp, then rename)."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    with tempfile.NamedTemporaryFile(
        mode="w",
        dir=path.parent,
        suffix=path.suffix,
        delete=False,
    ) as tmp:
        _yaml.dump(data, tmp)
        tmp_path = Path(tmp.name)

    tmp_path.replace(path)


def read_lines(path: Path | str) -> list[str]:
    """Read a text file as a list of lines without line terminators."""
    with open(path, encoding="utf-8-sig") as f:
        return f.read().splitlines()
