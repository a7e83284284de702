"""Output formats and their FFmpeg codec options."""

from __future__ import annotations

from dataclasses import dataclass

from tracksplit.errors import ConfigError


@dataclass(frozen=True)
class FormatSpec:
    """File extension and encoder arguments for one output format."""

    name: str
    extension: str
    codec_args: tuple[str, ...]


FORMATS: dict[str, FormatSpec] = {
    # LAME VBR, best quality
    "mp3": FormatSpec("mp3", "mp3", ("-c:a", "libmp3lame", "-q:a", "0")),
    "aac": FormatSpec("aac", "m4a", ("-c:a", "aac", "-b:a", "256k")),
    "wav": FormatSpec("wav", "wav", ("-c:a", "pcm_s16le")),
}


def get_format(name: str) -> FormatSpec:
    """Look up a format by name."""
    try:
        return FORMATS[name]
    except KeyError:
        raise ConfigError(
            f"Unknown format '{name}' (expected one of: {', '.join(FORMATS)})"
        ) from None
