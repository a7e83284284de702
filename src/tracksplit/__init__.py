"""tracksplit — split per-section course recordings into per-track files."""

__version__ = "0.1.0"
