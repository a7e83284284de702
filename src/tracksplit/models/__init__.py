"""Pydantic data models for tracksplit."""

from tracksplit.models.config import SplitConfig
from tracksplit.models.track import SegmentSpec, TrackDatabase, TrackRecord

__all__ = [
    "SplitConfig",
    "SegmentSpec",
    "TrackDatabase",
    "TrackRecord",
]
