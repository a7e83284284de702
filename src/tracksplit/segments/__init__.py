"""Segment specifications and output formats."""
