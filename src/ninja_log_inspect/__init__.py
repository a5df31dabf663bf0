"""Inspect ninja build logs: per-step duration, output name and timestamp."""

__version__ = "0.1.0"
