"""Helpers for inspecting, filtering and describing Geometry Dash levels."""

__version__ = "0.1.0"

__all__ = [
    "filtering",
    "levelstring",
    "metadata",
    "progress",
    "search",
    "searchtypes",
    "text",
    "timeutils",
]