"""Formatting of durations, timestamps and the game's own clock."""

from __future__ import annotations

import time


def time_to_string(timestamp: int) -> str:
    """Format a Unix timestamp in local time as ``YYYY-MM-DD HH:MM``."""
    return time.strftime("%Y-%m-%d %H:%M", time.localtime(timestamp))


def iso_time_to_string(text: str) -> str:
    """Return the date part of an ISO timestamp, or "NA" when empty."""
    if not text:
        return "NA"
    return text.split("T", 1)[0]


def working_time(value: int) -> str:
    """Format a number of seconds as e.g. ``1h 2m 3s``."""
    if value < 0:
        return f"NA ({value})"
    if value == 0:
        return "NA"
    hours, rest = divmod(value, 3600)
    minutes, seconds = divmod(rest, 60)
    parts = []
    if hours > 0:
        parts.append(f"{hours}h")
    if minutes > 0:
        parts.append(f"{minutes}m")
    parts.append(f"{seconds}s")
    return " ".join(parts)


def platformer_time(value: int, show_milliseconds: bool = True) -> str:
    """Format a number of milliseconds as ``HH:MM:SS.mmm`` with leading units dropped."""
    if value < 0:
        return f"NA ({value})"
    if value == 0:
        return "NA"
    milliseconds = value % 1000
    seconds = (value // 1000) % 60
    minutes = (value // 60000) % 60
    hours = value // 3600000
    suffix = f".{milliseconds:03}" if show_milliseconds else ""
    if hours > 0:
        return f"{hours:02}:{minutes:02}:{seconds:02}{suffix}"
    if minutes > 0:
        return f"{minutes:02}:{seconds:02}{suffix}"
    return f"{seconds:02}{suffix}"


def minutes_seconds(value: int) -> str:
    """Format a number of seconds as ``MM:SS``."""
    if value < 0:
        return f"NA ({value})"
    if value == 0:
        return "NA"
    minutes, seconds = divmod(value, 60)
    return f"{minutes:02}:{seconds:02}"


def timestamp_to_human_readable(timestamp: float, now: float | None = None) -> str:
    """Describe how long ago ``timestamp`` was, in its largest whole unit."""
    if now is None:
        now = time.time()
    diff = now - timestamp
    units = (
        ("year", 31536000),
        ("month", 2592000),
        ("day", 86400),
        ("hour", 3600),
        ("minute", 60),
    )
    for name, length in units:
        count = int(diff / length)
        if count > 0:
            return f"{count} {name}{'s' if count > 1 else ''}"
    return "Less than 1 minute"


def full_double_time() -> float:
    """Current Unix time in seconds, at millisecond resolution."""
    seconds, nanoseconds = divmod(time.time_ns(), 1_000_000_000)
    return seconds + (nanoseconds // 1_000_000) / 1000.0


def robtop_time() -> float:
    """Current time as the game keeps it: only the low 20 bits of the seconds."""
    seconds, nanoseconds = divmod(time.time_ns(), 1_000_000_000)
    return (seconds & 0xFFFFF) + (nanoseconds // 1_000_000) / 1000.0