"""Progress history of a level."""

from __future__ import annotations

import re

_LEADING_INT = re.compile(r"-?\d+")
_INT_MIN, _INT_MAX = -(2**31), 2**31 - 1


def _to_int(text: str) -> int:
    match = _LEADING_INT.match(text)
    if not match:
        return 0
    value = int(match.group())
    return value if _INT_MIN <= value <= _INT_MAX else 0


def printable_progress(personal_bests: str, percentage: int) -> str:
    """List the percentages reached, oldest first, from comma-separated best increments.

    ``personal_bests`` holds how much each new best added; ``percentage`` is the
    current best. Each entry ends with a space, as in "10% 30% 60% ".
    """
    parts = personal_bests.split(",")
    if parts[-1] == "":
        parts.pop()
    entries: list[str] = []
    for increment in reversed([_to_int(part) for part in parts]):
        entries.append(f"{percentage}% ")
        percentage -= increment
    return "".join(reversed(entries))