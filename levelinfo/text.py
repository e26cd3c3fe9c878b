"""Small text helpers: icons, sizes, markup fixes and lenient number parsing."""

from __future__ import annotations

import math
import random
import re

_INT_MIN, _INT_MAX = -(2**31), 2**31 - 1
_FLOAT_MAX = 3.4028234663852886e38

_LEADING_INT = re.compile(r"-?\d+")
_LEADING_FLOAT = re.compile(
    r"-?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)

_RANK_LIMITS = (
    (10, "rankIcon_top10_001.png"),
    (50, "rankIcon_top50_001.png"),
    (100, "rankIcon_top100_001.png"),
    (200, "rankIcon_top200_001.png"),
    (500, "rankIcon_top500_001.png"),
)

_UNLOCK_TYPES = {
    0: 1,
    1: 4,
    2: 5,
    3: 6,
    4: 7,
    5: 8,
    6: 9,
    7: 13,
    8: 14,
    9: 11,
    10: 10,
    11: 12,
    12: 15,
}


def _split(text: str, separator: str) -> list[str]:
    parts = text.split(separator)
    if parts[-1] == "":
        parts.pop()
    return parts


def rank_icon(position: int) -> str:
    """Sprite name of the leaderboard rank icon for a global position."""
    if position == 1:
        return "rankIcon_1_001.png"
    if position > 1000 or position <= 0:
        return "rankIcon_all_001.png"
    for limit, icon in _RANK_LIMITS:
        if position <= limit:
            return icon
    return "rankIcon_top1000_001.png"


def file_size(num_bytes: int) -> str:
    """Human-readable size with four significant digits, e.g. ``1.465KB``."""
    if num_bytes > 1024 * 1024:
        return f"{num_bytes / (1024 * 1024):.4g}MB"
    if num_bytes > 1024:
        return f"{num_bytes / 1024:.4g}KB"
    return f"{num_bytes}B"


def fix_color_crashes(text: str) -> str:
    """Close every colour tag that is opened but never closed."""
    unclosed = text.count("<c") - text.count("</c>")
    return text + "  </c>" * max(unclosed, 0)


def fix_null_byte_crash(text: str) -> str:
    """Replace NUL characters with spaces."""
    return text.replace("\0", " ")


def response_to_dict(response: str) -> dict[str, str]:
    """Turn a ``key:value:key:value`` server response into a dictionary."""
    tokens = _split(response, ":")
    return dict(zip(tokens[0::2], tokens[1::2]))


def parse_int(text: str) -> int:
    """Leading 32-bit integer of ``text``, or 0 when there is none or it overflows."""
    match = _LEADING_INT.match(text)
    if not match:
        return 0
    value = int(match.group())
    return value if _INT_MIN <= value <= _INT_MAX else 0


def parse_float(text: str) -> float:
    """Leading floating-point number of ``text``, or 0.0 when there is none."""
    match = _LEADING_FLOAT.match(text)
    if not match:
        return 0.0
    try:
        value = float(match.group())
    except (ValueError, OverflowError):
        return 0.0
    if math.isfinite(value) and abs(value) > _FLOAT_MAX:
        return 0.0
    return value


def number_comma(number: int) -> str:
    """The number with thousands separated by commas."""
    return f"{number:,}"


def random_number(start: int, end: int) -> int:
    """A random integer between ``start`` and ``end`` inclusive."""
    return random.SystemRandom().randint(start, end)


def icon_type_to_unlock_type(icon_type: int) -> int:
    """Unlock type that corresponds to an icon type; 0 for unknown types."""
    return _UNLOCK_TYPES.get(int(icon_type), 0)


def is_newgrounds_url(url: str) -> bool:
    """True if a song URL points at the Newgrounds audio server."""
    return "://audio.ngfiles.com/" in url