"""Analysis of level strings: play time and the game version they need."""

from __future__ import annotations

import base64
import binascii
import logging
import zlib

from .text import parse_float, parse_int

_log = logging.getLogger(__name__)

_SPEED_PORTALS = frozenset({200, 201, 202, 203, 1334})

_TRAVEL_FOR_PORTAL = {
    200: 251.16008,
    202: 387.42014,
    203: 468.00015,
    1334: 576.00018,
}
_DEFAULT_TRAVEL = 311.58011

_PORTAL_FOR_SPEED = {1: 200, 2: 202, 3: 203, 4: 1334}
_DEFAULT_PORTAL = 201

_VERSION_MAXIMUMS = (
    (43, "1.0"),
    (46, "1.1"),
    (47, "1.2"),
    (84, "1.3"),
    (104, "1.4"),
    (141, "1.5"),
    (199, "1.6"),
    (285, "1.7"),
    (505, "1.8"),
    (744, "1.9"),
    (1329, "2.0"),
    (1911, "2.1"),
    (4539, "2.2"),
)
_VERSION_NAMES = dict(_VERSION_MAXIMUMS)

# Highest object ID of the first game version in which each header key exists.
_HEADER_KEYS = (
    (43, frozenset({"kS1", "kS2", "kS3", "kS4", "kS5", "kS6", "kA1"})),
    (
        285,
        frozenset(
            {
                "kS7", "kS8", "kS9", "kS10", "kS11", "kS12", "kS13", "kS14",
                "kS15", "kS16", "kS17", "kS18", "kS19", "kS20", "kA2", "kA3",
                "kA4", "kA5", "kA6", "kA7",
            }
        ),
    ),
    (505, frozenset({"kA8", "kA9", "kA10", "kA11"})),
    (
        744,
        frozenset(
            {
                "kS29", "kS30", "kS31", "kS32", "kS33", "kS34", "kS35", "kS36",
                "kS37", "kA13", "kA14", "kA15", "kA16",
            }
        ),
    ),
    (1329, frozenset({"kS38", "kS39", "kA17", "kA18"})),
    (
        4539,
        frozenset(
            {
                "kA19", "kA20", "kA21", "kA22", "kA23", "kA24", "kA25", "kA26",
                "kA27", "kA28", "kA29", "kA31", "kA32", "kA33", "kA34", "kA35",
                "kA36", "kA37", "kA38", "kA39", "kA40", "kA41", "kA42", "kA43",
                "kA44",
            }
        ),
    ),
)


def _split(text: str, separator: str) -> list[str]:
    parts = text.split(separator)
    if parts[-1] == "":
        parts.pop()
    return parts


def _travel(portal_id: int) -> float:
    return _TRAVEL_FOR_PORTAL.get(portal_id, _DEFAULT_TRAVEL)


def decode_base64_gzip(data: str) -> str:
    """Decode URL-safe base64 and inflate the gzip or zlib data inside.

    Raises ValueError if the data is not valid base64 or not compressed.
    """
    text = data.strip().replace("+", "-").replace("/", "_")
    text += "=" * (-len(text) % 4)
    try:
        raw = base64.urlsafe_b64decode(text)
        inflated = zlib.decompress(raw, 32 + zlib.MAX_WBITS)
    except (binascii.Error, zlib.error) as error:
        raise ValueError(f"cannot decode level data: {error}") from error
    return inflated.decode("utf-8", errors="replace")


def time_for_level_string(level_string: str) -> float:
    """Estimated play time in seconds of a compressed level string, 0.0 if unreadable."""
    try:
        decoded = decode_base64_gzip(level_string)
    except ValueError as error:
        _log.error("An exception has occured while calculating time for levelString: %s", error)
        return 0.0

    previous_x = 0.0
    previous_portal = 0
    total = 0.0
    max_x = 0.0
    key = ""

    for obj in _split(decoded, ";"):
        object_id = 0
        x = 0.0
        checked = False
        for index, token in enumerate(_split(obj, ",")):
            if index % 2 == 0:
                key = token
            elif key == "1":
                object_id = parse_int(token)
            elif key == "2":
                x = parse_float(token)
            elif key == "13":
                checked = parse_int(token) != 0
            elif key == "kA4":
                previous_portal = _PORTAL_FOR_SPEED.get(parse_int(token), _DEFAULT_PORTAL)
            if x != 0 and object_id != 0 and checked:
                break

        max_x = max(max_x, x)
        if not checked or object_id not in _SPEED_PORTALS:
            continue

        total += (x - previous_x) / _travel(previous_portal)
        previous_portal = object_id
        previous_x = x

    total += (max_x - previous_x) / _travel(previous_portal)
    return total


def max_object_id(level_string: str) -> int:
    """Highest object ID used in a decompressed level string."""
    highest = 0
    key = ""
    for obj in _split(level_string, ";"):
        object_id = 0
        for index, token in enumerate(_split(obj, ",")):
            if index % 2 == 0:
                key = token
            elif key == "1":
                object_id = parse_int(token)
            if object_id != 0:
                break
        highest = max(highest, object_id)
    return highest


def game_version_object_for_header(level_string: str) -> int:
    """Highest object ID of the earliest game version whose header keys the level uses."""
    header = _split(level_string, ";")
    if not header:
        return 0
    keys = set(_split(header[0], ",")[0::2])
    for limit, unique_keys in reversed(_HEADER_KEYS):
        if keys & unique_keys:
            return limit
    return 0


def game_version_for_level_string(level_string: str) -> str:
    """Earliest game version a decompressed level string can have been made in."""
    highest = max_object_id(level_string)
    header_object = game_version_object_for_header(level_string)
    for limit, name in _VERSION_MAXIMUMS:
        if highest <= limit:
            if header_object > limit and header_object in _VERSION_NAMES:
                return f"{name} / {_VERSION_NAMES[header_object]}"
            return name
    return "2.3+"