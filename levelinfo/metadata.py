"""Human-readable descriptions of level metadata."""

from __future__ import annotations

_TIME_WORDS = ("second", "minute", "hour", "day", "week", "month", "year")

_DIFFICULTY_ICONS = {
    1: "difficulty_auto_btn_001.png",
    2: "difficulty_01_btn_001.png",
    3: "difficulty_02_btn_001.png",
    4: "difficulty_03_btn_001.png",
    5: "difficulty_03_btn_001.png",
    6: "difficulty_04_btn_001.png",
    7: "difficulty_04_btn_001.png",
    8: "difficulty_05_btn_001.png",
    9: "difficulty_05_btn_001.png",
    10: "difficulty_06_btn_001.png",
}

_DEMON_ICONS = {
    3: "difficulty_07_btn_001.png",
    4: "difficulty_08_btn_001.png",
    5: "difficulty_09_btn_001.png",
    6: "difficulty_10_btn_001.png",
}


def is_robtop_style_date(date: str) -> bool:
    """True if ``date`` is a relative date such as "3 days"."""
    return any(word in date for word in _TIME_WORDS)


def game_version_name(version: int) -> str:
    """Name of the game version a level was uploaded with."""
    if version < 1 or version > 99:
        return "NA"
    if version == 10:
        return "1.7"
    if version == 11:
        return "Early 1.8"
    if version > 17:
        return f"{version / 10.0:.1f}"
    if 0 < version < 10:
        return f"1.{version - 1}"
    return f"Unknown ({version})"


def string_date(date: str) -> str:
    """Display form of an upload date; relative dates get " ago"."""
    if date == "":
        return "NA"
    return f"{date}{' ago' if is_robtop_style_date(date) else ''}"


def difficulty_icon(stars: int) -> str:
    """Sprite name of the difficulty face for a star rating."""
    return _DIFFICULTY_ICONS.get(stars, "difficulty_00_btn_001.png")


def demon_difficulty_icon(demon_difficulty: int) -> str:
    """Sprite name of the face for a demon difficulty."""
    return _DEMON_ICONS.get(demon_difficulty, "difficulty_06_btn_001.png")


def password_string(password: int) -> str:
    """Display form of a level's copy password."""
    if password == 0:
        return "NA"
    if password == 1:
        return "Free Copy"
    if 10000 <= password <= 19999:
        return str(password - 10000)
    if 1000000 <= password <= 1999999:
        return str(password - 1000000)
    return f"Invalid ({password})"


def zero_if_na(value: int) -> str:
    """The number as text, or "NA" when it is zero."""
    return "NA" if value == 0 else str(value)


def add_plus(date: str) -> str:
    """Mark a relative date as a lower bound: "5 days" becomes "5+ days"."""
    if not is_robtop_style_date(date):
        return date
    index = date.find(" ")
    if index == -1:
        return date
    return f"{date[:index]}+{date[index:]}"


def bool_string(value: object) -> str:
    """Text form of a truth value, either True or False."""
    return str(bool(value))