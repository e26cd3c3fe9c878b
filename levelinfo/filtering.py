"""Matching levels against search filters and the player's saved progress."""

from __future__ import annotations

from collections.abc import Collection, Iterable, Mapping
from dataclasses import dataclass

from .search import SearchFilter

_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)


@dataclass
class Level:
    """The parts of a level that searches and progress checks look at."""

    level_id: int = 0
    level_name: str = ""
    demon: int = 0
    auto_level: bool = False
    ratings: int = 0
    ratings_sum: int = 0
    demon_difficulty: int = 0
    level_length: int = 0
    stars: int = 0
    featured: int = 0
    original_level: int = 0
    two_player_mode: bool = False
    coins: int = 0
    coins_verified: bool = False
    is_epic: int = 0
    audio_track: int = 0
    song_id: int = 0
    game_version: int = 0
    normal_percent: int = 0
    orb_completion: int = 0
    new_normal_percent2: int = 0
    level_string: str = ""
    favorited: bool = False
    level_folder: int = 0
    platformer: bool = False


def _truncating_div(numerator: int, denominator: int) -> int:
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator >= 0) == (denominator >= 0) else -quotient


def level_difficulty(level: Level) -> int:
    """Difficulty as a number: 6 for demons, -1 for auto, else the average rating."""
    if level.demon != 0:
        return 6
    if level.auto_level:
        return -1
    if level.ratings == 0:
        return 0
    return _truncating_div(level.ratings_sum, level.ratings)


def demon_difficulty(level: Level) -> int:
    """Demon difficulty on the search scale (0 easy to 4 extreme, 2 for hard)."""
    if level.demon_difficulty >= 5:
        return level.demon_difficulty - 2
    if level.demon_difficulty >= 3:
        return level.demon_difficulty - 3
    return 2


def has_all_coins(level: Level, collected_keys: Collection[tuple[int, int]]) -> bool:
    """True if every coin of the level is among ``collected_keys``.

    ``collected_keys`` holds ``(level_id, coin_number)`` pairs, coin numbers
    starting at 1. A level without coins counts as having them all.
    """
    return all(
        (level.level_id, number) in collected_keys
        for number in range(1, level.coins + 1)
    )


def progress_matches(
    level: Level, search: SearchFilter, saved_levels: Mapping[int, Level]
) -> bool:
    """True if the player's saved progress on ``level`` passes the filter."""
    if not search.id_range.accepts(level.level_id):
        return False

    saved = saved_levels.get(level.level_id)

    if search.uncompleted and saved is not None and saved.normal_percent == 100:
        return False
    if search.uncompleted_orbs and (saved is None or saved.orb_completion == 100):
        return False
    if search.uncompleted_leaderboard and (
        saved is None or saved.new_normal_percent2 == 100
    ):
        return False

    if search.completed and (saved is None or saved.normal_percent != 100):
        return False
    if search.completed_orbs and (saved is None or saved.orb_completion != 100):
        return False
    if search.completed_leaderboard and (
        saved is None or saved.new_normal_percent2 != 100
    ):
        return False

    if not search.percentage.accepts(saved.normal_percent if saved else 0):
        return False
    if not search.percentage_orbs.accepts(saved.orb_completion if saved else 0):
        return False
    if not search.percentage_leaderboard.accepts(
        saved.new_normal_percent2 if saved else 0
    ):
        return False

    if search.downloaded and (saved is None or not saved.level_string):
        return False
    if search.favorite and (saved is None or not saved.favorited):
        return False
    if search.folder > 0 and (saved is None or saved.level_folder != search.folder):
        return False

    return True


def level_matches(
    level: Level,
    search: SearchFilter,
    saved_levels: Mapping[int, Level],
    collected_keys: Collection[tuple[int, int]],
) -> bool:
    """True if ``level`` passes every criterion of ``search``."""
    if search.difficulty and level_difficulty(level) not in search.difficulty:
        return False
    if search.length and level.level_length not in search.length:
        return False
    if (
        search.demon_difficulty
        and level.demon != 0
        and 6 in search.difficulty
        and demon_difficulty(level) not in search.demon_difficulty
    ):
        return False

    query = search.query.translate(_ASCII_LOWER)
    name = level.level_name.translate(_ASCII_LOWER)
    if query not in name:
        return False

    if search.star and level.stars == 0:
        return False
    if search.no_star and level.stars != 0:
        return False
    if search.featured and level.featured <= 0:
        return False
    if search.original and level.original_level > 0:
        return False
    if search.two_player and not level.two_player_mode:
        return False
    if not search.coins.accepts(level.coins):
        return False
    if search.no_coins and level.coins != 0:
        return False
    if search.unverified_coins and level.coins_verified:
        return False
    if search.verified_coins and not level.coins_verified:
        return False
    if search.epic and level.is_epic != 1:
        return False
    if search.legendary and level.is_epic != 2:
        return False
    if search.mythic and level.is_epic != 3:
        return False
    if search.song:
        if not search.song_custom and level.audio_track != search.song_id:
            return False
        if search.song_custom and level.song_id != search.song_id:
            return False
    if search.copied and level.original_level <= 0:
        return False
    if search.unfeatured and level.featured > 0:
        return False
    if search.unepic and level.is_epic:
        return False
    if not search.star_range.accepts(level.stars):
        return False
    if not search.game_version.accepts(level.game_version):
        return False

    if not progress_matches(level, search, saved_levels):
        return False

    all_coins = has_all_coins(level, collected_keys)
    if search.completed_coins and (not all_coins or level.coins == 0):
        return False
    if search.uncompleted_coins and (all_coins or level.coins == 0):
        return False

    return True


def completed_in_star_range(
    levels: Iterable[Level], minimum: int, maximum: int, platformer: bool
) -> list[Level]:
    """Completed levels rated ``minimum`` to ``maximum`` stars of the given kind."""
    return [
        level
        for level in levels
        if level.normal_percent >= 100
        and minimum <= level.stars <= maximum
        and level.platformer == platformer
    ]