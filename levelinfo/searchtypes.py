"""Kinds of level searches and how the browser treats each of them."""

from __future__ import annotations

from enum import IntEnum


class SearchType(IntEnum):
    """The kind of list a level browser is showing."""

    SEARCH = 0
    DOWNLOADED = 1
    MOST_LIKED = 2
    TRENDING = 3
    RECENT = 4
    USERS_LEVELS = 5
    FEATURED = 6
    MAGIC = 7
    SENDS = 8
    MAP_PACK = 9
    MAP_PACK_ON_CLICK = 10
    AWARDED = 11
    FOLLOWED = 12
    FRIENDS = 13
    USERS = 14
    LIKED_GDW = 15
    HALL_OF_FAME = 16
    FEATURED_GDW = 17
    SIMILAR = 18
    TYPE_19 = 19
    TYPE_20 = 20
    DAILY_SAFE = 21
    WEEKLY_SAFE = 22
    EVENT_SAFE = 23
    REPORTED = 24
    LEVEL_LISTS_ON_CLICK = 25
    TYPE_26 = 26
    SENT = 27
    FEATURED_LITE = 28
    BONUS = 29
    MY_LEVELS = 98
    SAVED_LEVELS = 99
    FAVOURITE_LEVELS = 100
    SMART_TEMPLATES = 101
    MY_LISTS = 102
    FAVOURITE_LISTS = 103


_LOCAL = frozenset(
    {
        SearchType.MY_LEVELS,
        SearchType.SAVED_LEVELS,
        SearchType.FAVOURITE_LEVELS,
        SearchType.SMART_TEMPLATES,
        SearchType.MY_LISTS,
        SearchType.FAVOURITE_LISTS,
    }
)

_FALSE_TOTAL = frozenset(
    {
        SearchType.TYPE_19,
        SearchType.FEATURED,
        SearchType.HALL_OF_FAME,
    }
)

_STAR_USELESS = _LOCAL | frozenset(
    {
        SearchType.FEATURED,
        SearchType.MAGIC,
        SearchType.MAP_PACK,
        SearchType.MAP_PACK_ON_CLICK,
        SearchType.AWARDED,
        SearchType.USERS,
        SearchType.HALL_OF_FAME,
        SearchType.FEATURED_GDW,
        SearchType.SIMILAR,
        SearchType.DAILY_SAFE,
        SearchType.WEEKLY_SAFE,
        SearchType.EVENT_SAFE,
        SearchType.FEATURED_LITE,
        SearchType.BONUS,
    }
)

_ADVANCED = frozenset(
    {
        SearchType.SEARCH,
        SearchType.DOWNLOADED,
        SearchType.MOST_LIKED,
        SearchType.TRENDING,
        SearchType.RECENT,
        SearchType.AWARDED,
        SearchType.FOLLOWED,
        SearchType.FRIENDS,
    }
)

_LEVELS_PER_PAGE_LOW = 10
_LEVELS_PER_PAGE_HIGH = 20


def is_local(search_type: SearchType) -> bool:
    """True for lists kept on this device rather than fetched from the server."""
    return search_type in _LOCAL


def is_false_total(search_type: SearchType) -> bool:
    """True where the server reports a total that does not match the real count."""
    return search_type in _FALSE_TOTAL


def is_star_useless(search_type: SearchType) -> bool:
    """True where filtering by star rating makes no difference."""
    return search_type in _STAR_USELESS


def is_advanced_enabled(search_type: SearchType) -> bool:
    """True where the advanced search options can be applied."""
    return search_type in _ADVANCED


def levels_per_page(search_type: SearchType, high_density: bool = False) -> int:
    """Number of levels on one page; local lists show more when ``high_density`` is on."""
    if is_local(search_type) and high_density:
        return _LEVELS_PER_PAGE_HIGH
    return _LEVELS_PER_PAGE_LOW