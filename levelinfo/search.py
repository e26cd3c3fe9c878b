"""Search filter settings, completion modes and recorded level deaths."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Mapping


class CompleteMode(IntEnum):
    """Which kind of completion a level list is filtered by."""

    MODE_DEFAULT = 0
    COMPLETED = 1
    COMPLETED_21 = 2
    COMPLETED_211 = 3
    ALL_COINS = 4
    NO_COINS = 5
    PERCENTAGE = 6


@dataclass
class RangeItem:
    """An optional inclusive range; a bound of 0 means that side is open."""

    enabled: bool = False
    minimum: int = 0
    maximum: int = 0

    def accepts(self, value: int) -> bool:
        """Return True if ``value`` passes this range (always, when disabled)."""
        if not self.enabled:
            return True
        if self.minimum != 0 and self.minimum > value:
            return False
        if self.maximum != 0 and self.maximum < value:
            return False
        return True


@dataclass
class SearchFilter:
    """Every criterion a level search can be narrowed by."""

    difficulty: set[int] = field(default_factory=set)
    length: set[int] = field(default_factory=set)
    demon_difficulty: set[int] = field(default_factory=set)
    query: str = ""
    star: bool = False
    no_star: bool = False
    uncompleted: bool = False
    uncompleted_orbs: bool = False
    uncompleted_leaderboard: bool = False
    uncompleted_coins: bool = False
    completed: bool = False
    completed_orbs: bool = False
    completed_leaderboard: bool = False
    completed_coins: bool = False
    percentage: RangeItem = field(default_factory=RangeItem)
    percentage_orbs: RangeItem = field(default_factory=RangeItem)
    percentage_leaderboard: RangeItem = field(default_factory=RangeItem)
    featured: bool = False
    original: bool = False
    two_player: bool = False
    coins: RangeItem = field(default_factory=lambda: RangeItem(False, 1, 3))
    no_coins: bool = False
    verified_coins: bool = False
    unverified_coins: bool = False
    epic: bool = False
    legendary: bool = False
    mythic: bool = False
    folder: int = 0
    song: bool = False
    song_custom: bool = False
    song_id: int = 0
    copied: bool = False
    downloaded: bool = False
    ldm: bool = False
    id_range: RangeItem = field(default_factory=RangeItem)
    copyable: bool = False
    free_copy: bool = False
    unfeatured: bool = False
    unepic: bool = False
    favorite: bool = False
    star_range: RangeItem = field(default_factory=RangeItem)
    game_version: RangeItem = field(default_factory=lambda: RangeItem(False, 0, 22))


def _number(data: Mapping[str, Any], key: str, kind: type) -> Any:
    value = data.get(key, 0)
    if isinstance(value, bool):
        return kind(0)
    try:
        return kind(value)
    except (TypeError, ValueError, OverflowError):
        return kind(0)


@dataclass
class LevelDeath:
    """A single death: where it happened and when."""

    percentage: int = 0
    x: float = 0.0
    y: float = 0.0
    rotation: float = 0.0
    time: int = field(default_factory=lambda: int(time.time()))

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-ready mapping of this death."""
        return {
            "percentage": self.percentage,
            "x": self.x,
            "y": self.y,
            "rotation": self.rotation,
            "time": self.time,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "LevelDeath":
        """Build a death from a mapping; missing or bad fields become 0."""
        return cls(
            percentage=_number(data, "percentage", int),
            x=_number(data, "x", float),
            y=_number(data, "y", float),
            rotation=_number(data, "rotation", float),
            time=_number(data, "time", int),
        )