import time

import pytest

from levelinfo.search import CompleteMode, LevelDeath, RangeItem, SearchFilter


def test_disabled_range_accepts_everything():
    item = RangeItem(False, 10, 20)
    assert all(item.accepts(v) for v in (-100, 0, 15, 1000))


@pytest.mark.parametrize(
    "item, value, expected",
    [
        (RangeItem(True, 10, 20), 9, False),
        (RangeItem(True, 10, 20), 10, True),
        (RangeItem(True, 10, 20), 20, True),
        (RangeItem(True, 10, 20), 21, False),
        (RangeItem(True, 0, 20), -50, True),
        (RangeItem(True, 10, 0), 99999, True),
        (RangeItem(True, 0, 0), 42, True),
    ],
)
def test_enabled_range(item, value, expected):
    assert item.accepts(value) is expected


def test_search_filter_defaults():
    search = SearchFilter()
    assert search.coins == RangeItem(False, 1, 3)
    assert search.game_version == RangeItem(False, 0, 22)
    assert search.percentage == RangeItem()
    assert search.difficulty == set()
    assert search.query == ""


def test_search_filter_sets_are_independent():
    first = SearchFilter()
    second = SearchFilter()
    first.difficulty.add(3)
    first.coins.enabled = True
    assert second.difficulty == set()
    assert second.coins.enabled is False


def test_complete_mode_members():
    modes = list(CompleteMode)
    assert len(modes) == 7
    assert modes[0] is CompleteMode.MODE_DEFAULT
    assert modes[-1] is CompleteMode.PERCENTAGE
    assert [CompleteMode(mode.value) for mode in modes] == modes


def test_level_death_round_trip():
    death = LevelDeath(percentage=57, x=1234.5, y=105.0, rotation=90.0, time=1700000000)
    assert LevelDeath.from_dict(death.to_dict()) == death


def test_level_death_dict_keys():
    death = LevelDeath(percentage=3, x=1.0, y=2.0, rotation=3.0, time=4)
    assert set(death.to_dict()) == {"percentage", "x", "y", "rotation", "time"}


def test_level_death_missing_fields_default_to_zero():
    death = LevelDeath.from_dict({})
    assert (death.percentage, death.x, death.y, death.rotation, death.time) == (0, 0.0, 0.0, 0.0, 0)


def test_level_death_bad_field_becomes_zero():
    death = LevelDeath.from_dict({"percentage": "oops", "x": None, "time": 12})
    assert death.percentage == 0
    assert death.x == 0.0
    assert death.time == 12


def test_level_death_default_time_is_now():
    before = int(time.time())
    death = LevelDeath(percentage=1)
    after = int(time.time())
    assert before <= death.time <= after