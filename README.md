# levelinfo

Small helpers with no dependencies for working with Geometry Dash level data.
They format level metadata and times, read level strings, and filter levels
against a search filter and the player's saved progress.

## Installation

```
pip install levelinfo
```

## Modules

- `levelinfo.search`: the `SearchFilter` dataclass with every search
  criterion, `RangeItem` (an optional inclusive range where a bound of 0 is
  open, checked with `accepts`), `LevelDeath` (with `to_dict` and
  `from_dict`) and the `CompleteMode` enumeration.
- `levelinfo.timeutils`: `working_time` (seconds as `1h 2m 3s`),
  `platformer_time` (milliseconds as `HH:MM:SS.mmm`), `minutes_seconds`,
  `time_to_string`, `iso_time_to_string`, `timestamp_to_human_readable`,
  `robtop_time` and `full_double_time`.
- `levelinfo.metadata`: display helpers `game_version_name`,
  `password_string`, `difficulty_icon`, `demon_difficulty_icon`,
  `string_date`, `add_plus`, `zero_if_na`, `bool_string` and
  `is_robtop_style_date`.
- `levelinfo.progress`: `printable_progress` turns a comma-separated list of
  personal-best increments into a line such as `"10% 30% 60% "`.
- `levelinfo.searchtypes`: the `SearchType` enumeration and the predicates
  `is_local`, `is_false_total`, `is_star_useless`, `is_advanced_enabled`,
  plus `levels_per_page`.
- `levelinfo.text`: `rank_icon`, `file_size`, `fix_color_crashes`,
  `fix_null_byte_crash`, `response_to_dict`, `parse_int`, `parse_float`,
  `number_comma`, `random_number`, `icon_type_to_unlock_type` and
  `is_newgrounds_url`.
- `levelinfo.levelstring`: `decode_base64_gzip`, `time_for_level_string`
  (estimated play time of a compressed level string), `max_object_id`,
  `game_version_object_for_header` and `game_version_for_level_string`.
- `levelinfo.filtering`: the `Level` dataclass and `level_difficulty`,
  `demon_difficulty`, `has_all_coins`, `progress_matches`, `level_matches`
  and `completed_in_star_range`.

## Example

```python
from levelinfo.timeutils import working_time, platformer_time
from levelinfo.metadata import password_string
from levelinfo.levelstring import game_version_for_level_string

working_time(3725)          # "1h 2m 5s"
platformer_time(61500)      # "01:01.500"
password_string(1)          # "Free Copy"
game_version_for_level_string("kS1,0;1,1,2,15;")   # "1.0"
```

## Filtering levels

Saved progress is passed in as a mapping from level ID to `Level`, and
collected coins as a collection of `(level_id, coin_number)` pairs, with coin
numbers starting at 1.

```python
from levelinfo.filtering import Level, level_matches
from levelinfo.search import SearchFilter

search = SearchFilter(query="jump", star=True)
level = Level(level_id=128, level_name="Jumper", stars=5)
level_matches(level, search, saved_levels={}, collected_keys=set())   # True
```

The name match ignores ASCII case.

## What it does not do

The package works only on values it is given. It does not read the game's
save files, talk to the game servers, keep settings, or draw any interface;
loading levels, progress and coin records is left to the caller.

## Running the tests

```
pip install -e ".[test]"
pytest
```