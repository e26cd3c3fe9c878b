import re

import pytest

from levelinfo.text import (
    file_size,
    fix_color_crashes,
    fix_null_byte_crash,
    icon_type_to_unlock_type,
    is_newgrounds_url,
    number_comma,
    parse_float,
    parse_int,
    random_number,
    rank_icon,
    response_to_dict,
)


@pytest.mark.parametrize(
    "position, icon",
    [
        (1, "rankIcon_1_001.png"),
        (0, "rankIcon_all_001.png"),
        (-5, "rankIcon_all_001.png"),
        (1001, "rankIcon_all_001.png"),
        (2, "rankIcon_top10_001.png"),
        (10, "rankIcon_top10_001.png"),
        (11, "rankIcon_top50_001.png"),
        (100, "rankIcon_top100_001.png"),
        (200, "rankIcon_top200_001.png"),
        (500, "rankIcon_top500_001.png"),
        (501, "rankIcon_top1000_001.png"),
        (1000, "rankIcon_top1000_001.png"),
    ],
)
def test_rank_icon(position, icon):
    assert rank_icon(position) == icon


def test_file_size_bytes_up_to_boundary():
    assert file_size(500) == "500B"
    assert file_size(1024) == "1024B"


def test_file_size_units():
    assert file_size(2048).endswith("KB")
    assert file_size(1024 * 1024).endswith("KB")
    assert file_size(5 * 1024 * 1024).endswith("MB")


def test_file_size_four_significant_digits():
    value = file_size(1500)
    digits = re.sub(r"\D", "", value)
    assert len(digits) <= 4
    assert value.endswith("KB")


def test_fix_color_crashes_closes_open_tags():
    assert fix_color_crashes("<cg>hi") == "<cg>hi  </c>"
    assert fix_color_crashes("<cg>a<cr>b</c>").count("</c>") == 2


def test_fix_color_crashes_leaves_balanced_text():
    text = "<cg>hi</c> there"
    assert fix_color_crashes(text) == text
    assert fix_color_crashes("a</c></c>") == "a</c></c>"


def test_fix_null_byte_crash():
    assert fix_null_byte_crash("a\0b\0") == "a b "


def test_response_to_dict_pairs():
    assert response_to_dict("1:abc:2:def") == {"1": "abc", "2": "def"}


def test_response_to_dict_drops_unpaired_key_and_trailing_separator():
    assert response_to_dict("1:abc:2") == {"1": "abc"}
    assert response_to_dict("1:abc:") == {"1": "abc"}
    assert response_to_dict("") == {}


def test_parse_int():
    assert parse_int("123abc") == 123
    assert parse_int("-42") == -42
    assert parse_int("abc") == 0
    assert parse_int(" 5") == 0
    assert parse_int("99999999999") == 0


def test_parse_float():
    assert parse_float("12.5") == 12.5
    assert parse_float("3.25,rest") == 3.25
    assert parse_float("x") == 0.0
    assert parse_float("1e50") == 0.0


def test_number_comma():
    assert number_comma(1234567) == "1,234,567"
    assert number_comma(999) == "999"


def test_random_number_in_range():
    for _ in range(50):
        assert 3 <= random_number(3, 7) <= 7
    assert random_number(4, 4) == 4


def test_icon_type_to_unlock_type():
    assert icon_type_to_unlock_type(0) == 1
    assert icon_type_to_unlock_type(7) == 13
    assert icon_type_to_unlock_type(12) == 15
    assert icon_type_to_unlock_type(99) == 0


def test_is_newgrounds_url():
    assert is_newgrounds_url("https://audio.ngfiles.com/1000/song.mp3")
    assert not is_newgrounds_url("https://example.com/song.mp3")