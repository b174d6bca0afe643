import pytest

from minitalk.strutil import (
    atoi,
    itoa,
    split,
    strjoin,
    strlcat,
    strncmp,
    strnstr,
    strtrim,
    substr,
)


@pytest.mark.parametrize("value", [0, 1, -1, 42, -42, 2147483647, -2147483648])
def test_atoi_itoa_round_trip(value):
    assert atoi(itoa(value)) == value


def test_itoa_minimum_int():
    assert itoa(-2147483648) == "-2147483648"


def test_atoi_skips_whitespace_and_stops_at_non_digit():
    assert atoi(" \t\n\v\f\r-42abc") == -42
    assert atoi("+17 18") == 17


def test_atoi_no_digits_is_zero():
    assert atoi("abc") == 0
    assert atoi("") == 0
    assert atoi("--5") == 0


def test_atoi_wraps_like_int():
    assert atoi("2147483648") == -2147483648


def test_split_drops_empty_words():
    assert split("  hello  world ", " ") == ["hello", "world"]
    assert split("", " ") == []
    assert split("     ", " ") == []


def test_split_join_round_trip():
    words = ["omar", "Hello", "world"]
    assert split(",".join(words), ",") == words


def test_split_rejects_bad_separator():
    with pytest.raises(ValueError):
        split("a b", "")
    with pytest.raises(ValueError):
        split("a b", "ab")


def test_strtrim_both_ends_only():
    assert strtrim("xxomarxyx", "xy") == "omar"
    assert strtrim("a b a", "a") == " b "


def test_strtrim_everything_or_nothing():
    assert strtrim("xyxy", "xy") == ""
    assert strtrim("omar", "") == "omar"


def test_substr_clamps_and_handles_out_of_range():
    text = "Hello world"
    assert substr(text, 6, 100) == "world"
    assert substr(text, 0, 5) == "Hello"
    assert substr(text, len(text), 3) == ""
    assert substr(text, 50, 3) == ""


def test_substr_rejects_negative():
    with pytest.raises(ValueError):
        substr("omar", -1, 2)


def test_strnstr_finds_within_limit():
    haystack = "Hello world"
    index = strnstr(haystack, "world", len(haystack))
    assert haystack[index:] == "world"


def test_strnstr_needle_past_limit():
    haystack = "Hello world"
    assert strnstr(haystack, "world", len(haystack) - 1) is None
    assert strnstr(haystack, "xyz", len(haystack)) is None


def test_strnstr_empty_needle_and_zero_length():
    assert strnstr("Hello world", "", 0) == 0
    assert strnstr("Hello world", "H", 0) is None


def test_strncmp_prefix_ordering():
    assert strncmp("test", "testss", 7) < 0
    assert strncmp("testss", "test", 7) > 0
    assert strncmp("test", "testss", 4) == 0


def test_strncmp_antisymmetric_and_zero_n():
    assert strncmp("omar", "omzr", 4) == -strncmp("omzr", "omar", 4)
    assert strncmp("abc", "xyz", 0) == 0


def test_strjoin_concatenates():
    joined = strjoin("omar", "alhassan")
    assert joined.startswith("omar")
    assert joined.endswith("alhassan")
    assert len(joined) == len("omar") + len("alhassan")


def test_strlcat_size_not_larger_than_dst():
    result = strlcat("omarabudiak", "alhassan", 7)
    assert result.text == "omarabudiak"
    assert result.length == len("alhassan") + 7


def test_strlcat_fits_and_truncates():
    full = strlcat("omar", "alhassan", 100)
    assert full.text == "omaralhassan"
    assert full.length == len(full.text)
    cut = strlcat("omar", "alhassan", 7)
    assert len(cut.text) == 6
    assert cut.text == "omaral"
    assert cut.length == len("omar") + len("alhassan")