import string

import pytest

from pypipex.chars import (
    INT_MAX,
    INT_MIN,
    atoi,
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_int,
    is_print,
    itoa,
    strtol,
    to_lower,
    to_upper,
)


@pytest.mark.parametrize("c", list(string.ascii_letters))
def test_is_alpha_letters(c):
    assert is_alpha(c) is True
    assert is_alpha(ord(c)) is True


@pytest.mark.parametrize("c", list("09 @[`{/:\n"))
def test_is_alpha_rejects_non_letters(c):
    assert is_alpha(c) is False


def test_is_digit_matches_ascii_digits():
    for code in range(256):
        assert is_digit(code) == (chr(code) in string.digits)


def test_is_alnum_is_union():
    for code in range(256):
        assert is_alnum(code) == (is_alpha(code) or is_digit(code))


def test_is_ascii_bounds():
    assert is_ascii(0) is True
    assert is_ascii(127) is True
    assert is_ascii(128) is False
    assert is_ascii(-1) is False


def test_is_print_bounds():
    assert is_print(" ") is True
    assert is_print("~") is True
    assert is_print(31) is False
    assert is_print(127) is False


def test_to_upper_and_lower_letters():
    for c in string.ascii_lowercase:
        assert to_upper(c) == c.upper()
        assert to_lower(to_upper(c)) == c
    for c in string.ascii_uppercase:
        assert to_lower(c) == c.lower()
        assert to_upper(ord(c)) == ord(c)


@pytest.mark.parametrize("c", list("0 !{é"))
def test_case_mapping_leaves_others(c):
    assert to_upper(c) == c
    assert to_lower(c) == c


def test_char_must_be_single():
    with pytest.raises(ValueError):
        is_alpha("ab")
    with pytest.raises(ValueError):
        to_upper("")


@pytest.mark.parametrize(
    "text, expected",
    [
        ("42", 42),
        ("   -42", -42),
        ("\t\n\v\f\r +7xyz", 7),
        ("2147483647", 2147483647),
        ("-2147483648", -2147483648),
    ],
)
def test_atoi_values(text, expected):
    assert atoi(text) == expected


def test_atoi_without_digits_matches_empty():
    assert atoi("abc") == atoi("")
    assert atoi("+-5") == atoi("")
    assert atoi("") == 0


def test_atoi_wraps_to_32_bits():
    assert atoi("4294967296") == atoi("0")
    assert atoi("99999999999999999999") == -1


def test_atoi_itoa_round_trip():
    for n in (0, 1, -1, 123456, INT_MAX, INT_MIN):
        assert atoi(itoa(n)) == n


@pytest.mark.parametrize(
    "text", ["0", "2147483647", "-2147483648", "+15", " \t\r12"]
)
def test_is_int_true(text):
    assert is_int(text) is True


@pytest.mark.parametrize(
    "text",
    ["", "+", "-", "2147483648", "-2147483649", "12 ", "1a", "\n5", "abc"],
)
def test_is_int_false(text):
    assert is_int(text) is False


def test_strtol_stops_at_non_digit():
    text = "  -123abc"
    value, end = strtol(text)
    assert value == -123
    assert text[end:] == "abc"


def test_strtol_consumes_whole_number():
    text = "+9876"
    value, end = strtol(text)
    assert value == 9876
    assert end == len(text)


def test_strtol_overflow_clamps():
    text = "99999999999999999999"
    value, end = strtol(text)
    assert value == INT_MAX
    assert end < len(text)
    value, _ = strtol("-" + text)
    assert value == INT_MIN


def test_strtol_agrees_with_atoi_in_range():
    for text in ("0", "17", "-17", " 2147483647", "-2147483648"):
        assert strtol(text)[0] == atoi(text)


def test_itoa_values():
    assert itoa(-2147483648) == "-2147483648"
    assert itoa(2147483647) == "2147483647"
    assert itoa(0) == "0"
    assert itoa(-5) == "-5"