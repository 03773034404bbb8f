import string

import pytest

from pipex.chars import (
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    to_lower,
    to_upper,
)

ALL_ASCII = [chr(code) for code in range(128)]


@pytest.mark.parametrize("ch", ALL_ASCII)
def test_is_alpha_matches_ascii_letters(ch):
    assert is_alpha(ch) == (ch in string.ascii_letters)


@pytest.mark.parametrize("ch", ALL_ASCII)
def test_is_digit_matches_ascii_digits(ch):
    assert is_digit(ch) == (ch in string.digits)


@pytest.mark.parametrize("ch", ALL_ASCII)
def test_is_alnum_is_alpha_or_digit(ch):
    assert is_alnum(ch) == (is_alpha(ch) or is_digit(ch))


def test_is_ascii_bounds():
    assert is_ascii(0)
    assert is_ascii(127)
    assert not is_ascii(128)
    assert not is_ascii(-1)
    assert not is_ascii(200)


def test_is_print_bounds():
    assert is_print(" ")
    assert is_print("~")
    assert not is_print(31)
    assert not is_print(127)
    assert not is_print("\n")


@pytest.mark.parametrize("ch", ALL_ASCII)
def test_printable_are_ascii(ch):
    if is_print(ch):
        assert is_ascii(ch)
    assert is_print(ch) == (32 <= ord(ch) <= 126)


def test_non_ascii_letters_are_not_alpha():
    assert not is_alpha("é")
    assert not is_alnum("é")
    assert not is_digit("٣")


def test_case_conversion_of_strings():
    assert to_upper("v") == "V"
    assert to_lower("G") == "g"


def test_case_conversion_of_codes():
    assert to_upper(ord("a")) == ord("A")
    assert to_lower(ord("Z")) == ord("z")


@pytest.mark.parametrize("ch", ALL_ASCII)
def test_case_round_trip(ch):
    if ch in string.ascii_lowercase:
        assert to_lower(to_upper(ch)) == ch
        assert to_upper(ch) == ch.upper()
    elif ch in string.ascii_uppercase:
        assert to_upper(to_lower(ch)) == ch
        assert to_lower(ch) == ch.lower()
    else:
        assert to_upper(ch) == ch
        assert to_lower(ch) == ch


def test_non_ascii_unchanged_by_case():
    assert to_upper("é") == "é"
    assert to_lower("É") == "É"


def test_multi_character_string_rejected():
    with pytest.raises(ValueError):
        is_alpha("ab")
    with pytest.raises(ValueError):
        to_upper("")


def test_wrong_type_rejected():
    with pytest.raises(TypeError):
        is_digit(3.5)