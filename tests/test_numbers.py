import pytest

from pipex.numbers import atoi, itoa


@pytest.mark.parametrize("n", [0, 1, -1, 123, -456, 2147483647, -2147483648])
def test_round_trip(n):
    assert atoi(itoa(n)) == n


def test_int_min_text():
    assert itoa(-2147483648) == "-2147483648"
    assert atoi("-2147483648") == -2147483648


def test_int_min_prefix_wins():
    assert atoi("-21474836489") == -2147483648


def test_leading_whitespace_skipped():
    assert atoi(" \t\n\v\f\r42") == atoi("42")
    assert atoi("   -42") == -42


def test_plus_sign():
    assert atoi("+17") == atoi("17")


def test_stops_at_non_digit():
    assert atoi("-21474836\b") == -21474836
    assert atoi("12abc34") == 12


def test_no_digits_gives_zero():
    assert atoi("abc") == atoi("")
    assert atoi("-") == atoi("0")


def test_only_one_sign():
    assert atoi("--5") == atoi("")
    assert atoi("+-5") == atoi("")


def test_itoa_zero_and_sign():
    assert itoa(0) == "0"
    assert itoa(-7).startswith("-")
    assert itoa(123) == "123"


def test_itoa_rejects_non_int():
    with pytest.raises(TypeError):
        itoa("12")
    with pytest.raises(TypeError):
        itoa(True)