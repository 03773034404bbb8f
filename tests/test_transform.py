import pytest

from pipex.transform import split, strmapi, striteri, strtrim


def test_split_drops_runs_of_separators():
    assert split("Thisccccciscccaclongcstring", "c") == [
        "This",
        "is",
        "a",
        "long",
        "string",
    ]


def test_split_leading_and_trailing_separators():
    words = split("  ls   -l  ", " ")
    assert words == ["ls", "-l"]


def test_split_only_separators_gives_empty_list():
    assert split(":::", ":") == []


def test_split_empty_string():
    assert split("", ":") == []


def test_split_none_input():
    assert split(None, ":") is None


def test_split_rejects_multi_character_separator():
    with pytest.raises(ValueError):
        split("a,b", ",,")


def test_split_rejects_non_string_separator():
    with pytest.raises(TypeError):
        split("a,b", 44)


def test_split_words_contain_no_separator_and_rejoin():
    text = "/usr/bin::/bin:/usr/local/bin:"
    words = split(text, ":")
    assert all(":" not in w and w for w in words)
    assert ":".join(words) == ":".join(p for p in text.split(":") if p)


def test_strtrim_worked_example():
    assert strtrim("      %  % Hi my guy!   %   ", " % ") == "Hi my guy!"


def test_strtrim_everything_trimmed():
    assert strtrim("xxyxx", "xy") == ""


def test_strtrim_empty_set_keeps_string():
    assert strtrim("  a  ", "") == "  a  "


def test_strtrim_inner_characters_kept():
    result = strtrim("--a-b--", "-")
    assert result == "a-b"


def test_strtrim_none_inputs():
    assert strtrim(None, "x") is None
    assert strtrim("x", None) is None


def test_strmapi_passes_index_and_char():
    seen = []

    def record(i, ch):
        seen.append((i, ch))
        return ch

    assert strmapi("abc", record) == "abc"
    assert seen == [(0, "a"), (1, "b"), (2, "c")]


def test_strmapi_transforms():
    assert strmapi("hello", lambda i, ch: ch.upper()) == "HELLO"


def test_strmapi_none_inputs():
    assert strmapi(None, lambda i, ch: ch) is None
    assert strmapi("abc", None) is None


def test_striteri_replaces_returned_characters():
    result = striteri("abcd", lambda i, ch: ch.upper() if i % 2 == 0 else None)
    assert result == "AbCd"


def test_striteri_keeps_string_when_func_returns_none():
    calls = []
    assert striteri("xyz", lambda i, ch: calls.append(i)) == "xyz"
    assert calls == [0, 1, 2]


def test_striteri_none_inputs():
    assert striteri(None, lambda i, ch: ch) is None
    assert striteri("abc", None) is None