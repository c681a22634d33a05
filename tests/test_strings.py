import pytest

from ftkit.strings import (
    split,
    strchr,
    striteri,
    strjoin,
    strmapi,
    strnstr,
    strrchr,
    strtrim,
    substr,
)


def test_split_drops_empty_words():
    assert split("  a  bb ccc ", " ") == ["a", "bb", "ccc"]


def test_split_rejoin_round_trip():
    words = ["x", "yy", "zzz"]
    assert split(",".join(words), ",") == words


def test_split_no_words_is_empty():
    assert split(",,,", ",") == []
    assert split("", ",") == []


def test_split_accepts_code():
    assert split("a:b", ord(":")) == ["a", "b"]


def test_split_rejects_long_separator():
    with pytest.raises(ValueError):
        split("a b", "ab")


def test_strtrim_source_example():
    assert strtrim("     3jkj3kkk!!  3 ", " 3") == "jkj3kkk!!"


def test_strtrim_everything_trimmed():
    assert strtrim("   ", " ") == ""


def test_strtrim_none_cases():
    assert strtrim(None, " ") is None
    assert strtrim("  a  ", None) == "  a  "


def test_substr_source_example():
    assert substr("Hello world!", 1, 5) == "ello "


def test_substr_clamps_length():
    assert substr("abc", 1, 100) == "bc"


def test_substr_start_past_end():
    assert substr("abc", 3, 2) == ""
    assert substr("abc", 10, 2) == ""


def test_substr_negative_raises():
    with pytest.raises(ValueError):
        substr("abc", -1, 2)
    with pytest.raises(ValueError):
        substr("abc", 0, -2)


def test_strjoin_handles_none():
    assert strjoin("lalala", "second lalala") == "lalalasecond lalala"
    assert strjoin(None, "b") == "b"
    assert strjoin("a", None) == "a"
    assert strjoin(None, None) == ""


def test_strnstr_found_within_limit():
    text = "needle here haystack contains and not here (needle)"
    assert strnstr(text, "needle", 30) == text


def test_strnstr_match_beyond_limit():
    assert strnstr("abcdef", "ef", 5) is None
    assert strnstr("abcdef", "ef", 6) == "ef"


def test_strnstr_empty_needle():
    assert strnstr("Empty needle", "", 10) == "Empty needle"


def test_strnstr_not_found():
    text = "Haystack doesn't contain anything but contains need"
    assert strnstr(text, "needle", 100) is None


def test_strchr_and_strrchr():
    text = "needle (needle)"
    assert strchr(text, "n") == text
    assert strrchr(text, "n") == "needle)"


def test_strchr_nul_gives_empty_tail():
    assert strchr("Find the end", "\0") == ""
    assert strrchr("Find the end", 0) == ""


def test_strchr_missing():
    assert strchr("No such char", "!") is None
    assert strrchr("No such char", "!") is None


def test_strmapi_passes_index():
    assert strmapi("abc", lambda i, c: str(i)) == "012"


def test_strmapi_none():
    assert strmapi(None, lambda i, c: c) is None
    assert strmapi("abc", None) is None


def test_striteri_in_place():
    chars = list("abc")
    striteri(chars, lambda i, c: c.upper() if i != 1 else None)
    assert chars == ["A", "b", "C"]


def test_striteri_none_function_leaves_unchanged():
    chars = list("xyz")
    striteri(chars, None)
    assert chars == ["x", "y", "z"]