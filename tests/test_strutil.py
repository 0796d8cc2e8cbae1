import pytest

from cubmap.strutil import (
    atoi,
    itoa,
    split,
    strchr,
    striteri,
    strlcat,
    strlcpy,
    strmapi,
    strncmp,
    strnstr,
    strrchr,
    strtrim,
    substr,
)


@pytest.mark.parametrize("s,c", [("hello", "l"), ("hello", "h"), ("abcabc", "c")])
def test_strchr_finds_first_occurrence(s, c):
    index = strchr(s, c)
    assert s[index] == c
    assert c not in s[:index]


def test_strchr_missing_and_terminator():
    assert strchr("hello", "z") is None
    assert strchr("hello", "\0") == len("hello")


def test_strchr_rejects_multi_char():
    with pytest.raises(ValueError):
        strchr("hello", "he")


@pytest.mark.parametrize("s,c", [("hello", "l"), ("abcabc", "a"), ("xyz", "z")])
def test_strrchr_finds_last_occurrence(s, c):
    index = strrchr(s, c)
    assert s[index] == c
    assert c not in s[index + 1:]


def test_strrchr_missing_and_terminator():
    assert strrchr("hello", "q") is None
    assert strrchr("abc", "\0") == len("abc")


def test_strncmp_equal_and_prefix():
    assert strncmp("abc", "abc", 10) == 0
    assert strncmp("abcdef", "abcxyz", 3) == 0
    assert strncmp("anything", "else", 0) == 0


def test_strncmp_sign_and_difference():
    assert strncmp("abd", "abc", 3) == ord("d") - ord("c")
    assert strncmp("ab", "abc", 3) == -ord("c")
    assert strncmp("abc", "ab", 3) > 0


def test_strncmp_stops_at_embedded_nul():
    assert strncmp("a\0x", "a\0y", 3) == 0


def test_strncmp_negative_count():
    with pytest.raises(ValueError):
        strncmp("a", "b", -1)


def test_strnstr_found_within_limit():
    big = "lorem ipsum dolor"
    index = strnstr(big, "ipsum", len(big))
    assert big[index:index + len("ipsum")] == "ipsum"


def test_strnstr_needle_beyond_limit():
    big = "lorem ipsum dolor"
    assert strnstr(big, "dolor", big.index("dolor") + 2) is None
    assert strnstr(big, "dolor", len(big)) == big.index("dolor")


def test_strnstr_empty_needle():
    assert strnstr("abc", "", 0) == 0


def test_strlcpy_truncates():
    text, total = strlcpy("hello world", 6)
    assert text == "hello"
    assert total == len("hello world")


def test_strlcpy_fits_and_zero_size():
    assert strlcpy("abc", 10) == ("abc", 3)
    assert strlcpy("abc", 0) == ("", 3)


def test_strlcat_with_room():
    assert strlcat("foo", "bar", 20) == ("foobar", 6)


def test_strlcat_truncates():
    text, total = strlcat("foo", "barbaz", 6)
    assert text == "fooba"
    assert total == len("foo") + len("barbaz")


def test_strlcat_size_smaller_than_dst():
    text, total = strlcat("foobar", "xyz", 3)
    assert text == "foobar"
    assert total == len("xyz") + 3


def test_substr_cases():
    assert substr("hello", 1, 3) == "ell"
    assert substr("hello", 2, 100) == "llo"
    assert substr("hello", 5, 2) == ""
    assert substr("hello", 42, 2) == ""


def test_substr_negative():
    with pytest.raises(ValueError):
        substr("hello", -1, 2)


def test_strtrim_both_ends():
    assert strtrim("  xx hello xx  ", " x") == "hello"
    assert strtrim("aaaa", "a") == ""
    assert strtrim("", "a") == ""


def test_strtrim_none_and_empty_charset():
    assert strtrim("  keep  ", None) == "  keep  "
    assert strtrim("  keep  ", "") == "  keep  "


def test_split_drops_empty_pieces():
    assert split("NO ./a\n\n\nSO ./b\n", "\n") == ["NO ./a", "SO ./b"]
    assert split("", " ") == []
    assert split("    ", " ") == []


def test_split_rejoin_invariant():
    text = "111\n101\n1N1"
    assert "\n".join(split(text, "\n")) == text


@pytest.mark.parametrize("n", [0, 7, -7, 2147483647, -2147483648])
def test_itoa_atoi_round_trip(n):
    assert atoi(itoa(n)) == n


def test_itoa_min_value():
    assert itoa(-2147483648) == "-2147483648"


def test_itoa_out_of_range():
    with pytest.raises(OverflowError):
        itoa(2**31)


def test_atoi_parsing_rules():
    assert atoi(" \t\n -42abc") == -42
    assert atoi("+17") == 17
    assert atoi("--5") == 0
    assert atoi("abc") == 0
    assert atoi("") == 0


def test_strmapi_uses_index():
    result = strmapi("abcd", lambda i, ch: ch.upper() if i % 2 == 0 else ch)
    assert result == "AbCd"


def test_strmapi_identity():
    assert strmapi("same", lambda i, ch: ch) == "same"


def test_striteri_in_place():
    chars = list("abc")
    returned = striteri(chars, lambda i, ch: ch * (i + 1))
    assert returned is chars
    assert chars == ["a", "bb", "ccc"]


def test_striteri_none_leaves_value():
    chars = list("xyz")
    seen = []
    striteri(chars, lambda i, ch: seen.append((i, ch)))
    assert chars == ["x", "y", "z"]
    assert seen == [(0, "x"), (1, "y"), (2, "z")]