import pytest

from sigtalk.chars import isdigit
from sigtalk.strings import (
    strall,
    strchr,
    strcmp,
    strlcat,
    strlcpy,
    strlen,
    strncmp,
    strnlen,
    strnstr,
    strrchr,
)


def test_strlen_stops_at_nul():
    assert strlen("ab\0cd") == len("ab")
    assert strlen("hello") == len("hello")


def test_strnlen_caps_length():
    assert strnlen("hello", 3) == 3
    assert strnlen("hi", 10) == len("hi")


def test_strchr_first_occurrence():
    text = "hello"
    index = strchr(text, "l")
    assert text[index] == "l"
    assert "l" not in text[:index]


def test_strchr_nul_finds_end():
    assert strchr("hello", "\0") == len("hello")
    assert strchr("hello", 0) == len("hello")


def test_strchr_missing_is_none():
    assert strchr("hello", "z") is None


def test_strchr_integer_code_truncated():
    assert strchr("xAy", 0x100 + ord("A")) == "xAy".index("A")


def test_strrchr_last_occurrence():
    text = "hello"
    index = strrchr(text, "l")
    assert text[index] == "l"
    assert "l" not in text[index + 1:]


def test_strrchr_nul_and_missing():
    assert strrchr("abc", "\0") == len("abc")
    assert strrchr("abc", "q") is None


def test_strchr_bad_character_raises():
    with pytest.raises(TypeError):
        strchr("abc", "ab")


def test_strcmp_equal_is_zero():
    assert strcmp("same", "same") == 0


def test_strcmp_sign_and_antisymmetry():
    assert strcmp("apple", "apply") < 0
    assert strcmp("apply", "apple") == -strcmp("apple", "apply")


def test_strcmp_prefix_is_smaller():
    assert strcmp("abc", "abcd") < 0
    assert strcmp("abcd", "abc") > 0


def test_strncmp_limits_comparison():
    assert strncmp("abcX", "abcY", 3) == 0
    assert strncmp("abcX", "abcY", 4) < 0


def test_strncmp_zero_count():
    assert strncmp("a", "b", 0) == 0


def test_strnstr_finds_needle():
    haystack = "lorem ipsum"
    index = strnstr(haystack, "ipsum", len(haystack))
    assert index == haystack.find("ipsum")


def test_strnstr_needle_past_length_is_none():
    haystack = "lorem ipsum"
    assert strnstr(haystack, "ipsum", len(haystack) - 1) is None


def test_strnstr_empty_needle_and_zero_length():
    assert strnstr("abc", "", 0) == 0
    assert strnstr("abc", "a", 0) is None


def test_strnstr_absent_needle():
    assert strnstr("abcdef", "xyz", 6) is None


def test_strall_digits():
    assert strall("12345", isdigit) is True
    assert strall("12a45", isdigit) is False


def test_strall_empty_and_missing():
    assert strall("", isdigit) is True
    assert strall(None, isdigit) is False
    assert strall("123", None) is False


def test_strlcpy_truncates_and_reports_source_length():
    assert strlcpy("", "hello", 3) == ("hello"[:2], len("hello"))


def test_strlcpy_fits_whole():
    assert strlcpy("old", "hi", 10) == ("hi", len("hi"))


def test_strlcpy_zero_size_keeps_destination():
    assert strlcpy("old", "hello", 0) == ("old", len("hello"))


def test_strlcat_appends():
    assert strlcat("ab", "cd", 10) == ("ab" + "cd", len("ab") + len("cd"))


def test_strlcat_truncates():
    text, total = strlcat("ab", "cdef", 4)
    assert text == "ab" + "c"
    assert total == len("ab") + len("cdef")


def test_strlcat_destination_fills_buffer():
    assert strlcat("abcd", "xy", 2) == ("abcd", 2 + len("xy"))


def test_strlcat_zero_size():
    assert strlcat("abc", "xy", 0) == ("abc", len("xy"))