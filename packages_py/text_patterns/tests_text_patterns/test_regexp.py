"""
Tests for RegExp and the string helpers.
"""
import pytest

from text_patterns import (
    RegExp,
    gsub,
    gsubi,
    ltrim,
    match,
    matches,
    rtrim,
    scan,
    slice_out,
    split,
    sub,
    subi,
    trim,
)


class TestRegExp:
    def test_match_returns_groups(self):
        assert RegExp(r"(\w+)@(\w+)\.com").match("mail kellan@example.com now") == [
            "kellan@example.com", "kellan", "example"
        ]

    def test_match_none(self):
        assert RegExp(r"\d+").match("no digits") is None

    def test_scan_all(self):
        assert RegExp(r"(\d)(\w)").scan("1a 2b 3c") == [["1a", "1", "a"], ["2b", "2", "b"], ["3c", "3", "c"]]
        assert RegExp(r"\d").scan("abc") is None

    def test_case_insensitive_option(self):
        assert RegExp("hello", "i").test("HeLLo world")
        assert not RegExp("hello").test("HELLO")

    def test_literal_option(self):
        assert RegExp("a.b", "c").test("a.b")
        assert not RegExp("a.b", "c").test("axb")

    def test_multiline_is_default(self):
        assert RegExp(r"^second$").test("first\nsecond\nthird")

    def test_unknown_option(self):
        with pytest.raises(ValueError, match="Unsupported regex option"):
            RegExp("a", "q")

    def test_dollar_group_replacement(self):
        assert RegExp(r"(\w+) (\w+)").gsub("hello world", "$2 $1") == "world hello"

    def test_backslashes_in_replacement_are_literal(self):
        assert RegExp("/").gsub("a/b", "\\") == "a\\b"

    def test_substring_ranges(self):
        ranges = RegExp(r"b(\d)").substring_ranges("ab1cb2")
        assert [(r.start, r.end, r.groups) for r in ranges] == [(1, 3, ["1"]), (4, 6, ["2"])]


def test_matches_operator():
    assert matches("swift language", r"lang")
    assert not matches("swift", r"^py")


def test_match_and_scan_helpers():
    assert match("2015-06-11", r"(\d+)-(\d+)") == ["2015-06", "2015", "06"]
    assert scan("a1b2", r"[a-z](\d)") == [["a1", "1"], ["b2", "2"]]


def test_gsub_with_callback():
    assert gsub("a1b22", r"\d+", lambda m: f"<{len(m)}>") == "a<1>b<2>"


def test_gsubi_and_subi():
    assert gsubi("Cat cat CAT", "cat", "dog") == "dog dog dog"
    assert subi("Cat cat CAT", "cat", "dog") == "dog cat CAT"


def test_sub_replaces_first_only():
    assert sub("a-b-c", "-", "+") == "a+b-c"


def test_slice_out():
    found, remaining = slice_out("tag #one and #two", r"#(\w+)")
    assert found == [["#one", "one"], ["#two", "two"]]
    assert remaining == "tag  and "


def test_split_drops_empty_pieces():
    assert split("a,b,,c,", ",") == ["a", "b", "c"]
    assert split("a.b", ".") == ["a", "b"]
    assert split("", ",") == [""]
    assert split("abc", ",") == ["abc"]


def test_trim_family():
    assert trim("  padded \n") == "padded"
    assert trim("--value--", "-") == "value"
    assert ltrim("  left ") == "left "
    assert rtrim("a=1&b=2& ", "& ") == "a=1&b=2"
    assert trim("line one\nline two") == "line one\nline two"
