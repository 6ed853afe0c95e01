import pytest

from ghstache import render
from ghstache.processing.text_ops import has_whitespace, html_escape, split, trim


@pytest.mark.parametrize(
    "text, expected",
    [
        ("", []),
        ("a", ["a"]),
        ("a.b.c", ["a", "b", "c"]),
        ("a.", ["a"]),
        ("a..", ["a", ""]),
        ("a..b", ["a", "", "b"]),
        (".a", ["", "a"]),
        (".", [""]),
    ],
)
def test_split_drops_only_one_trailing_field(text, expected):
    assert split(text, ".") == expected


def test_trim_strips_all_surrounding_whitespace():
    assert trim("  name \t\r\n") == "name"
    assert trim("a b") == "a b"
    assert trim("   ") == ""


def test_has_whitespace():
    assert has_whitespace("a b")
    assert has_whitespace("a\tb")
    assert has_whitespace("\n")
    assert not has_whitespace("<%")
    assert not has_whitespace("")


def test_html_escape_leaves_other_text_alone():
    assert html_escape("plain {text}") == "plain {text}"
    assert html_escape("&amp;") == "&amp;amp;"


def test_dotted_names_follow_split_rules():
    data = {"a": "x", "b": {"c": "y"}}
    assert render("{{a.}}", data) == "x"
    assert render("{{b.c.}}", data) == "y"
    assert render("[{{.a}}][{{b..c}}]", data) == "[][]"
