import pytest

from cchesstools.strutils import is_integer, split, to_integer, trim


def test_split_keeps_inner_empty_tokens():
    assert split("a,b,,c", ",") == ["a", "b", "", "c"]


def test_split_drops_trailing_empty_token():
    assert split("a,b,", ",") == ["a", "b"]


def test_split_empty_string():
    assert split("", ",") == []


@pytest.mark.parametrize("text", ["x", "one two", "a b c", " lead"])
def test_split_round_trip(text):
    assert " ".join(split(text, " ")) == text


def test_trim_removes_surrounding_whitespace():
    assert trim(" \t hello world \n\r") == "hello world"


def test_trim_all_whitespace():
    assert trim(" \t\n ") == ""


def test_trim_is_idempotent():
    once = trim("  abc  ")
    assert trim(once) == once


@pytest.mark.parametrize("text", ["0", "42", "-7", "+15", "0012"])
def test_is_integer_accepts(text):
    assert is_integer(text)


@pytest.mark.parametrize("text", ["", "-", "+", "1.5", "abc", "12a", " 3"])
def test_is_integer_rejects(text):
    assert not is_integer(text)


def test_to_integer_plain():
    assert to_integer("42") == 42
    assert to_integer("-17") == -17


def test_to_integer_stops_at_non_digit():
    assert to_integer("  12abc") == 12


@pytest.mark.parametrize("text", ["", "abc", "-", "99999999999"])
def test_to_integer_invalid_gives_zero(text):
    assert to_integer(text) == 0


@pytest.mark.parametrize("value", [0, 1, -1, 2**31 - 1, -(2**31)])
def test_to_integer_round_trip(value):
    assert to_integer(str(value)) == value