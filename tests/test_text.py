import pytest

from pebbleshell.text import (
    compare_till,
    compare_till_first,
    cut_after,
    is_space,
    is_valid_identifier,
    remove_char,
    sort_strings,
)


@pytest.mark.parametrize("char", [" ", "\t", "\n", "\r", "\f", "\v"])
def test_is_space_accepts_whitespace(char):
    assert is_space(char) is True


@pytest.mark.parametrize("char", ["a", "_", "", "  "])
def test_is_space_rejects_others(char):
    assert is_space(char) is False


def test_remove_char_drops_every_occurrence():
    result = remove_char("a*b*c*", "*")
    assert result == "abc"
    assert "*" not in result


def test_remove_char_without_match_is_identity():
    assert remove_char("plain", "*") == "plain"


def test_cut_after_returns_value_part():
    assert cut_after("PATH=/bin:/usr/bin", "=") == "/bin:/usr/bin"


def test_cut_after_only_splits_on_first():
    assert cut_after("A=b=c", "=") == "b=c"


def test_cut_after_missing_separator_gives_empty():
    assert cut_after("noseparator", "=") == ""


def test_compare_till_equal_names():
    assert compare_till("HOME=/a", "HOME=/b", "=") == 0
    assert compare_till("HOME", "HOME=/b", "=") == 0


def test_compare_till_ordering():
    assert compare_till("A=1", "B=1", "=") < 0
    assert compare_till("AB=1", "A", "=") > 0


def test_compare_till_first_only_cuts_first():
    assert compare_till_first("HOME=/a", "HOME", "=") == 0
    assert compare_till_first("HOME=/a", "HOME=/a", "=") < 0


@pytest.mark.parametrize("text", ["HOME", "A_1=x", "abc=-1 !", "Z9"])
def test_valid_identifiers(text):
    assert is_valid_identifier(text) is True


@pytest.mark.parametrize("text", ["", "1A", "_X", "A-B=1", "=value", "A B"])
def test_invalid_identifiers(text):
    assert is_valid_identifier(text) is False


def test_sort_strings_orders_and_copies():
    items = ["b", "a", "B", "declare -x Z", "declare -x A"]
    result = sort_strings(items)
    assert result == sorted(items)
    assert all(x <= y for x, y in zip(result, result[1:]))
    assert items[0] == "b"


def test_sort_strings_uppercase_before_lowercase():
    assert sort_strings(["a", "B"]) == ["B", "a"]