import pytest

from argtree.parser.utils import (
    coerce_bool_literal,
    coerce_number,
    generate_prefix,
    is_boolean_literal,
    is_flag,
    remove_at,
)


@pytest.mark.parametrize(
    "name,expected",
    [
        ("v", "-v"),
        ("verbose", "--verbose"),
        ("dry-run", "--dry-run"),
        ("--custom", "--custom"),
        ("-c", "-c"),
    ],
)
def test_generate_prefix(name, expected):
    assert generate_prefix(name) == expected


def test_remove_at_returns_new_list():
    tokens = ["a", "b", "c"]
    assert remove_at(tokens, 1) == ["a", "c"]
    assert remove_at(tokens, 0) == ["b", "c"]
    assert remove_at(tokens, 2) == ["a", "b"]
    assert tokens == ["a", "b", "c"]


def test_is_flag():
    assert is_flag("--x")
    assert is_flag("-x")
    assert not is_flag("x")
    assert not is_flag("")
    assert not is_flag(None)


@pytest.mark.parametrize(
    "text,expected",
    [
        ("true", True),
        ("TRUE", True),
        ("1", True),
        ("false", False),
        ("False", False),
        ("0", False),
        ("yes", None),
        ("", None),
    ],
)
def test_coerce_bool_literal(text, expected):
    assert coerce_bool_literal(text) is expected
    assert is_boolean_literal(text) is (expected is not None)


@pytest.mark.parametrize(
    "text,expected,kind",
    [
        ("3", 3, int),
        (" 7 ", 7, int),
        ("-4", -4, int),
        ("2.5", 2.5, float),
        ("1e3", 1000.0, float),
        ("3.0", 3.0, float),
    ],
)
def test_coerce_number(text, expected, kind):
    value = coerce_number(text)
    assert value == expected
    assert type(value) is kind


@pytest.mark.parametrize(
    "text", ["abc", "", "nan", "NaN", "1,5", "1_000", "\uff15", "inf", "0x10", "1e"]
)
def test_coerce_number_rejects_non_numbers(text):
    assert coerce_number(text) is None
