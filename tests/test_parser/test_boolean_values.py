import pytest

from argtree.command import command
from argtree.exceptions import InvalidBooleanSyntaxError, UnrecognizedOptionsError
from argtree.parser import boolean, parse_options, positional


@pytest.fixture
def build():
    return command(
        "build",
        options={
            "dry": boolean().alias("d"),
            "path": positional(),
        },
    )


@pytest.mark.parametrize(
    "token,expected",
    [
        ("--dry", True),
        ("--dry=", True),
        ("--dry=true", True),
        ("--dry=TRUE", True),
        ("--dry=1", True),
        ("--dry=false", False),
        ("--dry=False", False),
        ("--dry=0", False),
        ("-d", True),
        ("-d=0", False),
    ],
)
def test_boolean_spellings(build, token, expected):
    assert parse_options(build, [token])["dry"] is expected


@pytest.mark.parametrize("value", ["yes", "no", "2", "on", "t"])
def test_invalid_embedded_boolean(build, value):
    with pytest.raises(InvalidBooleanSyntaxError) as excinfo:
        parse_options(build, [f"--dry={value}"])
    assert excinfo.value.option_name == "--dry"


@pytest.mark.parametrize(
    "literal,expected",
    [("true", True), ("1", True), ("false", False), ("0", False), ("FALSE", False)],
)
def test_following_literal_is_consumed(build, literal, expected):
    result = parse_options(build, ["--dry", literal])
    assert result["dry"] is expected
    assert result["path"] is None


def test_following_word_is_left_for_positional(build):
    assert parse_options(build, ["--dry", "src"]) == {"dry": True, "path": "src"}


def test_following_empty_token_is_not_a_literal(build):
    assert parse_options(build, ["--dry", ""]) == {"dry": True, "path": ""}


def test_following_flag_is_not_consumed(build):
    with pytest.raises(UnrecognizedOptionsError) as excinfo:
        parse_options(build, ["--dry", "--other"])
    assert excinfo.value.unrecognized == ["--other"]


def test_absent_boolean_uses_default():
    cmd = command("cmd", options={"dry": boolean().default(False)})
    assert parse_options(cmd, []) == {"dry": False}
    assert parse_options(cmd, ["--dry"]) == {"dry": True}


def test_absent_boolean_without_default_is_undefined(build):
    assert parse_options(build, [])["dry"] is None
    assert "dry" not in parse_options(build, [], omit_undefined=True)
