import pytest

from argtree.command import command
from argtree.exceptions import UnknownCommandError, UnknownSubcommandError
from argtree.parser import boolean, positional, resolve_command, string


@pytest.fixture
def tree():
    migrate = command(
        "migrate",
        options={"dry": boolean(), "target": string()},
        handler=lambda options: options,
    )
    seed = command("seed", aliases=["s"], handler=lambda options: options)
    status = command(
        "status",
        subcommands=[command("verbose-report", handler=lambda options: options)],
    )
    db = command("db", subcommands=[migrate, seed, status])
    greet = command(
        "greet", options={"name": positional()}, handler=lambda options: options
    )
    return {
        "commands": (db, greet),
        "db": db,
        "migrate": migrate,
        "seed": seed,
        "status": status,
        "greet": greet,
    }


def test_resolves_deepest_subcommand(tree):
    resolution = resolve_command(tree["commands"], ["db", "migrate", "--dry"])
    assert resolution.command is tree["migrate"]
    assert resolution.tokens == ["--dry"]
    assert resolution.help_requested is False


def test_resolves_three_levels(tree):
    resolution = resolve_command(
        tree["commands"], ["db", "status", "verbose-report", "--x=1"]
    )
    assert resolution.command is tree["status"].subcommands[0]
    assert resolution.tokens == ["--x=1"]


def test_resolves_by_alias(tree):
    resolution = resolve_command(tree["commands"], ["db", "s"])
    assert resolution.command is tree["seed"]
    assert resolution.tokens == []


def test_stops_at_command_without_more_candidates(tree):
    resolution = resolve_command(tree["commands"], ["db", "--verbose=1"])
    assert resolution.command is tree["db"]
    assert resolution.tokens == ["--verbose=1"]


def test_leaf_command_keeps_remaining_candidates(tree):
    resolution = resolve_command(tree["commands"], ["greet", "Jane", "extra"])
    assert resolution.command is tree["greet"]
    assert resolution.tokens == ["Jane", "extra"]


def test_flag_values_before_the_path_are_kept_in_order(tree):
    resolution = resolve_command(
        tree["commands"], ["--target", "up", "db", "migrate", "--dry=1"]
    )
    assert resolution.command is tree["migrate"]
    assert resolution.tokens == ["--target", "up", "--dry=1"]


def test_flags_interleaved_with_the_path(tree):
    resolution = resolve_command(
        tree["commands"], ["db", "--target", "down", "migrate", "--dry"]
    )
    assert resolution.command is tree["migrate"]
    assert resolution.tokens == ["--target", "down", "--dry"]


def test_no_candidates_is_global_scope(tree):
    assert resolve_command(tree["commands"], []).command is None
    resolution = resolve_command(tree["commands"], ["--x=1", "--y", "2"])
    assert resolution.command is None
    assert resolution.tokens == ["--x=1", "--y", "2"]


def test_unknown_top_level_command(tree):
    with pytest.raises(UnknownCommandError) as excinfo:
        resolve_command(tree["commands"], ["nope", "--x"])
    assert excinfo.value.token == "nope"


def test_matching_is_case_sensitive(tree):
    with pytest.raises(UnknownCommandError):
        resolve_command(tree["commands"], ["DB"])


def test_unknown_subcommand_names_parent_path(tree):
    with pytest.raises(UnknownSubcommandError) as excinfo:
        resolve_command(tree["commands"], ["db", "status", "nope"])
    assert excinfo.value.parent_path == "db status"
    assert excinfo.value.token == "nope"
    assert "db status nope" in str(excinfo.value)


def test_help_literal_marks_a_help_request(tree):
    resolution = resolve_command(tree["commands"], ["help", "db", "migrate"])
    assert resolution.command is tree["migrate"]
    assert resolution.help_requested is True
    assert resolution.tokens == []


def test_help_literal_alone_is_global(tree):
    resolution = resolve_command(tree["commands"], ["help"])
    assert resolution.command is None
    assert resolution.help_requested is True


def test_nested_help_literals(tree):
    resolution = resolve_command(tree["commands"], ["help", "help", "greet"])
    assert resolution.command is tree["greet"]
    assert resolution.help_requested is True


def test_help_literal_after_command_is_a_value(tree):
    resolution = resolve_command(tree["commands"], ["greet", "help"])
    assert resolution.command is tree["greet"]
    assert resolution.tokens == ["help"]
    assert resolution.help_requested is False


def test_input_tokens_are_not_mutated(tree):
    tokens = ["db", "migrate", "--dry"]
    resolve_command(tree["commands"], tokens)
    assert tokens == ["db", "migrate", "--dry"]
