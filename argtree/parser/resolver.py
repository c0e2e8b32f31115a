# Argtree CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Maps a flat token stream onto a position in the command tree.

`resolve_command()` scans the tokens for candidates (see `scanner`), matches the
leading candidates against the tree level by level and removes every token that
named a command. The deepest command reachable from the leading run of
candidates wins:

    db = command("db", subcommands=[command("migrate", handler=migrate)])
    resolve_command([db], ["db", "migrate", "--dry"])
    # Resolution(command=migrate, tokens=["--dry"])

A leading `help` literal is not matched against the tree. It is dropped, the
rest of the stream is resolved as usual, and the result is flagged as a help
request for whatever it resolved to.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

from argtree.exceptions import UnknownCommandError, UnknownSubcommandError
from argtree.logger import logger
from argtree.parser.parser_types import Candidate, Resolution
from argtree.parser.scanner import scan_candidates
from argtree.parser.utils import HELP_COMMAND, remove_at

if TYPE_CHECKING:
    from argtree.command import Command


def _consume(
    candidates: Sequence[Candidate], tokens: Sequence[str]
) -> tuple[list[Candidate], list[str]]:
    """
    Remove the first candidate's token from `tokens`.

    Returns the remaining candidates re-indexed against the reduced token list,
    together with that list.
    """
    consumed = candidates[0]
    reduced = remove_at(tokens, consumed.index)
    remaining = [
        Candidate(c.text, c.index - 1 if c.index > consumed.index else c.index)
        for c in candidates[1:]
    ]
    return remaining, reduced


def _find(commands: Sequence[Command], token: str) -> Command | None:
    return next((command for command in commands if command.matches(token)), None)


def _descend(
    commands: Sequence[Command],
    candidates: list[Candidate],
    tokens: list[str],
    path: tuple[str, ...],
) -> Resolution:
    token = candidates[0].text
    matched = _find(commands, token)
    if matched is None:
        if path:
            raise UnknownSubcommandError(" ".join(path), token)
        raise UnknownCommandError(token)

    candidates, tokens = _consume(candidates, tokens)
    if not candidates or not matched.subcommands:
        return Resolution(matched, tokens)
    return _descend(matched.subcommands, candidates, tokens, (*path, matched.name))


def resolve_command(commands: Sequence[Command], tokens: Sequence[str]) -> Resolution:
    """
    Resolve the command named by `tokens`.

    Args:
        commands (Sequence[Command]): Top-level commands of a validated tree.
        tokens (Sequence[str]): Raw tokens, without the program name.

    Returns:
        Resolution: The matched command (None when no command path is present),
        the tokens left over for option parsing, and whether `help` was used.

    Raises:
        UnknownCommandError: The first candidate matches no top-level command.
        UnknownSubcommandError: A candidate below a matched command matches none
            of its subcommands.
    """
    tokens = list(tokens)
    candidates = scan_candidates(tokens)
    help_requested = False
    while candidates and candidates[0].text == HELP_COMMAND:
        help_requested = True
        tokens = remove_at(tokens, candidates[0].index)
        candidates = scan_candidates(tokens)

    if not candidates:
        return Resolution(None, tokens, help_requested)

    resolution = _descend(commands, candidates, tokens, ())
    logger.debug(
        "Resolved command '%s' (help=%s), remaining tokens: %s",
        resolution.command.name if resolution.command else None,
        help_requested,
        resolution.tokens,
    )
    return Resolution(resolution.command, resolution.tokens, help_requested)
