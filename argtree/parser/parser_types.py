# Argtree CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Value types passed between the scanner, the resolver and the option parser.

- `Candidate`: a token that may name a command-path segment, with its index in
  the token list it was scanned from.
- `Resolution`: the command selected for a token stream and the tokens left once
  the command path has been removed.
- `ParseSignal`: returned by the option parser instead of an option map when
  `--help` or `--version` cut the parse short.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from argtree.command import Command


@dataclass(frozen=True)
class Candidate:
    """A positional-looking token and its position in the current token list."""

    text: str
    index: int


@dataclass(frozen=True)
class Resolution:
    """Outcome of command resolution.

    `command` is None when no command path was present (global scope).
    `help_requested` is True when the path was introduced by the `help` literal.
    """

    command: Command | None
    tokens: list[str] = field(default_factory=list)
    help_requested: bool = False


class ParseSignal(Enum):
    """Sentinels that short-circuit option parsing."""

    HELP = "help"
    VERSION = "version"

    def __str__(self) -> str:
        return self.value
