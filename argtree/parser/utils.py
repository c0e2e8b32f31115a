# Argtree CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Token-level helpers shared by the scanner, the resolver and the option parser.

Functions:
- generate_prefix: Turn a bare option name into its canonical flag form.
- remove_at: Return a copy of a token list without the element at an index.
- is_flag: Whether a token uses the flag prefix.
- coerce_bool_literal: Read `true` / `false` / `1` / `0` (any case).
- coerce_number: Read a numeric token as `int` or `float`.
"""
import re
from typing import Sequence

FLAG_PREFIX = "-"
HELP_FLAGS = frozenset({"--help", "-h"})
VERSION_FLAGS = frozenset({"--version", "-v"})
RESERVED_FLAGS = HELP_FLAGS | VERSION_FLAGS
BOOLEAN_LITERALS = {"true": True, "1": True, "false": False, "0": False}
RESERVED_COMMAND_NAMES = frozenset({"help", *BOOLEAN_LITERALS})
HELP_COMMAND = "help"
NUMBER_PATTERN = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?", re.ASCII)


def generate_prefix(name: str) -> str:
    """Return `-x` for a single character, `--name` otherwise; prefixed names pass through."""
    if name.startswith(FLAG_PREFIX):
        return name
    return f"--{name}" if len(name) > 1 else f"-{name}"


def remove_at(tokens: Sequence[str], index: int) -> list[str]:
    return [*tokens[:index], *tokens[index + 1 :]]


def is_flag(token: str | None) -> bool:
    return token is not None and token.startswith(FLAG_PREFIX)


def is_boolean_literal(token: str | None) -> bool:
    return token is not None and token.lower() in BOOLEAN_LITERALS


def coerce_bool_literal(value: str) -> bool | None:
    """Return the boolean a literal spells, or None if it is not a boolean literal."""
    return BOOLEAN_LITERALS.get(value.lower())


def coerce_number(value: str) -> int | float | None:
    """
    Convert a token to a number.

    Only plain ASCII decimals with an optional exponent are numbers. Integral
    text gives an `int`, anything else a `float`. Returns None otherwise.
    """
    text = value.strip()
    if not NUMBER_PATTERN.fullmatch(text):
        return None
    try:
        return int(text)
    except ValueError:
        return float(text)
