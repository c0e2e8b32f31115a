# Argtree CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Extracts command-path candidates from a raw token stream.

Option arity is unknown at this point because the command, and therefore its
option kinds, has not been resolved yet. The scanner therefore assumes:

- `--help`, `-h`, `--version`, `-v` take a following boolean literal if there is
  one, and nothing otherwise;
- any other flag without `=` takes the following token as its value;
- a flag with `=` carries its own value.

A boolean flag followed by a bare word is the known blind spot: `--dry migrate`
reads `migrate` as the value of `--dry`, not as a command path segment.
"""
from typing import Sequence

from argtree.logger import logger
from argtree.parser.parser_types import Candidate
from argtree.parser.utils import RESERVED_FLAGS, is_boolean_literal, is_flag


def scan_candidates(tokens: Sequence[str]) -> list[Candidate]:
    """Return the tokens that may name command-path segments, in input order."""
    candidates: list[Candidate] = []
    index = 0
    while index < len(tokens):
        token = tokens[index]
        following = tokens[index + 1] if index + 1 < len(tokens) else None
        if token in RESERVED_FLAGS:
            index += 2 if is_boolean_literal(following) else 1
        elif is_flag(token):
            index += 1 if "=" in token else 2
        else:
            candidates.append(Candidate(token, index))
            index += 1
    logger.debug("Scanned candidates: %s", [c.text for c in candidates])
    return candidates
