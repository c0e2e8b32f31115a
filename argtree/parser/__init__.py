"""
Argtree CLI Framework

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .option import (
    BooleanOption,
    NumberOption,
    Option,
    PositionalOption,
    StringOption,
    boolean,
    number,
    positional,
    string,
)
from .option_parser import parse_options
from .parser_types import Candidate, ParseSignal, Resolution
from .resolver import resolve_command
from .scanner import scan_candidates

__all__ = [
    "BooleanOption",
    "NumberOption",
    "Option",
    "PositionalOption",
    "StringOption",
    "boolean",
    "number",
    "positional",
    "string",
    "parse_options",
    "Candidate",
    "ParseSignal",
    "Resolution",
    "resolve_command",
    "scan_candidates",
]
