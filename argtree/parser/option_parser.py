# Argtree CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Parses the tokens left after command resolution into a typed option map.

Token classes, checked in order:

1. `--help` / `-h`: stop, return `ParseSignal.HELP`.
2. `--version` / `-v`: stop, return `ParseSignal.VERSION`.
3. a bare token: fills the next positional option; dropped when none is left.
4. a flag: `--name=value` or `--name value`, looked up by canonical name or alias.

Malformed or invalid values raise as soon as they are met. Missing required
options and unrecognized flags are collected over the whole scan and raised once
at the end, missing options first.

Boolean flags accept `--flag`, `--flag=<literal>` and `--flag <literal>`, where a
literal is `true`, `false`, `1` or `0` in any case. A bare word after a boolean
flag is left alone for the next positional.
"""
from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING, Any, Sequence

from argtree.exceptions import (
    AboveMaxError,
    BelowMinError,
    EnumViolationError,
    InvalidBooleanSyntaxError,
    InvalidIntegerError,
    InvalidNumberSyntaxError,
    InvalidNumberValueError,
    InvalidStringSyntaxError,
    MissingRequiredError,
    UnrecognizedOptionsError,
)
from argtree.logger import logger
from argtree.parser.option import (
    BooleanOption,
    NamedOption,
    NumberOption,
    PositionalOption,
    StringOption,
)
from argtree.parser.parser_types import ParseSignal
from argtree.parser.utils import (
    HELP_FLAGS,
    VERSION_FLAGS,
    coerce_bool_literal,
    coerce_number,
    is_flag,
)

if TYPE_CHECKING:
    from argtree.command import Command


def _read_boolean(
    option: BooleanOption, name: str, embedded: str | None, following: str | None
) -> tuple[bool, bool]:
    if embedded is not None:
        if embedded == "":
            return True, False
        value = coerce_bool_literal(embedded)
        if value is None:
            raise InvalidBooleanSyntaxError(name)
        return value, False
    if following is None or is_flag(following):
        return True, False
    value = coerce_bool_literal(following)
    if value is None:
        return True, False
    return value, True


def _read_string(
    option: StringOption, name: str, embedded: str | None, following: str | None
) -> tuple[str, bool]:
    if embedded is not None:
        value, consumed = embedded, False
    elif following is not None:
        value, consumed = following, True
    else:
        raise InvalidStringSyntaxError(name)
    if option.choices is not None and value not in option.choices:
        raise EnumViolationError(name, value, option.choices)
    return value, consumed


def _read_number(
    option: NumberOption, name: str, embedded: str | None, following: str | None
) -> tuple[int | float, bool]:
    if embedded is not None:
        text, consumed = embedded, False
    elif following is not None:
        text, consumed = following, True
    else:
        raise InvalidNumberSyntaxError(name)

    value = coerce_number(text)
    if value is None:
        raise InvalidNumberValueError(name, text)
    if option.is_int:
        if not float(value).is_integer():
            raise InvalidIntegerError(name, text)
        value = int(value)
    if option.min_value is not None and value < option.min_value:
        raise BelowMinError(name, text, option.min_value)
    if option.max_value is not None and value > option.max_value:
        raise AboveMaxError(name, text, option.max_value)
    return value, consumed


def _read_value(
    option: NamedOption, name: str, embedded: str | None, following: str | None
) -> tuple[Any, bool]:
    """Return the option's value and whether `following` was consumed for it."""
    if isinstance(option, BooleanOption):
        return _read_boolean(option, name, embedded, following)
    if isinstance(option, StringOption):
        return _read_string(option, name, embedded, following)
    if isinstance(option, NumberOption):
        return _read_number(option, name, embedded, following)
    raise TypeError(f"Unsupported option kind: {option.kind}")


def _names_of(option: NamedOption | PositionalOption) -> tuple[str, ...]:
    if isinstance(option, NamedOption):
        return option.all_names
    return (option.display_name,)


def parse_options(
    command: Command,
    tokens: Sequence[str],
    omit_undefined: bool = False,
) -> dict[str, Any] | ParseSignal:
    """
    Parse `tokens` against the options `command` declares.

    Args:
        command (Command): The resolved command.
        tokens (Sequence[str]): Tokens with the command path already removed.
        omit_undefined (bool): Leave out keys whose final value is None.

    Returns:
        dict[str, Any] | ParseSignal: Declaration key to value, or a signal when
        help or version output was requested.

    Raises:
        OptionSyntaxError: A matched flag is missing its value or it is malformed.
        OptionValueError: A value is not a number, out of bounds or not allowed.
        MissingRequiredError: Required options remain undefined after defaults.
        UnrecognizedOptionsError: Flags matching no declared option were passed.
    """
    positionals: deque[tuple[str, PositionalOption]] = deque(command.positionals)
    named: dict[str, tuple[str, NamedOption]] = {
        name: (key, option)
        for key, option in command.named_options
        for name in option.all_names
    }
    captured: dict[str, Any] = {}
    unrecognized: list[str] = []

    index = 0
    while index < len(tokens):
        token = tokens[index]
        following = tokens[index + 1] if index + 1 < len(tokens) else None
        name, has_value, embedded_text = token.partition("=")
        embedded = embedded_text if has_value else None

        if name in HELP_FLAGS:
            return ParseSignal.HELP
        if name in VERSION_FLAGS:
            return ParseSignal.VERSION

        if not is_flag(token):
            if not positionals:
                logger.debug("[%s] Dropping extra positional token '%s'", command.name, token)
                index += 1
                continue
            key, option = positionals.popleft()
            if option.choices is not None and token not in option.choices:
                raise EnumViolationError(option.display_name, token, option.choices)
            captured[key] = token
            index += 1
            continue

        match = named.get(name)
        if match is None:
            unrecognized.append(name)
            index += 1
            continue

        key, option = match
        value, consumed_following = _read_value(option, name, embedded, following)
        captured[key] = value
        index += 2 if consumed_following else 1

    result: dict[str, Any] = {}
    missing: list[tuple[str, ...]] = []
    for key, option in command.options.items():
        value = captured.get(key)
        if value is None:
            value = option.default_value
            if isinstance(option, NumberOption) and option.is_int and value is not None:
                value = int(value)
        if value is not None or not omit_undefined:
            result[key] = value
        if option.is_required and value is None:
            missing.append(_names_of(option))

    if missing:
        raise MissingRequiredError(command.name, missing)
    if unrecognized:
        raise UnrecognizedOptionsError(command.name, unrecognized)
    return result
