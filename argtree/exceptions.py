# Argtree CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used in the Argtree CLI framework.

Errors are grouped by the phase that raises them:

- definition time: the command tree or an option set is malformed,
- resolution: the token stream names a command that does not exist,
- option parsing: a flag value is malformed or semantically invalid,
- aggregation: every missing or unrecognized option found in one pass.

Exception Hierarchy:
- ArgtreeError
    ├── StructuralDefinitionError
    ├── ConfigError
    ├── ResolutionError
    │   ├── UnknownCommandError
    │   └── UnknownSubcommandError
    ├── OptionSyntaxError
    │   ├── InvalidBooleanSyntaxError
    │   ├── InvalidStringSyntaxError
    │   └── InvalidNumberSyntaxError
    ├── OptionValueError
    │   ├── InvalidNumberValueError
    │   ├── InvalidIntegerError
    │   ├── BelowMinError
    │   ├── AboveMaxError
    │   └── EnumViolationError
    └── AggregateOptionError
        ├── MissingRequiredError
        └── UnrecognizedOptionsError

All of them are raised to the nearest caller. `Argtree.main()` prints the
message and exits with code 1; `simulate()` returns the error as data.
"""
from __future__ import annotations

from typing import Any, Sequence


class ArgtreeError(Exception):
    """Base exception for the Argtree framework."""


class StructuralDefinitionError(ArgtreeError):
    """Raised when a command or option definition violates naming or structure rules."""


class ConfigError(ArgtreeError):
    """Raised when a configuration file references something that cannot be loaded."""


class ResolutionError(ArgtreeError):
    """Raised when the token stream cannot be mapped onto the command tree."""

    def __init__(self, message: str, token: str):
        super().__init__(message)
        self.token = token


class UnknownCommandError(ResolutionError):
    """Raised when the first command-path token matches no top-level command."""

    def __init__(self, token: str):
        super().__init__(
            f"Unknown command: '{token}'.\nType '--help' to get help on the cli.",
            token,
        )


class UnknownSubcommandError(ResolutionError):
    """Raised when a token below an already matched command matches no subcommand."""

    def __init__(self, parent_path: str, token: str):
        super().__init__(
            f"Unknown command: {parent_path} {token}.\n"
            f"Type '{parent_path} --help' to get the help on command.",
            token,
        )
        self.parent_path = parent_path


class OptionSyntaxError(ArgtreeError):
    """Raised when a matched flag is missing its value or has a malformed one."""

    def __init__(self, message: str, option_name: str):
        super().__init__(message)
        self.option_name = option_name


class InvalidBooleanSyntaxError(OptionSyntaxError):
    def __init__(self, option_name: str):
        super().__init__(
            f"Invalid syntax: boolean type argument '{option_name}' must have its value "
            f"passed in the following formats: {option_name}=<value> | "
            f"{option_name} <value> | {option_name}.\nAllowed values: true, false, 0, 1",
            option_name,
        )


class InvalidStringSyntaxError(OptionSyntaxError):
    def __init__(self, option_name: str):
        super().__init__(
            f"Invalid syntax: string type argument '{option_name}' must have its value "
            f"passed in the following formats: {option_name}=<value> | "
            f"{option_name} <value>",
            option_name,
        )


class InvalidNumberSyntaxError(OptionSyntaxError):
    def __init__(self, option_name: str):
        super().__init__(
            f"Invalid syntax: number type argument '{option_name}' must have its value "
            f"passed in the following formats: {option_name}=<value> | "
            f"{option_name} <value>",
            option_name,
        )


class OptionValueError(ArgtreeError):
    """Raised when a flag has a value that is well formed but not acceptable."""

    def __init__(self, message: str, option_name: str, value: Any):
        super().__init__(message)
        self.option_name = option_name
        self.value = value


class InvalidNumberValueError(OptionValueError):
    def __init__(self, option_name: str, value: str):
        super().__init__(
            f"Invalid value: number type argument '{option_name}' expects a number "
            f"as an input, got: {value}",
            option_name,
            value,
        )


class InvalidIntegerError(OptionValueError):
    def __init__(self, option_name: str, value: str):
        super().__init__(
            f"Invalid value: number type argument '{option_name}' expects an integer "
            f"as an input, got: {value}",
            option_name,
            value,
        )


class BelowMinError(OptionValueError):
    def __init__(self, option_name: str, value: str, bound: float):
        super().__init__(
            f"Invalid value: number type argument '{option_name}' expects minimal "
            f"value of {bound} as an input, got: {value}",
            option_name,
            value,
        )
        self.bound = bound


class AboveMaxError(OptionValueError):
    def __init__(self, option_name: str, value: str, bound: float):
        super().__init__(
            f"Invalid value: number type argument '{option_name}' expects maximal "
            f"value of {bound} as an input, got: {value}",
            option_name,
            value,
        )
        self.bound = bound


class EnumViolationError(OptionValueError):
    def __init__(self, option_name: str, value: str | None, allowed: Sequence[str]):
        super().__init__(
            f"Invalid value: value for the argument '{option_name}' must be either one "
            f"of the following: {', '.join(allowed)}; Received: {value}",
            option_name,
            value,
        )
        self.allowed = list(allowed)


class AggregateOptionError(ArgtreeError):
    """Raised once per parse with every violation of one kind found in the token scan."""

    def __init__(self, message: str, command_name: str):
        super().__init__(message)
        self.command_name = command_name


class MissingRequiredError(AggregateOptionError):
    """Raised when required options are still undefined after defaults are applied."""

    def __init__(self, command_name: str, missing: Sequence[Sequence[str]]):
        entries = []
        for names in missing:
            name, *aliases = names
            entries.append(f"{name} [{', '.join(aliases)}]" if aliases else name)
        super().__init__(
            f"Command '{command_name}' is missing following required options: "
            f"{', '.join(entries)}",
            command_name,
        )
        self.missing = [tuple(names) for names in missing]


class UnrecognizedOptionsError(AggregateOptionError):
    """Raised when flags that match no declared option were passed."""

    def __init__(self, command_name: str, unrecognized: Sequence[str]):
        super().__init__(
            f"Unrecognized options for command '{command_name}': "
            f"{', '.join(unrecognized)}",
            command_name,
        )
        self.unrecognized = list(unrecognized)
