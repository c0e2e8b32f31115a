# Argtree CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Main class for running an Argtree command tree.

`Argtree` owns a validated `CommandTree` and turns one token list into one
outcome:

    Start ─┬─ --help / -h ────────────► command help or global help
           ├─ --version / -v ─────────► version
           └─ resolve ─┬─ unknown ────► UnknownCommandError / UnknownSubcommandError
                       ├─ nothing ────► global help
                       ├─ help <cmd> ─► command help
                       └─ command ─► parse options ─┬─ help / version
                                                     ├─ MissingRequired / Unrecognized
                                                     └─ before hooks → transform
                                                        → handler → after hooks

Help and version outcomes are handed to the injected event handler; nothing
else in the pipeline prints. `main()` is the process-level wrapper that maps
the outcome to an exit code.

`simulate()` runs only the option-parsing stage for one command against a
shell-style string and reports the outcome as data, for use in tests.
"""
from __future__ import annotations

import shlex
import sys
from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, Sequence, Union

from argtree.command import Command
from argtree.console import error_console
from argtree.debug import register_debug_hooks
from argtree.event_handler import (
    CommandHelpEvent,
    ConsoleEventHandler,
    GlobalHelpEvent,
    VersionEvent,
)
from argtree.hook_manager import Hook, HookManager, HookType
from argtree.logger import logger
from argtree.parser.option_parser import parse_options
from argtree.parser.parser_types import ParseSignal
from argtree.parser.resolver import resolve_command
from argtree.parser.utils import HELP_FLAGS, VERSION_FLAGS, is_flag
from argtree.protocols import EventHandler
from argtree.tree import CommandTree, build_tree
from argtree.utils import ensure_async


def _find_global_flag(tokens: Sequence[str], flags: frozenset[str]) -> bool:
    """
    Whether the first occurrence of one of `flags` stands on its own.

    An occurrence directly after a flag without `=` is taken to be that flag's
    value and does not count.
    """
    index = next((i for i, token in enumerate(tokens) if token in flags), None)
    if index is None:
        return False
    if index == 0:
        return True
    previous = tokens[index - 1]
    return not (is_flag(previous) and "=" not in previous)


class Argtree:
    """
    Runs a command tree against command-line tokens.

    Args:
        commands (Iterable[Command] | CommandTree): The command forest.
        program_name (str | None): Used in help output.
        version (str | Callable | None): Version string, or a callable printing it.
        help (str | Callable | None): Replaces the generated global help.
        omit_undefined (bool): Leave keys with no value out of option maps.
        hooks (HookManager | None): Before/after hooks shared by all commands.
        event_handler (EventHandler | None): Presents help and version events.
            Defaults to a `ConsoleEventHandler`.
        debug_hooks (bool): Register logging hooks around every handler.

    Raises:
        StructuralDefinitionError: If the command forest is invalid.
    """

    def __init__(
        self,
        commands: Iterable[Command] | CommandTree,
        *,
        program_name: str | None = None,
        version: str | Callable[..., Any] | None = None,
        help: str | Callable[..., Any] | None = None,
        omit_undefined: bool = False,
        hooks: HookManager | None = None,
        event_handler: EventHandler | None = None,
        debug_hooks: bool = False,
    ) -> None:
        self.tree: CommandTree = build_tree(commands)
        self.program_name = program_name
        self.version = version
        self.omit_undefined = omit_undefined
        self.hooks: HookManager = hooks or HookManager()
        if debug_hooks:
            register_debug_hooks(self.hooks)
        self.event_handler: EventHandler = event_handler or ConsoleEventHandler(
            program_name=program_name, version=version, help=help
        )

    @property
    def commands(self) -> tuple[Command, ...]:
        return self.tree.commands

    def register_hook(self, hook_type: HookType | str, hook: Hook) -> None:
        self.hooks.register(hook_type, hook)

    async def _global_help(self) -> Any:
        logger.debug("Routing to global help.")
        return await self.event_handler(GlobalHelpEvent(self.tree.commands, self.tree))

    async def _command_help(self, command: Command | None) -> Any:
        if command is None:
            return await self._global_help()
        logger.debug("Routing to help for '%s'.", self.tree.path_of(command))
        return await self.event_handler(CommandHelpEvent(command, self.tree))

    async def _version(self) -> Any:
        logger.debug("Routing to version.")
        return await self.event_handler(VersionEvent())

    async def _invoke(self, command: Command, options: dict[str, Any]) -> Any:
        assert command.handler is not None, "handler should be set before invoking"
        logger.info("Invoking '%s'.", self.tree.path_of(command))
        await self.hooks.trigger(HookType.BEFORE, command)
        if command.transform is not None:
            options = await ensure_async(command.transform)(options)
        result = await ensure_async(command.handler)(options)
        await self.hooks.trigger(HookType.AFTER, command)
        return result

    async def run(self, args: Sequence[str] | None = None) -> Any:
        """
        Resolve, parse and run one invocation.

        Args:
            args (Sequence[str] | None): Tokens without the program name.
                Defaults to `sys.argv[1:]`.

        Returns:
            Any: The handler's return value, or the event handler's return value
            when the invocation ended in help or version output.

        Raises:
            ResolutionError: The token stream names an unknown command.
            OptionSyntaxError | OptionValueError: A flag value is invalid.
            AggregateOptionError: Required options are missing or flags unrecognized.
        """
        tokens = list(sys.argv[1:] if args is None else args)
        if not tokens:
            return await self._global_help()

        if _find_global_flag(tokens, HELP_FLAGS):
            resolution = resolve_command(self.tree.commands, tokens)
            return await self._command_help(resolution.command)

        if _find_global_flag(tokens, VERSION_FLAGS):
            return await self._version()

        resolution = resolve_command(self.tree.commands, tokens)
        if resolution.help_requested or resolution.command is None:
            return await self._command_help(resolution.command)

        command = resolution.command
        options = parse_options(command, resolution.tokens, self.omit_undefined)
        if options is ParseSignal.HELP:
            return await self._command_help(command)
        if options is ParseSignal.VERSION:
            return await self._version()

        if command.handler is None:
            return await self._command_help(command)
        return await self._invoke(command, options)

    async def main(self, args: Sequence[str] | None = None) -> None:
        """
        Run one invocation and exit the process.

        Exits with 0 on completion. Any exception is reported on stderr and
        exits with 1.
        """
        try:
            await self.run(args)
        except Exception as error:
            logger.debug("Invocation failed: %s", error, exc_info=True)
            error_console.print(str(error), style="error", markup=False, highlight=False)
            sys.exit(1)
        sys.exit(0)


@dataclass(frozen=True)
class HandlerResult:
    options: Any
    type: str = field(default="handler", init=False)


@dataclass(frozen=True)
class HelpResult:
    type: str = field(default="help", init=False)


@dataclass(frozen=True)
class VersionResult:
    type: str = field(default="version", init=False)


@dataclass(frozen=True)
class ErrorResult:
    error: Exception
    type: str = field(default="error", init=False)


SimulationResult = Union[HandlerResult, HelpResult, VersionResult, ErrorResult]


async def simulate(
    command: Command, args: str, omit_undefined: bool = False
) -> SimulationResult:
    """
    Parse a shell-style argument string against a single command.

    No command resolution takes place and no handler or hook runs; the
    command's transform is applied to the parsed options.

    Example:
        result = await simulate(greet, "--name 'Jane Doe' --loud")
        assert result == HandlerResult({"name": "Jane Doe", "loud": True})
    """
    try:
        options = parse_options(command, shlex.split(args), omit_undefined)
        if options is ParseSignal.HELP:
            return HelpResult()
        if options is ParseSignal.VERSION:
            return VersionResult()
        if command.transform is not None:
            options = await ensure_async(command.transform)(options)
        return HandlerResult(options)
    except Exception as error:
        return ErrorResult(error)
