# Argtree CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Presentation events emitted by `Argtree` and the handlers that present them.

`Argtree` never prints by itself. Whenever an invocation ends in help or version
output it builds one of the events below and awaits its event handler:

- `GlobalHelpEvent`: no command was resolved, or top-level help was asked for.
- `CommandHelpEvent`: help for one command (`cli db --help`, `cli help db`, or a
  command without a handler).
- `VersionEvent`: `--version` / `-v`.

`ConsoleEventHandler` renders them with Rich. `NoopEventHandler` only records
them, which is what tests and embedding applications usually want.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Union

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from argtree.command import Command
from argtree.console import console as shared_console
from argtree.logger import logger
from argtree.parser.option import (
    BooleanOption,
    NamedOption,
    NumberOption,
    PositionalOption,
    StringOption,
)
from argtree.tree import CommandTree
from argtree.utils import ensure_async, get_program_invocation


@dataclass(frozen=True)
class GlobalHelpEvent:
    commands: tuple[Command, ...]
    tree: CommandTree
    type: str = field(default="global_help", init=False)


@dataclass(frozen=True)
class CommandHelpEvent:
    command: Command
    tree: CommandTree
    type: str = field(default="command_help", init=False)


@dataclass(frozen=True)
class VersionEvent:
    type: str = field(default="version", init=False)


Event = Union[GlobalHelpEvent, CommandHelpEvent, VersionEvent]


def _value_hint(option: NamedOption | PositionalOption) -> str:
    if isinstance(option, (StringOption, PositionalOption)) and option.choices:
        return "{" + "|".join(option.choices) + "}"
    if isinstance(option, StringOption):
        return "<string>"
    if isinstance(option, NumberOption):
        return "<integer>" if option.is_int else "<number>"
    if isinstance(option, BooleanOption):
        return "[true|false]"
    return f"<{option.display_name}>"


def _option_notes(option: NamedOption | PositionalOption) -> str:
    notes = [escape(option.description)] if option.description else []
    if option.is_required:
        notes.append("[warning](required)[/]")
    if option.default_value is not None:
        notes.append(f"[muted]\\[default: {escape(str(option.default_value))}][/]")
    if isinstance(option, NumberOption):
        if option.min_value is not None:
            notes.append(f"[muted]\\[min: {option.min_value:g}][/]")
        if option.max_value is not None:
            notes.append(f"[muted]\\[max: {option.max_value:g}][/]")
    return " ".join(notes)


def _grid() -> Table:
    table = Table(box=None, show_header=False, pad_edge=False, padding=(0, 2))
    table.add_column(no_wrap=True)
    table.add_column()
    return table


class ConsoleEventHandler:
    """
    Render help and version events to a Rich console.

    Args:
        console (Console | None): Output console. Defaults to the shared Argtree console.
        program_name (str | None): Shown in usage lines. Defaults to the invoked script.
        version (str | Callable | None): Printed, or called, for `VersionEvent`.
        help (str | Callable | None): Replaces the generated global help.
    """

    def __init__(
        self,
        console: Console | None = None,
        program_name: str | None = None,
        version: str | Callable[..., Any] | None = None,
        help: str | Callable[..., Any] | None = None,
    ) -> None:
        self.console: Console = console or shared_console
        self.program_name: str = program_name or get_program_invocation()
        self.version = version
        self.help = help

    async def __call__(self, event: Event) -> Any:
        logger.debug("Presenting %s", type(event).__name__)
        if isinstance(event, GlobalHelpEvent):
            if self.help is not None:
                return await self._print_or_call(self.help)
            return self.render_global_help(event.commands)
        if isinstance(event, CommandHelpEvent):
            if event.command.help is not None:
                return await self._print_or_call(event.command.help)
            return self.render_command_help(event.command, event.tree)
        if isinstance(event, VersionEvent):
            if self.version is None:
                self.console.print("[muted]No version information available.[/]")
                return None
            return await self._print_or_call(self.version)
        raise TypeError(f"Unsupported event: {event!r}")

    async def _print_or_call(self, target: str | Callable[..., Any]) -> Any:
        if isinstance(target, str):
            self.console.print(target, markup=False, highlight=False)
            return None
        return await ensure_async(target)()

    def render_global_help(self, commands: tuple[Command, ...]) -> None:
        self.console.print(
            f"[usage]usage:[/] {escape(self.program_name)} <command> \\[options]\n"
        )
        visible = [command for command in commands if not command.hidden]
        if visible:
            self.console.print("[bold]commands:[/bold]")
            table = _grid()
            for command in visible:
                names = f"[command]{escape(command.name)}[/]"
                if command.aliases:
                    names += f" [alias]({escape(', '.join(command.aliases))})[/]"
                table.add_row(names, escape(command.description))
            self.console.print(table)
        self.console.print(
            f"\n[bold]tip:[/bold] run '{escape(self.program_name)} <command> --help' "
            "for details on a command."
        )

    def render_command_help(self, command: Command, tree: CommandTree) -> None:
        path = tree.path_of(command) if command in tree else command.name
        usage = [escape(self.program_name), escape(path)]
        if command.subcommands:
            usage.append("<subcommand>")
        if command.named_options:
            usage.append("\\[options]")
        for _, option in command.positionals:
            name = escape(option.display_name)
            usage.append(f"<{name}>" if option.is_required else f"\\[{name}]")
        self.console.print(f"[usage]usage:[/] {' '.join(usage)}\n")

        text = command.long_description or command.description
        if text:
            self.console.print(escape(text) + "\n")
        if command.aliases:
            self.console.print(f"[bold]aliases:[/bold] {escape(', '.join(command.aliases))}\n")

        subcommands = [sub for sub in command.subcommands if not sub.hidden]
        if subcommands:
            self.console.print("[bold]subcommands:[/bold]")
            table = _grid()
            for sub in subcommands:
                table.add_row(f"[command]{escape(sub.name)}[/]", escape(sub.description))
            self.console.print(table)

        positionals = [option for _, option in command.positionals if not option.is_hidden]
        if positionals:
            self.console.print("[bold]positional:[/bold]")
            table = _grid()
            for option in positionals:
                table.add_row(
                    f"[option]{escape(option.display_name)}[/] {escape(_value_hint(option))}",
                    _option_notes(option),
                )
            self.console.print(table)

        named = [option for _, option in command.named_options if not option.is_hidden]
        self.console.print("[bold]options:[/bold]")
        table = _grid()
        for option in named:
            table.add_row(
                f"[option]{escape(', '.join(option.all_names))}[/] "
                f"{escape(_value_hint(option))}",
                _option_notes(option),
            )
        table.add_row("[option]-h, --help[/]", "Show this help message.")
        table.add_row("[option]-v, --version[/]", "Show the program version.")
        self.console.print(table)


class NoopEventHandler:
    """Record events without presenting them."""

    def __init__(self) -> None:
        self.events: list[Event] = []

    async def __call__(self, event: Event) -> None:
        self.events.append(event)

    @property
    def last(self) -> Event | None:
        return self.events[-1] if self.events else None
