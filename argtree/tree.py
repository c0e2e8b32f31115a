# Argtree CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Assembles validated commands into an immutable `CommandTree`.

Individual commands validate themselves when constructed (see
`argtree.command`). The tree adds the checks that need more than one node:

- no two siblings share a name or alias, at every level,
- the same `Command` instance is mounted at most once.

Parent relations are kept in a table owned by the tree, keyed by node identity,
and are never stored on the nodes themselves. The table is filled top-down
while the tree is built and is read-only afterwards.

`commands_info()` produces the serialisable description of a forest used for
documentation and round-tripping through configuration files.
"""
from __future__ import annotations

from typing import Any, Iterable, Iterator

from argtree.command import Command
from argtree.exceptions import StructuralDefinitionError
from argtree.logger import logger

PATH_SEPARATOR = " "


class CommandTree:
    """
    A validated command forest with parent lookup.

    Attributes:
        commands (tuple[Command, ...]): Top-level commands in declaration order.
    """

    def __init__(self, commands: Iterable[Command]) -> None:
        self.commands: tuple[Command, ...] = tuple(commands)
        self._nodes: dict[int, Command] = {}
        self._parents: dict[int, Command | None] = {}
        self._register_level(self.commands, None)
        logger.debug("Built command tree with %d commands.", len(self._nodes))

    def _register_level(self, siblings: tuple[Command, ...], parent: Command | None) -> None:
        owners: dict[str, Command] = {}
        for command in siblings:
            if not isinstance(command, Command):
                raise StructuralDefinitionError(
                    f"Can't build command tree - expected Command, got {type(command).__name__}"
                )
            if id(command) in self._nodes:
                raise StructuralDefinitionError(
                    f"Can't define command '{self.path_of(command)}': the same command "
                    "is mounted more than once!"
                )
            self._nodes[id(command)] = command
            self._parents[id(command)] = parent
            path = self.path_of(command)
            for index, name in enumerate(command.all_names):
                occupier = owners.get(name)
                if occupier is None:
                    continue
                what = "name" if index == 0 else f"alias '{name}'"
                raise StructuralDefinitionError(
                    f"Can't define command '{path}': {what} is already in use by "
                    f"command '{self.path_of(occupier)}'!"
                )
            for name in command.all_names:
                owners[name] = command

        for command in siblings:
            if command.subcommands:
                self._register_level(command.subcommands, command)

    def __iter__(self) -> Iterator[Command]:
        return iter(self.commands)

    def __len__(self) -> int:
        return len(self.commands)

    def __contains__(self, command: object) -> bool:
        return id(command) in self._nodes

    def parent_of(self, command: Command) -> Command | None:
        """Return the parent of a mounted command, or None for a top-level one."""
        if id(command) not in self._parents:
            raise KeyError(f"Command '{command.name}' is not part of this tree")
        return self._parents[id(command)]

    def lineage(self, command: Command) -> list[Command]:
        """Return the commands from the root down to `command`."""
        chain = [command]
        parent = self._parents.get(id(command))
        while parent is not None:
            chain.append(parent)
            parent = self._parents.get(id(parent))
        return list(reversed(chain))

    def path_of(self, command: Command) -> str:
        """Full invocation path, e.g. `db migrate`."""
        return PATH_SEPARATOR.join(node.name for node in self.lineage(command))

    def walk(self) -> Iterator[Command]:
        """Yield every command depth-first, parents before children."""

        def _walk(commands: tuple[Command, ...]) -> Iterator[Command]:
            for command in commands:
                yield command
                yield from _walk(command.subcommands)

        return _walk(self.commands)


def build_tree(commands: Iterable[Command] | CommandTree) -> CommandTree:
    """Validate a command forest; an existing tree is returned unchanged."""
    if isinstance(commands, CommandTree):
        return commands
    return CommandTree(commands)


def commands_info(commands: Iterable[Command] | CommandTree) -> dict[str, Any]:
    """
    Describe every command of a forest as plain, JSON-serialisable data.

    Returns:
        dict[str, Any]: Command name to a mapping with `name`, `aliases`,
        `description`, `long_description`, `hidden`, `options`, `meta_info`
        and `subcommands` (nested the same way, or None).
    """
    tree = build_tree(commands)
    return _describe(tree.commands)


def _describe(commands: tuple[Command, ...]) -> dict[str, Any]:
    return {
        command.name: {
            "name": command.name,
            "aliases": list(command.aliases),
            "description": command.description,
            "long_description": command.long_description,
            "hidden": command.hidden,
            "options": {
                key: option.model_dump(mode="json")
                for key, option in command.options.items()
            },
            "meta_info": command.meta_info,
            "subcommands": _describe(command.subcommands) if command.subcommands else None,
        }
        for command in commands
    }
