# Argtree CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""command.py

Defines the Command model for Argtree.

A Command is one node of the command tree: a name with optional aliases, the
options it accepts, optional subcommands, and the callables that run once its
options are parsed. Commands are validated when they are constructed and are
frozen afterwards:

- names and aliases must be non-empty, must not start with `-`, and must not
  be `help`, `true`, `false`, `0` or `1` (in any case),
- option names are normalised to their canonical `-x` / `--name` form and
  checked for `=`, reserved flags and collisions,
- a command with subcommands may not declare positional options.

Sibling collisions and parent paths are the concern of `argtree.tree`.
"""
from __future__ import annotations

from typing import Any, Callable, Iterable

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    TypeAdapter,
    ValidationError,
    model_validator,
)

from argtree.exceptions import StructuralDefinitionError
from argtree.parser.option import NamedOption, Option, PositionalOption
from argtree.parser.utils import (
    FLAG_PREFIX,
    HELP_COMMAND,
    RESERVED_COMMAND_NAMES,
    RESERVED_FLAGS,
    generate_prefix,
)

_option_adapter: TypeAdapter = TypeAdapter(Option)


def _check_command_names(name: str, aliases: Iterable[str]) -> None:
    all_names = [name, *aliases]
    for alias in aliases:
        if alias.startswith(FLAG_PREFIX):
            raise StructuralDefinitionError(
                f"Can't define command '{name}' - command aliases can't start with '-'!"
            )
    for index, candidate in enumerate(all_names):
        if not candidate:
            raise StructuralDefinitionError(
                f"Can't define command '{name}' - command names and aliases can't be empty!"
            )
        if candidate.lower() == HELP_COMMAND:
            raise StructuralDefinitionError(
                f"Can't define command '{name}' - 'help' is a reserved name. "
                "If you want to redefine help message - do so in Argtree's config."
            )
        if candidate.lower() in RESERVED_COMMAND_NAMES:
            raise StructuralDefinitionError(
                f"Can't define command '{name}' - '{candidate}' is reserved "
                "for boolean values!"
            )
        if all_names.index(candidate) != index:
            raise StructuralDefinitionError(
                f"Can't define command '{name}' - duplicate alias '{candidate}'!"
            )


def _normalize_option(key: str, option: Any) -> Any:
    if isinstance(option, dict):
        try:
            option = _option_adapter.validate_python(option)
        except ValidationError as error:
            raise StructuralDefinitionError(
                f"Can't define option '{key}' - {error}"
            ) from error
    if not isinstance(option, (NamedOption, PositionalOption)):
        raise StructuralDefinitionError(
            f"Can't define option '{key}' - expected an option built with "
            f"string(), number(), boolean() or positional(), got {type(option).__name__}"
        )
    option.check()
    name = option.name or key
    if isinstance(option, PositionalOption):
        return option.model_copy(update={"name": name})

    for candidate in (name, *option.aliases):
        if "=" in candidate:
            raise StructuralDefinitionError(
                f"Can't define option {name} - option names and aliases cannot contain '='!"
            )
    return option.model_copy(
        update={
            "name": generate_prefix(name),
            "aliases": tuple(generate_prefix(alias) for alias in option.aliases),
        }
    )


def validate_options(options: dict[str, Any]) -> dict[str, Any]:
    """
    Normalise and validate the option set of a single command.

    Args:
        options (dict[str, Any]): Declaration key to option (or option dict).

    Returns:
        dict[str, Any]: Same keys, options carrying canonical names.

    Raises:
        StructuralDefinitionError: On `=` in a name, reserved flags, collisions
            between options or duplicate aliases within one option.
    """
    processed = {key: _normalize_option(key, option) for key, option in options.items()}

    owners: dict[str, str] = {}
    for option in processed.values():
        if isinstance(option, PositionalOption):
            continue
        for candidate in option.all_names:
            if candidate in RESERVED_FLAGS:
                raise StructuralDefinitionError(
                    f"Can't define option {option.name} - name '{candidate}' is reserved!"
                )
        if option.name in owners:
            raise StructuralDefinitionError(
                f"Can't define option '{option.name}': name is already in use by "
                f"option '{owners[option.name]}'!"
            )
        for alias in option.aliases:
            if alias in owners:
                raise StructuralDefinitionError(
                    f"Can't define option '{option.name}': alias '{alias}' is already "
                    f"in use by option '{owners[alias]}'!"
                )
        names = option.all_names
        for index, candidate in enumerate(names):
            if names.index(candidate) != index:
                raise StructuralDefinitionError(
                    f"Can't define option '{option.name}': duplicate aliases '{candidate}'!"
                )
        for candidate in names:
            owners[candidate] = option.name
    return processed


class Command(BaseModel):
    """
    A node of the command tree.

    Attributes:
        name (str): Primary name used to invoke the command.
        aliases (tuple[str, ...]): Alternate names.
        description (str): One-line description shown in help listings.
        long_description (str): Extended text shown in the command's own help.
        options (dict[str, Option]): Declaration key to option, in declaration order.
        subcommands (tuple[Command, ...]): Child commands.
        handler (Callable | None): Receives the parsed (and transformed) options.
        transform (Callable | None): Maps the parsed options before the handler.
        help (str | Callable | None): Replaces the generated help for this command.
        hidden (bool): Hide from help listings.
        meta_info (str | None): Free-form data carried through introspection.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    name: str
    aliases: tuple[str, ...] = ()
    description: str = ""
    long_description: str = ""
    options: dict[str, Option] = Field(default_factory=dict)
    subcommands: tuple[Command, ...] = ()
    handler: Callable[..., Any] | None = None
    transform: Callable[..., Any] | None = None
    help: str | Callable[..., Any] | None = None
    hidden: bool = False
    meta_info: str | None = None

    @model_validator(mode="before")
    @classmethod
    def _validate_definition(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        data = dict(data)
        aliases = list(data.get("aliases") or ())
        name = data.get("name")
        if name is None and aliases:
            name = aliases.pop(0)
        if not name:
            raise StructuralDefinitionError("Can't define command without name!")
        if name.startswith(FLAG_PREFIX):
            raise StructuralDefinitionError(
                f"Can't define command '{name}' - command name can't start with '-'!"
            )
        _check_command_names(name, aliases)

        options = dict(data.get("options") or {})
        subcommands = tuple(data.get("subcommands") or ())
        if subcommands and any(
            isinstance(option, PositionalOption)
            or (isinstance(option, dict) and option.get("kind") == "positional")
            for option in options.values()
        ):
            raise StructuralDefinitionError(
                f"Can't define command '{name}' - command can't have subcommands "
                "and positional args at the same time!"
            )
        for subcommand in subcommands:
            if not isinstance(subcommand, (Command, dict)):
                raise StructuralDefinitionError(
                    f"Can't define command '{name}' - subcommands must be commands, "
                    f"got {type(subcommand).__name__}"
                )

        for field_name in ("handler", "transform"):
            value = data.get(field_name)
            if value is not None and not callable(value):
                raise StructuralDefinitionError(
                    f"Can't define command '{name}' - {field_name} must be callable!"
                )
        custom_help = data.get("help")
        if custom_help is not None and not (
            isinstance(custom_help, str) or callable(custom_help)
        ):
            raise StructuralDefinitionError(
                f"Can't define command '{name}' - help must be a string or a callable!"
            )

        data.update(
            name=name,
            aliases=tuple(aliases),
            options=validate_options(options),
            subcommands=subcommands,
        )
        return data

    @property
    def all_names(self) -> tuple[str, ...]:
        return (self.name, *self.aliases)

    @property
    def positionals(self) -> list[tuple[str, PositionalOption]]:
        return [
            (key, option)
            for key, option in self.options.items()
            if isinstance(option, PositionalOption)
        ]

    @property
    def named_options(self) -> list[tuple[str, NamedOption]]:
        return [
            (key, option)
            for key, option in self.options.items()
            if isinstance(option, NamedOption)
        ]

    def matches(self, token: str) -> bool:
        return token in self.all_names

    def __str__(self) -> str:
        return (
            f"Command(name={self.name!r}, aliases={list(self.aliases)}, "
            f"options={len(self.options)}, subcommands={len(self.subcommands)})"
        )


def command(
    name: str | None = None,
    *,
    aliases: Iterable[str] = (),
    description: str = "",
    long_description: str = "",
    options: dict[str, Any] | None = None,
    subcommands: Iterable[Command] | None = None,
    handler: Callable[..., Any] | None = None,
    transform: Callable[..., Any] | None = None,
    help: str | Callable[..., Any] | None = None,
    hidden: bool = False,
    meta_info: str | None = None,
) -> Command:
    """
    Declare a command.

    Example:
        greet = command(
            "greet",
            aliases=["hi"],
            options={"name": positional().required(), "loud": boolean()},
            handler=lambda options: print(options["name"]),
        )

    Raises:
        StructuralDefinitionError: If the declaration breaks a naming or structure rule.
    """
    return Command(
        name=name,
        aliases=tuple(aliases),
        description=description,
        long_description=long_description,
        options=options or {},
        subcommands=tuple(subcommands or ()),
        handler=handler,
        transform=transform,
        help=help,
        hidden=hidden,
        meta_info=meta_info,
    )
