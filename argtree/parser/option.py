# Argtree CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the option variants a `Command` declares and the chainable builders that
produce them.

Every option is one of four frozen pydantic models, discriminated by `kind`:

- `StringOption`: `--name value`, optionally restricted to `choices`.
- `NumberOption`: `--count 3`, optionally integer-only and bounded.
- `BooleanOption`: `--flag`, `--flag=false`, `--flag 0`.
- `PositionalOption`: a bare value taken by position, optionally restricted.

Builders never mutate. Each modifier returns a new instance, so a partially
configured option can be shared and specialised safely:

    base = string().alias("e")
    env = base.enum("prod", "dev").required()
    region = base.default("eu-west-1")

Option names are given bare (`"env"`) or already prefixed (`"--env"`). The
canonical `-x` / `--name` form is generated when the option is attached to a
command.
"""
from typing import Annotated, Any, Literal, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Field

from argtree.exceptions import StructuralDefinitionError

OptionT = TypeVar("OptionT", bound="BaseOption")
NamedOptionT = TypeVar("NamedOptionT", bound="NamedOption")


class BaseOption(BaseModel):
    """Fields and modifiers shared by every option kind."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: str
    name: str | None = None
    description: str = ""
    is_required: bool = False
    default_value: Any = None
    is_hidden: bool = False

    def _evolve(self: OptionT, **update: Any) -> OptionT:
        option = self.model_copy(update=update)
        option.check()
        return option

    def check(self) -> None:
        """Raise `StructuralDefinitionError` if the option is internally inconsistent."""

    def desc(self: OptionT, description: str) -> OptionT:
        return self._evolve(description=description)

    def required(self: OptionT) -> OptionT:
        return self._evolve(is_required=True)

    def default(self: OptionT, value: Any) -> OptionT:
        return self._evolve(default_value=value)

    def hide(self: OptionT) -> OptionT:
        return self._evolve(is_hidden=True)

    @property
    def display_name(self) -> str:
        return self.name or ""


class NamedOption(BaseOption):
    """An option addressed by a flag, with optional aliases."""

    aliases: tuple[str, ...] = ()

    def alias(self: NamedOptionT, *aliases: str) -> NamedOptionT:
        return self._evolve(aliases=(*self.aliases, *aliases))

    @property
    def all_names(self) -> tuple[str, ...]:
        return (self.display_name, *self.aliases)


def _check_choices(option: "StringOption | PositionalOption") -> None:
    if option.choices is None:
        return
    if not option.choices:
        raise StructuralDefinitionError(
            f"Can't define option '{option.display_name}' - enum needs at least one value!"
        )
    if option.default_value is not None and option.default_value not in option.choices:
        raise StructuralDefinitionError(
            f"Can't define option '{option.display_name}' - default value "
            f"'{option.default_value}' is not one of: {', '.join(option.choices)}"
        )


class StringOption(NamedOption):
    kind: Literal["string"] = "string"
    choices: tuple[str, ...] | None = None

    def enum(self, *values: str) -> "StringOption":
        return self._evolve(choices=tuple(values))

    def check(self) -> None:
        if self.default_value is not None and not isinstance(self.default_value, str):
            raise StructuralDefinitionError(
                f"Can't define option '{self.display_name}' - default value must be a string!"
            )
        _check_choices(self)


class NumberOption(NamedOption):
    kind: Literal["number"] = "number"
    is_int: bool = False
    min_value: int | float | None = None
    max_value: int | float | None = None

    def int(self) -> "NumberOption":
        return self._evolve(is_int=True)

    def min(self, value: float) -> "NumberOption":
        return self._evolve(min_value=value)

    def max(self, value: float) -> "NumberOption":
        return self._evolve(max_value=value)

    def check(self) -> None:
        name = self.display_name
        for label, bound in (("minimal", self.min_value), ("maximal", self.max_value)):
            if bound is not None and (
                isinstance(bound, bool) or not isinstance(bound, (int, float))
            ):
                raise StructuralDefinitionError(
                    f"Can't define option '{name}' - {label} value must be a number!"
                )
        if (
            self.min_value is not None
            and self.max_value is not None
            and self.min_value > self.max_value
        ):
            raise StructuralDefinitionError(
                f"Can't define option '{name}' - minimal value "
                f"{self.min_value} is greater than maximal value {self.max_value}!"
            )
        value = self.default_value
        if value is None:
            return
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise StructuralDefinitionError(
                f"Can't define option '{name}' - default value must be a number!"
            )
        if self.is_int and not float(value).is_integer():
            raise StructuralDefinitionError(
                f"Can't define option '{name}' - default value must be an integer!"
            )
        if self.min_value is not None and value < self.min_value:
            raise StructuralDefinitionError(
                f"Can't define option '{name}' - default value is below {self.min_value}!"
            )
        if self.max_value is not None and value > self.max_value:
            raise StructuralDefinitionError(
                f"Can't define option '{name}' - default value is above {self.max_value}!"
            )


class BooleanOption(NamedOption):
    kind: Literal["boolean"] = "boolean"

    def check(self) -> None:
        if self.default_value is not None and not isinstance(self.default_value, bool):
            raise StructuralDefinitionError(
                f"Can't define option '{self.display_name}' - default value must be a boolean!"
            )


class PositionalOption(BaseOption):
    kind: Literal["positional"] = "positional"
    choices: tuple[str, ...] | None = None

    def enum(self, *values: str) -> "PositionalOption":
        return self._evolve(choices=tuple(values))

    def check(self) -> None:
        if self.default_value is not None and not isinstance(self.default_value, str):
            raise StructuralDefinitionError(
                f"Can't define positional '{self.display_name}' - default value must be a string!"
            )
        _check_choices(self)


Option = Annotated[
    Union[StringOption, NumberOption, BooleanOption, PositionalOption],
    Field(discriminator="kind"),
]


def string(name: str | None = None) -> StringOption:
    """Declare a string option. The name defaults to the option's key."""
    return StringOption(name=name)


def number(name: str | None = None) -> NumberOption:
    """Declare a numeric option. The name defaults to the option's key."""
    return NumberOption(name=name)


def boolean(name: str | None = None) -> BooleanOption:
    """Declare a boolean flag. The name defaults to the option's key."""
    return BooleanOption(name=name)


def positional(name: str | None = None) -> PositionalOption:
    """Declare a positional value. `name` is only used for display."""
    return PositionalOption(name=name)
