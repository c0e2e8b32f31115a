# Argtree CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""config.py
Configuration loader for Argtree command trees."""
from __future__ import annotations

import importlib
from pathlib import Path
from typing import Any, Callable

import toml
import yaml
from pydantic import BaseModel, ConfigDict, Field

from argtree.argtree import Argtree
from argtree.command import Command, command
from argtree.exceptions import ConfigError
from argtree.logger import logger


def import_callable(dotted_path: str) -> Callable[..., Any]:
    """Dynamically imports a callable from a dotted path like 'my.module.func'."""
    module_path, _, attr = dotted_path.rpartition(".")
    if not module_path:
        raise ConfigError(f"Invalid import path: '{dotted_path}'")
    try:
        module = importlib.import_module(module_path)
    except ModuleNotFoundError as error:
        logger.error("Failed to import module '%s': %s", module_path, error)
        raise ConfigError(
            f"Could not import '{dotted_path}': {error}. Ensure the module is "
            "installed and discoverable via PYTHONPATH."
        ) from error
    try:
        target = getattr(module, attr)
    except AttributeError as error:
        logger.error(
            "Module '%s' does not have attribute '%s': %s", module_path, attr, error
        )
        raise ConfigError(
            f"Module '{module_path}' has no attribute '{attr}'"
        ) from error
    if not callable(target):
        raise ConfigError(f"'{dotted_path}' is not callable")
    return target


class RawCommand(BaseModel):
    """Raw command model for Argtree configuration."""

    name: str | None = None
    aliases: list[str] = Field(default_factory=list)
    description: str = ""
    long_description: str = ""
    hidden: bool = False
    meta_info: str | None = None
    help: str | None = None

    handler: str | None = None
    transform: str | None = None

    options: dict[str, dict[str, Any]] = Field(default_factory=dict)
    subcommands: list[RawCommand] = Field(default_factory=list)


def _build_command(raw_command: RawCommand) -> Command:
    return command(
        raw_command.name,
        aliases=raw_command.aliases,
        description=raw_command.description,
        long_description=raw_command.long_description,
        options=raw_command.options,
        subcommands=[_build_command(sub) for sub in raw_command.subcommands],
        handler=import_callable(raw_command.handler) if raw_command.handler else None,
        transform=(
            import_callable(raw_command.transform) if raw_command.transform else None
        ),
        help=raw_command.help,
        hidden=raw_command.hidden,
        meta_info=raw_command.meta_info,
    )


def convert_commands(raw_commands: list[dict[str, Any]]) -> list[Command]:
    return [_build_command(RawCommand(**entry)) for entry in raw_commands]


def commands_from_info(info: dict[str, Any]) -> list[Command]:
    """
    Rebuild handler-less commands from the output of `commands_info()`.

    Every structural check runs again, so a description taken from a valid tree
    always loads.
    """

    def _from_entry(entry: dict[str, Any]) -> dict[str, Any]:
        return {
            "name": entry["name"],
            "aliases": entry.get("aliases") or [],
            "description": entry.get("description") or "",
            "long_description": entry.get("long_description") or "",
            "hidden": entry.get("hidden", False),
            "meta_info": entry.get("meta_info"),
            "options": entry.get("options") or {},
            "subcommands": [
                _from_entry(sub) for sub in (entry.get("subcommands") or {}).values()
            ],
        }

    return convert_commands([_from_entry(entry) for entry in info.values()])


class ArgtreeConfig(BaseModel):
    """Argtree configuration model."""

    program_name: str | None = None
    version: str | None = None
    help: str | None = None
    omit_undefined: bool = False
    commands: list[Command] = []

    model_config = ConfigDict(arbitrary_types_allowed=True)

    def to_argtree(self) -> Argtree:
        return Argtree(
            self.commands,
            program_name=self.program_name,
            version=self.version,
            help=self.help,
            omit_undefined=self.omit_undefined,
        )


def loader(file_path: Path | str) -> Argtree:
    """
    Load an Argtree command tree from a YAML or TOML file.

    The file should contain a dictionary with a list of commands. Each command
    is a dictionary with at least a `name` (or `aliases`) and optionally:
    - handler / transform: dotted import paths to callables
    - options: option key to option fields (`kind` is required)
    - subcommands: nested commands of the same shape

    Args:
        file_path (Path | str): Path to the config file (YAML or TOML).

    Returns:
        Argtree: A runner for the loaded tree.

    Raises:
        TypeError: If `file_path` is not a string or Path.
        FileNotFoundError: If the file does not exist.
        ValueError: If the file format is unsupported or its content is not a mapping.
        ConfigError: If a dotted path cannot be imported.
        StructuralDefinitionError: If the described tree is invalid.
    """
    if isinstance(file_path, (str, Path)):
        path = Path(file_path)
    else:
        raise TypeError("file_path must be a string or Path object.")

    if not path.is_file():
        raise FileNotFoundError(f"No such config file: {file_path}")

    suffix = path.suffix
    with path.open("r", encoding="UTF-8") as config_file:
        if suffix in (".yaml", ".yml"):
            raw_config = yaml.safe_load(config_file)
        elif suffix == ".toml":
            raw_config = toml.load(config_file)
        else:
            raise ValueError(f"Unsupported config format: {suffix}")

    if not isinstance(raw_config, dict):
        raise ValueError(
            "Configuration file must contain a dictionary with a list of commands.\n"
            "Example:\n"
            "program_name: mycli\n"
            "commands:\n"
            "  - name: greet\n"
            "    description: 'Say hello'\n"
            "    handler: 'my_module.greet'"
        )

    commands = convert_commands(raw_config.get("commands", []))
    version = raw_config.get("version")
    return ArgtreeConfig(
        program_name=raw_config.get("program_name"),
        version=str(version) if version is not None else None,
        help=raw_config.get("help"),
        omit_undefined=raw_config.get("omit_undefined", False),
        commands=commands,
    ).to_argtree()
