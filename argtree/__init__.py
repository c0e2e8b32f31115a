"""
Argtree CLI Framework

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging

from .argtree import (
    Argtree,
    ErrorResult,
    HandlerResult,
    HelpResult,
    VersionResult,
    simulate,
)
from .command import Command, command
from .config import commands_from_info, loader
from .event_handler import ConsoleEventHandler, NoopEventHandler
from .hook_manager import HookManager, HookType
from .parser import boolean, number, positional, string
from .tree import CommandTree, build_tree, commands_info

logger = logging.getLogger("argtree")


__all__ = [
    "Argtree",
    "Command",
    "CommandTree",
    "ConsoleEventHandler",
    "ErrorResult",
    "HandlerResult",
    "HelpResult",
    "HookManager",
    "HookType",
    "NoopEventHandler",
    "VersionResult",
    "boolean",
    "build_tree",
    "command",
    "commands_from_info",
    "commands_info",
    "loader",
    "number",
    "positional",
    "simulate",
    "string",
]
