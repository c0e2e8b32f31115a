# Argtree CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""debug.py"""
from argtree.command import Command
from argtree.hook_manager import HookManager, HookType
from argtree.logger import logger


def log_before(command: Command):
    """Log the start of a handler run."""
    logger.info("[%s] Starting -> %s", command.name, command.handler)


def log_after(command: Command):
    """Log the completion of a handler run."""
    logger.debug("[%s] Finished", command.name)


def register_debug_hooks(hooks: HookManager):
    hooks.register(HookType.BEFORE, log_before)
    hooks.register(HookType.AFTER, log_after)
