# Argtree CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the `HookManager` and `HookType` used by `Argtree` to run callbacks
around a command's handler.

Hooks receive the resolved `Command`. They run strictly in registration order,
one at a time, and may be plain functions or coroutines:

    hooks = HookManager()
    hooks.register(HookType.BEFORE, lambda command: print("->", command.name))
    hooks.register("after", notify_done)

A hook that raises aborts the invocation; the error is logged and re-raised.
"""
from __future__ import annotations

import inspect
from enum import Enum
from typing import TYPE_CHECKING, Awaitable, Callable, Union

from argtree.logger import logger

if TYPE_CHECKING:
    from argtree.command import Command

Hook = Union[Callable[["Command"], None], Callable[["Command"], Awaitable[None]]]


class HookType(Enum):
    """
    Lifecycle points around a handler.

    Members:
        BEFORE: Run after options are parsed, before the transform and handler.
        AFTER: Run once the handler has returned.
    """

    BEFORE = "before"
    AFTER = "after"

    @classmethod
    def choices(cls) -> list[HookType]:
        """Return a list of all hook type choices."""
        return list(cls)

    @classmethod
    def _missing_(cls, value: object) -> HookType:
        if not isinstance(value, str):
            raise ValueError(f"Invalid {cls.__name__}: {value!r}")
        normalized = value.strip().lower()
        for member in cls:
            if member.value == normalized:
                return member
        valid = ", ".join(member.value for member in cls)
        raise ValueError(f"Invalid {cls.__name__}: '{value}'. Must be one of: {valid}")

    def __str__(self) -> str:
        return self.value


class HookManager:
    """
    Registry of before/after hooks.

    Methods:
        register(hook_type, hook): Register a callable for a given HookType.
        clear(hook_type): Remove hooks for one or all lifecycle points.
        trigger(hook_type, command): Run all hooks of a given type in order.
    """

    def __init__(self) -> None:
        self._hooks: dict[HookType, list[Hook]] = {
            hook_type: [] for hook_type in HookType
        }

    def register(self, hook_type: HookType | str, hook: Hook):
        """
        Register a new hook for a given lifecycle point.

        Raises:
            ValueError: If the hook type is invalid.
            TypeError: If the hook is not callable.
        """
        hook_type = HookType(hook_type)
        if not callable(hook):
            raise TypeError(f"Hook {hook!r} is not callable")
        self._hooks[hook_type].append(hook)

    def clear(self, hook_type: HookType | None = None):
        if hook_type:
            self._hooks[hook_type] = []
        else:
            for ht in self._hooks:
                self._hooks[ht] = []

    def hooks(self, hook_type: HookType) -> list[Hook]:
        return list(self._hooks[hook_type])

    async def trigger(self, hook_type: HookType, command: Command):
        """
        Invoke all hooks registered for `hook_type`, awaiting each before the next.

        Raises:
            Exception: Whatever a hook raises, after logging it.
        """
        if hook_type not in self._hooks:
            raise ValueError(f"Unsupported hook type: {hook_type}")
        for hook in self._hooks[hook_type]:
            try:
                result = hook(command)
                if inspect.isawaitable(result):
                    await result
            except Exception as hook_error:
                logger.warning(
                    "[Hook:%s] raised an exception during '%s' for '%s': %s",
                    getattr(hook, "__name__", repr(hook)),
                    hook_type,
                    command.name,
                    hook_error,
                )
                raise

    def __str__(self) -> str:
        """Return a formatted string of registered hooks grouped by hook type."""

        def format_hook_list(hooks: list[Hook]) -> str:
            return (
                ", ".join(getattr(h, "__name__", repr(h)) for h in hooks) if hooks else "-"
            )

        lines = ["<HookManager>"]
        for hook_type in HookType:
            hook_list = self._hooks.get(hook_type, [])
            lines.append(f"  {hook_type.value}: {format_hook_list(hook_list)}")
        return "\n".join(lines)
