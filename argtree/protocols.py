# Argtree CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines structural protocols for pluggable Argtree collaborators.

Protocols:
- EventHandler: Async callable that presents help and version events. `Argtree`
  routes every non-invocation outcome through one, so output can be replaced
  without subclassing the runner.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from argtree.event_handler import Event


@runtime_checkable
class EventHandler(Protocol):
    async def __call__(self, event: Event) -> Any: ...
