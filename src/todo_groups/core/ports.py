# src/todo_groups/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

Screens depend on Protocols instead of concrete implementations.
This keeps storage backends swappable and makes testing easier.
"""

from collections.abc import Callable
from typing import Protocol

from .models import Group


class KeyValueStorage(Protocol):
    """
    String-keyed blob storage (the durability layer).

    get_item returns None for a missing key. set_item overwrites and raises
    on failure; callers decide whether that is fatal.
    """

    async def get_item(self, key: str) -> str | None: ...
    async def set_item(self, key: str, value: str) -> None: ...


Listener = Callable[[tuple[Group, ...]], None]
# Called with the new collection after every effective mutation.


class Screen(Protocol):
    async def mount(self) -> None: ...
    def unmount(self) -> None: ...
