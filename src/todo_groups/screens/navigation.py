# src/todo_groups/screens/navigation.py

from __future__ import annotations

import logging
from collections.abc import Mapping

from ..core.ports import Screen

logger = logging.getLogger(__name__)


class TabNavigator:
    """Tab bar: one visible screen at a time, focus signal on tab change."""

    def __init__(self, tabs: Mapping[str, Screen]) -> None:
        if not tabs:
            raise ValueError("at least one tab is required")
        self._tabs: dict[str, Screen] = dict(tabs)
        self._current = next(iter(self._tabs))

    @property
    def current(self) -> str:
        return self._current

    @property
    def names(self) -> list[str]:
        return list(self._tabs)

    def screen(self, name: str | None = None) -> Screen:
        return self._tabs[name or self._current]

    async def start(self) -> None:
        for name, screen in self._tabs.items():
            await screen.mount()
            logger.debug("Mounted tab %s", name)

    async def switch(self, name: str) -> bool:
        """
        Show tab `name`. Returns True if the visible tab changed.
        The newly visible screen gets on_focus() when it has one.
        """
        if name not in self._tabs:
            raise KeyError(name)
        if name == self._current:
            return False

        self._current = name
        screen = self._tabs[name]
        on_focus = getattr(screen, "on_focus", None)
        if on_focus is not None:
            await on_focus()
        logger.debug("Switched to tab %s", name)
        return True

    async def stop(self) -> None:
        """Best-effort: flush pending writes, then unmount every screen."""
        for name, screen in self._tabs.items():
            flush = getattr(screen, "flush", None)
            if flush is None:
                continue
            try:
                await flush()
            except Exception:
                logger.exception("Flush failed for tab %s", name)

        for screen in self._tabs.values():
            screen.unmount()
