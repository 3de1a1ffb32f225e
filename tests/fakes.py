# tests/fakes.py

from __future__ import annotations

import asyncio


class FailingStorage:
    """KeyValueStorage whose reads and/or writes raise."""

    def __init__(self, *, fail_get: bool = False, fail_set: bool = True) -> None:
        self.fail_get = fail_get
        self.fail_set = fail_set
        self.data: dict[str, str] = {}
        self.set_calls = 0

    async def get_item(self, key: str) -> str | None:
        if self.fail_get:
            raise OSError("disk unavailable")
        return self.data.get(key)

    async def set_item(self, key: str, value: str) -> None:
        self.set_calls += 1
        if self.fail_set:
            raise OSError("disk full")
        self.data[key] = value


class GatedStorage:
    """
    In-memory KeyValueStorage whose reads block until `release()`.

    Used to simulate a screen being unmounted while its load is in flight.
    """

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self.data: dict[str, str] = dict(initial or {})
        self._gate = asyncio.Event()

    def release(self) -> None:
        self._gate.set()

    async def get_item(self, key: str) -> str | None:
        await self._gate.wait()
        return self.data.get(key)

    async def set_item(self, key: str, value: str) -> None:
        self.data[key] = value


class RecordingStorage:
    """In-memory KeyValueStorage that records every write in order."""

    def __init__(self) -> None:
        self.data: dict[str, str] = {}
        self.writes: list[str] = []

    async def get_item(self, key: str) -> str | None:
        return self.data.get(key)

    async def set_item(self, key: str, value: str) -> None:
        # Yield so concurrent writes can interleave if they are not serialized.
        await asyncio.sleep(0)
        self.writes.append(value)
        self.data[key] = value
