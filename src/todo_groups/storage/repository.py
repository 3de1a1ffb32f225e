# src/todo_groups/storage/repository.py

"""
Persistence adapter: the whole group collection lives under one key as a
JSON array of plain records. Reads never fail (they degrade to an empty
collection); writes report success as a bool and never raise.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable

from ..core.models import Group
from ..core.ports import KeyValueStorage

logger = logging.getLogger(__name__)

DEFAULT_GROUPS_KEY = "@todo_groups_v1"


def encode_groups(groups: Iterable[Group]) -> str:
    return json.dumps([g.to_record() for g in groups], ensure_ascii=False)


def decode_groups(raw: str) -> tuple[Group, ...]:
    """
    Parse a stored collection. Raises ValueError when the text is not JSON or
    the top-level value is not an array. Entries that are not usable group
    records (and duplicate ids) are skipped.
    """
    data = json.loads(raw)
    if not isinstance(data, list):
        raise ValueError(f"expected a JSON array, got {type(data).__name__}")

    out: list[Group] = []
    seen: set[str] = set()
    for rec in data:
        group = Group.from_record(rec)
        if group is None or group.id in seen:
            continue
        seen.add(group.id)
        out.append(group)
    return tuple(out)


class GroupRepository:
    def __init__(self, storage: KeyValueStorage, key: str = DEFAULT_GROUPS_KEY) -> None:
        self._storage = storage
        self.key = key

    async def load(self) -> tuple[Group, ...]:
        try:
            raw = await self._storage.get_item(self.key)
        except Exception:
            logger.warning("Load groups failed key=%s", self.key, exc_info=True)
            return ()

        if not raw:
            return ()

        try:
            groups = decode_groups(raw)
        except ValueError as e:
            logger.warning("Ignoring malformed groups data key=%s: %s", self.key, e)
            return ()

        logger.debug("Loaded %d groups key=%s", len(groups), self.key)
        return groups

    async def save(self, groups: Iterable[Group]) -> bool:
        try:
            payload = encode_groups(groups)
            await self._storage.set_item(self.key, payload)
        except Exception:
            logger.warning("Save groups failed key=%s", self.key, exc_info=True)
            return False
        return True
