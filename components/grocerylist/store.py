from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Dict, Mapping

from .locks import ReadWriteLock

log = logging.getLogger("grocerylist.store")


class GroceryStore:
    """Port interface for the shared name -> quantity collection.

    Every operation is total: put overwrites or inserts, remove deletes or
    does nothing.
    """

    def put(self, name: str, quantity: int) -> None:
        raise NotImplementedError

    def remove(self, name: str) -> None:
        raise NotImplementedError

    def snapshot(self) -> Mapping[str, int]:
        """Return an immutable point-in-time copy of the whole collection."""
        raise NotImplementedError


class InMemoryGroceryStore(GroceryStore):
    """Process-local store guarded by a reader/writer lock.

    One instance is created per application and shared by reference with every
    request handler. Contents are lost when the process exits.
    """

    def __init__(self) -> None:
        self._items: Dict[str, int] = {}
        self._lock = ReadWriteLock()

    def put(self, name: str, quantity: int) -> None:
        with self._lock.write_locked():
            self._items[name] = quantity
        log.debug("store.put name=%s quantity=%d", name, quantity)

    def remove(self, name: str) -> None:
        with self._lock.write_locked():
            existed = self._items.pop(name, None) is not None
        log.debug("store.remove name=%s existed=%s", name, existed)

    def snapshot(self) -> Mapping[str, int]:
        with self._lock.read_locked():
            copy = dict(self._items)
        return MappingProxyType(copy)

    def __len__(self) -> int:
        with self._lock.read_locked():
            return len(self._items)

    def __contains__(self, name: object) -> bool:
        with self._lock.read_locked():
            return name in self._items
