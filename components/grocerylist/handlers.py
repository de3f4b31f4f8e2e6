"""
Request handlers for the grocery list.

Each handler takes an already-validated payload plus the shared store and
returns an outcome. None of them can fail.
"""
from __future__ import annotations

import logging

from .contracts import GroceryList, Id, Item, Outcome
from .store import GroceryStore

log = logging.getLogger("grocerylist.handlers")

ADDED_MESSAGE = "Added items to the grocery list"
REMOVED_MESSAGE = "Removed item from grocery"


def add_item(item: Item, store: GroceryStore) -> Outcome:
    store.put(item.name, item.quantity)
    log.info("item_added name=%s quantity=%d", item.name, item.quantity)
    return Outcome(kind="created", message=ADDED_MESSAGE)


def update_item(item: Item, store: GroceryStore) -> Outcome:
    # Upsert: same path as add, no existence check.
    store.put(item.name, item.quantity)
    log.info("item_updated name=%s quantity=%d", item.name, item.quantity)
    return Outcome(kind="created", message=ADDED_MESSAGE)


def get_items(store: GroceryStore) -> GroceryList:
    return dict(store.snapshot())


def delete_item(target: Id, store: GroceryStore) -> Outcome:
    store.remove(target.name)
    log.info("item_removed name=%s", target.name)
    return Outcome(kind="ok", message=REMOVED_MESSAGE)
