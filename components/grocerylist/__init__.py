"""
Grocery list component: a shared in-memory name -> quantity store behind a
small FastAPI surface.
"""
from .contracts import Item, Id, Outcome, GroceryList
from .store import GroceryStore, InMemoryGroceryStore
from .handlers import add_item, update_item, get_items, delete_item
from .app import create_app

__all__ = [
    "Item",
    "Id",
    "Outcome",
    "GroceryList",
    "GroceryStore",
    "InMemoryGroceryStore",
    "add_item",
    "update_item",
    "get_items",
    "delete_item",
    "create_app",
]
